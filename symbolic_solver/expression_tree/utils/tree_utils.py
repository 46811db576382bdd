from typing import List, Dict, Set
from collections import Counter
from ..core.node import Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode


def get_all_nodes(node: Node) -> List[Node]:
  """Get all nodes in the tree, pre-order"""
  nodes = [node]
  if isinstance(node, BinaryOpNode):
    nodes.extend(get_all_nodes(node.left))
    nodes.extend(get_all_nodes(node.right))
  elif isinstance(node, UnaryOpNode):
    nodes.extend(get_all_nodes(node.operand))
  return nodes


def calculate_tree_depth(node: Node) -> int:
  if isinstance(node, BinaryOpNode):
    return 1 + max(calculate_tree_depth(node.left), calculate_tree_depth(node.right))
  elif isinstance(node, UnaryOpNode):
    return 1 + calculate_tree_depth(node.operand)
  return 1


def find_nodes_by_operator(node: Node, operator: str) -> List[Node]:
  return [n for n in get_all_nodes(node)
          if isinstance(n, (BinaryOpNode, UnaryOpNode)) and n.operator == operator]


def get_constants(node: Node) -> List[float]:
  return [n.value for n in get_all_nodes(node) if isinstance(n, ConstantNode)]


def get_variables(node: Node) -> Set[str]:
  return {n.name for n in get_all_nodes(node) if isinstance(n, VariableNode)}


def get_variable_usage_counts(node: Node) -> Dict[str, int]:
  """How many times each variable leaf occurs in the tree"""
  return dict(Counter(n.name for n in get_all_nodes(node) if isinstance(n, VariableNode)))
