import numpy as np
from enum import IntEnum
from typing import Dict, Tuple

class NodeType(IntEnum):
  VARIABLE = 0
  CONSTANT = 1
  BINARY_OP = 2
  UNARY_OP = 3

class OpType(IntEnum):
  # Binary ops
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3
  POW = 4
  # Unary ops
  ABS = 5
  SQRT = 6
  EXP = 7
  LOG = 8
  SIN = 9
  COS = 10
  TAN = 11

# Mapping dictionaries
BINARY_OP_MAP: Dict[str, OpType] = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV, '^': OpType.POW}
UNARY_OP_MAP: Dict[str, OpType] = {
    'abs': OpType.ABS, 'sqrt': OpType.SQRT, 'exp': OpType.EXP,
    'log': OpType.LOG, 'sin': OpType.SIN, 'cos': OpType.COS, 'tan': OpType.TAN
}

# symbol -> (precedence, right associative)
OPERATOR_PRECEDENCE: Dict[str, Tuple[int, bool]] = {
    '+': (1, False),
    '-': (1, False),
    '*': (2, False),
    '/': (2, False),
    '^': (3, True),
}

# Implicit multiplication binds like '*' but its right operand is parsed at '^' level
IMPLICIT_MUL_PRECEDENCE = 2
IMPLICIT_MUL_RHS_PRECEDENCE = 3

FUNCTION_NAMES = frozenset(UNARY_OP_MAP)


def evaluate_binary_op(left_val: float, right_val: float, operator: str) -> float:
  """IEEE-754 double arithmetic; division by zero and bad powers give inf/nan."""
  op = BINARY_OP_MAP.get(operator)
  if op is None:
    raise ValueError(f"Unknown binary operator: {operator}")
  left = np.float64(left_val)
  right = np.float64(right_val)
  with np.errstate(all='ignore'):
    if op == OpType.ADD:
      result = left + right
    elif op == OpType.SUB:
      result = left - right
    elif op == OpType.MUL:
      result = left * right
    elif op == OpType.DIV:
      result = np.divide(left, right)
    else:
      result = np.power(left, right)
  return float(result)


def evaluate_unary_op(operand_val: float, operator: str) -> float:
  op = UNARY_OP_MAP.get(operator)
  if op is None:
    raise ValueError(f"Unknown function: {operator}")
  value = np.float64(operand_val)
  with np.errstate(all='ignore'):
    if op == OpType.ABS:
      result = np.abs(value)
    elif op == OpType.SQRT:
      result = np.sqrt(value)
    elif op == OpType.EXP:
      result = np.exp(value)
    elif op == OpType.LOG:
      result = np.log(value)
    elif op == OpType.SIN:
      result = np.sin(value)
    elif op == OpType.COS:
      result = np.cos(value)
    else:
      result = np.tan(value)
  return float(result)
