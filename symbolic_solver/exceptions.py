"""
Custom exception classes.

Every failure the engine reports to callers derives from SymbolicSolverError.
"""

from typing import Optional


class SymbolicSolverError(Exception):
    """Base class for all recoverable engine errors."""
    pass


class UnreadableCharacterError(SymbolicSolverError):
    """Input text contains a character that no token can start with."""

    def __init__(self, character: str, position: Optional[int] = None):
        self.character = character
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Character '{character}'{where} does not correspond to an allowed token type")


class IncompleteExpressionError(SymbolicSolverError):
    """Token stream violates the expression grammar."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class UnboundVariableError(SymbolicSolverError, KeyError):
    """A variable has no binding in the supplied environment."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Variable '{self.name}' is not bound"


class SolvingError(SymbolicSolverError):
    """Base class for failures of the equation solvers."""
    pass


class NoPivotError(SolvingError):
    """No usable pivot exists in a column (numerically zero)."""

    def __init__(self, column: int):
        self.column = column
        super().__init__(f"No pivot in column {column} of input matrix")


class NoSolutionError(SolvingError):
    """Linear system is inconsistent."""

    def __init__(self, message: str = "System has no solutions"):
        super().__init__(message)


class DidNotConvergeError(SolvingError):
    """Newton's method exceeded its iteration cap or hit a singular Jacobian."""

    def __init__(self, iterations: int, message: Optional[str] = None):
        self.iterations = iterations
        super().__init__(message or f"Did not converge within {iterations} iterations.")
