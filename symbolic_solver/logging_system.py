"""
Logging System for the Symbolic Solver

Centralized logging with verbosity levels so library use stays quiet while
solver progress can be traced on demand.
"""

import logging
import sys
from typing import Optional, Sequence
from enum import Enum
from datetime import datetime


class LogLevel(Enum):
    """Enumeration of logging levels for the solver"""
    SILENT = 0      # No output
    MINIMAL = 1     # Warnings and failures only
    MODERATE = 2    # Convergence results
    DETAILED = 3    # Per-iteration progress
    VERBOSE = 4     # Everything, including row-reduction details


class SolverLogger:
    """
    Centralized logger for the symbolic solver with level-aware filtering
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file

        self.logger = logging.getLogger('symbolic_solver')
        self.logger.setLevel(logging.DEBUG)
        self.logger.handlers.clear()
        self.logger.propagate = False

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_to_file:
            if log_file_path is None:
                log_file_path = f"symbolic_solver_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def _should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def info(self, message: str, required_level: LogLevel = LogLevel.MODERATE):
        """General information with configurable level"""
        if self._should_log(required_level):
            self.logger.info(message)

    def warning(self, message: str):
        """Warnings - shown from minimal level onwards"""
        if self._should_log(LogLevel.MINIMAL):
            self.logger.warning(message)

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self._should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")

    def iteration(self, index: int, step_norm: float, point: Sequence[float]):
        """Log one Newton iteration"""
        if not self._should_log(LogLevel.DETAILED):
            return
        coords = ", ".join(f"{value:.6g}" for value in point)
        self.logger.info(f"Iter {index:2d}: |step|={step_norm:.3e} point=({coords})")


_global_logger: Optional[SolverLogger] = None


def get_logger() -> SolverLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = SolverLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None:
        _global_logger = SolverLogger(log_level=level)
    else:
        _global_logger.log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> SolverLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = SolverLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path
    )
    return _global_logger


def log_info(message: str, level: LogLevel = LogLevel.MODERATE):
    get_logger().info(message, level)


def log_warning(message: str):
    get_logger().warning(message)


def log_debug(message: str):
    get_logger().debug(message)


def log_iteration(index: int, step_norm: float, point: Sequence[float]):
    get_logger().iteration(index, step_norm, point)
