# utils/logger.py
# This file is part of PRR-Engine - A B4 Fixed-Point Solver
#
# Logging utility for the fixed-point engine with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for the PRR engine."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class PRRLogger:
    """Centralized logger for the PRR engine with structured solver output."""

    def __init__(self, name: str = "prr_engine", level: LogLevel = LogLevel.INFO):
        """Initialize the PRR logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(PRRFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    @property
    def level(self) -> int:
        return self.logger.level

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for solver events
    def graph_built(self, sentence_count: int, cyclic_count: int):
        """Log successful sentence graph construction."""
        self.debug(
            f"Sentence graph built: {sentence_count} sentences, "
            f"{cyclic_count} on a cycle"
        )

    def solve_start(self, sentence_count: int, max_iterations: int):
        """Log solver initialization."""
        self.debug("=== Starting Fixed-Point Iteration ===")
        self.debug(f"Sentences: {sentence_count}, max_iterations: {max_iterations}")

    def round_completed(self, round_no: int, changes: dict):
        """Log the outcome of one synchronous round."""
        if not changes:
            self.debug(f"  Round {round_no}: no change")
            return
        change_str = ", ".join(
            f"{name}: {old} → {new}" for name, (old, new) in changes.items()
        )
        self.debug(f"  Round {round_no}: {change_str}")

    def solver_stable(self, rounds: int, converged_at: int):
        """Log arrival at a stable assignment."""
        self.debug(
            f"    🟢 Stable after {rounds} round(s), last change in round {converged_at}"
        )

    def solver_non_convergent(self, rounds: int):
        """Log exhaustion of the iteration bound."""
        self.error(f"    💥 No stable assignment after {rounds} round(s)")

    def monotonicity_violation(self, operator: str, detail: str):
        """Log a counterexample to the monotonicity contract."""
        self.warning(f"⚠️  Operator '{operator}' is not monotone: {detail}")

    def hypothesis_limit_exceeded(self, sentence: str, count: int, limit: int):
        """Log a sentence whose ungrounded names are read as BOTH."""
        self.warning(
            f"⚠️  Sentence '{sentence}' has {count} ungrounded references "
            f"(limit {limit}); reading them as Both"
        )

    def final_assignment(self, rows):
        """Log final per-sentence values and intervals."""
        self.info("\n>>> STABLE ASSIGNMENT <<<")
        for name, value, interval in rows:
            self.info(f"  {name:<20} {str(value):<8} [{interval.low:.1f}, {interval.high:.1f}]")

    def validation_result(self, success: bool, message: str = ""):
        """Log validation results."""
        if success:
            self.debug(f"✅ {message}" if message else "✅ Validation successful")
        else:
            self.error(f"❌ {message}" if message else "❌ Validation failed")


class PRRFormatter(logging.Formatter):
    """Custom formatter for PRR logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[PRRLogger] = None


def get_logger(name: str = "prr_engine") -> PRRLogger:
    """Get or create the global PRR logger instance.

    Args:
        name: Logger name (default: "prr_engine")

    Returns:
        PRRLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = PRRLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
