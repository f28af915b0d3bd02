"""
Logging configuration for Narytree.

Provides centralized structured logging setup with JSON output for machine
consumption and human-readable output for interactive use.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import structlog


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    json_format: bool = True,
) -> None:
    """
    Configure structured logging for Narytree.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to log file. If None, logs only to stderr.
        json_format: If True, use JSON format. If False, use human-readable format.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Clear existing handlers to avoid duplicates
    root_logger.handlers.clear()

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(file_handler)
    else:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(numeric_level)
        stderr_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(stderr_handler)

    processors: list = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance for a specific module.

    The logger always wraps a stdlib logger, so events go through the
    logging module even before setup_logging() is called. Applications that
    never configure logging only see WARNING and above, on stderr.

    Args:
        name: Logger name (typically __name__ of the module).

    Returns:
        Structured logger instance.
    """
    if not name.startswith("narytree"):
        name = f"narytree.{name}"
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


# Convenience functions for common logging patterns

def log_tree_construction(
    logger: structlog.stdlib.BoundLogger,
    leaf_count: int,
    number_of_children: int,
    height: int,
    root_hash: str,
    **kwargs: Any,
) -> None:
    """
    Log a completed tree construction.

    Args:
        logger: Logger instance
        leaf_count: Number of blocks hashed into leaves
        number_of_children: Branching factor used for grouping
        height: Height of the resulting root
        root_hash: Root hash (hex encoded)
        **kwargs: Additional context to log
    """
    log_data: Dict[str, Any] = {
        "event_type": "tree_construction",
        "leaf_count": leaf_count,
        "number_of_children": number_of_children,
        "height": height,
        "root_hash": root_hash,
    }

    log_data.update(kwargs)

    logger.debug("tree_construction", **log_data)


def log_proof_verification(
    logger: structlog.stdlib.BoundLogger,
    index: int,
    proof_length: int,
    success: bool,
    failure_reason: Optional[str] = None,
    **kwargs: Any,
) -> None:
    """
    Log a proof verification.

    Args:
        logger: Logger instance
        index: Leaf index the proof was checked against
        proof_length: Number of sibling hashes in the proof
        success: Whether verification succeeded
        failure_reason: Reason for failure if not successful
        **kwargs: Additional context to log
    """
    log_data: Dict[str, Any] = {
        "event_type": "proof_verification",
        "index": index,
        "proof_length": proof_length,
        "success": success,
    }

    if failure_reason is not None:
        log_data["failure_reason"] = failure_reason

    log_data.update(kwargs)

    if success:
        logger.debug("proof_verification", **log_data)
    else:
        logger.info("proof_verification_failed", **log_data)
