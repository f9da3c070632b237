# parcel_match/infrastructure/logging/_setup.py

"""Logging configuration and setup for CLI"""

# Standard library imports
from logging import DEBUG
from logging import FileHandler
from logging import Formatter
from logging import INFO
from logging import StreamHandler
from logging import getLevelNamesMapping
from logging import getLogger
from os import makedirs
from os.path import dirname


def set_up_logging(
    log_file: str | None = None,
    log_level: str = "INFO",
    silent: bool = False,
    disable_file_logging: bool = False,
) -> str | None:
    """Configure logging for the application

    Args:
        log_file: Path to log file, file logging is skipped when None
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        silent: If True, suppress console output
        disable_file_logging: If True, disable file logging

    Returns:
        Path to log file if file logging is enabled, None otherwise
    """
    # Convert log level string to logging constant
    level = getLevelNamesMapping().get(log_level.upper(), INFO)

    # Configure root logger
    root_logger = getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers = []

    console_formatter = Formatter("%(asctime)s - %(levelname)s - %(message)s")
    file_formatter = Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    # Add console handler unless silent
    if not silent:
        console_handler = StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    if disable_file_logging or not log_file:
        return None

    log_dir = dirname(log_file)
    if log_dir:
        makedirs(log_dir, exist_ok=True)

    file_handler = FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(DEBUG)  # Always log debug to file
    file_handler.setFormatter(file_formatter)
    root_logger.addHandler(file_handler)
    # The file gets DEBUG even when the console is quieter
    root_logger.setLevel(DEBUG)

    logger = getLogger(__name__)
    logger.info(f"Logging to file: {log_file}")

    return log_file


def log_match_summary(
    table_name: str,
    table_size: int,
    queries: int,
    matched_queries: int,
    total_results: int,
    policy: str,
    elapsed: float,
) -> None:
    """Log a summary of one CLI run

    Args:
        table_name: Source name of the reference table
        table_size: Number of records in the table
        queries: Number of label texts matched
        matched_queries: Label texts with at least one result
        total_results: Results returned across all label texts
        policy: Matching policy used
        elapsed: Wall clock seconds spent matching
    """
    logger = getLogger(__name__)

    summary_lines = [
        "=" * 60,
        "MATCHING COMPLETE",
        "=" * 60,
        f"Reference table: {table_name} ({table_size:,} records)",
        f"Policy: {policy}",
        f"Label texts: {queries:,}",
    ]
    if queries > 0:
        matched_pct = matched_queries / queries * 100
        summary_lines.extend(
            [
                f"  With matches: {matched_queries:,} ({matched_pct:.1f}%)",
                f"  Results returned: {total_results:,}",
            ]
        )
    summary_lines.append(f"Matching time: {elapsed:.3f}s")
    summary_lines.append("=" * 60)

    logger.info("\n".join(summary_lines))
