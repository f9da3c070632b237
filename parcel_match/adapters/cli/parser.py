# parcel_match/adapters/cli/parser.py

"""Command-line argument parser configuration"""

# Standard library imports
from argparse import ArgumentParser

# Local imports
from parcel_match.application.processing.matching import POLICIES
from parcel_match.infrastructure.config import get_config


def create_argument_parser() -> ArgumentParser:
    """Create and configure argument parser with all CLI options"""
    # Load default configuration
    config = get_config()
    matching_config = config.matching

    parser = ArgumentParser(
        prog="parcel-match",
        description="Match OCR text from parcel labels against a reference table of recipients",
    )

    # Reference table
    parser.add_argument(
        "--table",
        default=None,
        help="Path to the reference table (.csv or .xlsx); uses the cached table when omitted",
    )

    # Query input
    parser.add_argument(
        "--text",
        action="append",
        default=None,
        help="OCR text of one label (repeatable; reads one label per stdin line when omitted)",
    )
    parser.add_argument(
        "--ocr-confidence",
        type=float,
        default=0.0,
        help="OCR engine confidence (0-100) reported with every result",
    )

    # Matching options
    parser.add_argument(
        "--policy",
        choices=sorted(POLICIES),
        default=None,
        help=f"Matching policy (default: {matching_config.policy})",
    )
    parser.add_argument(
        "--max-results",
        type=int,
        default=None,
        help=f"Maximum results per label (default: {matching_config.max_results})",
    )
    parser.add_argument("--config", default=None, help="Path to configuration JSON file")

    # Output options
    parser.add_argument(
        "--json", action="store_true", help="Print results as JSON instead of a table"
    )

    # Logging options
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Console logging level (default: WARNING, or DEBUG when logging.debug is set)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Path to log file (default: logging.log_file from config, else no file logging)",
    )
    parser.add_argument("--silent", action="store_true", help="Suppress all console logging")

    return parser
