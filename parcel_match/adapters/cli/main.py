# parcel_match/adapters/cli/main.py

"""
Parcel label matching - CLI Main Module

Command-line interface for matching OCR text read from parcel labels
against a reference table of recipients.
"""

# Standard library imports
from logging import getLogger
from time import time
import sys

# Third party imports
from rich.console import Console
from rich.markup import escape
from rich.table import Table

# Local imports
from parcel_match.adapters.cli.parser import create_argument_parser
from parcel_match.application.processing.identifier_extractor import display_identifier
from parcel_match.application.processing.matching_engine import RecordMatcher
from parcel_match.core.domain.errors import ParcelMatchError
from parcel_match.core.domain.errors import ReferenceTableError
from parcel_match.core.domain.match_result import MatchResult
from parcel_match.infrastructure.config import get_config
from parcel_match.infrastructure.logging import log_match_summary
from parcel_match.infrastructure.logging import setup_logging
from parcel_match.infrastructure.persistence import ReferenceTableLoader
from parcel_match.infrastructure.persistence import ReferenceTableStore

logger = getLogger(__name__)

EXIT_OK = 0
EXIT_TABLE_ERROR = 2


def build_results_table(query: str, results: list[MatchResult]) -> Table:
    """Render one label's results as a rich table"""
    table = Table(title=f"Matches for: {escape(query.strip())}", title_justify="left")
    table.add_column("#", justify="right")
    table.add_column("Identifier")
    table.add_column("Name")
    table.add_column("Address")
    table.add_column("Similarity", justify="right")
    table.add_column("Evidence")

    for rank, result in enumerate(results, start=1):
        record = result.record
        address = " ".join(part for part in (record.street_number, record.address) if part)
        table.add_row(
            str(rank),
            escape(display_identifier(record)),
            escape(record.name),
            escape(address),
            f"{result.similarity:.0%}",
            escape(result.matched_segment),
        )
    return table


def read_queries(texts: list[str] | None) -> list[str]:
    """Label texts from --text, else one per non-empty stdin line"""
    if texts:
        return texts
    return [line.rstrip("\n") for line in sys.stdin if line.strip()]


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point"""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    config = get_config(args.config)
    log_level = args.log_level or ("DEBUG" if config.logging.debug else "WARNING")
    log_file = args.log_file or config.logging.log_file
    setup_logging(log_file=log_file, log_level=log_level, silent=args.silent)

    console = Console()

    store = ReferenceTableStore.from_config(config)
    try:
        if args.table:
            table = ReferenceTableLoader(config).load(args.table)
            store.replace(table)
        else:
            table = store.snapshot()
            if not table:
                raise ReferenceTableError("no --table given and no cached table available")
        matcher = RecordMatcher(config=config, policy=args.policy)
    except ReferenceTableError as e:
        logger.error(f"Could not load reference table: {e}")
        return EXIT_TABLE_ERROR
    except ParcelMatchError as e:
        logger.error(str(e))
        return EXIT_TABLE_ERROR

    queries = read_queries(args.text)
    start_time = time()

    all_results: list[tuple[str, list[MatchResult]]] = []
    for query in queries:
        results = matcher.find_matches(
            query, table, ocr_confidence=args.ocr_confidence, max_results=args.max_results
        )
        all_results.append((query, results))

    elapsed = time() - start_time

    if args.json:
        payload = [
            {"query": query, "matches": [result.to_dict() for result in results]}
            for query, results in all_results
        ]
        console.print_json(data=payload)
    else:
        for query, results in all_results:
            if results:
                console.print(build_results_table(query, results))
            else:
                console.print(f"No matches for: {query.strip()}", markup=False)

    log_match_summary(
        table_name=table.source_name,
        table_size=len(table),
        queries=len(queries),
        matched_queries=sum(1 for _, results in all_results if results),
        total_results=sum(len(results) for _, results in all_results),
        policy=matcher.policy.name,
        elapsed=elapsed,
    )
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
