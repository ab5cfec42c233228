"""Command-line entry point: load a document file, index it and run the query session."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
import logging
import sys
from typing import TextIO

from pydantic import ValidationError

from lexisearch.commands import CommandProcessor
from lexisearch.config import Settings
from lexisearch.errors import CorpusError
from lexisearch.observability import configure_logging
from lexisearch.search.analyzers import get_analyzer
from lexisearch.search.bm25_engine import BM25SearchEngine
from lexisearch.search.document_store import DocumentStore
from lexisearch.search.indexer import build_index


logger = logging.getLogger(__name__)

PROMPT = "Enter query (or type 'exit' to quit): "


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid value for -k (must be an integer): {value!r}") from exc
    if number < 1:
        raise argparse.ArgumentTypeError(f"-k must be a positive integer, got {number}")
    return number


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lexisearch",
        description="Index a newline-delimited document file and answer ranked keyword queries",
    )
    parser.add_argument(
        "-d",
        "--documents",
        required=True,
        metavar="FILE",
        help="Document collection, one document per line",
    )
    parser.add_argument(
        "-k",
        "--limit",
        required=True,
        type=_positive_int,
        metavar="NUMBER",
        help="Maximum number of results per search",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error", "critical"],
        help="Override LOG_LEVEL",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=None,
        help="Emit structured JSON logs on stderr",
    )
    return parser


def run_session(processor: CommandProcessor, stdin: TextIO, stdout: TextIO) -> None:
    """Read commands until ``exit`` or end of input."""

    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            break

        result = processor.execute(line)
        for output_line in result.output:
            print(output_line, file=stdout)
        if result.exit:
            print("Exiting program...", file=stdout)
            break


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings()
    except ValidationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1

    configure_logging(
        args.log_level or settings.log_level,
        settings.log_json if args.json_logs is None else args.json_logs,
    )
    limit = args.limit
    analyzer = get_analyzer(settings.analyzer)

    print("Please wait...")
    try:
        store = DocumentStore.from_file(args.documents, analyzer)
    except CorpusError as exc:
        logger.error("Failed to load documents: %s", exc)
        print(str(exc), file=sys.stderr)
        return 1

    index = build_index(store, analyzer)
    print(f"File read successfully. Lines: {store.document_count()}, Max Length: {store.max_line_length}")

    engine = BM25SearchEngine(
        index,
        analyzer,
        k1=settings.bm25_k1,
        b=settings.bm25_b,
        max_query_terms=settings.max_query_terms,
    )
    processor = CommandProcessor(index, engine, limit=limit)
    run_session(processor, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
