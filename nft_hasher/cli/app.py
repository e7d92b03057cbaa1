from __future__ import annotations

import argparse
import sys
from pathlib import Path

from nft_hasher.config.loader import ConfigError, resolve_settings
from nft_hasher.csvio.reader import EmptyInputError, InputOutputError, load_input
from nft_hasher.csvio.writer import OutputWriteError
from nft_hasher.logging.init import log_summary, set_debug, setup_logging
from nft_hasher.models.column_index import ATTRIBUTES
from nft_hasher.services.attributes import parse_attributes, render_attributes
from nft_hasher.services.columns import build_column_index
from nft_hasher.services.hasher import SerializationError
from nft_hasher.services.pipeline import ProcessingError, process_file
from nft_hasher.services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- Parse arguments, check the input extension (no I/O before this succeeds)
- Resolve settings
- Run the row pipeline on the single input file
- Log the output path and a SUMMARY line

Exit codes: 0 success, 1 fatal processing/config error, 2 usage error.
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1
EXIT_USAGE = 2

INSPECT_SAMPLE_ROWS = 3


class UsageError(Exception):
    """Wrong arguments or a non-CSV input path."""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = _ArgumentParser(
        prog="nft-hasher",
        description="Hash CHIP-0007 metadata for every NFT row of a CSV file",
    )
    p.add_argument("input", help="Input CSV file")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--config", type=Path, default=None, help="YAML settings file")
    p.add_argument(
        "--inspect-data",
        action="store_true",
        help="Print header, column positions & first rows then exit",
    )
    return p.parse_args(argv)


def _check_extension(path: Path) -> None:
    if path.suffix.lower() != ".csv":
        raise UsageError(f"invalid file type '{path.name}', CSV file expected")


def _inspect_data(input_path: Path) -> int:
    source = load_input(input_path)
    header, rows = source.header_and_rows()
    columns = build_column_index(header)
    print(f"FILE: {input_path.name}")
    print(f"  header={header}")
    print(f"  columns={dict(columns.positions)}")
    for i, row in enumerate(rows):
        if i >= INSPECT_SAMPLE_ROWS:
            break
        print(f"  row[{i + 1}]={row}")
        if columns.has(ATTRIBUTES):
            parsed = parse_attributes(columns.cell(row, ATTRIBUTES))
            print(f"    attributes={render_attributes(parsed)}")
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # Only read sys.argv when no list is given, so main([]) stays a usage error
    if argv is None:
        argv = sys.argv[1:]

    try:
        args = _parse_args(argv)
        input_path = Path(args.input)
        _check_extension(input_path)
    except UsageError as e:
        logger.error(f"usage: {e}")
        logger.error("usage: nft-hasher <input.csv>")
        return EXIT_USAGE

    if args.debug:
        set_debug()

    try:
        settings = resolve_settings(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    if args.inspect_data:
        try:
            return _inspect_data(input_path)
        except ProcessingError as e:
            logger.error(f"input: {e}")
            return EXIT_FATAL

    logger.info(f"Processing file: {input_path}")
    try:
        result = process_file(input_path, settings)
    except EmptyInputError as e:
        logger.error(f"input: {e}")
        return EXIT_FATAL
    except OutputWriteError as e:
        logger.error(f"output: {e}")
        return EXIT_FATAL
    except InputOutputError as e:
        logger.error(f"input: {e}")
        return EXIT_FATAL
    except SerializationError as e:
        logger.error(f"processing: {e}")
        return EXIT_FATAL
    except ProcessingError as e:  # pragma: no cover (no other subclasses today)
        logger.error(f"processing: {e}")
        return EXIT_FATAL

    logger.info(f"Successfully created output file: {result.output_path}")
    log_summary(render_summary_line(result))
    return EXIT_SUCCESS
