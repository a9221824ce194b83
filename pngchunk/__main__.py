import argparse
import logging
import sys
from pathlib import Path

import orjson
import structlog

from pngchunk import Png
from pngchunk.png.exceptions import ChunkException


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pngchunk", description="Inspect the chunks of a PNG file."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="print debug logs to stderr"
    )

    commands = parser.add_subparsers(dest="command", required=True)

    chunks_command = commands.add_parser("chunks", help="list chunks of a PNG file")
    chunks_command.add_argument("file", type=Path)
    chunks_command.add_argument(
        "--json", action="store_true", help="print chunk summaries as JSON"
    )

    header_command = commands.add_parser("header", help="print the IHDR fields")
    header_command.add_argument("file", type=Path)

    return parser


def _print_chunks(png: Png, as_json: bool) -> None:
    if as_json:
        print(orjson.dumps(png.summary(), option=orjson.OPT_INDENT_2).decode())
        return

    for chunk in png.chunks:
        print(f"{chunk.chunk_type}\t{chunk.length}\t{chunk.crc:#010x}")


def _print_header(png: Png) -> None:
    header = png.header()

    print(f"Size: {header.width}x{header.height}")
    print(f"Bit depth: {header.bit_depth}")
    print(f"Color type: {header.color_type.name}")
    print(f"Interlace: {header.interlace_method.name}")


def main(argv: list[str] | None = None) -> int:
    arguments = _build_parser().parse_args(argv)
    _configure_logging(arguments.verbose)

    try:
        png = Png.parse(arguments.file)

        if arguments.command == "chunks":
            _print_chunks(png, arguments.json)
        elif arguments.command == "header":
            _print_header(png)
    except (ChunkException, OSError) as exception:
        print(f"{arguments.file}: {exception}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
