"""Command line entry point for pptx-index."""

import argparse
from pathlib import Path

import structlog

from pptx_index import __version__
from pptx_index.config import configure_logging, get_settings
from pptx_index.extraction import ExtractionError, extract_document

logger = structlog.get_logger(__name__)


def build_parser(default_output_dir: Path) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pptx-index",
        description="Extract slide text and images from a PowerPoint file into a JSON index",
    )
    parser.add_argument(
        "-i",
        "--input-file",
        required=True,
        help="Input .pptx file",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        default=str(default_output_dir),
        help=f"Output directory (default: {default_output_dir})",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    parser.add_argument(
        "--log-format",
        choices=["json", "console"],
        help="Override the configured log format",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    args = build_parser(settings.extraction.output_dir).parse_args(argv)

    logging_settings = settings.logging.model_copy(
        update={
            key: value
            for key, value in (("level", args.log_level), ("format", args.log_format))
            if value is not None
        }
    )
    configure_logging(logging_settings)

    output_dir = Path(args.output_dir)
    if settings.extraction.create_output_dir:
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Cannot create output directory", output_dir=str(output_dir), error=str(e))
            return 1

    try:
        index = extract_document(
            args.input_file,
            output_dir,
            index_filename=settings.extraction.index_filename,
        )
    except ExtractionError as e:
        logger.error("Extraction failed", error_type=type(e).__name__, error=str(e))
        return 1

    logger.info(
        "Index written",
        doc_title=index.title,
        slides=len(index.slides),
        masters=len(index.masters),
    )
    return 0
