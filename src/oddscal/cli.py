"""Command line: oddscal <path> <bucketCount>. Report on stdout, logs and errors on stderr."""

import sys

from pydantic import ValidationError

from oddscal.analytics.calibration import aggregate_games, calibration_error_text, summarize
from oddscal.config import get_settings
from oddscal.errors import ArgumentError, CalibrationError
from oddscal.games.loader import load_games
from oddscal.logging_config import bind_run_context, configure_logging, get_logger
from oddscal.report.formatter import format_report

logger = get_logger(__name__)


def parse_bucket_count(value: str) -> int:
    """Positive integer from ASCII digits with an optional leading '+'; no surrounding whitespace."""
    text = value[1:] if value.startswith("+") else value
    if not (text.isascii() and text.isdigit()):
        raise ArgumentError(f"invalid bucket count {value!r}: expected a positive integer")
    count = int(text)
    if count <= 0:
        raise ArgumentError(f"invalid bucket count {value!r}: must be at least 1")
    return count


def parse_args(argv: list[str] | None = None) -> tuple[str, int]:
    """
    Return (path, bucket_count) from the first two positionals. Anything after them is ignored
    and nothing is treated as an option, so paths may start with '-'.
    Missing or malformed values raise ArgumentError.
    """
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 1:
        raise ArgumentError("Path missing!")
    if len(args) < 2:
        raise ArgumentError("Buckets missing!")
    return args[0], parse_bucket_count(args[1])


def main(argv: list[str] | None = None) -> int:
    """Run one calibration report. Returns the process exit code; prints nothing to stdout on failure."""
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1
    configure_logging(debug=settings.debug)

    try:
        path, bucket_count = parse_args(argv)
        bind_run_context(path=path, buckets=bucket_count)
        games = load_games(path)
        counters = aggregate_games(games, bucket_count)
    except CalibrationError as e:
        logger.error("calibration_failed", kind=type(e).__name__, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    lines = format_report(counters)
    summary = summarize(counters)
    logger.info(
        "report_ready",
        games=summary.games,
        buckets_with_data=summary.buckets_with_data,
        calibration=calibration_error_text(summary),
    )
    for line in lines:
        print(line)
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
