"""Format finished bucket counters as report lines, one per bucket in ascending order."""

from collections.abc import Sequence
from decimal import Decimal

from oddscal.analytics.buckets import BucketCounter, bucket_bounds


def format_number(value: float) -> str:
    """Shortest round-trip decimal, no exponent; integral values without a fraction (40, 12.5)."""
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text


def format_bucket_line(index: int, counter: BucketCounter, bucket_count: int) -> str:
    """'{min}%-{max}%: {rate}% ({total} games)' or '{min}%-{max}%: no data'."""
    low, high = bucket_bounds(index, bucket_count)
    prefix = f"{format_number(low)}%-{format_number(high)}%"
    total, wins = counter.snapshot()
    if total == 0:
        return f"{prefix}: no data"
    observed = (wins / total) * 100.0
    return f"{prefix}: {format_number(observed)}% ({total} games)"


def format_report(counters: Sequence[BucketCounter]) -> list[str]:
    """All report lines for the finished counters."""
    bucket_count = len(counters)
    return [format_bucket_line(i, c, bucket_count) for i, c in enumerate(counters)]
