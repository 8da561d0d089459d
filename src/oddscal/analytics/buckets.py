"""Probability buckets: index arithmetic and the per-bucket (total, wins) counter."""

import math
import threading


def bucket_index(probability: float, bucket_count: int) -> int:
    """
    floor(probability * bucket_count). No clamping: values outside [0, 1) give indexes
    outside [0, bucket_count). Non-finite probabilities raise ValueError.
    """
    if bucket_count <= 0:
        raise ValueError(f"bucket_count must be positive, got {bucket_count}")
    if not math.isfinite(probability):
        raise ValueError(f"probability must be finite, got {probability}")
    return math.floor(probability * bucket_count)


def bucket_bounds(index: int, bucket_count: int) -> tuple[float, float]:
    """Nominal probability range of a bucket, in percent."""
    return index * 100.0 / bucket_count, (index + 1) * 100.0 / bucket_count


class BucketCounter:
    """(total, wins) for one bucket. add() is safe to call from many threads at once."""

    __slots__ = ("_total", "_wins", "_lock")

    def __init__(self) -> None:
        self._total = 0
        self._wins = 0
        self._lock = threading.Lock()

    def add(self, total: int = 0, wins: int = 0) -> None:
        with self._lock:
            self._total += total
            self._wins += wins

    @property
    def total(self) -> int:
        with self._lock:
            return self._total

    @property
    def wins(self) -> int:
        with self._lock:
            return self._wins

    def snapshot(self) -> tuple[int, int]:
        """Consistent (total, wins) pair."""
        with self._lock:
            return self._total, self._wins

    def __repr__(self) -> str:
        total, wins = self.snapshot()
        return f"BucketCounter(total={total}, wins={wins})"


def new_counters(bucket_count: int) -> list[BucketCounter]:
    """Fixed-size counter list, one per bucket index."""
    if bucket_count <= 0:
        raise ValueError(f"bucket_count must be positive, got {bucket_count}")
    return [BucketCounter() for _ in range(bucket_count)]
