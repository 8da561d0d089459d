"""Calibration: per-bucket sides and wins for completed games, aggregated in parallel."""

import os
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Literal

from oddscal.analytics.buckets import BucketCounter, bucket_bounds, bucket_index, new_counters
from oddscal.config import get_settings
from oddscal.errors import BucketRangeError, TiedGameError
from oddscal.games.models import Game
from oddscal.logging_config import get_logger

logger = get_logger(__name__)

Side = Literal["home", "away"]


@dataclass
class CalibrationSummary:
    """Run totals derived from finished counters."""

    games: int
    sides: int
    wins: int
    buckets_with_data: int
    calibration_error: float | None  # mean |midpoint - observed| over non-empty buckets, 0-1


def bucket_for(game: Game, side: Side, bucket_count: int) -> int:
    """Bucket of one side's odds; BucketRangeError when outside [0, bucket_count) or not finite."""
    odds = game.data.home_odds if side == "home" else game.data.away_odds
    try:
        index = bucket_index(odds, bucket_count)
    except ValueError as e:
        raise BucketRangeError(game.game_id, side, odds, bucket_count) from e
    if not 0 <= index < bucket_count:
        raise BucketRangeError(game.game_id, side, odds, bucket_count)
    return index


def winning_side(game: Game) -> Side:
    """Side with the higher score. Equal or incomparable scores raise TiedGameError."""
    home, away = game.data.home_score, game.data.away_score
    if home > away:
        return "home"
    if home < away:
        return "away"
    raise TiedGameError(game.game_id, home, away)


def _tally_chunk(
    games: Sequence[Game],
    bucket_count: int,
    counters: list[BucketCounter],
) -> int:
    """Tally a chunk locally, then flush into the shared counters. Returns games tallied."""
    local: dict[int, list[int]] = {}
    for game in games:
        home = bucket_for(game, "home", bucket_count)
        away = bucket_for(game, "away", bucket_count)
        winner = home if winning_side(game) == "home" else away
        local.setdefault(home, [0, 0])[0] += 1
        local.setdefault(away, [0, 0])[0] += 1
        local[winner][1] += 1
    for index, (total, wins) in local.items():
        counters[index].add(total=total, wins=wins)
    return len(games)


def _chunks(games: Sequence[Game], parts: int) -> list[Sequence[Game]]:
    """Split into at most `parts` contiguous, non-empty slices of near-equal size."""
    size, extra = divmod(len(games), parts)
    out = []
    start = 0
    for i in range(parts):
        end = start + size + (1 if i < extra else 0)
        if end > start:
            out.append(games[start:end])
        start = end
    return out


def resolve_workers(max_workers: int | None = None, work_items: int | None = None) -> int:
    """Pool size: explicit value, else ODDSCAL_MAX_WORKERS, else CPU count; never more than work_items."""
    workers = max_workers or get_settings().max_workers or os.cpu_count() or 1
    if work_items is not None:
        workers = min(workers, work_items)
    return max(1, workers)


def aggregate_games(
    games: Sequence[Game],
    bucket_count: int,
    max_workers: int | None = None,
) -> list[BucketCounter]:
    """
    Count sides (total) and winners (wins) per odds bucket over completed games.
    Each completed game adds one total to the home and one to the away bucket, and one win
    to the winner's bucket. Unfinished games are skipped. Counters are only returned after
    every worker has finished; the first integrity error aborts the whole aggregation.
    """
    counters = new_counters(bucket_count)
    completed = [g for g in games if g.is_complete]
    workers = resolve_workers(max_workers, len(completed))
    logger.debug(
        "aggregation_started",
        games=len(games),
        completed=len(completed),
        buckets=bucket_count,
        workers=workers,
    )
    if not completed:
        return counters

    tallied = 0
    with ThreadPoolExecutor(max_workers=workers) as ex:
        futs = [
            ex.submit(_tally_chunk, chunk, bucket_count, counters)
            for chunk in _chunks(completed, workers)
        ]
        try:
            for fut in as_completed(futs):
                tallied += fut.result()
        except Exception:
            for f in futs:
                f.cancel()
            raise
    logger.debug("aggregation_finished", games=tallied, buckets=bucket_count)
    return counters


def summarize(counters: Sequence[BucketCounter]) -> CalibrationSummary:
    """Totals plus mean absolute gap between bucket midpoint and observed win rate."""
    bucket_count = len(counters)
    sides = 0
    wins = 0
    errs = []
    for i, counter in enumerate(counters):
        total, bucket_wins = counter.snapshot()
        sides += total
        wins += bucket_wins
        if total:
            low, high = bucket_bounds(i, bucket_count)
            predicted = (low + high) / 200.0
            errs.append(abs(predicted - bucket_wins / total))
    return CalibrationSummary(
        games=sides // 2,
        sides=sides,
        wins=wins,
        buckets_with_data=len(errs),
        calibration_error=round(sum(errs) / len(errs), 4) if errs else None,
    )


def calibration_error_text(summary: CalibrationSummary) -> str:
    """One-line calibration summary (|predicted - actual| per bucket, averaged)."""
    if summary.calibration_error is None:
        return "No calibration data yet."
    return f"Avg calibration error: {summary.calibration_error:.1%}"
