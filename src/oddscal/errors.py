"""Error taxonomy. Every error is terminal: the CLI maps any CalibrationError to exit 1."""


class CalibrationError(Exception):
    """Base for all failures of a calibration run."""


class ArgumentError(CalibrationError):
    """Missing or malformed command-line argument."""


class LoadError(CalibrationError):
    """Input file could not be turned into game records."""


class GameFileReadError(LoadError):
    """Input file missing or unreadable."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read {path}: {reason}")


class GameFileFormatError(LoadError):
    """Input is not valid JSON or does not match the games payload shape."""

    def __init__(self, source: str, detail: str) -> None:
        self.source = source
        self.detail = detail
        super().__init__(f"invalid games file {source}: {detail}")


class DataIntegrityError(CalibrationError):
    """A completed game violates an assumption about valid upstream data."""

    def __init__(self, game_id: str, message: str) -> None:
        self.game_id = game_id
        super().__init__(message)


class TiedGameError(DataIntegrityError):
    """Completed game with equal (or incomparable) home and away scores."""

    def __init__(self, game_id: str, home_score: float, away_score: float) -> None:
        self.home_score = home_score
        self.away_score = away_score
        super().__init__(
            game_id,
            f"game {game_id} finished tied ({home_score} - {away_score}); ties are not expected",
        )


class BucketRangeError(DataIntegrityError):
    """Odds value maps outside [0, bucket_count)."""

    def __init__(self, game_id: str, side: str, odds: float, bucket_count: int) -> None:
        self.side = side
        self.odds = odds
        self.bucket_count = bucket_count
        super().__init__(
            game_id,
            f"game {game_id}: {side} odds {odds} fall outside [0, 1) for {bucket_count} buckets",
        )
