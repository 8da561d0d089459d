"""Load games from a JSON file into typed records, in file order."""

from pathlib import Path

from pydantic import ValidationError

from oddscal.errors import GameFileFormatError, GameFileReadError
from oddscal.games.models import Game, GamesPayload
from oddscal.logging_config import get_logger

logger = get_logger(__name__)


def parse_payload(raw: bytes | str, source: str = "<input>") -> list[Game]:
    """
    Parse a {"data": [...]} document into Game records.
    Invalid JSON and shape mismatches both raise GameFileFormatError with pydantic's diagnostics.
    """
    try:
        payload = GamesPayload.model_validate_json(raw)
    except ValidationError as e:
        raise GameFileFormatError(source, str(e)) from e
    return list(payload.data)


def load_games(path: str | Path) -> list[Game]:
    """Read and parse the games file at path. Nothing is returned on partial failure."""
    source = str(path)
    try:
        raw = Path(path).read_bytes()
    except OSError as e:
        raise GameFileReadError(source, e.strerror or str(e)) from e
    games = parse_payload(raw, source=source)
    logger.debug(
        "games_loaded",
        path=source,
        games=len(games),
        completed=sum(1 for g in games if g.is_complete),
    )
    return games
