"""Pydantic models for the games payload. Wire names are lower camel case."""

from pydantic import BaseModel, ConfigDict, Field


class GameData(BaseModel):
    """Final score and implied win probability for each side."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True, strict=True)

    home_score: float = Field(..., alias="homeScore")
    away_score: float = Field(..., alias="awayScore")
    home_odds: float = Field(..., alias="homeOdds")  # expected in [0, 1), not validated here
    away_odds: float = Field(..., alias="awayOdds")


class Game(BaseModel):
    """Single game record. end_time is None until the game has finished."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True, strict=True)

    game_id: str = Field(..., alias="gameId")
    end_time: str | None = Field(None, alias="endTime")
    data: GameData

    @property
    def is_complete(self) -> bool:
        return self.end_time is not None


class GamesPayload(BaseModel):
    """Top-level document: {"data": [Game, ...]}."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    data: list[Game]
