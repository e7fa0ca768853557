"""
Request and response bodies for the JSON API.

Response models read straight from the SQLAlchemy rows (``from_attributes``).
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PlayerCreate(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = ""


class PlayerOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    created_at: datetime


class GroupOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    created_at: datetime


class GroupAssignment(BaseModel):
    count: int


class MatchOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    player1_id: str
    player2_id: str
    group_id: Optional[str] = None
    round: int
    scheduled_time: Optional[datetime] = None
    completed: bool
    is_playoff: bool


class ScoreIn(BaseModel):
    player1_score: int
    player2_score: int


class ScoreOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    match_id: str
    player1_score: int
    player2_score: int
    winner_id: Optional[str] = None


class StandingOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    player: PlayerOut
    played: int
    won: int
    lost: int
    points: int


class ScheduleSection(BaseModel):
    name: str
    group_id: Optional[str] = None
    matches: List[MatchOut]


class BracketMatch(BaseModel):
    match: MatchOut
    score: Optional[ScoreOut] = None


class BracketRound(BaseModel):
    round: int
    matches: List[BracketMatch]


class Summary(BaseModel):
    players: int
    groups: int
    matches: int
    completed_matches: int
    playoff_matches: int
