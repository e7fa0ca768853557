from sqlalchemy import (
    Boolean, CheckConstraint, Column, DateTime, ForeignKey, Integer, String
)
from sqlalchemy.orm import relationship
from pingpong.database import Base
import uuid
from datetime import datetime

class Match(Base):
    __tablename__ = "matches"
    __table_args__ = (
        CheckConstraint("player1_id <> player2_id", name="ck_matches_distinct_players"),
    )

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    player1_id = Column(
        String, ForeignKey("players.id", ondelete="CASCADE"), nullable=False
    )
    player2_id = Column(
        String, ForeignKey("players.id", ondelete="CASCADE"), nullable=False
    )
    # null for playoff matches
    group_id = Column(
        String, ForeignKey("groups.id", ondelete="SET NULL"), nullable=True
    )

    round = Column(Integer, nullable=False, default=1)
    # insertion order, used to list matches the way they were generated
    order = Column(Integer, nullable=False, default=0)
    scheduled_time = Column(DateTime, nullable=True)
    completed = Column(Boolean, nullable=False, default=False)
    is_playoff = Column(Boolean, nullable=False, default=False)

    player1 = relationship("Player", foreign_keys=[player1_id])
    player2 = relationship("Player", foreign_keys=[player2_id])
    group = relationship("Group")

    score = relationship(
        "Score",
        back_populates="match",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def involves(self, player_id: str) -> bool:
        return player_id in (self.player1_id, self.player2_id)

    def __repr__(self):
        return f"<Match {self.id}>"
