from sqlalchemy import Column, String, Integer, ForeignKey
from sqlalchemy.orm import relationship
from pingpong.database import Base

class Score(Base):
    __tablename__ = "scores"

    match_id = Column(
        String, ForeignKey("matches.id", ondelete="CASCADE"), primary_key=True
    )
    player1_score = Column(Integer, nullable=False)
    player2_score = Column(Integer, nullable=False)
    winner_id = Column(
        String, ForeignKey("players.id", ondelete="SET NULL"), nullable=True
    )  # null on a tie

    match = relationship("Match", back_populates="score")
