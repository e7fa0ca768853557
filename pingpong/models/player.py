from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from pingpong.database import Base
import uuid
from datetime import datetime

class Player(Base):
    __tablename__ = "players"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    memberships = relationship(
        "PlayerGroup",
        back_populates="player",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Player {self.name}>"
