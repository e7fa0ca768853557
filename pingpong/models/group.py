from sqlalchemy import Column, String, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship
from pingpong.database import Base
import uuid
from datetime import datetime

class Group(Base):
    __tablename__ = "groups"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False)
    number = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    memberships = relationship(
        "PlayerGroup",
        back_populates="group",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="PlayerGroup.position",
    )

    def __repr__(self):
        return f"<Group {self.name}>"


# Player <-> Group membership, at most one group per player
class PlayerGroup(Base):
    __tablename__ = "player_groups"

    player_id = Column(
        String, ForeignKey("players.id", ondelete="CASCADE"), primary_key=True
    )
    group_id = Column(
        String, ForeignKey("groups.id", ondelete="CASCADE"), nullable=False
    )
    # order in which players were dealt into the group
    position = Column(Integer, nullable=False, default=0)

    player = relationship("Player", back_populates="memberships")
    group = relationship("Group", back_populates="memberships")
