"""Team ORM model."""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from tournament_site.core.database import Base


class Team(Base):
    __tablename__ = "teams"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), nullable=False, unique=True, index=True)
    logo_url = Column(String(512), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), index=True)

    participants = relationship(
        "Participant",
        back_populates="team",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="[Participant.created_at, Participant.id]",
    )
