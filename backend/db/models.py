"""SQLAlchemy models for Eventmi."""

from sqlalchemy import Column, DateTime, Integer, String, func

from .database import Base


class Event(Base):
    """A calendar entry: name, place and a start/end time."""

    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    place = Column(String(255), nullable=False)
    start = Column(DateTime, nullable=False)
    end = Column(DateTime, nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Event(id={self.id}, name='{self.name}', start={self.start})>"
