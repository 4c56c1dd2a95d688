"""SQLAlchemy ORM models for IntervalTimer."""

from sqlalchemy import Column, Integer, String, JSON
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class PresetRecord(Base):
    """One saved workout preset.  ``position`` keeps the user's order."""

    __tablename__ = "presets"

    id = Column(String(64), primary_key=True)
    position = Column(Integer, nullable=False, default=0)
    name = Column(String(255), nullable=False)
    repetitions = Column(Integer, nullable=False, default=1)
    break_duration = Column(Integer, nullable=False, default=0)   # seconds
    sets = Column(JSON, nullable=False, default=list)            # [{type, duration}, ...]

    def __repr__(self) -> str:
        return (
            f"<PresetRecord id={self.id} name={self.name!r} "
            f"reps={self.repetitions}>"
        )
