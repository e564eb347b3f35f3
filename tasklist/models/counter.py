"""Counter model."""

from sqlalchemy import Column, Integer, String

from tasklist.database import Base


class Counter(Base):
    """Current id value per entity kind."""

    __tablename__ = "counters"

    kind = Column(String(64), primary_key=True)
    current_number = Column(Integer, nullable=False, default=0)
