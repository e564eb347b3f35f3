"""Task model."""

from sqlalchemy import JSON, Column, Integer, String, Text

from tasklist.database import Base


class Task(Base):
    """A task item owned by exactly one user.

    The physical key is (id, created_at), so created_at never changes after
    the row is written.
    """

    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, autoincrement=False)
    created_at = Column(String(19), primary_key=True)
    title = Column(String(500), nullable=False)
    detail = Column(Text, nullable=False)
    due_date = Column(String(19), nullable=False)
    # Status codes, e.g. [1, 2]
    statuses = Column(JSON, nullable=False)
    updated_at = Column(String(19), nullable=False)
    user_id = Column(Integer, nullable=False, index=True)
