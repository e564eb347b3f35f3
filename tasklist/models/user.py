"""User models."""

from sqlalchemy import Column, Integer, String

from tasklist.database import Base


class User(Base):
    """Task owner, identified per request by its access key."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=False)
    user_name = Column(String(255), nullable=False, index=True)
    password = Column(String(255), nullable=False)
    access_key = Column(String(511), nullable=False, index=True)


class UserNameClaim(Base):
    """One row per taken user name; inserting a duplicate fails."""

    __tablename__ = "user_names"

    user_name = Column(String(255), primary_key=True)
    user_id = Column(Integer, nullable=False)
