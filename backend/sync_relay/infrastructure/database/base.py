"""SQLAlchemy declarative base shared by the relay tables."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for the sync_users, rrc_clients and sync_logs models."""
