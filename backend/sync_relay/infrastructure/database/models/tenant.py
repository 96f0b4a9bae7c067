"""SQLAlchemy ORM model for provisioned sync tenants."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from sync_relay.infrastructure.database.base import Base


class SyncUserModel(Base):
    """ORM model — maps to the 'sync_users' table."""

    __tablename__ = "sync_users"

    client_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    access_token: Mapped[str] = mapped_column(Text, nullable=False)
    db_user: Mapped[str | None] = mapped_column(String(255), nullable=True)
    db_password: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<SyncUserModel(client_id='{self.client_id}')>"
