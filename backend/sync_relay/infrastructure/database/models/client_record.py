"""SQLAlchemy ORM model for a tenant's synced client rows."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from sync_relay.infrastructure.database.base import Base


class ClientRecordModel(Base):
    """ORM model — maps to the 'rrc_clients' table."""

    __tablename__ = "rrc_clients"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    code: Mapped[str | None] = mapped_column(String(100), nullable=True)
    name: Mapped[str | None] = mapped_column(Text, nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    branch: Mapped[str | None] = mapped_column(String(255), nullable=True)
    client_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<ClientRecordModel(id={self.id}, client='{self.client_id}', code='{self.code}')>"
