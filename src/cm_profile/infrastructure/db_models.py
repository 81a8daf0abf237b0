"""SQLAlchemy ORM model for the profiles table.

Table is created by Alembic migration: alembic/versions/002_create_profiles.py
Balance is never written through this mapping; ledger writes use explicit
UPDATE statements in src/cm_ledger/infrastructure/persistence.py.
"""

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from src.cm_common.database import Base
from src.cm_profile.domain.models import Profile


class ProfileORM(Base):
    __tablename__ = "profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    profession: Mapped[str] = mapped_column(String(100), nullable=False)
    balance: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=text("NOW()")
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=text("NOW()")
    )

    def to_domain(self) -> Profile:
        return Profile(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
            profession=self.profession,
            balance=self.balance,
            type=self.type,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )
