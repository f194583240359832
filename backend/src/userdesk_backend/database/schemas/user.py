"""User database schema."""

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from userdesk_backend.database.base import BaseSchema

# SQLite only auto-assigns rowids to INTEGER primary keys.
USER_ID_TYPE = BigInteger().with_variant(Integer(), "sqlite")


class UserSchema(BaseSchema):
    """SQLAlchemy model for user records."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(USER_ID_TYPE, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"UserSchema(id={self.id!r}, name={self.name!r}, email={self.email!r})"
