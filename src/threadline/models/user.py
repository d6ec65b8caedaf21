# src/threadline/models/user.py
"""SQLAlchemy model for user accounts."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from threadline.db.session import Base

ROLE_ADMIN = "admin"
ROLE_USER = "user"


class User(Base):
    """Account record keyed by the verified email of its owner."""

    __tablename__ = "user_account"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    avatar: Mapped[str] = mapped_column(Text, nullable=False)
    role: Mapped[str | None] = mapped_column(String(32), nullable=True)
    membership: Mapped[str] = mapped_column(String(32), nullable=False, default="no")
    user_status: Mapped[str] = mapped_column(String(32), nullable=False, default="bronze")
    # Maintained as a side effect of post creation.
    posts: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
