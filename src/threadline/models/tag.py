# src/threadline/models/tag.py
"""Tag catalog model."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from threadline.db.session import Base


class Tag(Base):
    """Reference tag that posts may carry."""

    __tablename__ = "tag"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
