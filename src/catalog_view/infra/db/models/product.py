from __future__ import annotations

from decimal import Decimal

from sqlalchemy import JSON, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from catalog_view.infra.db.models.base import Base


class ProductRow(Base):
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[Decimal] = mapped_column(
        Numeric(precision=12, scale=2), nullable=False
    )  # $9,999,999,999.99
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    category_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    category_image: Mapped[str | None] = mapped_column(Text, nullable=True)

    images: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
