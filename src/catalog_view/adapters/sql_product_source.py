"""SQL implementation of ProductSource."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog_view.domain.errors import CatalogLoadError
from catalog_view.domain.product import Category, Product
from catalog_view.infra.db.models.product import ProductRow
from catalog_view.ports.product_source import ProductSource


class SqlProductSource(ProductSource):
    """
    Loads the whole `products` table through SQLAlchemy.

    - One SELECT ordered by id; no filtering or paging in SQL
    - Converts ProductRow (infrastructure) to Product (domain)
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize source with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def fetch(self) -> list[Product]:
        query = select(ProductRow).order_by(ProductRow.id)

        try:
            rows = self._session.execute(query).scalars().all()
        except SQLAlchemyError as exc:
            raise CatalogLoadError(
                f"Cannot read products table: {exc.__class__.__name__}",
                source="sql",
            ) from exc

        return [self._to_domain(row) for row in rows]

    def _to_domain(self, row: ProductRow) -> Product:
        """
        Convert database model (ProductRow) to domain entity (Product).

        Args:
            row: SQLAlchemy ProductRow model

        Returns:
            Product domain entity
        """
        category = (
            Category(name=row.category_name, image=row.category_image)
            if row.category_name is not None
            else None
        )
        return Product(
            id=row.id,
            title=row.title,
            price=row.price,  # Already Decimal from NUMERIC column
            description=row.description or "",
            category=category,
            images=tuple(row.images or ()),
        )
