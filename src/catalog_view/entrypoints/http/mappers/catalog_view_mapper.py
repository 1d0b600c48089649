from __future__ import annotations

from catalog_view.domain.product import Product
from catalog_view.domain.view import ResultsSummary, ViewSnapshot
from catalog_view.entrypoints.http.dtos.catalog_view import (
    CatalogViewResponseDTO,
    CategoryDTO,
    PaginationDTO,
    ProductDetailResponseDTO,
    ProductResponseDTO,
    QueryStateDTO,
    ResultsSummaryDTO,
)

DESCRIPTION_MAX_LENGTH = 80


class CatalogViewMapper:
    """Maps view snapshots and products to REST/WebSocket DTOs."""

    @staticmethod
    def resolve_image_url(product: Product) -> str | None:
        """
        Pick the image to display for a product.

        The first product image wins when it is an absolute http(s) URL;
        otherwise the category image is used, if any.
        """
        if product.images:
            url = product.images[0]
            if isinstance(url, str) and url.startswith("http"):
                return url

        if product.category and product.category.image:
            return product.category.image
        return None

    @staticmethod
    def fallback_image_url(product: Product, primary: str | None) -> str | None:
        """Category image to swap in when the primary image fails, unless it is the same one."""
        if product.category and product.category.image and product.category.image != primary:
            return product.category.image
        return None

    @staticmethod
    def truncate_text(text: str, max_length: int = DESCRIPTION_MAX_LENGTH) -> str:
        if not text:
            return ""
        return text[:max_length] + "..." if len(text) > max_length else text

    @staticmethod
    def summary_message(summary: ResultsSummary) -> str:
        if summary.is_empty:
            return "No products found"
        return f"Showing {summary.start} - {summary.end} of {summary.total} products"

    @staticmethod
    def to_product_response(product: Product) -> ProductResponseDTO:
        """
        Converts a domain Product to a table row DTO.

        Handles Decimal → str conversion at the boundary.
        """
        image_url = CatalogViewMapper.resolve_image_url(product)
        return ProductResponseDTO(
            id=product.id,
            title=product.title,
            price=str(product.price),  # Decimal → str at boundary
            description=CatalogViewMapper.truncate_text(product.description),
            category_name=product.category.name if product.category else None,
            image_url=image_url,
            fallback_image_url=CatalogViewMapper.fallback_image_url(product, image_url),
        )

    @staticmethod
    def to_product_detail(product: Product) -> ProductDetailResponseDTO:
        image_url = CatalogViewMapper.resolve_image_url(product)
        return ProductDetailResponseDTO(
            id=product.id,
            title=product.title,
            price=str(product.price),
            description=product.description,
            category=(
                CategoryDTO(name=product.category.name, image=product.category.image)
                if product.category
                else None
            ),
            images=list(product.images),
            image_url=image_url,
            fallback_image_url=CatalogViewMapper.fallback_image_url(product, image_url),
        )

    @staticmethod
    def to_response(snapshot: ViewSnapshot) -> CatalogViewResponseDTO:
        """
        Converts a view snapshot to the response rendered by clients.

        Args:
            snapshot: Current page items, summary, pagination window and query

        Returns:
            CatalogViewResponseDTO: Everything needed to paint the product table
        """
        summary = snapshot.summary
        pagination = snapshot.pagination
        query = snapshot.query

        return CatalogViewResponseDTO(
            items=[CatalogViewMapper.to_product_response(p) for p in snapshot.items],
            summary=ResultsSummaryDTO(
                start=summary.start,
                end=summary.end,
                total=summary.total,
                is_empty=summary.is_empty,
                message=CatalogViewMapper.summary_message(summary),
            ),
            pagination=PaginationDTO(
                current_page=pagination.current_page,
                total_pages=pagination.total_pages,
                has_previous=pagination.has_previous,
                has_next=pagination.has_next,
                entries=list(pagination.entries),
            ),
            query=QueryStateDTO(
                search_term=query.search_term,
                sort_field=query.sort.field if query.sort else None,
                sort_order=query.sort.order if query.sort else None,
                page=query.page,
                page_size=query.page_size,
            ),
        )
