from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from catalog_view.domain.query import SortField, SortOrder


# ==============================================================================
# Responses
# ==============================================================================


class ProductResponseDTO(BaseModel):
    """One row of the product table."""

    id: int
    title: str
    price: str
    description: str = Field(description="Description truncated for table display")
    category_name: str | None = None
    image_url: str | None = Field(
        default=None,
        description="First product image, or the category image when the product has none",
    )
    fallback_image_url: str | None = Field(
        default=None,
        description="Image to try when image_url fails to load",
    )


class CategoryDTO(BaseModel):
    name: str
    image: str | None = None


class ProductDetailResponseDTO(BaseModel):
    id: int
    title: str
    price: str
    description: str
    category: CategoryDTO | None = None
    images: list[str]
    image_url: str | None = None
    fallback_image_url: str | None = None


class ResultsSummaryDTO(BaseModel):
    start: int
    end: int
    total: int
    is_empty: bool
    message: str


class PaginationDTO(BaseModel):
    current_page: int
    total_pages: int
    has_previous: bool
    has_next: bool
    entries: list[int | Literal["..."]] = Field(
        description="Page numbers to show; '...' marks a gap",
        examples=[[1, "...", 8, 9, 10, 11, 12, "...", 20]],
    )


class QueryStateDTO(BaseModel):
    search_term: str
    sort_field: SortField | None = None
    sort_order: SortOrder | None = None
    page: int
    page_size: int


class CatalogViewResponseDTO(BaseModel):
    items: list[ProductResponseDTO]
    summary: ResultsSummaryDTO
    pagination: PaginationDTO
    query: QueryStateDTO


# ==============================================================================
# Requests
# ==============================================================================


class SearchRequestDTO(BaseModel):
    """Search the catalog by product title."""

    term: str = Field(
        default="",
        description="Case-insensitive substring of the title; empty matches everything",
        examples=["shirt"],
    )


class SortRequestDTO(BaseModel):
    field: SortField = Field(description="Sort key", examples=["price"])
    order: SortOrder = Field(default=SortOrder.ASCENDING, examples=["asc"])

    model_config = ConfigDict(json_schema_extra={"example": {"field": "price", "order": "asc"}})


class PageSizeRequestDTO(BaseModel):
    size: int = Field(description="Products per page", examples=[10], ge=1)


class PageRequestDTO(BaseModel):
    page: int = Field(
        description="1-based page number; out-of-range values leave the view unchanged",
        examples=[2],
    )


# ==============================================================================
# Live (WebSocket) messages
# ==============================================================================


class SearchMessage(SearchRequestDTO):
    action: Literal["search"]


class SortMessage(SortRequestDTO):
    action: Literal["sort"]


class PageSizeMessage(PageSizeRequestDTO):
    action: Literal["page_size"]


class PageMessage(PageRequestDTO):
    action: Literal["page"]


LiveMessage = Annotated[
    Union[SearchMessage, SortMessage, PageSizeMessage, PageMessage],
    Field(discriminator="action"),
]
