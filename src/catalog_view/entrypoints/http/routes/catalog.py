from fastapi import APIRouter, Depends

from catalog_view.domain.product import Product
from catalog_view.domain.query import validate_page_size
from catalog_view.entrypoints.http.dependencies import get_products, get_settings, get_view_engine
from catalog_view.entrypoints.http.dtos.catalog_view import (
    CatalogViewResponseDTO,
    PageRequestDTO,
    PageSizeRequestDTO,
    ProductDetailResponseDTO,
    SearchRequestDTO,
    SortRequestDTO,
)
from catalog_view.entrypoints.http.mappers.catalog_view_mapper import CatalogViewMapper
from catalog_view.infra.config import Settings
from catalog_view.use_cases.get_product_by_id import GetProductById, GetProductByIdRequest
from catalog_view.use_cases.view_engine import ViewEngine


router = APIRouter(prefix="/catalog", tags=["Catalog"])

# Handlers are async so they run one at a time on the event loop: the shared
# engine is never mutated from two threads.


@router.get(
    "/view",
    response_model=CatalogViewResponseDTO,
    summary="Current catalog view",
)
async def get_view(engine: ViewEngine = Depends(get_view_engine)) -> CatalogViewResponseDTO:
    return CatalogViewMapper.to_response(engine.snapshot())


@router.post(
    "/search",
    response_model=CatalogViewResponseDTO,
    summary="Search products by title",
    description="""
    Case-insensitive substring match on the product title.

    - An empty or blank term matches every product
    - The active sort, if any, is re-applied to the new results
    - Always returns to page 1
    """,
)
async def search(
    payload: SearchRequestDTO,
    engine: ViewEngine = Depends(get_view_engine),
) -> CatalogViewResponseDTO:
    engine.search(payload.term)
    return CatalogViewMapper.to_response(engine.snapshot())


@router.post(
    "/sort",
    response_model=CatalogViewResponseDTO,
    summary="Sort the current results",
    description="""
    Sort by `price` or `name`, ascending or descending.

    - Equal keys keep their previous relative order
    - The current page is kept
    - The sort stays active across later searches and page changes
    """,
)
async def sort(
    payload: SortRequestDTO,
    engine: ViewEngine = Depends(get_view_engine),
) -> CatalogViewResponseDTO:
    engine.sort(payload.field, payload.order)
    return CatalogViewMapper.to_response(engine.snapshot())


@router.put(
    "/page-size",
    response_model=CatalogViewResponseDTO,
    summary="Change the number of products per page",
    responses={
        422: {
            "description": "Page size not offered",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Validation failed",
                        "code": "VALIDATION_ERROR",
                        "errors": [
                            {
                                "field": "size",
                                "message": "Must be one of [5, 10, 20, 50]",
                                "code": "INVALID_PAGE_SIZE",
                            }
                        ],
                    }
                }
            },
        },
    },
)
async def set_page_size(
    payload: PageSizeRequestDTO,
    engine: ViewEngine = Depends(get_view_engine),
    settings: Settings = Depends(get_settings),
) -> CatalogViewResponseDTO:
    validate_page_size(payload.size, settings.page_sizes)
    engine.set_page_size(payload.size)
    return CatalogViewMapper.to_response(engine.snapshot())


@router.post(
    "/page",
    response_model=CatalogViewResponseDTO,
    summary="Go to a page",
    description="Pages outside 1..total_pages are ignored and the unchanged view is returned.",
)
async def go_to_page(
    payload: PageRequestDTO,
    engine: ViewEngine = Depends(get_view_engine),
) -> CatalogViewResponseDTO:
    engine.go_to_page(payload.page)
    return CatalogViewMapper.to_response(engine.snapshot())


@router.get(
    "/products/{product_id}",
    response_model=ProductDetailResponseDTO,
    summary="Get one product",
    responses={
        404: {
            "description": "Unknown product",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Product with identifier '42' not found",
                        "code": "NOT_FOUND",
                    }
                }
            },
        },
    },
)
async def get_product(
    product_id: int,
    products: list[Product] = Depends(get_products),
) -> ProductDetailResponseDTO:
    result = GetProductById(products).execute(GetProductByIdRequest(product_id=product_id))
    return CatalogViewMapper.to_product_detail(result.product)
