"""Product routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, Response, status
from pydantic import BaseModel, Field

from harvest.application.usecase.product import (
    CreateProductRequest,
    CreateProductUseCase,
    GetProductRequest,
    GetProductUseCase,
    ListProductsRequest,
    ListProductsResponse,
    ListProductsUseCase,
    ProductChanges,
    ProductResponse,
    RecordOrderRequest,
    RecordOrderResponse,
    RecordOrderUseCase,
    RecordViewRequest,
    RecordViewUseCase,
    UpdateProductRequest,
    UpdateProductUseCase,
)
from harvest.domain.model import BulkDiscount
from harvest.domain.service import JWTService
from harvest.domain.value import SellerType

from .common import require_user_id, to_http_error

router = APIRouter(prefix="/products", tags=["products"], route_class=DishkaRoute)


class CreateProductAPIRequest(BaseModel):
    """API request for listing a product.

    Field rules (non-negative price and quantity, minimum order of at
    least 1) are enforced by the product model, so a bad value comes back
    as 400 with the validation message.
    """

    name: str
    description: str
    price: float
    quantity: int
    category: str
    seller_type: SellerType
    seller_name: str | None = None
    images: list[str] = Field(default_factory=list)
    certification_type: str = ""
    minimum_order: int = 1
    bulk_discounts: list[BulkDiscount] = Field(default_factory=list)


class RecordOrderAPIRequest(BaseModel):
    """API request for recording an order."""

    quantity: int = Field(ge=1)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    request: CreateProductAPIRequest,
    create_product_use_case: FromDishka[CreateProductUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ProductResponse:
    """List a new product sold by the authenticated user.

    The product's city is copied from the seller's profile.
    """
    try:
        user_id = require_user_id(jwt_service, auth_token, "list products")
        return await create_product_use_case.execute(
            CreateProductRequest(seller_id=user_id, **request.model_dump())
        )
    except Exception as e:
        raise to_http_error(e, "Product creation") from e


@router.get("", response_model=ListProductsResponse)
async def list_products(
    list_products_use_case: FromDishka[ListProductsUseCase],
    page: int = Query(default=1, ge=1),
    page_size: int = Query(default=30, ge=1, le=100),
    category: str | None = None,
    city: str | None = None,
    seller_id: str | None = None,
    search: str | None = None,
) -> ListProductsResponse:
    """Browse products, newest first, with optional filters and text search."""
    try:
        return await list_products_use_case.execute(
            ListProductsRequest(
                page=page,
                page_size=page_size,
                category=category,
                city=city,
                seller_id=seller_id,
                search=search,
            )
        )
    except Exception as e:
        raise to_http_error(e, "Product listing") from e


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: str,
    get_product_use_case: FromDishka[GetProductUseCase],
) -> ProductResponse:
    """Get a single product."""
    try:
        return await get_product_use_case.execute(
            GetProductRequest(product_id=product_id)
        )
    except Exception as e:
        raise to_http_error(e, "Product lookup") from e


@router.patch("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str,
    request: ProductChanges,
    update_product_use_case: FromDishka[UpdateProductUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ProductResponse:
    """Edit a product listing.

    Only the current seller can edit. Changing ``seller_id`` hands the
    listing over and re-derives its city from the new seller.
    """
    try:
        user_id = require_user_id(jwt_service, auth_token, "edit products")
        return await update_product_use_case.execute(
            UpdateProductRequest(product_id=product_id, user_id=user_id, changes=request)
        )
    except Exception as e:
        raise to_http_error(e, "Product update") from e


@router.post("/{product_id}/views", status_code=status.HTTP_204_NO_CONTENT)
async def record_view(
    product_id: str,
    record_view_use_case: FromDishka[RecordViewUseCase],
) -> Response:
    """Count one view of a product page."""
    try:
        await record_view_use_case.execute(RecordViewRequest(product_id=product_id))
    except Exception as e:
        raise to_http_error(e, "Product view") from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{product_id}/orders", response_model=RecordOrderResponse)
async def record_order(
    product_id: str,
    request: RecordOrderAPIRequest,
    record_order_use_case: FromDishka[RecordOrderUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RecordOrderResponse:
    """Record an order, priced with the product's bulk discounts.

    Requires authentication.
    """
    try:
        require_user_id(jwt_service, auth_token, "place orders")
        return await record_order_use_case.execute(
            RecordOrderRequest(product_id=product_id, quantity=request.quantity)
        )
    except Exception as e:
        raise to_http_error(e, "Order") from e
