"""Product use cases."""

from .common import ProductResponse
from .create_product import CreateProductRequest, CreateProductUseCase
from .get_product import GetProductRequest, GetProductUseCase
from .list_products import ListProductsRequest, ListProductsResponse, ListProductsUseCase
from .record_order import RecordOrderRequest, RecordOrderResponse, RecordOrderUseCase
from .record_view import RecordViewRequest, RecordViewUseCase
from .update_product import ProductChanges, UpdateProductRequest, UpdateProductUseCase

__all__ = [
    "ProductResponse",
    "CreateProductRequest",
    "CreateProductUseCase",
    "GetProductRequest",
    "GetProductUseCase",
    "ListProductsRequest",
    "ListProductsResponse",
    "ListProductsUseCase",
    "RecordOrderRequest",
    "RecordOrderResponse",
    "RecordOrderUseCase",
    "RecordViewRequest",
    "RecordViewUseCase",
    "ProductChanges",
    "UpdateProductRequest",
    "UpdateProductUseCase",
]
