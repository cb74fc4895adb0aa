from .list_products import ListProductsUseCase
from .create_product import CreateProductUseCase
from .update_product import UpdateProductUseCase
from .delete_product import DeleteProductUseCase

__all__ = [
    "ListProductsUseCase",
    "CreateProductUseCase",
    "UpdateProductUseCase",
    "DeleteProductUseCase",
]
