from typing import TYPE_CHECKING
from ...domain.repositories.product_repository import ProductRepository
from ...application.use_cases.product import (
    ListProductsUseCase,
    CreateProductUseCase,
    UpdateProductUseCase,
    DeleteProductUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ProductProvider:
    """Product use case provider"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        for use_case_class in (
            ListProductsUseCase,
            CreateProductUseCase,
            UpdateProductUseCase,
            DeleteProductUseCase,
        ):
            container.register_factory(
                use_case_class,
                lambda cls=use_case_class: cls(
                    product_repository=container.get(ProductRepository)
                )
            )
