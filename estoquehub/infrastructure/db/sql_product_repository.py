# Standard library imports
from typing import List, Optional

# External package imports
from sqlalchemy import delete, select

# Local application imports
from ...domain.repositories.product_repository import ProductRepository
from ...domain.models.product import Product
from ...domain.constants import ProductFields
from .base_repository import SqlRepository
from .tables import ProductRow


SKU_CONFLICT_MESSAGE = "A product with this SKU already exists."


class SqlProductRepository(SqlRepository, ProductRepository):
    """SQLAlchemy implementation of ProductRepository.
    
    Every statement filters on user_id, so rows of other users are
    unreachable.
    """
    
    async def find_by_owner(self, user_id: int) -> List[Product]:
        return await self._run("select_products", "Error fetching products.", self._find_by_owner, user_id)
    
    async def find_by_sku(self, user_id: int, sku: str) -> Optional[Product]:
        return await self._run("verify_sku", "Error checking SKU.", self._find_by_sku, user_id, sku)
    
    async def create(self, product: Product) -> Product:
        return await self._run(
            "insert_product",
            "Error creating product.",
            self._insert,
            product,
            conflict_message=SKU_CONFLICT_MESSAGE,
        )
    
    async def update(self, product: Product) -> Optional[Product]:
        return await self._run(
            "update_product",
            "Error updating product.",
            self._update,
            product,
            conflict_message=SKU_CONFLICT_MESSAGE,
        )
    
    async def delete(self, product_id: int, user_id: int) -> None:
        await self._run("delete_product", "Error removing product.", self._delete, product_id, user_id)
    
    def _find_by_owner(self, user_id: int) -> List[Product]:
        with self.session_factory() as session:
            rows = session.scalars(
                select(ProductRow)
                .where(ProductRow.user_id == user_id)
                .order_by(ProductRow.created_at.desc(), ProductRow.id.desc())
            ).all()
            return [self._row_to_product(row) for row in rows]
    
    def _find_by_sku(self, user_id: int, sku: str) -> Optional[Product]:
        with self.session_factory() as session:
            row = session.scalar(
                select(ProductRow).where(
                    ProductRow.user_id == user_id,
                    ProductRow.sku == sku,
                )
            )
            return self._row_to_product(row) if row is not None else None
    
    def _insert(self, product: Product) -> Product:
        with self.session_factory() as session:
            row = ProductRow(user_id=product.user_id, **self._product_values(product))
            session.add(row)
            session.commit()
            session.refresh(row)
            return self._row_to_product(row)
    
    def _update(self, product: Product) -> Optional[Product]:
        with self.session_factory() as session:
            row = session.scalar(
                select(ProductRow).where(
                    ProductRow.id == product.id,
                    ProductRow.user_id == product.user_id,
                )
            )
            if row is None:
                return None
            for field, value in self._product_values(product).items():
                setattr(row, field, value)
            session.commit()
            session.refresh(row)
            return self._row_to_product(row)
    
    def _delete(self, product_id: int, user_id: int) -> None:
        with self.session_factory() as session:
            session.execute(
                delete(ProductRow).where(
                    ProductRow.id == product_id,
                    ProductRow.user_id == user_id,
                )
            )
            session.commit()
    
    @staticmethod
    def _product_values(product: Product) -> dict:
        """Writable columns of a product, keyed by storage field name"""
        return {
            ProductFields.NAME: product.name,
            ProductFields.SKU: product.sku,
            ProductFields.QUANTITY: product.quantity,
            ProductFields.MIN_QUANTITY: product.min_quantity,
            ProductFields.CATEGORY: product.category,
        }
    
    @staticmethod
    def _row_to_product(row: ProductRow) -> Product:
        return Product(
            id=row.id,
            user_id=row.user_id,
            name=row.name,
            sku=row.sku,
            quantity=row.quantity,
            min_quantity=row.min_quantity,
            category=row.category,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
