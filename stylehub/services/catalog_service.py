"""
Catalog Service
Business rules for the product catalog on top of ProductRepository
"""
import logging
from typing import List, Optional, Tuple

from stylehub.core.config import settings
from stylehub.core.exceptions import NotFoundError
from stylehub.domain.product import Product, ProductCreate, ProductUpdate, ProductFilters, FilterFacets
from stylehub.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Service for browsing and administering the catalog

    Handles:
    - Filtered listing (category, price range, colors, sizes, search)
    - Product lookup and related products
    - Admin create/update/delete with storefront defaults
    """

    def __init__(self, product_repository: Optional[ProductRepository] = None):
        self.products = product_repository or ProductRepository()

    def list_products(
        self,
        filters: Optional[ProductFilters] = None,
        limit: int = 100,
        offset: int = 0
    ) -> Tuple[List[Product], int]:
        return self.products.find_all(filters or ProductFilters(), limit=limit, offset=offset)

    def get_product(self, product_id: int) -> Product:
        product = self.products.find_by_id(product_id)
        if not product:
            raise NotFoundError(f"Product {product_id} not found")
        return product

    def related_products(self, product_id: int, limit: int = 4) -> List[Product]:
        product = self.get_product(product_id)
        return self.products.find_related(product, limit=limit)

    def create_product(self, payload: ProductCreate) -> Product:
        """
        Create a product

        Stock falls back to DEFAULT_PRODUCT_STOCK when missing or zero.
        """
        data = payload.model_dump()
        data['category'] = payload.category.value
        if not data.get('stock'):
            data['stock'] = settings.DEFAULT_PRODUCT_STOCK

        product = self.products.create(data)
        logger.info(f"Created product {product.id} ({product.name})")
        return product

    def update_product(self, product_id: int, payload: ProductUpdate) -> Product:
        updates = payload.model_dump(exclude_unset=True, exclude_none=True)
        if 'category' in updates:
            updates['category'] = payload.category.value

        product = self.products.update(product_id, updates)
        if not product:
            raise NotFoundError(f"Product {product_id} not found")
        return product

    def delete_product(self, product_id: int) -> None:
        if not self.products.delete(product_id):
            raise NotFoundError(f"Product {product_id} not found")
        logger.info(f"Deleted product {product_id}")

    def filter_facets(self) -> FilterFacets:
        return self.products.get_filter_facets()
