"""
Product Repository - Data Access Layer for Products

Handles all database queries for products and returns Product domain models.
"""
from typing import List, Optional, Tuple, Dict, Any
from stylehub.domain.product import Product, ProductFilters, FilterFacets
from stylehub.core.database import get_db_connection_dict


PRODUCT_COLUMNS = """
    id, name, description, category, size_options, price,
    images, colors, stock, featured, created_at, updated_at
"""

# Columns an update may touch
UPDATABLE_COLUMNS = (
    "name", "description", "category", "size_options", "price",
    "images", "colors", "stock", "featured",
)


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so user input matches literally"""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def build_product_conditions(filters: ProductFilters) -> Tuple[List[str], List[Any]]:
    """
    Translate catalog filters into SQL conditions and parameters

    Returns:
        Tuple of (list of conditions joined with AND by the caller, params)
    """
    conditions = []
    params: List[Any] = []

    if filters.category_filter:
        conditions.append("category = %s")
        params.append(filters.category_filter)

    if filters.search:
        conditions.append("(name ILIKE %s OR description ILIKE %s)")
        search_term = f"%{escape_like(filters.search)}%"
        params.extend([search_term, search_term])

    if filters.min_price is not None:
        conditions.append("price >= %s")
        params.append(filters.min_price)

    if filters.max_price is not None:
        conditions.append("price <= %s")
        params.append(filters.max_price)

    if filters.colors:
        conditions.append("colors && %s::text[]")
        params.append(list(filters.colors))

    if filters.sizes:
        conditions.append("size_options && %s::text[]")
        params.append(list(filters.sizes))

    if filters.featured is not None:
        conditions.append("featured = %s")
        params.append(filters.featured)

    return conditions, params


class ProductRepository:
    """
    Repository for Product data access

    All SQL queries for products are centralized here.
    Returns Product domain models, not raw dictionaries.
    """

    @staticmethod
    def _map_row_to_product(row: dict) -> Product:
        return Product(
            id=row['id'],
            name=row['name'],
            description=row['description'],
            category=row['category'],
            size_options=row.get('size_options') or [],
            price=row['price'],
            images=row.get('images') or [],
            colors=row.get('colors') or [],
            stock=row.get('stock') or 0,
            featured=bool(row.get('featured')),
            created_at=row['created_at'],
            updated_at=row.get('updated_at')
        )

    def find_by_id(self, product_id: int) -> Optional[Product]:
        """
        Find product by ID

        Returns:
            Product or None if not found
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {PRODUCT_COLUMNS}
                FROM products
                WHERE id = %s
            """, (product_id,))

            row = cursor.fetchone()
            if not row:
                return None

            return self._map_row_to_product(row)

        finally:
            cursor.close()
            conn.close()

    def find_all(
        self,
        filters: Optional[ProductFilters] = None,
        limit: int = 100,
        offset: int = 0
    ) -> Tuple[List[Product], int]:
        """
        Find products with filters, newest first

        Args:
            filters: Catalog filters (category, price range, colors, sizes, search)
            limit: Maximum results to return
            offset: Number of results to skip

        Returns:
            Tuple of (list of products, total count)
        """
        filters = filters or ProductFilters()
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            conditions, params = build_product_conditions(filters)
            where_clause = " AND ".join(conditions) if conditions else "1=1"

            cursor.execute(f"""
                SELECT COUNT(*) as total
                FROM products
                WHERE {where_clause}
            """, params)
            total = cursor.fetchone()['total']

            cursor.execute(f"""
                SELECT {PRODUCT_COLUMNS}
                FROM products
                WHERE {where_clause}
                ORDER BY created_at DESC, id DESC
                LIMIT %s OFFSET %s
            """, params + [limit, offset])

            rows = cursor.fetchall()
            products = [self._map_row_to_product(row) for row in rows]

            return products, total

        finally:
            cursor.close()
            conn.close()

    def find_related(self, product: Product, limit: int = 4) -> List[Product]:
        """Products in the same category, excluding the product itself"""
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {PRODUCT_COLUMNS}
                FROM products
                WHERE category = %s AND id <> %s
                ORDER BY featured DESC, created_at DESC
                LIMIT %s
            """, (product.category.value, product.id, limit))

            return [self._map_row_to_product(row) for row in cursor.fetchall()]

        finally:
            cursor.close()
            conn.close()

    def find_suggestion_candidates(self, query: str, limit: int = 10) -> List[Dict[str, Any]]:
        """
        Name and category of products whose name, description or category
        contains the query (case-insensitive)
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            term = f"%{escape_like(query)}%"
            cursor.execute("""
                SELECT name, category
                FROM products
                WHERE name ILIKE %s OR description ILIKE %s OR category ILIKE %s
                ORDER BY created_at DESC
                LIMIT %s
            """, (term, term, term, limit))

            return cursor.fetchall()

        finally:
            cursor.close()
            conn.close()

    def count(self) -> int:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("SELECT COUNT(*) as total FROM products")
            return cursor.fetchone()['total']

        finally:
            cursor.close()
            conn.close()

    def create(self, data: Dict[str, Any]) -> Product:
        """
        Insert a product

        Args:
            data: Column values (name, description, category, price, ...)

        Returns:
            The stored product with id and timestamps
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                INSERT INTO products (
                    name, description, category, size_options, price,
                    images, colors, stock, featured, created_at, updated_at
                )
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, NOW(), NOW())
                RETURNING {PRODUCT_COLUMNS}
            """, (
                data['name'],
                data['description'],
                data['category'],
                data.get('size_options', []),
                data['price'],
                data.get('images', []),
                data.get('colors', []),
                data.get('stock', 0),
                data.get('featured', False),
            ))

            row = cursor.fetchone()
            conn.commit()
            return self._map_row_to_product(row)

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def insert_many(self, products: List[Dict[str, Any]]) -> int:
        """Bulk insert products; returns number of rows inserted"""
        if not products:
            return 0

        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            for data in products:
                cursor.execute("""
                    INSERT INTO products (
                        name, description, category, size_options, price,
                        images, colors, stock, featured, created_at, updated_at
                    )
                    VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, NOW(), NOW())
                """, (
                    data['name'],
                    data['description'],
                    data['category'],
                    data.get('size_options', []),
                    data['price'],
                    data.get('images', []),
                    data.get('colors', []),
                    data.get('stock', 0),
                    data.get('featured', False),
                ))

            conn.commit()
            return len(products)

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def update(self, product_id: int, updates: Dict[str, Any]) -> Optional[Product]:
        """
        Set the supplied columns and updated_at

        Returns:
            Updated product or None if not found
        """
        fields = {k: v for k, v in updates.items() if k in UPDATABLE_COLUMNS}

        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            assignments = [f"{column} = %s" for column in fields]
            assignments.append("updated_at = NOW()")

            cursor.execute(f"""
                UPDATE products
                SET {", ".join(assignments)}
                WHERE id = %s
                RETURNING {PRODUCT_COLUMNS}
            """, list(fields.values()) + [product_id])

            row = cursor.fetchone()
            if not row:
                conn.rollback()
                return None

            conn.commit()
            return self._map_row_to_product(row)

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def delete(self, product_id: int) -> bool:
        """Delete a product; returns False when nothing was deleted"""
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("DELETE FROM products WHERE id = %s", (product_id,))
            deleted = cursor.rowcount > 0
            conn.commit()
            return deleted

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def get_filter_facets(self) -> FilterFacets:
        """
        Distinct categories, colors and sizes plus the price range

        Used to build the filter sidebar from what is actually in the catalog.
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT DISTINCT category FROM products ORDER BY category
            """)
            categories = [row['category'] for row in cursor.fetchall()]

            cursor.execute("""
                SELECT DISTINCT unnest(colors) AS value FROM products ORDER BY value
            """)
            colors = [row['value'] for row in cursor.fetchall()]

            cursor.execute("""
                SELECT DISTINCT unnest(size_options) AS value FROM products ORDER BY value
            """)
            sizes = [row['value'] for row in cursor.fetchall()]

            cursor.execute("""
                SELECT MIN(price) AS min_price, MAX(price) AS max_price FROM products
            """)
            prices = cursor.fetchone() or {}

            return FilterFacets(
                categories=categories,
                colors=colors,
                sizes=sizes,
                min_price=float(prices['min_price']) if prices.get('min_price') is not None else None,
                max_price=float(prices['max_price']) if prices.get('max_price') is not None else None,
            )

        finally:
            cursor.close()
            conn.close()
