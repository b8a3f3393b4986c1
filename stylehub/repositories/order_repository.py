"""
Order Repository - Data Access Layer for Orders

Handles all database queries for orders and returns Order domain models.
"""
from typing import List, Optional, Tuple, Dict, Any
from stylehub.domain.order import Order
from stylehub.core.database import get_db_connection_dict
from stylehub.repositories.product_repository import escape_like


ORDER_COLUMNS = """
    id, product_id, product_name, product_image, customer_name,
    phone_number, customer_address, size, color, quantity, price,
    total_amount, status, notes, created_at, updated_at
"""

UPDATABLE_COLUMNS = (
    "status", "customer_name", "phone_number", "customer_address",
    "size", "color", "quantity", "total_amount", "notes",
)


class OrderRepository:
    """
    Repository for Order data access

    All SQL queries for orders are centralized here.
    """

    @staticmethod
    def _map_row_to_order(row: dict) -> Order:
        return Order(**dict(row))

    def find_by_id(self, order_id: int) -> Optional[Order]:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {ORDER_COLUMNS}
                FROM orders
                WHERE id = %s
            """, (order_id,))

            row = cursor.fetchone()
            if not row:
                return None

            return self._map_row_to_order(row)

        finally:
            cursor.close()
            conn.close()

    def find_all(
        self,
        status: Optional[str] = None,
        search: Optional[str] = None,
        limit: int = 100,
        offset: int = 0
    ) -> Tuple[List[Order], int]:
        """
        Find orders, newest first

        Args:
            status: Filter by order status
            search: Search by customer name, phone number or product name
            limit: Maximum results to return
            offset: Number of results to skip

        Returns:
            Tuple of (list of orders, total count)
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            conditions = []
            params: List[Any] = []

            if status:
                conditions.append("status = %s")
                params.append(status)

            if search:
                conditions.append("(customer_name ILIKE %s OR phone_number ILIKE %s OR product_name ILIKE %s)")
                search_term = f"%{escape_like(search)}%"
                params.extend([search_term, search_term, search_term])

            where_clause = " AND ".join(conditions) if conditions else "1=1"

            cursor.execute(f"""
                SELECT COUNT(*) as total
                FROM orders
                WHERE {where_clause}
            """, params)
            total = cursor.fetchone()['total']

            cursor.execute(f"""
                SELECT {ORDER_COLUMNS}
                FROM orders
                WHERE {where_clause}
                ORDER BY created_at DESC, id DESC
                LIMIT %s OFFSET %s
            """, params + [limit, offset])

            orders = [self._map_row_to_order(row) for row in cursor.fetchall()]
            return orders, total

        finally:
            cursor.close()
            conn.close()

    def create(self, data: Dict[str, Any]) -> Order:
        """Insert an order with status Pending"""
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                INSERT INTO orders (
                    product_id, product_name, product_image, customer_name,
                    phone_number, customer_address, size, color, quantity,
                    price, total_amount, status, notes, created_at, updated_at
                )
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, 'Pending', %s, NOW(), NOW())
                RETURNING {ORDER_COLUMNS}
            """, (
                data['product_id'],
                data.get('product_name') or '',
                data.get('product_image') or '',
                data['customer_name'],
                data['phone_number'],
                data.get('customer_address'),
                data['size'],
                data.get('color'),
                data.get('quantity', 1),
                data.get('price', 0),
                data.get('total_amount', 0),
                data.get('notes'),
            ))

            row = cursor.fetchone()
            conn.commit()
            return self._map_row_to_order(row)

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def update(self, order_id: int, updates: Dict[str, Any]) -> Optional[Order]:
        """
        Set the supplied columns and updated_at

        Returns:
            Updated order or None if not found
        """
        fields = {k: v for k, v in updates.items() if k in UPDATABLE_COLUMNS}

        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            assignments = [f"{column} = %s" for column in fields]
            assignments.append("updated_at = NOW()")

            cursor.execute(f"""
                UPDATE orders
                SET {", ".join(assignments)}
                WHERE id = %s
                RETURNING {ORDER_COLUMNS}
            """, list(fields.values()) + [order_id])

            row = cursor.fetchone()
            if not row:
                conn.rollback()
                return None

            conn.commit()
            return self._map_row_to_order(row)

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def deliver(self, order_id: int, updates: Dict[str, Any]) -> Tuple[Optional[Order], Optional[int]]:
        """
        Move an order into Delivered and reduce its product's stock

        Both statements run in one transaction. The order row only matches
        while its status is not yet Delivered, so concurrent or repeated
        deliveries reduce stock once, and a failed stock update leaves the
        order unchanged.

        Returns:
            Tuple of (delivered order, new stock level). The order is None
            when it does not exist or was already Delivered; the stock is
            None when the product no longer exists.
        """
        fields = {k: v for k, v in updates.items() if k in UPDATABLE_COLUMNS}
        fields['status'] = 'Delivered'

        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            assignments = [f"{column} = %s" for column in fields]
            assignments.append("updated_at = NOW()")

            cursor.execute(f"""
                UPDATE orders
                SET {", ".join(assignments)}
                WHERE id = %s AND status <> 'Delivered'
                RETURNING {ORDER_COLUMNS}
            """, list(fields.values()) + [order_id])

            row = cursor.fetchone()
            if not row:
                conn.rollback()
                return None, None

            cursor.execute("""
                UPDATE products
                SET stock = GREATEST(0, stock - %s),
                    updated_at = NOW()
                WHERE id = %s
                RETURNING stock
            """, (row['quantity'], row['product_id']))

            stock_row = cursor.fetchone()
            conn.commit()
            return self._map_row_to_order(row), (stock_row['stock'] if stock_row else None)

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def delete(self, order_id: int) -> bool:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("DELETE FROM orders WHERE id = %s", (order_id,))
            deleted = cursor.rowcount > 0
            conn.commit()
            return deleted

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def get_stats(self) -> dict:
        """
        Order counts by status and delivered revenue

        Returns:
            Dict with totals, by_status and delivered_revenue
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT status, COUNT(*) as count
                FROM orders
                GROUP BY status
            """)
            by_status = {row['status']: row['count'] for row in cursor.fetchall()}

            cursor.execute("""
                SELECT COALESCE(SUM(total_amount), 0) as revenue
                FROM orders
                WHERE status = 'Delivered'
            """)
            revenue = cursor.fetchone()['revenue']

            return {
                'total': sum(by_status.values()),
                'by_status': by_status,
                'delivered_revenue': float(revenue),
            }

        finally:
            cursor.close()
            conn.close()
