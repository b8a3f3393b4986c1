"""
Order Service
WhatsApp checkout order placement and admin order management
"""
import logging
from typing import List, Optional, Tuple

from stylehub.core.exceptions import NotFoundError, InsufficientStockError, ValidationFailedError
from stylehub.domain.order import Order, OrderCreate, OrderUpdate, OrderStatus
from stylehub.repositories.order_repository import OrderRepository
from stylehub.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class OrderService:
    """
    Service for orders

    Handles:
    - Placing orders (product lookup, stock check, price snapshot)
    - Admin status changes; stock is reduced once, when an order
      first becomes Delivered
    - Deletion and stats
    """

    def __init__(
        self,
        order_repository: Optional[OrderRepository] = None,
        product_repository: Optional[ProductRepository] = None
    ):
        self.orders = order_repository or OrderRepository()
        self.products = product_repository or ProductRepository()

    def place_order(self, payload: OrderCreate) -> Order:
        """
        Persist a new Pending order

        Raises:
            NotFoundError: product does not exist
            ValidationFailedError: size not offered by the product
            InsufficientStockError: quantity exceeds stock
        """
        product = self.products.find_by_id(payload.product_id)
        if not product:
            raise NotFoundError(f"Product {payload.product_id} not found")

        if product.size_options and payload.size not in product.size_options:
            raise ValidationFailedError(
                f"Size {payload.size} is not available for {product.name}"
            )

        if payload.quantity > product.stock:
            raise InsufficientStockError(product.name, product.stock)

        price = product.price
        data = payload.model_dump()
        data.update(
            product_name=product.name,
            product_image=product.primary_image or '',
            price=price,
            total_amount=price * payload.quantity,
        )

        order = self.orders.create(data)
        logger.info(f"Order {order.id} placed for product {product.id} x{order.quantity}")
        return order

    def list_orders(
        self,
        status: Optional[str] = None,
        search: Optional[str] = None,
        limit: int = 100,
        offset: int = 0
    ) -> Tuple[List[Order], int]:
        return self.orders.find_all(status=status, search=search, limit=limit, offset=offset)

    def get_order(self, order_id: int) -> Order:
        order = self.orders.find_by_id(order_id)
        if not order:
            raise NotFoundError(f"Order {order_id} not found")
        return order

    def update_order(self, order_id: int, payload: OrderUpdate) -> Order:
        existing = self.get_order(order_id)
        updates = payload.model_dump(exclude_unset=True, exclude_none=True)

        if 'status' in updates:
            updates['status'] = payload.status.value

        if 'quantity' in updates:
            updates['total_amount'] = existing.price * updates['quantity']

        if updates.get('status') == OrderStatus.DELIVERED.value:
            order, new_stock = self.orders.deliver(order_id, updates)
            if order:
                self._log_delivery(order, new_stock)
                return order
            # Already Delivered (or gone); stock is left alone

        order = self.orders.update(order_id, updates)
        if not order:
            raise NotFoundError(f"Order {order_id} not found")
        return order

    def _log_delivery(self, order: Order, new_stock: Optional[int]) -> None:
        if new_stock is None:
            logger.warning(f"Order {order.id} delivered but product {order.product_id} no longer exists")
            return
        logger.info(f"Order {order.id} delivered: product {order.product_id} stock now {new_stock}")

    def delete_order(self, order_id: int) -> None:
        if not self.orders.delete(order_id):
            raise NotFoundError(f"Order {order_id} not found")

    def get_stats(self) -> dict:
        return self.orders.get_stats()
