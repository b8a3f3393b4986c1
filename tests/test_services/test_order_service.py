"""
Unit tests for OrderService (checkout and admin updates)
"""
import pytest
from unittest.mock import MagicMock
from decimal import Decimal

from stylehub.core.exceptions import NotFoundError, InsufficientStockError, ValidationFailedError
from stylehub.domain.order import OrderCreate, OrderUpdate, OrderStatus
from stylehub.repositories.order_repository import OrderRepository
from stylehub.repositories.product_repository import ProductRepository
from stylehub.services.order_service import OrderService


@pytest.fixture
def order_repo():
    return MagicMock(spec=OrderRepository)


@pytest.fixture
def product_repo():
    return MagicMock(spec=ProductRepository)


@pytest.fixture
def service(order_repo, product_repo):
    return OrderService(order_repository=order_repo, product_repository=product_repo)


@pytest.fixture
def checkout():
    return OrderCreate(
        product_id=1,
        customer_name='Asha Rao',
        phone_number='9876543210',
        size='M',
        color='White',
        quantity=2,
        customer_address='12 MG Road, Pune',
    )


class TestPlaceOrder:
    """Test order placement"""

    def test_snapshots_product_and_computes_total(self, service, order_repo, product_repo,
                                                  sample_product, sample_order, checkout):
        # Arrange
        product_repo.find_by_id.return_value = sample_product
        order_repo.create.return_value = sample_order

        # Act
        order = service.place_order(checkout)

        # Assert
        data = order_repo.create.call_args[0][0]
        assert data['product_name'] == 'Classic White T-Shirt'
        assert data['product_image'] == 'https://images.example.com/tshirt-front.jpg'
        assert data['price'] == Decimal('599.00')
        assert data['total_amount'] == Decimal('1198.00')
        assert data['size'] == 'M'
        assert order is sample_order

    def test_product_without_images_gets_empty_image(self, service, order_repo, product_repo,
                                                     sample_product, sample_order, checkout):
        product_repo.find_by_id.return_value = sample_product.model_copy(update={'images': []})
        order_repo.create.return_value = sample_order

        service.place_order(checkout)

        assert order_repo.create.call_args[0][0]['product_image'] == ''

    def test_missing_product(self, service, order_repo, product_repo, checkout):
        product_repo.find_by_id.return_value = None

        with pytest.raises(NotFoundError):
            service.place_order(checkout)

        order_repo.create.assert_not_called()

    def test_quantity_above_stock(self, service, order_repo, product_repo, sample_product, checkout):
        product_repo.find_by_id.return_value = sample_product.model_copy(update={'stock': 1})

        with pytest.raises(InsufficientStockError) as exc_info:
            service.place_order(checkout)

        assert exc_info.value.available == 1
        assert exc_info.value.status_code == 400
        order_repo.create.assert_not_called()

    def test_size_not_offered(self, service, product_repo, sample_product, checkout):
        product_repo.find_by_id.return_value = sample_product
        checkout.size = 'XXXL'

        with pytest.raises(ValidationFailedError, match="Size XXXL"):
            service.place_order(checkout)

    def test_any_size_when_product_has_no_size_options(self, service, order_repo, product_repo,
                                                       sample_product, sample_order, checkout):
        product_repo.find_by_id.return_value = sample_product.model_copy(update={'size_options': []})
        order_repo.create.return_value = sample_order
        checkout.size = 'One Size'

        service.place_order(checkout)

        order_repo.create.assert_called_once()


class TestUpdateOrder:
    """Test admin order updates and stock reduction"""

    def test_delivered_goes_through_atomic_delivery(self, service, order_repo, sample_order):
        # Arrange
        delivered = sample_order.model_copy(update={'status': OrderStatus.DELIVERED})
        order_repo.find_by_id.return_value = sample_order
        order_repo.deliver.return_value = (delivered, 48)

        # Act
        result = service.update_order(7, OrderUpdate(status='Delivered'))

        # Assert
        order_repo.deliver.assert_called_once_with(7, {'status': 'Delivered'})
        order_repo.update.assert_not_called()
        assert result is delivered

    def test_repeated_delivery_only_reduces_stock_once(self, service, order_repo, sample_order):
        """Both requests read Pending; only the first wins the status transition"""
        # Arrange
        delivered = sample_order.model_copy(update={'status': OrderStatus.DELIVERED})
        order_repo.find_by_id.return_value = sample_order
        order_repo.deliver.side_effect = [(delivered, 48), (None, None)]
        order_repo.update.return_value = delivered

        # Act
        first = service.update_order(7, OrderUpdate(status='Delivered'))
        second = service.update_order(7, OrderUpdate(status='Delivered'))

        # Assert
        assert first is delivered
        assert second is delivered
        assert order_repo.deliver.call_count == 2
        order_repo.update.assert_called_once_with(7, {'status': 'Delivered'})

    def test_failed_delivery_is_not_committed_separately(self, service, order_repo, sample_order):
        order_repo.find_by_id.return_value = sample_order
        order_repo.deliver.side_effect = Exception("connection lost")

        with pytest.raises(Exception, match="connection lost"):
            service.update_order(7, OrderUpdate(status='Delivered'))

        order_repo.update.assert_not_called()

    def test_other_status_does_not_touch_stock(self, service, order_repo, sample_order):
        order_repo.find_by_id.return_value = sample_order
        order_repo.update.return_value = sample_order

        service.update_order(7, OrderUpdate(status='Confirmed'))

        order_repo.deliver.assert_not_called()
        order_repo.update.assert_called_once_with(7, {'status': 'Confirmed'})

    def test_delivered_product_deleted_meanwhile(self, service, order_repo, sample_order):
        delivered = sample_order.model_copy(update={'status': OrderStatus.DELIVERED})
        order_repo.find_by_id.return_value = sample_order
        order_repo.deliver.return_value = (delivered, None)

        assert service.update_order(7, OrderUpdate(status='Delivered')) is delivered

    def test_delivered_with_quantity_change_passes_new_total(self, service, order_repo, sample_order):
        delivered = sample_order.model_copy(update={'status': OrderStatus.DELIVERED, 'quantity': 3})
        order_repo.find_by_id.return_value = sample_order
        order_repo.deliver.return_value = (delivered, 47)

        service.update_order(7, OrderUpdate(status='Delivered', quantity=3))

        order_repo.deliver.assert_called_once_with(
            7, {'status': 'Delivered', 'quantity': 3, 'total_amount': Decimal('1797.00')}
        )

    def test_quantity_change_recomputes_total(self, service, order_repo, sample_order):
        order_repo.find_by_id.return_value = sample_order
        order_repo.update.return_value = sample_order

        service.update_order(7, OrderUpdate(quantity=3))

        order_repo.update.assert_called_once_with(7, {'quantity': 3, 'total_amount': Decimal('1797.00')})

    def test_missing_order(self, service, order_repo):
        order_repo.find_by_id.return_value = None

        with pytest.raises(NotFoundError, match="Order 99 not found"):
            service.update_order(99, OrderUpdate(status='Cancelled'))

    def test_delete_missing_order(self, service, order_repo):
        order_repo.delete.return_value = False

        with pytest.raises(NotFoundError):
            service.delete_order(99)
