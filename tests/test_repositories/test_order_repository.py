"""
Unit tests for OrderRepository
"""
import pytest
from unittest.mock import patch, MagicMock
from decimal import Decimal

from stylehub.repositories.order_repository import OrderRepository
from stylehub.domain.order import Order, OrderStatus


@pytest.fixture
def mock_db():
    with patch('stylehub.repositories.order_repository.get_db_connection_dict') as mock_get_conn:
        mock_conn = MagicMock()
        mock_cursor = MagicMock()
        mock_get_conn.return_value = mock_conn
        mock_conn.cursor.return_value = mock_cursor
        yield mock_conn, mock_cursor


class TestOrderRepository:
    """Test OrderRepository methods"""

    def test_find_by_id_returns_order(self, mock_db, sample_order_row):
        _, mock_cursor = mock_db
        mock_cursor.fetchone.return_value = sample_order_row

        order = OrderRepository().find_by_id(7)

        assert isinstance(order, Order)
        assert order.status == OrderStatus.PENDING
        assert order.total_amount == Decimal('1198.00')

    def test_find_all_filters_by_status_and_search(self, mock_db, sample_order_row):
        # Arrange
        _, mock_cursor = mock_db
        mock_cursor.fetchone.return_value = {'total': 1}
        mock_cursor.fetchall.return_value = [sample_order_row]

        # Act
        orders, total = OrderRepository().find_all(status='Pending', search='asha', limit=5)

        # Assert
        assert total == 1
        assert orders[0].customer_name == 'Asha Rao'

        list_query, list_params = mock_cursor.execute.call_args_list[1][0]
        assert "status = %s" in list_query
        assert "ORDER BY created_at DESC" in list_query
        assert list_params == ['Pending', '%asha%', '%asha%', '%asha%', 5, 0]

    def test_create_sets_pending_status(self, mock_db, sample_order_row):
        mock_conn, mock_cursor = mock_db
        mock_cursor.fetchone.return_value = sample_order_row

        order = OrderRepository().create({
            'product_id': 1,
            'product_name': 'Classic White T-Shirt',
            'product_image': 'https://images.example.com/tshirt-front.jpg',
            'customer_name': 'Asha Rao',
            'phone_number': '9876543210',
            'size': 'M',
            'quantity': 2,
            'price': Decimal('599.00'),
            'total_amount': Decimal('1198.00'),
        })

        query, params = mock_cursor.execute.call_args[0]
        assert "'Pending'" in query
        assert params[0] == 1
        assert params[8] == 2
        assert order.id == 7
        mock_conn.commit.assert_called_once()

    def test_update_returns_none_when_missing(self, mock_db):
        mock_conn, mock_cursor = mock_db
        mock_cursor.fetchone.return_value = None

        assert OrderRepository().update(99, {'status': 'Delivered'}) is None
        mock_conn.rollback.assert_called_once()

    def test_update_sets_status(self, mock_db, sample_order_row):
        _, mock_cursor = mock_db
        sample_order_row['status'] = 'Delivered'
        mock_cursor.fetchone.return_value = sample_order_row

        order = OrderRepository().update(7, {'status': 'Delivered', 'product_id': 5})

        query, params = mock_cursor.execute.call_args[0]
        assert "status = %s" in query
        assert params == ['Delivered', 7]
        assert order.status == OrderStatus.DELIVERED

    def test_deliver_updates_order_and_stock_in_one_transaction(self, mock_db, sample_order_row):
        # Arrange
        mock_conn, mock_cursor = mock_db
        delivered_row = {**sample_order_row, 'status': 'Delivered'}
        mock_cursor.fetchone.side_effect = [delivered_row, {'stock': 48}]

        # Act
        order, new_stock = OrderRepository().deliver(7, {'status': 'Delivered'})

        # Assert
        assert order.status == OrderStatus.DELIVERED
        assert new_stock == 48

        order_query, order_params = mock_cursor.execute.call_args_list[0][0]
        assert "status <> 'Delivered'" in order_query
        assert order_params == ['Delivered', 7]

        stock_query, stock_params = mock_cursor.execute.call_args_list[1][0]
        assert "GREATEST(0, stock - %s)" in stock_query
        assert stock_params == (2, 1)

        mock_conn.commit.assert_called_once()

    def test_deliver_already_delivered_leaves_stock(self, mock_db):
        mock_conn, mock_cursor = mock_db
        mock_cursor.fetchone.return_value = None

        assert OrderRepository().deliver(7, {'status': 'Delivered'}) == (None, None)
        assert mock_cursor.execute.call_count == 1
        mock_conn.rollback.assert_called_once()
        mock_conn.commit.assert_not_called()

    def test_deliver_missing_product_still_delivers(self, mock_db, sample_order_row):
        _, mock_cursor = mock_db
        mock_cursor.fetchone.side_effect = [{**sample_order_row, 'status': 'Delivered'}, None]

        order, new_stock = OrderRepository().deliver(7, {'status': 'Delivered'})

        assert order.id == 7
        assert new_stock is None

    def test_deliver_rolls_back_order_when_stock_update_fails(self, mock_db, sample_order_row):
        # Arrange
        mock_conn, mock_cursor = mock_db
        mock_cursor.fetchone.return_value = {**sample_order_row, 'status': 'Delivered'}
        mock_cursor.execute.side_effect = [None, Exception("deadlock detected")]

        # Act / Assert
        with pytest.raises(Exception, match="deadlock detected"):
            OrderRepository().deliver(7, {'status': 'Delivered'})

        mock_conn.commit.assert_not_called()
        mock_conn.rollback.assert_called_once()
        mock_conn.close.assert_called_once()

    def test_delete(self, mock_db):
        _, mock_cursor = mock_db
        mock_cursor.rowcount = 0

        assert OrderRepository().delete(99) is False

    def test_get_stats(self, mock_db):
        _, mock_cursor = mock_db
        mock_cursor.fetchall.return_value = [
            {'status': 'Pending', 'count': 3},
            {'status': 'Delivered', 'count': 2},
        ]
        mock_cursor.fetchone.return_value = {'revenue': Decimal('2396.00')}

        stats = OrderRepository().get_stats()

        assert stats == {
            'total': 5,
            'by_status': {'Pending': 3, 'Delivered': 2},
            'delivered_revenue': 2396.0,
        }
