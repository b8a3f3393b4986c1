"""
Unit tests for BannerRepository
"""
import pytest
from unittest.mock import patch, MagicMock
from psycopg2.extras import Json

from stylehub.repositories.banner_repository import BannerRepository
from stylehub.domain.banner import Banner


@pytest.fixture
def mock_db():
    with patch('stylehub.repositories.banner_repository.get_db_connection_dict') as mock_get_conn:
        mock_conn = MagicMock()
        mock_cursor = MagicMock()
        mock_get_conn.return_value = mock_conn
        mock_conn.cursor.return_value = mock_cursor
        yield mock_conn, mock_cursor


class TestBannerRepository:
    """Test BannerRepository methods"""

    def test_find_all_orders_by_display_order(self, mock_db, sample_banner_row):
        _, mock_cursor = mock_db
        mock_cursor.fetchall.return_value = [sample_banner_row]

        banners = BannerRepository().find_all()

        query = mock_cursor.execute.call_args[0][0]
        assert "ORDER BY display_order ASC" in query
        assert "is_active = TRUE" not in query
        assert isinstance(banners[0], Banner)
        assert len(banners[0].layout) == 5

    def test_find_all_active_only(self, mock_db):
        _, mock_cursor = mock_db
        mock_cursor.fetchall.return_value = []

        BannerRepository().find_all(active_only=True)

        assert "is_active = TRUE" in mock_cursor.execute.call_args[0][0]

    def test_find_by_id_fills_missing_json(self, mock_db, sample_banner_row):
        _, mock_cursor = mock_db
        sample_banner_row.update(layout=None, background_offset=None)
        mock_cursor.fetchone.return_value = sample_banner_row

        banner = BannerRepository().find_by_id(3)

        assert banner.layout == []
        assert banner.background_offset.x == 50

    def test_create_wraps_json_columns(self, mock_db, sample_banner_row):
        mock_conn, mock_cursor = mock_db
        mock_cursor.fetchone.return_value = sample_banner_row

        BannerRepository().create({
            'title': 'Brand Fest',
            'image_url': 'https://images.example.com/banner.jpg',
            'layout': [],
            'background_offset': {'x': 40, 'y': 60},
            'unknown_column': 'ignored',
        })

        query, params = mock_cursor.execute.call_args[0]
        assert "unknown_column" not in query
        assert params[0] == 'Brand Fest'
        assert isinstance(params[2], Json)
        assert isinstance(params[3], Json)
        mock_conn.commit.assert_called_once()

    def test_update_layout_only(self, mock_db, sample_banner_row):
        _, mock_cursor = mock_db
        mock_cursor.fetchone.return_value = sample_banner_row

        BannerRepository().update(3, {'layout': sample_banner_row['layout']})

        query, params = mock_cursor.execute.call_args[0]
        assert "layout = %s" in query
        assert isinstance(params[0], Json)
        assert params[1] == 3

    def test_update_missing_banner(self, mock_db):
        _, mock_cursor = mock_db
        mock_cursor.fetchone.return_value = None

        assert BannerRepository().update(99, {'title': 'x'}) is None

    def test_delete(self, mock_db):
        _, mock_cursor = mock_db
        mock_cursor.rowcount = 1

        assert BannerRepository().delete(3) is True
