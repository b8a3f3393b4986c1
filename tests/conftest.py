"""
Pytest fixtures and configuration for StyleHub backend tests

Shared database rows, domain objects and an API client. No test needs a
running PostgreSQL: repositories are exercised with mocked connections
and API tests override the service dependencies.
"""
import pytest
from datetime import datetime
from decimal import Decimal
from fastapi.testclient import TestClient

from stylehub.core.auth import create_access_token
from stylehub.core.rate_limit import rate_limiter
from stylehub.domain.banner import Banner
from stylehub.domain.order import Order
from stylehub.domain.product import Product
from stylehub.services.banner_layout import default_layout


@pytest.fixture(autouse=True)
def reset_rate_limiter():
    """Rate limit counters are process-global; start every test clean"""
    rate_limiter.reset()
    yield
    rate_limiter.reset()


@pytest.fixture
def sample_product_row():
    """
    Provides a products table row as returned by RealDictCursor
    """
    return {
        'id': 1,
        'name': 'Classic White T-Shirt',
        'description': 'Premium cotton t-shirt with a comfortable fit.',
        'category': 'Men',
        'size_options': ['S', 'M', 'L', 'XL'],
        'price': Decimal('599.00'),
        'images': [
            'https://images.example.com/tshirt-front.jpg',
            'https://images.example.com/tshirt-back.jpg',
        ],
        'colors': ['White', 'Black'],
        'stock': 50,
        'featured': True,
        'created_at': datetime(2025, 1, 10, 12, 0, 0),
        'updated_at': None,
    }


@pytest.fixture
def sample_product(sample_product_row):
    return Product(**sample_product_row)


@pytest.fixture
def sample_order_row():
    """
    Provides an orders table row as returned by RealDictCursor
    """
    return {
        'id': 7,
        'product_id': 1,
        'product_name': 'Classic White T-Shirt',
        'product_image': 'https://images.example.com/tshirt-front.jpg',
        'customer_name': 'Asha Rao',
        'phone_number': '9876543210',
        'customer_address': '12 MG Road, Pune',
        'size': 'M',
        'color': 'White',
        'quantity': 2,
        'price': Decimal('599.00'),
        'total_amount': Decimal('1198.00'),
        'status': 'Pending',
        'notes': None,
        'created_at': datetime(2025, 1, 11, 9, 30, 0),
        'updated_at': None,
    }


@pytest.fixture
def sample_order(sample_order_row):
    return Order(**sample_order_row)


@pytest.fixture
def sample_banner_row():
    """
    Provides a banners table row; JSONB columns come back as lists/dicts
    """
    return {
        'id': 3,
        'title': 'Brand Fest',
        'subtitle': 'Min 50% off on top brands',
        'image_url': 'https://images.example.com/banner.jpg',
        'link_url': '/products?category=Women',
        'is_active': True,
        'display_order': 1,
        'text_color': '#ffffff',
        'font_size': 'text-2xl',
        'font_weight': 'font-normal',
        'font_style': 'not-italic',
        'text_align': 'text-center',
        'background_color': 'transparent',
        'layout': [element.model_dump() for element in default_layout()],
        'background_image': None,
        'background_offset': {'x': 50, 'y': 50},
        'created_at': datetime(2025, 1, 5, 8, 0, 0),
        'updated_at': None,
    }


@pytest.fixture
def sample_banner(sample_banner_row):
    return Banner(**sample_banner_row)


@pytest.fixture
def admin_headers():
    """Authorization header carrying a valid admin token"""
    token = create_access_token("admin")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def app():
    """
    The FastAPI application with dependency overrides cleared after each test

    The lifespan (schema bootstrap) is not triggered because the client is
    not used as a context manager.
    """
    from stylehub.main import app as fastapi_app

    fastapi_app.dependency_overrides.clear()
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)
