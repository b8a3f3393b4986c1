"""
Domain Layer - Business Entities

This layer contains Pydantic models representing storefront entities.
These models enforce type safety and validation across the application.
"""
from stylehub.domain.product import Product, ProductCreate, ProductUpdate, ProductFilters, Category
from stylehub.domain.order import Order, OrderCreate, OrderUpdate, OrderStatus
from stylehub.domain.banner import Banner, BannerPayload, BannerElement

__all__ = [
    'Product', 'ProductCreate', 'ProductUpdate', 'ProductFilters', 'Category',
    'Order', 'OrderCreate', 'OrderUpdate', 'OrderStatus',
    'Banner', 'BannerPayload', 'BannerElement'
]
