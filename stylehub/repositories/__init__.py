"""
Repository Layer - Data Access

This layer handles all database queries and returns domain models.
Repositories abstract away SQL details from business logic.
"""
from stylehub.repositories.product_repository import ProductRepository
from stylehub.repositories.order_repository import OrderRepository
from stylehub.repositories.banner_repository import BannerRepository

__all__ = [
    'ProductRepository',
    'OrderRepository',
    'BannerRepository'
]
