"""
Catalog Seeding
Sample products loaded into an empty catalog (home page first run,
scripts/seed_database.py)
"""
import logging
from typing import Optional

from stylehub.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)


SAMPLE_PRODUCTS = [
    {
        "name": "Classic White T-Shirt",
        "description": "Premium cotton t-shirt with a comfortable fit. Perfect for everyday wear. "
                       "Made from 100% organic cotton.",
        "category": "Men",
        "size_options": ["S", "M", "L", "XL", "XXL"],
        "price": 599,
        "images": ["https://images.unsplash.com/photo-1521572163474-6864f9cf17ab?w=400&h=400&fit=crop"],
        "colors": ["White", "Black", "Gray"],
        "stock": 50,
        "featured": True,
    },
    {
        "name": "Denim Jacket",
        "description": "Stylish denim jacket with a modern cut. Great for layering. "
                       "Features classic button closure and chest pockets.",
        "category": "Women",
        "size_options": ["XS", "S", "M", "L", "XL"],
        "price": 2499,
        "images": ["https://images.unsplash.com/photo-1544966503-7cc5ac882d5f?w=400&h=400&fit=crop"],
        "colors": ["Blue", "Black"],
        "stock": 30,
        "featured": True,
    },
    {
        "name": "Kids Cartoon T-Shirt",
        "description": "Fun and colorful t-shirt with cartoon prints. Soft and comfortable for kids. "
                       "Machine washable.",
        "category": "Kids",
        "size_options": ["2-3Y", "4-5Y", "6-7Y", "8-9Y", "10-11Y"],
        "price": 399,
        "images": ["https://images.unsplash.com/photo-1503944583220-79d8926ad5e2?w=400&h=400&fit=crop"],
        "colors": ["Red", "Blue", "Yellow"],
        "stock": 40,
        "featured": False,
    },
    {
        "name": "Leather Handbag",
        "description": "Elegant leather handbag with multiple compartments. Perfect for work or casual "
                       "outings. Genuine leather construction.",
        "category": "Accessories",
        "size_options": ["One Size"],
        "price": 3999,
        "images": ["https://images.unsplash.com/photo-1553062407-98eeb64c6a62?w=400&h=400&fit=crop"],
        "colors": ["Brown", "Black", "Tan"],
        "stock": 20,
        "featured": True,
    },
    {
        "name": "Formal Shirt",
        "description": "Professional formal shirt with a crisp finish. Ideal for office wear. "
                       "Non-iron fabric for easy care.",
        "category": "Men",
        "size_options": ["S", "M", "L", "XL", "XXL"],
        "price": 1299,
        "images": ["https://images.unsplash.com/photo-1596755094514-f87e34085b2c?w=400&h=400&fit=crop"],
        "colors": ["White", "Blue", "Light Blue"],
        "stock": 35,
        "featured": False,
    },
    {
        "name": "Summer Dress",
        "description": "Light and breezy summer dress with floral patterns. Perfect for warm weather. "
                       "Comfortable fit with adjustable straps.",
        "category": "Women",
        "size_options": ["XS", "S", "M", "L", "XL"],
        "price": 1899,
        "images": ["https://images.unsplash.com/photo-1515372039744-b8f02a3ae446?w=400&h=400&fit=crop"],
        "colors": ["Pink", "Yellow", "White"],
        "stock": 25,
        "featured": False,
    },
    {
        "name": "Sneakers",
        "description": "Comfortable running sneakers with excellent cushioning. Perfect for daily "
                       "workouts and casual wear.",
        "category": "Accessories",
        "size_options": ["6", "7", "8", "9", "10", "11"],
        "price": 2799,
        "images": ["https://images.unsplash.com/photo-1549298916-b41d501d3772?w=400&h=400&fit=crop"],
        "colors": ["White", "Black", "Red"],
        "stock": 45,
        "featured": True,
    },
    {
        "name": "Hoodie",
        "description": "Cozy hoodie with soft fleece lining. Perfect for cold weather. "
                       "Features kangaroo pocket and adjustable hood.",
        "category": "Men",
        "size_options": ["S", "M", "L", "XL", "XXL"],
        "price": 1799,
        "images": ["https://images.unsplash.com/photo-1556821840-3a63f95609a7?w=400&h=400&fit=crop"],
        "colors": ["Gray", "Black", "Navy"],
        "stock": 30,
        "featured": False,
    },
]


def seed_products(product_repository: Optional[ProductRepository] = None) -> dict:
    """
    Insert SAMPLE_PRODUCTS when the catalog is empty

    Returns:
        Dict with message, inserted_count and created flag
    """
    repo = product_repository or ProductRepository()

    existing = repo.count()
    if existing > 0:
        logger.info(f"Seed skipped: {existing} products already present")
        return {"message": "Products already seeded", "inserted_count": 0, "created": False}

    inserted = repo.insert_many(SAMPLE_PRODUCTS)
    logger.info(f"Seeded {inserted} sample products")
    return {"message": "Database seeded successfully", "inserted_count": inserted, "created": True}
