"""
Product Domain Model

Represents a product in the StyleHub catalog.
This is the single source of truth for product data structure.
"""
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional, List
from datetime import datetime
from decimal import Decimal


class Category(str, Enum):
    """Storefront departments"""
    MEN = "Men"
    WOMEN = "Women"
    KIDS = "Kids"
    ACCESSORIES = "Accessories"


def _strip_required(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("must not be empty")
    return value


def _clean_list(values: Optional[List[str]]) -> List[str]:
    if not values:
        return []
    return [v.strip() for v in values if v and v.strip()]


class Product(BaseModel):
    """
    Product domain model - represents a product in our catalog

    Fields:
        id: Internal product ID (primary key)
        name: Product name
        description: Product description
        category: Men, Women, Kids or Accessories
        size_options: Sizes a customer can order (S, M, 2-3Y, One Size, ...)
        price: Unit price in store currency
        images: Image URLs, first one is the card image
        colors: Available colors
        stock: Units available
        featured: Shown in the featured strip on the home page
        created_at: When product was created
        updated_at: When product was last updated
    """

    id: int = Field(..., description="Internal product ID")
    name: str = Field(..., description="Product name")
    description: str = Field(..., description="Product description")
    category: Category = Field(..., description="Product category")
    size_options: List[str] = Field(default_factory=list, description="Orderable sizes")
    price: Decimal = Field(..., description="Unit price", ge=0)
    images: List[str] = Field(default_factory=list, description="Image URLs")
    colors: List[str] = Field(default_factory=list, description="Available colors")
    stock: int = Field(0, description="Units in stock", ge=0)
    featured: bool = Field(False, description="Featured on home page")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)

    @property
    def in_stock(self) -> bool:
        return self.stock > 0

    @property
    def primary_image(self) -> Optional[str]:
        return self.images[0] if self.images else None

    def to_dict(self) -> dict:
        """
        Convert to dictionary with computed fields

        Returns dict with all fields plus computed properties, Decimal as float
        """
        data = self.model_dump(mode="json")
        data['price'] = float(self.price)
        data['in_stock'] = self.in_stock
        data['primary_image'] = self.primary_image
        return data


class ProductCreate(BaseModel):
    """Schema for creating a new product"""
    name: str
    description: str
    category: Category
    size_options: List[str] = Field(default_factory=list)
    price: Decimal = Field(..., gt=0)
    images: List[str] = Field(default_factory=list)
    colors: List[str] = Field(default_factory=list)
    stock: Optional[int] = Field(None, ge=0)
    featured: bool = False

    @field_validator("name", "description")
    @classmethod
    def not_blank(cls, value: str) -> str:
        return _strip_required(value)

    @field_validator("size_options", "images", "colors", mode="before")
    @classmethod
    def clean_lists(cls, value):
        return _clean_list(value)


class ProductUpdate(BaseModel):
    """Schema for updating an existing product (PUT and PATCH are both partial)"""
    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[Category] = None
    size_options: Optional[List[str]] = None
    price: Optional[Decimal] = Field(None, gt=0)
    images: Optional[List[str]] = None
    colors: Optional[List[str]] = None
    stock: Optional[int] = Field(None, ge=0)
    featured: Optional[bool] = None

    @field_validator("name", "description")
    @classmethod
    def not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return _strip_required(value)

    @field_validator("size_options", "images", "colors", mode="before")
    @classmethod
    def clean_lists(cls, value):
        if value is None:
            return value
        return _clean_list(value)


class ProductFilters(BaseModel):
    """
    Catalog filter options

    Every supplied filter must match. `category="all"` disables the
    category filter; colors and sizes match when any listed value matches.
    """
    category: Optional[str] = None
    min_price: Optional[Decimal] = Field(None, ge=0)
    max_price: Optional[Decimal] = Field(None, ge=0)
    colors: List[str] = Field(default_factory=list)
    sizes: List[str] = Field(default_factory=list)
    search: Optional[str] = None
    featured: Optional[bool] = None

    @field_validator("colors", "sizes", mode="before")
    @classmethod
    def split_csv(cls, value):
        """Accept "Red,Blue" as well as ["Red", "Blue"]"""
        if value is None:
            return []
        if isinstance(value, str):
            value = value.split(",")
        return _clean_list(value)

    @field_validator("category", "search")
    @classmethod
    def blank_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        return value or None

    @property
    def category_filter(self) -> Optional[str]:
        if self.category and self.category.lower() != "all":
            return self.category
        return None


class FilterFacets(BaseModel):
    """Values available for the catalog filter sidebar"""
    categories: List[str]
    colors: List[str]
    sizes: List[str]
    min_price: Optional[float] = None
    max_price: Optional[float] = None
