"""
Order Domain Models

Represents WhatsApp checkout orders placed from the storefront.
"""
import re
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional
from datetime import datetime
from decimal import Decimal


# 10-digit Indian mobile number, no country code
PHONE_PATTERN = re.compile(r"^[6-9]\d{9}$")


class OrderStatus(str, Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


def is_valid_phone(phone_number: str) -> bool:
    return bool(PHONE_PATTERN.match(phone_number or ""))


class Order(BaseModel):
    """
    Order domain model - a single-product order placed via WhatsApp checkout

    Product name, image and price are snapshots taken when the order was
    placed, so later catalog edits do not rewrite order history.
    """

    id: int = Field(..., description="Order ID")
    product_id: int = Field(..., description="Ordered product")
    product_name: str = Field("", description="Product name at order time")
    product_image: str = Field("", description="Product image at order time")
    customer_name: str = Field(..., description="Customer name")
    phone_number: str = Field(..., description="Customer mobile number")
    customer_address: Optional[str] = Field(None, description="Delivery address")
    size: str = Field(..., description="Selected size")
    color: Optional[str] = Field(None, description="Selected color")
    quantity: int = Field(1, description="Units ordered", ge=1)
    price: Decimal = Field(Decimal("0"), description="Unit price at order time", ge=0)
    total_amount: Decimal = Field(Decimal("0"), description="price x quantity", ge=0)
    status: OrderStatus = Field(OrderStatus.PENDING, description="Fulfilment status")
    notes: Optional[str] = Field(None, description="Special instructions")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)

    def to_dict(self) -> dict:
        """Convert to dictionary with Decimal to float conversion"""
        data = self.model_dump(mode="json")
        data['price'] = float(self.price)
        data['total_amount'] = float(self.total_amount)
        return data


class OrderCreate(BaseModel):
    """Checkout form submitted by the storefront"""
    product_id: int
    customer_name: str
    phone_number: str
    size: str
    quantity: int = Field(1, ge=1)
    customer_address: Optional[str] = None
    color: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("customer_name", "size")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("phone_number")
    @classmethod
    def valid_phone(cls, value: str) -> str:
        value = value.strip()
        if not is_valid_phone(value):
            raise ValueError("Invalid phone number format")
        return value


class OrderUpdate(BaseModel):
    """Admin edit of an order; only supplied fields change"""
    status: Optional[OrderStatus] = None
    customer_name: Optional[str] = None
    phone_number: Optional[str] = None
    customer_address: Optional[str] = None
    size: Optional[str] = None
    color: Optional[str] = None
    quantity: Optional[int] = Field(None, ge=1)
    notes: Optional[str] = None

    @field_validator("phone_number")
    @classmethod
    def valid_phone(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        value = value.strip()
        if not is_valid_phone(value):
            raise ValueError("Invalid phone number format")
        return value
