"""
WhatsApp Checkout
Formats an order as a WhatsApp message and builds the wa.me deep link
the storefront opens after an order is placed.
"""
from decimal import Decimal
from typing import Optional, Union
from urllib.parse import quote

from stylehub.core.config import settings
from stylehub.domain.order import Order


WA_ME_BASE_URL = "https://wa.me"


def format_amount(amount: Union[Decimal, float, int], currency: Optional[str] = None) -> str:
    """₹1,299 style amount; paise shown only when non-zero"""
    currency = settings.CURRENCY_SYMBOL if currency is None else currency
    value = Decimal(str(amount))
    if value == value.to_integral_value():
        return f"{currency}{int(value):,}"
    return f"{currency}{value:,.2f}"


def build_whatsapp_message(order: Order, store_name: Optional[str] = None) -> str:
    store_name = store_name or settings.STORE_NAME

    lines = [
        f"🛍️ *New Order from {store_name}*",
        "",
        f"📦 *Product:* {order.product_name}",
        f"💰 *Price:* {format_amount(order.price)}",
        f"📊 *Quantity:* {order.quantity}",
    ]
    if order.size:
        lines.append(f"📏 *Size:* {order.size}")
    if order.color:
        lines.append(f"🎨 *Color:* {order.color}")
    lines.append(f"💵 *Total Amount:* {format_amount(order.total_amount)}")

    lines += [
        "",
        "👤 *Customer Details:*",
        f"*Name:* {order.customer_name}",
        f"*Phone:* {order.phone_number}",
    ]
    if order.customer_address:
        lines.append(f"*Address:* {order.customer_address}")

    if order.notes:
        lines += ["", f"📝 *Special Instructions:* {order.notes}"]

    lines += ["", f"*Order ID:* {order.id}"]
    return "\n".join(lines)


def build_whatsapp_url(order: Order, phone_number: Optional[str] = None) -> str:
    """wa.me link with the order message pre-filled"""
    phone_number = phone_number or settings.WHATSAPP_NUMBER
    message = build_whatsapp_message(order)
    return f"{WA_ME_BASE_URL}/{phone_number}?text={quote(message, safe='')}"
