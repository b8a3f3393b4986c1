"""
Orders API Endpoints
WhatsApp checkout for customers and order management for admins
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import Optional

from stylehub.core.auth import AdminUser, require_admin
from stylehub.core.exceptions import StorefrontError
from stylehub.core.rate_limit import order_rate_limit
from stylehub.domain.order import OrderCreate, OrderUpdate, OrderStatus
from stylehub.services.order_service import OrderService
from stylehub.services.whatsapp_service import build_whatsapp_url

logger = logging.getLogger(__name__)

router = APIRouter()


def get_order_service() -> OrderService:
    return OrderService()


@router.post("/", status_code=status.HTTP_201_CREATED, dependencies=[Depends(order_rate_limit)])
async def place_order(payload: OrderCreate, service: OrderService = Depends(get_order_service)):
    """
    Place an order from the storefront

    Returns the stored order and the WhatsApp link that carries the
    order details to the store.
    """
    try:
        order = service.place_order(payload)
        return {
            "status": "success",
            "data": order.to_dict(),
            "whatsapp_url": build_whatsapp_url(order)
        }

    except (HTTPException, StorefrontError):
        raise
    except Exception as e:
        logger.error(f"Error creating order: {e}")
        raise HTTPException(status_code=500, detail=f"Error creating order: {str(e)}")


@router.get("/")
async def get_orders(
    status_filter: Optional[OrderStatus] = Query(None, alias="status", description="Filter by order status"),
    search: Optional[str] = Query(None, description="Search by customer name, phone or product"),
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    admin: AdminUser = Depends(require_admin),
    service: OrderService = Depends(get_order_service)
):
    try:
        orders, total = service.list_orders(
            status=status_filter.value if status_filter else None,
            search=search,
            limit=limit,
            offset=offset
        )

        return {
            "status": "success",
            "total": total,
            "limit": limit,
            "offset": offset,
            "count": len(orders),
            "data": [order.to_dict() for order in orders]
        }

    except Exception as e:
        logger.error(f"Error fetching orders: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching orders: {str(e)}")


@router.get("/stats")
async def get_order_stats(
    admin: AdminUser = Depends(require_admin),
    service: OrderService = Depends(get_order_service)
):
    """
    Order counts by status and revenue from delivered orders
    """
    try:
        return {"status": "success", "data": service.get_stats()}

    except Exception as e:
        logger.error(f"Error fetching order stats: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching stats: {str(e)}")


@router.get("/{order_id}")
async def get_order(
    order_id: int,
    admin: AdminUser = Depends(require_admin),
    service: OrderService = Depends(get_order_service)
):
    try:
        order = service.get_order(order_id)
        return {"status": "success", "data": order.to_dict()}

    except (HTTPException, StorefrontError):
        raise
    except Exception as e:
        logger.error(f"Error fetching order {order_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching order: {str(e)}")


@router.get("/{order_id}/whatsapp")
async def get_order_whatsapp_link(
    order_id: int,
    admin: AdminUser = Depends(require_admin),
    service: OrderService = Depends(get_order_service)
):
    try:
        order = service.get_order(order_id)
        return {"status": "success", "whatsapp_url": build_whatsapp_url(order)}

    except (HTTPException, StorefrontError):
        raise
    except Exception as e:
        logger.error(f"Error building WhatsApp link for order {order_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error building WhatsApp link: {str(e)}")


@router.put("/{order_id}")
async def update_order(
    order_id: int,
    payload: OrderUpdate,
    admin: AdminUser = Depends(require_admin),
    service: OrderService = Depends(get_order_service)
):
    """
    Update an order (typically its status)

    Moving an order to Delivered reduces the product stock by the
    ordered quantity, floored at zero.
    """
    try:
        order = service.update_order(order_id, payload)
        return {"status": "success", "data": order.to_dict()}

    except (HTTPException, StorefrontError):
        raise
    except Exception as e:
        logger.error(f"Error updating order {order_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error updating order: {str(e)}")


@router.delete("/{order_id}")
async def delete_order(
    order_id: int,
    admin: AdminUser = Depends(require_admin),
    service: OrderService = Depends(get_order_service)
):
    try:
        service.delete_order(order_id)
        return {"status": "success", "message": "Order deleted successfully"}

    except (HTTPException, StorefrontError):
        raise
    except Exception as e:
        logger.error(f"Error deleting order {order_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error deleting order: {str(e)}")
