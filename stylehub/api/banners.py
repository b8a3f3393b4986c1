"""
Banners API Endpoints
Home page carousel banners and the admin banner layout editor
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import Any, Dict

from stylehub.core.auth import AdminUser, require_admin
from stylehub.core.exceptions import StorefrontError
from stylehub.domain.banner import BannerPayload, ElementCreate, ElementMove, ElementResize
from stylehub.services.banner_service import BannerService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_banner_service() -> BannerService:
    return BannerService()


@router.get("/")
async def get_banners(
    active_only: bool = Query(False, description="Only banners shown on the storefront"),
    service: BannerService = Depends(get_banner_service)
):
    """
    Get banners ordered by display_order
    """
    try:
        banners = service.list_banners(active_only=active_only)
        return {
            "status": "success",
            "count": len(banners),
            "data": [banner.to_dict() for banner in banners]
        }

    except Exception as e:
        logger.error(f"Error fetching banners: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching banners: {str(e)}")


@router.get("/{banner_id}")
async def get_banner(banner_id: int, service: BannerService = Depends(get_banner_service)):
    try:
        banner = service.get_banner(banner_id)
        return {"status": "success", "data": banner.to_dict()}

    except (HTTPException, StorefrontError):
        raise
    except Exception as e:
        logger.error(f"Error fetching banner {banner_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching banner: {str(e)}")


@router.post("/", status_code=status.HTTP_201_CREATED)
async def create_banner(
    payload: BannerPayload,
    admin: AdminUser = Depends(require_admin),
    service: BannerService = Depends(get_banner_service)
):
    try:
        banner = service.create_banner(payload)
        return {"status": "success", "data": banner.to_dict()}

    except (HTTPException, StorefrontError):
        raise
    except Exception as e:
        logger.error(f"Error creating banner: {e}")
        raise HTTPException(status_code=500, detail=f"Error creating banner: {str(e)}")


@router.put("/{banner_id}")
async def update_banner(
    banner_id: int,
    payload: BannerPayload,
    admin: AdminUser = Depends(require_admin),
    service: BannerService = Depends(get_banner_service)
):
    """
    Replace a banner. Omitted styling fields go back to their defaults.
    """
    try:
        banner = service.replace_banner(banner_id, payload)
        return {"status": "success", "data": banner.to_dict()}

    except (HTTPException, StorefrontError):
        raise
    except Exception as e:
        logger.error(f"Error updating banner {banner_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error updating banner: {str(e)}")


@router.delete("/{banner_id}")
async def delete_banner(
    banner_id: int,
    admin: AdminUser = Depends(require_admin),
    service: BannerService = Depends(get_banner_service)
):
    try:
        service.delete_banner(banner_id)
        return {"status": "success", "message": "Banner deleted successfully"}

    except (HTTPException, StorefrontError):
        raise
    except Exception as e:
        logger.error(f"Error deleting banner {banner_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error deleting banner: {str(e)}")


# =============================================================================
# Layout editor
# =============================================================================

def _layout_response(action: str, banner_id: int, operation):
    try:
        banner = operation()
        return {
            "status": "success",
            "data": {
                "id": banner.id,
                "layout": [element.model_dump(mode="json") for element in banner.layout]
            }
        }

    except (HTTPException, StorefrontError):
        raise
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error {action} on banner {banner_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error {action}: {str(e)}")


@router.post("/{banner_id}/layout/elements", status_code=status.HTTP_201_CREATED)
async def add_layout_element(
    banner_id: int,
    payload: ElementCreate,
    admin: AdminUser = Depends(require_admin),
    service: BannerService = Depends(get_banner_service)
):
    """
    Add a text, badge, icon or image element with its default content
    """
    return _layout_response(
        "adding layout element", banner_id,
        lambda: service.add_element(banner_id, payload.type, payload.id)
    )


@router.patch("/{banner_id}/layout/elements/{element_id}")
async def update_layout_element(
    banner_id: int,
    element_id: str,
    updates: Dict[str, Any],
    admin: AdminUser = Depends(require_admin),
    service: BannerService = Depends(get_banner_service)
):
    """
    Edit element content; `style` keys are merged into the current style
    """
    return _layout_response(
        "updating layout element", banner_id,
        lambda: service.update_element(banner_id, element_id, updates)
    )


@router.put("/{banner_id}/layout/elements/{element_id}/position")
async def move_layout_element(
    banner_id: int,
    element_id: str,
    payload: ElementMove,
    admin: AdminUser = Depends(require_admin),
    service: BannerService = Depends(get_banner_service)
):
    return _layout_response(
        "moving layout element", banner_id,
        lambda: service.move_element(banner_id, element_id, payload.x, payload.y)
    )


@router.put("/{banner_id}/layout/elements/{element_id}/size")
async def resize_layout_element(
    banner_id: int,
    element_id: str,
    payload: ElementResize,
    admin: AdminUser = Depends(require_admin),
    service: BannerService = Depends(get_banner_service)
):
    return _layout_response(
        "resizing layout element", banner_id,
        lambda: service.resize_element(
            banner_id, element_id, payload.width, payload.height, payload.x, payload.y
        )
    )


@router.delete("/{banner_id}/layout/elements/{element_id}")
async def remove_layout_element(
    banner_id: int,
    element_id: str,
    admin: AdminUser = Depends(require_admin),
    service: BannerService = Depends(get_banner_service)
):
    return _layout_response(
        "removing layout element", banner_id,
        lambda: service.remove_element(banner_id, element_id)
    )


@router.post("/{banner_id}/layout/elements/{element_id}/front")
async def bring_element_to_front(
    banner_id: int,
    element_id: str,
    admin: AdminUser = Depends(require_admin),
    service: BannerService = Depends(get_banner_service)
):
    return _layout_response(
        "reordering layout element", banner_id,
        lambda: service.bring_to_front(banner_id, element_id)
    )


@router.post("/{banner_id}/layout/elements/{element_id}/back")
async def send_element_to_back(
    banner_id: int,
    element_id: str,
    admin: AdminUser = Depends(require_admin),
    service: BannerService = Depends(get_banner_service)
):
    return _layout_response(
        "reordering layout element", banner_id,
        lambda: service.send_to_back(banner_id, element_id)
    )


@router.post("/{banner_id}/layout/reset")
async def reset_layout(
    banner_id: int,
    admin: AdminUser = Depends(require_admin),
    service: BannerService = Depends(get_banner_service)
):
    """
    Replace the layout with the starter layout
    """
    return _layout_response(
        "resetting layout", banner_id,
        lambda: service.reset_layout(banner_id)
    )
