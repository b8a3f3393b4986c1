"""
Catalog seeding endpoint (first run of the storefront)
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from typing import Optional

from stylehub.core.auth import AdminUser, get_current_admin_optional
from stylehub.core.config import settings
from stylehub.services.seed_service import seed_products

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/seed")
async def seed_database(admin: Optional[AdminUser] = Depends(get_current_admin_optional)):
    """
    Insert the sample products when the catalog is empty

    Returns 201 when products were inserted, 200 when the catalog already
    had products. Requires an admin token unless ALLOW_PUBLIC_SEED is on.
    """
    if not settings.ALLOW_PUBLIC_SEED and admin is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"}
        )

    try:
        result = seed_products()
    except Exception as e:
        logger.error(f"Error seeding database: {e}")
        raise HTTPException(status_code=500, detail=f"Error seeding database: {str(e)}")

    status_code = status.HTTP_201_CREATED if result["created"] else status.HTTP_200_OK
    return JSONResponse(
        status_code=status_code,
        content={
            "status": "success",
            "message": result["message"],
            "inserted_count": result["inserted_count"]
        }
    )
