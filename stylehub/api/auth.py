"""
Authentication API endpoints for the StyleHub admin panel
- Login with the configured admin credentials
- Current admin identity
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from stylehub.core.auth import (
    AdminUser,
    create_access_token,
    require_admin,
    verify_admin_credentials,
)
from stylehub.core.config import settings

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Pydantic Models
# =============================================================================

class LoginRequest(BaseModel):
    username: str
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int  # seconds


# =============================================================================
# Endpoints
# =============================================================================

@router.post("/login", response_model=TokenResponse)
async def login(credentials: LoginRequest):
    """Exchange admin username/password for a bearer token"""
    if not verify_admin_credentials(credentials.username, credentials.password):
        logger.warning(f"Failed admin login for '{credentials.username}'")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
            headers={"WWW-Authenticate": "Bearer"}
        )

    token = create_access_token(credentials.username)
    logger.info(f"Admin '{credentials.username}' logged in")
    return TokenResponse(
        access_token=token,
        expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60
    )


@router.get("/me", response_model=AdminUser)
async def get_current_admin_info(admin: AdminUser = Depends(require_admin)):
    """Get current admin information"""
    return admin
