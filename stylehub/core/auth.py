"""
Admin authentication for the StyleHub backend
Issues and validates HS256 JWT tokens for the admin panel
"""
import secrets
from typing import Optional
from datetime import datetime, timedelta, timezone

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from passlib.context import CryptContext
from pydantic import BaseModel

from .config import settings


# Security scheme for bearer tokens
security = HTTPBearer(auto_error=False)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

JWT_ALGORITHM = "HS256"


class AdminUser(BaseModel):
    """Admin identity extracted from a token"""
    username: str
    role: str = "admin"


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_admin_credentials(username: str, password: str) -> bool:
    """
    Check admin credentials against configuration.

    ADMIN_PASSWORD_HASH (bcrypt) wins when set; otherwise the plain
    ADMIN_PASSWORD is compared in constant time.
    """
    if not secrets.compare_digest(username, settings.ADMIN_USERNAME):
        return False

    if settings.ADMIN_PASSWORD_HASH:
        return pwd_context.verify(password, settings.ADMIN_PASSWORD_HASH)

    return secrets.compare_digest(password, settings.ADMIN_PASSWORD)


def create_access_token(username: str, expires_minutes: Optional[int] = None) -> str:
    """Sign a token for the given admin username"""
    expires_minutes = expires_minutes or settings.ACCESS_TOKEN_EXPIRE_MINUTES
    now = datetime.now(timezone.utc)
    payload = {
        "sub": username,
        "role": "admin",
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes=expires_minutes)).timestamp()),
    }
    return jwt.encode(payload, settings.AUTH_SECRET, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    """
    Decode and validate an admin token.

    Raises:
        HTTPException 401 when the token is expired or invalid
    """
    try:
        return jwt.decode(token, settings.AUTH_SECRET, algorithms=[JWT_ALGORITHM])
    except JWTError as e:
        error_msg = str(e).lower()
        if "expired" in error_msg:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Token has expired",
                headers={"WWW-Authenticate": "Bearer"}
            )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token: {str(e)}",
            headers={"WWW-Authenticate": "Bearer"}
        )


async def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> AdminUser:
    """
    Dependency that extracts and validates the current admin from the token.

    Usage:
        @router.delete("/{product_id}")
        async def delete_product(product_id: int, admin: AdminUser = Depends(require_admin)):
            ...
    """
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"}
        )

    payload = decode_access_token(credentials.credentials)

    username = payload.get("sub")
    if not username:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload: missing subject",
            headers={"WWW-Authenticate": "Bearer"}
        )

    return AdminUser(username=username, role=payload.get("role", "admin"))


async def get_current_admin_optional(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> Optional[AdminUser]:
    """Optional authentication - returns None if no valid token provided"""
    if not credentials:
        return None

    try:
        return await get_current_admin(credentials)
    except HTTPException:
        return None


async def require_admin(admin: AdminUser = Depends(get_current_admin)) -> AdminUser:
    if admin.role != "admin":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Access denied. Required role: admin, your role: {admin.role}"
        )
    return admin
