import logging

from fastapi import APIRouter, Depends, Response, status

from gradebook.api.deps import get_current_admin, get_storage
from gradebook.core.config import settings
from gradebook.core.exceptions import UnauthorizedException
from gradebook.core.security import create_access_token, verify_password
from gradebook.models.admin import Admin
from gradebook.schemas.auth import AdminPublic, LoginRequest
from gradebook.services.storage import DatabaseStorage

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=AdminPublic)
def login(
    credentials: LoginRequest,
    response: Response,
    storage: DatabaseStorage = Depends(get_storage)
):
    """
    Log in as an admin and receive the session cookie
    """
    admin = storage.get_admin_by_username(credentials.username)
    if not admin or not verify_password(credentials.password, admin.password):
        logger.warning(f"Failed login for {credentials.username!r}")
        raise UnauthorizedException("Invalid username or password")

    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=create_access_token(admin.id),
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )
    logger.info(f"Admin {admin.id} logged in")
    return admin


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout():
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return response


@router.get("/user", response_model=AdminPublic)
def get_user(admin: Admin = Depends(get_current_admin)):
    """
    The admin behind the current session
    """
    return admin
