import logging
from typing import Generator, Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from gradebook.core.config import settings
from gradebook.core.database import SessionLocal
from gradebook.core.exceptions import UnauthorizedException
from gradebook.core.security import decode_access_token
from gradebook.models.admin import Admin
from gradebook.services.storage import DatabaseStorage

logger = logging.getLogger(__name__)


def get_db() -> Generator:
    """
    Database session dependency.
    The session is closed once the request has been handled.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_storage(db: Session = Depends(get_db)) -> DatabaseStorage:
    return DatabaseStorage(db)


def _read_token(request: Request) -> Optional[str]:
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if token:
        return token
    authorization = request.headers.get("Authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials
    return None


def get_current_admin(
    request: Request,
    storage: DatabaseStorage = Depends(get_storage)
) -> Admin:
    """
    Gate for mutating routes. Resolved before the request body is validated,
    so unauthenticated calls are rejected without touching storage.
    """
    token = _read_token(request)
    if not token:
        raise UnauthorizedException()

    admin = storage.get_admin(decode_access_token(token))
    if admin is None:
        logger.warning("Session token refers to a missing admin")
        raise UnauthorizedException()
    return admin
