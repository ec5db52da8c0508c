from datetime import datetime, timedelta, timezone

import jwt
import pytest

from gradebook.core.config import settings
from gradebook.core.exceptions import UnauthorizedException
from gradebook.core.security import create_access_token, decode_access_token, hash_password, verify_password


def test_password_hash_round_trip():
    hashed = hash_password("admin")

    assert hashed != "admin"
    assert verify_password("admin", hashed)
    assert not verify_password("Admin", hashed)
    assert not verify_password("admin", "")


def test_token_carries_admin_id():
    assert decode_access_token(create_access_token(7)) == 7


def test_expired_token_is_rejected():
    token = jwt.encode(
        {"sub": "7", "exp": datetime.now(timezone.utc) - timedelta(minutes=1)},
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM
    )

    with pytest.raises(UnauthorizedException):
        decode_access_token(token)


def test_token_signed_with_another_key_is_rejected():
    token = jwt.encode({"sub": "7"}, "some-other-key", algorithm=settings.ALGORITHM)

    with pytest.raises(UnauthorizedException):
        decode_access_token(token)
