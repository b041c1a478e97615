from __future__ import annotations

from datetime import timedelta

import pytest
from jose import jwt

from app.api.security import AuthenticatedUser, create_access_token, decode_access_token
from app.core.config import Settings
from app.core.exceptions import AuthenticationError
from app.core.permissions import EQUIPMENT_DELETE, EQUIPMENT_READ, USER_EQUIPMENT_READ


@pytest.fixture
def settings() -> Settings:
    return Settings(jwt_secret="unit-secret")


def test_round_trip_keeps_uid_role_and_permissions(settings):
    token = create_access_token(
        42, role="user", permissions=[EQUIPMENT_READ], settings=settings
    )
    user = decode_access_token(token, settings)
    assert user == AuthenticatedUser(uid=42, role="user", permissions=frozenset({EQUIPMENT_READ}))


def test_effective_permissions_merge_role_grants():
    user = AuthenticatedUser(uid=1, role="user", permissions=frozenset({"custom:thing"}))
    effective = user.effective_permissions()
    assert "custom:thing" in effective
    assert USER_EQUIPMENT_READ in effective
    assert EQUIPMENT_DELETE not in effective


def test_unknown_role_grants_nothing():
    assert AuthenticatedUser(uid=1, role="ghost").effective_permissions() == frozenset()


def test_wrong_secret_rejected(settings):
    token = create_access_token(42, settings=Settings(jwt_secret="other"))
    with pytest.raises(AuthenticationError, match="Invalid token"):
        decode_access_token(token, settings)


def test_expired_token_rejected(settings):
    token = create_access_token(42, expires_in=timedelta(seconds=-5), settings=settings)
    with pytest.raises(AuthenticationError):
        decode_access_token(token, settings)


def test_numeric_string_uid_accepted(settings):
    token = jwt.encode({"uid": "42"}, settings.jwt_secret, algorithm="HS256")
    assert decode_access_token(token, settings).uid == 42


@pytest.mark.parametrize("claims", [{}, {"uid": 0}, {"uid": "abc"}, {"uid": True}, {"uid": 1, "permissions": "all"}])
def test_bad_claims_rejected(settings, claims):
    token = jwt.encode(claims, settings.jwt_secret, algorithm="HS256")
    with pytest.raises(AuthenticationError, match="Invalid token claims"):
        decode_access_token(token, settings)
