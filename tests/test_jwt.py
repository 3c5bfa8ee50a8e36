from __future__ import annotations

from datetime import datetime, timedelta

from jose import jwt

from eli.web.auth.jwt import (
    create_session_token,
    decode_session_token,
    get_token_expiry_seconds,
)
from eli.web.config import config


def test_session_token_round_trip() -> None:
    token = create_session_token("admin", "admin", "Demo Administrator")
    claims = decode_session_token(token)

    assert claims is not None
    assert claims.username == "admin"
    assert claims.role == "admin"
    assert claims.name == "Demo Administrator"
    assert claims.is_expired is False

    remaining = claims.exp - datetime.utcnow()
    assert timedelta(hours=23) < remaining <= timedelta(hours=24)


def test_expired_token_is_rejected() -> None:
    token = create_session_token("admin", "admin", "Demo", expires_delta=timedelta(seconds=-1))
    assert decode_session_token(token) is None


def test_token_signed_with_another_secret_is_rejected() -> None:
    payload = {
        "username": "admin",
        "role": "admin",
        "exp": datetime.utcnow() + timedelta(hours=1),
    }
    token = jwt.encode(payload, "some-other-secret", algorithm=config.JWT_ALGORITHM)
    assert decode_session_token(token) is None


def test_token_missing_role_is_rejected() -> None:
    payload = {"username": "admin", "exp": datetime.utcnow() + timedelta(hours=1)}
    token = jwt.encode(payload, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)
    assert decode_session_token(token) is None


def test_name_falls_back_to_username() -> None:
    payload = {"username": "admin", "role": "admin", "exp": datetime.utcnow() + timedelta(hours=1)}
    token = jwt.encode(payload, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)

    claims = decode_session_token(token)
    assert claims is not None
    assert claims.name == "admin"


def test_expiry_matches_cookie_lifetime() -> None:
    assert get_token_expiry_seconds() == config.JWT_EXPIRE_HOURS * 3600


def test_expiry_is_naive_utc() -> None:
    exp = 1_900_000_000
    payload = {"username": "admin", "role": "admin", "exp": exp}
    token = jwt.encode(payload, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)

    claims = decode_session_token(token)
    assert claims is not None
    assert claims.exp.tzinfo is None
    assert claims.exp == datetime(1970, 1, 1) + timedelta(seconds=exp)
