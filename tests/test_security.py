from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from tasktracker.core.config import Settings
from tasktracker.core.security import ExpiredSignatureError, JWTError, PasswordHasher, TokenIssuer


def test_default_hash_cost_factor_is_ten() -> None:
    hasher = PasswordHasher(Settings())

    hashed = hasher.hash_sync("secret1")

    assert hashed.startswith("$2b$10$")
    assert hasher.verify_sync("secret1", hashed) is True
    assert hasher.verify_sync("secret2", hashed) is False


def test_hashes_are_salted(settings: Settings) -> None:
    hasher = PasswordHasher(settings)
    assert hasher.hash_sync("same") != hasher.hash_sync("same")


@pytest.mark.asyncio
async def test_async_hashing_runs_in_threadpool(settings: Settings) -> None:
    hasher = PasswordHasher(settings)

    hashed = await hasher.hash("secret1")

    assert await hasher.verify("secret1", hashed) is True
    assert await hasher.verify("nope", hashed) is False


def test_issued_token_uses_configured_lifetime(settings: Settings) -> None:
    issuer = TokenIssuer(settings)
    before = datetime.now(timezone.utc)

    generated = issuer.sign(subject=42, username="ada")
    claims = issuer.verify(generated.token)

    assert claims["sub"] == "42"
    assert claims["username"] == "ada"
    expected = before + timedelta(minutes=settings.access_token_expire_minutes)
    assert abs((generated.expires_at - expected).total_seconds()) < 5
    assert claims["exp"] == int(generated.expires_at.timestamp())


def test_verify_raises_for_expired_and_tampered_tokens(settings: Settings) -> None:
    issuer = TokenIssuer(settings)
    expired = issuer.sign(subject=1, username="ada", expires_delta=timedelta(seconds=-1)).token
    with pytest.raises(ExpiredSignatureError):
        issuer.verify(expired)

    valid = issuer.sign(subject=1, username="ada").token
    with pytest.raises(JWTError):
        issuer.verify(valid[:-2] + ("aa" if not valid.endswith("aa") else "bb"))
