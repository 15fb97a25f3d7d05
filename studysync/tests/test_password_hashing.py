from __future__ import annotations

import pytest

from studysync.application.services.password_hashing import WerkzeugPasswordHasher


@pytest.fixture()
def hasher() -> WerkzeugPasswordHasher:
    return WerkzeugPasswordHasher(method="pbkdf2:sha256:1000")


def test_same_password_hashes_differently(hasher: WerkzeugPasswordHasher) -> None:
    first = hasher.hash("secret1")
    second = hasher.hash("secret1")

    assert first != second
    assert "secret1" not in first
    assert hasher.verify("secret1", first)
    assert hasher.verify("secret1", second)


def test_verify_rejects_wrong_password(hasher: WerkzeugPasswordHasher) -> None:
    hashed = hasher.hash("secret1")

    assert hasher.verify("secret2", hashed) is False
    assert hasher.verify("", hashed) is False


def test_verify_rejects_empty_hash(hasher: WerkzeugPasswordHasher) -> None:
    assert hasher.verify("secret1", "") is False


def test_default_method_is_scrypt() -> None:
    hashed = WerkzeugPasswordHasher().hash("secret1")

    assert hashed.startswith("scrypt:")
