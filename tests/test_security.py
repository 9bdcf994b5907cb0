from __future__ import annotations

import bcrypt
import pytest


def test_hash_is_salted_and_prefixed(hasher):
    first = hasher.hash("pw123")
    second = hasher.hash("pw123")
    assert first.startswith("argon2$")
    assert first != second
    assert "pw123" not in first


def test_verify_accepts_right_password_only(hasher):
    digest = hasher.hash("pw123")
    assert hasher.verify("pw123", digest) is True
    assert hasher.verify("pw124", digest) is False


@pytest.mark.parametrize("digest", [None, "", "plain-text", "argon2$garbage", "$2b$04$tooshort"])
def test_verify_never_raises_on_bad_digest(hasher, digest):
    assert hasher.verify("pw123", digest) is False


def test_verify_accepts_legacy_bcrypt_digests(hasher):
    legacy = bcrypt.hashpw(b"pw123", bcrypt.gensalt(rounds=4)).decode()
    # o servico anterior gravava hashes $2a$ (bcryptjs)
    legacy_2a = "$2a$" + legacy[4:]
    assert hasher.verify("pw123", legacy) is True
    assert hasher.verify("pw123", legacy_2a) is True
    assert hasher.verify("wrong", legacy) is False
