import hashlib

from home_service_api.app.core.security import hash_password, verify_password


def test_hash_is_salted():
    first = hash_password("secret")
    second = hash_password("secret")
    assert first != second
    assert "secret" not in first
    assert verify_password("secret", first)
    assert verify_password("secret", second)


def test_wrong_password_rejected():
    assert not verify_password("nope", hash_password("secret"))


def test_legacy_sha256_digest_accepted():
    legacy = hashlib.sha256(b"secret").hexdigest()
    assert verify_password("secret", legacy)
    assert not verify_password("other", legacy)


def test_malformed_hash_is_false():
    assert not verify_password("secret", "zz$not-hex")
    assert not verify_password("secret", None)
