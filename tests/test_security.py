# File: tests/test_security.py

from datetime import timedelta

from jose import jwt

from app.core import security


def test_password_hash_round_trip():
    hashed = security.hash_password("s3cret")
    assert hashed != "s3cret"
    assert security.verify_password("s3cret", hashed)
    assert not security.verify_password("wrong", hashed)


def test_password_hash_is_salted():
    assert security.hash_password("same") != security.hash_password("same")


def test_verify_password_with_malformed_hash():
    assert security.verify_password("anything", "not-a-bcrypt-hash") is False


def test_token_carries_user_id_and_email():
    token = security.create_access_token(42, "bob@example.com")
    payload = security.decode_access_token(token)
    assert payload is not None
    assert payload["sub"] == "42"
    assert payload["email"] == "bob@example.com"
    assert payload["exp"] > payload["iat"]


def test_expired_token_is_rejected():
    token = security.create_access_token(1, "bob@example.com", expires_delta=timedelta(minutes=-1))
    assert security.decode_access_token(token) is None


def test_token_signed_with_other_key_is_rejected():
    token = jwt.encode({"sub": "1", "email": "bob@example.com"}, "other-key", algorithm="HS256")
    assert security.decode_access_token(token) is None


def test_token_without_email_is_rejected():
    token = jwt.encode({"sub": "1"}, security.SECRET_KEY, algorithm=security.ALGORITHM)
    assert security.decode_access_token(token) is None


def test_garbage_token_is_rejected():
    assert security.decode_access_token("not.a.jwt") is None


def test_out_of_range_subject_is_rejected():
    token = jwt.encode({"sub": "9" * 30, "email": "x@example.com"}, security.SECRET_KEY, algorithm=security.ALGORITHM)
    assert security.decode_access_token(token) is None


def test_largest_user_id_is_accepted():
    token = security.create_access_token(security.MAX_USER_ID, "x@example.com")
    assert security.decode_access_token(token)["sub"] == str(security.MAX_USER_ID)
