import warnings
from uuid import uuid4

import jwt
import pytest

from todo_api import config
from todo_api.exceptions import AccessTokenDamagedException, AccessTokenExpiredException
from todo_api.security import create_access_token, decode_access_token, hash_password, verify_password


def test_password_hash_roundtrip() -> None:
    stored = hash_password("correct horse")

    assert stored.startswith("pbkdf2_sha256$")
    assert "correct horse" not in stored
    assert verify_password("correct horse", stored)
    assert not verify_password("wrong horse", stored)


def test_hashes_are_salted() -> None:
    assert hash_password("same") != hash_password("same")


def test_garbage_hash_never_verifies() -> None:
    assert not verify_password("anything", "not-a-hash")
    assert not verify_password("anything", "md5$1$salt$abc")


def test_token_carries_user_id() -> None:
    user_id = uuid4()
    assert decode_access_token(create_access_token(user_id)) == user_id


def test_expired_token_rejected() -> None:
    token = create_access_token(uuid4(), lifetime=-10)
    with pytest.raises(AccessTokenExpiredException):
        decode_access_token(token)


def test_token_signed_with_other_key_rejected() -> None:
    token = jwt.encode({"sub": str(uuid4())}, "a-completely-different-signing-key-of-decent-length", algorithm="HS256")
    with pytest.raises(AccessTokenDamagedException):
        decode_access_token(token)


def test_token_without_subject_rejected() -> None:
    token = jwt.encode({"scope": "tasks"}, config.SECRET_KEY, algorithm=config.TOKEN_ALGORITHM)
    with pytest.raises(AccessTokenDamagedException):
        decode_access_token(token)


def test_default_key_is_long_enough_for_hs256() -> None:
    assert len(config.SECRET_KEY.encode()) >= 32

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        user_id = uuid4()
        assert decode_access_token(create_access_token(user_id)) == user_id
