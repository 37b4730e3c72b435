import pytest

from vidhost.core.errors import ValidationError
from vidhost.models import User, hash_token
from vidhost.services.users import create_user, rotate_token


def test_create_user_stores_only_token_digest(db_session):
    user, token = create_user(db_session, "Carol", "Carol@Example.com", "Carol C")

    assert user.username == "carol"
    assert user.email == "carol@example.com"
    assert user.token_hash == hash_token(token)
    assert token not in (user.token_hash or "")


def test_duplicate_username_is_rejected(db_session):
    create_user(db_session, "carol", "carol@example.com", "Carol")

    with pytest.raises(ValidationError):
        create_user(db_session, "CAROL", "other@example.com", "Other Carol")


def test_rotate_token_invalidates_old_one(db_session):
    user, old_token = create_user(db_session, "dave", "dave@example.com", "Dave")

    new_token = rotate_token(db_session, user)

    assert new_token != old_token
    assert db_session.query(User).filter(User.token_hash == hash_token(old_token)).first() is None
    assert db_session.query(User).filter(User.token_hash == hash_token(new_token)).one().id == user.id
