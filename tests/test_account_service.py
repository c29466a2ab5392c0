from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError

from koma_api.core.errors import BadRequestError, ConflictError, NotFoundError, UnauthorizedError
from koma_api.repositories.user_repository import SQLUserRepository
from koma_api.services.account_service import AccountService


@pytest.fixture()
def svc(temp_db):
    return AccountService(SQLUserRepository())


def test_signup_twice_with_same_username_conflicts(svc):
    svc.signup(username="alice", password="pw1")
    with pytest.raises(ConflictError):
        svc.signup(username="alice", password="other")


def test_signup_stores_hash_not_plaintext(svc):
    user = svc.signup(username="alice", password="pw1", email="a@example.com", contact="555")
    stored = svc.repository.find_by_id(user.id)
    assert stored.password_hash != "pw1"
    assert stored.email == "a@example.com"
    assert stored.wishlist == [] and stored.orders == [] and stored.cart == []


def test_login_flow(svc):
    svc.signup(username="alice", password="pw1", first_name="Alice")

    user = svc.login("alice", "pw1")
    assert user["username"] == "alice"
    assert user["firstName"] == "Alice"
    assert "password" not in user and "password_hash" not in user

    with pytest.raises(UnauthorizedError):
        svc.login("alice", "pw2")
    with pytest.raises(NotFoundError):
        svc.login("bob", "pw1")


def test_update_profile_filters_unknown_fields(svc):
    user = svc.signup(username="alice", password="pw1", first_name="A")

    updated = svc.update_profile(user.id, {"nickname": "x", "firstName": "Y"})
    assert updated["firstName"] == "Y"
    assert "nickname" not in updated

    with pytest.raises(BadRequestError):
        svc.update_profile(user.id, {"nickname": "x"})
    with pytest.raises(BadRequestError):
        svc.update_profile(user.id, {})


def test_update_profile_checks_fields_before_user(svc):
    with pytest.raises(BadRequestError):
        svc.update_profile("missing", {"nickname": "x"})
    with pytest.raises(NotFoundError):
        svc.update_profile("missing", {"firstName": "x"})


def test_update_profile_rehashes_password(svc):
    user = svc.signup(username="alice", password="pw1")

    updated = svc.update_profile(user.id, {"password": "pw2"})
    assert "password" not in updated
    stored = svc.repository.find_by_id(user.id)
    assert stored.password_hash != "pw2"
    assert svc.login("alice", "pw2")["id"] == user.id
    with pytest.raises(UnauthorizedError):
        svc.login("alice", "pw1")


def test_update_profile_does_not_precheck_username_uniqueness(svc):
    # Open question: the use case performs no uniqueness check on rename;
    # only the store's username index stops the duplicate.
    svc.signup(username="alice", password="pw1")
    bob = svc.signup(username="bob", password="pw2")

    with pytest.raises(IntegrityError):
        svc.update_profile(bob.id, {"username": "alice"})

    renamed = svc.update_profile(bob.id, {"username": "robert"})
    assert renamed["username"] == "robert"


def test_empty_password_rejected_on_signup_and_update(svc):
    with pytest.raises(BadRequestError):
        svc.signup(username="alice", password="")
    user = svc.signup(username="alice", password="pw1")
    with pytest.raises(BadRequestError):
        svc.update_profile(user.id, {"password": ""})
    with pytest.raises(BadRequestError):
        svc.update_profile(user.id, {"password": None})
    assert svc.login("alice", "pw1")["id"] == user.id


def test_signup_coerces_profile_scalars(svc):
    user = svc.signup(username="alice", password="pw1", contact=9171234567, gender=True)
    stored = svc.repository.find_by_id(user.id)
    assert stored.contact == "9171234567"
    assert stored.gender == "true"
    with pytest.raises(BadRequestError):
        svc.signup(username="bob", password="pw1", address={"street": "Main"})
