"""Tests for shared/models.py."""

import pytest
from pydantic import ValidationError

from shared.models import AuthenticatedUser, MessageResponse


class TestAuthenticatedUser:
    def test_only_id(self):
        user = AuthenticatedUser(id="user-1")
        assert user.model_dump() == {"id": "user-1"}

    def test_id_required(self):
        with pytest.raises(ValidationError):
            AuthenticatedUser()

    def test_is_immutable(self):
        user = AuthenticatedUser(id="user-1")
        with pytest.raises(ValidationError):
            user.id = "user-2"

    def test_ignores_extra_claims(self):
        user = AuthenticatedUser(id="user-1", email="ann@x.io")
        assert not hasattr(user, "email")


class TestMessageResponse:
    def test_shape(self):
        assert MessageResponse(msg="Post removed").model_dump() == {"msg": "Post removed"}
