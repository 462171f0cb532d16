"""
Tests for shared models.
"""

import pytest
from pydantic import ValidationError

from shared.models import AuthenticatedUser


class TestAuthenticatedUser:
    def test_create_with_required_fields(self):
        user = AuthenticatedUser(id=1, email="a@x.com")
        assert user.id == 1
        assert user.name is None

    def test_ignores_extra_fields(self):
        """Fields outside {id, email, name} should be dropped."""
        user = AuthenticatedUser(id=1, email="a@x.com", password_hash="$2b$10$abc")
        assert "password_hash" not in user.model_dump()

    def test_is_frozen(self):
        user = AuthenticatedUser(id=1, email="a@x.com")
        with pytest.raises(ValidationError):
            user.email = "b@x.com"

    def test_requires_id(self):
        with pytest.raises(ValidationError):
            AuthenticatedUser(email="a@x.com")
