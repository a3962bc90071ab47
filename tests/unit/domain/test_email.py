"""Unit tests for the Email value object."""

import pytest

from vecino.domain.user import Email, InvalidEmailError


class TestEmail:
    def test_normalizes_case_and_whitespace(self):
        assert Email("  Ana@Example.COM ").value == "ana@example.com"

    def test_equal_after_normalization(self):
        assert Email("A@X.com") == Email("a@x.com")

    @pytest.mark.parametrize("value", ["", "ana", "ana@", "@example.com", "ana@example", "a b@x.com"])
    def test_invalid_email_rejected(self, value):
        with pytest.raises(InvalidEmailError):
            Email(value)

    def test_str(self):
        assert str(Email("ana@example.com")) == "ana@example.com"
