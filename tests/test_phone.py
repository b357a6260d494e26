"""Tests for a contact's mobile in E.164 form."""


from addressbook.domain import mobile_to_e164


def test_mobile_with_country_code_returns_e164():
    assert mobile_to_e164("+39 312 345 6789") == "+393123456789"
    assert mobile_to_e164("+1 202 555 1234") == "+12025551234"


def test_mobile_without_country_code_uses_mobile_country():
    assert mobile_to_e164("202 555 1234", "US") == "+12025551234"
    assert mobile_to_e164("312 345 6789", " it ") == "+393123456789"


def test_country_code_wins_over_mobile_country():
    assert mobile_to_e164("+1 202 555 1234", "IT") == "+12025551234"


def test_invalid_mobile_returns_none():
    assert mobile_to_e164(None) is None
    assert mobile_to_e164("") is None
    assert mobile_to_e164("   ") is None
    assert mobile_to_e164("abc") is None
    assert mobile_to_e164("+1") is None
    assert mobile_to_e164("123", "US") is None  # too short
    assert mobile_to_e164("202 555 1234", "") is None  # no region, no +
