"""A contact's mobile in E.164 form, read with the contact's mobile country as region."""

import phonenumbers


def mobile_to_e164(mobile: str | None, mobile_country: str | None = None) -> str | None:
    """Return the E.164 form of mobile, or None when it is not a valid number.

    mobile_country is an ISO 3166 alpha-2 code in any case ("AR", "it"). A number
    written with a leading + carries its own country and ignores it.
    """
    raw = (mobile or "").strip()
    if not raw:
        return None
    region = (mobile_country or "").strip().upper() or None
    try:
        parsed = phonenumbers.parse(raw, region)
    except phonenumbers.NumberParseException:
        return None
    if not phonenumbers.is_valid_number(parsed):
        return None
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)
