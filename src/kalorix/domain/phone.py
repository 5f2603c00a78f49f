"""Phone number normalization.

Users are keyed by phone number. Brazilian numbers are stored with the
``55`` country code, US numbers with ``1``.
"""

import re

_NON_DIGITS = re.compile(r"\D+")

US_LENGTH = 11
BR_LENGTH = 13


def normalize_phone(raw: str) -> str:
    """Return the canonical digits-only phone key."""
    if not raw:
        return ""
    digits = _NON_DIGITS.sub("", raw)
    if digits.startswith("1") and len(digits) == US_LENGTH:
        return digits
    if not digits.startswith("55") and 10 <= len(digits) <= 11:  # noqa: PLR2004
        digits = "55" + digits
    return digits


def format_phone_display(phone: str) -> str:
    """Return a masked phone number for display."""
    if not phone:
        return ""
    digits = _NON_DIGITS.sub("", phone)
    if digits.startswith("1") and len(digits) == US_LENGTH:
        return f"+1 ({digits[1:4]}) {digits[4:7]}-{digits[7:]}"
    if digits.startswith("55") and len(digits) == BR_LENGTH:
        return f"+55 ({digits[2:4]}) {digits[4:9]}-{digits[9:]}"
    return phone
