"""Phone number helpers.

``normalize_phone`` is a fixed regional policy, not an E.164 validator:
numbers that already carry a ``+`` are passed through untouched (minus
spaces and hyphens), everything else is assumed to be local to the
configured default country.
"""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[\s-]+")


def normalize_phone(raw: str, country_code: str = "+91") -> str:
    """Strip whitespace/hyphens and prefix ``country_code`` when no ``+`` is present.

    Leading zeros (the domestic trunk prefix) are dropped before the
    country code is added::

        >>> normalize_phone("098765 43210")
        '+919876543210'
        >>> normalize_phone("+1 555-123-4567")
        '+15551234567'
    """
    number = _SEPARATORS.sub("", raw)
    if not number.startswith("+"):
        number = country_code + number.lstrip("0")
    return number


def redact_pii(value: str) -> str:
    """Mask PII for logging: show first 3 and last 2 chars only."""
    if not value or len(value) <= 5:
        return "***"
    return value[:3] + "***" + value[-2:]
