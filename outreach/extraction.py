"""Best-effort appointment hints from an end-of-call summary.

This is the fallback path for calls where the agent never invoked
``schedule_appointment``. It is deliberately narrow: a fixed keyword list
decides whether an appointment was discussed at all, and two fixed
regexes try to pull a date and a time out of the summary. Anything they
miss comes back as None and is left for a human to reconcile.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional

APPOINTMENT_KEYWORDS: tuple[str, ...] = (
    "appointment",
    "visit",
    "schedule",
    "book",
    "Saturday",
    "Sunday",
    "meeting",
    "mulakat",
    "bhent",
    "appointment fix",
)

# "15th Jan", "3 March", "20/01/2026"
_DATE_RE = re.compile(
    r"(\d{1,2}(?:st|nd|rd|th)?\s+(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*"
    r"|\d{1,2}/\d{1,2}/\d{2,4})",
    re.IGNORECASE,
)
# "10 AM", "2:30pm", and also any bare 1-2 digit number
_TIME_RE = re.compile(r"(\d{1,2}(?::\d{2})?\s*(?:am|pm)?)", re.IGNORECASE)


def mentions_appointment(*texts: str, keywords: Iterable[str] = APPOINTMENT_KEYWORDS) -> bool:
    """True if any keyword occurs (case-insensitively) in any of ``texts``."""
    haystacks = [t.lower() for t in texts if t]
    return any(kw.lower() in h for kw in keywords for h in haystacks)


def extract_date(text: str) -> Optional[str]:
    match = _DATE_RE.search(text or "")
    return match.group(1) if match else None


def extract_time(text: str) -> Optional[str]:
    match = _TIME_RE.search(text or "")
    if not match:
        return None
    return match.group(1).strip() or None
