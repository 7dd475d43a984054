"""Parser for compound duration strings such as ``"32h47m50s"``."""

from __future__ import annotations

import structlog

log = structlog.get_logger(__name__)

_UNIT_SECONDS: dict[str, int] = {"h": 3600, "m": 60, "s": 1}


def parse_duration(s: str) -> int:
    """Return the total number of seconds in ``s``.

    Never raises. Digits accumulate until a unit character (h, m or s)
    closes the group. Any other character is logged and skipped without
    resetting the pending digits, so ``"1d8h"`` reads as 18 hours. A unit
    with no digits before it contributes nothing, and trailing digits with
    no unit are dropped.
    """
    seconds = 0
    digits = ""
    for c in s:
        if c.isascii() and c.isdigit():
            digits += c
        elif c in _UNIT_SECONDS:
            if digits:
                try:
                    seconds += _UNIT_SECONDS[c] * int(digits)
                except ValueError:
                    log.warning(
                        "duration_invalid_number",
                        duration=s[:64],
                        unit=c,
                        length=len(digits),
                    )
            else:
                log.warning("duration_missing_number", duration=s, unit=c)
            digits = ""
        else:
            log.warning("duration_unexpected_character", duration=s, character=c)
    return seconds
