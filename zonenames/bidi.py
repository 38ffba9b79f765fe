"""Direction-safe wrapping for short strings such as GMT offsets.

Only what the offset formatter needs: estimate a string's direction from its
first strong character, and isolate it when it runs against the direction of
the surrounding text.
"""

from __future__ import annotations

import unicodedata
from typing import Optional

LTR = "ltr"
RTL = "rtl"

LRI = "\u2066"  # left-to-right isolate
RLI = "\u2067"  # right-to-left isolate
PDI = "\u2069"  # pop directional isolate

_STRONG_RTL = {"R", "AL"}


def estimate_direction(text: str) -> Optional[str]:
    """Return the direction of the first strong character, or None."""
    for ch in text:
        bidi_class = unicodedata.bidirectional(ch)
        if bidi_class == "L":
            return LTR
        if bidi_class in _STRONG_RTL:
            return RTL
    return None


def unicode_wrap(text: str, context: str = LTR) -> str:
    """Wrap `text` in a directional isolate if it runs against `context`.

    Text with no strong characters (bare digits and signs) is treated as
    left-to-right, so "+09:30" stays in one piece inside right-to-left text.
    """
    if not text:
        return text

    direction = estimate_direction(text) or LTR
    if direction == context:
        return text

    opener = LRI if direction == LTR else RLI
    return f"{opener}{text}{PDI}"


def strip_isolates(text: str) -> str:
    """Remove isolate marks added by `unicode_wrap`."""
    return text.replace(LRI, "").replace(RLI, "").replace(PDI, "")
