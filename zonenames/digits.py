"""Digit substitution for locales with native number systems.

Which digits a locale writes comes from CLDR through Babel
(`Locale.default_numbering_system`, `Locale.other_numbering_systems`); this
module only knows how to spell each numbering system's digits.
"""

import logging
from typing import Optional

from babel import Locale

logger = logging.getLogger(__name__)

LATIN = "latn"


class DigitLocalizer:
    """Replaces ASCII digits with the digits of a CLDR numbering system."""

    def __init__(self):
        # Digits by CLDR numbering system id
        self.number_systems = {
            # Arabic-Indic numerals (Arabic)
            "arab": "٠١٢٣٤٥٦٧٨٩",
            # Extended Arabic-Indic numerals (Persian, Urdu, Pashto)
            "arabext": "۰۱۲۳۴۵۶۷۸۹",
            # Devanagari numerals (Hindi, Marathi, Nepali)
            "deva": "०१२३४५६७८९",
            "beng": "০১২৩৪৫৬৭৮৯",
            "thai": "๐๑๒๓๔๕๖๗๘๙",
            "mymr": "၀၁၂၃၄၅၆၇၈၉",
            "tibt": "༠༡༢༣༤༥༦༧༨༩",
            "laoo": "໐໑໒໓໔໕໖໗໘໙",
            "khmr": "០១២៣៤៥៦៧៨៩",
        }

    def numbering_system_for(self, locale: Locale, native: Optional[bool] = None) -> str:
        """
        Pick the numbering system for a locale.

        Args:
            locale: Babel locale
            native: None for the locale's default system, True for its native
                system, False to force Latin digits

        Returns:
            CLDR numbering system id, e.g. 'arab' for ar_EG
        """
        if native is False:
            return LATIN
        if native:
            native_system = locale.other_numbering_systems.get("native")
            return native_system or locale.default_numbering_system
        return locale.default_numbering_system

    def localize(self, text: str, numbering_system: str) -> str:
        """Replace ASCII digits in text with the digits of `numbering_system`.

        Systems without a digit table (including 'latn') leave text unchanged.
        """
        digits = self.number_systems.get(numbering_system)
        if not digits:
            return text

        formatted = "".join(
            digits[ord(ch) - 48] if "0" <= ch <= "9" else ch for ch in text
        )
        logger.debug("Localized digits (%s): %s -> %s", numbering_system, text, formatted)
        return formatted


# Global instance
_digit_localizer = DigitLocalizer()


def localize_digits(text: str, locale: Locale, native: Optional[bool] = None) -> str:
    """Global function to write text's digits the way `locale` does."""
    system = _digit_localizer.numbering_system_for(locale, native)
    return _digit_localizer.localize(text, system)


def numbering_system_for(locale: Locale, native: Optional[bool] = None) -> str:
    """Global function to look up a locale's numbering system."""
    return _digit_localizer.numbering_system_for(locale, native)
