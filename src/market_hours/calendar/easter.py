"""Gregorian Easter Sunday via the anonymous (Meeus/Jones/Butcher) closed-form algorithm."""

from datetime import date

_FIRST_GREGORIAN_YEAR = 1583


# pylint: disable=too-few-public-methods
class Easter:
    """Static Easter date computation, valid for Gregorian years (>= 1583)."""

    @staticmethod
    def sunday(year: int) -> date:
        """Return the date of Easter Sunday in *year*."""
        if year < _FIRST_GREGORIAN_YEAR:
            raise ValueError(f"Easter is only defined for years >= 1583, got {year}")
        # pylint: disable=invalid-name
        a = year % 19
        b, c = divmod(year, 100)
        d, e = divmod(b, 4)
        f = (b + 8) // 25
        g = (b - f + 1) // 3
        h = (19 * a + b - d - g + 15) % 30
        i, k = divmod(c, 4)
        l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
        m = (a + 11 * h + 22 * l) // 451
        month, day = divmod(h + l - 7 * m + 114, 31)
        return date(year, month, day + 1)
