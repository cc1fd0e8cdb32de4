"""Date codec for canonical long-form ledger dates.

Ledger dates are stored as locale-specific long strings such as
``"samedi 01 février 2025"``. The same strings are used for display and for
storage, so formatting must stay stable: ``format_date(parse_date(s)) == s``
for every zero-padded string ``s``.
"""

import re
from dataclasses import dataclass
from datetime import date
from typing import NamedTuple

from src.domain.errors import InvalidDateFormat


@dataclass(frozen=True)
class DateLocale:
    """Weekday and month names of a locale.

    Attributes:
        code: Locale identifier.
        weekdays: Weekday names, Monday first.
        months: Month names, January first.
    """

    code: str
    weekdays: tuple[str, ...]
    months: tuple[str, ...]

    def weekday_name(self, value: date) -> str:
        return self.weekdays[value.weekday()]

    def month_name(self, value: date) -> str:
        return self.months[value.month - 1]

    def weekday_index(self, name: str, exact: bool = False) -> int | None:
        return _lookup(self.weekdays, name, exact)

    def month_number(self, name: str, exact: bool = False) -> int | None:
        index = _lookup(self.months, name, exact)
        return None if index is None else index + 1


def _lookup(names: tuple[str, ...], name: str, exact: bool) -> int | None:
    if not exact:
        name = name.casefold()
    for index, candidate in enumerate(names):
        if (candidate if exact else candidate.casefold()) == name:
            return index
    return None


FRENCH = DateLocale(
    code="fr-FR",
    weekdays=(
        "lundi",
        "mardi",
        "mercredi",
        "jeudi",
        "vendredi",
        "samedi",
        "dimanche",
    ),
    months=(
        "janvier",
        "février",
        "mars",
        "avril",
        "mai",
        "juin",
        "juillet",
        "août",
        "septembre",
        "octobre",
        "novembre",
        "décembre",
    ),
)

class DateFormat(NamedTuple):
    """Accepted date pattern.

    Attributes:
        pattern: Regex with weekday, day, month and year groups.
        exact_names: Whether names must be written exactly as formatted.
    """

    pattern: re.Pattern
    exact_names: bool


# Strings accepted by the primary format are exactly what format() writes.
PRIMARY_FORMAT = DateFormat(
    re.compile(
        r"(?P<weekday>\S+) (?P<day>[0-9]{2}) (?P<month>\S+) (?P<year>[0-9]{4})"
    ),
    exact_names=True,
)
LENIENT_FORMAT = DateFormat(
    re.compile(
        r"(?P<weekday>\S+) (?P<day>[0-9]{1,2}) (?P<month>\S+) (?P<year>[0-9]{4})"
    ),
    exact_names=False,
)
ACCEPTED_FORMATS = (PRIMARY_FORMAT, LENIENT_FORMAT)


class DateCodec:
    """Parse and format canonical ledger dates for a locale."""

    def __init__(
        self,
        locale: DateLocale = FRENCH,
        formats: tuple[DateFormat, ...] = ACCEPTED_FORMATS,
    ) -> None:
        self._locale = locale
        self._formats = formats

    @property
    def locale(self) -> DateLocale:
        return self._locale

    def parse(self, text: str) -> date:
        """Parse a canonical date string.

        Args:
            text: Long-form date such as ``"samedi 1 février 2025"``.

        Returns:
            date: Parsed calendar date.

        Raises:
            InvalidDateFormat: When no accepted format matches.
        """
        if isinstance(text, str):
            for pattern, exact_names in self._formats:
                match = pattern.fullmatch(text)
                if match is None:
                    continue
                parsed = self._build_date(match, exact_names)
                if parsed is not None:
                    return parsed
        raise InvalidDateFormat(text)

    def try_parse(self, text: str) -> date | None:
        """Return the parsed date, or None when the text does not parse."""
        try:
            return self.parse(text)
        except InvalidDateFormat:
            return None

    def format(self, value: date) -> str:
        """Render the canonical long-form string used for storage."""
        return (
            f"{self._locale.weekday_name(value)} {value.day:02d} "
            f"{self._locale.month_name(value)} {value.year:04d}"
        )

    @staticmethod
    def format_short(value: date) -> str:
        """Render the compact ``dd/mm/yyyy`` display form."""
        return value.strftime("%d/%m/%Y")

    def _build_date(self, match: re.Match, exact_names: bool) -> date | None:
        month = self._locale.month_number(match.group("month"), exact_names)
        weekday = self._locale.weekday_index(
            match.group("weekday"),
            exact_names,
        )
        if month is None or weekday is None:
            return None
        try:
            parsed = date(
                int(match.group("year")),
                month,
                int(match.group("day")),
            )
        except ValueError:
            return None
        if parsed.weekday() != weekday:
            return None
        return parsed


DEFAULT_CODEC = DateCodec()


def parse_date(text: str) -> date:
    """Parse a canonical date string with the default codec."""
    return DEFAULT_CODEC.parse(text)


def try_parse_date(text: str) -> date | None:
    """Parse a canonical date string, returning None on failure."""
    return DEFAULT_CODEC.try_parse(text)


def format_date(value: date) -> str:
    """Format a date as a canonical long-form string."""
    return DEFAULT_CODEC.format(value)


def format_short_date(value: date) -> str:
    """Format a date for compact display."""
    return DateCodec.format_short(value)


__all__ = [
    "DateCodec",
    "DateFormat",
    "PRIMARY_FORMAT",
    "LENIENT_FORMAT",
    "ACCEPTED_FORMATS",
    "DateLocale",
    "FRENCH",
    "DEFAULT_CODEC",
    "parse_date",
    "try_parse_date",
    "format_date",
    "format_short_date",
]
