"""Domain records for patients and medicines."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

DATE_FORMAT = "%d/%m/%Y"
_DATE_PATTERN = re.compile(r"(\d{2})/(\d{2})/(\d{4})")


@dataclass
class Medicine:
    """A prescribed medicine identified by its receipt number."""

    receipt_number: str
    name: str
    start_date: str = ""
    expiration_date: str = ""


@dataclass
class Patient:
    """A patient and the zone they are staying in."""

    name: str
    surname: str
    stay_zone: str = ""
    in_date: str = ""
    out_date: str = ""

    def full_name(self) -> str:
        """Return the name and surname joined by a single space."""
        return f"{self.name} {self.surname}"

    def __str__(self) -> str:
        return self.full_name()


def format_date(value: date) -> str:
    """Render a date in the day/month/year form used for storage."""
    return value.strftime(DATE_FORMAT)


def parse_date(text: str) -> date:
    """Parse a strict dd/mm/yyyy string; raise ValueError if it is not a valid date."""
    match = _DATE_PATTERN.fullmatch(text)
    if match is None:
        raise ValueError(f"not a dd/mm/yyyy date: {text!r}")
    day, month, year = (int(part) for part in match.groups())
    return date(year, month, day)