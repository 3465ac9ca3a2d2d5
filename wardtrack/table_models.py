"""Tabular views over lists of medicines and patients."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from datetime import date
from enum import Enum
from operator import attrgetter
from typing import Generic, TypeVar

from wardtrack.models import Medicine, Patient, parse_date

T = TypeVar("T")

EXPIRY_WARNING_DAYS = 14


class ExpiryStatus(Enum):
    """How close a medicine is to expiring, with its display colour."""

    GREEN = (76, 175, 80)
    YELLOW = (255, 235, 59)
    RED = (244, 67, 54)

    @property
    def rgb(self) -> tuple[int, int, int]:
        """The red, green and blue components of the status colour."""
        return self.value


def expiry_status(medicine: Medicine, today: date | None = None) -> ExpiryStatus:
    """Classify a medicine by the days left until its expiration date.

    More than two weeks left is green, any days left is yellow, and an
    expired medicine or one without a readable date is red.
    """
    today = today or date.today()
    try:
        expires = parse_date(medicine.expiration_date)
    except ValueError:
        return ExpiryStatus.RED
    days = (expires - today).days
    if days > EXPIRY_WARNING_DAYS:
        return ExpiryStatus.GREEN
    if days > 0:
        return ExpiryStatus.YELLOW
    return ExpiryStatus.RED


class _RowStore(Generic[T]):
    """Rows of records shown under fixed column headers."""

    _columns: tuple[tuple[str, Callable[[T], str]], ...] = ()

    def __init__(self, rows: Iterable[T] = ()) -> None:
        self._rows: list[T] = list(rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[T]:
        return iter(self._rows)

    def _row(self, row: int) -> T:
        if not 0 <= row < len(self._rows):
            raise IndexError(f"row {row} out of range")
        return self._rows[row]

    def _cell(self, row: int, column: int) -> str | None:
        item = self._row(row)
        if not 0 <= column < len(self._columns):
            return None
        return self._columns[column][1](item)

    def _title(self, section: int) -> str | None:
        if not 0 <= section < len(self._columns):
            return None
        return self._columns[section][0]

    def _replace(self, items: Iterable[T]) -> None:
        self._rows.clear()
        self._rows.extend(items)


class MedicineTableModel(_RowStore[Medicine]):
    """Medicines shown by receipt number, name and dates."""

    _columns = (
        ("Prescription No", attrgetter("receipt_number")),
        ("Drug Name", attrgetter("name")),
        ("Production Date", attrgetter("start_date")),
        ("Expiration Date", attrgetter("expiration_date")),
    )

    def row_count(self) -> int:
        """Number of rows in the table."""
        return len(self._rows)

    def column_count(self) -> int:
        """Number of columns in the table."""
        return len(self._columns)

    def data(self, row: int, column: int) -> str | None:
        """Text of a cell, or None for a column the table does not have."""
        return self._cell(row, column)

    def background(self, row: int, today: date | None = None) -> tuple[int, int, int]:
        """Background colour of a row according to the medicine's expiry."""
        return expiry_status(self._row(row), today).rgb

    def header(self, section: int) -> str | None:
        """Title of a column, or None for a column the table does not have."""
        return self._title(section)

    def append(self, medicine: Medicine) -> None:
        """Add a row at the end."""
        self._rows.append(medicine)

    def clear(self) -> None:
        """Remove every row."""
        self._rows.clear()

    def update(self, medicines: Iterable[Medicine]) -> None:
        """Replace the rows with the given medicines."""
        self._replace(medicines)

    def exists(self, medicine: Medicine) -> bool:
        """Whether a medicine with the same receipt number is in the table."""
        return any(m.receipt_number == medicine.receipt_number for m in self._rows)

    def color_weights(self, today: date | None = None) -> tuple[int, int, int]:
        """Count the green, yellow and red medicines, in that order."""
        today = today or date.today()
        counts = dict.fromkeys(ExpiryStatus, 0)
        for medicine in self._rows:
            counts[expiry_status(medicine, today)] += 1
        return counts[ExpiryStatus.GREEN], counts[ExpiryStatus.YELLOW], counts[ExpiryStatus.RED]


class PatientTableModel(_RowStore[Patient]):
    """Patients shown by name, zone and stay dates."""

    _columns = (
        ("Patient Name", attrgetter("name")),
        ("Patient Surname", attrgetter("surname")),
        ("Current Place", attrgetter("stay_zone")),
        ("Arrival Date", attrgetter("in_date")),
        ("Departure Date", attrgetter("out_date")),
    )

    def row_count(self) -> int:
        """Number of rows in the table."""
        return len(self._rows)

    def column_count(self) -> int:
        """Number of columns in the table."""
        return len(self._columns)

    def data(self, row: int, column: int) -> str | None:
        """Text of a cell, or None for a column the table does not have."""
        return self._cell(row, column)

    def header(self, section: int) -> str | None:
        """Title of a column, or None for a column the table does not have."""
        return self._title(section)

    def append(self, patient: Patient) -> None:
        """Add a row at the end."""
        self._rows.append(patient)

    def clear(self) -> None:
        """Remove every row."""
        self._rows.clear()

    def update(self, patients: Iterable[Patient]) -> None:
        """Replace the rows with the given patients."""
        self._replace(patients)

    def exists(self, patient: Patient) -> bool:
        """Whether a patient with the same name and surname is in the table."""
        return any(
            p.name == patient.name and p.surname == patient.surname for p in self._rows
        )