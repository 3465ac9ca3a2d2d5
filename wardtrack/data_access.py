"""SQLite storage for patients, medicines and the prescriptions linking them."""

from __future__ import annotations

import os
import sqlite3
from types import TracebackType

from wardtrack.models import Medicine, Patient

_SCHEMA = (
    "CREATE TABLE IF NOT EXISTS Patient ("
    "name TEXT, surname TEXT, stay_zone TEXT, in_date TEXT, out_date TEXT)",
    "CREATE TABLE IF NOT EXISTS Medula ("
    "id TEXT PRIMARY KEY, name TEXT, purchased_date TEXT, expiration_date TEXT)",
    "CREATE TABLE IF NOT EXISTS Map (patient_full_name TEXT, medula_id TEXT)",
)


class DataAccessError(Exception):
    """Raised when the database cannot be opened or a statement fails."""


def _text(value: object) -> str:
    return "" if value is None else str(value)


def _split_full_name(full_name: str) -> tuple[str, str]:
    name, sep, surname = full_name.partition(" ")
    if not sep:
        # Without a space the whole value serves as both name and surname.
        return full_name, full_name
    return name, surname


class SQLDataAccess:
    """Reads and writes hospital records in an SQLite database file."""

    def __init__(self) -> None:
        self._conn: sqlite3.Connection | None = None
        self.path: str | None = None

    def open(self, db_file: str | os.PathLike[str]) -> None:
        """Open (creating if needed) the database at the given path."""
        self.close()
        path = os.path.abspath(os.fspath(db_file))
        try:
            conn = sqlite3.connect(path)
            with conn:
                for statement in _SCHEMA:
                    conn.execute(statement)
        except sqlite3.Error as exc:
            raise DataAccessError(f"cannot open database {path}: {exc}") from exc
        self._conn = conn
        self.path = path

    def close(self) -> None:
        """Close the database if it is open."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> SQLDataAccess:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise DataAccessError("database is not open")
        return self._conn

    def _execute(self, sql: str, params: dict[str, str]) -> None:
        conn = self._connection()
        try:
            with conn:
                conn.execute(sql, params)
        except sqlite3.Error as exc:
            raise DataAccessError(str(exc)) from exc

    def _query(self, sql: str, params: dict[str, str] | None = None) -> list[sqlite3.Row]:
        conn = self._connection()
        try:
            cursor = conn.execute(sql, params or {})
            cursor.row_factory = sqlite3.Row
            return cursor.fetchall()
        except sqlite3.Error as exc:
            raise DataAccessError(str(exc)) from exc

    def add_patient(self, patient: Patient) -> None:
        """Insert a patient by name and surname."""
        self._execute(
            "INSERT INTO Patient (name, surname) VALUES (:name, :surname)",
            {"name": patient.name, "surname": patient.surname},
        )

    def remove_patient(self, patient: Patient) -> None:
        """Delete every patient with the given name and surname."""
        self._execute(
            "DELETE FROM Patient WHERE name = :name AND surname = :surname",
            {"name": patient.name, "surname": patient.surname},
        )

    def add_medicine(self, medicine: Medicine) -> None:
        """Insert a medicine."""
        self._execute(
            "INSERT INTO Medula (id, name, purchased_date, expiration_date) "
            "VALUES (:id, :name, :purchased_date, :expiration_date)",
            {
                "id": medicine.receipt_number,
                "name": medicine.name,
                "purchased_date": medicine.start_date,
                "expiration_date": medicine.expiration_date,
            },
        )

    def remove_medicine(self, medicine: Medicine) -> None:
        """Delete the medicine with the given receipt number."""
        self._execute(
            "DELETE FROM Medula WHERE id = :id", {"id": medicine.receipt_number}
        )

    def add_medicine_to_patient(self, patient: Patient, medicine: Medicine) -> None:
        """Record that the patient uses the medicine."""
        self._execute(
            "INSERT INTO Map (patient_full_name, medula_id) VALUES (:full_name, :medicine_no)",
            {"full_name": patient.full_name(), "medicine_no": medicine.receipt_number},
        )

    def remove_medicine_from_patient(self, patient: Patient, medicine: Medicine) -> None:
        """Remove the link between the patient and the medicine."""
        self._execute(
            "DELETE FROM Map WHERE patient_full_name = :full_name AND medula_id = :medicine_no",
            {"full_name": patient.full_name(), "medicine_no": medicine.receipt_number},
        )

    def remove_medicines_of_patient(self, patient: Patient) -> None:
        """Remove every medicine link of the patient."""
        self._execute(
            "DELETE FROM Map WHERE patient_full_name = :full_name",
            {"full_name": patient.full_name()},
        )

    def remove_patients_of_medicine(self, medicine: Medicine) -> None:
        """Remove every patient link of the medicine."""
        self._execute(
            "DELETE FROM Map WHERE medula_id = :id", {"id": medicine.receipt_number}
        )

    def update_patient_zone(self, patient: Patient) -> None:
        """Store the patient's stay zone and arrival and departure dates."""
        self._execute(
            "UPDATE Patient SET stay_zone = :stay_zone, in_date = :in_date, "
            "out_date = :out_date WHERE name = :name AND surname = :surname",
            {
                "stay_zone": patient.stay_zone,
                "in_date": patient.in_date,
                "out_date": patient.out_date,
                "name": patient.name,
                "surname": patient.surname,
            },
        )

    def get_medicines_of_patient(self, patient: Patient) -> list[Medicine]:
        """Return the medicines linked to the patient."""
        rows = self._query(
            "SELECT Medula.id, Medula.name, Medula.purchased_date, Medula.expiration_date "
            "FROM Medula INNER JOIN Map ON Medula.id = Map.medula_id "
            "WHERE Map.patient_full_name = :fullname",
            {"fullname": patient.full_name()},
        )
        return [self._medicine_from_row(row) for row in rows]

    def get_patients_of_medicine(self, medicine: Medicine) -> list[Patient]:
        """Return the patients linked to the medicine, with only names filled in."""
        rows = self._query(
            "SELECT Map.patient_full_name FROM Medula "
            "INNER JOIN Map ON Medula.id = Map.medula_id WHERE Map.medula_id = :id",
            {"id": medicine.receipt_number},
        )
        patients = []
        for row in rows:
            name, surname = _split_full_name(_text(row["patient_full_name"]))
            patients.append(Patient(name, surname))
        return patients

    def get_all_patients(self) -> list[Patient]:
        """Return every stored patient."""
        return [
            Patient(
                _text(row["name"]),
                _text(row["surname"]),
                _text(row["stay_zone"]),
                _text(row["in_date"]),
                _text(row["out_date"]),
            )
            for row in self._query("SELECT * FROM Patient")
        ]

    def get_all_medicines(self) -> list[Medicine]:
        """Return every stored medicine."""
        return [self._medicine_from_row(row) for row in self._query("SELECT * FROM Medula")]

    @staticmethod
    def _medicine_from_row(row: sqlite3.Row) -> Medicine:
        return Medicine(
            _text(row["id"]),
            _text(row["name"]),
            _text(row["purchased_date"]),
            _text(row["expiration_date"]),
        )


def open_database(db_file: str | os.PathLike[str]) -> SQLDataAccess:
    """Return a data access object already opened on the given file."""
    access = SQLDataAccess()
    access.open(db_file)
    return access