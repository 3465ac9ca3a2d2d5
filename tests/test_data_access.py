import os

import pytest

from wardtrack.data_access import DataAccessError, SQLDataAccess, open_database
from wardtrack.models import Medicine, Patient


@pytest.fixture
def db(tmp_path):
    with open_database(tmp_path / "hospital_data.db") as access:
        yield access


def test_open_stores_absolute_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with open_database("rel.db") as access:
        assert access.path == os.path.join(str(tmp_path), "rel.db")
        assert os.path.isabs(access.path)


def test_open_directory_fails(tmp_path):
    access = SQLDataAccess()
    with pytest.raises(DataAccessError):
        access.open(tmp_path)


def test_operations_require_open_database():
    access = SQLDataAccess()
    with pytest.raises(DataAccessError):
        access.add_patient(Patient("Ada", "Lovelace"))
    with pytest.raises(DataAccessError):
        access.get_all_medicines()


def test_closed_after_context(tmp_path):
    with open_database(tmp_path / "a.db") as access:
        access.add_patient(Patient("Ada", "Lovelace"))
    with pytest.raises(DataAccessError):
        access.get_all_patients()


def test_add_and_list_patients(db):
    db.add_patient(Patient("Ada", "Lovelace", "ignored"))
    db.add_patient(Patient("Alan", "Turing"))
    assert db.get_all_patients() == [Patient("Ada", "Lovelace"), Patient("Alan", "Turing")]


def test_data_persists_across_opens(tmp_path):
    path = tmp_path / "persist.db"
    with open_database(path) as access:
        access.add_medicine(Medicine("R1", "Aspirin", "01/01/2024", "01/01/2025"))
    with open_database(path) as access:
        assert access.get_all_medicines() == [
            Medicine("R1", "Aspirin", "01/01/2024", "01/01/2025")
        ]


def test_remove_patient(db):
    db.add_patient(Patient("Ada", "Lovelace"))
    db.add_patient(Patient("Alan", "Turing"))
    db.remove_patient(Patient("Ada", "Lovelace"))
    assert db.get_all_patients() == [Patient("Alan", "Turing")]


def test_update_patient_zone(db):
    db.add_patient(Patient("Ada", "Lovelace"))
    updated = Patient("Ada", "Lovelace", "Ward 3", "01/02/2024", "10/02/2024")
    db.update_patient_zone(updated)
    assert db.get_all_patients() == [updated]


def test_add_and_remove_medicine(db):
    aspirin = Medicine("R1", "Aspirin", "01/01/2024", "01/01/2025")
    ibuprofen = Medicine("R2", "Ibuprofen", "02/01/2024", "02/01/2025")
    db.add_medicine(aspirin)
    db.add_medicine(ibuprofen)
    db.remove_medicine(Medicine("R1", ""))
    assert db.get_all_medicines() == [ibuprofen]


def test_duplicate_medicine_rejected(db):
    db.add_medicine(Medicine("R1", "Aspirin"))
    with pytest.raises(DataAccessError):
        db.add_medicine(Medicine("R1", "Other"))
    assert [m.name for m in db.get_all_medicines()] == ["Aspirin"]


def test_medicines_of_patient(db):
    ada = Patient("Ada", "Lovelace")
    aspirin = Medicine("R1", "Aspirin", "01/01/2024", "01/01/2025")
    db.add_patient(ada)
    db.add_medicine(aspirin)
    db.add_medicine(Medicine("R2", "Ibuprofen"))
    db.add_medicine_to_patient(ada, Medicine("R1", ""))
    assert db.get_medicines_of_patient(ada) == [aspirin]


def test_remove_medicine_from_patient(db):
    ada = Patient("Ada", "Lovelace")
    db.add_medicine(Medicine("R1", "Aspirin"))
    db.add_medicine(Medicine("R2", "Ibuprofen"))
    db.add_medicine_to_patient(ada, Medicine("R1", "Aspirin"))
    db.add_medicine_to_patient(ada, Medicine("R2", "Ibuprofen"))
    db.remove_medicine_from_patient(ada, Medicine("R1", "Aspirin"))
    assert [m.receipt_number for m in db.get_medicines_of_patient(ada)] == ["R2"]


def test_remove_medicines_of_patient(db):
    ada = Patient("Ada", "Lovelace")
    alan = Patient("Alan", "Turing")
    db.add_medicine(Medicine("R1", "Aspirin"))
    db.add_medicine_to_patient(ada, Medicine("R1", "Aspirin"))
    db.add_medicine_to_patient(alan, Medicine("R1", "Aspirin"))
    db.remove_medicines_of_patient(ada)
    assert db.get_medicines_of_patient(ada) == []
    assert len(db.get_medicines_of_patient(alan)) == 1


def test_patients_of_medicine_split_names(db):
    aspirin = Medicine("R1", "Aspirin")
    db.add_medicine(aspirin)
    db.add_medicine_to_patient(Patient("Ada", "King Lovelace"), aspirin)
    assert db.get_patients_of_medicine(aspirin) == [Patient("Ada", "King Lovelace")]


def test_patients_of_medicine_without_space(db):
    aspirin = Medicine("R1", "Aspirin")
    db.add_medicine(aspirin)
    db.add_medicine_to_patient(Patient("Plato", ""), aspirin)
    # The stored full name is "Plato " so the surname is empty.
    assert db.get_patients_of_medicine(aspirin) == [Patient("Plato", "")]


def test_patients_of_unknown_medicine_not_listed(db):
    db.add_medicine_to_patient(Patient("Ada", "Lovelace"), Medicine("R9", "Ghost"))
    assert db.get_patients_of_medicine(Medicine("R9", "Ghost")) == []


def test_remove_patients_of_medicine(db):
    aspirin = Medicine("R1", "Aspirin")
    db.add_medicine(aspirin)
    db.add_medicine_to_patient(Patient("Ada", "Lovelace"), aspirin)
    db.add_medicine_to_patient(Patient("Alan", "Turing"), aspirin)
    db.remove_patients_of_medicine(aspirin)
    assert db.get_patients_of_medicine(aspirin) == []