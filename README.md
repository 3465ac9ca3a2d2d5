# wardtrack

wardtrack keeps a record of hospital patients, where each one is staying,
and which medicines have been prescribed to whom. Data lives in a SQLite
database file with three tables: `Patient`, `Medula` (medicines) and `Map`
(which patient, by full name, uses which medicine, by receipt number).
The tables are created when a database is opened, if they do not exist yet.

wardtrack has no dependencies beyond the Python standard library
(Python 3.10 or later).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Data model

`wardtrack.models` holds two dataclasses:

- `Medicine(receipt_number, name, start_date="", expiration_date="")`
- `Patient(name, surname, stay_zone="", in_date="", out_date="")`;
  `patient.full_name()` (and `str(patient)`) gives `"name surname"`, the key
  under which prescriptions are stored.

Dates are kept as `dd/mm/yyyy` strings. `format_date(date)` produces such a
string and `parse_date(text)` reads one back, raising `ValueError` for text
that is not a valid date in exactly that form.

## Storage

```python
from wardtrack.data_access import open_database
from wardtrack.models import Medicine, Patient

jane = Patient("Jane", "Doe")
paracetamol = Medicine("R-001", "Paracetamol", "01/01/2024", "01/01/2026")

with open_database("hospital_data.db") as db:
    db.add_patient(jane)
    db.add_medicine(paracetamol)
    db.add_medicine_to_patient(jane, paracetamol)
    print(db.get_medicines_of_patient(jane))
```

`open_database(path)` returns an `SQLDataAccess` already opened on the file;
an `SQLDataAccess()` can also be opened later with `open(path)` and closed
with `close()`, and works as a context manager that closes on exit.

`SQLDataAccess` provides:

- `add_patient`, `remove_patient` (by name and surname),
  `update_patient_zone` (stores stay zone, arrival and departure dates)
- `add_medicine`, `remove_medicine` (by receipt number)
- `add_medicine_to_patient`, `remove_medicine_from_patient`,
  `remove_medicines_of_patient`, `remove_patients_of_medicine`
- `get_all_patients`, `get_all_medicines`, `get_medicines_of_patient`,
  `get_patients_of_medicine`

`get_patients_of_medicine` returns patients with only name and surname
filled in, split from the stored full name at the first space; a full name
without a space is used as both name and surname.

Using a closed database, or a statement that SQLite rejects (for example a
second medicine with an existing receipt number), raises `DataAccessError`.

## Tables

`wardtrack.table_models` provides `MedicineTableModel` and
`PatientTableModel`: row and column views over records, with `row_count`,
`column_count`, `data(row, column)`, `header(section)`, `append`, `clear`,
`update` (replace all rows) and `exists`. A medicine exists in the table
when its receipt number matches; a patient when name and surname match.
`data` raises `IndexError` for a row outside the table and returns `None`
for a column it does not have.

Medicines are classified by `expiry_status(medicine, today=None)` into an
`ExpiryStatus`: more than 14 days left is `GREEN`, 1 to 14 days is `YELLOW`,
and an expired medicine or one with an unreadable expiration date is `RED`.
Each status carries its colour as `rgb`. `MedicineTableModel.background(row)`
gives a row's colour and `color_weights()` counts green, yellow and red
medicines, in that order.

## Controllers

`wardtrack.controllers` wires a data store to views:

- `PatientController` adds, updates and removes patients (removal also drops
  their prescriptions), shows the selected patient's medicines and zone
  details, and with `edit_medicines(patient, edit_view)` starts an
  `EditMedicinesController` and runs the editor view.
- `EditMedicinesController` gives medicines to, and takes them from, one
  patient.
- `MedicineController` registers medicines, refusing a receipt number that
  is already stored, removes medicines together with their prescriptions,
  and lists the patients of a selected medicine. It reports outcomes through
  the view's `display_error` and `display_info`.

Each controller refreshes its view with fresh data after every change. Any
object with the methods the controllers call can serve as a view.

## What is not included

wardtrack has no graphical screens and no command-line program. The views
the controllers talk to, and any window or dialog around them, must be
supplied by the application that uses the package.