"""Controllers that connect the views to the hospital database."""

from __future__ import annotations

from datetime import date
from typing import Protocol

from wardtrack.data_access import SQLDataAccess
from wardtrack.models import Medicine, Patient, format_date

DUPLICATE_MEDICINE_TITLE = "Repetitive Drug Error"
DUPLICATE_MEDICINE_MESSAGE = "This drug number is already registered in the system!"
MISSING_MEDICINE_TITLE = "No Drug Found"
MISSING_MEDICINE_MESSAGE = "No registered drug found with this drug information!"
MEDICINE_ADDED_TITLE = "Medicine Added"
MEDICINE_ADDED_MESSAGE = "The medicine was added successfully."
MEDICINE_REMOVED_TITLE = "Medicine Removed"
MEDICINE_REMOVED_MESSAGE = "The medicine was removed successfully."


class EditMedicinesView(Protocol):
    def update_all_medicines_table(self, medicines: list[Medicine]) -> None: ...

    def update_used_medicines_table(self, medicines: list[Medicine]) -> None: ...

    def run_modal(self) -> None: ...


class PatientView(Protocol):
    def update_patients_table(self, patients: list[Patient]) -> None: ...

    def update_medicines_table(self, medicines: list[Medicine]) -> None: ...

    def update_selected_patient_zone_info(self, patient: Patient) -> None: ...


class MedicineView(Protocol):
    def update_medicines_table(self, medicines: list[Medicine]) -> None: ...

    def update_patients_table(self, patients: list[Patient]) -> None: ...

    def display_error(self, title: str, message: str) -> None: ...

    def display_info(self, title: str, message: str) -> None: ...


def _date_text(value: date | str | None) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return format_date(value)


class EditMedicinesController:
    """Manages the medicines one patient uses."""

    def __init__(
        self, data_access: SQLDataAccess, view: EditMedicinesView, patient: Patient
    ) -> None:
        self.data_access = data_access
        self.view = view
        self.patient = patient
        view.update_all_medicines_table(data_access.get_all_medicines())
        self._refresh_used()

    def _refresh_used(self) -> None:
        self.view.update_used_medicines_table(
            self.data_access.get_medicines_of_patient(self.patient)
        )

    def on_add_medicine(self, medicine: Medicine) -> None:
        """Give the medicine to the patient and refresh the used list."""
        self.data_access.add_medicine_to_patient(self.patient, medicine)
        self._refresh_used()

    def on_remove_medicine(self, medicine: Medicine) -> None:
        """Take the medicine away from the patient and refresh the used list."""
        self.data_access.remove_medicine_from_patient(self.patient, medicine)
        self._refresh_used()


class PatientController:
    """Handles adding, updating, removing and selecting patients."""

    def __init__(self, data_access: SQLDataAccess, view: PatientView) -> None:
        self.data_access = data_access
        self.view = view
        self._refresh_patients()

    def _refresh_patients(self) -> None:
        self.view.update_patients_table(self.data_access.get_all_patients())

    def edit_medicines(
        self, patient: Patient, edit_view: EditMedicinesView
    ) -> EditMedicinesController:
        """Open the medicine editor for the patient and run it until closed."""
        controller = EditMedicinesController(self.data_access, edit_view, patient)
        edit_view.run_modal()
        return controller

    def on_add_patient(self, patient: Patient) -> None:
        """Store a new patient and refresh the list."""
        self.data_access.add_patient(patient)
        self._refresh_patients()

    def on_update_patient(self, patient: Patient) -> None:
        """Store the patient's zone and dates and refresh the list."""
        self.data_access.update_patient_zone(patient)
        self._refresh_patients()

    def on_remove_patient(self, patient: Patient) -> None:
        """Delete the patient with their medicine links and refresh the list."""
        self.data_access.remove_patient(patient)
        self.data_access.remove_medicines_of_patient(patient)
        self._refresh_patients()

    def on_selected_patient_changed(self, patient: Patient) -> None:
        """Show the selected patient's medicines and zone details."""
        self.view.update_medicines_table(self.data_access.get_medicines_of_patient(patient))
        self.view.update_selected_patient_zone_info(patient)


class MedicineController:
    """Handles registering, removing and inspecting medicines."""

    def __init__(self, data_access: SQLDataAccess, view: MedicineView) -> None:
        self.data_access = data_access
        self.view = view
        self._refresh_medicines()

    def _refresh_medicines(self) -> None:
        self.view.update_medicines_table(self.data_access.get_all_medicines())

    @staticmethod
    def _medicine(
        receipt_no: str,
        name: str,
        production_date: date | str | None,
        expiration_date: date | str | None,
    ) -> Medicine:
        return Medicine(
            receipt_no, name, _date_text(production_date), _date_text(expiration_date)
        )

    def medicine_exists(self, medicine: Medicine) -> bool:
        """Whether a medicine with the same receipt number is stored."""
        return any(
            m.receipt_number == medicine.receipt_number
            for m in self.data_access.get_all_medicines()
        )

    def on_add_medicine(
        self,
        receipt_no: str,
        name: str,
        production_date: date | str | None,
        expiration_date: date | str | None,
    ) -> None:
        """Register a medicine unless its receipt number is already taken."""
        medicine = self._medicine(receipt_no, name, production_date, expiration_date)
        if self.medicine_exists(medicine):
            self.view.display_error(DUPLICATE_MEDICINE_TITLE, DUPLICATE_MEDICINE_MESSAGE)
            return
        self.data_access.add_medicine(medicine)
        self._refresh_medicines()
        self.view.display_info(MEDICINE_ADDED_TITLE, MEDICINE_ADDED_MESSAGE)

    def on_remove_medicine(
        self,
        receipt_no: str,
        name: str,
        production_date: date | str | None,
        expiration_date: date | str | None,
    ) -> None:
        """Remove a registered medicine and every patient link to it."""
        medicine = self._medicine(receipt_no, name, production_date, expiration_date)
        if not self.medicine_exists(medicine):
            self.view.display_error(MISSING_MEDICINE_TITLE, MISSING_MEDICINE_MESSAGE)
            return
        self.data_access.remove_medicine(medicine)
        self.data_access.remove_patients_of_medicine(medicine)
        self._refresh_medicines()
        self.view.display_info(MEDICINE_REMOVED_TITLE, MEDICINE_REMOVED_MESSAGE)

    def on_medicine_selection_changed(
        self,
        receipt_no: str,
        name: str,
        production_date: date | str | None,
        expiration_date: date | str | None,
    ) -> None:
        """Show the patients who use the selected medicine."""
        medicine = self._medicine(receipt_no, name, production_date, expiration_date)
        self.view.update_patients_table(self.data_access.get_patients_of_medicine(medicine))