"""Interactive registration, search, removal and listing of donors."""

from __future__ import annotations

import os
import sys
from typing import Callable, Optional, Union

from donorbank.donor import Donor
from donorbank.storage import DonorFile
from donorbank.ui import UserInterface

PhoneValidator = Callable[[str], bool]


class DonorManager:
    """Drives the donor workflows through a UserInterface and a DonorFile."""

    def __init__(
        self,
        path: Union[str, os.PathLike],
        ui: Optional[UserInterface] = None,
        phone_validator: Optional[PhoneValidator] = None,
    ) -> None:
        self.ui = ui if ui is not None else UserInterface()
        self.store = DonorFile(path)
        self.phone_validator = phone_validator
        self.donors: list[Donor] = []

    def _write(self, text: str) -> None:
        self.ui.stdout.write(text)
        self.ui.stdout.flush()

    def _show(self, donor: Donor, district_label: str, number_label: str) -> None:
        lines = [f"Nombre: {donor.name}", f"Dirección: {donor.address}"]
        if district_label:
            lines.append(f"{district_label}: {donor.district}")
        lines.append(f"Tipo de sangre: {donor.blood_type}")
        lines.append(f"{number_label}: {donor.number}")
        self._write("\n".join(lines) + "\n\n")

    def register_donor(self) -> Donor:
        """Ask for a new donor's details, store them and return the donor."""
        ui = self.ui
        ui.clear_console()
        self._write("Ingrese los detalles del donante\n")
        donor_id = ui.read_int("Id: ")
        name = ui.read_line("Nombre: ")
        address = ui.read_line("Dirección: ")
        ui.display_provinces()
        district = ui.read_int("departamento (ingrese el número correspondiente): ")
        ui.display_blood_types()
        blood_type = ui.read_blood_type("Tipo de sangre: ")
        number = ui.read_line("Número: ")
        if self.phone_validator is not None:
            while not self.phone_validator(number):
                self._write("Digita un numero de telefono valido\n")
                number = ui.read_line("")
        donor = Donor(donor_id, name, address, district, blood_type, number)
        self.donors.append(donor)
        self.store.append(donor)
        return donor

    def search_and_display(self) -> list[Donor]:
        """Ask for search criteria, show and return the matching donors."""
        ui = self.ui
        ui.clear_console()
        ui.display_provinces()
        district = ui.read_int("Ingrese el número de la departamento: ")
        address_filter = ui.read_line(
            "Ingrese la dirección (dejar en blanco para omitir): "
        )
        ui.display_blood_types()
        blood_type_filter = ui.read_line(
            "Ingrese el tipo de sangre (dejar en blanco para omitir): "
        )
        try:
            found = self.store.search(district, address_filter, blood_type_filter)
        except FileNotFoundError:
            self._write("Error al abrir el archivo para leer.\n")
            found = []
        if not found:
            self._write("No se encontraron donantes con los criterios especificados.\n")
        for donor in found:
            self._show(donor, "Departamento", "Número")
        ui.wait_for_key_press()
        return found

    def _confirm_removal(self, donor: Donor) -> bool:
        self._show(donor, "", "Número de móvil")
        answer = self.ui.read_line(
            "¿Está seguro de que desea eliminar al donante? [s/n]: "
        ).strip()
        return answer[:1] in ("s", "S")

    def delete_donor(self, name: str) -> list[Donor]:
        """Remove donors called ``name`` after confirmation; return them."""
        try:
            found, removed = self.store.remove_by_name(name, self._confirm_removal)
        except FileNotFoundError:
            print(f"Error al abrir el archivo {self.store.path}", file=sys.stderr)
            return []
        if not found:
            self._write(f"No se encontró ningún donante con el nombre {name}\n")
        return removed

    def display_all_donors(self) -> list[Donor]:
        """Show and return every stored donor."""
        try:
            donors = self.store.load_all()
        except FileNotFoundError:
            self._write("Error al abrir el archivo para leer.\n")
            donors = []
        for donor in donors:
            self._show(donor, "Departamento", "Número de móvil")
        self.ui.wait_for_key_press()
        return donors