"""Menu-driven command line for the donor registry."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from donorbank.applicant import register_applicant
from donorbank.manager import DonorManager
from donorbank.ui import UserInterface
from donorbank.utils import convert_to_int

_BANNER = (
    "==============================\n"
    "          CRUZ ROJA\n"
    "==============================\n"
)

_MENU = (
    "1. Registrar donante\n"
    "2. Buscar donante\n"
    "3. Eliminar donante\n"
    "4. Historial donantes\n"
    "5. Salir\n"
)


def _parse_choice(answer: str) -> int:
    try:
        return convert_to_int(answer)
    except (ValueError, OverflowError):
        return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive menu until the user leaves or input ends."""
    parser = argparse.ArgumentParser(
        prog="donorbank", description="Registro de donantes de sangre."
    )
    parser.add_argument(
        "data_file", nargs="?", default="data.txt", help="archivo de donantes"
    )
    args = parser.parse_args(argv)

    ui = UserInterface()
    manager = DonorManager(args.data_file, ui)
    out = ui.stdout

    try:
        while True:
            ui.clear_console()
            out.write(_BANNER + _MENU)
            choice = _parse_choice(ui.read_line("Ingrese su elección: "))
            if choice == 1:
                manager.register_donor()
            elif choice == 2:
                manager.search_and_display()
            elif choice == 3:
                name = ui.read_line("Ingrese el nombre del donante a eliminar: ")
                manager.delete_donor(name)
                ui.wait_for_key_press()
            elif choice == 4:
                manager.display_all_donors()
            elif choice == 5:
                ui.clear_console()
                out.write("Gracias por usar el Sistema de la Cruz Roja\n")
                out.flush()
                return 0
            elif choice == 6:
                out.write("pruebas para solicitante: \n")
                register_applicant(ui)
            else:
                out.write("Opción no válida. Inténtalo de nuevo.\n")
                ui.wait_for_key_press()
    except EOFError:
        out.write("\n")
        out.flush()
        return 0


if __name__ == "__main__":
    raise SystemExit(main())