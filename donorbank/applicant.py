"""Registration of people requesting blood."""

from __future__ import annotations

from dataclasses import dataclass

from donorbank.ui import UserInterface


@dataclass
class Applicant:
    """A person who asks for a blood donation."""

    name: str
    identification: str
    blood_type: str


def _read_word(ui: UserInterface, prompt: str) -> str:
    answer = ui.read_line(prompt).split()
    while not answer:
        answer = ui.read_line("").split()
    return answer[0]


def register_applicant(ui: UserInterface) -> Applicant:
    """Ask for an applicant's name, id and blood type and return them."""
    ui.stdout.write("Bienvenido al sistema de registro para donantes\n")
    name = _read_word(ui, "Digite su nombre: ")
    identification = _read_word(ui, "Digite su numero de identificacion: ")
    blood_type = ui.read_blood_type("Digite su tipo sanguineo: ")
    ui.stdout.write("Solicitud creada\n")
    ui.stdout.flush()
    return Applicant(name, identification, blood_type)