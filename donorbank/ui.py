"""Console prompts and listings used by the donor registry."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Optional, TextIO

from donorbank.utils import (
    VALID_BLOOD_TYPES,
    convert_to_int,
    is_valid_number,
    prompt_blood_type,
)

PROVINCES: tuple[tuple[int, str], ...] = (
    (1, "Putumayo"),
    (2, "Cauca"),
    (3, "Valle del Cauca"),
    (4, "Amazonas"),
    (5, "Risaralda"),
    (6, "Antioquia"),
    (7, "Norte de Santander"),
    (8, "Choco"),
    (9, "Arauca"),
    (0, "Guainia"),
)

_RETRY_HINT = "Por favor ingrese un número válido."


class UserInterface:
    """Reads answers from one stream and writes messages to another."""

    def __init__(
        self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def display_blood_types(self) -> None:
        """List the accepted blood types."""
        lines = ["Tipos de sangre:"]
        lines.extend(f" {blood}" for blood in VALID_BLOOD_TYPES[:8])
        self._write("\n".join(lines) + "\n")

    def display_provinces(self) -> None:
        """List the departments the user can choose from."""
        lines = ["Elige el departamento:"]
        lines.extend(f"{number}. {name}" for number, name in PROVINCES)
        self._write("\n".join(lines) + "\n")

    def clear_console(self) -> None:
        """Clear the terminal; does nothing when output is not a terminal."""
        isatty = getattr(self.stdout, "isatty", None)
        if not (isatty and isatty()):
            return
        self.stdout.flush()
        try:
            if os.name == "nt":
                subprocess.run("cls", shell=True, check=False)
            else:
                subprocess.run(["clear"], check=False)
        except OSError:
            pass

    def wait_for_key_press(self) -> None:
        """Show a pause message and wait for the user to press Enter."""
        self._write("Presiona cualquier tecla para continuar...")
        self.stdin.readline()

    def read_line(self, prompt: str) -> str:
        """Show ``prompt`` and return the next line without its newline.

        Raises EOFError when the input has ended.
        """
        self._write(prompt)
        line = self.stdin.readline()
        if not line:
            raise EOFError("input ended")
        return line.removesuffix("\n")

    def read_int(self, prompt: str) -> int:
        """Ask until the answer is a number that fits in 32 bits."""
        while True:
            answer = self.read_line(prompt)
            if not is_valid_number(answer):
                self._write(f"Entrada no válida. {_RETRY_HINT}\n")
                continue
            try:
                return convert_to_int(answer)
            except OverflowError:
                self._write(f"Entrada fuera de rango. {_RETRY_HINT}\n")
            except ValueError as error:
                self._write(f"Entrada no válida: {error}. {_RETRY_HINT}\n")

    def read_blood_type(self, prompt: str) -> str:
        """Ask until a valid blood type is entered and return it."""
        return prompt_blood_type(prompt, self.stdin.readline, self._write)