"""Persistence of donors in a plain text file, one donor per line."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Callable, Iterator, Union

from donorbank.donor import Donor


def parse_validation_response(text: str) -> str:
    """Interpret a phone validation service reply.

    Returns "true" or "false" when ``isValid`` is a boolean, otherwise the
    string under ``clave``. Raises ValueError for malformed replies.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError("validation response is not a JSON object")
    is_valid = data.get("isValid")
    if isinstance(is_valid, bool):
        return "true" if is_valid else "false"
    key = data.get("clave")
    if not isinstance(key, str):
        raise ValueError("validation response has no usable 'clave' string")
    return key


class DonorFile:
    """A text file holding donor records."""

    def __init__(self, path: Union[str, os.PathLike]) -> None:
        self.path = Path(path)

    def __iter__(self) -> Iterator[Donor]:
        with self.path.open(encoding="utf-8") as handle:
            for line in handle:
                yield Donor.parse_line(line.removesuffix("\n"))

    def append(self, donor: Donor) -> None:
        """Add one donor at the end of the file, creating it if needed."""
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(donor.to_line() + "\n")

    def load_all(self) -> list[Donor]:
        """Return every donor in file order."""
        return list(self)

    def search(
        self, district: int, address_filter: str = "", blood_type_filter: str = ""
    ) -> list[Donor]:
        """Donors in ``district`` whose address contains ``address_filter``
        and whose blood type equals ``blood_type_filter``; empty filters match
        everything."""
        return [
            donor
            for donor in self
            if donor.district == district
            and (not address_filter or address_filter in donor.address)
            and (not blood_type_filter or donor.blood_type == blood_type_filter)
        ]

    def remove_by_name(
        self, name: str, confirm: Callable[[Donor], bool]
    ) -> tuple[bool, list[Donor]]:
        """Remove donors named ``name`` for which ``confirm`` returns True.

        Returns whether any donor had that name and the donors removed.
        """
        donors = self.load_all()
        found = False
        kept: list[Donor] = []
        removed: list[Donor] = []
        for donor in donors:
            if donor.name == name:
                found = True
                if confirm(donor):
                    removed.append(donor)
                    continue
            kept.append(donor)

        fd, temp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=".donors-", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.writelines(donor.to_line() + "\n" for donor in kept)
            os.replace(temp_name, self.path)
        except BaseException:
            Path(temp_name).unlink(missing_ok=True)
            raise
        return found, removed