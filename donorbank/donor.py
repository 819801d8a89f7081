"""The donor record and its line-based text format."""

from __future__ import annotations

from dataclasses import dataclass

from donorbank.utils import convert_to_int, trim

FIELD_SEPARATOR = ",    "
_FIELD_COUNT = 6


@dataclass
class Donor:
    """A blood donor as stored in the registry file."""

    donor_id: int
    name: str
    address: str
    district: int
    blood_type: str
    number: str

    @classmethod
    def parse_line(cls, line: str) -> "Donor":
        """Build a donor from a comma separated registry line.

        Raises ValueError when the id or district is not numeric or missing.
        """
        fields = line.split(",")[:_FIELD_COUNT]
        fields += [""] * (_FIELD_COUNT - len(fields))
        donor_id, name, address, district, blood_type, number = (
            trim(field) for field in fields
        )
        return cls(
            donor_id=convert_to_int(donor_id),
            name=name,
            address=address,
            district=convert_to_int(district),
            blood_type=blood_type,
            number=number,
        )

    def to_line(self) -> str:
        """Render the donor as a registry line, without the newline."""
        return FIELD_SEPARATOR.join(
            str(value)
            for value in (
                self.donor_id,
                self.name,
                self.address,
                self.district,
                self.blood_type,
                self.number,
            )
        )

    def details(self) -> str:
        """Short description: name, district and blood type."""
        return "\n".join(
            (
                f"Nombre del donante: {self.name}",
                f"Distrito del donante: {self.district}",
                f"Tipo de sangre del donante: {self.blood_type}",
            )
        )