"""Parsed molfile record models.

Every model is frozen: a MolRecord is built once per parse call and never
mutated afterwards. Numeric fields sliced from fixed columns accept
``float("nan")`` so that malformed producer output degrades instead of
failing validation.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# int for well-formed columns, NaN for malformed ones
Code = int | float


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, ser_json_inf_nan="null")


class MolHeader(_FrozenModel):
    """The three-line molfile prologue."""

    name: str = ""
    initials: str = ""
    software: str = ""
    date: datetime | None = None
    comment: str = ""


class CountLine(_FrozenModel):
    """Cardinalities and version declared on line 4 of a molfile.

    Attributes:
        atom_count: Number of atom lines that follow
        bond_count: Number of bond lines after the atom block
        chiral_flag: 1 when the structure is marked chiral
        property_line_count_hint: Obsolete property line count; 999 in
            modern files. Informational only.
        version: Six-character version tag, always " V2000" once parsed
    """

    atom_count: Code
    bond_count: Code
    chiral_flag: Code
    property_line_count_hint: Code
    version: str


class AtomRecord(_FrozenModel):
    """One line of the atom block.

    ``charge_code`` and ``valence_code`` are the positional codes from the
    atom line. Property-block CHG/ISO/RAD entries that supersede them are
    kept separately in ``MolRecord.properties``.
    """

    x: float
    y: float
    z: float
    element: str
    mass_difference: Code
    charge_code: Code
    valence_code: Code


class BondRecord(_FrozenModel):
    """One line of the bond block; atom indices are 1-based."""

    from_atom_index: Code
    to_atom_index: Code
    bond_type: Code


class PropertyLine(_FrozenModel):
    """A single ``M  XXX`` property line."""

    mode: str
    count: Code
    values: dict[int, Code] = Field(default_factory=dict)


class DataItem(_FrozenModel):
    """A named SDF data item."""

    name: str
    value: str


class Prescan(_FrozenModel):
    """Offsets gathered by one pass over a record's text.

    Attributes:
        newlines: Offset of every ``\\n`` in the text
        first_m: Start of the first line beginning with ``M``
        last_m: Start of the (last) ``M  END`` line
        first_angle: Start of the first line beginning with ``>``
        section_end: Start of the first ``$$$$`` line
    """

    newlines: list[int] = Field(default_factory=list)
    first_m: int | None = None
    last_m: int | None = None
    first_angle: int | None = None
    section_end: int | None = None


class MolRecord(_FrozenModel):
    """A fully parsed V2000 molfile record."""

    header: MolHeader
    count_line: CountLine
    atoms: list[AtomRecord] = Field(default_factory=list)
    bonds: list[BondRecord] = Field(default_factory=list)
    properties: dict[str, dict[int, Code]] = Field(default_factory=dict)
    data: dict[str, str] = Field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the record as plain nested dicts and lists."""
        return self.model_dump()

    def to_json(self, indent: int | None = None) -> str:
        """Serialize the record to a JSON document.

        NaN values (malformed columns) are written as ``null``.
        """
        return self.model_dump_json(indent=indent)
