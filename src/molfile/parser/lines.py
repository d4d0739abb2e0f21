"""Fixed-column line parsers for V2000 molfiles.

Every parser addresses fields by literal column offsets rather than by
splitting on whitespace: adjacent three-character fields routinely run
together (``" 11202"`` is atoms 11 and 202). Numeric columns are parsed
leniently; malformed text yields ``float("nan")`` instead of raising.

Column layout (half-open ranges):

    count line   atoms [0,3)  bonds [3,6)  chiral [12,15)  hint [30,33)
                 version [33,39)
    atom line    x [0,10)  y [10,20)  z [20,30)  element [31,34)
                 mass difference [34,36)  charge [36,39)  valence [48,51)
    bond line    from [0,3)  to [3,6)  type [6,9)
    property     mode [3,6)  count [6,9)  then 8-char index/value pairs
"""

import math
import re
from datetime import datetime

from molfile.config.defaults import (
    DATE_CENTURY_PIVOT,
    END_OF_PROPERTIES,
    SUPPORTED_VERSION,
)
from molfile.lib.errors import UnsupportedVersionError
from molfile.models.record import (
    AtomRecord,
    BondRecord,
    Code,
    CountLine,
    DataItem,
    MolHeader,
    PropertyLine,
)

NAN = float("nan")

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
DATA_ITEM_NAME_RE = re.compile(r"<([A-Za-z0-9_.\-]+)>")

PROPERTY_ENTRY_OFFSET = 9
PROPERTY_ENTRY_WIDTH = 8


def parse_int(text: str) -> Code:
    """Parse a base-10 integer column.

    Leading whitespace and a sign are accepted and trailing garbage after
    the digits is ignored (``"15x"`` -> 15). Text without leading digits
    yields NaN.
    """
    match = _INT_RE.match(text)
    if match is None:
        return NAN
    return int(match.group(1))


def parse_float(text: str) -> float:
    """Parse a decimal column, returning NaN when no number leads the text."""
    match = _FLOAT_RE.match(text)
    if match is None:
        return NAN
    return float(match.group(1))


def parse_count_line(line: str) -> CountLine:
    """Parse the count line (line 4) of a molfile.

    Args:
        line: The raw count line

    Returns:
        CountLine with atom/bond counts, chiral flag, hint and version

    Raises:
        UnsupportedVersionError: If the version field is not " V2000"
    """
    version = line[33:39]
    if version != SUPPORTED_VERSION:
        raise UnsupportedVersionError(version)

    # [6,9) atom lists, [9,12) obsolete, [15,18) stext, [18,30) obsolete
    return CountLine(
        atom_count=parse_int(line[0:3]),
        bond_count=parse_int(line[3:6]),
        chiral_flag=parse_int(line[12:15]),
        property_line_count_hint=parse_int(line[30:33]),
        version=version,
    )


def parse_atom_line(line: str) -> AtomRecord:
    """Parse one atom line."""
    # column 30 is a declared space
    return AtomRecord(
        x=parse_float(line[0:10]),
        y=parse_float(line[10:20]),
        z=parse_float(line[20:30]),
        element=line[31:34].strip(),
        mass_difference=parse_int(line[34:36]),
        charge_code=parse_int(line[36:39]),
        valence_code=parse_int(line[48:51]),
    )


def parse_bond_line(line: str) -> BondRecord:
    """Parse one bond line; the remaining columns are obsolete or unused."""
    return BondRecord(
        from_atom_index=parse_int(line[0:3]),
        to_atom_index=parse_int(line[3:6]),
        bond_type=parse_int(line[6:9]),
    )


def add_key_value(values: dict[int, Code], part: str) -> None:
    """Parse one 8-character property entry into ``values``.

    The first four characters hold the atom index, the next four the value.
    An entry whose index column is malformed is skipped since NaN cannot
    address an atom.
    """
    key = parse_int(part[0:4])
    if isinstance(key, float) and math.isnan(key):
        return
    values[int(key)] = parse_int(part[4:8])


def parse_property(line: str) -> PropertyLine | None:
    """Parse an ``M  XXX`` property line.

    Returns:
        PropertyLine for a property entry, or None for the ``M  END``
        sentinel that closes the property block
    """
    line = line.rstrip("\r")
    if line == END_OF_PROPERTIES:
        return None

    count = parse_int(line[6:9])
    values: dict[int, Code] = {}
    if not (isinstance(count, float) and math.isnan(count)):
        for i in range(int(count)):
            offset = PROPERTY_ENTRY_OFFSET + i * PROPERTY_ENTRY_WIDTH
            add_key_value(values, line[offset : offset + PROPERTY_ENTRY_WIDTH])

    return PropertyLine(mode=line[3:6], count=count, values=values)


def make_date(packed: str) -> datetime | None:
    """Decode the ``MMDDYYHHmm`` date packed into header line 2.

    Two-digit years below 80 are placed in the 2000s. Years of 80 and
    above are used as-is, so ``85`` decodes to year 85, not 1985; readers
    that need 1980s dates must add the century themselves.

    Returns:
        The decoded datetime, or None when a field is not numeric or the
        date does not exist
    """
    fields = [
        parse_int(packed[0:2]),
        parse_int(packed[2:4]),
        parse_int(packed[4:6]),
        parse_int(packed[6:8]),
        parse_int(packed[8:10]),
    ]
    if any(isinstance(f, float) for f in fields):
        return None

    month, day, year, hour, minute = (int(f) for f in fields)
    if year < DATE_CENTURY_PIVOT:
        year += 2000

    try:
        return datetime(year, month, day, hour, minute)
    except ValueError:
        return None


def parse_mol_header(header: str) -> MolHeader:
    """Parse the three-line header block.

    Line 0 is the molecule name, line 1 packs user initials [0,2), program
    name [2,10) and date [10,20), line 2 is a free comment. Missing lines
    are treated as empty.
    """
    lines = [line.rstrip("\r") for line in header.split("\n")]
    lines += [""] * (3 - len(lines))

    return MolHeader(
        name=lines[0],
        initials=lines[1][0:2],
        software=lines[1][2:10],
        date=make_date(lines[1][10:20]),
        comment=lines[2],
    )


def parse_data_item(item: str) -> DataItem:
    """Parse one SDF data item.

    The first line carries the ``<NAME>`` token; everything after the first
    newline is the value, verbatim. A missing token gives an empty name.
    """
    first_line, _, value = item.partition("\n")
    match = DATA_ITEM_NAME_RE.search(first_line)
    return DataItem(name=match.group(1) if match else "", value=value)


def split_data_items(block: str) -> list[str]:
    """Split a data block into items on blank lines."""
    return block.split("\n\n")
