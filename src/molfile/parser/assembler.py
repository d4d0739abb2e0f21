"""Assemble a MolRecord from one molfile's text.

Block layout, contiguous and in order:

    header (3 lines) | count line | atoms (N lines) | bonds (M lines)
    | properties (M  ... up to M  END) | data items (> <NAME> ...)

Atom and bond blocks are located from the count line cardinalities and the
prescan's newline offsets; the property and data blocks from its anchors.
No structural validation happens: a record that breaks the layout produces
whatever its slice boundaries yield.
"""

from collections.abc import Iterable

from molfile.config.defaults import BODY_START_LINE, HEADER_LINE_COUNT
from molfile.lib.logging_config import get_logger
from molfile.models.record import Code, MolRecord, Prescan, PropertyLine
from molfile.parser.lines import (
    parse_atom_line,
    parse_bond_line,
    parse_count_line,
    parse_data_item,
    parse_mol_header,
    parse_property,
    split_data_items,
)
from molfile.parser.prescan import prescan_mol

logger = get_logger(__name__)


def _line_start(newlines: list[int], index: int) -> int:
    return 0 if index == 0 else newlines[index - 1] + 1


def _line_end(text: str, newlines: list[int], index: int) -> int:
    return newlines[index] if index < len(newlines) else len(text)


def _line_count(text: str, newlines: list[int]) -> int:
    """Number of lines, not counting an empty remainder after a final newline."""
    if newlines and newlines[-1] == len(text) - 1:
        return len(newlines)
    return len(newlines) + 1 if text else 0


def _slice_lines(text: str, newlines: list[int], first: int, count: int) -> list[str]:
    """Return up to ``count`` lines starting at line index ``first``."""
    available = _line_count(text, newlines)
    last = min(first + count, available)
    return [
        text[_line_start(newlines, i) : _line_end(text, newlines, i)]
        for i in range(first, last)
    ]


def _as_count(value: Code) -> int:
    """Turn a parsed cardinality into a usable line count (NaN -> 0)."""
    if isinstance(value, float):
        return 0
    return max(value, 0)


def parse_properties(lines: Iterable[str]) -> dict[str, dict[int, Code]]:
    """Fold property lines into one mapping per mode.

    The ``M  END`` sentinel is dropped. When an atom index repeats within a
    mode, the later line's value wins.
    """
    parsed: list[PropertyLine] = [
        p for p in (parse_property(line) for line in lines) if p is not None
    ]

    properties: dict[str, dict[int, Code]] = {}
    for prop in parsed:
        properties.setdefault(prop.mode, {}).update(prop.values)
    return properties


def parse_data_block(block: str) -> dict[str, str]:
    """Fold the data items of a block into a name -> value mapping.

    Items without a name (including the empty pieces left by trailing blank
    lines) are skipped.
    """
    data: dict[str, str] = {}
    for piece in split_data_items(block):
        item = parse_data_item(piece)
        if item.name:
            data[item.name] = item.value
    return data


def _property_block_end(scan: Prescan, text_length: int) -> int:
    if scan.last_m is not None:
        return scan.last_m
    candidates = [a for a in (scan.first_angle, scan.section_end) if a is not None]
    return min(candidates, default=text_length)


def parse_mol(text: str) -> MolRecord:
    """Parse one V2000 molfile record.

    Args:
        text: Complete record text, as emitted by a splitter. CRLF line
            endings are accepted.

    Returns:
        Frozen MolRecord

    Raises:
        UnsupportedVersionError: If the count line is not V2000
    """
    text = text.replace("\r\n", "\n")
    scan = prescan_mol(text, body_start_line=BODY_START_LINE)
    newlines = scan.newlines

    header_end = _line_end(text, newlines, HEADER_LINE_COUNT - 1)
    header = parse_mol_header(text[:header_end])

    count_lines = _slice_lines(text, newlines, HEADER_LINE_COUNT, 1)
    count_line = parse_count_line(count_lines[0] if count_lines else "")

    atom_count = _as_count(count_line.atom_count)
    bond_count = _as_count(count_line.bond_count)

    atom_lines = _slice_lines(text, newlines, BODY_START_LINE, atom_count)
    bond_lines = _slice_lines(
        text, newlines, BODY_START_LINE + atom_count, bond_count
    )
    if len(atom_lines) < atom_count or len(bond_lines) < bond_count:
        logger.debug(
            "Record declares %d atoms/%d bonds but holds %d/%d lines",
            atom_count,
            bond_count,
            len(atom_lines),
            len(bond_lines),
        )

    properties: dict[str, dict[int, Code]] = {}
    if scan.first_m is not None:
        block = text[scan.first_m : _property_block_end(scan, len(text))]
        properties = parse_properties(block.splitlines())

    data: dict[str, str] = {}
    if scan.first_angle is not None:
        end = scan.section_end if scan.section_end is not None else len(text)
        data = parse_data_block(text[scan.first_angle : end])

    return MolRecord(
        header=header,
        count_line=count_line,
        atoms=[parse_atom_line(line) for line in atom_lines],
        bonds=[parse_bond_line(line) for line in bond_lines],
        properties=properties,
        data=data,
    )
