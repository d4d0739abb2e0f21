"""V2000 molfile parsing: line parsers, prescan and record assembly."""

from molfile.parser.assembler import parse_data_block, parse_mol, parse_properties
from molfile.parser.lines import (
    add_key_value,
    make_date,
    parse_atom_line,
    parse_bond_line,
    parse_count_line,
    parse_data_item,
    parse_float,
    parse_int,
    parse_mol_header,
    parse_property,
    split_data_items,
)
from molfile.parser.prescan import prescan_mol

__all__ = [
    "add_key_value",
    "make_date",
    "parse_atom_line",
    "parse_bond_line",
    "parse_count_line",
    "parse_data_block",
    "parse_data_item",
    "parse_float",
    "parse_int",
    "parse_mol",
    "parse_mol_header",
    "parse_properties",
    "parse_property",
    "prescan_mol",
    "split_data_items",
]
