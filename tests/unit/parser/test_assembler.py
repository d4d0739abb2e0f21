"""Tests for parse_mol() and the property/data folding helpers."""

import json
import math
from datetime import datetime

import pytest

from molfile.lib.errors import UnsupportedVersionError
from molfile.parser.assembler import parse_data_block, parse_mol, parse_properties

MN_ATOM = "    4.5375   -6.9250    0.0000 Mn  0  0  0  0  0  0  0  0  0  0  0  0"
C_ATOM = "    0.0000    0.0000    0.0000 C   0  0  0  0  0  0  0  0  0  0  0  0"


def _record(*body: str, count: str = "  1  0  0  0  0  0  0  0  0  0999 V2000") -> str:
    return "\n".join(["", "  Mol2Comp06180618072D", "", count, *body]) + "\n"


@pytest.mark.unit
class TestParseMol:
    """Tests for whole-record parsing."""

    def test_complete_mol_file(self, single_sdf: str) -> None:
        parsed = parse_mol(single_sdf)
        assert parsed.header.name == ""
        assert parsed.header.software == "Mol2Comp"
        assert parsed.header.date == datetime(2006, 6, 18, 18, 7)
        assert parsed.count_line.atom_count == 1
        assert parsed.count_line.bond_count == 0
        assert parsed.count_line.version == " V2000"
        assert len(parsed.atoms) == parsed.count_line.atom_count
        assert parsed.atoms[0].element == "Mn"
        assert parsed.atoms[0].x == 4.5375
        assert parsed.bonds == []
        assert parsed.properties == {}
        assert parsed.data == {"ID": "_Elements.#018"}

    def test_complex_mol_file(self, zwitterion_sdf: str) -> None:
        parsed = parse_mol(zwitterion_sdf)
        assert parsed.header.name == "zwitterions_1.002"
        assert parsed.header.software == "-ClnMol-"
        assert parsed.header.comment == "glycine zwitterion"
        assert parsed.header.date == datetime(2014, 9, 1, 12, 0)

        assert len(parsed.atoms) == parsed.count_line.atom_count == 5
        assert [a.element for a in parsed.atoms] == ["C", "C", "N", "O", "O"]
        assert parsed.atoms[2].charge_code == 3
        assert parsed.atoms[3].charge_code == 5
        assert parsed.atoms[2].x == pytest.approx(-1.299)

        assert len(parsed.bonds) == parsed.count_line.bond_count == 4
        assert parsed.bonds[0].from_atom_index == 1
        assert parsed.bonds[0].to_atom_index == 2
        assert parsed.bonds[3].bond_type == 2

        assert parsed.properties == {"CHG": {3: 1, 4: -1}}
        assert parsed.data["ID"] == "zwitterions_1.002"
        assert parsed.data["PUBCHEM_COORDINATE_TYPE"] == "1\n5\n255"

    def test_zero_bonds_with_crlf(self) -> None:
        mol = (
            "\r\n  Mol2Comp06180618072D\r\n\r\n"
            "  1  0  0  0  0  0  0  0  0  0999 V2000\r\n"
            "   10.2967   -1.5283    0.0000 Ar  0  0  0  0  0  0  0  0  0  0  0  0\r\n"
            "M  END\r\n>  <ID>\r\n_Elements.#003\r\n\r\n\r\n$$$$\r\n"
        )
        parsed = parse_mol(mol)
        assert parsed.bonds == []
        assert parsed.atoms[0].element == "Ar"
        assert parsed.data == {"ID": "_Elements.#003"}

    def test_unsupported_version_aborts(self) -> None:
        mol = _record(MN_ATOM, "M  END", count="  1  0  0  0  0  0  0  0  0  0999 V3000")
        with pytest.raises(UnsupportedVersionError, match="' V3000'"):
            parse_mol(mol)

    def test_missing_count_line_is_unsupported(self) -> None:
        with pytest.raises(UnsupportedVersionError):
            parse_mol("name\n")

    def test_repeated_mode_last_write_wins(self) -> None:
        mol = _record(
            C_ATOM,
            "M  CHG  2   1   1   2  -1",
            "M  CHG  1   1  -1",
            "M  ISO  1   1  13",
            "M  END",
            count="  1  0  0  0  0  0  0  0  0  0999 V2000",
        )
        parsed = parse_mol(mol)
        assert parsed.properties == {"CHG": {1: -1, 2: -1}, "ISO": {1: 13}}

    def test_property_hint_does_not_gate_parsing(self) -> None:
        mol = _record(
            C_ATOM,
            "M  RAD  1   1   2",
            "M  END",
            count="  1  0  0  0  0  0  0  0  0  0  1 V2000",
        )
        parsed = parse_mol(mol)
        assert parsed.count_line.property_line_count_hint == 1
        assert parsed.properties == {"RAD": {1: 2}}

    def test_properties_without_end_marker(self) -> None:
        mol = _record(C_ATOM, "M  CHG  1   1   1", "> <ID>", "x", "")
        parsed = parse_mol(mol)
        assert parsed.properties == {"CHG": {1: 1}}
        assert parsed.data == {"ID": "x"}

    def test_name_starting_with_m_is_not_a_property(self) -> None:
        mol = "Methane\n  Mol2Comp06180618072D\nMy comment\n" + (
            "  1  0  0  0  0  0  0  0  0  0999 V2000\n" + C_ATOM + "\nM  END\n"
        )
        parsed = parse_mol(mol)
        assert parsed.header.name == "Methane"
        assert parsed.header.comment == "My comment"
        assert parsed.properties == {}

    def test_fewer_atom_lines_than_declared(self) -> None:
        """Structural shortfalls degrade to a short list."""
        mol = _record(C_ATOM, count="  3  0  0  0  0  0  0  0  0  0999 V2000")
        parsed = parse_mol(mol)
        assert len(parsed.atoms) == 1

    def test_nan_count_yields_no_atoms(self) -> None:
        mol = _record(C_ATOM, count="  x  0  0  0  0  0  0  0  0  0999 V2000")
        parsed = parse_mol(mol)
        assert math.isnan(parsed.count_line.atom_count)
        assert parsed.atoms == []

    def test_empty_data_names_skipped(self) -> None:
        mol = _record(MN_ATOM, "M  END", ">  nothing", "1", "", "> <A>", "2", "")
        assert parse_mol(mol).data == {"A": "2"}


@pytest.mark.unit
class TestRecordOutput:
    """Tests for plain-structure output of a parsed record."""

    def test_to_dict_is_plain(self, zwitterion_sdf: str) -> None:
        as_dict = parse_mol(zwitterion_sdf).to_dict()
        assert as_dict["count_line"]["atom_count"] == 5
        assert as_dict["atoms"][0]["element"] == "C"
        assert as_dict["bonds"][0] == {
            "from_atom_index": 1,
            "to_atom_index": 2,
            "bond_type": 1,
        }
        assert as_dict["properties"]["CHG"] == {3: 1, 4: -1}

    def test_to_json(self, single_sdf: str) -> None:
        document = json.loads(parse_mol(single_sdf).to_json())
        assert document["atoms"][0]["element"] == "Mn"
        assert document["data"] == {"ID": "_Elements.#018"}

    def test_nan_serialised_as_null(self) -> None:
        mol = _record(
            "    1.0000    2.0000    3.0000 C   x  0  0  0  0  0  0  0  0  0  0  0"
        )
        document = json.loads(parse_mol(mol).to_json())
        assert document["atoms"][0]["mass_difference"] is None


@pytest.mark.unit
class TestFoldingHelpers:
    """Tests for parse_properties() and parse_data_block()."""

    def test_parse_properties_drops_end(self) -> None:
        assert parse_properties(["M  CHG  1   5   2", "M  END"]) == {"CHG": {5: 2}}

    def test_parse_properties_empty(self) -> None:
        assert parse_properties([]) == {}

    def test_parse_data_block_later_item_wins(self) -> None:
        block = "> <A>\n1\n\n> <A>\n2\n\n"
        assert parse_data_block(block) == {"A": "2"}
