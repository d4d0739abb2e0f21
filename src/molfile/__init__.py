"""molfile - Parse MDL/Symyx V2000 molfiles and split SDF streams.

Usage:
    import molfile

    record = molfile.parse_mol(text)

    for record in molfile.split_records(chunks):
        ...

Main features:
- Fixed-column parsing of header, count, atom, bond and property lines
- SDF data items folded into a name -> value mapping
- Chunk-fed SDF splitting with push (callback) and pull (queue/iterator)
  front ends, including async chunk sources
- Parsed records as frozen pydantic models with plain dict/JSON output
"""

from molfile.lib.errors import (
    ConfigError,
    MolfileError,
    SplitterStateError,
    UnsupportedVersionError,
)
from molfile.models.record import MolRecord
from molfile.parser.assembler import parse_mol
from molfile.parser.prescan import prescan_mol
from molfile.stream.splitter import (
    RecordSplitter,
    SDFSplitter,
    SDFTransform,
    asplit_records,
    iter_mol_records,
    split_records,
)

__version__ = "0.1.0"


def get_version() -> dict[str, str]:
    """Return version information for this module."""
    return {"module_version": __version__}


__all__ = [
    "__version__",
    "ConfigError",
    "MolRecord",
    "MolfileError",
    "RecordSplitter",
    "SDFSplitter",
    "SDFTransform",
    "SplitterStateError",
    "UnsupportedVersionError",
    "asplit_records",
    "get_version",
    "iter_mol_records",
    "parse_mol",
    "prescan_mol",
    "split_records",
]
