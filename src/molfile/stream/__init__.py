"""Streaming SDF splitting."""

from molfile.stream.splitter import (
    RecordSplitter,
    SDFSplitter,
    SDFTransform,
    asplit_records,
    iter_mol_records,
    split_records,
)

__all__ = [
    "RecordSplitter",
    "SDFSplitter",
    "SDFTransform",
    "asplit_records",
    "iter_mol_records",
    "split_records",
]
