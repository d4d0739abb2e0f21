"""Single-pass prescan of a molfile record.

The prescan records every newline offset plus the start offsets of the
lines that delimit the property and data blocks, so the assembler can slice
blocks without rescanning the text.
"""

from molfile.config.defaults import END_OF_PROPERTIES, RECORD_TERMINATOR
from molfile.models.record import Prescan


def prescan_mol(text: str, body_start_line: int = 0) -> Prescan:
    """Scan ``text`` once for newlines and block anchors.

    Anchors are tested on every line that starts right after a newline.
    ``M`` lines are tested before ``>`` and ``$$$$`` lines. The ``M  END``
    anchor is overwritten on each match; the others keep their first match.

    Args:
        text: Raw record text
        body_start_line: Lines with a lower index are never anchors; the
            assembler passes the header + count line size so a name or
            comment starting with ``M`` or ``>`` is not misread

    Returns:
        Prescan with newline offsets and any anchors found. Empty or
        newline-free text yields no newlines and no anchors.
    """
    newlines: list[int] = []
    first_m: int | None = None
    last_m: int | None = None
    first_angle: int | None = None
    section_end: int | None = None

    pos = text.find("\n")
    while pos != -1:
        newlines.append(pos)
        start = pos + 1
        pos = text.find("\n", start)

        if len(newlines) < body_start_line:
            continue

        end = len(text) if pos == -1 else pos
        line = text[start:end]
        if line.startswith("M"):
            if first_m is None:
                first_m = start
            if line.rstrip("\r") == END_OF_PROPERTIES:
                last_m = start
        elif line.startswith(">"):
            if first_angle is None:
                first_angle = start
        elif line.startswith(RECORD_TERMINATOR):
            if section_end is None:
                section_end = start

    return Prescan(
        newlines=newlines,
        first_m=first_m,
        last_m=last_m,
        first_angle=first_angle,
        section_end=section_end,
    )
