"""
Input File Sections
===================
Closed set of sections a mesh file can contain and the single function that
recognises section header lines.
"""
from __future__ import annotations

from enum import StrEnum
from typing import Dict, Optional


class Section(StrEnum):
    NONE = "none"
    NODE = "Node"
    ELEMENT = "Element"
    BOUNDARY_CONDITION = "BC"


# Header keyword -> section it opens. Matched by prefix, case-sensitive.
SECTION_HEADERS: Dict[str, Section] = {
    "*Node": Section.NODE,
    "*Element": Section.ELEMENT,
    "*BC": Section.BOUNDARY_CONDITION,
}


def classify_header(line: str) -> Optional[Section]:
    """
    Return the section opened by `line`, or None if it is not a header.

    The line is compared as read (minus its line terminator), so a header
    keyword must start at column 0.
    """
    line = line.rstrip("\r\n")
    for keyword, section in SECTION_HEADERS.items():
        if line.startswith(keyword):
            return section
    return None
