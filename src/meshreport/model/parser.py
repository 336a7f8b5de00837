"""
Mesh File Parser
================
Reads the plain-text mesh format into a MeshDocument.

Why is this file needed?
------------------------
1. State machine: Lines are classified one at a time. Header lines switch the
   current section, every other non-blank line goes to the converter of that
   section.
2. Conversion: Each section has its own record format (whitespace separated
   `Key value` pairs, comma separated node/element/BC rows).
3. Fail-fast: The first bad line aborts the whole parse with an exception
   that names the failure kind and line number. No partial document is ever
   returned.

File format::

    SimulationTime 500
    Conductivity 25
    Nodes number 16
    *Node
    1, 0.0, 0.0
    *Element
    1, 1, 2, 6, 5
    *BC
    1, 2, 3, 4
"""
from __future__ import annotations

import io
import logging
import os
import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from meshreport.model.errors import (
    FieldArityError,
    MeshParseError,
    NumericConversionError,
    StreamOpenError,
)
from meshreport.model.mesh import (
    NODES_PER_ELEMENT,
    BoundaryConditionSet,
    Element,
    GlobalParameters,
    MeshDocument,
    Node,
)
from meshreport.model.sections import Section, classify_header

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

_UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+")
# Largest id the format allows (64-bit unsigned)
MAX_UNSIGNED = 2**64 - 1


class GlobalParameterKey(StrEnum):
    SIMULATION_TIME = "SimulationTime"
    SIMULATION_STEP_TIME = "SimulationStepTime"
    CONDUCTIVITY = "Conductivity"
    ALFA = "Alfa"
    TOT = "Tot"
    INITIAL_TEMP = "InitialTemp"
    DENSITY = "Density"
    SPECIFIC_HEAT = "SpecificHeat"
    NODES = "Nodes"
    ELEMENTS = "Elements"


# Key -> (GlobalParameters field, index of the value token)
# The count lines look like `Nodes number 16`, so their value is the third token.
PARAMETER_FIELDS: Dict[GlobalParameterKey, Tuple[str, int]] = {
    GlobalParameterKey.SIMULATION_TIME: ("simulation_time", 1),
    GlobalParameterKey.SIMULATION_STEP_TIME: ("simulation_step_time", 1),
    GlobalParameterKey.CONDUCTIVITY: ("conductivity", 1),
    GlobalParameterKey.ALFA: ("alfa", 1),
    GlobalParameterKey.TOT: ("tot", 1),
    GlobalParameterKey.INITIAL_TEMP: ("initial_temp", 1),
    GlobalParameterKey.DENSITY: ("density", 1),
    GlobalParameterKey.SPECIFIC_HEAT: ("specific_heat", 1),
    GlobalParameterKey.NODES: ("n_n", 2),
    GlobalParameterKey.ELEMENTS: ("n_e", 2),
}

COUNT_KEYS = (GlobalParameterKey.NODES, GlobalParameterKey.ELEMENTS)
GLOBAL_KEYWORDS = frozenset(key.value for key in GlobalParameterKey)

NODE_FIELDS = 3
ELEMENT_FIELDS = 1 + NODES_PER_ELEMENT


# --- Numeric helpers ---

def to_unsigned(token: str, what: str, line_number: Optional[int] = None, line: Optional[str] = None) -> int:
    """Convert a decimal token (optional leading '+') to a non-negative int."""
    if not _UNSIGNED_PATTERN.fullmatch(token):
        raise NumericConversionError(
            f"Expected an unsigned integer for {what}, got {token!r}.", line_number=line_number, line=line
        )
    value = int(token)
    if value > MAX_UNSIGNED:
        raise NumericConversionError(
            f"Unsigned integer for {what} is out of range: {token!r}.", line_number=line_number, line=line
        )
    return value


def to_float(token: str, what: str, line_number: Optional[int] = None, line: Optional[str] = None) -> float:
    """Convert a token to float. Empty, non-ASCII and digit-grouped (`1_0`) tokens are rejected."""
    if not token or not token.isascii() or "_" in token:
        raise NumericConversionError(
            f"Expected a number for {what}, got {token!r}.", line_number=line_number, line=line
        )
    try:
        return float(token)
    except ValueError as exc:
        raise NumericConversionError(
            f"Expected a number for {what}, got {token!r}.", line_number=line_number, line=line
        ) from exc


def _split_fields(line: str, expected: Optional[int], what: str, line_number: Optional[int]) -> List[str]:
    fields = [part.strip() for part in line.split(",")]
    if expected is not None and len(fields) != expected:
        raise FieldArityError(
            f"{what} row needs {expected} comma-separated fields, got {len(fields)}.",
            line_number=line_number,
            line=line,
        )
    return fields


# --- Field converters ---

def parse_global_parameter(line: str, line_number: Optional[int] = None) -> Optional[Tuple[str, Any]]:
    """
    Parse a `Key value...` line.

    Returns (field name, value) for a recognised key and None for any other
    key. Unknown keys are not an error.
    """
    tokens = line.split()
    try:
        key = GlobalParameterKey(tokens[0])
    except ValueError:
        logger.debug(f"Ignoring unknown global parameter '{tokens[0]}' (line {line_number}).")
        return None

    field_name, index = PARAMETER_FIELDS[key]
    if len(tokens) <= index:
        raise FieldArityError(
            f"'{key}' needs at least {index + 1} whitespace-separated tokens, got {len(tokens)}.",
            line_number=line_number,
            line=line,
        )

    token = tokens[index]
    if key in COUNT_KEYS:
        value: Any = to_unsigned(token, key.value, line_number, line)
    else:
        value = to_float(token, key.value, line_number, line)
    return field_name, value


def parse_node_row(line: str, line_number: Optional[int] = None) -> Node:
    """Parse `id, x, y`."""
    uid, x, y = _split_fields(line, NODE_FIELDS, "Node", line_number)
    return Node(
        uid=to_unsigned(uid, "node id", line_number, line),
        x=to_float(x, "node x", line_number, line),
        y=to_float(y, "node y", line_number, line),
    )


def parse_element_row(line: str, line_number: Optional[int] = None) -> Element:
    """Parse `id, n1, n2, n3, n4`."""
    fields = _split_fields(line, ELEMENT_FIELDS, "Element", line_number)
    uid = to_unsigned(fields[0], "element id", line_number, line)
    node_ids = tuple(to_unsigned(token, "element node id", line_number, line) for token in fields[1:])
    return Element(uid=uid, node_ids=node_ids)


def parse_boundary_row(line: str, line_number: Optional[int] = None) -> List[int]:
    """Parse a row of one or more comma-separated node ids."""
    fields = _split_fields(line, None, "BC", line_number)
    return [to_unsigned(token, "boundary condition node id", line_number, line) for token in fields]


def _is_global_parameter_line(line: str) -> bool:
    tokens = line.split()
    return bool(tokens) and tokens[0] in GLOBAL_KEYWORDS


# --- Assembler ---

class MeshAssembler:
    """
    Collects converter output during a parse and builds the final,
    immutable MeshDocument.
    """
    def __init__(self) -> None:
        self._parameters: Dict[str, Any] = {}
        self._nodes: List[Node] = []
        self._elements: List[Element] = []
        self._boundary_nodes: List[int] = []

    def set_parameter(self, field_name: str, value: Any) -> None:
        self._parameters[field_name] = value

    def add_node(self, node: Node) -> None:
        self._nodes.append(node)

    def add_element(self, element: Element) -> None:
        self._elements.append(element)

    def add_boundary_nodes(self, node_ids: Iterable[int]) -> None:
        self._boundary_nodes.extend(node_ids)

    def build(self) -> MeshDocument:
        return MeshDocument(
            parameters=GlobalParameters(**self._parameters),
            nodes=tuple(self._nodes),
            elements=tuple(self._elements),
            boundary_conditions=BoundaryConditionSet(tuple(self._boundary_nodes)),
        )


# --- State machine ---

class MeshParser:
    """
    Line-by-line section state machine.

    One parser instance reads one input. Feed lines in file order with
    `feed`, then call `finish` to get the document.
    """
    def __init__(self) -> None:
        self.section: Section = Section.NONE
        # One-way guard: set by the first header, never cleared.
        self.globals_closed: bool = False
        self._assembler = MeshAssembler()

    def feed(self, line: str, line_number: Optional[int] = None) -> None:
        """Process a single line of input."""
        line = line.rstrip("\r\n")
        if not line.strip():
            return

        header = classify_header(line)
        if header is not None:
            self._enter_section(header, line_number)
            return

        if not self.globals_closed:
            parsed = parse_global_parameter(line, line_number)
            if parsed is not None:
                self._assembler.set_parameter(*parsed)
            return

        if _is_global_parameter_line(line):
            # Still converted so a malformed value aborts the parse, but never stored
            parse_global_parameter(line, line_number)
            logger.warning(
                f"Ignoring global parameter after section header (line {line_number}): {line.strip()}"
            )
            return

        if self.section == Section.NODE:
            self._assembler.add_node(parse_node_row(line, line_number))
        elif self.section == Section.ELEMENT:
            self._assembler.add_element(parse_element_row(line, line_number))
        elif self.section == Section.BOUNDARY_CONDITION:
            self._assembler.add_boundary_nodes(parse_boundary_row(line, line_number))

    def _enter_section(self, section: Section, line_number: Optional[int]) -> None:
        if not self.globals_closed:
            logger.debug(f"Global parameters closed at line {line_number}.")
        self.globals_closed = True
        self.section = section
        logger.debug(f"Entering section '{section}' at line {line_number}.")

    def finish(self) -> MeshDocument:
        document = self._assembler.build()
        logger.info(
            f"Parsed {len(document.nodes)} nodes (declared {document.parameters.n_n}), "
            f"{len(document.elements)} elements (declared {document.parameters.n_e}), "
            f"{len(document.boundary_conditions)} boundary condition entries."
        )
        return document


# --- Entry points ---

def parse_lines(lines: Iterable[str]) -> MeshDocument:
    """
    Parse an iterable of lines (numbered from 1).

    Raises:
        MeshParseError: On the first malformed line, or if reading the
            underlying stream fails.
    """
    parser = MeshParser()
    line_number = 0
    try:
        for line_number, line in enumerate(lines, start=1):
            parser.feed(line, line_number)
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Failed to read input: {exc}"
        logger.error(msg)
        raise StreamOpenError(msg, line_number=line_number + 1) from exc
    except MeshParseError as exc:
        logger.error(f"Mesh parse failed: {exc}")
        raise
    return parser.finish()


def parse_stream(stream: io.TextIOBase) -> MeshDocument:
    """Parse an open text stream. The caller keeps ownership of the stream."""
    return parse_lines(stream)


def parse_text(text: str) -> MeshDocument:
    """Parse mesh file contents held in a string."""
    return parse_lines(io.StringIO(text))


def parse_file(path: PathLike, encoding: str = "utf-8") -> MeshDocument:
    """
    Open `path`, parse it and close it again, whether parsing succeeds or not.

    Raises:
        StreamOpenError: If the file cannot be opened or read.
        FieldArityError, NumericConversionError: On malformed content.
    """
    logger.info(f"Reading mesh file: {path}")
    try:
        stream = open(path, "r", encoding=encoding)
    except OSError as exc:
        msg = f"Unable to open the file '{path}': {exc.strerror or exc}"
        logger.error(msg)
        raise StreamOpenError(msg) from exc

    with stream:
        return parse_stream(stream)


@dataclass(frozen=True)
class ParseResult:
    """Outcome of a parse that does not raise: exactly one of the fields is set."""
    document: Optional[MeshDocument] = None
    error: Optional[MeshParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> MeshDocument:
        """Return the document, or raise the stored error."""
        if self.error is not None:
            raise self.error
        if self.document is None:
            raise ValueError("ParseResult holds neither a document nor an error.")
        return self.document


def try_parse_file(path: PathLike, encoding: str = "utf-8") -> ParseResult:
    try:
        return ParseResult(document=parse_file(path, encoding=encoding))
    except MeshParseError as exc:
        return ParseResult(error=exc)


def try_parse_text(text: str) -> ParseResult:
    try:
        return ParseResult(document=parse_text(text))
    except MeshParseError as exc:
        return ParseResult(error=exc)
