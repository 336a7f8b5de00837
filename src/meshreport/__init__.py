"""
meshreport
==========
Reader and console report for plain-text quadrilateral mesh files.
"""
from importlib.metadata import version, PackageNotFoundError

from meshreport.model.errors import (
    FieldArityError,
    MeshParseError,
    NumericConversionError,
    ParseErrorKind,
    StreamOpenError,
)
from meshreport.model.mesh import BoundaryConditionSet, Element, GlobalParameters, MeshDocument, Node
from meshreport.model.parser import (
    MeshParser,
    ParseResult,
    parse_file,
    parse_lines,
    parse_stream,
    parse_text,
    try_parse_file,
    try_parse_text,
)
from meshreport.model.sections import Section, classify_header
from meshreport.view.report import format_report, print_report

try:
    __version__ = version("meshreport")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "BoundaryConditionSet",
    "Element",
    "FieldArityError",
    "GlobalParameters",
    "MeshDocument",
    "MeshParseError",
    "MeshParser",
    "Node",
    "NumericConversionError",
    "ParseErrorKind",
    "ParseResult",
    "Section",
    "StreamOpenError",
    "classify_header",
    "format_report",
    "parse_file",
    "parse_lines",
    "parse_stream",
    "parse_text",
    "print_report",
    "try_parse_file",
    "try_parse_text",
]
