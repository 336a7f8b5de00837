"""
Text Report
===========
Renders a MeshDocument as a plain-text report with four groups, in document
order: global data, nodes, elements, boundary conditions.
"""
from __future__ import annotations

import math
import sys
from decimal import Decimal
from typing import List, Optional, TextIO, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from meshreport.model.mesh import MeshDocument

LABEL_WIDTH = 24

# (label, GlobalParameters attribute)
GLOBAL_DATA_ROWS: List[Tuple[str, str]] = [
    ("Simulation Time", "simulation_time"),
    ("Simulation Step Time", "simulation_step_time"),
    ("Conductivity", "conductivity"),
    ("Alfa", "alfa"),
    ("Tot", "tot"),
    ("Initial Temperature", "initial_temp"),
    ("Density", "density"),
    ("Specific Heat", "specific_heat"),
    ("Number of Nodes", "n_n"),
    ("Number of Elements", "n_e"),
]


def format_value(value: float | int) -> str:
    """
    Plain number text: whole floats lose their `.0`, no exponent notation.
    `500.0` -> `500`, `5.5` -> `5.5`, `1e20` -> `100000000000000000000`.
    """
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_report(document: MeshDocument) -> str:
    lines: List[str] = ["=== Global Data ==="]
    for label, attribute in GLOBAL_DATA_ROWS:
        lines.append(f"{label + ':':<{LABEL_WIDTH}}{format_value(getattr(document.parameters, attribute))}")

    lines += ["", "=== Nodes ==="]
    for node in document.nodes:
        lines.append(f"Node {node.uid}: x = {node.x:>10.9f}, y = {node.y:>10.9f}")

    lines += ["", "=== Elements ==="]
    for element in document.elements:
        node_list = ", ".join(str(node_id) for node_id in element.node_ids)
        lines.append(f"Element {element.uid}: Nodes = [{node_list}]")

    lines += ["", "=== Boundary Conditions ==="]
    lines.append(f"Nodes with boundary conditions: {list(document.boundary_conditions)}")
    return "\n".join(lines) + "\n"


def print_report(document: MeshDocument, stream: Optional[TextIO] = None) -> None:
    """Write the report to `stream` (stdout by default)."""
    (stream or sys.stdout).write(format_report(document))
