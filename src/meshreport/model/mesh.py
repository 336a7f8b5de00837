"""
Mesh Document (Data Model)
==========================
This module defines the structures populated by the mesh file parser.

Why is this file needed?
------------------------
1. Single model: There is exactly one set of mesh types. The parser writes
   them, the report view only reads them.
2. Immutability: A MeshDocument is built once per parse and never changes,
   so parsing the same file twice gives documents that compare equal.

Classes:
    GlobalParameters: Scalar simulation configuration.
    Node: Node id with 2D coordinates.
    Element: 4-node quadrilateral connectivity.
    BoundaryConditionSet: Ordered list of flagged node ids.
    MeshDocument: The container returned by the parser.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

NODES_PER_ELEMENT = 4


@dataclass(frozen=True)
class GlobalParameters:
    """
    Global simulation parameters read from the un-sectioned head of the file.

    `n_n` and `n_e` are the declared node/element counts. They are advisory
    and never checked against what was actually parsed.
    """
    simulation_time: float = 0.0
    simulation_step_time: float = 0.0
    conductivity: float = 0.0
    alfa: float = 0.0
    tot: float = 0.0
    initial_temp: float = 0.0
    density: float = 0.0
    specific_heat: float = 0.0
    n_n: int = 0
    n_e: int = 0


@dataclass(frozen=True)
class Node:
    """
    Represents a mesh node in the XY plane.
    """
    uid: int
    x: float
    y: float

    @property
    def coords(self) -> npt.NDArray[np.float64]:
        """Coordinates of the node in the global system [X, Y]."""
        return np.array([self.x, self.y], dtype=np.float64)


@dataclass(frozen=True)
class Element:
    """
    Represents a four-node quadrilateral element.

    The node ids keep the winding order given in the file; they are not
    checked for geometric consistency or for existence in the node set.
    """
    uid: int
    node_ids: tuple[int, int, int, int]

    def __post_init__(self) -> None:
        if len(self.node_ids) != NODES_PER_ELEMENT:
            raise ValueError(
                f"Element {self.uid} needs {NODES_PER_ELEMENT} node ids, got {len(self.node_ids)}."
            )
        # Accept any sequence, store a tuple
        object.__setattr__(self, "node_ids", tuple(self.node_ids))


@dataclass(frozen=True)
class BoundaryConditionSet:
    """Node ids flagged with a boundary condition, in file order (duplicates kept)."""
    node_ids: tuple[int, ...] = ()

    def __len__(self) -> int:
        return len(self.node_ids)

    def __iter__(self) -> Iterator[int]:
        return iter(self.node_ids)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.node_ids


@dataclass(frozen=True)
class MeshDocument:
    """
    The parsed mesh file: global parameters, nodes, elements and the
    boundary-condition node list.
    """
    parameters: GlobalParameters = field(default_factory=GlobalParameters)
    nodes: tuple[Node, ...] = ()
    elements: tuple[Element, ...] = ()
    boundary_conditions: BoundaryConditionSet = field(default_factory=BoundaryConditionSet)

    def node_coordinates(self) -> npt.NDArray[np.float64]:
        """Node coordinates as an (N, 2) array, in file order."""
        if not self.nodes:
            return np.empty((0, 2), dtype=np.float64)
        return np.array([(node.x, node.y) for node in self.nodes], dtype=np.float64)

    def element_connectivity(self) -> npt.NDArray[np.uint64]:
        """Element node ids as an (E, 4) unsigned 64-bit array, in file order."""
        if not self.elements:
            return np.empty((0, NODES_PER_ELEMENT), dtype=np.uint64)
        return np.array([element.node_ids for element in self.elements], dtype=np.uint64)
