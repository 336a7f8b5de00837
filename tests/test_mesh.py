import dataclasses

import numpy as np
import pytest

from meshreport.model.mesh import BoundaryConditionSet, Element, GlobalParameters, MeshDocument, Node
from meshreport.model.parser import parse_text


def test_global_parameters_default_to_zero():
    parameters = GlobalParameters()
    assert all(getattr(parameters, f.name) == 0 for f in dataclasses.fields(parameters))


def test_node_coords_array():
    node = Node(uid=3, x=1.5, y=-2.0)
    coords = node.coords
    assert coords.dtype == np.float64
    np.testing.assert_array_equal(coords, [1.5, -2.0])


@pytest.mark.parametrize("node_ids", [(1, 2, 3), (1, 2, 3, 4, 5), ()])
def test_element_requires_four_nodes(node_ids):
    with pytest.raises(ValueError):
        Element(uid=1, node_ids=node_ids)


def test_element_stores_a_tuple():
    element = Element(uid=1, node_ids=[4, 3, 2, 1])
    assert element.node_ids == (4, 3, 2, 1)


def test_boundary_condition_set_behaves_like_a_sequence():
    bcs = BoundaryConditionSet((3, 1, 3))
    assert len(bcs) == 3
    assert list(bcs) == [3, 1, 3]
    assert 1 in bcs
    assert 2 not in bcs


def test_document_is_immutable(example_text):
    document = parse_text(example_text)
    with pytest.raises(dataclasses.FrozenInstanceError):
        document.nodes = ()
    with pytest.raises(dataclasses.FrozenInstanceError):
        document.parameters.conductivity = 1.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        document.nodes[0].x = 5.0


def test_array_views(example_text):
    document = parse_text(example_text)
    np.testing.assert_array_equal(document.node_coordinates(), [[0.0, 0.0], [1.0, 0.0], [0.0, 1.0]])
    connectivity = document.element_connectivity()
    assert connectivity.shape == (1, 4)
    np.testing.assert_array_equal(connectivity, [[1, 2, 3, 3]])


def test_array_views_of_empty_document():
    document = MeshDocument()
    assert document.node_coordinates().shape == (0, 2)
    assert document.element_connectivity().shape == (0, 4)


def test_connectivity_holds_large_unsigned_ids():
    big = 2**63
    document = MeshDocument(elements=(Element(uid=1, node_ids=(big, 1, 2, 2**64 - 1)),))
    connectivity = document.element_connectivity()
    assert connectivity.dtype == np.uint64
    assert int(connectivity[0, 0]) == big
    assert int(connectivity[0, 3]) == 2**64 - 1
