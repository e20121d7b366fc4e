import pytest

from gridglue.intersections import (
    IntersectionList,
    IntersectionListProvider,
    SimplicialIntersection,
    SimplicialIntersectionListProvider,
)


def _provider():
    provider = SimplicialIntersectionListProvider(2, 2)
    first = provider.new_intersection(7, 9)
    first.corners0[0] = [(0.0, 0.0), (0.5, 0.0), (0.0, 0.5)]
    first.corners1[0] = [(1.0, 0.0), (0.5, 0.5), (0.25, 0.25)]
    second = provider.new_intersection(3, 4)
    second.parents0.append(5)
    second.corners0.append([(0.1, 0.2), (0.3, 0.4), (0.5, 0.1)])
    return provider


def test_create_has_one_embedding_per_grid():
    item = SimplicialIntersection.create(2, 3, 11, 12)
    assert item.parents0 == [11]
    assert item.parents1 == [12]
    assert len(item.corners0) == 1
    assert len(item.corners1) == 1


def test_create_corner_count_and_dimensions():
    item = SimplicialIntersection.create(2, 3, 0, 0)
    assert len(item.corners0[0]) == len(item.corners1[0])
    assert all(len(c) == 2 for c in item.corners0[0])
    assert all(len(c) == 3 for c in item.corners1[0])
    assert all(v == 0.0 for c in item.corners0[0] for v in c)


def test_create_mixed_dimension_vertex_count_follows_smaller_grid():
    provider = SimplicialIntersectionListProvider(3, 1)
    item = provider.new_intersection(0, 0)
    assert len(item.corners0[0]) == provider.n_vertices
    assert len(item.corners1[0]) == provider.n_vertices
    assert len(item.corners0[0]) == 2


def test_create_negative_dimension_rejected():
    with pytest.raises(ValueError):
        SimplicialIntersection.create(-1, 2, 0, 0)


def test_provider_size_and_parents():
    provider = _provider()
    assert provider.size() == 2
    assert provider.parents0(0) == 1
    assert provider.parents0(1) == 2
    assert provider.parents1(1) == 1
    assert provider.parent0(0, 0) == 7
    assert provider.parent1(0, 0) == 9
    assert provider.parent0(1, 1) == 5


def test_provider_corners():
    provider = _provider()
    assert provider.corner0(0, 1, 0) == (0.5, 0.0)
    assert provider.corner1(0, 2, 0) == (0.25, 0.25)
    assert provider.corner0(1, 0, 1) == (0.1, 0.2)


def test_provider_out_of_range():
    provider = _provider()
    with pytest.raises(IndexError):
        provider.parent0(5, 0)
    with pytest.raises(IndexError):
        provider.parent1(0, 1)
    with pytest.raises(IndexError):
        provider.corner0(-1, 0, 0)


def test_provider_clear():
    provider = _provider()
    provider.clear()
    assert provider.size() == 0
    assert provider.intersections() == []


def test_provider_from_existing_intersections():
    items = [SimplicialIntersection.create(1, 1, 2, 3)]
    provider = SimplicialIntersectionListProvider(1, 1, items)
    assert provider.size() == 1
    assert provider.parent1(0, 0) == 3


def test_intersections_list_is_live():
    provider = SimplicialIntersectionListProvider(1, 1)
    provider.intersections().append(SimplicialIntersection.create(1, 1, 4, 6))
    assert provider.size() == 1
    assert provider.parent0(0, 0) == 4


def test_list_dispatches_by_grid():
    provider = _provider()
    ilist = IntersectionList(provider)
    assert ilist.size() == provider.size()
    assert len(ilist) == 2
    assert ilist.parents(0, 1) == provider.parents0(1)
    assert ilist.parents(1, 1) == provider.parents1(1)
    assert ilist.parent(0, 0) == 7
    assert ilist.parent(1, 0) == 9
    assert ilist.parent(0, 1, 1) == 5
    assert ilist.corner(0, 0, 1) == provider.corner0(0, 1, 0)
    assert ilist.corner(1, 0, 1) == provider.corner1(0, 1, 0)
    assert ilist.corner(0, 1, 2, 1) == (0.5, 0.1)


@pytest.mark.parametrize("grid", [-1, 2, 5])
def test_list_rejects_bad_grid(grid):
    ilist = IntersectionList(_provider())
    with pytest.raises(ValueError):
        ilist.parents(grid, 0)
    with pytest.raises(ValueError):
        ilist.parent(grid, 0)
    with pytest.raises(ValueError):
        ilist.corner(grid, 0, 0)


def test_abstract_provider_cannot_be_instantiated():
    with pytest.raises(TypeError):
        IntersectionListProvider()