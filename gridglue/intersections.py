"""Lists of simplicial intersections between two grids and the providers behind them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple, TypeVar

Coordinate = Tuple[float, ...]
Index = int

_T = TypeVar("_T")


def _check_grid(grid: int) -> None:
    if grid not in (0, 1):
        raise ValueError(f"grid must be 0 or 1, got {grid!r}")


def _at(items: Sequence[_T], position: int, what: str) -> _T:
    if position < 0 or position >= len(items):
        raise IndexError(f"{what} {position} out of range (size {len(items)})")
    return items[position]


class IntersectionListProvider(ABC):
    """Source of intersection data for an :class:`IntersectionList`."""

    @abstractmethod
    def size(self) -> int:
        """Number of intersections in the merged grid."""

    @abstractmethod
    def parents0(self, intersection: Index) -> int:
        """Number of embeddings of an intersection into the first grid."""

    @abstractmethod
    def parents1(self, intersection: Index) -> int:
        """Number of embeddings of an intersection into the second grid."""

    @abstractmethod
    def parent0(self, intersection: Index, index: int) -> Index:
        """Parent entity of an embedding of an intersection in the first grid."""

    @abstractmethod
    def parent1(self, intersection: Index, index: int) -> Index:
        """Parent entity of an embedding of an intersection in the second grid."""

    @abstractmethod
    def corner0(self, intersection: Index, corner: int, index: int) -> Coordinate:
        """Local coordinates of a corner of an embedding in the first grid."""

    @abstractmethod
    def corner1(self, intersection: Index, corner: int, index: int) -> Coordinate:
        """Local coordinates of a corner of an embedding in the second grid."""


class IntersectionList:
    """Uniform access to the intersections of a provider, selected by grid number."""

    def __init__(self, provider: IntersectionListProvider) -> None:
        self._provider = provider

    @property
    def provider(self) -> IntersectionListProvider:
        return self._provider

    def size(self) -> int:
        """Number of intersections in the merged grid."""
        return self._provider.size()

    def __len__(self) -> int:
        return self.size()

    def parents(self, grid: int, intersection: Index) -> int:
        """Number of embeddings of an intersection into grid 0 or 1."""
        _check_grid(grid)
        if grid == 0:
            return self._provider.parents0(intersection)
        return self._provider.parents1(intersection)

    def parent(self, grid: int, intersection: Index, index: int = 0) -> Index:
        """Parent entity of an embedding of an intersection in grid 0 or 1."""
        _check_grid(grid)
        if grid == 0:
            return self._provider.parent0(intersection, index)
        return self._provider.parent1(intersection, index)

    def corner(self, grid: int, intersection: Index, corner: int, index: int = 0) -> Coordinate:
        """Local corner coordinates of an embedding of an intersection in grid 0 or 1."""
        _check_grid(grid)
        if grid == 0:
            return self._provider.corner0(intersection, corner, index)
        return self._provider.corner1(intersection, corner, index)


@dataclass
class SimplicialIntersection:
    """A simplex shared by both grids, with its embeddings into each of them.

    ``corners0[k]`` holds the corner local coordinates of the k-th embedding into
    the first grid and ``parents0[k]`` its parent entity; likewise for grid 1.
    """

    corners0: List[List[Coordinate]] = field(default_factory=list)
    parents0: List[Index] = field(default_factory=list)
    corners1: List[List[Coordinate]] = field(default_factory=list)
    parents1: List[Index] = field(default_factory=list)

    @classmethod
    def create(cls, dim0: int, dim1: int, parent0: Index = 0, parent1: Index = 0) -> "SimplicialIntersection":
        """An intersection with one embedding per grid and zeroed corners."""
        if dim0 < 0 or dim1 < 0:
            raise ValueError("grid dimensions must not be negative")
        vertices = min(dim0, dim1) + 1
        zero0 = tuple(0.0 for _ in range(dim0))
        zero1 = tuple(0.0 for _ in range(dim1))
        return cls(
            corners0=[[zero0] * vertices],
            parents0=[parent0],
            corners1=[[zero1] * vertices],
            parents1=[parent1],
        )


class SimplicialIntersectionListProvider(IntersectionListProvider):
    """Provider that stores simplicial intersections in a list."""

    def __init__(
        self,
        dim0: int,
        dim1: int,
        intersections: Optional[Iterable[SimplicialIntersection]] = None,
    ) -> None:
        if dim0 < 0 or dim1 < 0:
            raise ValueError("grid dimensions must not be negative")
        self.dim0 = dim0
        self.dim1 = dim1
        self._intersections: List[SimplicialIntersection] = list(intersections or [])

    @property
    def n_vertices(self) -> int:
        """Number of corners of each intersection simplex."""
        return min(self.dim0, self.dim1) + 1

    def intersections(self) -> List[SimplicialIntersection]:
        """The stored intersections; the list may be modified in place."""
        return self._intersections

    def new_intersection(self, parent0: Index, parent1: Index) -> SimplicialIntersection:
        """Append a fresh intersection between the given parents and return it."""
        item = SimplicialIntersection.create(self.dim0, self.dim1, parent0, parent1)
        self._intersections.append(item)
        return item

    def _get(self, intersection: Index) -> SimplicialIntersection:
        return _at(self._intersections, intersection, "intersection")

    def size(self) -> int:
        return len(self._intersections)

    def parents0(self, intersection: Index) -> int:
        return len(self._get(intersection).parents0)

    def parents1(self, intersection: Index) -> int:
        return len(self._get(intersection).parents1)

    def parent0(self, intersection: Index, index: int) -> Index:
        return _at(self._get(intersection).parents0, index, "embedding")

    def parent1(self, intersection: Index, index: int) -> Index:
        return _at(self._get(intersection).parents1, index, "embedding")

    def corner0(self, intersection: Index, corner: int, index: int) -> Coordinate:
        corners = _at(self._get(intersection).corners0, index, "embedding")
        return _at(corners, corner, "corner")

    def corner1(self, intersection: Index, corner: int, index: int) -> Coordinate:
        corners = _at(self._get(intersection).corners1, index, "embedding")
        return _at(corners, corner, "corner")

    def clear(self) -> None:
        """Remove all intersections."""
        self._intersections.clear()