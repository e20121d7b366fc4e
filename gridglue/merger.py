"""Abstract base for algorithms that intersect two extracted grids."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence

from gridglue.intersections import Coordinate, IntersectionList


class Merger(ABC):
    """Takes two extracted grids and builds the set of their intersections.

    Coordinates are sequences of ``dimworld`` floats; elements are given as a
    flat list of corner indices into the coordinate list, with one geometry
    type per element.
    """

    def __init__(self, grid1_dim: int, grid2_dim: int, dimworld: int) -> None:
        self.grid1_dim = grid1_dim
        self.grid2_dim = grid2_dim
        self.dimworld = dimworld
        # Number of times the element intersection routine has been run.
        self.counter = 0

    @abstractmethod
    def build(
        self,
        grid1_coords: Sequence[Sequence[float]],
        grid1_elements: Sequence[int],
        grid1_element_types: Sequence[Any],
        grid2_coords: Sequence[Sequence[float]],
        grid2_elements: Sequence[int],
        grid2_element_types: Sequence[Any],
    ) -> None:
        """Build the merged grid from the two grids' vertices and elements."""

    def n_simplices(self) -> int:
        """Number of simplices in the merged grid."""
        return self.intersection_list().size()

    @abstractmethod
    def clear(self) -> None:
        """Discard the merged grid."""

    @abstractmethod
    def intersection_list(self) -> IntersectionList:
        """The list of intersections; only meaningful after :meth:`build`."""

    def parents(self, grid: int, idx: int) -> int:
        """Number of parents in grid 0 or 1 of a merged grid simplex."""
        return self.intersection_list().parents(grid, idx)

    def parent(self, grid: int, idx: int, par_id: int = 0) -> int:
        """Index of the parent element in grid 0 or 1 of a merged grid simplex."""
        return self.intersection_list().parent(grid, idx, par_id)

    def parent_local(self, grid: int, idx: int, corner: int, par_id: int = 0) -> Coordinate:
        """Local coordinates in the parent element of a merged grid simplex corner."""
        return self.intersection_list().corner(grid, idx, corner, par_id)