# gridglue

Building blocks for coupling two grids that need not match. The package holds
a list of the intersections between the elements of a first and a second grid
and the abstract interface of a *merger* that computes such a list.

## Intersection lists (`gridglue.intersections`)

Every intersection in the merged grid is a simplex. It is embedded once or
more in each of the two grids. Each embedding names a parent element and gives
the local coordinates of the simplex's corners inside that parent.

- `SimplicialIntersection` is a dataclass with the fields `corners0`,
  `parents0`, `corners1` and `parents1`. `corners0[k]` is the list of corner
  coordinates of the k-th embedding into the first grid, and `parents0[k]` is
  its parent. The fields for the second grid work the same way.
  `SimplicialIntersection.create(dim0, dim1, parent0, parent1)` makes one
  embedding per grid with `min(dim0, dim1) + 1` zeroed corners.
- `SimplicialIntersectionListProvider(dim0, dim1, intersections=None)` stores
  such simplices. The method `intersections()` returns the stored list, which
  you may change in place. `new_intersection(parent0, parent1)` appends a fresh
  intersection and returns it. `clear()` removes all intersections, and
  `n_vertices` is the number of corners of each simplex.
- `IntersectionList(provider)` gives uniform access to the data of a provider.
  It has `size()` (and `len()`), `parents(grid, intersection)`,
  `parent(grid, intersection, index=0)` and
  `corner(grid, intersection, corner, index=0)`. The `grid` argument selects
  the first grid (`0`) or the second grid (`1`). Any other value raises
  `ValueError`.
- `IntersectionListProvider` is the abstract base class of providers.
  Subclass it to serve an `IntersectionList` from your own storage.

An intersection, embedding or corner number out of range raises `IndexError`.
A negative grid dimension raises `ValueError`.

```python
from gridglue.intersections import IntersectionList, SimplicialIntersectionListProvider

provider = SimplicialIntersectionListProvider(2, 2)
cut = provider.new_intersection(parent0=4, parent1=7)
cut.corners0[0] = [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)]
cut.corners1[0] = [(0.5, 0.0), (1.0, 0.5), (0.5, 0.5)]

intersections = IntersectionList(provider)
intersections.size()                 # 1
intersections.parents(0, 0)          # 1 embedding into the first grid
intersections.parent(1, 0)           # 7
intersections.corner(1, 0, 2)        # (0.5, 0.5)
```

## Mergers (`gridglue.merger`)

`Merger(grid1_dim, grid2_dim, dimworld)` is the abstract base class for
algorithms that take two extracted grids and build their set of intersections.
A subclass implements these three methods:

- `build(grid1_coords, grid1_elements, grid1_element_types, grid2_coords, grid2_elements, grid2_element_types)`
- `clear()`
- `intersection_list()`

The base class then answers `n_simplices()`, `parents(grid, idx)`,
`parent(grid, idx, par_id=0)` and `parent_local(grid, idx, corner, par_id=0)`
from the list that `intersection_list()` returns. It also holds a `counter`
attribute, which starts at 0, for subclasses to count intersection
computations.

```python
from gridglue.merger import Merger

class MyMerger(Merger):
    def build(self, grid1_coords, grid1_elements, grid1_element_types,
              grid2_coords, grid2_elements, grid2_element_types):
        ...

    def clear(self):
        ...

    def intersection_list(self):
        ...
```

## What the package does not do

The package has no concrete merging algorithm. Nothing in it computes the
geometric intersections of overlapping or touching elements. You get only the
storage for intersections and the `Merger` interface that such an algorithm
would implement. The package has no grid extraction and no command-line tool.

## Tests

```
pip install -e ".[test]"
pytest
```