# koalagraphs

Graph algorithms in pure Python, built around a small integer-node `Graph`
type.

## What is in the package

- `koalagraphs.graph`: the `Graph` class (directed or undirected, optionally
  weighted) with `add_nodes`, `add_edge`, `has_edge`, `neighbors`, `weight`,
  `increase_weight`, `nodes`, `edges`, `number_of_nodes`, `number_of_edges`,
  `subgraph`, `to_undirected`, `connected_components` and `common_neighbors`,
  and `to_complement(graph)`.
- `koalagraphs.traversal`: `bfs`, `bfs_path` and `dfs_from`, each restricted
  to the nodes accepted by an optional predicate.
- `koalagraphs.paths`: `iter_paths(graph, length, mode)` yields induced paths,
  induced cycles, or at most one odd hole, chosen by `PathMode`.
- Graph file formats:
  - `koalagraphs.dimacs`: `read_dimacs`, `read_dimacs_all` (which also returns
    the source and sink nodes, or `None`) and `write_dimacs`. The `edge` and
    `max` problem types are read; `min`, `sp` and `mat` raise `ValueError`.
  - `koalagraphs.dimacs_binary`: `read_dimacs_binary`, `write_dimacs_binary`.
  - `koalagraphs.graph6`: `parse_g6`, `read_g6`, `format_g6`, `write_g6`.
  - `koalagraphs.digraph6`: `parse_d6`, `read_d6`, `format_d6`, `write_d6`.
  - `koalagraphs.sparse6`: `parse_s6`, `read_s6`, `format_s6`, `write_s6`.

  The `read_*` functions for graph6, digraph6 and sparse6 read the first line
  of a file; the `write_*` functions write a single line.
- `koalagraphs.set_cover`: exact minimum set cover by branch and reduce, with
  the solvers `GrandoniMSC`, `FominGrandoniKratschMSC` (which solves
  instances of sets of size at most two by maximum matching) and
  `RooijBodlaenderMSC` (which adds subsumption, counting and size-two rules),
  plus the helpers `find_set_inclusion`, `exclude_set` and `include_set`.
- `koalagraphs.dominating_set`: `BranchAndReduceMDS`, an exact minimum
  dominating set computed with one of the set cover solvers
  (`RooijBodlaenderMSC` by default), and `dominating_set_size`.
- Perfect (Berge) graph recognition:
  - `koalagraphs.perfect`: `PerfectGraphRecognition`, the `State` enum and
    `contains_simple_prohibited`.
  - The individual steps: `koalagraphs.jewels` (`is_jewel`,
    `contains_jewel`), `koalagraphs.pyramids` (`generate_tuples`,
    `is_pyramid`, `contains_pyramid`), `koalagraphs.odd_holes` (`is_path`,
    `contains_odd_hole`, `contains_hole`, `contains_t1`, `contains_t2`,
    `is_t3`, `contains_t3`), `koalagraphs.near_cleaners`
    (`contains_near_cleaner_odd_hole`) and `koalagraphs.perfect_common`
    (`is_complete`, `all_complete_vertices`, `auxiliary_components`).

## Installation

From a checkout of the package:

```
pip install .
```

## Examples

Read and write graph6:

```python
from koalagraphs.graph6 import parse_g6, format_g6

graph = parse_g6("Dhc")          # the 5-cycle
print(graph.number_of_nodes(), graph.number_of_edges())   # 5 5
print(format_g6(graph))          # Dhc
```

Find a minimum dominating set:

```python
from koalagraphs.graph import Graph
from koalagraphs.dominating_set import BranchAndReduceMDS, dominating_set_size
from koalagraphs.set_cover import RooijBodlaenderMSC

graph = Graph(4, False, False)
for u, v in [(0, 1), (1, 2), (2, 3)]:
    graph.add_edge(u, v, 1.0)

mds = BranchAndReduceMDS(graph, RooijBodlaenderMSC)
selection = mds.run()            # one boolean per node, in graph.nodes() order
print(dominating_set_size(selection), mds.is_dominating(selection))
```

Enumerate induced paths on three vertices of that graph:

```python
from koalagraphs.paths import iter_paths, PathMode

for path in iter_paths(graph, 3, PathMode.INDUCED_PATH):
    print(path)
```

Check whether a graph is perfect:

```python
from koalagraphs.graph6 import parse_g6
from koalagraphs.perfect import PerfectGraphRecognition, State

recognition = PerfectGraphRecognition(parse_g6("Dhc"))
state = recognition.run()        # the State found, e.g. State.HAS_T1
print(recognition.is_perfect())  # False: the 5-cycle is an odd hole
print(recognition.check())       # True: agrees with a direct odd hole search
```

`is_perfect()`, `check()` and the `state` property raise `RuntimeError`
until `run()` has been called.

## Limits

- The package is a library only: it has no command-line tool.
- `contains_near_cleaner_odd_hole`, and so `PerfectGraphRecognition.run` on
  graphs that reach that step, raises `ValueError` for graphs whose node
  identifiers reach 512.
- The recognition and exact solvers take exponential or high polynomial time
  and are meant for small graphs.

## Running the tests

```
pip install .[test]
pytest
```