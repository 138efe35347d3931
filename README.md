# algoset

A small library of classic algorithms in plain Python, with no third-party
dependencies. Every function takes ordinary Python values (lists, tuples,
strings, dicts) and returns its result; nothing reads from standard input or
prints.

## Installation

```
pip install algoset
```

## Modules

### `algoset.recursion`

Recursive versions of textbook routines.

- `factorial(n)`, `fibonacci(n)` – raise `ValueError` for negative `n`.
- `binary_search(items, key)` – `True`/`False` for an ascending sequence.
- `linear_search(items, key)` – `True`/`False`, scanning from the front.
- `merge_sort(items)`, `quick_sort(items)` – return a new ascending list.
- `is_palindrome(text)`, `reverse_string(text)`.
- `power(base, exponent)` – by repeated halving; a negative exponent raises
  `ValueError`.

### `algoset.dp`

- `knapsack(weights, values, capacity)` – best value for the 0/1 knapsack.
- `fibonacci_memo(n)` – Fibonacci reusing earlier results.
- `frog_jump(heights, k)` – least total height change to reach the last
  stone, jumping up to `k` stones at a time.

### `algoset.contest`

- `next_round(scores, k)` – how many scores are at least the `k`-th score and
  above zero.
- `team_problems(rows)` – how many rows of three 0/1 votes have at least two
  votes.
- `find_duplicate(nums)` – first value found twice by sign marking, or `None`.
- `is_binary_decimal_product(n)` – whether `n` is a product of two numbers
  written only with the digits 0 and 1.

### `algoset.fence`

- `find_intersection(wire1, wire2)` – crossing point of a vertical and a
  horizontal wire `(x1, y1, x2, y2)`, or `None`.
- `fence_intersections(wires)` – maps each crossing point, in sorted order,
  to the set of wires meeting there.
- `calculate_voltage(intersections)` – sum over crossings of the wire count
  times the shortest wire length there.
- `parse_animals(text)` – turns `"cat:5 dog:12"` into `{"cat": 5, "dog": 12}`.
- `fence_report(wires, animals, touching)` – `(dies, share)`: whether the
  touching animal's resistance is below the voltage, and the fraction of
  animals for which that holds. An animal not in the table counts with
  resistance 0.
- `brush_presses(vertices, brush)` – square brush presses needed to cover the
  bounding box of a polygon.

### `algoset.maze`

- `find_paths(grid)` – every simple route through open (`1`) cells of a
  square grid from the top-left to the bottom-right, as sorted strings of
  `D`, `L`, `R`, `U` moves.

### `algoset.tree`

`Node(data, left=None, right=None)` is a dataclass. Builders use `-1` to mark
a missing child:

- `build_level_order(values)`, `build_preorder(values)` – raise `ValueError`
  if the values run out.
- `build_bst(values)` – inserts into a binary search tree, equal values going
  right.

Queries: `inorder`, `postorder`, `level_order` (a list per level), `height`,
`diameter`, `fast_diameter`, `is_balanced`, `is_sum_tree`, `zigzag`,
`left_boundary`, `right_boundary`, `leaves`.

### `algoset.objects`

Small object-oriented examples: `Animal.make_sound()` returns
`"Some sound"` and `Dog.make_sound()` returns `"Woof"`; `Student(age,
register_no).describe()`; the abstract `Shape(color)` with `Square` and
`Circle`, whose `draw()` returns a description naming the colour; and
`halve(value)`, integer halving truncated toward zero.

### `algoset.traversal`

Unweighted graphs as adjacency lists indexed by node number.

- `build_adjacency(n, edges, directed=False)`.
- `bfs(adj)`, `dfs(adj)` – visiting order from node 0.
- `is_bipartite(adj)`, `has_cycle_directed(adj)`, `has_cycle_undirected(adj)`.
- `topo_sort_dfs(adj)`, `topo_sort_kahn(adj)`, and
  `is_topological_order(adj, order)` to check a result.

### `algoset.paths`

Weighted adjacency lists hold `(neighbour, weight)` pairs.

- `bellman_ford(n, edges, source)` – directed `(u, v, weight)` edges;
  unreached nodes get `BELLMAN_FORD_UNREACHED` (10**8); a reachable negative
  cycle raises `NegativeCycleError`.
- `dijkstra_heap(adj, source)`, `dijkstra_sorted(adj, source)` – unreached
  nodes get `DIJKSTRA_UNREACHED` (10**9).
- `floyd_warshall(matrix)` – `-1` (`NO_PATH`) marks a missing edge on input
  and an unreachable pair on output.
- `shortest_path_weighted(n, edges)` – `(distance, route)` from node 1 to
  node `n` over undirected edges on nodes 1..n, or `None`.
- `shortest_path_dag(n, edges)` – distances from node 0 in a DAG; `-1` where
  unreached.
- `shortest_path_unit(n, edges, source)` – edge counts in an undirected
  graph; `-1` where unreached.

### `algoset.spanning`

- `DisjointSet(n)` – union-find over nodes 0..n with `find(node)` and
  `union(u, v)`, which returns `False` if the two were already joined.
- `kruskal(adj)` – total weight of a minimum spanning forest.
- `prim(adj)` – weight of a minimum spanning tree of node 0's component.

## Example

```python
from algoset.recursion import merge_sort, binary_search
from algoset.dp import knapsack
from algoset.traversal import build_adjacency, bfs
from algoset.spanning import DisjointSet

merge_sort([3, 4, 2, 1, 7])            # [1, 2, 3, 4, 7]
binary_search([1, 2, 3, 5, 6, 7], 12)  # False
knapsack([1, 2, 4], [10, 15, 40], 6)   # 55

adj = build_adjacency(4, [(0, 1), (0, 2), (2, 3)])
bfs(adj)                               # [0, 1, 2, 3]

ds = DisjointSet(7)
ds.union(1, 2)
ds.union(2, 3)
ds.find(1) == ds.find(3)               # True
```

## What it does not do

algoset is a library only. It installs no command-line programs and has no
readers for problem input in text form; callers build the lists, tuples and
strings themselves and format the results as they need.

## Running the tests

```
pip install "algoset[test]"
pytest
```