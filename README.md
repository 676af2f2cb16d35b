# algokit

A collection of classic data structures and algorithms in plain Python,
using only the standard library.

## Installation

```
pip install .
```

The tests use pytest, available through the `test` extra:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algokit.sorting` | `bubble_sort`, `selection_sort`, `insertion_sort`, `quick_sort`, `merge_sort`, `merge_sorted`, `three_sum` |
| `algokit.searching` | `binary_search`, `first_index`, `last_index`, `first_at_least`, `last_at_most`, `max_sum_two_no_overlap` |
| `algokit.stringmatch` | `bm_search`, `brute_force_search`, `replace_space` |
| `algokit.recursion` | `climb_stairs`, `climb_stairs_iterative`, `fibonacci`, `fibonacci_iterative` |
| `algokit.bitmap` | `BitMap` |
| `algokit.queues` | `CircularQueue`, `LinkedRingQueue`, `TwoStackQueue`, `QueueFullError`, `QueueEmptyError` |
| `algokit.stacks` | `MinStack`, `evaluate` |
| `algokit.linkedlist` | `Node`, `from_iterable`, `to_list`, `merge_sorted_lists`, `middle_node`, `delete_nth_from_end`, `reverse`, `find_cycle_start`, `SinglyLinkedList`, `DoublyLinkedList`, `FixedArray` |
| `algokit.lru` | `LRUCache` |
| `algokit.hashing` | `first_char_hash`, `ChainedHashTable`, `BoundedHashTable` |
| `algokit.consistent_hash` | `machine_hash`, `data_hash`, `Machine`, `ConsistentHash` |
| `algokit.heaps` | `heapify_by_insertion`, `heapify_by_sifting` (max-heaps), `MinHeap`, `IndexedMinHeap` |
| `algokit.binary_tree` | `TreeNode`, `preorder`, `inorder`, `postorder`, their `_iterative` forms, `level_order` |
| `algokit.bst` | `BSTNode`, `BinarySearchTree` |
| `algokit.trie` | `Trie` (lowercase `a`–`z` words) |
| `algokit.aho_corasick` | `AhoCorasick` multi-pattern matcher |
| `algokit.graph` | undirected `Graph` with `bfs_order`, `bfs_path`, `dfs_path` |
| `algokit.digraph` | `DirectedGraph` with `topological_sort`, `WeightedGraph`, `Edge` |
| `algokit.backtracking` | `solve_queens`, `render_board`, `max_pack_weight` |
| `algokit.dynamic` | `knapsack_max_weight`, `knapsack_max_weight_memo`, `knapsack_max_weight_dp`, `knapsack_max_value`, `edit_distance`, `min_path_sum`, `min_path_sum_bruteforce` |

The sorting functions return a new sorted list and leave their input alone.

## Examples

```python
from algokit.sorting import merge_sort
from algokit.stringmatch import bm_search
from algokit.bitmap import BitMap
from algokit.graph import Graph

merge_sort([10, 22, 4])          # [4, 10, 22]
bm_search("aaaaaba", "ba")       # 5

bits = BitMap(10)
bits.add(8)
8 in bits                        # True

g = Graph()
for s, t in [(0, 1), (0, 3), (1, 2), (1, 4), (2, 5), (3, 4), (4, 5), (4, 6), (5, 7), (6, 7)]:
    g.add_edge(s, t)
g.bfs_path(0, 7)                 # [0, 1, 2, 5, 7]
```

```python
from algokit.aho_corasick import AhoCorasick

matcher = AhoCorasick(["bcd", "cd", "abcd"])
matcher.find_all("abcd")         # [(0, 'abcd'), (1, 'bcd'), (2, 'cd')]
```

`find_all` builds the failure links itself when patterns were added since the
last `build()`.

```python
from algokit.dynamic import edit_distance, min_path_sum

edit_distance("abce", "aaaaabcd")                                      # 5
min_path_sum([[1, 3, 5, 9], [2, 1, 3, 4], [5, 2, 6, 7], [6, 8, 4, 3]])  # 19
```

## Errors

Errors are raised as exceptions. Popping from an empty `CircularQueue`,
`LinkedRingQueue` or `TwoStackQueue` raises `QueueEmptyError` (an
`IndexError`); pushing onto a full one raises `QueueFullError`. Looking up a
missing key in `ChainedHashTable`, `BoundedHashTable` or `ConsistentHash`
raises `KeyError`; a full `BoundedHashTable`, `MinHeap` or `IndexedMinHeap`
raises `OverflowError`. `BitMap.add` raises `ValueError` for values outside
`0..nbits`.

Note that a `CircularQueue` built with `capacity` slots holds at most
`capacity - 1` values.

## What it does not do

algokit is a library only: it has no command-line program, and nothing is
stored beyond the objects held in memory.