# dsakit

A compact collection of classic data structures and algorithms in plain
Python. It needs nothing beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.bintree` | `Node`, `preorder`, `inorder`, `postorder`, `level_order`, `is_bst`, `build_preorder`, `build_level_order` |
| `dsakit.bst` | `search`, `search_iter`, `insert`, `insert_any`, `find_min`, `find_max`, `inorder_predecessor`, `delete`, `remove`, `DuplicateKeyError` |
| `dsakit.avl` | `AVLNode`, `height`, `balance_factor`, `left_rotate`, `right_rotate`, `insert`, `inorder` |
| `dsakit.linkedlist` | `ListNode`, `LinkedList`, `CircularList` |
| `dsakit.stacks` | `ArrayStack`, `LinkedStack`, `StackOverflowError`, `StackUnderflowError` |
| `dsakit.queues` | `ArrayQueue`, `CircularQueue`, `LinkedQueue`, `QueueOverflowError`, `QueueEmptyError` |
| `dsakit.expressions` | `parenthesis_match`, `brackets_match`, `matches`, `precedence`, `is_operator`, `infix_to_postfix` |
| `dsakit.arrays` | `FixedArray`, `insert_at_index`, `linear_search`, `binary_search` |
| `dsakit.sorting` | `bubble_sort`, `insertion_sort`, `count_sort`, `merge_sort`, `quick_sort`, `partition` |
| `dsakit.heaps` | `MaxHeap`, `MinHeap`, `ascending` |
| `dsakit.graphs` | `matrix_bfs`, `matrix_dfs`, `Graph`, `CityGraph`, `KeyedGraph` |
| `dsakit.pathing` | `WeightedGraph` (Dijkstra), `DirectedGraph` (topological sort), `topo_sort` |
| `dsakit.trie` | `Trie` |
| `dsakit.bits` | `get_ith_bit`, `set_ith_bit`, `clear_ith_bit`, `update_ith_bit`, `clear_last_i_bits`, `clear_bits_in_range`, `power_of_two`, `count_set_bits`, `count_bits`, `dec_to_binary` |
| `dsakit.dynamic` | `knapsack`, `knapsack_dp`, `wines_rec`, `wines_iter`, `factorial`, `subsets` |

## Examples

Binary trees and binary search trees:

```python
from dsakit import bintree, bst

root = None
for key in [8, 3, 10, 1, 6, 14, 4, 7, 13]:
    root = bst.insert_any(root, key)

bintree.inorder(root)          # [1, 3, 4, 6, 7, 8, 10, 13, 14]
bintree.is_bst(root)           # True
bst.search(root, 6).data       # 6
root = bst.remove(root, 3)

tree = bintree.build_preorder([1, 2, -1, -1, 3, -1, -1])
bintree.level_order(tree)      # [[1], [2, 3]]
```

`bst.insert` raises `DuplicateKeyError` for a key already in the tree, and
`bst.insert_any` sends equal keys to the right. `bst.delete` replaces a
found node with its in-order predecessor. `bst.remove` splices out nodes
that have a single child.

Stacks, queues and expressions:

```python
from dsakit.stacks import ArrayStack
from dsakit.queues import CircularQueue
from dsakit.expressions import infix_to_postfix, brackets_match

stack = ArrayStack(10)
stack.push(1)
stack.push(2)
stack.pop()                          # 2

queue = CircularQueue(4)             # holds at most 3 values
queue.enqueue(12)
queue.dequeue()                      # 12

infix_to_postfix("x-y/z-k*d")        # "xyz/-kd*-"
brackets_match("[4-6]((8){8*7-9})")  # True
```

Graphs:

```python
from dsakit.pathing import WeightedGraph

g = WeightedGraph(5)
g.add_edge(0, 1, 1)
g.add_edge(1, 2, 2)
g.add_edge(0, 2, 4)
g.add_edge(0, 3, 7)
g.add_edge(3, 2, 2)
g.add_edge(3, 4, 3)
g.dijkstra(0, 4)                     # 8
```

Tries and dynamic programming:

```python
from dsakit.trie import Trie
from dsakit.dynamic import knapsack_dp, subsets

t = Trie()
t.insert("strike")
t.starts_with("stri")                # True
t.search("stri")                     # False

knapsack_dp([2, 7, 3, 4], [5, 20, 20, 10], 11)   # 40
subsets("ab")                        # ["ab", "a", "b", ""]
```

## Errors

Error conditions raise exceptions and do not return sentinel values. Pushing
onto a full `ArrayStack` raises `StackOverflowError`. Popping an empty stack
raises `StackUnderflowError`. A full queue raises `QueueOverflowError` and an
empty one raises `QueueEmptyError`. Out-of-range vertices and positions raise
`IndexError`, and invalid sizes or arguments raise `ValueError`.
`MaxHeap.parent`, `left_child` and `right_child` are the exception: they
return `None` when there is no such slot.

## What it does not do

This is a library only. It has no command-line program, and it does not read
values interactively. Trees, graphs and lists are built by calling the
functions and classes above from your own code.