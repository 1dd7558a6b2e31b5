# labstructs

Small, readable implementations of classic data structures and algorithms,
each paired with a short demonstration command. There are no dependencies
beyond the Python standard library (Python 3.10 or later).

## What is inside

| Module | Contents |
| --- | --- |
| `labstructs.linked_list` | `LinkedList`: singly linked list with `front`, `back`, `get_kth_element` and `delete_kth_element` (positions start at 1) |
| `labstructs.unordered_linked_list` | `UnorderedLinkedList`: `insert_first`, `insert_last`, `search`, `delete_node`, `delete_smallest`, `delete_all` |
| `labstructs.doubly_linked_list` | `OrderedDoublyLinkedList`: a doubly linked list kept in ascending order, iterable in both directions |
| `labstructs.stack` | `LinkedStack` (unbounded) and `ArrayStack` (fixed capacity, 100 by default) |
| `labstructs.linked_queue` | `LinkedQueue`: first-in, first-out queue with `add`, `remove`, `front`, `back` |
| `labstructs.binary_tree` | `BinaryTree`: inorder, preorder and postorder lists, `height`, `node_count`, `leaves_count`, `copy` |
| `labstructs.bst` | `BinarySearchTree`: insertion without duplicates, `search` / `in`, `delete_node` |
| `labstructs.graph` | `Graph`: adjacency lists with `depth_first`, `dft_at_vertex` and `breadth_first`; `Graph.parse` and `Graph.from_file` read a text description |
| `labstructs.sorting` | `seq_search`, `binary_search`; `bubble_sort`, `selection_sort`, `insertion_sort` (which return a `SortStats` of comparisons and assignments), `quick_sort`, `heap_sort` |
| `labstructs.radix_sort` | `radix_sort` and `bucket_index` for fixed-width strings of digits and lower-case letters |
| `labstructs.set_ops` | `intersect` and `intersect_into` for sorted sequences |
| `labstructs.search_engine` | `WikiEntry`, `load_entries`, `search_string`, `search`, `format_results`: case-insensitive title search over a colon-separated data file |
| `labstructs.animation` | `play`, `typewriter`, `loading_dots`, `clear_screen`: a scripted terminal "typewriter" animation |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from labstructs.doubly_linked_list import OrderedDoublyLinkedList
from labstructs.bst import BinarySearchTree
from labstructs.linked_queue import LinkedQueue
from labstructs.set_ops import intersect
from labstructs.sorting import bubble_sort

items = OrderedDoublyLinkedList([5, 1, 3])
list(items)              # [1, 3, 5]
items.search(3)          # True
items.reversed_str()     # '[5, 3, 1]'

tree = BinarySearchTree([78, 32, 89, 46, 28, 60, 98, 53])
60 in tree               # True
tree.inorder()           # [28, 32, 46, 53, 60, 78, 89, 98]
tree.height()            # 5

queue = LinkedQueue([1, 2, 3])
queue.front()            # 1

intersect([1, 2, 3, 4, 6], [1, 2, 4, 5, 6])   # [1, 2, 4, 6]

values = [3, 1, 2]
stats = bubble_sort(values)   # sorts in place
values                   # [1, 2, 3]
stats.comparisons        # 3
```

Operations that a structure cannot carry out raise an exception instead of
returning a placeholder value: taking the front of an empty list, popping an
empty stack or removing from an empty queue raise `IndexError`; deleting an
item that is not there, or inserting a duplicate into a `BinarySearchTree`,
raises `ValueError`; pushing onto a full `ArrayStack` raises `OverflowError`.

### Graph files

`Graph.parse` reads whitespace-separated integers: the number of vertices,
then for each vertex its number followed by its neighbours and a closing
`-999`. For example:

```
3
0 1 2 -999
1 2 -999
2 -999
```

### Search data files

`load_entries` reads one `namespace:id:title` entry per line, skipping blank
lines and lower-casing titles. `search` returns the entries whose titles
contain every term; when several terms are given the per-term results are
merged as sorted sequences ordered by numeric namespace and id, so the file
should list entries in that order.

## Commands

Each demonstration can be started from the shell once the package is
installed:

| Command | What it shows |
| --- | --- |
| `labstructs-animation` | the terminal animation |
| `labstructs-linked-list` | reads numbers from standard input ending with `-999`, then removes the smallest item, every occurrence of a chosen item and an item at a chosen position |
| `labstructs-doubly-linked-list` | copying, inserting, deleting and searching in an ordered doubly linked list |
| `labstructs-stack` | copying a stack and popping its elements |
| `labstructs-sorting [--size N] [--seed S]` | comparison and assignment counts for bubble, selection and insertion sort on random values (5000 by default) |
| `labstructs-radix-sort` | radix sort on numeric, alphabetic and alphanumeric samples |
| `labstructs-bst` | traversals, height, node and leaf counts of a binary search tree |
| `labstructs-graph [FILE]` | depth-first and breadth-first traversal of a graph read from a file; asks for the file name if none is given |
| `labstructs-intersect` | intersecting several sorted sequences |
| `labstructs-search [DATA]` | interactive title search over a data file (`wikiData.dat` by default); end input to quit |

## Limits

- The search engine keeps the whole data file in memory and only reads it;
  there is no index stored on disk and no way to add or edit entries.
- `radix_sort` accepts only the characters `0`-`9` and `a`-`z`, and every
  string must be at least as long as the requested width.
- The animation writes ANSI escape sequences and expects a terminal that
  understands them.