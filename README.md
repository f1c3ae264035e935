# dskit

A small library of classic data structures and algorithms, written as plain
Python classes and functions. It has no dependencies outside the standard
library.

## Contents

| Area | Module | Names |
| --- | --- | --- |
| Linear structures | `dskit.linked_list` | `LinkedList`, `from_head_insertion`, `from_tail_insertion` |
| | `dskit.link_queue` | `LinkQueue`, `QueueEmptyError` |
| | `dskit.circular_queue` | `CircularQueue`, `QueueFullError` |
| | `dskit.seq_stack` | `SeqStack`, `StackEmptyError` |
| | `dskit.josephus` | `josephus` |
| Stack applications | `dskit.line_edit` | `edit_line`, `edit_lines` |
| | `dskit.expression` | `is_operator`, `precede`, `operate`, `evaluate` |
| Recursion | `dskit.hanoi` | `hanoi_moves` |
| | `dskit.variadic` | `max_of` |
| Strings | `dskit.sstring` | `SString`, `get_next` |
| Matrices | `dskit.sparse_matrix` | `SparseMatrix`, `Triple` |
| Hashing | `dskit.hash_table` | `HashTable`, `DuplicateKeyError` |
| Trees | `dskit.binary_tree` | `Node`, `Side`, `parse_preorder`, `preorder`, `inorder`, `postorder`, `level_order`, `depth`, `count_leaves`, `parent`, `insert_child`, `delete_child` |
| | `dskit.bst` | `BinarySearchTree` |
| | `dskit.huffman` | `HuffmanCoding`, `HuffmanNode` |
| Graphs | `dskit.adjacency_list` | `AdjacencyListGraph`, `Arc` |
| | `dskit.adjacency_matrix` | `AdjacencyMatrixGraph` |
| | `dskit.prim` | `minimum_spanning_tree` |
| | `dskit.topological` | `topological_sort`, `topological_order`, `CycleError` |
| | `dskit.critical_path` | `critical_path`, `Activity` |
| Sorting | `dskit.heap_sort` | `heap_sort`, `heap_adjust` |
| | `dskit.merge_sort` | `merge_sort`, `merge` |
| Searching | `dskit.search` | `sequential_search`, `sequential_search_sentinel`, `binary_search`, `binary_search_recursive` |

## Examples

```python
from dskit.linked_list import LinkedList
from dskit.binary_tree import parse_preorder, inorder, depth
from dskit.expression import evaluate
from dskit.josephus import josephus
from dskit.huffman import HuffmanCoding

items = LinkedList([1, 4, 5])
items.insert(1, 100)
print(list(items))              # [100, 1, 4, 5]

tree = parse_preorder("ABC##DE#G##F###")
print(list(inorder(tree)), depth(tree))

print(evaluate("4+2*3-9/3#"))   # 7

print(josephus(10, 3))          # (elimination order, survivor)

coding = HuffmanCoding("abcd", [7, 5, 2, 4])
bits = coding.encode("abad")
print(coding.decode(bits))      # abad
```

Positions in the list, string and search structures count from 1. Operations
on an empty queue or stack raise `QueueEmptyError` or `StackEmptyError`; a
full `CircularQueue` raises `QueueFullError`; a graph with a cycle makes the
topological functions and `critical_path` raise `CycleError`; inserting a key
already in a `HashTable` raises `DuplicateKeyError`.

Graphs are built from Python values: a sequence of vertices and a sequence of
`(u, v)` or `(u, v, weight)` edges. The package does not read graphs, trees or
matrices interactively from a terminal, and stores nothing on disk.

## Commands

Installing the package provides three small programs.

```
dskit-line-edit [FILE]
```

reads lines from `FILE` or standard input, where `#` erases the previous
character and `@` clears the line, and prints each edited line.

```
dskit-expr [EXPRESSION]
```

evaluates a single-digit arithmetic expression terminated by `#`, such as
`4+2*3-9/3#`, and prints `Result: 7`. Without an argument it reads one line
from standard input.

```
dskit-hanoi [DISKS]
```

prints the moves that solve the Tower of Hanoi for `DISKS` disks, one line per
move such as `Disk 1: x --> z`. Without an argument it asks for the number.

## Running the tests

```
pip install -e .[test]
pytest
```