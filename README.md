# dsalgo

A small library of classic data structures and algorithms in plain Python.
It has no runtime dependencies.

## Installation

```
pip install dsalgo
```

To run the tests:

```
pip install "dsalgo[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsalgo.sorting` | `bubble_sort`, `selection_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `cyclic_sort` |
| `dsalgo.searching` | `linear_search`, `binary_search`, `interpolation_search`, `missing_number` |
| `dsalgo.arrays` | `roman_to_int`, `find_duplicates`, `majority_element` |
| `dsalgo.containers` | `BoundedStack`, `LinearQueue`, `CircularQueue`, `CapacityError`, `EmptyError` |
| `dsalgo.expressions` | `precedence`, `infix_to_postfix`, `evaluate_postfix`, `ExpressionError` |
| `dsalgo.recursion` | `factorial`, `fibonacci`, `fibonacci_series`, `gcd`, `hanoi_moves` |
| `dsalgo.graph` | `AdjacencyMatrix`, `AdjacencyList` |
| `dsalgo.bst` | `BinarySearchTree`, `DuplicateKeyError` |
| `dsalgo.avl` | `AVLTree` |
| `dsalgo.binary_tree` | `BinaryTree`, `TreeNode`, `NO_NODE` |

## Sorting and searching

Every sort takes any iterable and returns a new list; the input is left alone.
`cyclic_sort` accepts only the values `1..n` and raises `ValueError` otherwise.

```python
from dsalgo.sorting import quick_sort
from dsalgo.searching import binary_search, linear_search, missing_number

quick_sort([25, 3, 78, 1, 0, 10])      # [0, 1, 3, 10, 25, 78]
binary_search([11, 22, 33, 44, 55], 33)  # 2
linear_search([24, 25, 3, 85], 7)      # None
missing_number([9, 6, 4, 2, 3, 5, 7, 0, 1])  # 8
```

The searches return an index, or `None` when the key is absent.

## Array problems

```python
from dsalgo.arrays import roman_to_int, find_duplicates, majority_element

roman_to_int("MCMXCIV")           # 1994
find_duplicates([1, 2, 5, 9, 5])  # [5]
majority_element([1, 3, 2, 3, 3]) # 3
```

`find_duplicates` reports a value once for every pair of equal items, and
`majority_element` returns `None` when no value occurs more than half the time.

## Bounded containers

`BoundedStack`, `LinearQueue` and `CircularQueue` hold a fixed number of values.
Adding to a full one raises `CapacityError`; taking from an empty one raises
`EmptyError` (a subclass of `IndexError`).

```python
from dsalgo.containers import BoundedStack, CapacityError

stack = BoundedStack(2)
stack.push(1)
stack.push(2)
try:
    stack.push(3)
except CapacityError:
    pass
stack.pop()   # 2
```

A `LinearQueue` counts as full once its last slot has been used, even if values
have since been dequeued; its slots become free again only when it empties.
A `CircularQueue` reuses freed slots as a ring buffer.

## Expressions

```python
from dsalgo.expressions import infix_to_postfix, evaluate_postfix

infix_to_postfix("a+b*c")   # "abc*+"
evaluate_postfix("23*4+")   # 10
```

Operands are single characters; `^` is right-associative. `evaluate_postfix`
accepts single-digit operands only and truncates division toward zero.
Malformed input raises `ExpressionError`; division by zero raises
`ZeroDivisionError`.

## Recursion classics

```python
from dsalgo.recursion import factorial, fibonacci_series, gcd, hanoi_moves

factorial(5)              # 120
fibonacci_series(6)       # [0, 1, 1, 2, 3, 5]
gcd(48, 18)               # 6
list(hanoi_moves(2))      # [("a", "b"), ("a", "c"), ("b", "c")]
```

`hanoi_moves` yields `(from, to)` pairs and raises `ValueError` for a
non-positive number of discs.

## Trees and graphs

```python
from dsalgo.avl import AVLTree
from dsalgo.bst import BinarySearchTree
from dsalgo.binary_tree import BinaryTree
from dsalgo.graph import AdjacencyMatrix, AdjacencyList

tree = AVLTree([9, 5, 10, 0, 6, 11, -1, 1, 2])
tree.preorder()
tree.delete(10)

bst = BinarySearchTree([8, 3, 1, 6, 10])
bst.inorder()   # [1, 3, 6, 8, 10]

bt = BinaryTree.from_preorder([1, 2, -1, -1, 3, -1, -1])
bt.inorder()    # [2, 1, 3]

graph = AdjacencyMatrix(4)
graph.add_undirected_edge(0, 1)
graph.add_undirected_edge(1, 2)
graph.bfs(0)    # [0, 1, 2]

lists = AdjacencyList(3)
lists.add_edge(0, 1)
print(lists)
```

Search trees hold distinct values: inserting one that is already present raises
`DuplicateKeyError`. Referring to a graph vertex outside `0..size-1` raises
`ValueError`.

## What it does not do

- There are no linked-list types; the containers here are array-backed.
- There is no command-line program or interactive menu; everything is used by
  importing it.