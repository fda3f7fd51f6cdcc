# algokit

A small library of classic data-structure and algorithm routines: binary
trees and their traversals, a linked list, tree serialization, bucket-based
hashing and a few array and string puzzles. It has no dependencies beyond
the standard library.

## Installation

    pip install algokit

To run the test suite:

    pip install "algokit[test]"
    pytest

## Modules

| Module | Contents |
| --- | --- |
| `algokit.tree` | `TreeNode`, `BinarySearchTree`, `build_balanced` |
| `algokit.linked_list` | `ListNode`, `LinkedList` |
| `algokit.traversal` | `inorder_recursive`, `inorder_iterative`, `inorder_morris`, `preorder_recursive`, `preorder_iterative`, `postorder_recursive`, `postorder_iterative`, `postorder_two_stacks` |
| `algokit.depth` | `max_depth`, `min_depth` |
| `algokit.construct` | `build_tree` |
| `algokit.codec` | `PreorderCodec`, `LevelOrderCodec` |
| `algokit.bst` | `search_bst`, `search_bst_recursive`, `insert_into_bst`, `insert_into_bst_iterative` |
| `algokit.random_list` | `RandomListNode`, `copy_random_list` |
| `algokit.two_sum` | `two_sum`, `two_sum_reversed`, `two_sum_brute` |
| `algokit.kth_largest` | `find_kth_largest` |
| `algokit.island` | `island_perimeter` |
| `algokit.morse` | `unique_morse_representations`, `MORSE_CODE` |
| `algokit.hashing` | `BucketHashSet`, `BucketHashMap`, `KEY_LIMIT` |

## Trees

`TreeNode` is a plain node with `val`, `left` and `right`. Every tree
function takes a root node (or `None` for an empty tree).

`build_balanced(values)` sorts the values (duplicates kept) and builds a
height-balanced search tree, rooting each subtree at the upper middle
element. `BinarySearchTree(values)` starts from such a balanced tree, or
from an empty one when no values are given; `insert` and `extend` add
values as new leaves and ignore values already present. Iterating the tree
yields its values in ascending order, and `str(tree)` joins them with
spaces.

```python
from algokit.tree import BinarySearchTree
from algokit.traversal import inorder_iterative, postorder_recursive
from algokit.depth import max_depth
from algokit.codec import PreorderCodec

tree = BinarySearchTree([5, 3, 8, 1, 4])
tree.insert(7)
print(list(tree))                 # [1, 3, 4, 5, 7, 8]
print(max_depth(tree.root))
print(postorder_recursive(tree.root))

codec = PreorderCodec()
text = codec.serialize(tree.root)
copy = codec.deserialize(text)
assert inorder_iterative(copy) == list(tree)
```

Traversals return lists of values. `inorder_morris` rethreads the tree while
walking it and restores it before returning.

`max_depth` and `min_depth` count nodes from the root to a leaf; for
`min_depth` a node with one child is not a leaf.

`build_tree(preorder, inorder)` rebuilds a tree of distinct values from its
two traversals.

`PreorderCodec` and `LevelOrderCodec` turn a tree into a space-separated
string with `#` for empty links, and back. `LevelOrderCodec` encodes an
empty tree as `""`. Decoding a string that ends too early raises
`ValueError`.

`search_bst` and `search_bst_recursive` return the subtree rooted at the
matching node, or `None`. `insert_into_bst` and `insert_into_bst_iterative`
add a value as a new leaf and return the root; a value already present
leaves the tree unchanged.

## Lists

`LinkedList(values)` keeps `head` and `tail` nodes, appends at the tail and
iterates over its values.

`copy_random_list(head)` deep-copies a list of `RandomListNode`s, each with
`label`, `next` and `random` links, and leaves the original list as it was.

## Arrays and strings

```python
from algokit.two_sum import two_sum, two_sum_reversed
from algokit.kth_largest import find_kth_largest
from algokit.island import island_perimeter
from algokit.morse import unique_morse_representations

two_sum([2, 7, 11, 15], 9)                                  # [0, 1]
two_sum_reversed([2, 7, 11, 15], 9)                         # [1, 0]
find_kth_largest([3, 2, 1, 5, 6, 4], 2)                     # 5
island_perimeter([[0, 1, 0, 0], [1, 1, 1, 0], [0, 1, 0, 0], [1, 1, 0, 0]])
unique_morse_representations(["gin", "zen", "gig", "msg"])  # 2
```

- The two-sum functions return an empty list when no pair exists.
  `two_sum_brute` compares every value with each one after it and returns
  the first `[i, j]` with `i < j`.
- `find_kth_largest` counts duplicates separately and raises `ValueError`
  unless `1 <= k <= len(nums)`.
- `unique_morse_representations` accepts lowercase ASCII words only; any
  other character raises `ValueError`.

## Hashing

`BucketHashSet` and `BucketHashMap` hold integer keys in
`[0, KEY_LIMIT)` (one million) in buckets created on first use.

```python
from algokit.hashing import BucketHashSet, BucketHashMap

s = BucketHashSet()
s.add(1)
1 in s        # True
s.remove(1)
1 in s        # False

m = BucketHashMap()
m.put(2, 2)
m.get(2)      # 2
m.get(3)      # -1
```

`add` and `put` raise `ValueError` for a key outside the range. Membership
tests, `get` and `remove` treat such a key as absent. `BucketHashMap` is
meant for non-negative values: a missing key reads as `-1`.

## What it does not do

algokit is a library only: it installs no command-line program. Trees and
lists live in memory; nothing is stored to disk except what you write out
yourself, for example with the codecs.