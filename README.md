# civitree

This package has two small tools:

- **A city registry.** It keeps an ordered list of cities. Each city holds an ordered list of resident names. You can add and remove cities and residents, and you can list them.
- **A non-binary tree explorer.** It holds a tree of single-character nodes in numbered slots. Each node records its first son, its next brother and its parent. The explorer offers four traversals: pre-order, in-order, post-order and level-order. It can also search for a node, count nodes and leaves, find the level of a node and measure the depth of the tree.

Each tool has an interactive, numbered text menu. The menu text is in Indonesian.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command-line use

### City registry

```
civitree-registry [--max-cities N | --unlimited]
```

By default the registry holds at most 5 cities. Use `--max-cities N` to set a different limit. Use `--unlimited` to allow any number of cities.

The menu reads commands from standard input:

1. add a city
2. add a resident to a city
3. show every city with its residents
4. show the residents of one city
5. remove a resident
6. remove a city
7. quit

Names are read one per line. Any name longer than 49 characters is cut to 49 characters. A choice that is not a number is reported as invalid. The program ends when you choose 7 or when the input runs out.

### Tree explorer

```
civitree-tree
```

The explorer works on a built-in sample tree of ten nodes. Its root is `A`:

- `A` has the children `B` and `C`.
- `B` has the children `D` and `E`.
- `E` has the children `I` and `J`.
- `C` has the children `F`, `G` and `H`.

From the menu you can:

- traverse the tree in any of the four orders
- print each slot's links, with -1 for a missing link
- search for a node
- count the leaves
- ask for the level of a node (the root is level 0)
- get the depth of the tree
- compare two nodes by character code

Choice 11 quits.

## Library use

### City registry

```python
from civitree.registry import CityRegistry, CityNotFoundError

registry = CityRegistry(5)          # at most five cities; None for no limit
registry.add_city("Bandung")
registry.add_resident("Bandung", "Asep")
registry.add_resident("Bandung", "Budi")

print(registry.residents("Bandung"))   # ['Asep', 'Budi']
print(registry.render_all())

try:
    registry.remove_city("Jakarta")
except CityNotFoundError as exc:
    print(exc)
```

Each failure raises an exception derived from `RegistryError`:

- `CityNotFoundError`: no city has the given name.
- `ResidentNotFoundError`: the city has no resident with the given name.
- `RegistryFullError`: the registry is already at its limit.

A `CityRegistry` supports:

- `len()`
- iteration over its `City` objects
- `in` tests by city name
- `find(name)`, which returns the matching `City`

`remove_city` returns a `City` that holds the removed city's residents.

A `City` has:

- a `name` and a `residents` list
- `add_resident`, `remove_resident` and `clear`
- `render()`, which returns its listing text

`render_city(name)` and `render_all()` return the listing text that the menu prints.

### Non-binary tree

```python
from civitree.nbtree import create_sample_tree, max_info

tree = create_sample_tree()
print(tree.preorder())        # ['A', 'B', 'D', 'E', 'I', 'J', 'C', 'F', 'G', 'H']
print(tree.level_order())
print(tree.leaf_count(), tree.depth(), tree.level("J"))
print(tree.search("Z"))       # False
print(max_info("B", "J"))     # 'J'
```

You can also build your own tree:

1. Create a `NonBinaryTree(capacity)`.
2. Fill slots 1 to `capacity` with `set_node(index, info, first_son, next_brother, parent)`.

In `set_node`, `None` marks a missing link, and an empty `info` frees the slot. Other methods:

- `root()` returns the index of the first occupied slot without a parent.
- `is_empty()` tells whether the tree has a root.
- `count()` returns the number of occupied slots.
- `describe()` returns the slot report that the menu prints.

## What it does not do

- Neither tool saves anything. The registry lives only in memory and is lost when the program ends.
- The `civitree-tree` command always uses the built-in sample tree. It cannot load or edit a tree. To work with other trees, use `NonBinaryTree` from Python.