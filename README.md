# treequery

Search nested Python data — mappings, lists, tuples and dataclass
instances — with a filter predicate, and get back the first match, all
matches, or simply whether anything matched.

Every value in the tree is visited as a `Node` (from `treequery.node`)
with three fields: `key`, its own key; `full_key`, the path from the
root; and `value`. Mapping keys and dataclass field names join the path
with a dot (`user.name`), sequence items append an index in brackets
(`users[1]`), and the two combine (`users[1].name`).

What counts as a branch:

- any `Mapping` gives one child per entry, its key turned into a string
  (`True`/`False` become `"true"`/`"false"`, `None` becomes `"<nil>"`);
- any `Sequence` other than `str`, `bytes`, `bytearray` and `memoryview`
  gives one child per item;
- a dataclass instance gives one child per field whose name does not
  start with an underscore.

Everything else, strings and bytes included, is a leaf. `Node.children()`
yields the direct children of a node, and `root_node(tree)` returns the
node for the whole tree, with empty keys.

## Finding one value

```python
from treequery.filters import full_key_filter
from treequery.find import find, find_string

data = {
    "user": {"name": "Ephemeral", "age": 30},
    "active": True,
}

find_string(data, full_key_filter("user.name"))  # "Ephemeral"
find(data, full_key_filter("user"))              # {"name": "Ephemeral", "age": 30}
```

The search is depth first and stops at the first node the predicate
accepts. The root itself is only tested when the tree is a leaf.
`find_node` returns the matching `Node` instead of its value.

The typed variants — `find_string`, `find_bool`, `find_int`, `find_uint`
and `find_float` — only consider values of that kind, so a predicate on
the key alone is enough to pick out, say, the integer stored under
`"age"`.

## Collecting every match

```python
from treequery.filters import key_filter, none_filter
from treequery.traverse import traverse_string

data = {
    "users": [
        {"name": "Alice"},
        {"name": "Bob"},
    ],
}

traverse_string(data, key_filter("name"))  # ["Alice", "Bob"]
traverse_string(data, none_filter)         # every string in the tree
```

`traverse` returns the values of all accepted nodes in depth-first order;
once a node is accepted, its children are not searched further.
`iter_nodes` yields the accepted `Node` objects lazily. The typed variants
`traverse_string`, `traverse_bool`, `traverse_int`, `traverse_uint` and
`traverse_float` mirror the `find_*` family.

## Testing for a match

```python
from treequery.filters import key_filter
from treequery.has import has, has_int

data = {"users": [{"name": "Alice"}, {"name": "Bob"}]}

has(data, key_filter("name"))      # True
has_int(data, key_filter("name"))  # False: the names are strings
```

`has`, `has_string`, `has_bool`, `has_int`, `has_uint` and `has_float`
return `False` when the tree is `None` instead of raising.

## Filters

`treequery.filters` provides ready-made predicates and combinators:

- `none_filter` accepts every node.
- `key_filter(key)` matches a node by its own key.
- `full_key_filter(full_key)` matches a node by its full path.
- `filter_string`, `filter_bool`, `filter_int`, `filter_uint` and
  `filter_float` wrap a predicate so that it only sees values of one kind.

Any callable taking a `Node` and returning a bool works as a predicate.

Booleans are never treated as integers. Unsigned integers are told apart
from signed ones by wrapping them in `UInt` from `treequery.node`, an
`int` subclass that raises `ValueError` for values outside 0 to 2**64 - 1.

```python
from treequery.filters import none_filter
from treequery.node import UInt
from treequery.traverse import traverse_int, traverse_uint

record = {"id": UInt(1001), "age": 30, "active": True}

traverse_uint(record, none_filter)  # [UInt(1001)]
traverse_int(record, none_filter)   # [30]
```

## Errors

The `find*` and `traverse*` functions raise `NilTreeError` when the tree
is `None` and `NotFoundError` when nothing matched. `iter_nodes` raises
`NilTreeError` for a `None` tree and simply yields nothing when nothing
matches. Both errors derive from `TreeError`, all in `treequery.filters`;
`NilTreeError` is also a `ValueError` and `NotFoundError` a `LookupError`.

## What it does not do

treequery is a library only: it has no command-line tool and no path
expression language — selection is done with predicates. Attributes of
ordinary objects are not walked; only mappings, sequences and dataclass
instances have children.