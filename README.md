# dslib

A handful of small container types:

- `dslib.singly_linked.SinglyLinkedList`: a singly linked list.
- `dslib.doubly_linked.DoublyLinkedList`: a doubly linked list with a tail
  pointer, so both ends are cheap to reach.
- `dslib.text.String`: a mutable string that supports concatenation, bounds
  checked indexing and explicit copies.
- `dslib.vector.Vector`: a growable array that tracks its own capacity and
  doubles it when full.

The package has no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Linked lists

Both list types take an optional iterable of initial items, kept in the order
given. They support the same operations:

```python
from dslib.singly_linked import SinglyLinkedList
from dslib.doubly_linked import DoublyLinkedList

items = SinglyLinkedList()
items.push_front(10)
items.push_front(20)
items.push_back(55)
items.push_front(30)
items.pop_front()      # 30
items.push_back(77)
items.remove(55)       # removes every element equal to 55

list(items)            # [20, 10, 77]
len(items)             # 3
items.empty()          # False
items.reverse()
list(items)            # [77, 10, 20]
print(items)           # 77 -> 10 -> 20 -> nullptr
```

`pop_front` and `pop_back` return the element they remove. Calling either on
an empty list raises `IndexError`. `str()` of a `DoublyLinkedList` joins the
elements with ` <-> ` instead of ` -> `. `DoublyLinkedList` also supports
`reversed()`, which walks the list from the back to the front without
changing it.

## String

```python
from dslib.text import String

greeting = String("Hello, World!")
copy = greeting.copy()
copy[7] = "C"
str(copy)              # "Hello, Corld!"
str(greeting)          # "Hello, World!" (the copy is independent)
len(copy)              # 13

joined = String("foo") + String("bar")
joined == String("foobar")   # True
joined == "foobar"           # True, plain str compares too
String("foo") + "baz"        # a plain str works on the right-hand side
String()                     # an empty string
```

A `String` can be built from a `str`, another `String` or nothing; anything
else raises `TypeError`. Indexing outside `0 <= index < len(s)` raises
`IndexError`; negative indices and slices are not accepted. Assigning anything
other than a single character raises `ValueError`. `String` objects are
mutable and therefore not hashable.

## Vector

```python
from dslib.vector import Vector

vec = Vector(int)
for value in range(10, 101, 10):
    vec.push_back(value)

vec.pop_back()         # 100
list(vec)              # [10, 20, ..., 90]
len(vec)               # 9
vec.capacity           # 16, since capacity doubles from 1
vec[0] = 5
```

`capacity` is a read-only property. `resize(new_capacity)` changes the
capacity and raises `ValueError` if the new capacity would be smaller than the
current length. Free slots are filled with values from the `default_factory`
given to the constructor, or `None` when there is none. `pop_back` on an empty
vector raises `IndexError`, as do out-of-range indices (negative indices are
not accepted). `copy()` returns an independent vector with the same contents
and capacity.

## Demos

Each module has a short demonstration that prints the results of a fixed
sequence of operations:

```
dslib-singly-demo
dslib-doubly-demo
dslib-string-demo
dslib-vector-demo
```

The demos take no options.