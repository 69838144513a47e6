# editgraph

`editgraph` computes edit scripts. An edit script is the sequence of operations
that turns one list of symbols into another. The search is greedy and works
from both ends of the edit graph until the two sides meet. It favours speed
over optimality, so the scripts it returns are always valid but not always
minimal.

## Installing

```
pip install editgraph
```

To run the tests:

```
pip install "editgraph[test]"
pytest
```

## Computing a difference

`editgraph.diff.difference(nx, ny, f, deterministic=False, debugger=None)`
compares a list of length `nx` with a list of length `ny`. You do not pass the
lists themselves. You pass a function `f(ix, iy)` that compares element `ix`
of the first list with element `iy` of the second and returns a `Result`.

```python
from editgraph.diff import Result, bool_result, difference

x = "ABCABBA"
y = "CBABAC"

script = difference(len(x), len(y), lambda ix, iy: bool_result(x[ix] == y[iy]),
                    deterministic=True)
print(script)            # one character per edit, such as "X", "Y" or "."
print(script.dist())     # number of edits that are not identities
assert script.len_x() == len(x)
assert script.len_y() == len(y)
```

The returned `EditScript` is a list of `EditType` values:

| Edit type  | Character | Meaning                                   |
|------------|-----------|-------------------------------------------|
| `IDENTITY` | `.`       | the symbols in both lists are equal       |
| `UNIQUE_X` | `X`       | the symbol exists only in the first list  |
| `UNIQUE_Y` | `Y`       | the symbol exists only in the second list |
| `MODIFIED` | `M`       | the symbols are similar but not equal     |

`str(script)` renders the script with these characters. `script.stats()`
returns an `EditStats` tuple (`identity`, `unique_x`, `unique_y`, `modified`)
with the count of each kind of edit. `str()` and `stats()` raise `ValueError`
if the script holds something that is not an edit type.

### Similarity

A `Result` holds two counts, `num_same` and `num_diff`:

- `equal()` is true when `num_diff == 0`.
- `similar()` is true when `num_same + 1 >= num_diff`.

When a pair is similar but not equal, the script records it as `MODIFIED`.
Otherwise the script records a deletion and an insertion.

`bool_result(True)` returns `Result(num_same=1)`, which is equal.
`bool_result(False)` returns `Result(num_diff=2)`, which is neither equal nor
similar.

```python
def compare(ix, iy):
    a, b = x[ix], y[iy]
    if a == b:
        return Result(num_diff=0)   # equal
    if a.upper() == b.upper():
        return Result(num_diff=1)   # similar
    return Result(num_diff=2)       # different
```

### Determinism

The search starts either from the front or from the back of the lists. The
starting side is chosen at random once per process, so the same inputs can
give different scripts from one run to the next. Pass `deterministic=True` to
always start from the front.

## Watching the search

`difference` accepts a `debugger`. If you pass none, it uses
`editgraph.debug.NullDebugger`, which draws nothing. It only records whether a
search is running (`active`), the size of the graph (`size`) and how many
progress updates it received (`updates`).

`editgraph.debug.GridDebugger(stream=None, update_delay=0.1, finish_delay=0.5, ansi=True)`
draws the edit graph on `stream`, or on standard output if no stream is given.
It redraws the graph after each step of the search. The grid uses these marks:

| Mark | Meaning                      |
|------|------------------------------|
| `·`  | the pair is still unexplored |
| `\`  | the pair is equal            |
| `X`  | the pair is similar          |
| `#`  | the pair is different        |

Below the grid it prints the forward and reverse paths found so far, as
`[forward|reverse]`.

When `ansi` is true, each redraw first moves the cursor back up over the
previous picture. `render()` returns the current picture as a string.

A single `GridDebugger` draws only one search at a time. It is locked from
`begin` until `finish`.

```python
import io
from editgraph.debug import GridDebugger

out = io.StringIO()
dbg = GridDebugger(out, update_delay=0, finish_delay=0, ansi=False)
difference(len(x), len(y), compare, deterministic=True, debugger=dbg)
```

## Inspecting callables

`editgraph.function` helps classify callables that are used as options.

- `is_type(fn, ft)` reports whether `fn` has the shape given by the `FuncType` member `ft`:
  - `TB` is `f(T) -> bool`.
  - `TTB` is `f(T, T) -> bool`.
  - `TRB` is `f(T, R) -> bool`.
  - `TIB` is `f(T, I) -> bool`, where `T` is assignable to `I`.
  - `TR` is `f(T) -> R`.

  `FuncType` also has the aliases `EQUAL`, `EQUAL_ASSIGNABLE`, `TRANSFORMER`, `VALUE_FILTER`, `LESS`, `VALUE_PREDICATE` and `KEY_VALUE_PREDICATE`.

  A parameter or return value without an annotation matches any shape. Callables that take `*args` are rejected.
- `name_of(fn)` returns a short qualified name such as `module.Class.method`. It keeps only the last component of the module name and drops `<locals>` markers. If it finds no name, it returns `<unknown>`.

## What this package does not do

`editgraph` is a library only. It has no command-line tool. It only computes
edit scripts from a comparison function that you supply. It does not compare
arbitrary values structurally, and it does not produce formatted diff reports.