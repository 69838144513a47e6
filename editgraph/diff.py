"""Edit-scripts between two lists of symbols.

An edit-script is the sequence of operations that turns one list into another:
keeping a symbol, dropping one from X, taking one from Y, or replacing one with
a similar symbol. The number of operations other than keeping a symbol is the
Levenshtein distance.

The search here is greedy and favours speed over a minimal distance. Its exact
output may vary between runs unless a deterministic search is asked for.
"""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass
from typing import Callable, Iterable, NamedTuple, Optional

from editgraph.debug import NullDebugger


class EditType(enum.IntEnum):
    """A single operation within an edit-script."""

    IDENTITY = 0  # the symbol pair is identical in X and Y
    UNIQUE_X = 1  # the symbol exists only in X
    UNIQUE_Y = 2  # the symbol exists only in Y
    MODIFIED = 3  # the symbol pair is a modification of each other


_SYMBOLS = {
    EditType.IDENTITY: ".",
    EditType.UNIQUE_X: "X",
    EditType.UNIQUE_Y: "Y",
    EditType.MODIFIED: "M",
}


class EditStats(NamedTuple):
    """How many operations of each kind an edit-script holds."""

    identity: int
    unique_x: int
    unique_y: int
    modified: int


class EditScript(list):
    """The series of edits between two lists."""

    def __str__(self) -> str:
        """Render the script with ``.``, ``X``, ``Y`` and ``M`` characters."""
        try:
            return "".join(_SYMBOLS[edit] for edit in self)
        except (KeyError, TypeError):
            raise ValueError("invalid edit-type") from None

    def stats(self) -> EditStats:
        """Return a histogram of the edit operations."""
        counts = dict.fromkeys(EditType, 0)
        for edit in self:
            try:
                counts[EditType(edit)] += 1
            except ValueError:
                raise ValueError("invalid edit-type") from None
        return EditStats(
            counts[EditType.IDENTITY],
            counts[EditType.UNIQUE_X],
            counts[EditType.UNIQUE_Y],
            counts[EditType.MODIFIED],
        )

    def dist(self) -> int:
        """The Levenshtein distance; zero exactly when X and Y are equal."""
        return len(self) - self.stats().identity

    def len_x(self) -> int:
        """The length of list X."""
        return len(self) - self.stats().unique_y

    def len_y(self) -> int:
        """The length of list Y."""
        return len(self) - self.stats().unique_x


@dataclass(frozen=True)
class Result:
    """The outcome of comparing two symbols.

    ``num_same`` and ``num_diff`` count the sub-elements found equal and
    unequal.
    """

    num_same: int = 0
    num_diff: int = 0

    def equal(self) -> bool:
        """Whether the symbols are equal (which implies similar)."""
        return self.num_diff == 0

    def similar(self) -> bool:
        """Whether the symbols are close enough to be a modification.

        Binary comparisons, with one sub-element either same or different,
        always count as similar.
        """
        return self.num_same + 1 >= self.num_diff


def bool_result(b: bool) -> Result:
    """Return a Result that is either equal, or neither equal nor similar."""
    return Result(num_same=1) if b else Result(num_diff=2)


EqualFunc = Callable[[int, int], Result]

# Which direction the search starts in, chosen once per process so that
# callers do not come to depend on one particular output.
_START_FORWARD = random.Random().random() < 0.5


def _zigzag(x: int) -> int:
    """Map 0, 1, 2, 3, 4, ... to 0, -1, +1, -2, +2, ..."""
    if x & 1:
        x = ~x
    return x >> 1


class _Path:
    """An edit-script under construction and the point it has reached."""

    def __init__(self, direction: int, x: int, y: int, debugger) -> None:
        self.direction = direction
        self.x = x
        self.y = y
        self.es = EditScript()
        self._debugger = debugger

    def append(self, edit: EditType) -> None:
        self.es.append(edit)
        if edit in (EditType.IDENTITY, EditType.MODIFIED):
            self.x += self.direction
            self.y += self.direction
        elif edit is EditType.UNIQUE_X:
            self.x += self.direction
        elif edit is EditType.UNIQUE_Y:
            self.y += self.direction
        self._debugger.update()

    def connect(self, dx: int, dy: int, f: EqualFunc) -> None:
        """Append the edits needed to move this path to the point (dx, dy)."""
        if self.direction > 0:
            while dx > self.x and dy > self.y:
                r = f(self.x, self.y)
                if r.equal():
                    self.append(EditType.IDENTITY)
                elif r.similar():
                    self.append(EditType.MODIFIED)
                elif dx - self.x >= dy - self.y:
                    self.append(EditType.UNIQUE_X)
                else:
                    self.append(EditType.UNIQUE_Y)
            while dx > self.x:
                self.append(EditType.UNIQUE_X)
            while dy > self.y:
                self.append(EditType.UNIQUE_Y)
        else:
            while self.x > dx and self.y > dy:
                r = f(self.x - 1, self.y - 1)
                if r.equal():
                    self.append(EditType.IDENTITY)
                elif r.similar():
                    self.append(EditType.MODIFIED)
                elif self.y - dy >= self.x - dx:
                    self.append(EditType.UNIQUE_Y)
                else:
                    self.append(EditType.UNIQUE_X)
            while self.x > dx:
                self.append(EditType.UNIQUE_X)
            while self.y > dy:
                self.append(EditType.UNIQUE_Y)


def difference(
    nx: int,
    ny: int,
    f: EqualFunc,
    deterministic: bool = False,
    debugger=None,
) -> EditScript:
    """Return an edit-script between two lists of lengths ``nx`` and ``ny``.

    ``f(ix, iy)`` compares the symbols at those indexes and returns a Result.
    The script satisfies ``len_x() == nx`` and ``len_y() == ny``, and its
    distance is zero exactly when the lists are equal. It is not guaranteed
    to be minimal. With ``deterministic`` the search always begins from the
    front, so the output is the same on every run.
    """
    dbg = debugger if debugger is not None else NullDebugger()

    # A greedy, meet-in-the-middle walk of the edit-graph: alternately search
    # from the top-left and bottom-right corners along diagonals through the
    # frontier points, following matches as far as they go, until the two
    # frontiers cross.
    fwd = _Path(+1, 0, 0, dbg)
    rev = _Path(-1, nx, ny, dbg)
    ffx, ffy = fwd.x, fwd.y
    rfx, rfy = rev.x, rev.y

    # Bounds the cost of looking for matches; the longest run of mismatches
    # that can be bridged is about the square root of this.
    budget = 4 * (nx + ny)

    f = dbg.begin(nx, ny, f, fwd.es, rev.es)

    forward = deterministic or _START_FORWARD
    while ffx < rfx and ffy < rfy and budget > 0:
        stop1 = stop2 = False
        i = 0
        if forward:
            while not (stop1 and stop2) and budget > 0:
                z = _zigzag(i)
                px, py = ffx + z, ffy - z
                if px >= rev.x or py < fwd.y:
                    stop1 = True  # hit the top-right corner
                elif py >= rev.y or px < fwd.x:
                    stop2 = True  # hit the bottom-left corner
                elif f(px, py).equal():
                    fwd.connect(px, py, f)
                    fwd.append(EditType.IDENTITY)
                    while fwd.x < rev.x and fwd.y < rev.y:
                        if not f(fwd.x, fwd.y).equal():
                            break
                        fwd.append(EditType.IDENTITY)
                    ffx, ffy = fwd.x, fwd.y
                    stop1 = stop2 = True
                else:
                    budget -= 1
                dbg.update()
                i += 1
            if rev.x - ffx >= rev.y - ffy:
                ffx += 1
            else:
                ffy += 1
        else:
            while not (stop1 and stop2) and budget > 0:
                z = _zigzag(i)
                px, py = rfx - z, rfy + z
                if fwd.x >= px or rev.y < py:
                    stop1 = True  # hit the bottom-left corner
                elif fwd.y >= py or rev.x < px:
                    stop2 = True  # hit the top-right corner
                elif f(px - 1, py - 1).equal():
                    rev.connect(px, py, f)
                    rev.append(EditType.IDENTITY)
                    while fwd.x < rev.x and fwd.y < rev.y:
                        if not f(rev.x - 1, rev.y - 1).equal():
                            break
                        rev.append(EditType.IDENTITY)
                    rfx, rfy = rev.x, rev.y
                    stop1 = stop2 = True
                else:
                    budget -= 1
                dbg.update()
                i += 1
            if rfx - fwd.x >= rfy - fwd.y:
                rfx -= 1
            else:
                rfy -= 1
        forward = not forward

    # Join the two paths, then append the reverse path in forward order.
    fwd.connect(rev.x, rev.y, f)
    while rev.es:
        fwd.append(rev.es.pop())
    dbg.finish()
    return fwd.es