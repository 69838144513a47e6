"""Optional visualisation of the edit-graph search.

A debugger is handed to the difference search. It may wrap the equality
function, and it is told whenever the search makes progress and when it ends.
``NullDebugger`` draws nothing and only counts what it is told. ``GridDebugger``
draws the edit-graph as a grid of symbols and redraws it as the search
explores it:

* ``·`` an unexplored node
* ``\\`` the two symbols are equal
* ``X`` the two symbols are similar but not equal
* ``#`` the two symbols are different

Under the grid, the forward and reverse paths found so far are shown as
``[forward|reverse]``, with identity, unique-X, unique-Y and modified edits
drawn as ``.``, ``X``, ``Y`` and ``M``.
"""

from __future__ import annotations

import sys
import threading
import time
from typing import Any, Callable, List, Optional, Sequence, TextIO

# Characters for Identity, UniqueX, UniqueY and Modified, in that order.
_EDIT_SYMBOLS = ".XYM"

_UNEXPLORED = "·"


def _render_script(path: Sequence[Any]) -> str:
    return "".join(_EDIT_SYMBOLS[int(edit)] for edit in path)


class NullDebugger:
    """A debugger that draws nothing and leaves the equality function as is.

    It keeps a tally of the search: whether one is running, the size of its
    edit-graph and how many progress updates it reported.
    """

    def __init__(self) -> None:
        self.active = False
        self.size = (0, 0)
        self.updates = 0

    def begin(self, nx, ny, f, fwd_path, rev_path):
        """Note the start of a search and return ``f`` unchanged."""
        self.active = True
        self.size = (nx, ny)
        self.updates = 0
        return f

    def update(self):
        """Count one step of progress."""
        self.updates += 1

    def finish(self):
        """Note the end of the search."""
        self.active = False


class GridDebugger:
    """Draws the edit-graph search on a text stream as it runs.

    ``begin`` holds a lock that ``finish`` releases, so searches sharing one
    debugger are drawn one at a time.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        update_delay: float = 0.1,
        finish_delay: float = 0.5,
        ansi: bool = True,
    ) -> None:
        self.stream = stream
        self.update_delay = update_delay
        self.finish_delay = finish_delay
        self.ansi = ansi
        self._lock = threading.Lock()
        self._cells: List[List[str]] = []
        self._nx = 0
        self._fwd_path: Sequence[Any] = ()
        self._rev_path: Sequence[Any] = ()
        self._lines = 0

    def begin(self, nx, ny, f, fwd_path, rev_path):
        """Start drawing a search over an ``nx`` by ``ny`` edit-graph.

        ``fwd_path`` and ``rev_path`` are the live edit-scripts of the search;
        they are read again on every redraw. Returns a wrapper around ``f``
        that records each comparison in the grid.
        """
        self._lock.acquire()
        self._fwd_path, self._rev_path = fwd_path, rev_path
        self._nx = nx
        self._cells = [[_UNEXPLORED] * nx for _ in range(ny)]
        picture = self.render()
        self._lines = picture.count("\n")
        self._write(picture)

        def traced(ix: int, iy: int):
            result = f(ix, iy)
            if result.equal():
                mark = "\\"
            elif result.similar():
                mark = "X"
            else:
                mark = "#"
            self._cells[iy][ix] = mark
            return result

        return traced

    def update(self):
        """Redraw the grid after a short pause."""
        self._redraw(self.update_delay)

    def finish(self):
        """Redraw the grid a final time and release the debugger."""
        try:
            self._redraw(self.finish_delay)
        finally:
            self._lock.release()

    def render(self) -> str:
        """Return the current picture of the grid and the two paths."""
        top = "┌─" + "──" * self._nx + "┐\n"
        bottom = "└─" + "──" * self._nx + "┘\n"
        rows = "".join("│ " + "".join(c + " " for c in row) + "│\n" for row in self._cells)
        forward = _render_script(self._fwd_path)
        reverse = _render_script(list(reversed(self._rev_path)))
        return f"{top}{rows}{bottom}[{forward}|{reverse}]\n\n"

    def _target(self) -> TextIO:
        return self.stream if self.stream is not None else sys.stdout

    def _write(self, text: str) -> None:
        out = self._target()
        out.write(text)
        out.flush()

    def _redraw(self, delay: float) -> None:
        if self.ansi:
            self._write(f"\x1b[{self._lines}A")
        self._write(self.render())
        if delay > 0:
            time.sleep(delay)


Debugger = Callable[..., Any]