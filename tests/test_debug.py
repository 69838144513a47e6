import io
import threading
from dataclasses import dataclass

from editgraph.debug import GridDebugger, NullDebugger


@dataclass(frozen=True)
class FakeResult:
    num_same: int = 0
    num_diff: int = 0

    def equal(self):
        return self.num_diff == 0

    def similar(self):
        return self.num_same + 1 >= self.num_diff


EQUAL = FakeResult(num_diff=0)
SIMILAR = FakeResult(num_diff=1)
DIFFERENT = FakeResult(num_diff=2)


def make_debugger(ansi=False):
    stream = io.StringIO()
    dbg = GridDebugger(stream=stream, update_delay=0, finish_delay=0, ansi=ansi)
    return dbg, stream


def test_null_debugger_returns_same_function():
    def f(ix, iy):
        return EQUAL

    assert NullDebugger().begin(3, 4, f, [], []) is f


def test_begin_writes_initial_grid():
    dbg, stream = make_debugger()
    dbg.begin(2, 1, lambda ix, iy: EQUAL, [], [])
    picture = dbg.render()
    assert stream.getvalue() == picture
    assert picture.startswith("┌─" + "──" * 2 + "┐\n")
    assert "│ " + "· " * 2 + "│\n" in picture
    dbg.finish()


def test_wrapped_function_marks_equal_cell_and_returns_result():
    dbg, _ = make_debugger()
    traced = dbg.begin(2, 1, lambda ix, iy: EQUAL, [], [])
    assert traced(0, 0) is EQUAL
    assert "│ \\ · │\n" in dbg.render()
    dbg.finish()


def test_wrapped_function_marks_similar_and_different():
    results = {(0, 0): SIMILAR, (1, 0): DIFFERENT}
    dbg, _ = make_debugger()
    traced = dbg.begin(2, 1, lambda ix, iy: results[(ix, iy)], [], [])
    assert traced(0, 0) is SIMILAR
    assert traced(1, 0) is DIFFERENT
    assert "│ X # │\n" in dbg.render()
    dbg.finish()


def test_cells_follow_coordinates():
    dbg, _ = make_debugger()
    traced = dbg.begin(1, 2, lambda ix, iy: DIFFERENT, [], [])
    traced(0, 1)
    rows = [line for line in dbg.render().splitlines() if line.startswith("│")]
    assert rows == ["│ · │", "│ # │"]
    dbg.finish()


def test_render_shows_paths_with_reverse_path_reversed():
    dbg, _ = make_debugger()
    dbg.begin(0, 0, lambda ix, iy: EQUAL, [0, 3], [1, 2])
    assert dbg.render().endswith("[.M|YX]\n\n")
    dbg.finish()


def test_render_reads_live_paths():
    fwd, rev = [], []
    dbg, _ = make_debugger()
    dbg.begin(1, 1, lambda ix, iy: EQUAL, fwd, rev)
    fwd.append(0)
    rev.append(1)
    assert dbg.render().endswith("[.|X]\n\n")
    dbg.finish()


def test_update_with_ansi_moves_cursor_back_over_picture():
    dbg, stream = make_debugger(ansi=True)
    dbg.begin(1, 1, lambda ix, iy: EQUAL, [], [])
    first = stream.getvalue()
    dbg.update()
    rest = stream.getvalue()[len(first):]
    lines = dbg.render().count("\n")
    assert rest == f"\x1b[{lines}A" + dbg.render()
    dbg.finish()


def test_update_without_ansi_only_redraws():
    dbg, stream = make_debugger(ansi=False)
    dbg.begin(1, 1, lambda ix, iy: EQUAL, [], [])
    dbg.update()
    assert stream.getvalue() == dbg.render() * 2
    assert "\x1b[" not in stream.getvalue()
    dbg.finish()


def test_finish_releases_debugger_for_next_search():
    dbg, _ = make_debugger()
    dbg.begin(1, 1, lambda ix, iy: EQUAL, [], [])
    dbg.finish()

    returned = []

    def second_search():
        traced = dbg.begin(1, 1, lambda ix, iy: SIMILAR, [], [])
        returned.append(traced(0, 0))
        dbg.finish()

    worker = threading.Thread(target=second_search, daemon=True)
    worker.start()
    worker.join(timeout=2)
    assert not worker.is_alive()
    assert returned == [SIMILAR]
    assert "│ X │\n" in dbg.render()


def test_default_stream_is_stdout(capsys):
    dbg = GridDebugger(update_delay=0, finish_delay=0, ansi=False)
    dbg.begin(1, 1, lambda ix, iy: EQUAL, [], [])
    dbg.finish()
    out = capsys.readouterr().out
    assert out == dbg.render() * 2