"""
test_path.py
------------
Path accumulator semantics: shape commands, pen commands and sub-path state.
"""

import pytest

from flatpath.core import types as fp

P = fp.Point


def test_shapes_are_appended_in_order(canvas):
    canvas.line(P(0, 0), P(1, 1))
    canvas.rectangle(P(0, 0), P(2, 2))
    canvas.ellipse(P(0, 0), P(4, 2))
    canvas.roundrect(P(0, 0), P(8, 8), 1, 2)
    assert [type(e) for e in canvas.path] == [fp.Line, fp.Rect, fp.Ellipse, fp.RoundRect]
    assert canvas.path[2].alpha_end == pytest.approx(fp.TWO_PI)


def test_begin_path_discards_everything(canvas):
    canvas.rectangle(P(0, 0), P(2, 2))
    canvas.move_to(P(5, 5))
    canvas.begin_path()
    assert len(canvas.path) == 0
    assert canvas.current_subpath() is None


# ---------------------------------------------------------------------------
# Pen commands
# ---------------------------------------------------------------------------

def test_move_to_line_to(canvas):
    canvas.move_to(P(0, 0))
    canvas.line_to(P(10, 0))
    canvas.line_to(P(10, 10))
    (sp,) = canvas.path
    assert list(sp) == [P(0, 0), P(10, 0), P(10, 10)]
    assert not sp.closed


def test_repeated_move_to_replaces_lone_point(canvas):
    canvas.move_to(P(0, 0))
    canvas.move_to(P(3, 4))
    assert len(canvas.path) == 1
    assert list(canvas.path[0]) == [P(3, 4)]


def test_move_to_after_segments_starts_new_subpath(canvas):
    canvas.move_to(P(0, 0))
    canvas.line_to(P(1, 0))
    canvas.move_to(P(5, 5))
    assert len(canvas.path) == 2
    assert canvas.current_subpath() is canvas.path[1]


@pytest.mark.parametrize("command, args", [
    ("line_to", (P(1, 1),)),
    ("arc_to", (P(1, 1), P(2, 0), 1.0)),
    ("close_path", ()),
])
def test_pen_commands_need_a_subpath(canvas, command, args):
    getattr(canvas, command)(*args)
    assert len(canvas.path) == 0


def test_pen_commands_after_a_shape_are_ignored(canvas):
    canvas.move_to(P(0, 0))
    canvas.rectangle(P(0, 0), P(2, 2))
    canvas.line_to(P(9, 9))
    assert canvas.current_subpath() is None
    assert list(canvas.path[0]) == [P(0, 0)]


def test_close_path(canvas):
    canvas.move_to(P(0, 0))
    canvas.line_to(P(10, 0))
    canvas.line_to(P(10, 10))
    canvas.close_path()
    sp = canvas.path[0]
    assert sp.closed
    assert sp[-1] == sp[0]
    assert len(sp) == 4

    # closed sub-paths are no longer extended
    canvas.line_to(P(20, 20))
    canvas.close_path()
    assert len(sp) == 4


# ---------------------------------------------------------------------------
# arc_to
# ---------------------------------------------------------------------------

def test_arc_to_appends_fillet(canvas):
    canvas.move_to(P(0, 10))
    canvas.arc_to(P(0, 0), P(10, 0), 5)
    sp = canvas.path[0]
    assert sp[0] == P(0, 10)
    assert len(sp) == 6
    assert sp[1].is_close(P(0, 5), 1e-9)
    assert sp[-1].is_close(P(5, 0), 1e-9)


def test_arc_to_continues_from_fillet_end(canvas):
    canvas.move_to(P(0, 10))
    canvas.arc_to(P(0, 0), P(10, 0), 5)
    canvas.line_to(P(10, 0))
    assert canvas.path[0][-1] == P(10, 0)


@pytest.mark.parametrize("p1, p2, radius", [
    (P(10, 0), P(20, 0), 5),    # collinear
    (P(10, 0), P(10, 10), 0),   # zero radius
    (P(10, 0), P(10, 0), 5),    # p1 == p2
])
def test_degenerate_arc_to_draws_line_to_p1(canvas, p1, p2, radius):
    canvas.move_to(P(0, 0))
    canvas.arc_to(p1, p2, radius)
    assert list(canvas.path[0]) == [P(0, 0), p1]


def test_degenerate_arc_to_at_current_point_adds_nothing(canvas):
    canvas.move_to(P(0, 0))
    canvas.arc_to(P(0, 0), P(10, 10), 5)
    assert list(canvas.path[0]) == [P(0, 0)]
