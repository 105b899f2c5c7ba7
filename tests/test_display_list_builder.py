"""
test_display_list_builder.py
----------------------------
The recording Surface: color stamping, empty batches, paint callback.
"""

import logging

from flatpath.core import types as fp
from flatpath.core.display_list_builder import DisplayListBuilder

P = fp.Point


def test_default_display_list():
    b = DisplayListBuilder()
    assert isinstance(b.display_list, fp.DisplayList)
    assert b.color == fp.BLACK


def test_color_is_captured_at_submission(builder, red):
    builder.set_color(red)
    builder.draw_filled_rect(0, 0, 1, 1)
    builder.set_color(fp.WHITE)
    builder.draw_line_strip([P(0, 0), P(1, 1)])
    assert builder.display_list[0].color == red
    assert builder.display_list[1].color == fp.WHITE


def test_empty_batches_are_dropped(builder):
    builder.draw_lines([])
    builder.draw_line_strip([P(0, 0)])
    builder.draw_filled_triangles([])
    builder.draw_filled_triangle_strip([P(0, 0), P(1, 0)])
    assert builder.display_list == []


def test_strip_triangles():
    strip = fp.FilledTriangleStrip(fp.BLACK, [P(0, 0), P(0, 1), P(1, 0), P(1, 1)])
    assert strip.triangles() == [fp.Triangle(P(0, 0), P(0, 1), P(1, 0)),
                                 fp.Triangle(P(0, 1), P(1, 0), P(1, 1))]


def test_clear_resets_recording(builder, red):
    builder.draw_filled_rect(0, 0, 1, 1)
    builder.set_color(red)
    builder.clear()
    assert builder.display_list == [fp.Clear(red)]
    assert builder.display_list.width == 200


def test_paint_callback_sees_each_element():
    seen = []
    b = DisplayListBuilder(on_paint_callback=seen.append)
    b.draw_filled_rect(0, 0, 2, 2)
    b.draw_lines([fp.Segment(P(0, 0), P(1, 0))])
    assert seen == list(b.display_list)


def test_failing_paint_callback_is_logged(caplog):
    def broken(_element):
        raise RuntimeError("viewer gone")

    b = DisplayListBuilder(on_paint_callback=broken)
    with caplog.at_level(logging.ERROR, logger="flatpath.core.display_list_builder"):
        b.draw_filled_rect(0, 0, 2, 2)

    assert len(b.display_list) == 1
    assert "paint callback failed for FilledRect" in caplog.text
