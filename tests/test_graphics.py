"""Tests for geometry, colors, spritesheets and the terminal canvas."""

import pytest
from rich.console import Console

from tessel.graphics import (
    Color,
    DrawContext,
    RecordingContext,
    Rect,
    Spritesheet,
    TerminalCanvas,
    Vector2,
    divceil,
    includes_all,
)


class TestHelpers:
    @pytest.mark.parametrize(
        "n, d, expected", [(16, 8, 2), (17, 8, 3), (1, 8, 1), (0, 8, 0), (7.5, 2.5, 3)]
    )
    def test_divceil(self, n, d, expected):
        assert divceil(n, d) == expected

    def test_includes_all(self):
        assert includes_all(["root", "map_view"], ["root"])
        assert includes_all(["root"], [])
        assert not includes_all(["root"], ["root", "gui_view"])

    def test_vector_addition_and_scale(self):
        assert Vector2(1, 2) + Vector2(3, 4) == Vector2(4, 6)
        assert Vector2(1, 2) + (1, 1) == Vector2(2, 3)
        assert Vector2(2, 3).scale(Vector2(8, 8)) == Vector2(16, 24)
        assert Vector2.zero() == Vector2(0, 0)

    def test_rect_translate_keeps_size(self):
        assert Rect(0, 0, 10, 20).translate(Vector2(3, 4)) == Rect(3, 4, 10, 20)

    def test_rect_contains(self):
        rect = Rect(0, 0, 8, 8)
        assert rect.contains(0, 0)
        assert rect.contains(7, 7)
        assert not rect.contains(8, 0)


class TestColor:
    def test_rgba_normalizes_channels(self):
        assert Color.rgba(255, 0, 51, 255) == Color(1.0, 0.0, 0.2, 1.0)

    def test_rgb_is_opaque(self):
        assert Color.rgb(0, 0, 0).a == 1.0

    def test_mono(self):
        gray = Color.mono(107)
        assert gray.r == gray.g == gray.b == pytest.approx(107 / 255)

    def test_to_hex(self):
        assert Color.rgb(255, 128, 0).to_hex() == "#ff8000"
        assert Color.mono(107).to_hex() == "#6b6b6b"


class TestSpritesheet:
    def test_frame_is_row_major(self):
        sheet = Spritesheet("world", 8, 8, columns=4, rows=4)
        assert sheet.frame(0) == Rect(0, 0, 8, 8)
        assert sheet.frame(5) == Rect(8, 8, 8, 8)

    def test_frames_are_cached(self):
        sheet = Spritesheet("world", 8, 8, columns=4, rows=4)
        assert sheet.frame(3) is sheet.frame(3)

    def test_out_of_range_frame(self):
        sheet = Spritesheet("world", 8, 8, columns=2, rows=2)
        with pytest.raises(IndexError):
            sheet.frame(4)

    def test_render_blits_through_context(self):
        ctx = RecordingContext()
        Spritesheet("world", 8, 8).render(ctx, 16, 8, 33)
        assert ctx.commands == [("sprite", (16, 8, "world", 33))]

    def test_invalid_cell_size(self):
        with pytest.raises(ValueError):
            Spritesheet("world", 0, 8)


class TestContexts:
    def test_both_contexts_satisfy_the_protocol(self):
        assert isinstance(RecordingContext(), DrawContext)
        assert isinstance(TerminalCanvas(2, 2), DrawContext)

    def test_recording_frames_and_paths(self):
        ctx = RecordingContext()
        with ctx.draw(10, 10, 1.0):
            with ctx.path():
                ctx.move_to(0, 0)
                ctx.line_to(5, 0)
                ctx.stroke()

        assert [op for op, _ in ctx.commands] == [
            "begin_frame",
            "begin_path",
            "move_to",
            "line_to",
            "stroke",
            "end_path",
            "end_frame",
        ]
        assert ctx.named("line_to") == [(5, 0)]

    def test_recording_clear(self):
        ctx = RecordingContext()
        ctx.fill()
        ctx.clear(Color.mono(1))
        assert ctx.commands == [("clear", (Color.mono(1),))]


class TestTerminalCanvas:
    def test_horizontal_and_vertical_lines_cross(self):
        canvas = TerminalCanvas(3, 3, scale=1)
        with canvas.path():
            canvas.move_to(0, 1)
            canvas.line_to(2, 1)
            canvas.move_to(1, 0)
            canvas.line_to(1, 2)
            canvas.stroke()

        assert canvas.rows() == [" │ ", "─┼─", " │ "]

    def test_single_cell_rect_outline(self):
        canvas = TerminalCanvas(2, 2, scale=8)
        with canvas.path():
            canvas.rect(9, 1, 6, 6)
            canvas.stroke()

        assert canvas.rows() == [" □", "  "]

    def test_box_outline(self):
        canvas = TerminalCanvas(3, 3, scale=1)
        with canvas.path():
            canvas.rect(0, 0, 3, 3)
            canvas.stroke()

        assert canvas.rows() == ["┌─┐", "│ │", "└─┘"]

    def test_fill_paints_background(self):
        canvas = TerminalCanvas(2, 1, scale=1)
        canvas.fill_color(Color.rgb(255, 0, 0))
        with canvas.path():
            canvas.rounded_box(0, 0, 1, 1, 2, 2, 2, 2)
            canvas.fill()

        assert canvas.cell(0, 0).bg == "#ff0000"
        assert canvas.cell(1, 0).bg is None

    def test_sprites_and_text(self):
        canvas = TerminalCanvas(4, 2, scale=8)
        canvas.sprite(8, 0, Spritesheet("world", 8, 8, glyphs="ab"), 3)
        canvas.text(0, 8, "hi!!!")

        assert canvas.rows() == [" b  ", "hi!!"]

    def test_drawing_outside_is_clipped(self):
        canvas = TerminalCanvas(1, 1, scale=1)
        canvas.text(-1, 0, "xyz")
        assert canvas.rows() == ["y"]

    def test_clear_resets_cells_and_background(self):
        canvas = TerminalCanvas(2, 1, scale=1)
        canvas.text(0, 0, "ab")
        canvas.clear(Color.mono(0))

        assert canvas.rows() == ["  "]
        assert canvas.cell(0, 0).bg == "#000000"

    def test_renders_with_rich(self):
        canvas = TerminalCanvas(3, 1, scale=1)
        canvas.text(0, 0, "abc")
        console = Console(record=True, width=20, color_system=None)

        console.print(canvas)

        assert "abc" in console.export_text()

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            TerminalCanvas(0, 3)
