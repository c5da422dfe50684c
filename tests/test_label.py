"""Tests for layer_tree.content.label — MonospaceFont measurement of labels."""

from layer_tree.content import Graphable, Label, MonospaceFont, label_dimensions
from layer_tree.types import Vec2

FONT = MonospaceFont(char_width=0.5, line_height=1.0)


class TestLabelDimensions:
    def test_empty_label(self):
        assert label_dimensions("") == (0, 1)

    def test_single_line(self):
        assert label_dimensions("hello") == (5, 1)

    def test_multi_line_uses_longest(self):
        assert label_dimensions("ab\nabcd\nc") == (4, 3)


class TestLabel:
    def test_is_graphable(self):
        assert isinstance(Label("x"), Graphable)

    def test_measure_single_line(self):
        sized = Label("hello").set_text(FONT, None, None, Vec2(3.0, 4.0), 10.0)
        assert sized is not None
        assert sized.dimensions == Vec2(25.0, 10.0)
        assert sized.position == Vec2(3.0, 4.0)
        assert sized.content == "hello"
        assert sized.font is FONT
        assert sized.size == 10.0

    def test_measure_multi_line(self):
        sized = Label("ab\nabcd").set_text(FONT, None, None, Vec2(0.0, 0.0), 4.0)
        assert sized is not None
        assert sized.dimensions == Vec2(8.0, 8.0)

    def test_empty_label_keeps_one_line_height(self):
        sized = Label("").set_text(FONT, None, None, Vec2(0.0, 0.0), 4.0)
        assert sized is not None
        assert sized.dimensions == Vec2(0.0, 4.0)

    def test_unsupported_font(self):
        assert Label("hi").set_text("Helvetica", None, None, Vec2(0.0, 0.0), 10.0) is None

    def test_non_positive_size(self):
        assert Label("hi").set_text(FONT, None, None, Vec2(0.0, 0.0), 0.0) is None

    def test_max_width_exceeded(self):
        assert Label("hello").set_text(FONT, 24, None, Vec2(0.0, 0.0), 10.0) is None
        assert Label("hello").set_text(FONT, 25, None, Vec2(0.0, 0.0), 10.0) is not None

    def test_max_height_exceeded(self):
        assert Label("a\nb").set_text(FONT, None, 19, Vec2(0.0, 0.0), 10.0) is None
        assert Label("a\nb").set_text(FONT, None, 20, Vec2(0.0, 0.0), 10.0) is not None

    def test_links_returned_as_new_list(self):
        label = Label("x", links=("a", "b"))
        links = label.get_links()
        assert links == ["a", "b"]
        links.append("c")
        assert label.get_links() == ["a", "b"]

    def test_no_links_by_default(self):
        assert Label("x").get_links() == []
