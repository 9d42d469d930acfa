from io import StringIO

from jobreport.utils import indent, pad_zeros, should_use_color


def test_pad_zeros_pads_to_width():
    assert pad_zeros(5, 2) == "05"
    assert pad_zeros(0, 2) == "00"


def test_pad_zeros_keeps_wider_numbers():
    assert pad_zeros(123, 2) == "123"


def test_indent_prefixes_every_line():
    assert indent("a\nb", 2) == "  a\n  b"
    assert indent("a\n", 4) == "    a\n"


def test_indent_empty_text():
    assert indent("", 2) == ""


class _Tty(StringIO):
    def isatty(self) -> bool:
        return True


def test_should_use_color_detects_terminal():
    assert should_use_color(_Tty()) is True
    assert should_use_color(StringIO()) is False
    assert should_use_color(object()) is False


def test_should_use_color_closed_stream():
    s = StringIO()
    s.close()
    assert should_use_color(s) is False


def test_indent_leaves_blank_lines_alone():
    assert indent("a\n\nb", 2) == "  a\n\n  b"
    assert indent("a\n   \nb", 2) == "  a\n   \n  b"
