import io
import re

from bazaarquest.console import clear_line, set_color, set_cursor


def _codes(sequence):
    match = re.fullmatch(r"\x1b\[([0-9;]+)m", sequence)
    assert match is not None
    return [int(code) for code in match.group(1).split(";")]


def test_cursor_origin():
    buffer = io.StringIO()
    set_cursor(0, 0, buffer)
    assert buffer.getvalue() == "\x1b[1;1H"


def test_cursor_row_then_column():
    buffer = io.StringIO()
    set_cursor(4, 2, buffer)
    assert buffer.getvalue() == "\x1b[3;5H"


def test_white_is_plain_white():
    buffer = io.StringIO()
    set_color(7, buffer)
    assert buffer.getvalue() == "\x1b[0;37m"


def test_intensity_bit_selects_bright_variant():
    for base in range(8):
        normal_buffer = io.StringIO()
        bright_buffer = io.StringIO()
        set_color(base, normal_buffer)
        set_color(base + 8, bright_buffer)
        normal = _codes(normal_buffer.getvalue())[-1]
        bright = _codes(bright_buffer.getvalue())[-1]
        assert 30 <= normal <= 37
        assert 90 <= bright <= 97
        assert bright - 90 == normal - 30


def test_distinct_foregrounds_give_distinct_codes():
    codes = set()
    for color in range(16):
        buffer = io.StringIO()
        set_color(color, buffer)
        codes.add(_codes(buffer.getvalue())[-1])
    assert len(codes) == 16


def test_background_adds_a_code():
    buffer = io.StringIO()
    set_color(0x17, buffer)
    codes = _codes(buffer.getvalue())
    assert len(codes) == 3
    assert 40 <= codes[2] <= 47


def test_clear_line_blanks_and_returns():
    cursor_buffer = io.StringIO()
    set_cursor(0, 5, cursor_buffer)
    cursor = cursor_buffer.getvalue()

    line_buffer = io.StringIO()
    clear_line(5, line_buffer)
    out = line_buffer.getvalue()

    assert out.startswith(cursor)
    assert out.endswith(cursor)
    middle = out[len(cursor):-len(cursor)]
    assert middle.strip(" ") == ""
    assert len(middle) == 120