import io

import pytest

from lemin.output import (
    putchar,
    putchar_to,
    putendl,
    putendl_to,
    putnbr,
    putnbr_to,
    putstr,
    putstr_to,
)


def test_putchar_to_writes_character():
    stream = io.StringIO()
    putchar_to("L", stream)
    putchar_to("-", stream)
    assert stream.getvalue() == "L-"


def test_putchar_to_accepts_code():
    stream = io.StringIO()
    putchar_to(ord("x"), stream)
    assert stream.getvalue() == "x"


def test_putchar_rejects_long_text():
    with pytest.raises(ValueError):
        putchar_to("ab", io.StringIO())


def test_putchar_stdout(capsys):
    putchar("\n")
    assert capsys.readouterr().out == "\n"


def test_putstr_to_and_none():
    stream = io.StringIO()
    putstr_to("room", stream)
    putstr_to(None, stream)
    assert stream.getvalue() == "room"


def test_putstr_stdout(capsys):
    putstr("hello")
    putstr(None)
    assert capsys.readouterr().out == "hello"


def test_putendl_to_appends_newline():
    stream = io.StringIO()
    putendl_to("ERROR", stream)
    assert stream.getvalue() == "ERROR\n"


def test_putendl_none_writes_nothing(capsys):
    putendl(None)
    putendl("##start")
    assert capsys.readouterr().out == "##start\n"


@pytest.mark.parametrize("number", [0, 7, 42, -42, 2147483647, -2147483648])
def test_putnbr_to_round_trip(number):
    stream = io.StringIO()
    putnbr_to(number, stream)
    assert int(stream.getvalue()) == number


def test_putnbr_negative_has_single_minus(capsys):
    putnbr(-2147483648)
    assert capsys.readouterr().out == "-2147483648"


def test_putnbr_rejects_non_integer():
    with pytest.raises(TypeError):
        putnbr_to("12", io.StringIO())