import pytest

from fractscope.cli import UsageError, parse_args, usage_text
from fractscope.state import FractalState


def test_mandelbrot():
    state = FractalState(is_julia=True)
    result = parse_args(["mandelbrot"], state)
    assert result is state
    assert state.name == "mandelbrot"
    assert state.is_julia is False


def test_julia_sets_constant():
    state = FractalState()
    parse_args(["julia", "-0.7", "0.27015"], state)
    assert state.name == "julia"
    assert state.is_julia is True
    assert state.c.real == pytest.approx(-0.7)
    assert state.c.imag == pytest.approx(0.27015)


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["mandelbrot", "extra"],
        ["julia"],
        ["julia", "1.0"],
        ["julia", "1.0", "2.0", "3.0"],
        ["burningship"],
        ["Mandelbrot"],
    ],
)
def test_invalid_arguments_raise(argv):
    with pytest.raises(UsageError):
        parse_args(argv, FractalState())


def test_error_leaves_state_untouched():
    state = FractalState()
    before = state.params()
    with pytest.raises(UsageError):
        parse_args(["julia", "1.0"], state)
    assert state.params() == before
    assert state.name == "unspecified"


def test_error_message_is_usage():
    with pytest.raises(UsageError) as info:
        parse_args([], FractalState())
    assert str(info.value) == usage_text()


def test_usage_lists_fractals():
    text = usage_text()
    assert "mandelbrot" in text
    assert "julia <real_const> <imag_const>" in text