import pytest

from zeus.types.errors import ZeusArityError, ZeusDivisionByZero, ZeusError, ZeusTypeError
from zeus.types.symbol import T


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(- 10 3 2)", 5),
        ("(* 2 3 4)", 24),
        ("(/ 12 3)", 4),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (+ 20 10) (* 2 5))", 3),
        ("(- (+ 10 5) (* 2 3))", 9),
        ("(* 1 2 3 4 5 6)", 720),
        ("(+ -1 5 -3)", 1),
        ("(- -10 -5)", -5),
        ("(- 7)", -7),
        ("(* -2 3)", -6),
        ("(/ -12 3)", -4),
        ("(+)", 0),
        ("(*)", 1),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),  # 1 + 2*(7*4)
        ("(/ (* (+ 8 2) 5) (- 20 10))", 5),
    ]
)
def test_integer_arithmetic_stays_exact(itp, source, expected):
    result = itp.eval(source)
    assert result == expected
    assert type(result) is int


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2.5 3)", 6.5),
        ("(/ 10 4)", 2.5),
        ("(/ 1 3)", 1 / 3),
        ("(/ 4)", 0.25),
        ("(* 2 0.5)", 1.0),
        ("(- 1.5)", -1.5),
        ("(+ 1/2 1/2)", 1.0),
        ("(* 2 1/4)", 0.5),
    ]
)
def test_mixed_arithmetic_promotes_to_float(itp, source, expected):
    result = itp.eval(source)
    assert result == pytest.approx(expected)
    assert type(result) is float


@pytest.mark.parametrize("source", ["(/ 10 0)", "(/ 0)", "(/ 1 2 0)", "(/ 1.5 0.0)"])
def test_division_by_zero(itp, source):
    with pytest.raises(ZeusDivisionByZero, match="Division by zero"):
        itp.eval(source)


@pytest.mark.parametrize(
    "source,error",
    [
        ('(+ 1 "a")', ZeusTypeError),
        ("(- :k)", ZeusTypeError),
        ("(-)", ZeusArityError),
        ("(/)", ZeusArityError),
        ("(< 1)", ZeusArityError),
        ("(< 1 'a)", ZeusTypeError),
        ("(=)", ZeusArityError),
    ]
)
def test_arithmetic_errors(itp, source, error):
    with pytest.raises(error):
        itp.eval(source)


def test_integer_overflow_is_an_error(itp):
    with pytest.raises(ZeusError, match="Integer overflow"):
        itp.eval("(* 9223372036854775807 2)")
    with pytest.raises(ZeusError, match="Integer overflow"):
        itp.eval("(- -9223372036854775807 2)")


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(< 1 2 3)", T),
        ("(< 1 3 2)", []),
        ("(<= 1 1 2)", T),
        ("(> 3 2 1)", T),
        ("(> 3 3)", []),
        ("(>= 3 3 1)", T),
        ("(< 1 2.5)", T),
        ("(< 1/2 1)", T),
        ("(= 1 1 1)", T),
        ("(= 1 1.0)", T),
        ("(= 1/2 0.5)", T),
        ("(= 1 2)", []),
        ("(= (+ 0.1 0.2) 0.3)", T),
        ("(= 0.00000000000000000001 0.00000000000000000002)", []),
        ("(/= 0.00000000000000000001 0.00000000000000000002)", T),
        ("(< 0.00000000000000000001 0.00000000000000000002)", T),
        ("(= :a :a)", T),
        ("(= :a :b)", []),
        ('(= "x" "x")', T),
        ("(= (list 1 2) (list 1.0 2))", T),
        ("(/= 1 2 3)", T),
        ("(/= 1 2 1)", []),
        ("(/= 1 1)", []),
    ]
)
def test_comparisons(itp, source, expected):
    assert itp.eval(source) == expected
