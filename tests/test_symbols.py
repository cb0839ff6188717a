import pytest

from zeus.interpreter import Interpreter
from zeus.types.errors import ZeusArityError, ZeusInvalidSymbol, ZeusTypeError, ZeusUnboundSymbol
from zeus.types.symbol import GenSym, Keyword, Symbol


def test_gensym_basic_sequential():
    itp = Interpreter()
    s1 = itp.eval("(gensym)")
    s2 = itp.eval("(gensym)")

    assert isinstance(s1, GenSym)
    assert isinstance(s2, GenSym)
    # In a fresh interpreter, the first two should be G1 and G2
    assert s1.name == "G1"
    assert s2.name == "G2"
    assert s1 != s2


def test_gensym_with_string_prefix():
    itp = Interpreter()
    out = itp.eval('(gensym "tmp")')
    assert out.name == "tmp1"
    # The counter is shared across prefixes
    assert itp.eval("(gensym)").name == "G2"


def test_gensym_with_counter_reset():
    itp = Interpreter()
    itp.eval("(gensym)")
    assert itp.eval("(gensym 42)").name == "G42"
    assert itp.eval("(gensym)").name == "G43"


def test_gensym_is_uninterned():
    itp = Interpreter()
    g = itp.eval("(gensym 1)")
    again = itp.eval("(gensym 1)")
    assert g.name == again.name
    assert g != again
    assert g != Symbol("G1")


def test_gensym_errors():
    itp = Interpreter()
    # Too many args
    with pytest.raises(ZeusArityError):
        itp.eval('(gensym "a" "b")')
    # A symbol is not a prefix
    with pytest.raises(ZeusTypeError):
        itp.eval("(gensym 't)")
    with pytest.raises(ZeusTypeError):
        itp.eval("(gensym -1)")


def test_gensym_as_a_binding_name():
    itp = Interpreter()
    itp.eval("(define g (gensym))")
    g = itp.eval("g")
    # A fresh symbol works as a lambda parameter
    assert itp.evaluate([[Symbol("lambda"), [g], g], 7]) == 7


def test_get_and_put(itp):
    assert itp.eval("(put 'robot 'color 'red)") == Symbol("red")
    assert itp.eval("(get 'robot 'color)") == Symbol("red")
    assert itp.eval("(get 'robot 'size)") == []
    assert itp.eval("(get 'other 'color)") == []


def test_properties_survive_scopes(itp):
    itp.eval("(let ((x 1)) (put 'cfg 'depth x))")
    assert itp.eval("(get 'cfg 'depth)") == 1


def test_keyword_names_share_the_property_store(itp):
    itp.eval("(put :thing :weight 10)")
    assert itp.eval("(get 'thing 'weight)") == 10


def test_symbol_plist(itp):
    itp.eval("(put 'p 'x 1)")
    itp.eval("(put 'p 'y 2)")
    assert itp.eval("(symbol-plist 'p)") == [Keyword("x"), 1, Keyword("y"), 2]
    assert itp.eval("(symbol-plist 'empty)") == []


@pytest.mark.parametrize(
    "source,error",
    [
        ("(get 'a)", ZeusArityError),
        ("(put 'a 'b)", ZeusArityError),
        ('(get "a" \'b)', ZeusTypeError),
        ("(put 'a 1 2)", ZeusTypeError),
        ("(symbol-plist 5)", ZeusTypeError),
    ]
)
def test_property_errors(itp, source, error):
    with pytest.raises(error):
        itp.eval(source)


# -------------------------------
# Keywords and builtin names
# -------------------------------
def test_keywords_are_self_evaluating(itp):
    assert itp.eval(":ready") == Keyword("ready")
    assert itp.eval("(list :a :b)") == [Keyword("a"), Keyword("b")]
    assert itp.eval(":a") != Symbol("a")


def test_keywords_cannot_be_bound(itp):
    with pytest.raises(ZeusInvalidSymbol):
        itp.eval("(define :x 1)")
    with pytest.raises(ZeusInvalidSymbol):
        itp.eval("(let ((:x 1)) 1)")
    with pytest.raises(ZeusInvalidSymbol):
        itp.eval("((lambda (:x) 1) 2)")


def test_builtin_names_evaluate_to_their_symbol(itp):
    assert itp.eval("+") == Symbol("+")
    assert itp.eval("car") == Symbol("car")
    assert itp.eval("t") == Symbol("t")
    assert itp.eval("nil") == []


def test_builtin_can_be_shadowed_locally(itp):
    assert itp.eval("(let ((list 5)) list)") == 5


def test_unbound_symbol(itp):
    with pytest.raises(ZeusUnboundSymbol, match="Undefined variable: ghost"):
        itp.eval("(+ ghost 1)")
