import pytest

from zeus.reader.parser import read
from zeus.types.errors import GoSignal, ReturnFromSignal, ThrowSignal, ZeusError, ZeusTypeError
from zeus.types.symbol import Symbol


# -------------------------------
# catch / throw
# -------------------------------
@pytest.mark.parametrize(
    "source,expected",
    [
        ("(catch 'tag (throw 'tag 42))", 42),
        ("(catch 'tag 1 2 3)", 3),
        ("(catch 'tag)", []),
        ("(catch 'outer (catch 'inner (throw 'inner 10)))", 10),
        ("(catch 'outer (+ 1 (catch 'inner (throw 'outer 10))))", 10),
        ("(catch '(a 1) (throw (list 'a 1) 'structural))", Symbol("structural")),
        ("(catch :k (throw :k 5))", 5),
        ("(catch 1 (throw 1 'one))", Symbol("one")),
    ]
)
def test_catch_throw(itp, source, expected):
    assert itp.eval(source) == expected


def test_catch_tag_match_is_type_aware(itp):
    with pytest.raises(ZeusError, match="Uncaught throw for tag 1.0"):
        itp.eval("(catch 1 (throw 1.0 'x))")


def test_uncaught_throw_is_reported(itp):
    with pytest.raises(ZeusError, match="Uncaught throw for tag other"):
        itp.eval("(catch 'tag (throw 'other 1))")


def test_raw_throw_signal_reaches_evaluate(itp):
    with pytest.raises(ThrowSignal) as excinfo:
        itp.evaluate(read("(throw 'tag 7)"))
    assert excinfo.value.tag == Symbol("tag")
    assert excinfo.value.value == 7


def test_catch_does_not_swallow_errors(itp):
    with pytest.raises(ZeusError, match="Division by zero"):
        itp.eval("(catch 'tag (/ 1 0))")


def test_throw_unwinds_scopes(itp):
    assert itp.eval("(catch 'done (let ((x 1)) (let ((y 2)) (throw 'done (+ x y)))))") == 3
    assert itp.env.depth == 1


# -------------------------------
# unwind-protect
# -------------------------------
def test_unwind_protect_normal_path(itp, capsys):
    assert itp.eval('(unwind-protect 42 (print "cleanup"))') == 42
    assert capsys.readouterr().out == "cleanup"


def test_unwind_protect_thrown_path(itp, capsys):
    assert itp.eval("(catch 'tag (unwind-protect (throw 'tag 1) (print \"cleanup\")))") == 1
    assert capsys.readouterr().out == "cleanup"


def test_unwind_protect_runs_every_cleanup_on_error(itp, capsys):
    with pytest.raises(ZeusError, match="Division by zero"):
        itp.eval('(unwind-protect (/ 1 0) (print "a") (print "b"))')
    assert capsys.readouterr().out == "ab"


def test_unwind_protect_cleanup_error_takes_precedence(itp, capsys):
    with pytest.raises(ZeusTypeError):
        itp.eval("(catch 'tag (unwind-protect (throw 'tag 1) (car 5) (print \"after\")))")
    # Later cleanups still ran
    assert capsys.readouterr().out == "after"


def test_unwind_protect_first_cleanup_error_wins(itp):
    with pytest.raises(ZeusTypeError, match="car"):
        itp.eval("(unwind-protect 1 (car 5) (cdr 5))")


# -------------------------------
# block / return-from
# -------------------------------
@pytest.mark.parametrize(
    "source,expected",
    [
        ("(block done 1 2)", 2),
        ("(block done (return-from done 42) 99)", 42),
        ("(block done (return-from done))", []),
        ("(block outer (block inner (return-from outer 'out)) 'never)", Symbol("out")),
        ("(block b (+ 1 (block b (return-from b 10))))", 11),
        ("(block nil (return-from nil 5))", 5),
    ]
)
def test_block_return_from(itp, source, expected):
    assert itp.eval(source) == expected


def test_return_from_through_function_call(itp):
    itp.eval("(defun bail (v) (return-from search v))")
    assert itp.eval("(block search (bail 'found) 'not-found)") == Symbol("found")
    assert itp.env.depth == 1


def test_unhandled_return_from(itp):
    with pytest.raises(ZeusError, match="Unhandled return-from for block nowhere"):
        itp.eval("(block somewhere (return-from nowhere 1))")


def test_block_name_must_be_a_symbol(itp):
    with pytest.raises(ZeusTypeError):
        itp.eval("(block 1 2)")


# -------------------------------
# tagbody / go
# -------------------------------
def test_tagbody_bounded_loop(itp):
    source = """
    (let ((i 0) (acc ()))
      (tagbody
        top
        (define acc (cons i acc))
        (define i (+ i 1))
        (when (< i 5) (go top)))
      acc)
    """
    assert itp.eval(source) == [4, 3, 2, 1, 0]


def test_tagbody_skips_labels_and_returns_nil(itp, capsys):
    assert itp.eval('(tagbody a (print "x") b (print "y"))') == []
    assert capsys.readouterr().out == "xy"


def test_go_jumps_forward(itp, capsys):
    itp.eval('(tagbody (go skip) (print "no") skip (print "yes"))')
    assert capsys.readouterr().out == "yes"


def test_go_to_outer_tagbody(itp, capsys):
    itp.eval('(tagbody (tagbody (go out) (print "inner")) (print "middle") out (print "done"))')
    assert capsys.readouterr().out == "done"


def test_unhandled_go(itp):
    with pytest.raises(ZeusError, match="Unhandled go to label nowhere"):
        itp.eval("(tagbody a (go nowhere))")


def test_raw_signals_propagate_from_evaluate(itp):
    with pytest.raises(GoSignal):
        itp.evaluate(read("(go somewhere)"))
    with pytest.raises(ReturnFromSignal):
        itp.evaluate(read("(return-from somewhere 1)"))
