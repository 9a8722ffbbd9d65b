from hypothesis import given
from hypothesis.strategies import none, booleans, text, integers, one_of

from luie.result import Ok
from luie.errors import LazyError, UninitializedError


values = one_of(none(), booleans(), text(), integers())


@given(values)
def test_ok_is_present(v):
    r = Ok(v)
    assert r.value == v
    assert r == Ok(v)


def test_uninitialized_error():
    e = UninitializedError()
    assert isinstance(e, LazyError)
    assert isinstance(e, TypeError)
    assert str(e) == "Lazy async value is not initialized yet"
    assert e.args == ("Lazy async value is not initialized yet",)
