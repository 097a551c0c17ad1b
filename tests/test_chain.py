import pytest

from tictacflow.chain import And, State, Store, Then, Until


def add2(a):
    return a + 2


def test_then():
    result = (
        State("Call 1")
        .then(lambda arg: 6)
        .then(lambda arg: "Call 3")
        .dbg()
    )
    assert result == "Call 3"


def test_then_passes_values_along():
    seen = []

    def first(arg):
        seen.append(arg)
        return 6

    def second(arg):
        seen.append(arg)
        return "Call 3"

    assert State("Call 1").then(first).then(second).call() == "Call 3"
    assert seen == ["Call 1", 6]


def test_and():
    result = (
        State(0)
        .then(add2)
        .and_(lambda _: 0)
        .and_(lambda i: "test")
        .then(len)
        .and_(lambda _: 0)
        .dbg()
    )
    assert result == 0


def test_and_receives_previous_result():
    seen = []

    def record(value):
        seen.append(value)
        return "test"

    assert State(0).then(add2).and_(record).then(len).dbg() == 4
    assert seen == [2]


def test_then_from_zero():
    assert State(0).then(lambda a: a + 43).call() == 43


def test_chain_types():
    chain = State(0).then(add2).and_(add2)
    assert isinstance(chain, And)
    assert isinstance(chain.prev, Then)
    assert chain.call() == 4


def test_and_requires_transformation():
    with pytest.raises(TypeError):
        State(0).and_(add2)


def test_until_requires_transformation():
    with pytest.raises(TypeError):
        State(0).until(lambda a: a)


def test_play_around():
    assert State(3).then(lambda a: a + 5).until(lambda a: a if a > 5 else None).dbg() == 8


def test_until_reuses_same_input():
    inputs = []

    def step(x):
        inputs.append(x)
        return len(inputs)

    chain = State(0).then(step).until(lambda a: a if a == 4 else None)
    assert isinstance(chain, Until)
    assert chain.dbg() == 4
    assert inputs == [0, 0, 0, 0]


def test_until_can_be_extended():
    assert State(1).then(add2).until(lambda a: a).then(add2).call() == 5


def test_store_call():
    calls = []
    Store(calls.append).call("x")
    assert calls == ["x"]


def test_store_call_twice():
    calls = []
    assert Store(calls.append).call_twice(7) is None
    assert calls == [7, 7]