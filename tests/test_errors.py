import pickle

import biglimb as bl


def test_errors_survive_pickle():
    errors = [
        bl.InvalidFormat("12x", 2),
        bl.InvalidFormat("", 0, "expected a decimal digit"),
        bl.InvalidDigit(10),
        bl.DivisionByZero(),
        bl.DivisionByZero("custom"),
    ]
    for err in errors:
        clone = pickle.loads(pickle.dumps(err))
        assert type(clone) is type(err)
        assert clone.args == err.args
        assert str(clone) == str(err)


def test_error_messages_and_attributes():
    err = bl.InvalidFormat("12x", 2)
    assert (err.text, err.position, err.reason) == ("12x", 2, "invalid character")
    assert str(err) == "invalid character at position 2 in '12x'"
    assert bl.InvalidDigit(10).digit == 10
    assert str(bl.DivisionByZero()) == "scalar division by zero"
    assert isinstance(bl.DivisionByZero(), ZeroDivisionError)
