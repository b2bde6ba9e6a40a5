import re
import pytest

import datespan.validation as v
from datespan.errors import CodingError, InvalidArgumentError


def _null_msg(name):
    return f"Method argument: '{name}', error message: 'this argument can not be null'."


# -----------------------------
# NamedArgument
# -----------------------------
def test_named_argument_value_equality():
    assert v.NamedArgument("a", 1) == v.NamedArgument("a", 1)
    assert v.NamedArgument("a", 1) != v.NamedArgument("a", 2)
    assert v.NamedArgument("a", 1) != v.NamedArgument("b", 1)
    assert len({v.NamedArgument("a", 1), v.NamedArgument("a", 1)}) == 1


def test_named_argument_is_immutable():
    arg = v.NamedArgument("a", 1)
    with pytest.raises(AttributeError):
        arg.value = 2


@pytest.mark.parametrize(
    "arg,expected",
    [
        (v.NamedArgument("start", 5), "NamedArgument{name='start', value='5'}"),
        (v.NamedArgument("start", None), "NamedArgument{name='start', value='null'}"),
        (v.NamedArgument(None, None), "NamedArgument{name='null', value='null'}"),
    ],
)
def test_named_argument_str(arg, expected):
    assert str(arg) == expected


# -----------------------------
# check_args_not_none
# -----------------------------
def test_all_present_returns_none():
    assert v.check_args_not_none([v.NamedArgument("a", 1), v.NamedArgument("b", 0)]) is None


def test_falsy_values_are_not_none():
    v.check_args_not_none([v.NamedArgument("a", 0), v.NamedArgument("b", ""), v.NamedArgument("c", [])])


def test_reports_every_none_in_given_order():
    args = [
        v.NamedArgument("c", None),
        v.NamedArgument("b", 1),
        v.NamedArgument("a", None),
    ]
    with pytest.raises(InvalidArgumentError) as exc:
        v.check_args_not_none(args)

    assert exc.value.messages == (_null_msg("c"), _null_msg("a"))
    assert str(exc.value) == _null_msg("c") + "\n" + _null_msg("a") + "\n"


def test_duplicate_names_reported_once():
    args = [v.NamedArgument("a", None), v.NamedArgument("a", None)]
    with pytest.raises(InvalidArgumentError) as exc:
        v.check_args_not_none(args)
    assert exc.value.messages == (_null_msg("a"),)


def test_accepts_any_iterable():
    gen = (v.NamedArgument(n, None) for n in ("x", "y"))
    with pytest.raises(InvalidArgumentError) as exc:
        v.check_args_not_none(gen)
    assert len(exc.value.messages) == 2


@pytest.mark.parametrize(
    "named_args,message",
    [
        (None, "Collection 'named_args' can not be null."),
        ([], "Collection 'named_args' can not be empty."),
        (iter(()), "Collection 'named_args' can not be empty."),
    ],
)
def test_missing_argument_set_is_a_coding_error(named_args, message):
    with pytest.raises(CodingError, match=re.escape(message)) as exc:
        v.check_args_not_none(named_args)
    assert not isinstance(exc.value, InvalidArgumentError)


# -----------------------------
# raise helpers
# -----------------------------
def test_raise_invalid_args_joins_messages():
    with pytest.raises(InvalidArgumentError) as exc:
        v.raise_invalid_args({"first": None, "second": None})
    assert str(exc.value) == "first\nsecond\n"


@pytest.mark.parametrize(
    "errors,message",
    [
        (None, "Object 'errors' can not be null."),
        ([], "Collection 'errors' can not be empty."),
    ],
)
def test_raise_invalid_args_without_errors(errors, message):
    with pytest.raises(CodingError, match=re.escape(message)):
        v.raise_invalid_args(errors)


def test_raise_coding_error():
    with pytest.raises(CodingError, match="boom"):
        v.raise_coding_error("boom")
    with pytest.raises(CodingError, match=re.escape("Object 'message' can not be null.")):
        v.raise_coding_error(None)
