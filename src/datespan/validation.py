# validation.py
import logging
from typing import Any, Dict, Iterable, NamedTuple, Optional

from .errors import CodingError, InvalidArgumentError

logger = logging.getLogger(__name__)

METHOD_ARG_ERROR_FORMAT = "Method argument: '{}', error message: '{}'."
NOT_NONE_DETAIL = "this argument can not be null"

CODING_ERROR_NULL_FORMAT = "Object '{}' can not be null."
CODING_ERROR_NULL_COLLECTION_FORMAT = "Collection '{}' can not be null."
CODING_ERROR_EMPTY_COLLECTION_FORMAT = "Collection '{}' can not be empty."


class NamedArgument(NamedTuple):
    """A method argument as seen by the validator: its public name and value."""

    name: str
    value: Any

    def __str__(self) -> str:
        name = "null" if self.name is None else self.name
        value = "null" if self.value is None else self.value
        return f"NamedArgument{{name='{name}', value='{value}'}}"


def raise_coding_error(message: Optional[str]) -> None:
    if message is None:
        raise CodingError(CODING_ERROR_NULL_FORMAT.format("message"))
    raise CodingError(message)


def raise_invalid_args(errors: Optional[Iterable[str]]) -> None:
    """
    Raise InvalidArgumentError built from the collected messages.
    An absent or empty collection means the caller has nothing to report,
    which is a bug in the caller.
    """
    if errors is None:
        raise_coding_error(CODING_ERROR_NULL_FORMAT.format("errors"))
    errors = list(errors)
    if not errors:
        raise_coding_error(CODING_ERROR_EMPTY_COLLECTION_FORMAT.format("errors"))
    raise InvalidArgumentError(errors)


def check_args_not_none(named_args: Optional[Iterable[NamedArgument]]) -> None:
    """
    Check every named argument for None and report all of them at once.

    Messages are collected in the order the arguments were given; a repeated
    (name, message) pair is reported once.
    """
    if named_args is None:
        raise_coding_error(CODING_ERROR_NULL_COLLECTION_FORMAT.format("named_args"))
    named_args = list(named_args)
    if not named_args:
        raise_coding_error(CODING_ERROR_EMPTY_COLLECTION_FORMAT.format("named_args"))

    # dict keeps insertion order and drops duplicates
    errors: Dict[str, None] = {}
    for arg in named_args:
        if arg.value is None:
            errors[METHOD_ARG_ERROR_FORMAT.format(arg.name, NOT_NONE_DETAIL)] = None

    if errors:
        logger.debug("rejected %d of %d argument(s)", len(errors), len(named_args))
        raise_invalid_args(errors)
