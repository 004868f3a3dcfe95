import copy
import pickle

import pytest

from richerr.errors import (
    FORBIDDEN,
    GENERIC,
    INVALID_ARGS,
    NOT_FOUND,
    UNAVAILABLE,
    Code,
    CodeAlreadyRegisteredError,
    CodeRegistry,
    Fundamental,
    RichError,
    WithMessage,
    new,
    new_friendly,
    new_friendly_fix,
    register_code,
    root_cause,
    wrap,
    wrap_friendly,
    wrap_friendly_fix,
)

FIX = "are you sure you're logged in?"


def test_new_with_message() -> None:
    err = new_friendly(GENERIC, "machine error", "message")

    assert err.friendly() == "error: message"
    assert err.error() == "error: machine error"
    assert str(err) == "error: machine error"


def test_new_has_no_friendly_message() -> None:
    err = new(GENERIC, "so bad")

    assert err.friendly() == ""
    assert err.fix == ""
    assert err.data == ()
    assert isinstance(err.cause, Fundamental)


def test_wrap_friendly_lists_data() -> None:
    def find(record_id: int) -> None:
        raise LookupError("not found")

    try:
        find(1)
    except LookupError as exc:
        err = wrap_friendly(NOT_FOUND, exc, "", "couldn't find data with the id", 1)

    assert err.friendly() == "missing: couldn't find data with the id 1."
    assert err.error() == "missing: : not found"


def test_chain_unwraps_to_plain_error() -> None:
    val = "a"
    a = new(GENERIC, "so bad")
    b = wrap(INVALID_ARGS, a, val)
    c = wrap_friendly_fix(
        FORBIDDEN,
        b,
        "you're not allowed access to the value",
        "please try a different value",
        val,
    )

    root = root_cause(c)
    assert not isinstance(root, RichError)
    assert root is a.cause
    assert c.code == FORBIDDEN
    assert b.error() == "arguments: a: error: so bad"


def test_friendly_with_data_and_fix() -> None:
    err = new_friendly_fix(
        FORBIDDEN,
        "forbidden",
        "you don't have access to the following things:",
        FIX,
        "apples",
        "oranges",
    )

    assert err.fix == FIX
    assert err.friendly() == (
        "auth: you don't have access to the following things: apples, oranges. " + FIX
    )


def test_wrap_friendly_fix_with_data() -> None:
    err = wrap_friendly_fix(
        FORBIDDEN,
        PermissionError("denied"),
        "forbidden",
        "you don't have access to the following things:",
        FIX,
        "apples",
        "oranges",
    )

    assert err.code == FORBIDDEN
    assert err.fix == FIX
    assert err.friendly() == (
        "auth: you don't have access to the following things: apples, oranges. " + FIX
    )
    assert err.error() == "auth: forbidden: denied"


def test_fix_without_friendly_template() -> None:
    err = new_friendly_fix(UNAVAILABLE, "db down", "", "try again later")

    assert err.friendly() == "unavailable:  try again later"


def test_friendly_without_data_or_fix() -> None:
    err = new_friendly(NOT_FOUND, "no row", "nothing here")

    assert err.friendly() == "missing: nothing here"


def test_data_values_render_with_str() -> None:
    class Item:
        def __str__(self) -> str:
            return "item-7"

    err = new_friendly(NOT_FOUND, "lookup", "missing values:", 3, Item(), 1.5)

    assert err.friendly() == "missing: missing values: 3, item-7, 1.5."
    assert err.data[0] == 3


def test_custom_code_uses_registered_label() -> None:
    no_database = Code(100)
    register_code(no_database, 504, "database")

    err = new_friendly(no_database, "connection refused", "the database is down")

    assert err.http_status() == 504
    assert err.error() == "database: connection refused"
    assert err.friendly() == "database: the database is down"


def test_unregistered_code_renders_default_label() -> None:
    err = new(Code(-1), "odd")

    assert err.label() == "error"
    assert err.http_status() == 500
    assert err.error() == "error: odd"


def test_rendering_against_isolated_registry() -> None:
    registry = CodeRegistry()
    registry.register(NOT_FOUND, 410, "gone")
    err = new_friendly(NOT_FOUND, "deleted", "the page was removed")

    assert err.error(registry) == "gone: deleted"
    assert err.friendly(registry) == "gone: the page was removed"
    assert err.http_status(registry) == 410
    assert err.error(CodeRegistry()) == "error: deleted"


def test_wrap_keeps_original_error() -> None:
    original = KeyError("id")
    err = wrap(NOT_FOUND, original, "loading user", 42)

    assert isinstance(err.cause, WithMessage)
    assert err.cause.cause is original
    assert err.__cause__ is err.cause
    assert err.data == (42,)
    assert root_cause(err) is original


@pytest.mark.parametrize(
    ("constructor", "args"),
    [
        (wrap, ("message",)),
        (wrap_friendly, ("message", "friendly")),
        (wrap_friendly_fix, ("message", "friendly", "fix")),
    ],
)
def test_wrap_none_fails_fast(constructor, args) -> None:
    with pytest.raises(ValueError):
        constructor(GENERIC, None, *args)


def test_direct_construction_requires_cause() -> None:
    with pytest.raises(ValueError):
        RichError(code=GENERIC, cause=None)  # type: ignore[arg-type]


def test_code_is_normalized() -> None:
    err = new(6, "plain int")

    assert type(err.code) is Code
    assert err.code == NOT_FOUND


def test_rich_error_can_be_raised() -> None:
    with pytest.raises(RichError) as exc_info:
        raise new_friendly(NOT_FOUND, "missing row", "no such record", "r1")

    assert exc_info.value.friendly() == "missing: no such record r1."
    assert exc_info.value.code == NOT_FOUND


def test_copy_keeps_every_field() -> None:
    err = new_friendly_fix(FORBIDDEN, "forbidden", "no access to:", FIX, "apples")

    copied = copy.copy(err)

    assert copied is not err
    assert copied.cause is err.cause
    assert copied.code == FORBIDDEN
    assert copied.fix == FIX
    assert copied.data == ("apples",)
    assert copied.friendly() == err.friendly()


def test_pickle_round_trip_of_wrapped_error() -> None:
    err = wrap_friendly(NOT_FOUND, KeyError("id"), "loading", "no such user", 7)

    restored = pickle.loads(pickle.dumps(err))

    assert type(restored) is RichError
    assert restored.error() == "missing: loading: 'id'"
    assert restored.friendly() == "missing: no such user 7."
    assert isinstance(restored.cause, WithMessage)
    assert restored.cause.capture_point == err.cause.capture_point
    assert restored.__cause__ is restored.cause
    assert isinstance(root_cause(restored), KeyError)


def test_pickle_keeps_registration_error_type() -> None:
    with pytest.raises(CodeAlreadyRegisteredError) as exc_info:
        register_code(FORBIDDEN, 200, "forbidden")

    restored = pickle.loads(pickle.dumps(exc_info.value))

    assert type(restored) is CodeAlreadyRegisteredError
    assert restored.data == (FORBIDDEN,)
    assert restored.error() == "arguments: already registered"
