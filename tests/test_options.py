"""Tests for option declarations and token matching."""

import pytest
from pydantic import ValidationError

from cmdspec.errors import DeclarationError
from cmdspec.options import (
    SCALAR_KINDS,
    CommandSpec,
    OptionKind,
    arg,
    command,
    flag,
    int32,
    lit,
    path,
    rest,
)


def _noop(*_values: object) -> None:
    return None


def test_key_is_first_word_of_pattern() -> None:
    option = int32("-n <int>", _noop)
    assert option.key == "-n"
    assert option.kind == OptionKind.INT32


def test_help_lines_are_kept_in_order() -> None:
    option = flag("-v", _noop, "first", "second")
    assert option.help_lines == ("first", "second")


def test_empty_pattern_is_rejected() -> None:
    with pytest.raises(DeclarationError):
        flag("", _noop)


def test_blank_pattern_is_rejected() -> None:
    with pytest.raises(DeclarationError, match="blank"):
        flag("   ", _noop)


def test_non_callable_callback_is_rejected() -> None:
    with pytest.raises(DeclarationError):
        flag("-v", "not callable")  # type: ignore[arg-type]


def test_invalid_path_regex_is_rejected() -> None:
    with pytest.raises(DeclarationError, match="invalid path pattern"):
        path("[unclosed", _noop)


def test_empty_command_name_is_rejected() -> None:
    with pytest.raises(DeclarationError):
        command("", [])


def test_option_is_frozen() -> None:
    option = flag("-v", _noop)
    with pytest.raises(ValidationError):
        option.pattern = "-q"  # type: ignore[misc]


def test_scalar_options_match_key_exactly() -> None:
    option = arg("--name <string>", _noop)
    assert option.matches("--name")
    assert not option.matches("--name=x")
    assert not option.matches("--nam")


def test_literal_matches_exact_token() -> None:
    option = lit("build", _noop)
    assert option.matches("build")
    assert not option.matches("builds")


def test_placeholder_literal_is_catch_all() -> None:
    option = lit("<command>", _noop)
    assert option.is_placeholder
    assert option.matches("anything")
    assert option.matches("-x")


def test_path_regex_must_match_whole_token() -> None:
    option = path(r".+\.txt", _noop)
    assert option.matches("notes.txt")
    assert not option.matches("notes.txt.bak")


def test_placeholder_path_skips_option_like_tokens() -> None:
    option = path("<file>", _noop)
    assert option.matches("a.txt")
    assert not option.matches("-v")


def test_placeholder_is_decided_by_key_not_whole_pattern() -> None:
    literal = lit("<command> [args]", _noop)
    file_path = path("<file> (repeatable)", _noop)

    assert literal.is_placeholder
    assert literal.matches("build")
    assert file_path.is_placeholder
    assert file_path.matches("a.txt")


def test_placeholder_path_rejects_empty_token() -> None:
    option = path("<file>", _noop)
    assert not option.matches("")


def test_scalar_kinds_are_the_value_taking_kinds() -> None:
    assert SCALAR_KINDS == {
        OptionKind.ARG,
        OptionKind.PATH_ARG,
        OptionKind.INT32,
        OptionKind.INT64,
        OptionKind.REAL,
    }


def test_rest_with_dash_key_matches_only_that_token() -> None:
    option = rest("-- <args...>", _noop)
    assert option.matches("--")
    assert not option.matches("x")


def test_rest_without_dash_key_matches_anything() -> None:
    option = rest("files...", _noop)
    assert option.matches("a.txt")
    assert option.matches("-weird")


def test_find_option_uses_declaration_order() -> None:
    specific = lit("help", _noop)
    catch_all = rest("words...", _noop)
    spec = command("tool", [specific, catch_all])

    assert spec.find_option("help") is specific
    assert spec.find_option("other") is catch_all


def test_find_option_returns_none_without_match() -> None:
    spec = command("tool", [flag("-v", _noop)])
    assert spec.find_option("-z") is None


def test_command_spec_holds_options_as_tuple() -> None:
    spec = command("tool", [flag("-v", _noop)])
    assert isinstance(spec, CommandSpec)
    assert isinstance(spec.options, tuple)
