import pytest

from lang_tour.errors import UsageError
from lang_tour.options import OPTIONS, Action, InvocationRequest, parse_options


@pytest.mark.parametrize("args", [
    ["-h"],
    ["--help"],
    ["-v", "-h"],
    ["--version", "--help"],
    ["-h", "--version", "-v"],
])
def test_help_wins_over_other_flags(args):
    request = parse_options(args, "lang-tour")
    assert request.action is Action.HELP
    assert request.program == "lang-tour"


@pytest.mark.parametrize("args", [["-v"], ["--version"], ["-v", "--version"]])
def test_version_without_help(args):
    assert parse_options(args).action is Action.VERSION


def test_empty_args_run():
    assert parse_options([], "prog") == InvocationRequest(Action.RUN, "prog")


@pytest.mark.parametrize("token", ["--bogus", "-x", "extra", "--hel", "--versions"])
def test_unknown_token_is_usage_error(token):
    with pytest.raises(UsageError) as exc:
        parse_options(["-v", token])
    assert exc.value.token == token
    assert token in str(exc.value)


def test_unknown_token_reported_even_with_help():
    with pytest.raises(UsageError) as exc:
        parse_options(["--help", "--bogus"])
    assert exc.value.token == "--bogus"


@pytest.mark.parametrize("token", ["--help=yes", "-hx", "-vh1", "--", "-"])
def test_malformed_flag_names_the_token(token):
    with pytest.raises(UsageError) as exc:
        parse_options(["-h", token])
    assert exc.value.token == token
    assert token in str(exc.value)


def test_repeated_flags_are_idempotent():
    assert parse_options(["-h", "-h"], "p") == parse_options(["-h"], "p")
    assert parse_options(["-v", "-v"], "p") == parse_options(["-v"], "p")


def test_combined_short_flags():
    assert parse_options(["-hv"]).action is Action.HELP
    assert parse_options(["-vv"]).action is Action.VERSION


def test_parse_does_not_modify_args():
    args = ["-v"]
    parse_options(args)
    assert args == ["-v"]


def test_option_table():
    assert [(o.short, o.long) for o in OPTIONS] == [("h", "help"), ("v", "version")]
