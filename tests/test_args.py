import pytest

from fsearch.args import (
    ARG_SPECS,
    C_GREEN,
    C_RED,
    C_RESET,
    ArgGroup,
    ArgumentError,
    Args,
    HelpRequested,
    colorize_flag,
    format_usage,
    parse_args,
)

VERSION = "v1.0.0"


def test_defaults_path_is_current_directory():
    args = parse_args([], VERSION)
    assert args.path == "."
    assert args.name is None
    assert args.iname is None


def test_positional_path_last_wins():
    args = parse_args(["/tmp", "/var"], VERSION)
    assert args.path == "/var"


def test_name_flag_compiles_pattern():
    args = parse_args(["-name", r"\.go$", "src"], VERSION)
    assert args.name.pattern == r"\.go$"
    assert args.name.search("main.go")
    assert args.path == "src"


def test_iname_flag_compiles_exclusion_pattern():
    args = parse_args(["-iname", "^test"], VERSION)
    assert args.iname.pattern == "^test"
    assert args.name is None


@pytest.mark.parametrize("flag", ["-name", "-iname"])
def test_missing_value(flag):
    with pytest.raises(ArgumentError) as info:
        parse_args([flag], VERSION)
    assert "missing value" in str(info.value)
    assert colorize_flag(flag) in str(info.value)


@pytest.mark.parametrize("flag", ["-name", "-iname"])
def test_invalid_regex(flag):
    with pytest.raises(ArgumentError) as info:
        parse_args([flag, "("], VERSION)
    assert colorize_flag(flag) in info.value.detail


def test_unknown_flag():
    with pytest.raises(ArgumentError) as info:
        parse_args(["-x"], VERSION)
    assert info.value.detail == "unknown flag: " + colorize_flag("-x")


def test_error_string_prefix():
    with pytest.raises(ArgumentError) as info:
        parse_args(["--bogus"], VERSION)
    assert str(info.value).startswith(C_RED + "error" + C_RESET + ": ")


def test_help_raises_help_requested():
    with pytest.raises(HelpRequested):
        parse_args(["somewhere", "-help", "-unknown"], VERSION)


def test_empty_version_is_error():
    with pytest.raises(ArgumentError):
        parse_args([], "")


def test_colorize_flag():
    assert colorize_flag("-name") == C_GREEN + "-name" + C_RESET


def test_args_dataclass_defaults():
    assert Args() == Args(name=None, iname=None, path=".")


def test_usage_contains_version_and_prog():
    text = format_usage("fs", VERSION)
    assert VERSION in text
    assert "Usage: fs PATH [...OPTIONS] [...FILTERS]" in text
    assert text.endswith("\n")


def test_usage_group_order():
    lines = format_usage("fs", VERSION).splitlines()
    headings = [line for line in lines if line in {g.value for g in ArgGroup}]
    assert headings == ["POSITIONAL", "FILTERS", "OPTIONS"]


def test_usage_lists_every_spec_with_aligned_columns():
    text = format_usage("fs", VERSION)
    flag_lines = [line for line in text.splitlines() if line.startswith("  " + C_GREEN)]
    assert len(flag_lines) == len(ARG_SPECS)
    for spec in ARG_SPECS:
        assert any(spec.desc in line and spec.name in line for line in flag_lines)
    columns = {line.index(C_RESET) for line in flag_lines}
    assert len(columns) == 1