"""Command-line argument parsing and usage text."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Iterable, Optional, Pattern

C_RED = "\x1b[31m"
C_GREEN = "\x1b[32m"
C_YELLOW = "\x1b[33m"
C_BLUE = "\x1b[34m"
C_MAGENTA = "\x1b[35m"
C_CYAN = "\x1b[36m"
C_RESET = "\x1b[0m"
C_LINE1 = "\x1b[38;2;203;166;247m"
C_LINE2 = "\x1b[38;2;213;159;226m"
C_LINE3 = "\x1b[38;2;223;152;207m"
C_LINE4 = "\x1b[38;2;232;146;189m"
C_LINE5 = "\x1b[38;2;243;139;167m"
C_USAGE = "\x1b[38;2;190;190;190m"

MISSING_VALUE = "missing value"
_DESC_OFFSET = "  "
_NAME_PADDING = 4


def colorize_flag(arg: str) -> str:
    """Wrap a flag name in the colour used for flags."""
    return C_GREEN + arg + C_RESET


class ArgumentError(Exception):
    """Raised when the command line cannot be parsed."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return C_RED + "error" + C_RESET + ": " + self.detail


class HelpRequested(Exception):
    """Raised when the help flag is given; the caller shows usage and exits."""


class ArgGroup(enum.Enum):
    FILTERS = "FILTERS"
    OPTIONS = "OPTIONS"
    POSITIONAL = "POSITIONAL"


@dataclass(frozen=True)
class ArgSpec:
    """Description of one command-line argument."""

    group: ArgGroup
    name: str
    desc: str


NAME_SPEC = ArgSpec(ArgGroup.FILTERS, "-name", "filter file names by regex matches")
INAME_SPEC = ArgSpec(ArgGroup.FILTERS, "-iname", "exclude files which names matches this regex")
PATH_SPEC = ArgSpec(ArgGroup.POSITIONAL, "PATH", "start walk from this path")
HELP_SPEC = ArgSpec(ArgGroup.OPTIONS, "-help", "show this help and quit")

ARG_SPECS = (NAME_SPEC, INAME_SPEC, PATH_SPEC, HELP_SPEC)

_GROUP_ORDER = (ArgGroup.POSITIONAL, ArgGroup.FILTERS, ArgGroup.OPTIONS)


@dataclass
class Args:
    """Parsed command-line arguments."""

    name: Optional[Pattern[str]] = None
    iname: Optional[Pattern[str]] = None
    path: str = "."


def _compile(flag: str, value: Optional[str]) -> Pattern[str]:
    if value is None:
        raise ArgumentError(f"parsing {colorize_flag(flag)}: {MISSING_VALUE}")
    try:
        return re.compile(value)
    except re.error as exc:
        raise ArgumentError(f"parsing {colorize_flag(flag)}: {exc}") from exc


def parse_args(argv: Iterable[str], version: str) -> Args:
    """Parse arguments (without the program name) into an :class:`Args`."""
    if not version:
        raise ArgumentError(
            "version is not set: build this project with "
            + C_YELLOW
            + "a release version"
            + C_RESET
        )

    args = Args()
    tokens = iter(argv)
    for arg in tokens:
        if arg == NAME_SPEC.name:
            args.name = _compile(arg, next(tokens, None))
        elif arg == INAME_SPEC.name:
            args.iname = _compile(arg, next(tokens, None))
        elif arg == HELP_SPEC.name:
            raise HelpRequested()
        elif arg.startswith("-"):
            raise ArgumentError("unknown flag: " + colorize_flag(arg))
        else:
            args.path = arg
    return args


def _logo(version: str) -> str:
    return (
        C_LINE1 + "    dMMMMMP .dMMMb " + C_RESET
        + "  dMMMMMP .aMMMb  dMMMMb  .aMMMb  dMP dMP\n" + C_LINE2
        + "   dMP     dMP\" VP" + C_RESET
        + " dMP     dMP\"dMP dMP.dMP dMP\"VMP dMP dMP\n" + C_LINE3
        + "  dMMMP    VMMMb" + C_RESET
        + "  dMMMP   dMMMMMP dMMMMK\" dMP     dMMMMMP\n" + C_LINE4
        + " dMP     dP .dMP" + C_RESET
        + " dMP     dMP dMP dMP\"AMF dMP.aMP dMP dMP\n" + C_LINE5
        + "dMP      VMMMP\"" + C_RESET
        + " dMMMMMP dMP dMP dMP dMP  VMMMP\" dMP dMP    " + C_LINE5
        + version + C_RESET
    )


def format_usage(prog_name: str, version: str) -> str:
    """Return the full help text, ending with a newline."""
    width = max(len(spec.name) for spec in ARG_SPECS) + _NAME_PADDING
    lines = [
        _logo(version),
        "",
        f"{C_USAGE}Usage: {prog_name} {PATH_SPEC.name} [...OPTIONS] [...FILTERS]{C_RESET}",
    ]
    for group in _GROUP_ORDER:
        lines.append("")
        lines.append(group.value)
        lines.extend(
            _DESC_OFFSET + colorize_flag(spec.name.ljust(width)) + spec.desc
            for spec in ARG_SPECS
            if spec.group is group
        )
    return "\n".join(lines) + "\n"