import argparse
from dataclasses import dataclass
from enum import Enum

from .errors import UsageError


class Action(Enum):
    HELP = "help"
    VERSION = "version"
    RUN = "run"


@dataclass(frozen=True)
class OptionSpec:
    short: str
    long: str
    description: str


@dataclass(frozen=True)
class InvocationRequest:
    action: Action
    program: str = ""


OPTIONS = (
    OptionSpec(short="h", long="help", description="print the help information"),
    OptionSpec(short="v", long="version", description="print the version number"),
)

_SHORT_FLAGS = {spec.short for spec in OPTIONS}
_KNOWN_FLAGS = {f"-{spec.short}" for spec in OPTIONS} | {f"--{spec.long}" for spec in OPTIONS}


class _OptionParser(argparse.ArgumentParser):
    # argparse exits the process on errors; we want the caller to decide
    def error(self, message):
        raise UsageError(message)


def build_parser(program=""):
    parser = _OptionParser(prog=program or None, add_help=False, allow_abbrev=False)
    for spec in OPTIONS:
        parser.add_argument(
            f"-{spec.short}",
            f"--{spec.long}",
            dest=spec.long,
            action="store_true",
            help=spec.description
        )
    return parser


def _check_token(token):
    # known flags, or a bundle of known short flags such as -hv;
    # "--" is not an end-of-options marker here, no positional arguments exist
    if token in _KNOWN_FLAGS:
        return
    if len(token) > 2 and token[0] == "-" and token[1] != "-" and set(token[1:]) <= _SHORT_FLAGS:
        return
    raise UsageError(f"unrecognized option: {token}", token=token)


def parse_options(args, program=""):
    args = list(args)
    for token in args:
        _check_token(token)
    parser = build_parser(program)
    namespace = parser.parse_args(args)
    if namespace.help:
        return InvocationRequest(Action.HELP, program)
    if namespace.version:
        return InvocationRequest(Action.VERSION, program)
    return InvocationRequest(Action.RUN, program)
