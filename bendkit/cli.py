"""Command-line option parsing for the compiler front end."""

from __future__ import annotations

import argparse
import dataclasses
import enum
from collections.abc import Iterable
from pathlib import Path

from .options import AdtEncoding, CompileOpts, OptLevel

_OPT_HELP = (
    "Enables or disables the given optimizations; "
    "float_combinators is enabled by default on strict mode."
)


class OptArg(enum.Enum):
    """Values accepted by ``-O``."""

    ALL = "all"
    NO_ALL = "no-all"
    ETA = "eta"
    NO_ETA = "no-eta"
    PRUNE = "prune"
    NO_PRUNE = "no-prune"
    LINEARIZE_MATCHES = "linearize-matches"
    LINEARIZE_MATCHES_ALT = "linearize-matches-alt"
    NO_LINEARIZE_MATCHES = "no-linearize-matches"
    FLOAT_COMBINATORS = "float-combinators"
    NO_FLOAT_COMBINATORS = "no-float-combinators"
    MERGE = "merge"
    NO_MERGE = "no-merge"
    INLINE = "inline"
    NO_INLINE = "no-inline"
    CHECK_NET_SIZE = "check-net-size"
    NO_CHECK_NET_SIZE = "no-check-net-size"
    ADT_SCOTT = "adt-scott"
    ADT_NUM_SCOTT = "adt-num-scott"


class WarningArg(enum.Enum):
    """Values accepted by ``-W``, ``-D`` and ``-A``."""

    ALL = "all"
    IRREFUTABLE_MATCH = "irrefutable-match"
    REDUNDANT_MATCH = "redundant-match"
    UNREACHABLE_MATCH = "unreachable-match"
    UNUSED_DEFINITION = "unused-definition"
    REPEATED_BIND = "repeated-bind"
    RECURSION_CYCLE = "recursion-cycle"


_FIELD_SETTINGS: dict[OptArg, tuple[str, object]] = {
    OptArg.ETA: ("eta", True),
    OptArg.NO_ETA: ("eta", False),
    OptArg.PRUNE: ("prune", True),
    OptArg.NO_PRUNE: ("prune", False),
    OptArg.FLOAT_COMBINATORS: ("float_combinators", True),
    OptArg.NO_FLOAT_COMBINATORS: ("float_combinators", False),
    OptArg.MERGE: ("merge", True),
    OptArg.NO_MERGE: ("merge", False),
    OptArg.INLINE: ("inline", True),
    OptArg.NO_INLINE: ("inline", False),
    OptArg.CHECK_NET_SIZE: ("check_net_size", True),
    OptArg.NO_CHECK_NET_SIZE: ("check_net_size", False),
    OptArg.LINEARIZE_MATCHES: ("linearize_matches", OptLevel.ENABLED),
    OptArg.LINEARIZE_MATCHES_ALT: ("linearize_matches", OptLevel.ALT),
    OptArg.NO_LINEARIZE_MATCHES: ("linearize_matches", OptLevel.DISABLED),
    OptArg.ADT_SCOTT: ("adt_encoding", AdtEncoding.SCOTT),
    OptArg.ADT_NUM_SCOTT: ("adt_encoding", AdtEncoding.NUM_SCOTT),
}


def compile_opts_from_cli(args: Iterable[OptArg]) -> CompileOpts:
    """Apply the ``-O`` values, in order, on top of the default options."""
    opts = CompileOpts()
    for arg in args:
        if arg is OptArg.ALL:
            opts = opts.set_all()
        elif arg is OptArg.NO_ALL:
            opts = opts.set_no_all()
        else:
            name, value = _FIELD_SETTINGS[arg]
            opts = dataclasses.replace(opts, **{name: value})
    return opts


class _EnumListAction(argparse.Action):
    """Appends space-separated enum values to a list, keeping their order."""

    enum_type: type[enum.Enum]

    def _convert(self, raw: str) -> list:
        converted = []
        for word in raw.split():
            try:
                converted.append(self.enum_type(word))
            except ValueError:
                choices = ", ".join(member.value for member in self.enum_type)
                raise argparse.ArgumentError(
                    self, f"invalid value '{word}' (choose from {choices})"
                ) from None
        return converted

    def __call__(self, parser, namespace, values, option_string=None):
        items = list(getattr(namespace, self.dest, None) or [])
        items.extend(self._convert(values))
        setattr(namespace, self.dest, items)


class _OptAction(_EnumListAction):
    enum_type = OptArg


class _WarnAction(_EnumListAction):
    """Records ``(severity, warning)`` pairs in the order they were given."""

    enum_type = WarningArg
    severity = "warning"

    def __call__(self, parser, namespace, values, option_string=None):
        items = list(getattr(namespace, self.dest, None) or [])
        items.extend((self.severity, arg) for arg in self._convert(values))
        setattr(namespace, self.dest, items)


class _AllowAction(_WarnAction):
    severity = "allow"


class _DenyAction(_WarnAction):
    severity = "error"


def _add_global(parser: argparse.ArgumentParser, default) -> None:
    kwargs = {} if default is None else {"default": default}
    parser.add_argument("-v", "--verbose", action="store_true", **(
        kwargs if default is None else {"default": default}
    ))
    parser.add_argument(
        "-e",
        "--entrypoint",
        help="Use other entrypoint rather than main or Main",
        **({"default": None} if default is None else {"default": default}),
    )


def _add_comp_opts(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-O", dest="comp_opts", action=_OptAction, default=[], help=_OPT_HELP)


def _add_warn_opts(parser: argparse.ArgumentParser) -> None:
    common = {"dest": "warn_opts", "default": []}
    parser.add_argument(
        "-W", "--warn", action=_WarnAction, help="Show the specified compilation warning", **common
    )
    parser.add_argument(
        "-D", "--deny", action=_DenyAction, help="Deny the specified compilation warning", **common
    )
    parser.add_argument(
        "-A", "--allow", action=_AllowAction, help="Allow the specified compilation warning", **common
    )


def _add_path(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("path", type=Path, help="Path to the input file")


def _add_pretty(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-p", dest="pretty", action="store_true", help="Debug and normalization pretty printing"
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(prog="bend")
    parser.add_argument("-v", "--verbose", action="store_true", default=False)
    parser.add_argument(
        "-e", "--entrypoint", default=None, help="Use other entrypoint rather than main or Main"
    )
    subparsers = parser.add_subparsers(dest="mode", required=True)

    def subcommand(name: str, help_text: str) -> argparse.ArgumentParser:
        sub = subparsers.add_parser(name, help=help_text)
        # Global options may also follow the subcommand.
        sub.add_argument("-v", "--verbose", action="store_true", default=argparse.SUPPRESS)
        sub.add_argument("-e", "--entrypoint", default=argparse.SUPPRESS)
        return sub

    check = subcommand("check", "Checks that the program is syntactically and semantically correct.")
    _add_comp_opts(check)
    _add_warn_opts(check)
    _add_path(check)

    runs = (
        ("run", "Compiles the program and runs it with the Rust HVM implementation.", "run", False),
        ("run-c", "Compiles the program and runs it with the C HVM implementation.", "run-c", True),
        ("run-cu", "Compiles the program and runs it with the Cuda HVM implementation.", "run-cu", False),
    )
    for name, help_text, hvm_command, supports_io in runs:
        run = subcommand(name, help_text)
        _add_pretty(run)
        run.add_argument("--io", action="store_true", help="Run with IO enabled")
        run.add_argument(
            "-l", dest="linear", action="store_true", help="Linear readback (show explicit dups)"
        )
        run.add_argument(
            "-s",
            "--stats",
            dest="print_stats",
            action="store_true",
            help="Shows runtime stats and rewrite counts",
        )
        _add_comp_opts(run)
        _add_warn_opts(run)
        _add_path(run)
        run.add_argument("arguments", nargs="*", help="Arguments passed to the program")
        run.set_defaults(hvm_command=hvm_command, supports_io=supports_io)

    gens = (
        ("gen-hvm", "Compiles the program to hvmc and prints to stdout.", "gen", False),
        ("gen-c", "Compiles the program to standalone C and prints to stdout.", "gen-c", True),
        ("gen-cu", "Compiles the program to standalone Cuda and prints to stdout.", "gen-cu", False),
    )
    for name, help_text, hvm_command, supports_io in gens:
        gen = subcommand(name, help_text)
        _add_comp_opts(gen)
        gen.add_argument("--io", action="store_true", help="Generate with IO enabled")
        _add_warn_opts(gen)
        _add_path(gen)
        gen.set_defaults(hvm_command=hvm_command, supports_io=supports_io)

    desugar = subcommand("desugar", "Runs the lambda-term level desugaring passes.")
    _add_comp_opts(desugar)
    _add_pretty(desugar)
    _add_warn_opts(desugar)
    _add_path(desugar)

    return parser