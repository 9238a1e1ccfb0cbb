"""Compiler and runtime options."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass


@dataclass(frozen=True)
class RunOpts:
    """Options that control how a program's result is read back and shown."""

    linear_readback: bool = False
    pretty: bool = False


class OptLevel(enum.Enum):
    """How strongly an optional pass is applied."""

    DISABLED = "disabled"
    ENABLED = "enabled"
    ALT = "alt"

    def enabled(self) -> bool:
        """True unless the pass is disabled."""
        return self is not OptLevel.DISABLED

    def is_extra(self) -> bool:
        """True only for the full (non-alternative) level."""
        return self is OptLevel.ENABLED


class AdtEncoding(enum.Enum):
    """Encoding used for constructors and matches."""

    SCOTT = "Scott"
    NUM_SCOTT = "NumScott"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CompileOpts:
    """Which compilation passes are enabled.

    The defaults enable eta reduction, match linearization and combinator
    floating, and use the NumScott ADT encoding.
    """

    eta: bool = True
    prune: bool = False
    linearize_matches: OptLevel = OptLevel.ENABLED
    float_combinators: bool = True
    merge: bool = False
    inline: bool = False
    check_net_size: bool = False
    adt_encoding: AdtEncoding = AdtEncoding.NUM_SCOTT

    def set_all(self) -> CompileOpts:
        """Return a copy with every optimizing pass enabled."""
        return dataclasses.replace(
            self,
            eta=True,
            prune=True,
            float_combinators=True,
            merge=True,
            inline=True,
            linearize_matches=OptLevel.ENABLED,
        )

    def set_no_all(self) -> CompileOpts:
        """Return a copy with every optimizing pass disabled."""
        return dataclasses.replace(
            self,
            eta=False,
            prune=False,
            linearize_matches=OptLevel.DISABLED,
            float_combinators=False,
            merge=False,
            inline=False,
        )

    def check_for_strict(self) -> None:
        """Print warnings about passes that strict evaluation relies on."""
        if not self.float_combinators:
            print(
                "Warning: Running in strict mode without enabling the float_combinators "
                "pass can lead to some functions expanding infinitely."
            )
        if not self.linearize_matches.enabled():
            print(
                "Warning: Running in strict mode without enabling the linearize_matches "
                "pass can lead to some functions expanding infinitely."
            )