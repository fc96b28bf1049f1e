"""Tagger options and the request settings a tagger applies to its lattice."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

from .lattice import DEFAULT_THETA, Lattice
from .param import Option, Param
from .types import RequestType

_TAGGER_OPTIONS: tuple[Option, ...] = (
    Option("rcfile", "r", None, "FILE", "use FILE as resource file"),
    Option("dicdir", "d", None, "DIR", "set DIR  as a system dicdir"),
    Option("userdic", "u", None, "FILE", "use FILE as a user dictionary"),
    Option("lattice-level", "l", "0", "INT",
           "lattice information level (DEPRECATED)"),
    Option("dictionary-info", "D", None, None,
           "show dictionary information and exit"),
    Option("output-format-type", "O", None, "TYPE",
           "set output format type (wakati,none,...)"),
    Option("all-morphs", "a", None, None, "output all morphs(default false)"),
    Option("nbest", "N", "1", "INT", "output N best results (default 1)"),
    Option("partial", "p", None, None, "partial parsing mode (default false)"),
    Option("marginal", "m", None, None,
           "output marginal probability (default false)"),
    Option("max-grouping-size", "M", "24", "INT",
           "maximum grouping size for unknown words (default 24)"),
    Option("node-format", "F", "%m\\t%H\\n", "STR",
           "use STR as the user-defined node format"),
    Option("unk-format", "U", "%m\\t%H\\n", "STR",
           "use STR as the user-defined unknown node format"),
    Option("bos-format", "B", "", "STR",
           "use STR as the user-defined beginning-of-sentence format"),
    Option("eos-format", "E", "EOS\\n", "STR",
           "use STR as the user-defined end-of-sentence format"),
    Option("eon-format", "S", "", "STR",
           "use STR as the user-defined end-of-NBest format"),
    Option("unk-feature", "x", None, "STR",
           "use STR as the feature for unknown word"),
    Option("input-buffer-size", "b", None, "INT",
           "set input buffer size (default 8192)"),
    Option("dump-config", "P", None, None, "dump MeCab parameters"),
    Option("allocate-sentence", "C", None, None,
           "allocate new memory for input sentence"),
    Option("theta", "t", "0.75", "FLOAT",
           "set temparature parameter theta (default 0.75)"),
    Option("cost-factor", "c", "700", "INT", "set cost factor (default 700)"),
    Option("output", "o", None, "FILE", "set the output file name"),
    Option("version", "v", None, None, "show the version and exit."),
    Option("help", "h", None, None, "show this help and exit."),
)


def tagger_options() -> list[Option]:
    """Return the options a tagger understands, in help order."""
    return list(_TAGGER_OPTIONS)


def parse_tagger_args(argv: Union[str, Sequence[str]]) -> Param:
    """Parse tagger arguments into a Param.

    ``argv`` is either a sequence with the program name first, or a single
    whitespace-separated string of options. Raises ParamError on bad input.
    """
    param = Param()
    if isinstance(argv, str):
        param.open_string(argv, _TAGGER_OPTIONS)
    else:
        param.open(argv, _TAGGER_OPTIONS)
    return param


@dataclass
class TaggerSettings:
    """Request flags and temperature a tagger hands to each lattice it parses."""

    request_type: RequestType = RequestType.ONE_BEST
    theta: float = DEFAULT_THETA

    def _toggle(self, flag: RequestType, on: bool) -> None:
        if on:
            self.request_type = RequestType(self.request_type | flag)
        else:
            self.request_type = RequestType(self.request_type & ~flag)

    def set_partial(self, partial: bool) -> None:
        """Switch partial parsing mode on or off."""
        self._toggle(RequestType.PARTIAL, partial)

    def partial(self) -> bool:
        """True if partial parsing mode is on."""
        return bool(self.request_type & RequestType.PARTIAL)

    def set_lattice_level(self, level: int) -> None:
        """Add the flag for a lattice level (0, 1 or 2); other levels do nothing."""
        flags = {
            0: RequestType.ONE_BEST,
            1: RequestType.NBEST,
            2: RequestType.MARGINAL_PROB,
        }
        flag = flags.get(level)
        if flag is not None:
            self.request_type = RequestType(self.request_type | flag)

    def lattice_level(self) -> int:
        """Return 2 for marginal probabilities, 1 for n-best, otherwise 0."""
        if self.request_type & RequestType.MARGINAL_PROB:
            return 2
        if self.request_type & RequestType.NBEST:
            return 1
        return 0

    def set_all_morphs(self, all_morphs: bool) -> None:
        """Switch all-morphs output on or off."""
        self._toggle(RequestType.ALL_MORPHS, all_morphs)

    def all_morphs(self) -> bool:
        """True if all-morphs output is on."""
        return bool(self.request_type & RequestType.ALL_MORPHS)

    def apply(self, lattice: Lattice) -> None:
        """Copy the request flags and theta onto ``lattice``."""
        lattice.request_type = RequestType(self.request_type)
        lattice.theta = self.theta