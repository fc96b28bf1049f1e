"""Command-line and resource-file parameters."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Optional, Sequence, TextIO

PACKAGE = "morphlattice"
VERSION = "0.996"
COPYRIGHT = f"{PACKAGE}: part-of-speech and morphological analyzer"

_C_SPACE = " \t\n\v\f\r"
_MAX_STRING_ARGS = 64
_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class ParamError(Exception):
    """Raised when arguments or a resource file cannot be parsed."""


@dataclass(frozen=True)
class Option:
    """One recognised option; options without ``arg_description`` are flags."""

    name: str
    short_name: str
    default_value: Optional[str] = None
    arg_description: Optional[str] = None
    description: str = ""


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def _cast(text: str, kind: type) -> Any:
    """Convert stored text to ``kind``; a malformed value gives ``kind()``."""
    if kind is str:
        return text
    stripped = text.strip(_C_SPACE)
    if kind is bool:
        if _INT_RE.fullmatch(stripped) and int(stripped) in (0, 1):
            return bool(int(stripped))
        return False
    if kind is int:
        return int(stripped) if _INT_RE.fullmatch(stripped) else 0
    if kind is float:
        return float(stripped) if _FLOAT_RE.fullmatch(stripped) else 0.0
    try:
        return kind(stripped)
    except (TypeError, ValueError):
        return kind()


def _build_help(program_name: str, options: Sequence[Option]) -> str:
    lines = [f"{COPYRIGHT}\nUsage: {program_name} [options] files\n"]

    def width(opt: Option) -> int:
        size = len(opt.name)
        if opt.arg_description:
            size += 1 + len(opt.arg_description)
        return size

    longest = max((1 + width(opt) for opt in options), default=0)
    for opt in options:
        entry = f" -{opt.short_name}, --{opt.name}"
        if opt.arg_description:
            entry += f"={opt.arg_description}"
        padding = " " * max(longest - width(opt) + 1, 0)
        lines.append(f"{entry}{padding}{opt.description}\n")
    lines.append("\n")
    return "".join(lines)


class Param:
    """Key/value configuration filled from arguments and resource files."""

    def __init__(self) -> None:
        self._conf: dict[str, str] = {}
        self.rest_args: list[str] = []
        self.program_name = ""
        self.help = ""
        self.version = ""
        self.what = ""

    def _fail(self, message: str) -> None:
        self.what = message
        raise ParamError(message)

    def open(self, argv: Sequence[str], options: Sequence[Option]) -> None:
        """Parse ``argv`` (program name first) against ``options``.

        Raises ParamError on an unknown option or a misplaced argument.
        """
        if not argv:
            self.program_name = "unknown"
            return

        self.program_name = argv[0]
        self.help = _build_help(self.program_name, options)
        self.version = f"{PACKAGE} of {VERSION}\n"

        for opt in options:
            if opt.default_value is not None:
                self.set(opt.name, opt.default_value)

        by_name = {opt.name: opt for opt in reversed(options)}
        by_short = {opt.short_name: opt for opt in reversed(options)}

        args = iter(argv[1:])
        for arg in args:
            if not arg.startswith("-"):
                self.rest_args.append(arg)
                continue

            if arg.startswith("--"):
                name, eq, value = arg[2:].partition("=")
                if not name:
                    return  # "--" stops the scanning
                opt = by_name.get(name)
                if opt is None:
                    self._fail(f"unrecognized option `{arg}`")
                if opt.arg_description:
                    if eq:
                        self.set(opt.name, value)
                    else:
                        self.set(opt.name, self._argument(args, arg))
                else:
                    if eq:
                        self._fail(f"`{arg}` doesn't allow an argument")
                    self.set(opt.name, 1)
            elif len(arg) > 1:
                opt = by_short.get(arg[1])
                if opt is None:
                    self._fail(f"unrecognized option `{arg}`")
                attached = arg[2:]
                if opt.arg_description:
                    if attached:
                        self.set(opt.name, attached)
                    else:
                        self.set(opt.name, self._argument(args, arg))
                else:
                    if attached:
                        self._fail(f"`{arg}` doesn't allow an argument")
                    self.set(opt.name, 1)

    def _argument(self, args: Iterable[str], arg: str) -> str:
        for value in args:
            return value
        self._fail(f"`{arg}` requires an argument")
        raise AssertionError("unreachable")

    def open_string(self, arg: str, options: Sequence[Option]) -> None:
        """Parse a single whitespace-separated argument string."""
        tokens = re.split(f"[{re.escape(_C_SPACE)}]+", arg.strip(_C_SPACE))
        argv = [PACKAGE] + [token for token in tokens if token]
        self.open(argv[:_MAX_STRING_ARGS], options)

    def load(self, filename: str | Path) -> None:
        """Read ``key = value`` lines; values already set are kept."""
        try:
            with open(filename, encoding="utf-8") as stream:
                lines = stream.read().splitlines()
        except OSError:
            self._fail(f"no such file or directory: {filename}")
            return

        for line in lines:
            if not line or line[0] in ";#":
                continue
            key, eq, value = line.partition("=")
            if not eq:
                self._fail(f"format error: {line}")
            self.set(key.rstrip(_C_SPACE), value.lstrip(_C_SPACE), rewrite=False)

    def clear(self) -> None:
        """Forget all values and remaining arguments."""
        self._conf.clear()
        self.rest_args.clear()

    def get(self, key: str, kind: type = str) -> Any:
        """Return the value of ``key`` as ``kind``, or ``kind()`` if missing or malformed."""
        if key not in self._conf:
            return kind()
        return _cast(self._conf[key], kind)

    def set(self, key: str, value: Any, rewrite: bool = True) -> None:
        """Store ``value``; with ``rewrite`` false an existing value is kept."""
        if rewrite or key not in self._conf:
            self._conf[key] = _to_text(value)

    def dump_config(self, stream: TextIO) -> None:
        """Write every ``key: value`` pair in key order."""
        for key in sorted(self._conf):
            stream.write(f"{key}: {self._conf[key]}\n")

    def help_version(self, stream: Optional[TextIO] = None) -> bool:
        """Print help or version if requested; return False when one was printed."""
        out = stream if stream is not None else sys.stdout
        if self.get("help", bool):
            out.write(self.help)
            return False
        if self.get("version", bool):
            out.write(self.version)
            return False
        return True