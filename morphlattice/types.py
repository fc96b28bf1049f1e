"""Core data types shared by the lattice, tagger and n-best search."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import Iterator, Optional


class NodeStat(IntEnum):
    """Kind of a lattice node."""

    NOR = 0  # word found in the dictionary
    UNK = 1  # unknown word
    BOS = 2  # beginning of sentence
    EOS = 3  # end of sentence
    EON = 4  # end of an n-best enumeration


class DictionaryType(IntEnum):
    """Kind of a dictionary."""

    SYS = 0
    USR = 1
    UNK = 2


class RequestType(IntFlag):
    """Flags that select what an analysis produces."""

    ONE_BEST = 1
    NBEST = 2
    PARTIAL = 4
    MARGINAL_PROB = 8
    ALTERNATIVE = 16
    ALL_MORPHS = 32
    ALLOCATE_SENTENCE = 64


class BoundaryType(IntEnum):
    """Token boundary constraint at a position in the sentence."""

    ANY_BOUNDARY = 0
    TOKEN_BOUNDARY = 1
    INSIDE_TOKEN = 2


@dataclass(eq=False)
class DictionaryInfo:
    """Description of one dictionary; several are linked through ``next``."""

    filename: str = ""
    charset: str = ""
    size: int = 0
    type: DictionaryType = DictionaryType.SYS
    lsize: int = 0
    rsize: int = 0
    version: int = 0
    next: Optional["DictionaryInfo"] = field(default=None, repr=False)

    def chain(self) -> Iterator["DictionaryInfo"]:
        """Yield this dictionary and every one linked after it."""
        info: Optional[DictionaryInfo] = self
        while info is not None:
            yield info
            info = info.next


@dataclass(eq=False)
class Path:
    """A transition between a left node and a right node."""

    rnode: Optional["Node"] = field(default=None, repr=False)
    rnext: Optional["Path"] = field(default=None, repr=False)
    lnode: Optional["Node"] = field(default=None, repr=False)
    lnext: Optional["Path"] = field(default=None, repr=False)
    cost: int = 0
    prob: float = 0.0


@dataclass(eq=False)
class Node:
    """A morpheme candidate in the lattice.

    ``surface`` holds the text starting at the node's position; it may run
    past the morpheme, whose own text is its first ``length`` characters.
    """

    prev: Optional["Node"] = field(default=None, repr=False)
    next: Optional["Node"] = field(default=None, repr=False)
    enext: Optional["Node"] = field(default=None, repr=False)
    bnext: Optional["Node"] = field(default=None, repr=False)
    rpath: Optional[Path] = field(default=None, repr=False)
    lpath: Optional[Path] = field(default=None, repr=False)
    surface: str = ""
    feature: str = ""
    id: int = 0
    length: int = 0
    rlength: int = 0
    rc_attr: int = 0
    lc_attr: int = 0
    posid: int = 0
    char_type: int = 0
    stat: NodeStat = NodeStat.NOR
    isbest: bool = False
    alpha: float = 0.0
    beta: float = 0.0
    prob: float = 0.0
    wcost: int = 0
    cost: int = 0

    def walk(self) -> Iterator["Node"]:
        """Yield this node and every node reached through ``next``."""
        node: Optional[Node] = self
        while node is not None:
            yield node
            node = node.next

    def text(self) -> str:
        """Return the morpheme's own surface text."""
        return self.surface[: self.length]