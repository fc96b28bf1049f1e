"""The lattice: a sentence, its candidate nodes, constraints and request flags."""

from __future__ import annotations

from typing import Optional, Union, overload

from .nbest import NBestGenerator
from .types import BoundaryType, Node, NodeStat, RequestType

DEFAULT_THETA = 0.75
_PADDING = 4


class LatticeError(Exception):
    """Raised when a lattice operation cannot be carried out."""


class Lattice:
    """Holds one sentence and the nodes that begin and end at each position."""

    def __init__(self, writer: object = None) -> None:
        self.writer = writer
        self.request_type: RequestType = RequestType.ONE_BEST
        self.what = ""
        self.sentence: Optional[str] = None
        self.theta = DEFAULT_THETA
        self.z = 0.0
        self._size = 0
        self._begin_nodes: list[Optional[Node]] = []
        self._end_nodes: list[Optional[Node]] = []
        self._feature_constraint: list[Optional[str]] = []
        self._boundary_constraint: list[BoundaryType] = []
        self._nbest: Optional[NBestGenerator] = None

    @property
    def size(self) -> int:
        """Length of the sentence."""
        return self._size

    def clear(self) -> None:
        """Drop the sentence, nodes and constraints; reset theta and Z."""
        self._begin_nodes = []
        self._end_nodes = []
        self._feature_constraint = []
        self._boundary_constraint = []
        self._size = 0
        self.theta = DEFAULT_THETA
        self.z = 0.0
        self.sentence = None
        self._nbest = None

    def is_available(self) -> bool:
        """True once a sentence has been set."""
        return (
            self.sentence is not None
            and bool(self._begin_nodes)
            and bool(self._end_nodes)
        )

    def _require_available(self) -> None:
        if not self.is_available():
            raise LatticeError("lattice has no sentence")

    def bos_node(self) -> Optional[Node]:
        """Return the beginning-of-sentence node."""
        self._require_available()
        return self._end_nodes[0]

    def eos_node(self) -> Optional[Node]:
        """Return the end-of-sentence node."""
        self._require_available()
        return self._begin_nodes[self._size]

    @overload
    def begin_nodes(self) -> list[Optional[Node]]: ...

    @overload
    def begin_nodes(self, pos: int) -> Optional[Node]: ...

    def begin_nodes(
        self, pos: Optional[int] = None
    ) -> Union[Optional[Node], list[Optional[Node]]]:
        """Return the nodes starting at ``pos``, or the whole table without ``pos``."""
        if pos is None:
            return self._begin_nodes
        return self._begin_nodes[pos]

    @overload
    def end_nodes(self) -> list[Optional[Node]]: ...

    @overload
    def end_nodes(self, pos: int) -> Optional[Node]: ...

    def end_nodes(
        self, pos: Optional[int] = None
    ) -> Union[Optional[Node], list[Optional[Node]]]:
        """Return the nodes ending at ``pos``, or the whole table without ``pos``."""
        if pos is None:
            return self._end_nodes
        return self._end_nodes[pos]

    def set_sentence(self, sentence: str) -> None:
        """Clear the lattice and make room for the nodes of ``sentence``."""
        self.clear()
        self.sentence = sentence
        self._size = len(sentence)
        self._begin_nodes = [None] * (self._size + _PADDING)
        self._end_nodes = [None] * (self._size + _PADDING)

    def has_request_type(self, request_type: int) -> bool:
        """True if any of the given flags is set."""
        return bool(self.request_type & request_type)

    def add_request_type(self, request_type: int) -> None:
        """Set the given flags."""
        self.request_type = RequestType(self.request_type | request_type)

    def remove_request_type(self, request_type: int) -> None:
        """Clear the given flags."""
        self.request_type = RequestType(self.request_type & ~RequestType(request_type))

    def new_node(self) -> Node:
        """Return a fresh node belonging to this lattice."""
        return Node()

    def has_constraint(self) -> bool:
        """True if any boundary constraint has been set."""
        return bool(self._boundary_constraint)

    def boundary_constraint(self, pos: int) -> BoundaryType:
        """Return the boundary constraint at ``pos``."""
        if self._boundary_constraint:
            return self._boundary_constraint[pos]
        return BoundaryType.ANY_BOUNDARY

    def feature_constraint(self, pos: int) -> Optional[str]:
        """Return the feature a token starting at ``pos`` is constrained to."""
        if self._feature_constraint:
            return self._feature_constraint[pos]
        return None

    def set_boundary_constraint(self, pos: int, boundary_type: int) -> None:
        """Constrain the boundary at ``pos``."""
        if not self._boundary_constraint:
            self._boundary_constraint = [BoundaryType.ANY_BOUNDARY] * (
                self._size + _PADDING
            )
        self._boundary_constraint[pos] = BoundaryType(boundary_type)

    def set_feature_constraint(
        self, begin_pos: int, end_pos: int, feature: Optional[str]
    ) -> None:
        """Constrain the span ``[begin_pos, end_pos)`` to one token with ``feature``."""
        if begin_pos >= end_pos or feature is None:
            return
        if not self._feature_constraint:
            self._feature_constraint = [None] * (self._size + _PADDING)
        end_pos = min(end_pos, self._size)
        self.set_boundary_constraint(begin_pos, BoundaryType.TOKEN_BOUNDARY)
        self.set_boundary_constraint(end_pos, BoundaryType.TOKEN_BOUNDARY)
        for pos in range(begin_pos + 1, end_pos):
            self.set_boundary_constraint(pos, BoundaryType.INSIDE_TOKEN)
        self._feature_constraint[begin_pos] = feature

    def set_result(self, result: str) -> None:
        """Fill the lattice from analysis output of ``surface<TAB>feature`` lines."""
        surfaces: list[str] = []
        features: list[str] = []
        for line in result.split("\n"):
            if line == "EOS":
                break
            cols = line.split("\t")
            if len(cols) < 2:
                break
            surfaces.append(cols[0])
            features.append(cols[1])

        sentence = "".join(surfaces)
        self.set_sentence(sentence)

        bos = self.new_node()
        bos.surface = sentence
        bos.feature = "BOS/EOS"
        bos.isbest = True
        bos.stat = NodeStat.BOS

        eos = self.new_node()
        eos.surface = ""
        eos.feature = "BOS/EOS"
        eos.isbest = True
        eos.stat = NodeStat.EOS

        self._end_nodes[0] = bos

        offset = 0
        prev = bos
        for surface, feature in zip(surfaces, features):
            node = self.new_node()
            node.prev = prev
            prev.next = node
            node.surface = sentence[offset:]
            node.length = node.rlength = len(surface)
            node.isbest = True
            node.stat = NodeStat.NOR
            node.wcost = 0
            node.cost = 0
            node.feature = feature
            self._begin_nodes[offset] = node
            self._end_nodes[offset + node.length] = node
            offset += node.length
            prev = node

        prev.next = eos
        eos.prev = prev

    def next(self) -> bool:
        """Link the next best path into the nodes; return False when none is left.

        Raises LatticeError unless the NBEST request type is set.
        """
        if not self.has_request_type(RequestType.NBEST):
            self.what = "MECAB_NBEST request type is not set"
            raise LatticeError(self.what)
        if self._nbest is None:
            eos = self.eos_node()
            if eos is None:
                self.what = "lattice has no end-of-sentence node"
                raise LatticeError(self.what)
            self._nbest = NBestGenerator()
            self._nbest.set(eos)
        return self._nbest.next()