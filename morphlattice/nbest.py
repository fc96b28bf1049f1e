"""A* enumeration of the best paths through an analysed lattice."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass
from typing import Optional

from .types import Node, NodeStat


@dataclass(eq=False)
class _QueueElement:
    node: Node
    next: Optional["_QueueElement"]
    fx: int  # f(x) = h(x) + g(x)
    gx: int  # g(x)


class NBestGenerator:
    """Yields successively worse paths, relinking ``prev``/``next`` each time.

    Search runs backwards from the end-of-sentence node, using each node's
    forward best cost as the heuristic.
    """

    def __init__(self) -> None:
        self._agenda: list[tuple[int, int, _QueueElement]] = []
        self._counter = itertools.count()

    def _push(self, element: _QueueElement) -> None:
        heapq.heappush(self._agenda, (element.fx, next(self._counter), element))

    def set(self, eos_node: Node) -> bool:
        """Start a new enumeration from the given end-of-sentence node."""
        self._agenda.clear()
        self._counter = itertools.count()
        self._push(_QueueElement(node=eos_node, next=None, fx=0, gx=0))
        return True

    def next(self) -> bool:
        """Link the next best path into the nodes; return False when none is left."""
        while self._agenda:
            _, _, top = heapq.heappop(self._agenda)
            rnode = top.node

            if rnode.stat == NodeStat.BOS:
                element = top
                while element.next is not None:
                    element.node.next = element.next.node
                    element.next.node.prev = element.node
                    element = element.next
                return True

            path = rnode.lpath
            while path is not None:
                lnode = path.lnode
                gx = path.cost + top.gx
                self._push(
                    _QueueElement(node=lnode, next=top, fx=lnode.cost + gx, gx=gx)
                )
                path = path.lnext

        return False