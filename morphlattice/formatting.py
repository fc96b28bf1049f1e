"""Text output of analysed lattices, single nodes and n-best results."""

from __future__ import annotations

from typing import Optional, Protocol

from .buffer import BufferOverflowError, OutputBuffer
from .lattice import Lattice, LatticeError
from .types import Node, NodeStat

NBEST_MAX = 512
_TERMINATOR = "\0"


class LatticeWriter(Protocol):
    """A custom formatter attached to a lattice as ``lattice.writer``."""

    def write(self, lattice: Lattice, out: OutputBuffer) -> bool: ...

    def write_node(self, lattice: Lattice, node: Node, out: OutputBuffer) -> bool: ...


def write_lattice(lattice: Lattice, out: OutputBuffer) -> None:
    """Write the best path as ``surface<TAB>feature`` lines followed by ``EOS``."""
    bos = lattice.bos_node()
    if bos is None:
        raise LatticeError("lattice has no beginning-of-sentence node")
    node = bos.next
    while node is not None and node.next is not None:
        out.write(node.text())
        out.write("\t")
        out.write(node.feature)
        out.write("\n")
        node = node.next
    out.write("EOS\n")


def _finish(lattice: Lattice, out: OutputBuffer) -> str:
    # A bounded buffer must also have room for the terminator.
    out.write(_TERMINATOR)
    try:
        text = out.getvalue()
    except BufferOverflowError:
        lattice.what = "output buffer overflow"
        raise
    return text[: -len(_TERMINATOR)]


def _writer_call(lattice: Lattice, ok: bool) -> None:
    if not ok:
        raise LatticeError(lattice.what or "writer failed")


def lattice_to_string(lattice: Lattice, limit: Optional[int] = None) -> str:
    """Format the lattice's current path.

    With ``limit`` the output must fit in that many characters including a
    terminator; otherwise BufferOverflowError is raised.
    """
    out = OutputBuffer(limit)
    writer = lattice.writer
    if writer is not None:
        _writer_call(lattice, writer.write(lattice, out))
    else:
        write_lattice(lattice, out)
    return _finish(lattice, out)


def node_to_string(
    lattice: Lattice, node: Optional[Node], limit: Optional[int] = None
) -> str:
    """Format one node as ``surface<TAB>feature`` or through the lattice's writer."""
    out = OutputBuffer(limit)
    if node is None:
        lattice.what = "node is NULL"
        raise LatticeError(lattice.what)
    writer = lattice.writer
    if writer is not None:
        _writer_call(lattice, writer.write_node(lattice, node, out))
    else:
        out.write(node.text())
        out.write("\t")
        out.write(node.feature)
    return _finish(lattice, out)


def enum_nbest_as_string(
    lattice: Lattice, n: int, limit: Optional[int] = None
) -> str:
    """Format up to ``n`` best paths one after another (1 <= n <= 512)."""
    out = OutputBuffer(limit)
    if n <= 0 or n > NBEST_MAX:
        lattice.what = "nbest size must be 1 <= nbest <= 512"
        raise LatticeError(lattice.what)

    writer = lattice.writer
    for _ in range(n):
        try:
            if not lattice.next():
                break
        except LatticeError:
            break
        if writer is not None:
            _writer_call(lattice, writer.write(lattice, out))
        else:
            write_lattice(lattice, out)

    if writer is not None:
        sentence = lattice.sentence or ""
        eon = Node(stat=NodeStat.EON, surface=sentence[lattice.size :])
        _writer_call(lattice, writer.write_node(lattice, eon, out))

    return _finish(lattice, out)