import pytest

from morphlattice.buffer import BufferOverflowError, OutputBuffer
from morphlattice.formatting import (
    enum_nbest_as_string,
    lattice_to_string,
    node_to_string,
    write_lattice,
)
from morphlattice.lattice import Lattice, LatticeError
from morphlattice.types import Node, NodeStat, Path, RequestType


def _link(lnode, rnode, cost):
    path = Path(lnode=lnode, rnode=rnode, cost=cost)
    path.lnext = rnode.lpath
    rnode.lpath = path
    return path


def _nbest_lattice():
    lattice = Lattice()
    lattice.set_sentence("ab")
    bos = Node(stat=NodeStat.BOS, surface="ab", feature="BOS/EOS", cost=0)
    a = Node(surface="ab", length=1, rlength=1, feature="A", cost=10)
    b = Node(surface="b", length=1, rlength=1, feature="B", cost=20)
    ab = Node(surface="ab", length=2, rlength=2, feature="AB", cost=30)
    eos = Node(stat=NodeStat.EOS, feature="BOS/EOS", cost=20)
    _link(bos, a, 10)
    _link(a, b, 10)
    _link(bos, ab, 30)
    _link(ab, eos, 0)
    _link(b, eos, 0)
    lattice.end_nodes()[0] = bos
    lattice.begin_nodes()[2] = eos
    lattice.add_request_type(RequestType.NBEST)
    return lattice


RESULT = "x\tN\nyz\tV\nEOS\n"


def test_lattice_to_string_round_trips_set_result():
    lattice = Lattice()
    lattice.set_result(RESULT)
    assert lattice_to_string(lattice) == RESULT


def test_write_lattice_into_buffer():
    lattice = Lattice()
    lattice.set_result(RESULT)
    out = OutputBuffer()
    write_lattice(lattice, out)
    assert out.getvalue() == RESULT


def test_empty_result_gives_only_eos():
    lattice = Lattice()
    lattice.set_result("EOS\n")
    assert lattice_to_string(lattice) == "EOS\n"


def test_write_lattice_without_sentence_raises():
    with pytest.raises(LatticeError):
        write_lattice(Lattice(), OutputBuffer())


def test_limit_must_leave_room_for_terminator():
    lattice = Lattice()
    lattice.set_result(RESULT)
    assert lattice_to_string(lattice, limit=len(RESULT) + 2) == RESULT
    with pytest.raises(BufferOverflowError):
        lattice_to_string(lattice, limit=len(RESULT) + 1)
    assert lattice.what == "output buffer overflow"


def test_node_to_string_default_format():
    lattice = Lattice()
    lattice.set_result(RESULT)
    node = lattice.bos_node().next.next
    assert node_to_string(lattice, node) == "yz\tV"


def test_node_to_string_none_raises():
    lattice = Lattice()
    with pytest.raises(LatticeError):
        node_to_string(lattice, None)
    assert lattice.what == "node is NULL"


def test_node_to_string_overflow():
    lattice = Lattice()
    lattice.set_result(RESULT)
    node = lattice.bos_node().next
    with pytest.raises(BufferOverflowError):
        node_to_string(lattice, node, limit=2)


def test_enum_nbest_orders_paths_by_cost():
    lattice = _nbest_lattice()
    assert enum_nbest_as_string(lattice, 2) == "a\tA\nb\tB\nEOS\nab\tAB\nEOS\n"


def test_enum_nbest_stops_when_paths_run_out():
    first = enum_nbest_as_string(_nbest_lattice(), 2)
    more = enum_nbest_as_string(_nbest_lattice(), 10)
    assert more == first


def test_enum_nbest_one_matches_best_path_output():
    lattice = _nbest_lattice()
    text = enum_nbest_as_string(lattice, 1)
    assert text == lattice_to_string(lattice)


@pytest.mark.parametrize("n", [0, 513, -1])
def test_enum_nbest_rejects_bad_size(n):
    lattice = _nbest_lattice()
    with pytest.raises(LatticeError):
        enum_nbest_as_string(lattice, n)
    assert lattice.what == "nbest size must be 1 <= nbest <= 512"


def test_enum_nbest_without_nbest_flag_gives_empty_output():
    lattice = _nbest_lattice()
    lattice.remove_request_type(RequestType.NBEST)
    assert enum_nbest_as_string(lattice, 3) == ""


class _RecordingWriter:
    def __init__(self, ok=True):
        self.ok = ok
        self.stats = []

    def write(self, lattice, out):
        out.write("L;")
        return self.ok

    def write_node(self, lattice, node, out):
        self.stats.append(node.stat)
        out.write(f"<{node.stat.name}>")
        return self.ok


def test_writer_is_used_and_eon_node_is_written():
    lattice = _nbest_lattice()
    writer = _RecordingWriter()
    lattice.writer = writer
    assert enum_nbest_as_string(lattice, 5) == "L;L;<EON>"
    assert writer.stats == [NodeStat.EON]


def test_writer_failure_raises():
    lattice = Lattice()
    lattice.set_result(RESULT)
    lattice.writer = _RecordingWriter(ok=False)
    with pytest.raises(LatticeError):
        lattice_to_string(lattice)
    with pytest.raises(LatticeError):
        node_to_string(lattice, lattice.bos_node())