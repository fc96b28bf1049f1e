# morphlattice

The data structures and plumbing around a morphological analyser, in plain
Python with no dependencies outside the standard library.

## What is in the package

- `morphlattice.types`: `Node`, `Path` and `DictionaryInfo`, plus the enums
  `NodeStat`, `DictionaryType`, `RequestType` (a flag set) and
  `BoundaryType`. `Node.walk()` yields a node and every node reached through
  `next`. `Node.text()` returns the first `length` characters of `surface`.
  `DictionaryInfo.chain()` yields a dictionary and those linked after it.
- `morphlattice.lattice`: `Lattice` holds a sentence and the nodes that begin
  and end at each position (`begin_nodes(pos)`, `end_nodes(pos)`,
  `bos_node()`, `eos_node()`). It also holds request flags
  (`has_request_type`, `add_request_type`, `remove_request_type`),
  partial-parsing constraints (`set_boundary_constraint`,
  `set_feature_constraint`, `boundary_constraint`, `feature_constraint`,
  `has_constraint`), `theta` and `z`. `set_result(text)` fills the lattice
  from `surface<TAB>feature` lines. `next()` moves to the next best path.
  Failures raise `LatticeError`.
- `morphlattice.nbest`: `NBestGenerator` runs an A* search backwards from an
  end-of-sentence node. It follows each node's `lpath` chain, uses
  `path.cost` as the step cost and `node.cost` as the heuristic, and relinks
  `prev`/`next` along each path it returns.
- `morphlattice.buffer`: `OutputBuffer` collects text. It is unbounded by
  default. With a `limit`, a write that would bring the content to `limit`
  characters or more is dropped and the buffer is marked `failed`. While it
  is failed, `getvalue()` raises `BufferOverflowError`.
- `morphlattice.formatting`: `write_lattice`, `lattice_to_string`,
  `node_to_string` and `enum_nbest_as_string` write results as
  `surface<TAB>feature` lines ending with `EOS`. A lattice can instead carry a
  custom `writer` object with `write(lattice, out)` and
  `write_node(lattice, node, out)` methods (see the `LatticeWriter`
  protocol).
- `morphlattice.param`: `Param` parses argument lists of `-x VALUE`, `-xVALUE`,
  `--name VALUE` and `--name=VALUE` options described by `Option` records
  (`open`). `open_string` accepts a single whitespace-separated string. `load`
  reads `key = value` resource files; lines starting with `;` or `#` are
  skipped, and values already set are kept. `get(key, kind)` converts stored
  values. `dump_config` and `help_version` write the configuration, the help
  text or the version. Problems raise `ParamError`.
- `morphlattice.settings`: `TaggerSettings` tracks a request type and theta,
  with the partial, all-morphs and lattice-level switches, and `apply(lattice)`
  copies them onto a lattice. `tagger_options()` lists the standard tagger
  options. `parse_tagger_args(argv)` parses a tagger command line given as a
  list or as a single string.

## Examples

### Building a lattice from a known result

```python
from morphlattice.lattice import Lattice
from morphlattice.formatting import lattice_to_string

lattice = Lattice()
lattice.set_result("今日\tnoun\nは\tparticle\nEOS\n")

for node in lattice.bos_node().walk():
    print(node.stat, node.text())

print(lattice_to_string(lattice))
# 今日	noun
# は	particle
# EOS
```

### Request types and constraints

```python
from morphlattice.lattice import Lattice
from morphlattice.types import BoundaryType, RequestType

lattice = Lattice()
lattice.add_request_type(RequestType.PARTIAL)
lattice.set_sentence("abcdef")
lattice.set_feature_constraint(0, 3, "noun")

assert lattice.has_constraint()
assert lattice.boundary_constraint(0) == BoundaryType.TOKEN_BOUNDARY
assert lattice.boundary_constraint(1) == BoundaryType.INSIDE_TOKEN
assert lattice.feature_constraint(0) == "noun"
```

### Parsing options

```python
from morphlattice.settings import parse_tagger_args

param = parse_tagger_args(["tagger", "-N", "3", "--theta=0.5", "input.txt"])
print(param.get("nbest", int))    # 3
print(param.get("theta", float))  # 0.5
print(param.rest_args)            # ['input.txt']
```

An unknown option, an option with no value after it, or a flag given a value
raises `ParamError`. The message is also kept in `param.what`.

## Behaviour worth knowing

- `enum_nbest_as_string` accepts a count from 1 to 512. Any other count raises
  `LatticeError`. It stops early, without error, when no more paths are left
  or when the lattice does not have `RequestType.NBEST` set.
- `Lattice.next()` raises `LatticeError` unless `RequestType.NBEST` is set.
- With a `limit`, the formatting functions need room for the output plus one
  terminator character; otherwise they raise `BufferOverflowError`.
- `Param.get` returns the type's default value (`0`, `0.0`, `""`, `False`)
  when a value is missing or cannot be converted. It does not raise.
- `Param.dump_config` writes keys in sorted order.

## What the package does not do

There is no dictionary, no dictionary lookup and no cost model. Nothing in the
package turns raw text into candidate nodes or runs a Viterbi analysis, and it
installs no command-line program. A lattice is filled either by
`Lattice.set_result` or by your own code that creates nodes and paths.
`set_result` links only the single given path and creates no `Path` objects.
N-best search therefore finds paths only in lattices whose nodes you have
connected through `lpath` with costs set.