# hnswlab

Approximate nearest-neighbour search over integer vectors using a
hierarchical navigable small world (HNSW) graph, together with readers for
the `.ivecs`, `.bvecs` and `.fvecs` vector formats, a recall calculator, a
benchmark command and a compressed radix tree for 32-bit integers. It is
written in pure Python and has no dependencies outside the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Building and querying an index

```python
from hnswlab.hnsw import HNSW

index = HNSW(dim=3)
index.insert([0, 0, 0], 0)
index.insert([1, 1, 1], 1)
index.insert([10, 10, 10], 2)

print(index.query([1, 1, 2], 2))   # labels of the two nearest vectors, nearest first
print(len(index))                  # 3
```

- `HNSW(dim=128, level_fn=None)` creates an empty index. Inserting or
  querying a vector whose length is not `dim` raises `ValueError`.
- `insert(data, label)` adds a vector; `query(data, k)` returns up to `k`
  labels, nearest first, and an empty list for an empty index.
- The tuning attributes `M`, `M_max` and `ef_construction` start at 30, 30
  and 100 (from `hnswlab.util`); `ef_search` starts at 50. They are plain
  attributes and can be changed before inserting or querying.
- The lower-level steps are public too: `search_layer`, `select_neighbors`,
  `get_nearest` and `get_furthest`. Stored vectors are `Node` objects, kept
  in the `nodes` list; `entry_point` and `max_level` describe the top of the
  graph.

Distances are squared Euclidean (`hnswlab.util.l2distance`, which raises
`ValueError` for vectors of different lengths).

Node levels come from `level_fn`. By default this is
`hnswlab.util.get_random_level`, which draws from one shared
`LevelGenerator` seeded with 0 when the module is imported, so a program that
inserts the same vectors in the same order gets the same graph each time it
runs. Pass your own callable, or the `level` method of a
`LevelGenerator(seed, mult)`, for a separate sequence:

```python
from hnswlab.hnsw import HNSW
from hnswlab.util import LevelGenerator

index = HNSW(dim=3, level_fn=LevelGenerator(seed=7).level)
```

## Reading vector files

```python
from hnswlab.vecs_io import read_ivecs, read_bvecs, read_fvecs, VecsFormatError

base = read_bvecs(10000, 128, "data/siftsmall/base.bvecs")
gnd = read_ivecs(100, 10, "data/siftsmall/gnd.ivecs")
```

Each record is a 4-byte little-endian dimension followed by the components:
32-bit ints (`.ivecs`), unsigned bytes (`.bvecs`) or 32-bit floats
(`.fvecs`). The readers return lists of lists. A record whose dimension
differs from the expected one, or a file that ends early, raises
`VecsFormatError` (a subclass of `ValueError`).

## Measuring recall

```python
from hnswlab.ground_truth import count_recall

recall = count_recall(results, gnd, topk=10)
```

`results` holds one list of returned labels per query and `gnd` one list of
true neighbours per query; only the first `topk` entries of each ground-truth
row are used. The value is the mean, over the ground-truth queries, of the
number of returned labels found in the truth divided by `topk`. A `topk` that
is not positive, an empty `gnd`, or fewer result lists than ground-truth rows
raise `ValueError`.

## Benchmark command

With a data set laid out as `gnd.ivecs`, `query.bvecs` and `base.bvecs` in
one directory:

```
hnswlab --data-dir data/siftsmall
hnswlab --data-dir data/siftsmall --mode both
```

The number of vectors and their dimension are read from each file's size and
first header. The command inserts every base vector, answers the queries
(one per ground-truth row) and prints the time per insert, the average
recall and the time per query. `--mode` is `single` (the default),
`threaded` (queries answered from a thread pool) or `both`; `--data-dir`
defaults to `./data/siftsmall`. It exits with status 1 and a message on
standard error when the files cannot be read.

The same steps are available from Python:

```python
from hnswlab.cli import load_dataset, run_benchmark

dataset = load_dataset("data/siftsmall")
result = run_benchmark(dataset, threaded=False)
print(result.recall, result.insert_ms, result.query_ms)
```

## Compressed radix tree

```python
from hnswlab.radix import CompressedRadixTree

tree = CompressedRadixTree()
tree.insert(42)
tree.find(42)    # True
tree.remove(42)  # True
tree.find(42)    # False
```

Values must lie in the 32-bit signed range; others raise `ValueError`.
`remove` returns `False` for a value that is not stored.

## What it does not do

The index lives only in memory: there is no way to save it to disk or load
it back, and vectors cannot be removed from it once inserted.