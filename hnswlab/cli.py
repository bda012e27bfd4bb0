"""Command line benchmark: build an index over a dataset and measure recall."""

from __future__ import annotations

import argparse
import os
import sys
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from .ground_truth import count_recall
from .hnsw import HNSW
from .util import TimeRecord
from .vecs_io import VecsFormatError, read_bvecs, read_ivecs

_HEADER = 4


@dataclass
class Dataset:
    """Base vectors, queries and ground-truth neighbour labels."""

    base: list[list[int]]
    query: list[list[int]]
    gnd: list[list[int]]

    @property
    def topk(self) -> int:
        return len(self.gnd[0]) if self.gnd else 0

    @property
    def dim(self) -> int:
        for vectors in (self.base, self.query):
            if vectors:
                return len(vectors[0])
        return 0


@dataclass
class BenchmarkResult:
    """Recall and per-item timings of one benchmark run."""

    recall: float
    insert_ms: float
    query_ms: float
    results: list[list[int]]


def _shape(path: Path, item_size: int) -> tuple[int, int]:
    size = os.path.getsize(path)
    if size == 0:
        return 0, 0
    with open(path, "rb") as stream:
        header = stream.read(_HEADER)
    if len(header) != _HEADER:
        raise VecsFormatError(f"{path}: truncated header")
    dim = int.from_bytes(header, "little", signed=True)
    if dim <= 0:
        raise VecsFormatError(f"{path}: invalid dimension {dim}")
    record = _HEADER + dim * item_size
    if size % record:
        raise VecsFormatError(f"{path}: size {size} is not a multiple of {record}")
    return size // record, dim


def load_dataset(data_dir) -> Dataset:
    """Load gnd.ivecs, query.bvecs and base.bvecs from ``data_dir``."""
    root = Path(data_dir)
    files = {
        "gnd": (root / "gnd.ivecs", 4, read_ivecs),
        "query": (root / "query.bvecs", 1, read_bvecs),
        "base": (root / "base.bvecs", 1, read_bvecs),
    }
    loaded = {}
    for name, (path, item_size, reader) in files.items():
        n_vec, dim = _shape(path, item_size)
        loaded[name] = reader(n_vec, dim, path)
    dataset = Dataset(base=loaded["base"], query=loaded["query"], gnd=loaded["gnd"])
    if dataset.base and dataset.query and len(dataset.base[0]) != len(dataset.query[0]):
        raise VecsFormatError("query and base vectors differ in dimension")
    return dataset


def run_benchmark(dataset: Dataset, threaded: bool = False) -> BenchmarkResult:
    """Index the base vectors, answer the queries and measure recall."""
    index = HNSW(dim=dataset.dim)
    insert_timer = TimeRecord()
    for label, vector in enumerate(dataset.base):
        index.insert(vector, label)
    insert_ms = (
        insert_timer.elapsed_micro() / len(dataset.base) * 1e-3 if dataset.base else 0.0
    )

    topk = dataset.topk
    queries = dataset.query[: len(dataset.gnd)]
    query_timer = TimeRecord()
    if threaded and queries:
        with ThreadPoolExecutor(max_workers=min(32, len(queries))) as pool:
            results = list(pool.map(lambda q: index.query(q, topk), queries))
    else:
        results = [index.query(q, topk) for q in queries]
    query_ms = (
        query_timer.elapsed_micro() / len(dataset.query) * 1e-3 if dataset.query else 0.0
    )

    recall = count_recall(results, dataset.gnd, topk)
    return BenchmarkResult(recall, insert_ms, query_ms, results)


def main(argv=None) -> int:
    """Run the benchmark from the command line."""
    parser = argparse.ArgumentParser(
        prog="hnswlab", description="Measure recall and speed of the HNSW index."
    )
    parser.add_argument("--data-dir", default="./data/siftsmall")
    parser.add_argument(
        "--mode", choices=("single", "threaded", "both"), default="single"
    )
    args = parser.parse_args(argv)

    modes = {"single": [False], "threaded": [True], "both": [False, True]}[args.mode]
    try:
        print(f"loading data from {args.data_dir}")
        dataset = load_dataset(args.data_dir)
        for threaded in modes:
            label = "multi-thread" if threaded else "single thread"
            print(f"inserting and querying with {label}")
            result = run_benchmark(dataset, threaded)
            print(f"single insert time {result.insert_ms:.1f} ms")
            print(
                f"With {label}: average recall: {result.recall:.3f}, "
                f"single query time {result.query_ms:.1f} ms"
            )
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())