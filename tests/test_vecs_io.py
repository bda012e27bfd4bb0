import struct

import pytest

from hnswlab.vecs_io import VecsFormatError, read_bvecs, read_fvecs, read_ivecs


def _write(path, records, fmt):
    with open(path, "wb") as f:
        for rec in records:
            f.write(struct.pack("<i", len(rec)))
            f.write(struct.pack(f"<{len(rec)}{fmt}", *rec))


def test_read_ivecs_round_trip(tmp_path):
    records = [[1, -2, 3], [100000, 0, -7]]
    path = tmp_path / "a.ivecs"
    _write(path, records, "i")
    assert read_ivecs(2, 3, path) == records


def test_read_ivecs_reads_only_requested_count(tmp_path):
    records = [[1, 2], [3, 4], [5, 6]]
    path = tmp_path / "a.ivecs"
    _write(path, records, "i")
    assert read_ivecs(2, 2, path) == records[:2]


def test_read_ivecs_dimension_mismatch(tmp_path):
    path = tmp_path / "a.ivecs"
    _write(path, [[1, 2, 3]], "i")
    with pytest.raises(VecsFormatError):
        read_ivecs(1, 4, path)


def test_read_bvecs_round_trip(tmp_path):
    records = [[0, 255, 17, 128], [1, 2, 3, 4]]
    path = tmp_path / "b.bvecs"
    _write(path, records, "B")
    assert read_bvecs(2, 4, path) == records


def test_read_bvecs_byte_layout(tmp_path):
    path = tmp_path / "b.bvecs"
    path.write_bytes(b"\x02\x00\x00\x00\xff\x01")
    assert read_bvecs(1, 2, path) == [[255, 1]]


def test_read_bvecs_dimension_mismatch(tmp_path):
    path = tmp_path / "b.bvecs"
    _write(path, [[1, 2]], "B")
    with pytest.raises(VecsFormatError):
        read_bvecs(1, 3, path)


def test_read_fvecs_round_trip(tmp_path):
    records = [[0.5, -1.25, 3.0]]
    path = tmp_path / "c.fvecs"
    _write(path, records, "f")
    assert read_fvecs(1, 3, path) == records


def test_truncated_file_raises(tmp_path):
    path = tmp_path / "a.ivecs"
    _write(path, [[1, 2, 3]], "i")
    with pytest.raises(VecsFormatError):
        read_ivecs(2, 3, path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_bvecs(1, 2, tmp_path / "missing.bvecs")


def test_format_error_is_value_error(tmp_path):
    path = tmp_path / "empty.fvecs"
    path.write_bytes(b"")
    with pytest.raises(ValueError):
        read_fvecs(1, 2, path)