"""Readers for the ivecs, bvecs and fvecs vector file formats.

Each record is a little-endian 32-bit dimension followed by that many
components: 32-bit ints (ivecs), unsigned bytes (bvecs) or 32-bit floats
(fvecs).
"""

from __future__ import annotations

import os
import struct
from typing import BinaryIO

_DIM = struct.Struct("<i")


class VecsFormatError(ValueError):
    """Raised when a vector file does not match the expected layout."""


def _read_exact(stream: BinaryIO, size: int, path: str | os.PathLike) -> bytes:
    chunk = stream.read(size)
    if len(chunk) != size:
        raise VecsFormatError(f"{os.fspath(path)}: unexpected end of file")
    return chunk


def _read_records(n_vec, vec_dim, path, component: str, convert):
    item = struct.Struct(f"<{vec_dim}{component}")
    vectors = []
    with open(path, "rb") as stream:
        for index in range(n_vec):
            (dim,) = _DIM.unpack(_read_exact(stream, _DIM.size, path))
            if dim != vec_dim:
                raise VecsFormatError(
                    f"{os.fspath(path)}: record {index} has dimension {dim}, "
                    f"expected {vec_dim}"
                )
            values = item.unpack(_read_exact(stream, item.size, path))
            vectors.append([convert(v) for v in values])
    return vectors


def read_ivecs(n_vec: int, vec_dim: int, path) -> list[list[int]]:
    """Read ``n_vec`` integer vectors of dimension ``vec_dim``."""
    return _read_records(n_vec, vec_dim, path, "i", int)


def read_bvecs(n_vec: int, vec_dim: int, path) -> list[list[int]]:
    """Read ``n_vec`` byte vectors of dimension ``vec_dim`` as integers."""
    return _read_records(n_vec, vec_dim, path, "B", int)


def read_fvecs(n_vec: int, vec_dim: int, path) -> list[list[float]]:
    """Read ``n_vec`` float vectors of dimension ``vec_dim``."""
    return _read_records(n_vec, vec_dim, path, "f", float)