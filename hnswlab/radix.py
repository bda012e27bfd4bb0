"""Compressed radix tree over 32-bit signed integers with 2-bit branching."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

_BITS = 32
_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1


def _mask(length: int) -> int:
    return (1 << length) - 1


def _segment(word: int, remaining: int, length: int) -> int:
    """Top ``length`` bits of the low ``remaining`` bits of ``word``."""
    return (word >> (remaining - length)) & _mask(length)


def _to_word(value: int) -> int:
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"{value} is outside the 32-bit signed range")
    return value & 0xFFFFFFFF


@dataclass(eq=False)
class _Node:
    parent: Optional["_Node"] = None
    segment: int = 0
    length: int = 0
    children: list = field(default_factory=lambda: [None] * 4)


class CompressedRadixTree:
    """A set of 32-bit integers stored as a path-compressed 4-ary trie."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, value: int) -> None:
        """Add ``value``; inserting a present value changes nothing."""
        word = _to_word(value)
        node = self._root
        remaining = _BITS
        while remaining > 0:
            idx = (word >> (remaining - 2)) & 0x3
            child = node.children[idx]
            if child is None:
                node.children[idx] = _Node(node, word & _mask(remaining), remaining)
                return
            seg = _segment(word, remaining, child.length)
            if seg == child.segment:
                node = child
                remaining -= child.length
                continue

            # Split the child at the even-aligned point where the bits differ.
            suffix = (seg ^ child.segment).bit_length()
            suffix += suffix % 2
            prefix = _Node(node, child.segment >> suffix, child.length - suffix)
            child.segment &= _mask(suffix)
            child.length = suffix
            child.parent = prefix
            prefix.children[child.segment >> (suffix - 2)] = child

            rest = remaining - prefix.length
            leaf = _Node(prefix, word & _mask(rest), rest)
            prefix.children[leaf.segment >> (rest - 2)] = leaf
            node.children[idx] = prefix
            return

    def _locate(self, word: int):
        node = self._root
        idx = -1
        remaining = _BITS
        while remaining > 0:
            idx = (word >> (remaining - 2)) & 0x3
            child = node.children[idx]
            if child is None or _segment(word, remaining, child.length) != child.segment:
                return None, -1
            node = child
            remaining -= child.length
        return node, idx

    def find(self, value: int) -> bool:
        """Return whether ``value`` is stored."""
        node, _ = self._locate(_to_word(value))
        return node is not None

    def remove(self, value: int) -> bool:
        """Remove ``value``; return whether it was present."""
        leaf, idx = self._locate(_to_word(value))
        if leaf is None:
            return False
        parent = leaf.parent
        parent.children[idx] = None

        if parent is not self._root:
            remaining = [c for c in parent.children if c is not None]
            if len(remaining) == 1:
                (child,) = remaining
                parent.segment = (parent.segment << child.length) | child.segment
                parent.length += child.length
                parent.children = child.children
                for grandchild in parent.children:
                    if grandchild is not None:
                        grandchild.parent = parent
        return True