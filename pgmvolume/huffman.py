"""Huffman trees built from intensity frequencies."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(eq=False)
class HuffmanNode:
    """A node of a Huffman tree; leaves carry an intensity, inner nodes -1."""

    frequency: int
    intensity: int = -1
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None

    def is_leaf(self) -> bool:
        """Return True when the node has no children."""
        return self.left is None and self.right is None


class HuffmanTree:
    """A Huffman tree over intensity values, built from their frequencies."""

    def __init__(self, frequencies: Mapping[int, int]) -> None:
        if not frequencies:
            raise ValueError("cannot build a Huffman tree without symbols")
        order = itertools.count()
        heap = [
            (frequency, next(order), HuffmanNode(frequency, intensity))
            for intensity, frequency in sorted(frequencies.items())
        ]
        heapq.heapify(heap)
        while len(heap) > 1:
            left_frequency, _, left = heapq.heappop(heap)
            right_frequency, _, right = heapq.heappop(heap)
            total = left_frequency + right_frequency
            heapq.heappush(
                heap, (total, next(order), HuffmanNode(total, left=left, right=right))
            )
        self.root: HuffmanNode = heap[0][2]

    def codes(self) -> dict[int, str]:
        """Map every intensity to its code: "0" for a left branch, "1" for a right one."""
        result: dict[int, str] = {}
        stack: list[tuple[HuffmanNode, str]] = [(self.root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.is_leaf():
                result[node.intensity] = prefix
                continue
            if node.right is not None:
                stack.append((node.right, prefix + "1"))
            if node.left is not None:
                stack.append((node.left, prefix + "0"))
        return dict(sorted(result.items()))