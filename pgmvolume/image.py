"""Grey-scale images in plain PGM (P2) format, with Huffman compression."""

from __future__ import annotations

import struct
from collections import Counter
from collections.abc import Iterable, Iterator
from pathlib import Path

from .huffman import HuffmanNode, HuffmanTree

MAX_LEVEL = 255
_HEADER = struct.Struct("<HHB")
_FREQUENCY = struct.Struct("<Q")
_MAX_DIMENSION = 0xFFFF


class ImageFormatError(ValueError):
    """Raised when an image or encoded file cannot be parsed."""


class Pixel:
    """A grey level together with the maximum level it may take."""

    __slots__ = ("_intensity", "_max_intensity")

    def __init__(self, intensity: int, max_intensity: int = MAX_LEVEL) -> None:
        if not 0 <= max_intensity <= MAX_LEVEL:
            raise ValueError("maximum intensity must be between 0 and 255")
        if not 0 <= intensity <= max_intensity:
            raise ValueError("pixel intensity must be between 0 and the image maximum")
        self._intensity = intensity
        self._max_intensity = max_intensity

    @property
    def intensity(self) -> int:
        return self._intensity

    @intensity.setter
    def intensity(self, value: int) -> None:
        if not 0 <= value <= MAX_LEVEL:
            raise ValueError("pixel intensity must be between 0 and 255")
        self._intensity = value

    @property
    def max_intensity(self) -> int:
        return self._max_intensity

    @max_intensity.setter
    def max_intensity(self, value: int) -> None:
        if not 0 <= value <= MAX_LEVEL:
            raise ValueError("maximum intensity must be between 0 and 255")
        self._max_intensity = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pixel):
            return NotImplemented
        return (self._intensity, self._max_intensity) == (
            other._intensity,
            other._max_intensity,
        )

    def __repr__(self) -> str:
        return f"Pixel({self._intensity}, {self._max_intensity})"


def _tokens(text: str) -> Iterator[str]:
    for line in text.splitlines():
        yield from line.split("#", 1)[0].split()


def _next_int(tokens: Iterator[str], message: str) -> int:
    try:
        return int(next(tokens))
    except (StopIteration, ValueError):
        raise ImageFormatError(message) from None


def _pack_bits(codes: Iterable[str]) -> bytes:
    bits = "".join(codes)
    if not bits:
        return b""
    bits += "0" * (-len(bits) % 8)
    return bytes(int(bits[start:start + 8], 2) for start in range(0, len(bits), 8))


def _decode_symbols(root: HuffmanNode, payload: bytes, count: int) -> Iterator[int]:
    if root.is_leaf():
        for _ in range(count):
            yield root.intensity
        return
    produced = 0
    node = root
    for byte in payload:
        for shift in range(7, -1, -1):
            node = node.right if (byte >> shift) & 1 else node.left
            if node is None:
                raise ImageFormatError("invalid code in encoded data")
            if node.is_leaf():
                yield node.intensity
                produced += 1
                if produced == count:
                    return
                node = root
    raise ImageFormatError("encoded data ends before every pixel is decoded")


class Image:
    """A grey-scale image of width x height pixels."""

    def __init__(
        self,
        width: int = 1,
        height: int = 1,
        max_intensity: int = MAX_LEVEL,
        name: str = "",
    ) -> None:
        if width <= 0 or height <= 0 or not 0 < max_intensity <= MAX_LEVEL:
            raise ValueError("invalid dimensions or maximum intensity")
        self.name = name
        self._width = width
        self._height = height
        self._max_intensity = max_intensity
        self._rows = [
            [Pixel(0, max_intensity) for _ in range(width)] for _ in range(height)
        ]

    @classmethod
    def from_file(cls, path: str | Path) -> Image:
        """Read a plain PGM file into a new image."""
        image = cls()
        image.load(path)
        return image

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def max_intensity(self) -> int:
        return self._max_intensity

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError("coordinates outside the image")

    def get_pixel(self, x: int, y: int) -> int:
        self._check(x, y)
        return self._rows[y][x].intensity

    def set_pixel(self, x: int, y: int, intensity: int) -> None:
        self._check(x, y)
        self._rows[y][x].intensity = intensity

    def set_max_intensity(self, intensity: int) -> None:
        """Change the maximum intensity of the image and of every pixel."""
        if not 0 <= intensity <= MAX_LEVEL:
            raise ValueError("maximum intensity must be between 0 and 255")
        for row in self._rows:
            for pixel in row:
                pixel.max_intensity = intensity
        self._max_intensity = intensity

    def load(self, path: str | Path) -> None:
        """Replace this image with the contents of a plain PGM file."""
        text = Path(path).read_text(encoding="latin-1")
        tokens = _tokens(text)
        if next(tokens, None) != "P2":
            raise ImageFormatError("unsupported image format")
        header_error = "cannot read dimensions or maximum intensity"
        width = _next_int(tokens, header_error)
        height = _next_int(tokens, header_error)
        max_intensity = _next_int(tokens, header_error)
        if width <= 0 or height <= 0 or not 0 <= max_intensity <= MAX_LEVEL:
            raise ImageFormatError("invalid dimensions or maximum intensity")

        rows = []
        for _ in range(height):
            row = []
            for _ in range(width):
                value = _next_int(tokens, "not enough pixel data")
                if not 0 <= value <= max_intensity:
                    raise ImageFormatError("pixel intensity out of range")
                row.append(Pixel(value, max_intensity))
            rows.append(row)

        self._width = width
        self._height = height
        self._max_intensity = max_intensity
        self.name = str(path)
        self._rows = rows

    def save(self, path: str | Path) -> None:
        """Write the image as a plain PGM file."""
        lines = ["P2", f"{self._width} {self._height}", str(self._max_intensity)]
        lines.extend(
            "".join(f"{pixel.intensity} " for pixel in row) for row in self._rows
        )
        Path(path).write_text("\n".join(lines) + "\n", encoding="ascii")

    def info(self) -> str:
        """Describe the image name, size and maximum intensity."""
        return (
            f"Imagen: {self.name}\n"
            f"Dimensiones: {self._width}x{self._height}\n"
            f"Intensidad máxima: {self._max_intensity}"
        )

    def frequencies(self) -> dict[int, int]:
        """Count how often each intensity occurs, keyed in ascending order."""
        counts = Counter(pixel.intensity for row in self._rows for pixel in row)
        return dict(sorted(counts.items()))

    def encode(self, path: str | Path) -> None:
        """Write the image Huffman-compressed to a binary file."""
        if self._width > _MAX_DIMENSION or self._height > _MAX_DIMENSION:
            raise ValueError("image too large to encode")
        counts = self.frequencies()
        codes = HuffmanTree(counts).codes()
        table = b"".join(
            _FREQUENCY.pack(counts.get(level, 0))
            for level in range(self._max_intensity + 1)
        )
        payload = _pack_bits(
            codes[pixel.intensity] for row in self._rows for pixel in row
        )
        with open(path, "wb") as stream:
            stream.write(_HEADER.pack(self._width, self._height, self._max_intensity))
            stream.write(table)
            stream.write(payload)

    def decode(self, input_path: str | Path, output_path: str | Path) -> None:
        """Load a Huffman-compressed file into this image and save it as PGM."""
        data = Path(input_path).read_bytes()
        if len(data) < _HEADER.size:
            raise ImageFormatError("encoded file header is truncated")
        width, height, max_intensity = _HEADER.unpack_from(data)
        table_end = _HEADER.size + _FREQUENCY.size * (max_intensity + 1)
        if len(data) < table_end:
            raise ImageFormatError("encoded frequency table is truncated")
        if width == 0 or height == 0:
            raise ImageFormatError("encoded image has no pixels")
        counts = {
            level: frequency
            for level, (frequency,) in enumerate(
                _FREQUENCY.iter_unpack(data[_HEADER.size:table_end])
            )
            if frequency
        }
        if not counts:
            raise ImageFormatError("encoded frequency table is empty")
        tree = HuffmanTree(counts)
        levels = iter(_decode_symbols(tree.root, data[table_end:], width * height))
        rows = [
            [Pixel(next(levels), max_intensity) for _ in range(width)]
            for _ in range(height)
        ]

        self._width = width
        self._height = height
        self._max_intensity = max_intensity
        self._rows = rows
        self.save(output_path)