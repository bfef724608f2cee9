"""Ordered series of PGM slices forming a volume."""

from __future__ import annotations

from collections.abc import Iterable

from .image import Image

MAX_SLICES = 99


def _check_count(count: int) -> int:
    if not 0 < count <= MAX_SLICES:
        raise ValueError("the number of images must be between 1 and 99")
    return count


class Volume:
    """A stack of images read from files named <base><index>.pgm."""

    def __init__(self, base_name: str, count: int) -> None:
        self.base_name = base_name
        self._count = _check_count(count)
        self._images: list[Image] = []

    @property
    def count(self) -> int:
        return self._count

    @count.setter
    def count(self, value: int) -> None:
        self._count = _check_count(value)

    @property
    def images(self) -> list[Image]:
        return list(self._images)

    @images.setter
    def images(self, images: Iterable[Image]) -> None:
        self._images = list(images)

    def load(self) -> None:
        """Read every slice from disk, replacing whatever was loaded before."""
        self._images.clear()
        for index in range(self._count):
            self._images.append(Image.from_file(f"{self.base_name}{index}.pgm"))

    def image(self, index: int) -> Image:
        """Return the slice at the given position."""
        if not 0 <= index < len(self._images):
            raise IndexError("image index out of range")
        return self._images[index]

    def info(self) -> str:
        """Describe the base name, number of slices and their dimensions."""
        if not self._images:
            return "El volumen no tiene imágenes cargadas."
        first = self._images[0]
        return (
            f"Nombre base: {self.base_name}\n"
            f"Número de imágenes: {self._count}\n"
            f"Dimensiones: {first.width}x{first.height}"
        )