"""Two-dimensional projections of a volume along one axis."""

from __future__ import annotations

from pathlib import Path

from .image import MAX_LEVEL, Image
from .volume import Volume

CRITERIA = ("promedio", "minimo", "maximo")


def _picker(criterion: str):
    return max if criterion == "maximo" else min


class Projection2D:
    """Projects a volume onto a plane using a maximum, minimum or average rule."""

    def __init__(self) -> None:
        self.image = Image(1, 1, MAX_LEVEL, "proyeccion.pgm")

    def generate(
        self,
        volume: Volume,
        criterion: str,
        direction: str,
        output_path: str | Path,
    ) -> Image:
        """Project the volume along 'x', 'y' or 'z' and save the result."""
        if criterion not in CRITERIA:
            raise ValueError("invalid projection criterion")
        projectors = {
            "x": self.project_x,
            "y": self.project_y,
            "z": self.project_z,
        }
        projector = projectors.get(direction)
        if projector is None:
            raise ValueError("invalid direction")
        image = projector(volume, criterion)
        self.image = image
        image.save(output_path)
        return image

    def project_x(self, volume: Volume, criterion: str) -> Image:
        """One row per slice, each column reduced over the slice's rows."""
        first = volume.image(0)
        count = volume.count
        result = Image(first.width, count, first.max_intensity, "proyeccionX.pgm")
        if criterion in ("maximo", "minimo"):
            pick = _picker(criterion)
            for index in range(count):
                layer = volume.image(index)
                for x in range(first.width):
                    value = pick(layer.get_pixel(x, y) for y in range(first.height))
                    result.set_pixel(x, index, value)
        elif criterion == "promedio":
            for x in range(first.width):
                for y in range(first.height):
                    total = sum(volume.image(i).get_pixel(x, y) for i in range(count))
                    result.set_pixel(x, y, total // count)
        return result

    def project_y(self, volume: Volume, criterion: str) -> Image:
        """One column per slice, each row reduced over the slice's columns."""
        first = volume.image(0)
        count = volume.count
        row_width = first.width
        result = Image(count, first.height, first.max_intensity, "proyeccionY.pgm")
        if criterion in CRITERIA:
            for index in range(count):
                layer = volume.image(index)
                for y in range(first.height):
                    values = (layer.get_pixel(x, y) for x in range(row_width))
                    if criterion == "promedio":
                        value = sum(values) // row_width
                    else:
                        value = _picker(criterion)(values)
                    result.set_pixel(index, y, value)
        return result

    def project_z(self, volume: Volume, criterion: str) -> Image:
        """Reduce every pixel position across the slices; only 'maximo' fills it."""
        first = volume.image(0)
        count = volume.count
        result = Image(first.width, first.height, first.max_intensity, "proyeccionZ.pgm")
        if criterion == "maximo":
            for y in range(first.height):
                for x in range(first.width):
                    value = max(volume.image(i).get_pixel(x, y) for i in range(count))
                    result.set_pixel(x, y, value)
        return result