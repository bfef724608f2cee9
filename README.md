# pgmvolume

A small toolkit for grey-scale images in the plain-text PGM (`P2`) format.
It can:

- load, inspect and save single images;
- load a numbered series of images as a volume and project it onto a
  2D image along the `x`, `y` or `z` axis;
- compress an image with Huffman coding into a binary file and decode
  that file back into a PGM image.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Interactive shell

```
pgmvolume
```

This prints a banner and then a `$ ` prompt, reading one command per line
from standard input until `salir` or the end of input. File names given to
commands are resolved inside a resource directory, `recursos` in the
current working directory by default; choose another with:

```
pgmvolume --resources path/to/images
```

| Command | Purpose |
| --- | --- |
| `ayuda [comando]` | List all commands, or describe one |
| `cargar_imagen nombre.pgm` | Load an image into memory |
| `info_imagen` | Show name, size and maximum intensity of the loaded image |
| `cargar_volumen nombre_base n_im` | Load `nombre_base0.pgm` … `nombre_base{n_im-1}.pgm` (1 to 99 images) |
| `info_volumen` | Show base name, image count and size of the loaded volume |
| `proyeccion2D dirección criterio archivo.pgm` | Project the loaded volume along `x`, `y` or `z` with `minimo`, `maximo` or `promedio` and save the result |
| `codificar_imagen archivo.huf` | Huffman-encode the loaded image |
| `decodificar_archivo archivo.huf salida.pgm` | Decode a Huffman file into a PGM image (it also becomes the image in memory) |
| `salir` | Leave the shell |

Messages are printed in Spanish, as are the command names.

## Library use

```python
from pgmvolume.image import Image
from pgmvolume.volume import Volume
from pgmvolume.projection import Projection2D

image = Image.from_file("scan.pgm")
print(image.width, image.height, image.max_intensity)
print(image.get_pixel(0, 0))
image.set_pixel(0, 0, 10)
image.save("scan_copy.pgm")
image.encode("scan.huf")

restored = Image()
restored.decode("scan.huf", "scan_restored.pgm")

volume = Volume("slices/slice", 10)   # slices/slice0.pgm ... slice9.pgm
volume.load()
print(volume.info())
Projection2D().generate(volume, "maximo", "z", "mip.pgm")
```

Modules:

- `pgmvolume.image` — `Pixel`, `Image` (`from_file`, `load`, `save`,
  `get_pixel`, `set_pixel`, `set_max_intensity`, `info`, `frequencies`,
  `encode`, `decode`) and `ImageFormatError`, a `ValueError` raised for
  files that cannot be parsed. Coordinates outside the image raise
  `IndexError`.
- `pgmvolume.volume` — `Volume` (`load`, `image`, `info`, `count`,
  `images`). The number of slices must be between 1 and 99.
- `pgmvolume.projection` — `Projection2D` with `generate`, `project_x`,
  `project_y` and `project_z`.
- `pgmvolume.huffman` — `HuffmanNode` and `HuffmanTree` (`root`, `codes`).
- `pgmvolume.cli` — `Session` (`execute`, `show_help`) and `main`.

### Projections

- `x`: one row per slice; each column holds the minimum or maximum of
  that column within the slice. With `promedio`, each position `(x, y)`
  of the result holds the integer mean of that position across all slices.
- `y`: one column per slice; each row holds the minimum, maximum or
  integer mean of that row within the slice.
- `z`: each position holds the maximum across all slices. Only `maximo`
  fills this projection; `minimo` and `promedio` give an all-zero image.

### Huffman file layout

All integers are little-endian:

1. width, 2 bytes; height, 2 bytes; maximum intensity `M`, 1 byte;
2. `M + 1` frequencies, 8 bytes each, for intensities `0` to `M`;
3. the concatenated codes of the pixels in row order, packed most
   significant bit first, with the last byte padded with zeros.

## What it does not do

- Only plain-text `P2` PGM files are read and written; binary `P5` files
  and other image formats are not supported.
- The shell accepts a `segmentar salida.pgm sx1 sy1 sl1 ...` command and
  checks its arguments, but it performs no segmentation and writes no file.