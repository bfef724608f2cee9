import pytest

from pgmvolume.image import Image, ImageFormatError, Pixel


def _write(tmp_path, text, name="img.pgm"):
    path = tmp_path / name
    path.write_text(text)
    return path


def _sample():
    image = Image(4, 3, 200, "sample")
    for y in range(3):
        for x in range(4):
            image.set_pixel(x, y, (x * 37 + y * 11) % 150)
    return image


def _pixels(image):
    return [
        [image.get_pixel(x, y) for x in range(image.width)]
        for y in range(image.height)
    ]


def test_pixel_validation():
    with pytest.raises(ValueError):
        Pixel(10, 5)
    with pytest.raises(ValueError):
        Pixel(0, 256)
    with pytest.raises(ValueError):
        Pixel(-1)
    pixel = Pixel(5, 5)
    with pytest.raises(ValueError):
        pixel.intensity = 256
    pixel.intensity = 200
    assert pixel.intensity == 200


def test_new_image_is_black():
    image = Image(3, 2, 100, "x")
    assert (image.width, image.height, image.max_intensity) == (3, 2, 100)
    assert _pixels(image) == [[0, 0, 0], [0, 0, 0]]


@pytest.mark.parametrize(
    "args", [(0, 1, 255), (1, 0, 255), (1, 1, 0), (1, 1, 256)]
)
def test_invalid_construction(args):
    with pytest.raises(ValueError):
        Image(*args, "bad")


def test_pixel_access_bounds():
    image = Image(2, 2, 255, "x")
    image.set_pixel(1, 0, 9)
    assert image.get_pixel(1, 0) == 9
    with pytest.raises(IndexError):
        image.get_pixel(2, 0)
    with pytest.raises(IndexError):
        image.set_pixel(0, -1, 3)


def test_set_max_intensity():
    image = Image(2, 2, 255, "x")
    image.set_max_intensity(100)
    assert image.max_intensity == 100
    with pytest.raises(ValueError):
        image.set_max_intensity(300)


def test_save_format(tmp_path):
    image = Image(2, 1, 255, "x")
    image.set_pixel(0, 0, 3)
    image.set_pixel(1, 0, 4)
    path = tmp_path / "out.pgm"
    image.save(path)
    assert path.read_text() == "P2\n2 1\n255\n3 4 \n"


def test_save_load_round_trip(tmp_path):
    image = _sample()
    path = tmp_path / "round.pgm"
    image.save(path)
    loaded = Image.from_file(path)
    assert _pixels(loaded) == _pixels(image)
    assert loaded.max_intensity == image.max_intensity
    assert loaded.name == str(path)


def test_load_skips_comments(tmp_path):
    path = _write(tmp_path, "P2\n# made by hand\n2 2\n9\n1 2\n3 9\n")
    image = Image.from_file(path)
    assert _pixels(image) == [[1, 2], [3, 9]]


@pytest.mark.parametrize(
    "text",
    [
        "P5\n1 1\n255\n0\n",
        "P2\n2 two\n255\n",
        "P2\n0 2\n255\n",
        "P2\n2 2\n300\n0 0 0 0\n",
        "P2\n2 2\n255\n1 2 3\n",
        "P2\n1 2\n10\n5 11\n",
    ],
)
def test_load_errors(tmp_path, text):
    with pytest.raises(ImageFormatError):
        Image.from_file(_write(tmp_path, text))


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        Image.from_file(tmp_path / "missing.pgm")


def test_frequencies_count_every_pixel():
    image = _sample()
    counts = image.frequencies()
    assert sum(counts.values()) == image.width * image.height
    assert list(counts) == sorted(counts)
    assert counts[image.get_pixel(0, 0)] >= 1


def test_info_text():
    image = Image(3, 2, 100, "foto.pgm")
    assert image.info().splitlines() == [
        "Imagen: foto.pgm",
        "Dimensiones: 3x2",
        "Intensidad máxima: 100",
    ]


def test_encode_header(tmp_path):
    image = Image(2, 1, 3, "x")
    image.set_pixel(1, 0, 3)
    path = tmp_path / "img.huf"
    image.encode(path)
    data = path.read_bytes()
    assert data[:5] == b"\x02\x00\x01\x00\x03"
    assert int.from_bytes(data[5:13], "little") == 1
    assert int.from_bytes(data[29:37], "little") == 1


def test_encode_decode_round_trip(tmp_path):
    image = _sample()
    encoded = tmp_path / "img.huf"
    decoded = tmp_path / "back.pgm"
    image.encode(encoded)
    target = Image()
    target.decode(encoded, decoded)
    assert _pixels(target) == _pixels(image)
    assert target.max_intensity == image.max_intensity
    assert _pixels(Image.from_file(decoded)) == _pixels(image)


def test_uniform_image_round_trip(tmp_path):
    image = Image(3, 3, 50, "x")
    for y in range(3):
        for x in range(3):
            image.set_pixel(x, y, 7)
    encoded = tmp_path / "flat.huf"
    image.encode(encoded)
    target = Image()
    target.decode(encoded, tmp_path / "flat.pgm")
    assert _pixels(target) == _pixels(image)


def test_decode_truncated(tmp_path):
    image = _sample()
    encoded = tmp_path / "img.huf"
    image.encode(encoded)
    data = encoded.read_bytes()
    encoded.write_bytes(data[:-1])
    with pytest.raises(ImageFormatError):
        Image().decode(encoded, tmp_path / "out.pgm")
    encoded.write_bytes(data[:3])
    with pytest.raises(ImageFormatError):
        Image().decode(encoded, tmp_path / "out.pgm")