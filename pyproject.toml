[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pgmvolume"
version = "0.1.0"
description = "Load plain PGM images and image volumes, build 2D projections and Huffman-compress images"
requires-python = ">=3.10"
dependencies = []
keywords = ["pgm", "image", "volume", "projection", "huffman", "compression"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pgmvolume = "pgmvolume.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pgmvolume"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
