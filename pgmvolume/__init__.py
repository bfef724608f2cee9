"""Plain PGM images and volumes: 2D projections and Huffman compression."""

__version__ = "0.1.0"
__all__ = ["cli", "huffman", "image", "projection", "volume"]