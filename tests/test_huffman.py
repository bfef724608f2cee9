import pytest

from pgmvolume.huffman import HuffmanNode, HuffmanTree


def _is_prefix_free(codes):
    values = list(codes.values())
    return not any(
        a != b and b.startswith(a) for a in values for b in values
    )


def test_worked_example_codes():
    tree = HuffmanTree({0: 5, 1: 1, 2: 1})
    assert tree.codes() == {0: "1", 1: "00", 2: "01"}


def test_root_frequency_is_total():
    frequencies = {3: 4, 7: 9, 10: 2, 200: 6}
    tree = HuffmanTree(frequencies)
    assert tree.root.frequency == sum(frequencies.values())


def test_codes_cover_every_symbol_and_are_prefix_free():
    frequencies = {i: i * 3 + 1 for i in range(20)}
    codes = HuffmanTree(frequencies).codes()
    assert set(codes) == set(frequencies)
    assert _is_prefix_free(codes)


def test_codes_satisfy_kraft_equality():
    frequencies = {0: 10, 1: 3, 2: 3, 5: 1, 9: 40}
    codes = HuffmanTree(frequencies).codes()
    assert sum(2 ** -len(code) for code in codes.values()) == 1


def test_more_frequent_symbols_get_shorter_or_equal_codes():
    frequencies = {0: 100, 1: 50, 2: 10, 3: 1}
    codes = HuffmanTree(frequencies).codes()
    lengths = [len(codes[s]) for s in (0, 1, 2, 3)]
    assert lengths == sorted(lengths)


def test_single_symbol_gets_empty_code():
    tree = HuffmanTree({42: 7})
    assert tree.root.is_leaf()
    assert tree.codes() == {42: ""}


def test_empty_frequencies_raise():
    with pytest.raises(ValueError):
        HuffmanTree({})


def test_node_leaf_detection():
    leaf = HuffmanNode(3, 12)
    inner = HuffmanNode(6, left=leaf, right=HuffmanNode(3, 4))
    assert leaf.is_leaf()
    assert not inner.is_leaf()
    assert inner.intensity == -1