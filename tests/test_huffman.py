import pytest

from dskit.huffman import HuffmanCoding

SYMBOLS = "ABCDEFGH"
WEIGHTS = [5, 29, 7, 8, 14, 23, 3, 11]


def test_two_symbols():
    coding = HuffmanCoding("ab", [1, 2])
    assert coding.codes() == {"a": "0", "b": "1"}


def test_ties_prefer_lower_order():
    coding = HuffmanCoding("abc", [1, 1, 2])
    assert coding.codes() == {"a": "10", "b": "11", "c": "0"}


def test_tree_shape_invariants():
    coding = HuffmanCoding(SYMBOLS, WEIGHTS)
    assert len(coding.nodes) == 2 * len(SYMBOLS) - 1
    root = coding.nodes[coding.root - 1]
    assert root.weight == sum(WEIGHTS)
    assert root.parent == 0
    parents = [node.parent for node in coding.nodes[:-1]]
    assert all(p > 0 for p in parents)


def test_codes_are_prefix_free_and_complete():
    codes = HuffmanCoding(SYMBOLS, WEIGHTS).codes()
    assert list(codes) == list(SYMBOLS)
    values = list(codes.values())
    for a in values:
        for b in values:
            if a is not b:
                assert not b.startswith(a)
    assert sum(2 ** -len(code) for code in values) == 1


def test_heavier_symbols_get_no_longer_codes():
    codes = HuffmanCoding(SYMBOLS, WEIGHTS).codes()
    pairs = sorted(zip(WEIGHTS, SYMBOLS))
    lengths = [len(codes[s]) for _, s in pairs]
    assert lengths == sorted(lengths, reverse=True)


def test_round_trip():
    coding = HuffmanCoding(SYMBOLS, WEIGHTS)
    text = "BADFACEGHB"
    bits = coding.encode(text)
    assert set(bits) <= {"0", "1"}
    assert coding.decode(bits) == text


def test_encode_unknown_symbol():
    with pytest.raises(ValueError):
        HuffmanCoding("ab", [1, 2]).encode("abz")


def test_decode_errors():
    coding = HuffmanCoding(SYMBOLS, WEIGHTS)
    with pytest.raises(ValueError):
        coding.decode("0120")
    longest = max(coding.codes().values(), key=len)
    with pytest.raises(ValueError):
        coding.decode(longest[:-1])


@pytest.mark.parametrize(
    "symbols, weights",
    [("a", [1]), ("ab", [1]), ("aa", [1, 2]), ("ab", [1, -2])],
)
def test_construction_errors(symbols, weights):
    with pytest.raises(ValueError):
        HuffmanCoding(symbols, weights)


def test_tables():
    coding = HuffmanCoding(SYMBOLS, WEIGHTS)
    tree_lines = coding.tree_table().splitlines()
    assert tree_lines[0] == "   ch    order   weight  parent  lchild  rchild "
    assert len(tree_lines) == len(coding.nodes) + 1
    code_lines = coding.code_table().splitlines()
    assert code_lines[0] == "   ch    order   weight           Code  "
    assert len(code_lines) == len(SYMBOLS) + 1
    for line, (symbol, code) in zip(code_lines[1:], coding.codes().items()):
        assert line.split()[0] == symbol
        assert line.split()[-1] == code