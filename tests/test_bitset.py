import pytest

from knowhere.bitset import BitsetView


def test_default_view_is_empty():
    view = BitsetView()
    assert view.empty() is True
    assert len(view) == 0
    assert view.byte_size() == 0
    assert view.to_string(0, 10) == ""


def test_byte_size_rounds_up():
    data = bytes(2)
    assert BitsetView(data, 9).byte_size() == 2
    assert BitsetView(data, 8).byte_size() == 1


def test_test_reads_lsb_first():
    view = BitsetView(b"\x01\x80", 16)
    assert view.test(0) is True
    assert view.test(1) is False
    assert view.test(15) is True
    assert view.test(14) is False


def test_to_string_matches_test():
    data = bytes([0b10110010, 0b01100101, 0xFF])
    view = BitsetView(data, 24)
    text = view.to_string(0, 24)
    assert len(text) == 24
    assert all((c == "1") == view.test(i) for i, c in enumerate(text))


def test_to_string_clamps_stop():
    view = BitsetView(b"\xff", 5)
    assert view.to_string(0, 100) == "1" * 5


def test_to_string_subrange():
    data = bytes([0b11001010])
    view = BitsetView(data, 8)
    assert view.to_string(2, 6) == view.to_string(0, 8)[2:6]


@pytest.mark.parametrize("data", [bytes(range(0, 256, 7)), b"\xff" * 17, b"\x00\x01\x03"])
def test_count_matches_rendered_ones(data):
    view = BitsetView(data, len(data) * 8)
    assert view.count() == view.to_string(0, len(view)).count("1")


def test_count_only_looks_at_occupied_bytes():
    view = BitsetView(b"\xff\xff", 8)
    assert view.count() == BitsetView(b"\xff", 8).count()


def test_none_data_is_empty():
    assert BitsetView(None, 5).empty() is True