import pytest

from backend.app.core.errors import RandomSourceError
from backend.app.services.ids import ALPHABET, ID_LENGTH, generate_id


def _feed(data: bytes):
    """read_random stand-in that serves `data` in the requested batch sizes."""
    calls = []
    pos = 0

    def read(n):
        nonlocal pos
        calls.append(n)
        chunk = data[pos:pos + n]
        pos += n
        return chunk

    return read, calls


def test_alphabet_is_62_alphanumerics():
    assert len(ALPHABET) == 62
    assert len(set(ALPHABET)) == 62
    assert ALPHABET.isalnum() and ALPHABET.isascii()


def test_generated_ids_have_fixed_length_and_alphabet():
    for _ in range(500):
        job_id = generate_id()
        assert len(job_id) == ID_LENGTH == 8
        assert set(job_id) <= set(ALPHABET)


def test_ids_differ_between_calls():
    ids = {generate_id() for _ in range(200)}
    assert len(ids) == 200


def test_bytes_at_or_above_248_are_rejected():
    first = bytes([248, 255, 0, 1, 61, 62, 247, 250, 2, 3])
    second = bytes([4, 5, 6, 7, 8, 9, 10, 11, 12, 13])
    read, calls = _feed(first + second)

    assert generate_id(read_random=read) == "AB9A9CDE"
    # batches are a quarter larger than the ID
    assert calls == [10, 10]


def test_only_rejected_bytes_keeps_reading():
    read, calls = _feed(bytes([250] * 10) + bytes(range(10)))
    assert generate_id(read_random=read) == "ABCDEFGH"
    assert len(calls) == 2


def test_random_source_failure():
    def broken(n):
        raise OSError("no entropy")

    with pytest.raises(RandomSourceError, match="no entropy"):
        generate_id(read_random=broken)
