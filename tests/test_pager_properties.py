"""Whole-stream properties of word wrapping and paging."""

import io
import random

import pytest

from wordpager.buffer import CircularBuffer
from wordpager.constants import PagerConstants
from wordpager.lines import LineAssembler
from wordpager.renderer import PageRenderer, PageStatus
from wordpager.scanner import WordScanner
from wordpager.session import PagerSession

DELIMITERS = PagerConstants.DELIMITERS


def sample_text(seed: int, length: int = 3000, line_width: int = 10) -> bytes:
    """Random text with short words, long words, CRs and runs of whitespace."""
    rng = random.Random(seed)
    pieces = []
    size = 0
    while size < length:
        roll = rng.random()
        if roll < 0.08:
            word = b"L" * rng.randint(line_width + 1, line_width * 4)
        elif roll < 0.12:
            word = b"dos\r"
        else:
            word = b"w" * rng.randint(1, line_width)
        delimiter = rng.choice([b" ", b" ", b" ", b"\t", b"\n", b"  ", b"\n\n"])
        pieces.append(word + delimiter)
        size += len(word) + len(delimiter)
    # No trailing delimiter on the last word
    return b"".join(pieces).rstrip(b" \t\n")


def collect_lines(data: bytes, line_width: int, capacity: int, chunk_size=None, make_source=None):
    if make_source is not None:
        source = make_source(data, chunk_size=chunk_size)
    else:
        source = io.BytesIO(data)
    assembler = LineAssembler(WordScanner(CircularBuffer(source, capacity)), line_width)
    return list(assembler.iter_lines())


def words_of(data: bytes) -> list[bytes]:
    words, current = [], bytearray()
    for byte in data:
        if byte in DELIMITERS:
            if current:
                words.append(bytes(current))
            current = bytearray()
        else:
            current.append(byte)
    if current:
        words.append(bytes(current))
    return words


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_lossless_reconstruction(seed):
    """Joining the lines without added line feeds gives back the input."""
    data = sample_text(seed)
    lines = collect_lines(data, line_width=10, capacity=11)
    assert b"".join(lines) == data


@pytest.mark.parametrize("seed", [4, 5])
def test_visible_width_bound(seed):
    """Visible line content fits the width unless it is a single long word.

    Only the content before the final delimiter is measured, so a line may be
    one byte wider than the width when it ends with a space or tab.
    """
    data = sample_text(seed)
    for line in collect_lines(data, line_width=10, capacity=33):
        content = line[:-1] if line[-1] in DELIMITERS else line
        if len(content) > 10:
            assert not any(byte in DELIMITERS for byte in content), line


def test_overlong_words_intact():
    """Every word wider than a line appears once, whole, as its own line."""
    data = sample_text(6)
    long_words = [w for w in words_of(data) if len(w) > 10]
    assert long_words
    long_lines = [
        line.rstrip(b" \t\n") for line in collect_lines(data, line_width=10, capacity=11)
        if len(line.rstrip(b" \t\n")) > 10
    ]
    assert long_lines == long_words


@pytest.mark.parametrize("capacity,chunk_size", [
    (11, None),
    (12, 1),
    (17, 3),
    (64, 7),
    (1000, None),
])
def test_buffer_size_is_not_observable(capacity, chunk_size, make_source):
    """Capacity and short reads do not change the lines produced."""
    data = sample_text(7)
    expected = collect_lines(data, line_width=10, capacity=4096)
    assert collect_lines(data, 10, capacity, chunk_size, make_source) == expected


def test_default_dimensions_lossless_across_capacities():
    data = sample_text(8, length=6000, line_width=80).replace(b"w", b"word")
    reference = collect_lines(data, PagerConstants.LINE_WIDTH, PagerConstants.BUFFER_SIZE)
    assert b"".join(reference) == data
    assert collect_lines(data, PagerConstants.LINE_WIDTH, 81) == reference


def test_exact_page_size():
    """Every page but the last has exactly page_size lines."""
    data = sample_text(9, length=2000)
    out = io.BytesIO()
    session = PagerSession(io.BytesIO(data), out, line_width=10, page_size=7)
    sizes = []
    status = PageStatus.MORE
    while status == PageStatus.MORE:
        before = len(out.getvalue())
        status = session.renderer.render_page()
        sizes.append(out.getvalue()[before:].count(b"\n"))
    assert status == PageStatus.END_OF_STREAM
    assert out.getvalue().endswith(PagerConstants.EOF_SENTINEL)
    assert all(size == 7 for size in sizes[:-1])
    # Last page: its lines plus the sentinel line
    assert 1 <= sizes[-1] <= 8


def test_rendered_output_strips_back_to_input():
    """Removing the line feeds the renderer added recovers the input bytes."""
    data = b"alpha beta gamma\ndelta\r\nepsilon zeta eta theta iota kappa"
    out = io.BytesIO()
    lines = collect_lines(data, line_width=10, capacity=11)
    renderer = PageRenderer(
        LineAssembler(WordScanner(CircularBuffer(io.BytesIO(data), 11)), 10), out, page_size=100
    )
    renderer.render_page()
    rendered = out.getvalue()[:-len(PagerConstants.EOF_SENTINEL)]
    rebuilt = b"".join(line if line.endswith(b"\n") else line + b"\n" for line in lines)
    assert rendered == rebuilt
    assert b"".join(lines) == data
