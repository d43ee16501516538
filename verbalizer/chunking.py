"""
Positional digit-group segmentation shared by every language.

The segmenter knows nothing about grammar: it peels digit groups off the
least-significant end of an integer digit string. Western languages use
groups of 3, the myriad languages (Chinese, Japanese, Korean) groups of 4,
Thai groups of 6 (one ล้าน each) and Hindi a first group of 3 followed by
groups of 2 (hazaar, lakh, crore, ...).
"""

from __future__ import annotations

from .models import Chunk


def segment(integer_digits: str, width: int, first_width: int | None = None) -> list[Chunk]:
    """Split an integer digit string into chunks, most-significant first.

    Args:
        integer_digits: e.g. "1234567"
        width: digits per group, e.g. 3
        first_width: width of the lowest (units) group, if different

    Returns:
        [Chunk(1, 2, "1"), Chunk(234, 1, "234"), Chunk(567, 0, "567")]

    Zero groups are kept: the assembler decides whether to skip them.

    Raises:
        ValueError: on an empty/non-digit string or a non-positive width.
    """
    if not integer_digits or not integer_digits.isascii() or not integer_digits.isdigit():
        raise ValueError(f"Expected a non-empty digit string, got {integer_digits!r}")
    if width < 1 or (first_width is not None and first_width < 1):
        raise ValueError(f"Group widths must be positive, got {width}/{first_width}")

    chunks: list[Chunk] = []
    remaining = integer_digits
    position = 0
    peel = first_width or width

    while remaining:
        digits = remaining[-peel:]
        remaining = remaining[:-peel]
        chunks.append(Chunk(value=int(digits), position=position, digits=digits))
        position += 1
        peel = width

    chunks.reverse()
    return chunks
