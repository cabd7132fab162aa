"""
Bit-level primitives over 32-bit cell masks.

Cells are 1-indexed: cell ``i`` lives at bit value ``1 << (i - 1)``.
Board cells are 1..30; bits 31 and 32 are reserved and stay zero.
"""

from typing import Iterable, Iterator

from senet.exceptions import InvalidCellError, InvalidMaskError

MASK_BITS = 32
CELL_COUNT = 30

WORD_MASK = (1 << MASK_BITS) - 1
BOARD_MASK = (1 << CELL_COUNT) - 1


def _bit(i: int) -> int:
    # Index 0 would shift by -1.
    if not 1 <= i <= MASK_BITS:
        raise InvalidCellError(f"Bit index must be in 1..{MASK_BITS}, got {i}")
    return 1 << (i - 1)


def test_bit(mask: int, i: int) -> bool:
    """Return True if bit ``i`` of ``mask`` is set."""
    return bool(mask & _bit(i))


# Keep pytest from collecting this when a test module imports it.
test_bit.__test__ = False


def set_bit(mask: int, i: int, value: bool) -> int:
    """Return ``mask`` with bit ``i`` set to ``value``; other bits unchanged."""
    if value:
        return mask | _bit(i)
    return mask & ~_bit(i) & WORD_MASK


def is_board_cell(i: int) -> bool:
    return 1 <= i <= CELL_COUNT


def bits_of(mask: int) -> Iterator[int]:
    """Yield the set cell indices of ``mask`` in ascending order."""
    for i in range(1, MASK_BITS + 1):
        if mask & (1 << (i - 1)):
            yield i


def mask_of(cells: Iterable[int]) -> int:
    """Build a mask with the given cells set."""
    mask = 0
    for cell in cells:
        mask = set_bit(mask, cell, True)
    return mask


def check_mask(mask: int, name: str = "mask") -> int:
    """
    Ensure ``mask`` only uses board bits.

    Raises:
        InvalidMaskError: if the value is negative, wider than 32 bits,
            or sets one of the reserved bits 31-32.
    """
    if mask < 0 or mask > WORD_MASK:
        raise InvalidMaskError(f"{name} does not fit in {MASK_BITS} bits: {mask}")
    if mask & ~BOARD_MASK:
        raise InvalidMaskError(f"{name} sets reserved bits: {mask:#034b}")
    return mask
