"""Short ID generation utility

Short IDs are the first `SHORT_ID_LENGTH` characters of a random UUID4 hex
string, so every ID is drawn from the lowercase hexadecimal alphabet
`0123456789abcdef`.

Collision probability:
    With 6 hex characters there are 16**6 = 16,777,216 possible IDs. By the
    birthday bound, the chance of at least one collision among n mappings is
    roughly 1 - exp(-n**2 / (2 * 16**6)):

        n = 1,000   ->  ~3%
        n = 4,823   ->  ~50%
        n = 10,000  ->  ~95%

    Collisions are not detected. A colliding write overwrites the previous
    mapping for that ID (last write wins).

Example:
    >>> from shortlinks.utils import generate_short_id
    >>> generate_short_id()
    '3f9c1a'
"""

import math
import string
import uuid

from shortlinks.constants import SHORT_ID_LENGTH


ALPHABET = string.digits + 'abcdef'


def generate_short_id(length: int = SHORT_ID_LENGTH) -> str:
    """Generate a random short ID from a truncated UUID4.

    Args:
        length (int, optional):
            Number of leading UUID hex characters to keep. Defaults to 6.

    Returns:
        str: `length` lowercase hexadecimal characters.

    Raises:
        ValueError: If `length` is not within 1..32.
    """
    if not 1 <= length <= 32:
        raise ValueError(f'Short ID length must be between 1 and 32 (given value: {length}).')
    return uuid.uuid4().hex[:length]


def collision_probability(mappings: int, length: int = SHORT_ID_LENGTH) -> float:
    """Approximate chance that `mappings` random short IDs contain a collision."""
    if mappings < 0:
        raise ValueError(f'Number of mappings must be non-negative (given value: {mappings}).')
    space = len(ALPHABET) ** length
    return -math.expm1(-(mappings * (mappings - 1)) / (2 * space))
