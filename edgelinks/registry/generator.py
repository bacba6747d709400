"""Random identifier generation

This module provides a helper function for generating short random
identifiers from an alphabet without visually ambiguous glyphs.

Functions:
    generate_identifier(length=6, alphabet=SAFE_ALPHABET):
        Generate a random identifier suitable for use as a URL slug.

Example:
    >>> from edgelinks.registry import generate_identifier
    >>> generate_identifier()
    'k7QmVa'
"""

import secrets

from edgelinks.constants import Identifier


SAFE_ALPHABET = Identifier.SAFE_ALPHABET


def generate_identifier(length: int = Identifier.RANDOM_LENGTH, alphabet: str = SAFE_ALPHABET) -> str:
    """Generate a random identifier.

    Every character is drawn independently and uniformly from `alphabet`
    using the `secrets` CSPRNG, so identifiers cannot be predicted from
    previously issued ones.

    Args:
        length (int, optional):
            Number of characters. Defaults to 6.

        alphabet (str, optional):
            Characters to draw from. Defaults to the 57-character safe
            alphabet (no 0/O, 1/l/I).

    Returns:
        str: A random identifier of exactly `length` characters.

    NOTE:
        - The generator keeps no record of issued identifiers and performs
          no collision check. Uniqueness is enforced by the registry through
          the store's conditional write.
        - With 57^6 (~3.4e10) possible identifiers, collisions stay rare
          until the namespace holds millions of random links.
    """
    if not isinstance(length, int):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length < 1:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')
    if not isinstance(alphabet, str):
        raise TypeError(f'Alphabet must be of type string (given type: {type(alphabet)}).')
    if not alphabet:
        raise ValueError('Alphabet must be a non-empty string.')

    return ''.join(secrets.choice(alphabet) for _ in range(length))
