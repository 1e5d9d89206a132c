"""
Base-b positional encoding with the alphabet as the digit table.

encode() maps {0, 1, 2, ...} onto the non-empty strings over the alphabet
that do not start with the zeroth character, plus the single zeroth
character itself for 0. decode() is its inverse on that image.
"""

from typing import Union

from .alphabet import Alphabet


def _as_alphabet(alphabet: Union[Alphabet, str]) -> Alphabet:
    return alphabet if isinstance(alphabet, Alphabet) else Alphabet(alphabet)


def encode(n: int, alphabet: Union[Alphabet, str]) -> str:
    """
    Encode a non-negative integer as a string over the alphabet.
    
    Example with alphabet "abc": 0 -> "a", 3 -> "ba", 10 -> "bab".
    
    Raises:
        ValueError: if n is negative
    """
    if n < 0:
        raise ValueError(f"Cannot encode negative number {n}")
    
    alphabet = _as_alphabet(alphabet)
    base = alphabet.base
    
    if n < base:
        return alphabet[n]
    
    digits = []
    while n > 0:
        n, remainder = divmod(n, base)
        digits.append(alphabet[remainder])
    
    return "".join(reversed(digits))


def decode(code: str, alphabet: Union[Alphabet, str]) -> int:
    """
    Decode a string over the alphabet back to an integer.
    
    Strings outside encode()'s image (e.g. with leading zeroth characters)
    still decode to a number; callers must treat the result as untrusted.
    
    Raises:
        InvalidCharacter: if code holds a character outside the alphabet
    """
    alphabet = _as_alphabet(alphabet)
    base = alphabet.base
    
    n = 0
    for char in code:
        n = n * base + alphabet.position(char, code)
    
    return n
