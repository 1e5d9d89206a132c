"""
Bijective numeric codec.
Turns store identifiers into short alphabet strings and back.
"""

from .alphabet import Alphabet
from .bijective import encode, decode
from .seed import seed

__all__ = [
    "Alphabet",
    "encode",
    "decode",
    "seed",
]
