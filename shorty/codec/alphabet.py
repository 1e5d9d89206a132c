"""
Alphabet: the ordered digit table of the codec's numeral system.
"""

import re
from typing import Dict

from shorty.exceptions import ConfigurationError, InvalidCharacter


class Alphabet:
    """
    Immutable, duplicate-free sequence of characters.
    
    The position of a character is its digit value, so the length of the
    alphabet is the base of the numeral system. Repeated characters would
    make position lookup ambiguous and are rejected.
    """
    
    __slots__ = ("_chars", "_positions", "_pattern")
    
    def __init__(self, chars: str):
        if not isinstance(chars, str) or not chars:
            raise ConfigurationError("Alphabet must be a non-empty string")
        if len(chars) < 2:
            raise ConfigurationError("Alphabet needs at least 2 characters")
        
        positions: Dict[str, int] = {}
        for index, char in enumerate(chars):
            if char in positions:
                raise ConfigurationError(f"Alphabet has duplicate character {char!r}")
            positions[char] = index
        
        self._chars = chars
        self._positions = positions
        self._pattern = re.compile("[" + "".join(re.escape(c) for c in chars) + "]+")
    
    @property
    def chars(self) -> str:
        return self._chars
    
    @property
    def base(self) -> int:
        return len(self._chars)
    
    def __len__(self) -> int:
        return len(self._chars)
    
    def __getitem__(self, index: int) -> str:
        return self._chars[index]
    
    def __repr__(self) -> str:
        return f"Alphabet({self._chars!r})"
    
    def position(self, char: str, code: str = "") -> int:
        """Digit value of char; raises InvalidCharacter if it is not in the alphabet"""
        try:
            return self._positions[char]
        except KeyError:
            raise InvalidCharacter(char, code or char) from None
    
    def matches(self, code: str) -> bool:
        """True if code is non-empty and made only of alphabet characters"""
        return self._pattern.fullmatch(code) is not None
