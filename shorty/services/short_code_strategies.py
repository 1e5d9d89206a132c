"""
Short code strategies for the shortener.
Uses Strategy Pattern so the service does not care whether salting is on.
"""

import logging
from abc import ABC, abstractmethod

from shorty.codec import Alphabet, encode, decode, seed
from shorty.exceptions import MalformedCode
from shorty.storage.strategies import MAX_LINK_ID

logger = logging.getLogger(__name__)


class ShortCodeStrategy(ABC):
    """
    Abstract base class for short code strategies.
    
    A strategy is immutable after construction and safe to share between
    concurrently handled requests.
    """
    
    def __init__(self, alphabet: Alphabet):
        self.alphabet = alphabet
        self.max_code_length = len(encode(self._largest_value(), alphabet))
    
    def _largest_value(self) -> int:
        """Largest number a code for a storable identifier can decode to"""
        return MAX_LINK_ID
    
    def _check_length(self, code: str) -> None:
        if not code:
            raise MalformedCode(code, "empty code")
        if len(code) > self.max_code_length:
            raise MalformedCode(code, f"longer than {self.max_code_length} characters")
    
    @abstractmethod
    def encode_identifier(self, identifier: int) -> str:
        """
        Render a store identifier as a short code.
        
        Args:
            identifier: Non-negative store-assigned ID
            
        Returns:
            Short code over the alphabet
        """
        pass
    
    @abstractmethod
    def decode_code(self, code: str) -> int:
        """
        Recover the store identifier from a short code.
        
        Raises:
            InvalidCharacter: code holds a character outside the alphabet
            MalformedCode: code does not carry an identifier
        """
        pass


class PlainShortCodeStrategy(ShortCodeStrategy):
    """
    Identifier encoded directly in the alphabet's base.
    
    Pros: Shortest codes, no hashing
    Cons: Sequential IDs give visibly sequential codes
    """
    
    def encode_identifier(self, identifier: int) -> str:
        return encode(identifier, self.alphabet)
    
    def decode_code(self, code: str) -> int:
        self._check_length(code)
        return decode(code, self.alphabet)


class SaltedShortCodeStrategy(ShortCodeStrategy):
    """
    Identifier prefixed with salt-derived seed digits, then encoded.
    
    Process:
    1. digits = seed(id, salt, padding)
    2. composite = int(digits + str(id))
    3. code = encode(composite)
    
    The seed is a decimal prefix rather than an arithmetic offset, so
    decoding strips a fixed number of leading digits regardless of the
    seed's value.
    """
    
    def __init__(self, alphabet: Alphabet, salt: str, padding: int):
        self.salt = salt
        self.padding = padding
        super().__init__(alphabet)
    
    def _largest_value(self) -> int:
        return int("9" * self.padding + str(MAX_LINK_ID))
    
    def encode_identifier(self, identifier: int) -> str:
        if identifier < 0:
            raise ValueError(f"Cannot encode negative identifier {identifier}")
        composite = int(seed(identifier, self.salt, self.padding) + str(identifier))
        return encode(composite, self.alphabet)
    
    def decode_code(self, code: str) -> int:
        self._check_length(code)
        
        try:
            digits = str(decode(code, self.alphabet))
        except ValueError:
            raise MalformedCode(code, "too many decimal digits") from None
        remainder = digits[self.padding:]
        if not remainder:
            raise MalformedCode(code, f"fewer than {self.padding + 1} decimal digits")
        
        return int(remainder)
