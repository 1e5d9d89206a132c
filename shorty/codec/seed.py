"""
Salt-derived seed digits.

The seed is a deterministic p-digit decimal string derived from an
identifier and a salt. It is prepended to the identifier's decimal form
before encoding so that consecutive identifiers produce unrelated codes.
This is obfuscation only; anyone holding the salt can reproduce it.
"""

import hashlib


def seed(n: int, salt: str, padding: int) -> str:
    """
    Return exactly `padding` decimal digits derived from (n, salt).
    
    Steps:
    1. MD5 of decimal(n) + salt
    2. First `padding` hex characters, read as an integer
    3. Reduce modulo 10**padding; a zero result becomes 1
    4. Pad with '0' on the right up to `padding` digits
    
    The value is at least 1 and the zero padding goes to the right, so the
    first digit is never '0'. That keeps every digit when the seed and the
    identifier are later concatenated and parsed as one integer.
    """
    if padding <= 0:
        raise ValueError(f"Seed padding must be positive, got {padding}")
    
    digest = hashlib.md5(f"{n}{salt}".encode("utf-8")).hexdigest()
    value = int(digest[:padding], 16) % (10 ** padding)
    if value == 0:
        value = 1
    
    return str(value).ljust(padding, "0")
