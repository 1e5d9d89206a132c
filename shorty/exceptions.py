"""
Error taxonomy for the shortener.

Decode-path errors (InvalidCharacter, MalformedCode) are collapsed into
NotFound by the service layer, so callers never learn whether a code was
malformed or simply unknown.
"""


class ShortyError(Exception):
    """Base class for all shortener errors"""


class ConfigurationError(ShortyError):
    """Invalid alphabet, salt or padding. Fatal at startup."""


class CodeError(ShortyError):
    """A short code could not be turned back into an identifier"""


class InvalidCharacter(CodeError):
    """The code contains a character that is not part of the alphabet"""

    def __init__(self, char: str, code: str):
        self.char = char
        self.code = code
        super().__init__(f"Character {char!r} in {code!r} is not in the alphabet")


class MalformedCode(CodeError):
    """The decoded value does not carry a usable identifier"""

    def __init__(self, code: str, reason: str = "no identifier digits"):
        self.code = code
        super().__init__(f"Malformed short code {code!r}: {reason}")


class DuplicateUrl(ShortyError):
    """A store insert lost the race against another insert of the same URL"""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"URL already stored: {url}")


class NotFound(ShortyError):
    """No record matches the given short code"""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Short code not found: {code}")
