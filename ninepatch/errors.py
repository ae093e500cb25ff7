"""
Errors raised while decoding, encoding or extracting nine-patch chunks.

All of them are local to a single call. Callers that need a chunk no matter
what catch NinePatchError at the classification boundary and fall back to
an empty chunk.
"""


class NinePatchError(Exception):
    """Base error for all chunk operations."""

    pass


class NotSerializedError(NinePatchError):
    """Raised when the chunk header says the chunk was never serialized."""

    pass


class DivLengthError(NinePatchError):
    """Raised when no stretchable region exists on an axis."""

    pass


class DivCountError(DivLengthError):
    """Raised when a header div count is zero or odd."""

    pass


class WrongPaddingError(NinePatchError):
    """Raised when the padding markers cannot be turned into a padding."""

    pass


class PaddingAmbiguityError(WrongPaddingError):
    """Raised when a padding border line holds more than one marker run."""

    pass


class TruncatedInputError(NinePatchError):
    """Raised when a buffer is shorter than its own header implies."""

    pass


class ChunkEncodingError(NinePatchError, ValueError):
    """Raised when a chunk cannot be represented in the binary format."""

    pass
