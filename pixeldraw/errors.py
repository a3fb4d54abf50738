class PixelDrawError(Exception):
    pass


class OutOfBoundsError(PixelDrawError, IndexError):
    pass


class UnknownColorError(PixelDrawError, ValueError):
    pass


class InvalidColorError(UnknownColorError):
    """
    Raised when a stored cell has no entry in the color table at
    serialization time.
    """
    pass
