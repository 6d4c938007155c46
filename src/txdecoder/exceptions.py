"""Library errors."""


class DecodeError(ValueError):
    """Raised for input that cannot be decoded at all.

    Classifiers never raise this to signal a non-match; they decline instead.
    """
