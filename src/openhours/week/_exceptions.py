class FormatError(ValueError):
    """Raised for any malformed opening-hours value."""
