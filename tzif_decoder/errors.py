class InvalidTzifFormat(ValueError):
    """
    Raised when a TZif stream violates the format described by RFC 8536.
    """
