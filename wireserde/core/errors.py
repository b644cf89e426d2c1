class SerializationError(ValueError):
    """
    Raised when a value cannot be turned into bytes, or bytes cannot be
    turned back into a value.

    There is no contract on the message: callers should only rely on the
    exception type. When the failure originates in a lower-level
    mechanism (struct, text codecs, uuid parsing) the underlying error is
    chained as ``__cause__``.
    """
