"""The Hessian null value."""

BC_NULL = 0x4E


def encode_null() -> bytes:
    """Return the encoding of null."""
    return bytes([BC_NULL])


def is_null(data: bytes) -> bool:
    """Tell whether ``data`` starts with an encoded null."""
    return data[:1] == bytes([BC_NULL])