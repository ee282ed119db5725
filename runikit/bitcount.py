"""Population count for fixed-width unsigned integers."""

SUPPORTED_WIDTHS = (16, 32, 64, 128)


def bitcount(value: int, width: int) -> int:
    """Return the number of set bits in ``value``, an unsigned ``width``-bit integer.

    Raises ValueError if the width is not one of 16, 32, 64 or 128, or if the
    value does not fit in an unsigned integer of that width.
    """
    if width not in SUPPORTED_WIDTHS:
        raise ValueError(f"unsupported width {width}; expected one of {SUPPORTED_WIDTHS}")
    if value < 0 or value >> width:
        raise ValueError(f"{value} does not fit in an unsigned {width}-bit integer")
    return bin(value).count("1")