"""Small formatting helpers used by the document renderer."""

_SIZE_UNITS = ("Bytes", "KB", "MB", "GB")
_SIZE_BASE = 1024


def format_file_size(size_bytes: int) -> str:
    """Format a byte count as a binary-scaled, human-readable string.

    Values are shown with at most two decimals and no trailing zeros,
    e.g. ``1536`` becomes ``"1.5 KB"``. Sizes beyond the gigabyte range
    stay in GB.

    Args:
        size_bytes: Non-negative number of bytes.

    Returns:
        Formatted size string.

    Raises:
        ValueError: If ``size_bytes`` is negative.
    """
    if size_bytes < 0:
        raise ValueError(f"File size cannot be negative: {size_bytes}")
    if size_bytes == 0:
        return "0 Bytes"

    exponent = 0
    while (
        exponent < len(_SIZE_UNITS) - 1
        and size_bytes >= _SIZE_BASE ** (exponent + 1)
    ):
        exponent += 1

    value = f"{size_bytes / _SIZE_BASE**exponent:.2f}".rstrip("0").rstrip(".")
    return f"{value} {_SIZE_UNITS[exponent]}"


def exhibit_label(index: int) -> str:
    """Return the exhibit letter for a zero-based position.

    Labels run A..Z, then AA, AB, ... (spreadsheet-column style), so
    every position gets a distinct label.

    Args:
        index: Zero-based exhibit position.

    Returns:
        Alphabetic exhibit label.
    """
    if index < 0:
        raise ValueError(f"Exhibit index cannot be negative: {index}")

    label = ""
    n = index + 1
    while n > 0:
        n, remainder = divmod(n - 1, 26)
        label = chr(ord("A") + remainder) + label
    return label


def truncate_name(name: str, max_length: int = 30, keep: int = 27) -> str:
    """Shorten a document name for table display.

    Names longer than ``max_length`` are cut to ``keep`` characters and
    suffixed with an ellipsis.
    """
    if len(name) > max_length:
        return name[:keep] + "..."
    return name
