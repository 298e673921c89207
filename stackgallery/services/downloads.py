import os
import re

# "48576000 bytes", "1024", "5MB", "1.5 GB"
_SIZE_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(bytes?|b|kb|mb|gb)?\s*$", re.IGNORECASE)
_UNITS = {"": 1, "b": 1, "byte": 1, "bytes": 1, "kb": 1024, "mb": 1024 ** 2, "gb": 1024 ** 3}


def file_extension(path: str) -> str:
    if not path:
        return ""
    ext = os.path.splitext(path.split("?", 1)[0])[1]
    return ext[1:].lower() if ext else ""


def download_confirmation(media_size: str, extension: str) -> str:
    return f"This file is {media_size}. Are you sure you want to download this .{extension} file?"


def parse_size_bytes(size):
    """'48576000 bytes' -> 48576000, '5MB' -> 5242880. Anything else -> None."""
    if size is None or isinstance(size, bool):
        return None
    if isinstance(size, int):
        return size
    m = _SIZE_RE.match(str(size))
    if m is None:
        return None
    return int(float(m.group(1)) * _UNITS[(m.group(2) or "").lower()])


def format_size_bytes(n: int) -> str:
    return f"{n} bytes"
