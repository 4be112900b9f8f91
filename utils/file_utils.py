# utils/file_utils.py

"""File and path helpers shared by the CLI and the extractor."""
from datetime import datetime as dt, timezone

from core.errors import UnsafeEntryName

_FORBIDDEN_COMPONENTS = {"", ".", ".."}


def format_size(size_bytes: int) -> str:
    """Formats bytes into a human-readable string (KB, MB, GB)."""
    if size_bytes < 1024:
        return f"{size_bytes} B"
    size = float(size_bytes)
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size < 1024.0:
            return f"{size:.1f} {unit}"
        size /= 1024.0
    return f"{size:.1f} PB"


def format_timestamp(timestamp: int) -> str:
    """Renders a REZ u32 timestamp (Unix seconds) as UTC ISO-8601."""
    return dt.fromtimestamp(timestamp, tz=timezone.utc).isoformat()


def parse_size(size_str: str) -> int:
    """Parse size string like '64KB', '4MB' to bytes."""
    size_str = size_str.strip().upper()
    multipliers = {'KB': 1024, 'MB': 1024**2, 'GB': 1024**3, 'K': 1024, 'M': 1024**2, 'G': 1024**3, 'B': 1}
    for unit in sorted(multipliers, key=len, reverse=True):
        if size_str.endswith(unit):
            number = size_str[:-len(unit)].strip()
            break
    else:
        unit, number = 'B', size_str
    try:
        value = int(float(number) * multipliers[unit])
    except ValueError:
        raise ValueError(f"Invalid size format: {size_str}") from None
    if value <= 0:
        raise ValueError(f"Size must be positive: {size_str}")
    return value


def safe_component(name: str) -> str:
    """Returns ``name`` if it can be used as a single path component."""
    if name in _FORBIDDEN_COMPONENTS or "/" in name or "\\" in name or "\x00" in name:
        raise UnsafeEntryName(name)
    return name
