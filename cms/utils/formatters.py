"""
Formatting utilities for display and conversion.
"""
from datetime import datetime
from typing import Optional

import markdown


def render_markdown(text: str) -> str:
    """
    Convert markdown source to an HTML fragment.

    Args:
        text: Markdown source

    Returns:
        HTML string (not a full page)
    """
    return markdown.markdown(text, extensions=['fenced_code', 'tables'])


def format_timestamp(timestamp: Optional[float], fmt: str = '%Y-%m-%d %H:%M:%S') -> str:
    """
    Format a filesystem modification time for display.

    Args:
        timestamp: Seconds since epoch
        fmt: strftime format

    Returns:
        Formatted local time, or 'N/A' when no timestamp is known
    """
    if not timestamp:
        return 'N/A'
    return datetime.fromtimestamp(timestamp).strftime(fmt)


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in bytes to human-readable string.

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted size string (e.g., "1.5 MB")
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    elif size_bytes < 1024 * 1024 * 1024:
        return f"{size_bytes / (1024 * 1024):.1f} MB"
    else:
        return f"{size_bytes / (1024 * 1024 * 1024):.2f} GB"
