from __future__ import annotations

"""
URL helpers for identifying the remote IDE origin.
"""

import re
from typing import Optional

# Optional scheme, user-info and 'www.' prefix, then everything up to the
# first port separator, path, query or line break
_DOMAIN_RX = re.compile(
    r"^(?:https?://)?(?:[^@\n]+@)?(?:www\.)?([^:/\n?]+)",
    re.IGNORECASE | re.MULTILINE,
)


def get_domain(url: str) -> Optional[str]:
    """
    Extract the domain portion of a URL-like string.

    Best-effort heuristic, not a validating parser. The full first match is
    returned, so a scheme or 'www.' prefix present in the input is kept
    (e.g. 'https://www.example.com:8080/x' -> 'https://www.example.com').

    Args:
        url: URL of the remote client.

    Returns:
        Optional[str]: The matched text, or None when nothing matches.
    """
    match = _DOMAIN_RX.search(url)
    return match.group(0) if match else None
