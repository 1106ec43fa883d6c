"""
PluginUpdater Client - Version Comparison

Orders version strings by their dot-separated numeric segments.
A version with fewer segments is padded with zeros, so "1.1" == "1.1.0".
Non-numeric segments (e.g. "beta") sort below any numeric segment and
compare lexically against each other.

Author: PluginUpdater Project
"""

import re
from itertools import zip_longest
from typing import List, Union

Segment = Union[int, str]


def parse_version(version: str) -> List[Segment]:
    """
    Split a version string into comparable segments.

    Args:
        version: Version string (e.g., "1.10.0", "v2.0-rc1")

    Returns:
        List of int (numeric) and str (lowercased) segments
    """
    version = (version or "").strip()
    if version[:1] in ("v", "V"):
        version = version[1:]

    segments: List[Segment] = []
    for chunk in re.split(r"[.\-+_]", version):
        if not chunk:
            continue
        if chunk.isdigit():
            segments.append(int(chunk))
        else:
            segments.append(chunk.lower())
    return segments


def compare_versions(left: str, right: str) -> int:
    """
    Compare two version strings.

    Args:
        left: First version
        right: Second version

    Returns:
        -1 if left < right, 0 if equal, 1 if left > right
    """
    for a, b in zip_longest(parse_version(left), parse_version(right), fillvalue=0):
        if a == b:
            continue
        if isinstance(a, int) and isinstance(b, int):
            return -1 if a < b else 1
        # Release segments outrank pre-release labels
        if isinstance(a, int):
            return 1
        if isinstance(b, int):
            return -1
        return -1 if a < b else 1
    return 0


def is_version_newer(current: str, candidate: str) -> bool:
    """
    Return True if candidate is strictly newer than current.

    An empty candidate is never newer.
    """
    if not parse_version(candidate):
        return False
    return compare_versions(current, candidate) < 0
