"""Key candidate validation."""

import re

# ns_part(.key_part)+ where each part is lowercase alphanumerics joined by "_"
KEY_CANDIDATE_PATTERN = re.compile(r"[a-z0-9]+(?:_[a-z0-9]+)*(?:\.[a-z0-9]+(?:_[a-z0-9]+)*)+")


def is_candidate_key(text) -> bool:
    """Check whether ``text`` looks like a translation key.

    Example:
        >>> is_candidate_key("ns_a.key_b")
        True
        >>> is_candidate_key("NoDotHere")
        False
    """
    if not text:
        return False
    return KEY_CANDIDATE_PATTERN.fullmatch(str(text)) is not None
