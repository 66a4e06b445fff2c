"""
Utility Functions
Helper functions for shaping API parameters.
"""

from typing import Any, Dict, List


def as_list(value) -> List[Any]:
    """
    Normalize a single id or an iterable of ids to a list.

    Args:
        value: One id, or a list/tuple/set of ids

    Returns:
        List of ids
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return list(value)
    return [value]


def merge_params(defaults: Dict[str, Any], overrides: Dict[str, Any] = None) -> Dict[str, Any]:
    """Return ``defaults`` updated with ``overrides``, dropping keys whose value is None."""
    params = dict(defaults)
    if overrides:
        params.update(overrides)
    return {k: v for k, v in params.items() if v is not None}


def encode_bools(params: Dict[str, Any]) -> Dict[str, Any]:
    """v1.1 expects ``true``/``false`` literals rather than Python's ``True``/``False``."""
    return {k: (str(v).lower() if isinstance(v, bool) else v) for k, v in params.items()}


def validate_tweet_text(text: str, max_length: int = 280) -> bool:
    """
    Validate tweet text.

    Args:
        text: Tweet text to validate
        max_length: Maximum allowed length

    Returns:
        True if valid, False otherwise
    """
    if not isinstance(text, str):
        return False
    if len(text) == 0 or len(text) > max_length:
        return False
    return True
