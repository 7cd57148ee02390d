"""Jinja2 filters used by the virtual-host template."""

WWW_PREFIX = "www."
DEFAULT_PAD_WIDTH = 35


def redirect_domain(value: str) -> str:
    """
    Toggle the ``www.`` prefix of a domain.

    ``www.example.com`` becomes ``example.com`` and ``example.com`` becomes
    ``www.example.com``. Only a leading prefix is considered.
    """
    if not isinstance(value, str):
        raise TypeError(
            f"Filter `redirect_domain` expected a string, got {type(value).__name__}"
        )
    if value.startswith(WWW_PREFIX):
        return value[len(WWW_PREFIX):]
    return WWW_PREFIX + value


def pad_right(value: str, width: int = DEFAULT_PAD_WIDTH) -> str:
    """Right-pad ``value`` with spaces to at least ``width`` characters."""
    if not isinstance(value, str):
        raise TypeError(
            f"Filter `pad_right` expected a string, got {type(value).__name__}"
        )
    if isinstance(width, bool) or not isinstance(width, int) or width < 0:
        raise TypeError(f"Filter `pad_right` expected a non-negative width, got {width!r}")
    return value.ljust(width)
