"""Human-readable rendering of candidate name lists."""

from __future__ import annotations

from collections.abc import Sequence


def format_name_variants(names: Sequence[str]) -> str:
    """Quote and join names as `'a'`, `'a' or 'b'`, `'a', 'b' or 'c'`."""
    if not names:
        raise ValueError("At least one name is required")
    quoted = [f"'{name}'" for name in names]
    if len(quoted) == 1:
        return quoted[0]
    return f"{', '.join(quoted[:-1])} or {quoted[-1]}"
