"""Environment-driven settings."""

from __future__ import annotations

import os

DEFAULT_TEMPLATE_PATTERNS = ["**/*.phtml", "**/*.html"]


def template_patterns() -> list[str]:
    """Glob patterns for template discovery.

    ``MAGEDEPS_TEMPLATE_PATTERNS`` is a comma-separated list; blank or unset
    falls back to :data:`DEFAULT_TEMPLATE_PATTERNS`.
    """
    raw = os.environ.get("MAGEDEPS_TEMPLATE_PATTERNS", "")
    patterns = [p.strip() for p in raw.split(",") if p.strip()]
    return patterns or list(DEFAULT_TEMPLATE_PATTERNS)
