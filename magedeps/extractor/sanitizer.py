"""PHP delimiter sanitizer.

Magento templates often open an HTML attribute with a single quote and then
use a single quote again inside ``<?= ?>`` tags, which ends the attribute
early as far as an HTML tokenizer is concerned. Replacing every PHP span with
an inert token before tokenizing keeps attribute boundaries intact.
"""

from __future__ import annotations

import re

PHP_DELIM_PLACEHOLDER = "PHP_DELIM_PLACEHOLDER"

# Non-greedy: a span ends at its own first "?>". Unterminated spans never match.
_PHP_DELIM_RE = re.compile(r"<\?(?:=|php)[\s\S]+?\?>")


def replace_php_delimiters(text: str) -> str:
    """Replace each ``<?= ... ?>`` / ``<?php ... ?>`` span with a placeholder."""
    return _PHP_DELIM_RE.sub(PHP_DELIM_PLACEHOLDER, text)
