"""Mage-init extractor: find JavaScript dependencies declared in Magento templates."""

from magedeps.extractor.models import ParseResult
from magedeps.extractor.parser import parse

__all__ = ["ParseResult", "parse"]
