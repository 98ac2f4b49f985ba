"""magedeps: list the JavaScript modules Magento templates initialise."""

from magedeps.extractor import ParseResult, parse
from magedeps.scanner import TemplateScan, scan

__all__ = ["ParseResult", "TemplateScan", "parse", "scan"]
