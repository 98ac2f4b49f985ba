"""Top-level entry point: template text in, mage-init dependencies out."""

from __future__ import annotations

from magedeps.extractor.collector import NodeCollector
from magedeps.extractor.models import ParseResult
from magedeps.extractor.sanitizer import replace_php_delimiters


def parse(document_text: str) -> ParseResult:
    """Return every JavaScript dependency declared in a ``.phtml``/``.html`` template.

    Sources are ``data-mage-init`` attributes, the ``mageInit`` Knockout
    binding and ``text/x-magento-init`` scripts. ``require()`` and
    ``define()`` calls are not followed.

    See https://devdocs.magento.com/guides/v2.3/javascript-dev-guide/javascript/js_init.html
    """
    collector = NodeCollector()
    collector.feed(replace_php_delimiters(document_text))
    collector.close()
    return ParseResult(
        dependencies=tuple(collector.dependencies),
        warnings=tuple(collector.warnings),
    )
