"""NodeCollector: HTML tokenizer handler that gathers mage-init dependencies."""

from __future__ import annotations

from html.parser import HTMLParser
from typing import Callable

import structlog

from magedeps.exceptions import ExtractionError
from magedeps.extractor.extractors import (
    MAGE_INIT_BINDING,
    extract_data_bind,
    extract_data_mage_init,
    extract_x_magento_init,
)

log = structlog.get_logger("magedeps.collector")

X_MAGENTO_INIT_TYPE = "text/x-magento-init"


class NodeCollector(HTMLParser):
    """Collects every form of mage-init declaration while the document streams by.

    Sources:
        - ``data-mage-init`` attributes
        - the ``mageInit`` Knockout binding inside ``data-bind``
        - ``<script type="text/x-magento-init">`` bodies

    A fragment that fails to parse is recorded verbatim in ``warnings`` and
    never stops the rest of the document from being collected.
    """

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.dependencies: list[str] = []
        self.warnings: list[str] = []
        self.in_script = False
        self.buffer = ""

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        attribs: dict[str, str | None] = {}
        for name, value in attrs:
            attribs.setdefault(name, value)  # first occurrence wins

        data_mage_init = attribs.get("data-mage-init")
        if data_mage_init:
            self._collect(extract_data_mage_init, data_mage_init, source="data-mage-init")

        data_bind = attribs.get("data-bind")
        if data_bind and MAGE_INIT_BINDING in data_bind:
            self._collect(extract_data_bind, data_bind, source="data-bind")

        if tag == "script" and attribs.get("type") == X_MAGENTO_INIT_TYPE:
            self.in_script = True
            self.buffer = ""

    def handle_data(self, data: str) -> None:
        if self.in_script:
            self.buffer += data

    def handle_endtag(self, tag: str) -> None:
        # Any close tag ends the script: x-magento-init bodies hold no markup.
        if not self.in_script:
            return
        self.in_script = False
        self._collect(extract_x_magento_init, self.buffer, source=X_MAGENTO_INIT_TYPE)
        self.buffer = ""

    def _collect(self, extract: Callable[[str], list[str]], fragment: str, source: str) -> None:
        try:
            names = extract(fragment)
        except ExtractionError as exc:
            log.debug(
                "collector.fragment_rejected",
                source=source,
                kind=type(exc).__name__,
                reason=exc.reason,
            )
            self.warnings.append(fragment)
            return
        self.dependencies.extend(names)
