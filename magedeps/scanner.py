"""Template scanner: run the mage-init extractor over a theme or module tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import structlog

from magedeps.config import template_patterns
from magedeps.extractor import parse

log = structlog.get_logger("magedeps.scanner")


@dataclass
class TemplateScan:
    """Dependencies and warnings found in one template file."""

    source_file: str
    dependencies: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def discover_templates(root: Path, patterns: list[str] | None = None) -> list[Path]:
    """Walk *root* and return template files matching *patterns*, in stable order."""
    seen: set[Path] = set()
    matches: list[Path] = []
    for pattern in patterns or template_patterns():
        for hit in sorted(root.glob(pattern)):
            if hit.is_file() and hit not in seen:
                seen.add(hit)
                matches.append(hit)
    return matches


def parse_file(path: Path) -> TemplateScan:
    """Parse a single template file."""
    content = path.read_text(encoding="utf-8", errors="replace")
    result = parse(content)
    return TemplateScan(
        source_file=path.name,
        dependencies=list(result.dependencies),
        warnings=list(result.warnings),
    )


def scan(root: Path, patterns: list[str] | None = None) -> list[TemplateScan]:
    """Scan every template under *root* (no network, no state)."""
    results: list[TemplateScan] = []
    for path in discover_templates(root, patterns):
        scanned = parse_file(path)
        # source_file relative to the scan root
        scanned.source_file = path.relative_to(root).as_posix()
        if scanned.warnings:
            log.warning(
                "scanner.unparsed_fragments",
                source_file=scanned.source_file,
                count=len(scanned.warnings),
            )
        log.debug(
            "scanner.file_parsed",
            source_file=scanned.source_file,
            dependencies=len(scanned.dependencies),
        )
        results.append(scanned)
    return results
