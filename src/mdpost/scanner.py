"""Markdown word counting.

Each prose line is run through an ordered pipeline of regex stages that
strip structural markdown (heading, quote and list prefixes, images, HTML
tags, bare links) before its words are counted. Lines inside fenced code
blocks are kept for output but contribute nothing to the count.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from mdpost.errors import ScanError
from mdpost.models import ScanResult

logger = logging.getLogger(__name__)

FENCE_PATTERN = re.compile(r"^\s*```")


@dataclass(frozen=True)
class SanitizeStage:
    """One pattern -> replacement step of the line sanitizer."""

    name: str
    pattern: re.Pattern[str]
    replacement: str = ""

    def apply(self, line: str) -> str:
        return self.pattern.sub(self.replacement, line)


# Order matters: a link inside an image must go with the image, and
# prefixes are only recognised at the start of the raw line.
SANITIZE_STAGES: tuple[SanitizeStage, ...] = (
    SanitizeStage("prefix", re.compile(r"^\s*(?:(?:#+|>|[0-9]+\.)\s+)+")),
    SanitizeStage("image", re.compile(r"!\[[^\]]*\]\([^)]*\)")),
    SanitizeStage("html", re.compile(r"</?[^>]*>")),
    SanitizeStage("link", re.compile(r"\(https?://[^)]*\)")),
)


def is_fence(line: str) -> bool:
    """Return True if the line opens or closes a fenced code block."""
    return FENCE_PATTERN.match(line) is not None


def sanitize_line(
    line: str, stages: Iterable[SanitizeStage] = SANITIZE_STAGES
) -> str:
    """Strip markdown syntax from a prose line, stage by stage."""
    for stage in stages:
        line = stage.apply(line)
    return line


def count_line_words(line: str) -> int:
    """Count the words left in a prose line after sanitizing."""
    return len(sanitize_line(line).split())


class FenceTracker:
    """Tracks whether the scan is inside a fenced code block.

    ``feed`` is called once per line, in order, and returns whether that
    line is prose that should be counted. Fence marker lines toggle the
    state and are never counted themselves.
    """

    def __init__(self) -> None:
        self.in_code = False

    def feed(self, line: str) -> bool:
        if is_fence(line):
            self.in_code = not self.in_code
            return False
        return not self.in_code


def scan_lines(lines: Iterable[str]) -> ScanResult:
    """Count prose words over a sequence of lines.

    Args:
        lines: Source lines without line terminators.

    Returns:
        ScanResult holding the lines unchanged and the word count.
    """
    tracker = FenceTracker()
    kept: list[str] = []
    total = 0
    for line in lines:
        kept.append(line)
        if tracker.feed(line):
            total += count_line_words(line)

    if tracker.in_code:
        logger.debug("Draft ends inside an unclosed code block")
    return ScanResult(lines=kept, word_count=total)


def scan_file(path: Path) -> ScanResult:
    """Read a markdown draft and count its prose words.

    Raises:
        ScanError: If the file cannot be opened or decoded.
    """
    logger.info("Parsing markdown from %s", path)
    try:
        with open(path, encoding="utf-8") as f:
            result = scan_lines(line.rstrip("\n") for line in f)
    except (OSError, UnicodeDecodeError) as exc:
        raise ScanError(f"Cannot read {path}: {exc}") from exc

    logger.info("Final word count: %d", result.word_count)
    return result
