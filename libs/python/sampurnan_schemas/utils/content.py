"""Helpers for the minimal block convention used in post bodies."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..enums import ContentBlockKind

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from ..models.catalog import ContentBlock

HEADING_MARKER = "### "
BLOCK_SEPARATOR = "\n\n"


def parse_content_blocks(content: str | None) -> list["ContentBlock"]:
    """Split post content into paragraphs and headings.

    Blocks are separated by a blank line. A block that starts with ``### `` is
    a heading and the marker is removed from its text. Blocks that are empty
    after trimming are skipped.
    """

    from ..models.catalog import ContentBlock

    if not content:
        return []

    blocks: list[ContentBlock] = []
    normalised = content.replace("\r\n", "\n")
    for raw_block in normalised.split(BLOCK_SEPARATOR):
        block = raw_block.strip("\n")
        if not block.strip():
            continue
        if block.startswith(HEADING_MARKER):
            blocks.append(
                ContentBlock(kind=ContentBlockKind.HEADING, text=block[len(HEADING_MARKER):].strip())
            )
        else:
            blocks.append(ContentBlock(kind=ContentBlockKind.PARAGRAPH, text=block))
    return blocks
