"""Replace generated blocks inside markdown documents."""

from __future__ import annotations

import re

from mdblocks.markers import MarkerSet
from mdblocks.schemas import RewriteResult


def region_pattern(markers: MarkerSet) -> re.Pattern[str]:
    """Match the shortest span from a begin marker to the next end marker."""
    return re.compile(
        rf"{re.escape(markers.begin)}.*?{re.escape(markers.end)}",
        re.DOTALL,
    )


def rewrite_block(text: str, block: str, markers: MarkerSet) -> RewriteResult:
    """Insert or refresh a generated block.

    The first single-use marker, if any, is replaced by ``block``. Otherwise
    the first existing begin/end region (markers included) is replaced.
    Documents with neither are returned unchanged.

    Args:
        text: Current document text.
        block: Replacement, already wrapped in the begin and end markers.
        markers: Marker set of the block type being written.

    Returns:
        The new text and whether it differs from ``text``.
    """
    if markers.single_use in text:
        new_text = text.replace(markers.single_use, block, 1)
    else:
        # Function replacement keeps backslashes in the block literal.
        new_text = region_pattern(markers).sub(lambda _match: block, text, count=1)
    return RewriteResult(text=new_text, changed=new_text != text)
