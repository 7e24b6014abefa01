"""Plain-text rendering of Anki card HTML.

AnkiConnect returns the rendered question and answer of a card as HTML,
with the note type's CSS in a ``<style>`` block and audio as
``[anki:play:...]`` directives. Agents get plain text instead.
"""

from __future__ import annotations

import re

_STYLE_BLOCK_RE = re.compile(r"<style[^>]*>.*?</style>", re.DOTALL | re.IGNORECASE)
_DIV_OPEN_RE = re.compile(r"<div[^>]*>")
_TAG_RE = re.compile(r"<[^>]+>")
_PLAY_TAG_RE = re.compile(r"\[anki:play:[^\]]+\]")

# Replaced in this order, so "&amp;lt;" ends up as "<"
_ENTITIES = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
)


def decode_entities(text: str) -> str:
    """Decode the five entities Anki emits for card text, one after another.

    Example:
        >>> decode_entities("Tom &amp; Jerry")
        'Tom & Jerry'
        >>> decode_entities("&amp;lt;")
        '<'
    """
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    return text


def clean_card_html(html_content: str) -> str:
    """Convert rendered card HTML to plain text.

    Style blocks are removed with their content before tags are stripped,
    and entities are decoded only after tags are gone, so a literal
    ``&lt;b&gt;`` in the card survives as the text ``<b>``.

    Args:
        html_content: Rendered question or answer HTML.

    Returns:
        Trimmed, non-empty lines joined with ``\\n``.

    Example:
        >>> clean_card_html("<style>.card {}</style><div>Front</div><div>A &amp; B</div>")
        'Front\\nA & B'
    """
    text = _STYLE_BLOCK_RE.sub("", html_content)
    text = _DIV_OPEN_RE.sub("\n", text)
    text = _TAG_RE.sub(" ", text)
    text = _PLAY_TAG_RE.sub("", text)
    text = decode_entities(text)

    lines = (line.strip() for line in text.split("\n"))
    return "\n".join(line for line in lines if line)


__all__ = ["clean_card_html", "decode_entities"]
