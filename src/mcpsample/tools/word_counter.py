"""The ``word_counter`` tool — word, character, sentence and paragraph counts."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict

from mcpsample.protocol.models import TextContent, ToolDescriptor
from mcpsample.tools.arguments import format_number, optional_bool, require_text

DESCRIPTOR = ToolDescriptor(
    name="word_counter",
    description="Count words, characters, and sentences in text",
    input_schema={
        "type": "object",
        "properties": {
            "text": {"type": "string", "description": "Text to analyze"},
            "include_spaces": {
                "type": "boolean",
                "description": "Include spaces in character count (default: true)",
            },
        },
        "required": ["text"],
    },
)

_WHITESPACE = re.compile(r"[ \t\n\r]+")
_SENTENCE_END = re.compile(r"[.!?]")
_PARAGRAPH_BREAK = re.compile(r"\n\n|\r\n\r\n")


class TextStats(BaseModel):
    """Result of analysing a piece of text."""

    model_config = ConfigDict(frozen=True)

    words: int
    characters: int
    include_spaces: bool
    sentences: int
    paragraphs: int
    words_per_sentence: float | None = None
    characters_per_word: float | None = None


def analyze_text(text: str, include_spaces: bool = True) -> TextStats:
    words = len([w for w in _WHITESPACE.split(text) if w])
    characters = len(text) if include_spaces else len(_WHITESPACE.sub("", text))
    sentences = len([s for s in _SENTENCE_END.split(text) if s.strip()])
    paragraphs = len([p for p in _PARAGRAPH_BREAK.split(text) if p.strip()])

    words_per_sentence = characters_per_word = None
    if words > 0:
        words_per_sentence = round(words / sentences, 1) if sentences > 0 else 0.0
        characters_per_word = round(characters / words, 1)

    return TextStats(
        words=words,
        characters=characters,
        include_spaces=include_spaces,
        sentences=sentences,
        paragraphs=paragraphs,
        words_per_sentence=words_per_sentence,
        characters_per_word=characters_per_word,
    )


def render_stats(stats: TextStats) -> str:
    spaces = "with spaces" if stats.include_spaces else "without spaces"
    lines = [
        "Text Analysis Results:",
        f"Words: {stats.words}",
        f"Characters: {stats.characters} ({spaces})",
        f"Sentences: {stats.sentences}",
        f"Paragraphs: {stats.paragraphs}",
    ]
    if stats.words_per_sentence is not None and stats.characters_per_word is not None:
        lines += [
            "",
            "Averages:",
            f"- Words per sentence: {format_number(stats.words_per_sentence)}",
            f"- Characters per word: {format_number(stats.characters_per_word)}",
        ]
    return "\n".join(lines)


def word_counter(arguments: dict[str, Any]) -> list[TextContent]:
    text = require_text(arguments, "text")
    include_spaces = optional_bool(arguments, "include_spaces", default=True)
    return [TextContent(text=render_stats(analyze_text(text, include_spaces)))]
