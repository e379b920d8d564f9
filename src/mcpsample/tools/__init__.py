"""Built-in tools — echo, calculator and word_counter."""

from mcpsample.tools.calculator import calculate
from mcpsample.tools.registry import ToolName, ToolRegistry
from mcpsample.tools.word_counter import TextStats, analyze_text

__all__ = [
    "TextStats",
    "ToolName",
    "ToolRegistry",
    "analyze_text",
    "calculate",
]
