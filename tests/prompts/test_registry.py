"""Tests for PromptRegistry."""

import pytest

from mcpsample.protocol.errors import UnsupportedOperationError
from mcpsample.prompts.registry import PromptRegistry


class TestListPrompts:
    def test_fixed_order(self) -> None:
        names = [p.name for p in PromptRegistry().list_prompts()]
        assert names == ["greeting", "summarize"]

    def test_argument_specs(self) -> None:
        greeting, summarize = PromptRegistry().list_prompts()
        assert [(a.name, a.required) for a in greeting.arguments] == [("name", True)]
        assert [(a.name, a.required) for a in summarize.arguments] == [
            ("text", True),
            ("length", False),
        ]


class TestGreeting:
    def test_default_name(self) -> None:
        result = PromptRegistry().get_prompt("greeting", {})
        [message] = result.messages
        assert message.role == "user"
        assert message.content.text == "Generate a friendly greeting for there"

    def test_no_arguments(self) -> None:
        result = PromptRegistry().get_prompt("greeting")
        assert "there" in result.messages[0].content.text

    def test_named(self) -> None:
        result = PromptRegistry().get_prompt("greeting", {"name": "Ada"})
        assert result.messages[0].content.text == "Generate a friendly greeting for Ada"

    def test_description(self) -> None:
        result = PromptRegistry().get_prompt("greeting")
        assert result.description == "Generate a personalized greeting"


class TestSummarize:
    def test_defaults(self) -> None:
        result = PromptRegistry().get_prompt("summarize", {})
        assert result.messages[0].content.text == (
            "Please summarize the following text in a few sentences: [no text provided]"
        )

    def test_with_arguments(self) -> None:
        result = PromptRegistry().get_prompt(
            "summarize", {"text": "Long story.", "length": "one line"}
        )
        assert result.messages[0].content.text == (
            "Please summarize the following text in one line: Long story."
        )

    def test_null_argument_uses_default(self) -> None:
        result = PromptRegistry().get_prompt("summarize", {"text": None})
        assert "[no text provided]" in result.messages[0].content.text

    def test_non_string_argument_coerced(self) -> None:
        result = PromptRegistry().get_prompt("summarize", {"text": "x", "length": 3})
        assert "in 3:" in result.messages[0].content.text


class TestUnknownPrompt:
    @pytest.mark.parametrize("name", ["", "farewell", "Greeting"])
    def test_unsupported(self, name: str) -> None:
        with pytest.raises(UnsupportedOperationError, match="Unknown prompt"):
            PromptRegistry().get_prompt(name, {})
