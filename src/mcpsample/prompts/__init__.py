"""Prompt templates — greeting and summarize."""

from mcpsample.prompts.registry import PromptRegistry

__all__ = ["PromptRegistry"]
