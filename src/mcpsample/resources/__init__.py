"""Static resources — sample.txt and data.json."""

from mcpsample.resources.registry import RESOURCES, ResourceRegistry

__all__ = ["RESOURCES", "ResourceRegistry"]
