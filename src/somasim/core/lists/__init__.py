"""List functionality: order-insensitive sequence helpers."""

from somasim.core.lists.operations import remove_at_unordered

__all__ = [
    "remove_at_unordered",
]
