"""Data classes for PathTree."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TreeNode:
    name: str
    children: dict[str, TreeNode] = field(default_factory=dict)

    @property
    def is_leaf(self) -> bool:
        return not self.children


@dataclass
class TreeOptions:
    separator: str = "/"
    compact: bool = False
    include: list[str] = field(default_factory=list)  # regex patterns
    exclude: list[str] = field(default_factory=list)
