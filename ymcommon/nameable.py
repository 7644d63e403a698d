"""Mixins that give an object a name."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Nameable:
    """An object whose name can be changed."""

    name: str


@dataclass(frozen=True)
class PermaNameable:
    """An object whose name is fixed at construction."""

    name: str