# -*- coding: utf-8 -*-
"""
Armor item model.
"""

from __future__ import annotations
from dataclasses import dataclass
from .errors import StateValidationError


@dataclass(frozen=True)
class ArmorItem:
    """
    A piece of armor that can be bought at most once per selection.

    Attributes
    ----------
    description : str
        Human-readable description, e.g. "new enchanted helmet". Non-empty.
    cost : float
        Price in gold. Strictly positive.
    defense : float
        Defense points granted if selected. Nonnegative.
    """
    description: str
    cost: float
    defense: float

    def __post_init__(self) -> None:  # type: ignore[override]
        if not self.description:
            raise StateValidationError("ArmorItem.description must be non-empty.")
        if not self.cost > 0:
            raise StateValidationError(f"ArmorItem[{self.description}] cost must be > 0.")
        if not self.defense >= 0:
            raise StateValidationError(f"ArmorItem[{self.description}] defense must be >= 0.")
