# -*- coding: utf-8 -*-
"""
Planning layer public API.

This module exposes the planning-time data contracts:
  - ArmorVector alias and ArmorTotals
  - Policy configuration
  - Solution model

Solvers, the orchestrator and the tracker are intentionally not exported here
to avoid cluttering the namespace. Import them explicitly when needed.
"""

from .armor_vector import ArmorVector, ArmorTotals
from .policy import Policy
from .solution import Solution

__all__ = [
    "ArmorVector",
    "ArmorTotals",
    "Policy",
    "Solution",
]
