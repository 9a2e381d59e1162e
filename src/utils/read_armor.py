# -*- coding: utf-8 -*-
"""
I/O helper for loading the armor database.

File format (UTF-8 text):
  - first line is a header row and is ignored
  - every other line is   description^cost^defense
    ('^' separates fields; there is no quoting, so descriptions may contain commas)

Records with the wrong field count, non-numeric numbers, or values that
ArmorItem rejects are skipped with a warning; the rest of the file still loads.
"""

from __future__ import annotations
import logging
from typing import List

from src.business_objects.errors import SchemaError, StateValidationError
from src.business_objects.items import ArmorItem

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "^"
_FIELD_COUNT = 3


def load_armor_database(path: str) -> List[ArmorItem]:
    """
    Load all valid armor items from a '^'-delimited file.

    Raises
    ------
    SchemaError
        If the file cannot be opened or is not valid UTF-8.
    """
    armors: List[ArmorItem] = []
    skipped = 0
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line_number, line in enumerate(f, start=1):
                line = line.rstrip("\r\n")
                if line_number == 1 or not line.strip():
                    continue
                armor = _parse_record(line.split(FIELD_SEPARATOR), path, line_number)
                if armor is None:
                    skipped += 1
                    continue
                armors.append(armor)
    except (OSError, UnicodeDecodeError) as e:
        raise SchemaError(f"{path}: failed to read armor database: {e}") from e

    logger.info("Loaded %d armors from %s (%d skipped)", len(armors), path, skipped)
    return armors


def _parse_record(fields: List[str], path: str, line_number: int) -> ArmorItem | None:
    if len(fields) != _FIELD_COUNT:
        logger.warning(
            "%s:%d: invalid field count; want %d but got %d",
            path, line_number, _FIELD_COUNT, len(fields),
        )
        return None

    description, cost_field, defense_field = fields
    try:
        cost = float(cost_field)
        defense = float(defense_field)
    except ValueError:
        logger.warning("%s:%d: non-numeric cost or defense: %r", path, line_number, fields)
        return None

    try:
        return ArmorItem(description=description, cost=cost, defense=defense)
    except StateValidationError as e:
        logger.warning("%s:%d: %s", path, line_number, e)
        return None
