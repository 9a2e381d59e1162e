from typing import List

import pytest

from src.business_objects.items import ArmorItem


@pytest.fixture
def abc_armors() -> List[ArmorItem]:
    """Classic case where greedy-by-efficiency is not optimal at budget 50."""
    return [
        ArmorItem("A", cost=10.0, defense=60.0),
        ArmorItem("B", cost=20.0, defense=100.0),
        ArmorItem("C", cost=30.0, defense=120.0),
    ]


@pytest.fixture
def armor_file(tmp_path):
    """Write a '^'-delimited armor database and return its path."""
    def _write(lines: List[str], name: str = "armor.csv") -> str:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return str(path)
    return _write
