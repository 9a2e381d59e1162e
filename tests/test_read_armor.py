"""
Tests for the '^'-delimited armor database loader.
"""
import logging

import pytest

from src.business_objects import SchemaError
from src.utils.read_armor import load_armor_database


class TestLoadArmorDatabase:

    def test_loads_valid_records_and_skips_header(self, armor_file):
        path = armor_file([
            "description^cost^defense",
            "new enchanted helmet^12.5^40",
            "old boots, slightly worn^3^2.5",
        ])
        armors = load_armor_database(path)
        assert [a.description for a in armors] == ["new enchanted helmet", "old boots, slightly worn"]
        assert armors[0].cost == 12.5
        assert armors[1].defense == 2.5

    def test_malformed_records_are_skipped(self, armor_file, caplog):
        caplog.set_level(logging.WARNING, logger="src.utils.read_armor")
        path = armor_file([
            "description^cost^defense",
            "good helm^10^20",
            "missing field^10",
            "too^many^fields^here",
            "bad number^ten^20",
            "free armor^0^20",
            "cursed armor^5^-1",
            "^5^5",
            "",
            "good boots^4^8",
        ])
        armors = load_armor_database(path)
        assert [a.description for a in armors] == ["good helm", "good boots"]
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 6

    def test_header_only(self, armor_file):
        assert load_armor_database(armor_file(["description^cost^defense"])) == []

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(SchemaError):
            load_armor_database(str(tmp_path / "nope.csv"))

    def test_invalid_utf8_raises(self, tmp_path):
        path = tmp_path / "armor.csv"
        path.write_bytes(b"description^cost^defense\nhelm\xff\xfe^10^20\n")
        with pytest.raises(SchemaError):
            load_armor_database(str(path))

    def test_huge_record_does_not_abort_load(self, armor_file, caplog):
        caplog.set_level(logging.WARNING, logger="src.utils.read_armor")
        path = armor_file([
            "description^cost^defense",
            "x" * 200_000,
            "good^1^1",
        ])
        armors = load_armor_database(path)
        assert [a.description for a in armors] == ["good"]
        assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 1

    def test_long_description_is_kept(self, armor_file):
        description = "gilded " * 30_000
        armors = load_armor_database(armor_file(["description^cost^defense", f"{description}^5^9"]))
        assert len(armors) == 1
        assert armors[0].description == description
        assert armors[0].defense == 9.0
