"""Unit tests for cached lure entities."""

import pytest
from pydantic import ValidationError

from luredb.core.entities import LegacyCode, Lure


def _lure(**kwargs) -> Lure:
    defaults = {
        "name": "Pikie Minnow",
        "number": 700,
        "manufacturer_id": "creek-chub",
        "manufacturer_name": "Creek Chub Bait Company",
    }
    defaults.update(kwargs)
    return Lure(**defaults)


class TestLure:
    """Tests for Lure entity."""

    def test_number_label(self):
        assert _lure(number=700).number_label == "700"
        assert _lure(number="2300").number_label == "2300"

    def test_legacy_code_for(self):
        lure = _lure(
            pre1925_codes=(
                LegacyCode(color_id="ccbc-00", code=7000),
                LegacyCode(color_id="ccbc-12", code=7012),
            )
        )
        assert lure.legacy_code_for("ccbc-00") == 7000
        assert lure.legacy_code_for("ccbc-12") == 7012
        assert lure.legacy_code_for("ccbc-99") is None

    def test_later_legacy_code_wins(self):
        lure = _lure(
            pre1925_codes=(
                LegacyCode(color_id="ccbc-00", code=7000),
                LegacyCode(color_id="ccbc-00", code=7001),
            )
        )
        assert lure.legacy_code_for("ccbc-00") == 7001

    def test_without_legacy_codes(self):
        assert _lure().legacy_code_for("ccbc-00") is None

    def test_frozen(self):
        lure = _lure()
        with pytest.raises(ValidationError):
            lure.name = "Other"
