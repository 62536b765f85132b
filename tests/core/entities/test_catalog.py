"""Unit tests for source document entities."""

from luredb.core.entities.catalog import (
    Catalog,
    ColorEntry,
    LureEntry,
    ManufacturerEntry,
)


class TestColorEntry:
    """Tests for ColorEntry parsing."""

    def test_camel_case_keys(self):
        entry = ColorEntry.model_validate(
            {
                "id": "ccbc-00",
                "name": "Perch",
                "yearIntroduced": 1916,
                "yearLastUsed": 1950,
                "companyId": "00",
                "pre1925Id": ["P"],
            }
        )
        assert entry.year_introduced == 1916
        assert entry.year_last_used == 1950
        assert entry.company_id == "00"
        assert entry.pre1925_id == ["P"]

    def test_missing_years_are_none_not_zero(self):
        entry = ColorEntry.model_validate({"id": "x-1", "name": "X"})
        assert entry.year_introduced is None
        assert entry.year_last_used is None
        assert entry.company_id is None
        assert entry.pre1925_id is None

    def test_zero_year_is_kept(self):
        entry = ColorEntry.model_validate({"id": "x-1", "name": "X", "yearIntroduced": 0})
        assert entry.year_introduced == 0

    def test_numeric_company_id_becomes_string(self):
        entry = ColorEntry.model_validate({"id": "x-12", "name": "X", "companyId": 12})
        assert entry.company_id == "12"

    def test_single_pre1925_id_is_wrapped(self):
        entry = ColorEntry.model_validate({"id": "x-1", "name": "X", "pre1925Id": "SF"})
        assert entry.pre1925_id == ["SF"]

    def test_snake_case_keys_accepted(self):
        entry = ColorEntry(id="x-1", name="X", company_id="7")
        assert entry.company_id == "7"


class TestLureEntry:
    """Tests for LureEntry parsing."""

    def test_number_keeps_its_type(self):
        assert LureEntry.model_validate({"name": "A", "number": 700}).number == 700
        assert LureEntry.model_validate({"name": "B", "number": "700"}).number == "700"

    def test_original_key_spellings(self):
        entry = LureEntry.model_validate(
            {
                "name": "Pikie",
                "number": 700,
                "yearLastMfg": 1978,
                "rare_colors": ["ccbc-99"],
                "pre1925codes": [{"ccbc-00": 7000}],
            }
        )
        assert entry.year_last_mfg == 1978
        assert entry.rare_colors == ["ccbc-99"]
        assert entry.pre1925_codes == [{"ccbc-00": 7000}]

    def test_alternate_key_spellings(self):
        entry = LureEntry.model_validate(
            {
                "name": "Pikie",
                "number": 700,
                "rareColors": ["ccbc-99"],
                "pre1925Codes": [{"ccbc-00": 7000}],
            }
        )
        assert entry.rare_colors == ["ccbc-99"]
        assert entry.pre1925_codes == [{"ccbc-00": 7000}]

    def test_numeric_weight_becomes_string(self):
        entry = LureEntry.model_validate({"name": "A", "number": 1, "weight": 0.5})
        assert entry.weight == "0.5"


class TestCatalog:
    """Tests for the top-level Catalog."""

    def test_manufacturer_without_collections(self):
        catalog = Catalog.model_validate({"manufacturers": {"m": {"name": "M"}}})
        manufacturer = catalog.manufacturers["m"]
        assert isinstance(manufacturer, ManufacturerEntry)
        assert manufacturer.colors is None
        assert manufacturer.lures is None
        assert catalog.indexes is None

    def test_producers_and_variants_aliases(self):
        catalog = Catalog.model_validate(
            {"producers": {"m": {"name": "M", "variants": [{"name": "A", "number": 1}]}}}
        )
        assert catalog.manufacturers["m"].lures[0].name == "A"

    def test_advisory_indexes(self):
        catalog = Catalog.model_validate(
            {
                "manufacturers": {},
                "indexes": {
                    "byId": {"ccbc-00": {"manufacturerId": "creek-chub"}},
                    "byCompanyId": {"00": ["ccbc-00"]},
                },
            }
        )
        assert catalog.indexes.by_company_id == {"00": ["ccbc-00"]}
        assert "ccbc-00" in catalog.indexes.by_id

    def test_unknown_keys_ignored(self):
        catalog = Catalog.model_validate({"manufacturers": {}, "version": 3})
        assert catalog.manufacturers == {}
