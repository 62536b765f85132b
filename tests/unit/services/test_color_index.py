"""Unit tests for ColorIndex."""

import pytest

from luredb.core.exceptions import ConfigurationError
from luredb.core.services import CatalogLoader, ColorIndex, MatchStrategy
from luredb.infrastructure.catalog import InMemoryCatalogSource, JsonCatalogSource


def _ids(colors):
    return [c.id for c in colors]


@pytest.fixture
def color_index(catalog_source) -> ColorIndex:
    index = ColorIndex(CatalogLoader(catalog_source))
    index.reload()
    return index


class TestRebuild:
    """Tests for cache construction."""

    def test_flattens_in_document_order(self, color_index):
        assert _ids(color_index.get_all()) == [
            "ccbc-00",
            "ccbc-00b",
            "ccbc-12",
            "ccbc-13",
            "ccbc-20",
            "ccbc-y12",
            "hedd-12",
        ]
        assert color_index.count == 7
        assert color_index.is_loaded

    def test_stamps_manufacturer(self, color_index):
        color = color_index.get_by_id("hedd-12")
        assert color.manufacturer_id == "heddon"
        assert color.manufacturer_name == "James Heddon's Sons"

    def test_manufacturer_without_colors_is_skipped(self, color_index):
        assert color_index.get_by_manufacturer("empty-co") == []

    def test_rebuild_with_none_empties_cache(self, color_index):
        color_index.rebuild(None)
        assert color_index.get_all() == []
        assert not color_index.is_loaded
        assert color_index.search("frog") == []

    def test_reload_is_idempotent(self, color_index):
        first = color_index.get_all()
        color_index.reload()
        color_index.reload()
        assert color_index.get_all() == first

    def test_reload_picks_up_new_document(self, catalog_source, catalog_document, color_index):
        catalog_document["manufacturers"]["heddon"]["colors"].append(
            {"id": "hedd-9", "name": "Shiner"}
        )
        catalog_source.replace(catalog_document)
        color_index.reload()
        assert color_index.get_by_id("hedd-9").name == "Shiner"

    def test_reload_without_loader(self):
        with pytest.raises(ConfigurationError):
            ColorIndex().reload()

    def test_get_all_is_a_copy(self, color_index):
        colors = color_index.get_all()
        colors.clear()
        assert color_index.count == 7

    def test_cache_does_not_alias_source_document(self, catalog_document):
        source = InMemoryCatalogSource(catalog_document)
        index = ColorIndex(CatalogLoader(source))
        index.reload()
        catalog_document["manufacturers"]["creek-chub"]["colors"][0]["name"] = "Changed"
        assert index.get_by_id("ccbc-00").name == "Perch"

    def test_old_snapshot_unaffected_by_rebuild(self, color_index):
        before = color_index._snapshot
        color_index.rebuild(None)
        assert len(before) == 7
        assert len(color_index._snapshot) == 0


class TestSearch:
    """Tests for ColorIndex.search."""

    @pytest.mark.parametrize("query", ["", "   "])
    def test_blank_query(self, color_index, query):
        assert color_index.search(query) == []

    @pytest.mark.parametrize("query", ["ccbc-00", "CCBC-00", " Ccbc-00 "])
    def test_exact_id(self, color_index, query):
        assert _ids(color_index.search(query)) == ["ccbc-00"]

    def test_company_code_across_manufacturers(self, color_index):
        outcome = color_index.search_detailed("12")
        assert outcome.strategy == MatchStrategy.COMPANY_CODE
        # ccbc-y12 also contains "12" but must not appear
        assert _ids(outcome.results) == ["ccbc-12", "hedd-12"]

    def test_company_code_is_exact(self, color_index):
        assert _ids(color_index.search("00")) == ["ccbc-00"]

    def test_ranked_name_search(self, color_index):
        assert [c.name for c in color_index.search("frog")] == [
            "Frog",
            "Frog Spot",
            "Green Frog",
        ]

    def test_pre1925_id_element(self, color_index):
        assert _ids(color_index.search("sf2")) == ["ccbc-20"]

    def test_manufacturer_name(self, color_index):
        assert _ids(color_index.search("heddon")) == ["hedd-12"]

    def test_alphanumeric_company_code_substring(self, color_index):
        assert "ccbc-y12" in _ids(color_index.search("y1"))

    def test_no_match(self, color_index):
        assert color_index.search("walleye") == []

    def test_duplicate_id_yields_one_color(self, catalog_document):
        catalog_document["manufacturers"]["heddon"]["colors"].append(
            {"id": "ccbc-00", "name": "Perch Copy"}
        )
        index = ColorIndex(CatalogLoader(InMemoryCatalogSource(catalog_document)))
        index.reload()
        assert [c.name for c in index.search("ccbc-00")] == ["Perch"]
        assert index.get_by_id("ccbc-00").name == "Perch"


class TestAdvisoryIndexes:
    """The document's precomputed tables are hints, never the truth."""

    def _index(self, document, use_advisory_indexes=True) -> ColorIndex:
        index = ColorIndex(
            CatalogLoader(InMemoryCatalogSource(document)),
            use_advisory_indexes=use_advisory_indexes,
        )
        index.reload()
        return index

    def test_consistent_hint(self, catalog_document):
        catalog_document["indexes"] = {"byCompanyId": {"12": ["hedd-12", "ccbc-12"]}}
        assert _ids(self._index(catalog_document).search("12")) == ["hedd-12", "ccbc-12"]

    def test_incomplete_hint_keeps_every_match(self, catalog_document):
        catalog_document["indexes"] = {"byCompanyId": {"12": ["ccbc-12"]}}
        index = self._index(catalog_document)
        assert _ids(index.search("12")) == ["ccbc-12", "hedd-12"]
        assert _ids(index.search("12")) == _ids(index.get_by_company_id("12"))

    def test_incomplete_hint_orders_named_first(self, catalog_document):
        catalog_document["indexes"] = {"byCompanyId": {"12": ["hedd-12"]}}
        assert _ids(self._index(catalog_document).search("12")) == ["hedd-12", "ccbc-12"]

    def test_hint_with_missing_id_is_ignored(self, catalog_document):
        catalog_document["indexes"] = {"byCompanyId": {"12": ["ghost-12", "ccbc-12"]}}
        assert _ids(self._index(catalog_document).search("12")) == ["ccbc-12", "hedd-12"]

    def test_stale_hint_does_not_hide_matches(self, catalog_document):
        catalog_document["indexes"] = {"byCompanyId": {"00": ["ghost-00"]}}
        outcome = self._index(catalog_document).search_detailed("00")
        assert outcome.strategy == MatchStrategy.COMPANY_CODE
        assert _ids(outcome.results) == ["ccbc-00"]

    def test_hints_ignored_when_disabled(self, catalog_document):
        catalog_document["indexes"] = {"byCompanyId": {"12": ["hedd-12"]}}
        index = self._index(catalog_document, use_advisory_indexes=False)
        assert _ids(index.search("12")) == ["ccbc-12", "hedd-12"]


class TestLookups:
    """Tests for direct lookups."""

    def test_get_by_id(self, color_index):
        assert color_index.get_by_id("ccbc-20").name == "Silver Flash"
        assert color_index.get_by_id("CCBC-20") is None
        assert color_index.get_by_id("missing") is None

    def test_get_by_company_id(self, color_index):
        assert _ids(color_index.get_by_company_id("12")) == ["ccbc-12", "hedd-12"]
        assert color_index.get_by_company_id("99") == []

    def test_get_by_year_introduced(self, color_index):
        assert _ids(color_index.get_by_year_introduced(1916)) == ["ccbc-00"]

    def test_get_by_manufacturer(self, color_index):
        assert _ids(color_index.get_by_manufacturer("heddon")) == ["hedd-12"]


class TestDegradation:
    """A missing or corrupt document leaves a queryable, empty index."""

    def test_missing_file(self, tmp_path):
        index = ColorIndex(CatalogLoader(JsonCatalogSource(tmp_path / "missing.json")))
        index.reload()
        assert index.search("frog") == []
        assert index.get_all() == []
        assert not index.is_loaded

    def test_corrupt_file(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("{not json", encoding="utf-8")
        index = ColorIndex(CatalogLoader(JsonCatalogSource(path)))
        index.reload()
        assert index.search("anything") == []

    def test_failed_reload_replaces_good_cache(self, catalog_file):
        index = ColorIndex(CatalogLoader(JsonCatalogSource(catalog_file)))
        index.reload()
        assert index.count == 7

        catalog_file.write_text("[]", encoding="utf-8")
        index.reload()
        assert index.count == 0
        assert index.search("frog") == []
