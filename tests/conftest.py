"""Pytest configuration and fixtures."""

import copy
import json
from pathlib import Path
from typing import Any

import pytest

from luredb.application.services import CatalogServices, build_catalog_services
from luredb.infrastructure.catalog import InMemoryCatalogSource

SAMPLE_DOCUMENT: dict[str, Any] = {
    "manufacturers": {
        "creek-chub": {
            "id": "creek-chub",
            "name": "Creek Chub Bait Company",
            "colors": [
                {
                    "id": "ccbc-00",
                    "name": "Perch",
                    "yearIntroduced": 1916,
                    "companyId": "00",
                    "pre1925Id": ["P"],
                },
                {"id": "ccbc-00b", "name": "Perch Scale", "companyId": "00b"},
                {"id": "ccbc-12", "name": "Frog", "yearIntroduced": 1919, "companyId": "12"},
                {"id": "ccbc-13", "name": "Frog Spot", "companyId": "13"},
                {
                    "id": "ccbc-20",
                    "name": "Silver Flash",
                    "yearIntroduced": 1917,
                    "yearLastUsed": 1941,
                    "companyId": "20",
                    "pre1925Id": ["SF", "SF2"],
                },
                {"id": "ccbc-y12", "name": "Yellow Scale", "companyId": "Y12"},
            ],
            "lures": [
                {
                    "name": "Pikie Minnow",
                    "number": 700,
                    "yearIntroduced": 1920,
                    "colors": ["ccbc-00", "ccbc-12", "ccbc-y12"],
                    "rare_colors": ["ccbc-99"],
                    "pre1925codes": [{"ccbc-00": 7000}, {"ccbc-12": 7012}],
                    "notes": "Best seller.",
                },
                {
                    "name": "Husky Pikie",
                    "number": "2300",
                    "yearIntroduced": 1927,
                    "colors": ["ccbc-12"],
                },
            ],
        },
        "heddon": {
            "id": "heddon",
            "name": "James Heddon's Sons",
            "colors": [
                {"id": "hedd-12", "name": "Green Frog", "yearIntroduced": 1914, "companyId": "12"},
            ],
            "lures": [
                {"name": "Vamp", "number": "700", "colors": ["hedd-12"]},
                {"name": "Dowagiac Minnow", "number": "D150", "colors": ["hedd-12"]},
            ],
        },
        "empty-co": {
            "id": "empty-co",
            "name": "Empty Company",
        },
    },
}


@pytest.fixture
def catalog_document() -> dict[str, Any]:
    """A fresh copy of the sample catalog document."""
    return copy.deepcopy(SAMPLE_DOCUMENT)


@pytest.fixture
def catalog_source(catalog_document: dict[str, Any]) -> InMemoryCatalogSource:
    """In-memory source over the sample document."""
    return InMemoryCatalogSource(catalog_document, name="sample")


@pytest.fixture
def catalog_services(catalog_source: InMemoryCatalogSource) -> CatalogServices:
    """Loaded services over the sample document."""
    return build_catalog_services(catalog_source)


@pytest.fixture
def catalog_file(tmp_path: Path, catalog_document: dict[str, Any]) -> Path:
    """The sample document written to a JSON file."""
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(catalog_document), encoding="utf-8")
    return path
