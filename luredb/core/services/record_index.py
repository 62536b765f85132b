"""
Base class for the flattened, searchable record caches.

Subclasses say how to flatten a Catalog into records and provide a
SearchProfile; everything else (snapshot publishing, reload, search,
defensive copies) lives here.
"""

import threading
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from luredb.config import get_logger
from luredb.core.entities.catalog import Catalog
from luredb.core.exceptions import ConfigurationError
from luredb.core.services.catalog_loader import CatalogLoader
from luredb.core.services.record_search import (
    RecordSnapshot,
    SearchOutcome,
    SearchProfile,
    build_snapshot,
    evaluate,
)

logger = get_logger(__name__)

T = TypeVar("T")

_EMPTY: RecordSnapshot[Any] = RecordSnapshot()


class CatalogGeneration:
    """
    The published snapshots of every index built from one catalog.

    Indexes sharing a generation always read snapshots built from the
    same document: `publish` replaces the whole name -> (snapshot,
    loaded) table with a single assignment, so readers never see some
    indexes rebuilt and others not.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._state: Mapping[str, tuple[RecordSnapshot[Any], bool]] = MappingProxyType({})

    def snapshot(self, name: str) -> RecordSnapshot[Any]:
        return self._state.get(name, (_EMPTY, False))[0]

    def is_loaded(self, name: str) -> bool:
        return self._state.get(name, (_EMPTY, False))[1]

    def publish(self, snapshots: Mapping[str, RecordSnapshot[Any]], loaded: bool) -> None:
        """Swap in new snapshots for the named indexes, all at once."""
        with self._lock:
            state = dict(self._state)
            state.update({name: (snapshot, loaded) for name, snapshot in snapshots.items()})
            self._state = MappingProxyType(state)


class RecordIndex(ABC, Generic[T]):
    """
    An in-memory record cache with a generic query engine.

    The cache is an immutable RecordSnapshot held by a CatalogGeneration.
    Rebuilds construct a new snapshot completely and then publish it, so
    a reader holding the old snapshot keeps a consistent view until it
    is done. Indexes built over the same catalog share one generation.
    """

    profile: SearchProfile[T]

    def __init__(
        self,
        loader: CatalogLoader | None = None,
        generation: CatalogGeneration | None = None,
    ) -> None:
        self._loader = loader
        self._generation = generation or CatalogGeneration()

    @abstractmethod
    def _flatten(self, catalog: Catalog) -> Sequence[T]:
        """Flatten every manufacturer's records into one ordered list."""

    def _code_hints(self, catalog: Catalog) -> Mapping[str, Sequence[str]] | None:
        """Advisory code -> primary key table from the document, if any."""
        return None

    @property
    def _snapshot(self) -> RecordSnapshot[T]:
        return self._generation.snapshot(self.profile.name)

    @property
    def count(self) -> int:
        return len(self._snapshot)

    @property
    def is_loaded(self) -> bool:
        """False when the last rebuild had no usable catalog."""
        return self._generation.is_loaded(self.profile.name)

    @property
    def loader(self) -> CatalogLoader | None:
        return self._loader

    @property
    def generation(self) -> CatalogGeneration:
        return self._generation

    def build(self, catalog: Catalog | None) -> RecordSnapshot[T]:
        """Build, but do not publish, a snapshot of `catalog`."""
        if catalog is None:
            return build_snapshot(self.profile, [])
        return build_snapshot(self.profile, self._flatten(catalog), self._code_hints(catalog))

    def rebuild(self, catalog: Catalog | None) -> None:
        """Discard the cache and publish a new one built from `catalog`."""
        snapshot = self.build(catalog)
        self._generation.publish({self.profile.name: snapshot}, loaded=catalog is not None)

        logger.info(
            "cache_rebuilt",
            index=self.profile.name,
            records=len(snapshot),
            loaded=catalog is not None,
        )

    def reload(self) -> None:
        """Re-read the catalog through the loader and rebuild."""
        if self._loader is None:
            raise ConfigurationError(
                f"{self.profile.name} index has no catalog loader to reload from"
            )
        self.rebuild(self._loader.load())

    def search_detailed(self, query: str) -> SearchOutcome[T]:
        """Search and report which strategy produced the results."""
        outcome = evaluate(self.profile, self._snapshot, query)
        logger.debug(
            "search_complete",
            index=self.profile.name,
            query=query[:50],
            strategy=outcome.strategy.value,
            results=outcome.total,
        )
        return outcome

    def search(self, query: str) -> list[T]:
        """Search the cache; empty queries return no results."""
        return self.search_detailed(query).results

    def get_all(self) -> list[T]:
        """Return a copy of the whole cache in document order."""
        return list(self._snapshot.records)
