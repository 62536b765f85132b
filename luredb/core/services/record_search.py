"""
Generic indexed search over a flat record cache.

Both the color and the lure caches are searched with the same
algorithm; a SearchProfile says which field is the primary key, which
fields are matchable, and (optionally) which field is a shared
manufacturer code.

Strategy order (first one with results wins):
1. Exact primary key (case-insensitive)   -> unranked
2. Exact manufacturer code (as typed)     -> unranked
3. Substring scan over matchable fields   -> ranked
"""

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

from luredb.config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class MatchStrategy(str, Enum):
    """Which strategy produced a search result set."""

    PRIMARY_KEY = "primary_key"
    COMPANY_CODE = "company_code"
    SUBSTRING = "substring"
    NONE = "none"


@dataclass(frozen=True)
class SearchProfile(Generic[T]):
    """Describes how to search one kind of record."""

    name: str
    primary_key: Callable[[T], str]
    display_name: Callable[[T], str]
    fields: Callable[[T], Iterable[str | None]]
    code: Callable[[T], str | None] | None = None
    # Primary keys are unique ids; an exact match yields one record
    unique_key: bool = False


@dataclass(frozen=True)
class RecordSnapshot(Generic[T]):
    """
    An immutable, fully built cache plus its lookup tables.

    Positions in the lookup tables index into `records`. `code_hints`
    holds advisory code -> primary key lists copied from the document
    and is never trusted without checking `records`.
    """

    records: tuple[T, ...] = ()
    by_key: Mapping[str, tuple[int, ...]] = field(default_factory=dict)
    by_exact_key: Mapping[str, int] = field(default_factory=dict)
    by_code: Mapping[str, tuple[int, ...]] = field(default_factory=dict)
    code_hints: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.records)


@dataclass
class SearchOutcome(Generic[T]):
    """Search results together with the strategy that produced them."""

    query: str
    results: list[T]
    strategy: MatchStrategy

    @property
    def total(self) -> int:
        return len(self.results)


def _normalize(query: str) -> str:
    return query.strip().lower()


def build_snapshot(
    profile: SearchProfile[T],
    records: Sequence[T],
    code_hints: Mapping[str, Sequence[str]] | None = None,
) -> RecordSnapshot[T]:
    """Build a snapshot and its lookup tables from flattened records."""
    by_key: dict[str, list[int]] = {}
    by_exact_key: dict[str, int] = {}
    by_code: dict[str, list[int]] = {}

    for position, record in enumerate(records):
        key = profile.primary_key(record)
        by_key.setdefault(key.lower(), []).append(position)
        by_exact_key.setdefault(key, position)

        if profile.code is not None:
            code = profile.code(record)
            if code:
                by_code.setdefault(code, []).append(position)

    return RecordSnapshot(
        records=tuple(records),
        by_key={k: tuple(v) for k, v in by_key.items()},
        by_exact_key=by_exact_key,
        by_code={k: tuple(v) for k, v in by_code.items()},
        code_hints={k: tuple(v) for k, v in (code_hints or {}).items()},
    )


def match_primary_key(
    profile: SearchProfile[T], snapshot: RecordSnapshot[T], query: str
) -> list[T]:
    """
    Records whose primary key equals the query, ignoring case.

    A profile with `unique_key` set returns only the first such record.
    """
    needle = _normalize(query)
    positions = snapshot.by_key.get(needle, ())
    matches = [
        snapshot.records[p]
        for p in positions
        if profile.primary_key(snapshot.records[p]).lower() == needle
    ]
    return matches[:1] if profile.unique_key else matches


def match_code(profile: SearchProfile[T], snapshot: RecordSnapshot[T], query: str) -> list[T]:
    """
    Every record whose manufacturer code equals the raw query exactly.

    Codes are not globally unique, so several records may match. The
    candidates always come from the cache; an advisory entry for the
    code only puts the records it names first, in its order.
    """
    if profile.code is None:
        return []

    positions = snapshot.by_code.get(query, ())
    hinted = snapshot.code_hints.get(query)
    if hinted:
        order = {position: rank for rank, position in enumerate(positions)}
        for rank, key in enumerate(hinted):
            position = snapshot.by_exact_key.get(key)
            if position is None or position not in order:
                logger.debug("advisory_index_stale", index=profile.name, code=query, key=key)
                continue
            order[position] = min(order[position], rank - len(hinted))
        positions = tuple(sorted(positions, key=order.__getitem__))

    return [snapshot.records[p] for p in positions]


def record_matches(profile: SearchProfile[T], record: T, needle: str) -> bool:
    """True when any matchable field contains the lowercased needle."""
    for value in profile.fields(record):
        if value and needle in value.lower():
            return True
    return False


def rank_key(profile: SearchProfile[T], needle: str) -> Callable[[T], tuple[int, str, str]]:
    """
    Sort key: exact name first, then name prefix, then casefolded name.

    The raw name breaks casefold ties so equal-looking names still sort
    deterministically; Python's stable sort keeps cache order after that.
    """

    def key(record: T) -> tuple[int, str, str]:
        name = profile.display_name(record)
        lowered = name.lower()
        if lowered == needle:
            tier = 0
        elif lowered.startswith(needle):
            tier = 1
        else:
            tier = 2
        return (tier, name.casefold(), name)

    return key


def scan(profile: SearchProfile[T], snapshot: RecordSnapshot[T], query: str) -> list[T]:
    """Substring scan over every record, ranked."""
    needle = _normalize(query)
    matches = [r for r in snapshot.records if record_matches(profile, r, needle)]
    matches.sort(key=rank_key(profile, needle))
    return matches


def evaluate(
    profile: SearchProfile[T], snapshot: RecordSnapshot[T], query: str
) -> SearchOutcome[T]:
    """
    Run the strategy chain against one snapshot.

    Empty and whitespace-only queries return no results.
    """
    if not _normalize(query):
        return SearchOutcome(query=query, results=[], strategy=MatchStrategy.NONE)

    exact = match_primary_key(profile, snapshot, query)
    if exact:
        return SearchOutcome(query=query, results=exact, strategy=MatchStrategy.PRIMARY_KEY)

    coded = match_code(profile, snapshot, query)
    if coded:
        return SearchOutcome(query=query, results=coded, strategy=MatchStrategy.COMPANY_CODE)

    scanned = scan(profile, snapshot, query)
    strategy = MatchStrategy.SUBSTRING if scanned else MatchStrategy.NONE
    return SearchOutcome(query=query, results=scanned, strategy=strategy)
