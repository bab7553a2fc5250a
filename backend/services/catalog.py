"""In-memory country catalog with case-insensitive name filtering."""

from typing import Iterable

from models.country import CountryRecord


def normalize_term(term: str | None) -> str:
    return (term or "").strip().lower()


def filter_records(records: Iterable[CountryRecord], term: str | None) -> list[CountryRecord]:
    """Keep records whose common name contains the term, preserving order."""
    needle = normalize_term(term)
    if not needle:
        return list(records)
    return [r for r in records if needle in r.common_name.lower()]


class Catalog:
    def __init__(self, records: Iterable[CountryRecord] = ()):
        self._all: tuple[CountryRecord, ...] = ()
        self._filter_term = ""
        self._filtered: list[CountryRecord] = []
        self._by_id: dict[str, CountryRecord] = {}
        self.load(records)

    @property
    def all(self) -> tuple[CountryRecord, ...]:
        return self._all

    @property
    def filter_term(self) -> str:
        return self._filter_term

    @property
    def filtered(self) -> list[CountryRecord]:
        return list(self._filtered)

    def load(self, records: Iterable[CountryRecord]) -> None:
        # sorted() is stable, so equal names keep their input order
        self._all = tuple(sorted(records, key=lambda r: r.common_name.lower()))
        self._by_id = {r.id: r for r in self._all}
        self._filter_term = ""
        self._filtered = list(self._all)

    def set_filter(self, term: str | None) -> int:
        """Apply a search term and return the new filtered length.

        Callers reset pagination afterwards; the catalog knows nothing about pages.
        """
        self._filter_term = normalize_term(term)
        self._filtered = filter_records(self._all, self._filter_term)
        return len(self._filtered)

    def get(self, country_id: str) -> CountryRecord | None:
        return self._by_id.get((country_id or "").upper())

    def fork(self) -> "Catalog":
        """Return a catalog over the same records with its own filter state."""
        other = Catalog()
        other._all = self._all
        other._by_id = self._by_id
        other._filtered = list(self._all)
        return other

    def __len__(self) -> int:
        return len(self._all)
