from __future__ import annotations

import logging
from typing import Dict, Generic, Iterator, Mapping, Sequence, TypeVar

from worldmap.model.errors import OrphanFragment, UnknownCountry

logger = logging.getLogger(__name__)

F = TypeVar("F")


class CountryRegistry(Generic[F]):
    """
    Country id -> ordered fragment handles, plus the reverse index.

    Fragments are opaque handles (catalog records, scene items, ...). The
    reverse index is keyed by object identity, so two fragments that compare
    equal still resolve to their own country.
    """

    def __init__(self, country_fragments: Mapping[str, Sequence[F]]) -> None:
        self._fragments: Dict[str, tuple[F, ...]] = {}
        self._owner: Dict[int, str] = {}

        for country_id, fragments in country_fragments.items():
            fragments = tuple(fragments)
            if not fragments:
                raise ValueError(f"Country '{country_id}' has no fragments.")
            for fragment in fragments:
                owner = self._owner.get(id(fragment))
                if owner is not None and owner != country_id:
                    raise ValueError(
                        f"Fragment {fragment!r} is registered to both '{owner}' and '{country_id}'."
                    )
                self._owner[id(fragment)] = country_id
            self._fragments[country_id] = fragments

        logger.debug(f"Registry built: {len(self._fragments)} countries, {len(self._owner)} fragments.")

    def fragments_of(self, country_id: str) -> tuple[F, ...]:
        try:
            return self._fragments[country_id]
        except KeyError:
            raise UnknownCountry(country_id) from None

    def country_of(self, fragment: F) -> str:
        try:
            return self._owner[id(fragment)]
        except KeyError:
            raise OrphanFragment(fragment) from None

    def all_country_ids(self) -> set[str]:
        return set(self._fragments)

    def all_fragments(self) -> Iterator[F]:
        for fragments in self._fragments.values():
            yield from fragments

    def __contains__(self, country_id: object) -> bool:
        return country_id in self._fragments

    def __iter__(self) -> Iterator[str]:
        return iter(self._fragments)

    def __len__(self) -> int:
        return len(self._fragments)
