"""Cross-reference index between desk numbers, internal desk ids and zone ids."""

import logging
from collections.abc import Iterable
from types import MappingProxyType

from .exceptions import DuplicateIdentifier
from .models import Desk
from .utils import sort_desks

logger = logging.getLogger(__name__)


def _index_by(desks: list[Desk], kind: str, key) -> dict:
    index = {}
    for desk in desks:
        value = key(desk)
        if value is None:
            continue
        if value in index:
            raise DuplicateIdentifier(
                kind,
                value,
                f"Duplicate {kind} {value!r} on desks {index[value].title!r} "
                f"(id {index[value].id}) and {desk.title!r} (id {desk.id})",
            )
        index[value] = desk
    return index


class IdentityMap:
    """Read-only lookup of desks by each of their three identifiers.

    Build one per floor-plan snapshot with :meth:`build`. A new desk
    collection needs a new map; instances are never updated in place.
    Lookup misses return None.
    """

    __slots__ = ("_desks", "_by_desk_number", "_by_internal_id", "_by_zone_id")

    def __init__(
        self,
        desks: tuple[Desk, ...],
        by_desk_number: dict[int, Desk],
        by_internal_id: dict[int, Desk],
        by_zone_id: dict[int, Desk],
    ):
        self._desks = desks
        self._by_desk_number = MappingProxyType(by_desk_number)
        self._by_internal_id = MappingProxyType(by_internal_id)
        self._by_zone_id = MappingProxyType(by_zone_id)

    @classmethod
    def build(cls, desks: Iterable[Desk]) -> "IdentityMap":
        """Build the index from a desk collection.

        Args:
            desks: Desks of one floor-plan snapshot

        Returns:
            IdentityMap over the desks

        Raises:
            DuplicateIdentifier: If two desks share an id, a zone id, or a desk number
        """
        desks = sort_desks(desks)
        by_internal_id = _index_by(desks, "id", lambda d: d.id)
        by_zone_id = _index_by(desks, "zone_id", lambda d: d.zone_id)
        by_desk_number = _index_by(desks, "desk_number", lambda d: d.desk_number)

        logger.debug(
            f"Built identity map: {len(by_internal_id)} desks, "
            f"{len(by_desk_number)} numbered, {len(by_zone_id)} with zone ids"
        )
        return cls(tuple(desks), by_desk_number, by_internal_id, by_zone_id)

    @property
    def desks(self) -> tuple[Desk, ...]:
        """All desks in canonical presentation order."""
        return self._desks

    def by_desk_number(self, desk_number: int) -> Desk | None:
        """Find a desk by the number shown in its title."""
        return self._by_desk_number.get(desk_number)

    def by_internal_id(self, desk_id: int) -> Desk | None:
        """Find a desk by its internal floor id."""
        return self._by_internal_id.get(desk_id)

    def by_zone_id(self, zone_id: int) -> Desk | None:
        """Find a desk by its booking-system zone id."""
        return self._by_zone_id.get(zone_id)

    def zone_id_for_desk_number(self, desk_number: int) -> int | None:
        """Zone id to use when booking or favoriting a desk by its number.

        Args:
            desk_number: Desk number from the desk title (e.g., 57 for "Desk 57")

        Returns:
            Zone id, or None if the desk is unknown or has no zone id
        """
        desk = self.by_desk_number(desk_number)
        if desk is None:
            logger.warning(f"Desk {desk_number} not found in floor config")
            return None
        return desk.zone_id

    def desk_number_for_zone_id(self, zone_id: int) -> int | None:
        """Desk number for a zone id, e.g. to label a favorite."""
        desk = self.by_zone_id(zone_id)
        return desk.desk_number if desk is not None else None

    def __contains__(self, desk_id) -> bool:
        return desk_id in self._by_internal_id

    def __len__(self) -> int:
        return len(self._desks)

    def __iter__(self):
        return iter(self._desks)

    def __repr__(self) -> str:
        return f"IdentityMap(desks={len(self._desks)})"


def build_identity_map(desks: Iterable[Desk]) -> IdentityMap:
    """Build an IdentityMap from a desk collection.

    Raises:
        DuplicateIdentifier: If two desks share an id, a zone id, or a desk number
    """
    return IdentityMap.build(desks)
