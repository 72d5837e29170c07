"""
Identity resolution.

Entity handles are reused: when a player leaves, the next player to join
can be given the same entity index. The only stable identity is the
per-connection user id, so every lookup goes through the live
handle -> user id mapping kept here, which is driven by the ``userinfo``
string table.
"""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass

from demoreel.core.utils import steam3_to_steam_id64

logger = logging.getLogger(__name__)

# player_info_t prefix: char name[32]; int userID; char guid[33]
_PLAYER_INFO_PREFIX = struct.Struct("<32si33s")


def _cstring(raw: bytes) -> str:
    return raw.split(b"\x00", 1)[0].decode("utf-8", errors="replace")


@dataclass(frozen=True)
class UserInfo:
    """One decoded userinfo string table entry."""

    entity_id: int
    name: str
    user_id: int
    steam_id: int

    @classmethod
    def from_entry(cls, index: int, data: bytes | None) -> UserInfo | None:
        """
        Decode a userinfo entry.

        Args:
            index: String table index (the client slot)
            data: The entry's extra bytes

        Returns:
            The decoded info, or None for an empty entry (the slot was freed)

        Raises:
            ValueError: If the payload is too short to be a player_info_t
        """
        if not data:
            return None
        if len(data) < _PLAYER_INFO_PREFIX.size:
            raise ValueError(f"userinfo payload too short ({len(data)} bytes)")

        raw_name, user_id, raw_guid = _PLAYER_INFO_PREFIX.unpack_from(data)
        return cls(
            # Client slot 0 is entity 1; entity 0 is the world
            entity_id=index + 1,
            name=_cstring(raw_name),
            user_id=user_id,
            steam_id=steam3_to_steam_id64(_cstring(raw_guid)),
        )


class IdentityTable:
    """Live entity handle -> user id mapping."""

    def __init__(self) -> None:
        self._entities: dict[int, int] = {}
        # Reverse index so a handle change can evict the user's previous handle
        self._handles: dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity_id: int) -> bool:
        return entity_id in self._entities

    def resolve(self, entity_id: int) -> int | None:
        return self._entities.get(entity_id)

    def assign(self, entity_id: int, user_id: int) -> None:
        """Point a handle at a user id, replacing whatever it pointed at."""
        previous_handle = self._handles.get(user_id)
        if previous_handle is not None and previous_handle != entity_id:
            if self._entities.get(previous_handle) == user_id:
                del self._entities[previous_handle]

        replaced = self._entities.get(entity_id)
        if replaced is not None and replaced != user_id:
            logger.debug(f"Entity {entity_id} reassigned from user {replaced} to user {user_id}")
            self._handles.pop(replaced, None)

        self._entities[entity_id] = user_id
        self._handles[user_id] = entity_id

    def release(self, entity_id: int) -> int | None:
        """Drop the mapping for a freed handle. Returns the user id it held."""
        user_id = self._entities.pop(entity_id, None)
        if user_id is not None and self._handles.get(user_id) == entity_id:
            del self._handles[user_id]
        return user_id
