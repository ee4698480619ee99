"""The set of live entities and the input gathered for the current frame."""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Sequence, Tuple, TypeVar

from cosmicdodger.entity import BaseEntity
from cosmicdodger.vector import Vector2

_log = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseEntity)


class World:
    """Owns the live entities, the pending destructions and the frame's input."""

    def __init__(self, resources: Optional[Any] = None) -> None:
        self.resources = resources
        self._entities: List[BaseEntity] = []
        self._destroy_queue: List[BaseEntity] = []
        self._events: List[Any] = []
        self._pressed_keys: Any = {}
        self.mouse_position: Vector2 = Vector2.ZERO
        self.player: Optional[Any] = None
        self.meteor_spawner: Optional[Any] = None
        self.pickup_spawner: Optional[Any] = None

    @property
    def entities(self) -> Tuple[BaseEntity, ...]:
        return tuple(self._entities)

    @property
    def destroy_queue(self) -> Tuple[BaseEntity, ...]:
        return tuple(self._destroy_queue)

    @property
    def events(self) -> Tuple[Any, ...]:
        return tuple(self._events)

    @property
    def pressed_keys(self) -> Any:
        return self._pressed_keys

    def is_key_pressed(self, key: int) -> bool:
        try:
            return bool(self._pressed_keys[key])
        except (IndexError, KeyError):
            return False

    def spawn_entity(self, entity: E) -> E:
        """Add an entity, naming it after its display name and spawn index."""
        if entity is None:
            raise ValueError("cannot spawn None")
        entity.id_name = f"{entity.display_name}_{len(self._entities)}"
        self._entities.append(entity)
        return entity

    def destroy_entity(self, entity: BaseEntity) -> None:
        """Disable an entity and queue it for removal at the next flush."""
        if entity is None:
            raise ValueError("cannot destroy None")
        if any(queued is entity for queued in self._destroy_queue):
            _log.warning(
                "%s already queued for deletion! SKIPPING", entity.display_name
            )
            return
        self._destroy_queue.append(entity)
        entity.disable()

    def flush_destroyed(self) -> List[BaseEntity]:
        """Remove every queued entity and return the ones removed."""
        removed = list(self._destroy_queue)
        self._entities = [
            entity
            for entity in self._entities
            if not any(entity is gone for gone in removed)
        ]
        self._destroy_queue.clear()
        return removed

    def begin_frame(
        self,
        events: Iterable[Any],
        pressed_keys: Any,
        mouse_position: Sequence[float],
    ) -> None:
        """Record the input for the frame about to be updated."""
        self._events = list(events)
        self._pressed_keys = pressed_keys
        x, y = mouse_position
        self.mouse_position = Vector2(float(x), float(y))

    def end_frame(self) -> None:
        """Drop the frame's events."""
        self._events.clear()