from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Optional, Set, Tuple, Type, TypeVar

@dataclass(slots=True)
class Component:
    """Plain data attached to an entity. Subclasses are slotted dataclasses."""
    pass

T = TypeVar('T', bound=Component)

class System:
    """Advances one concern of the simulation once per tick."""
    def update(self, tick: int):
        raise NotImplementedError

class EntityManager:
    """
    Integer entity ids with one store per component type.
    Territories, characters and buildings all live here; a territory's id is its entity id.
    """

    def __init__(self):
        self._next_id: int = 0
        # entity -> component types it carries, for cheap teardown
        self._entities: Dict[int, Set[Type[Component]]] = {}
        self._stores: Dict[Type[Component], Dict[int, Component]] = {}

    def create_entity(self) -> int:
        entity = self._next_id
        self._next_id += 1
        self._entities[entity] = set()
        return entity

    def destroy_entity(self, entity: int):
        comp_types = self._entities.pop(entity, None)
        if comp_types is None:
            return
        for comp_type in comp_types:
            self._stores[comp_type].pop(entity, None)

    def has_entity(self, entity: int) -> bool:
        return entity in self._entities

    def add_component(self, entity: int, component: Component):
        if entity not in self._entities:
            raise KeyError(f"Entity {entity} does not exist")
        comp_type = type(component)
        self._stores.setdefault(comp_type, {})[entity] = component
        self._entities[entity].add(comp_type)

    def remove_component(self, entity: int, comp_type: Type[T]):
        store = self._stores.get(comp_type)
        if store is not None and store.pop(entity, None) is not None:
            self._entities[entity].discard(comp_type)

    def get_component(self, entity: int, comp_type: Type[T]) -> Optional[T]:
        store = self._stores.get(comp_type)
        return store.get(entity) if store is not None else None

    def has_component(self, entity: int, comp_type: Type[Component]) -> bool:
        return entity in self._stores.get(comp_type, {})

    def count_with(self, comp_type: Type[Component]) -> int:
        return len(self._stores.get(comp_type, {}))

    def get_entities_with(self, *comp_types: Type[Component]) -> Iterator[Tuple]:
        """
        Yields (entity, comp1, comp2, ...) for every entity carrying all the given types,
        components in the order requested. Safe to create or destroy entities mid-iteration.
        """
        if not comp_types:
            return
        stores = [self._stores.get(t) for t in comp_types]
        if any(store is None for store in stores):
            return

        # Drive the scan from the smallest store
        smallest = min(stores, key=len)
        for entity in list(smallest):
            if all(entity in store for store in stores):
                yield (entity, *(store[entity] for store in stores))

    def get_entities_where(self, comp_type: Type[T], predicate: Callable[[T], bool]) -> List[int]:
        return [entity for entity, comp in self._stores.get(comp_type, {}).items() if predicate(comp)]
