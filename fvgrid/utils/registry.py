"""Name-keyed lookup of mesh builders and averaging schemes."""

from __future__ import annotations

from typing import Callable, Dict, List, TypeVar

T = TypeVar("T")


def normalize_key(key: str) -> str:
    """``"Non-Uniform"``, ``"non_uniform"`` and ``"nonuniform"`` are one key."""
    return str(key).lower().replace("-", "").replace("_", "").replace(" ", "")


class Registry:
    def __init__(self, name: str) -> None:
        self.name = name
        self._items: Dict[str, Callable] = {}
        self._canonical: Dict[str, str] = {}

    def register(self, key: str, *aliases: str) -> Callable[[Callable[..., T]], Callable[..., T]]:
        canonical = normalize_key(key)

        def decorator(factory: Callable[..., T]) -> Callable[..., T]:
            for name in (key, *aliases):
                norm = normalize_key(name)
                if norm in self._canonical:
                    raise ValueError(f"{self.name} registry already has key {name}")
                self._canonical[norm] = canonical
            self._items[canonical] = factory
            return factory

        return decorator

    def canonical(self, key: str) -> str:
        try:
            return self._canonical[normalize_key(key)]
        except KeyError as exc:
            raise KeyError(f"Unknown {self.name} '{key}' (known: {', '.join(self.keys())})") from exc

    def get(self, key: str) -> Callable:
        return self._items[self.canonical(key)]

    def __contains__(self, key: str) -> bool:
        return normalize_key(key) in self._canonical

    def keys(self) -> List[str]:
        return sorted(self._items)
