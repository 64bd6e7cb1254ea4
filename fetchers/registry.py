from __future__ import annotations

from typing import Any, Dict


_REGISTRY: Dict[str, Any] = {}


def register(name: str, factory) -> None:
    _REGISTRY[name] = factory


def get_fetcher(name: str, **kwargs):
    if name not in _REGISTRY:
        raise KeyError(f"Unknown fetcher: {name}")
    return _REGISTRY[name](**kwargs)


def available_fetchers() -> Dict[str, Any]:
    return dict(_REGISTRY)
