# typeregistry/conf/loader.py

import importlib
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Mapping

from .models import RegistrySettings
from ..exceptions import RegistryConfigurationError

DEFAULT_NAMESPACE = "TYPEREGISTRY"

# Keys that may be supplied through the environment.
_ENV_KEYS = ("DEDUPE_EXTENSIONS", "FREEZE", "CONFIGURATORS")


def _resolve_attr(obj: Any, attrs: list[str]) -> Any:
    for a in attrs:
        obj = getattr(obj, a)
    return obj


def import_from_path(path: str) -> Any:
    """
    Resolve "pkg.module:attr" or "pkg.module.attr" to an object.

    Only absolute module paths are accepted. Every failure surfaces as
    ``RegistryConfigurationError``.
    """
    if not isinstance(path, str) or not path.strip():
        raise RegistryConfigurationError(f"Import path must be a non-empty string: {path!r}")
    path = path.strip()
    mod_path, sep, attr = path.partition(":")
    if not mod_path or mod_path.startswith(".") or (sep and not attr):
        raise RegistryConfigurationError(f"Import path must be absolute 'module:attr': {path!r}")

    try:
        if sep:
            return _resolve_attr(importlib.import_module(mod_path), attr.split("."))
        parts = path.split(".")
        for i in range(len(parts), 0, -1):
            try:
                mod = importlib.import_module(".".join(parts[:i]))
            except ImportError:
                continue
            return _resolve_attr(mod, parts[i:])
    except (ImportError, AttributeError, ValueError) as err:
        raise RegistryConfigurationError(f"Could not import from path: {path}") from err
    raise RegistryConfigurationError(f"Could not import from path: {path}")


def _deep_merge(a: dict[str, Any], b: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``b`` into ``a`` in place, recursing into nested mappings."""
    for k, v in b.items():
        if isinstance(v, Mapping) and isinstance(a.get(k), dict):
            _deep_merge(a[k], v)
        elif isinstance(v, Mapping):
            a[k] = _deep_merge({}, v)
        else:
            a[k] = v
    return a


def _extract_namespaced_settings(obj: Any, namespace: str) -> dict[str, Any]:
    """Read a ``NAMESPACE = {...}`` mapping, then let ``NAMESPACE_KEY`` attributes override it."""
    ns = namespace.upper()
    block = getattr(obj, ns, None)
    out = _deep_merge({}, block) if isinstance(block, Mapping) else {}

    prefix = ns + "_"
    for key in dir(obj):
        if key.startswith(prefix):
            out[key.removeprefix(prefix)] = getattr(obj, key)
    return out


def _env_to_settings(namespace: str) -> dict[str, Any]:
    prefix = namespace.upper() + "_"
    return {
        key: os.environ[prefix + key]
        for key in _ENV_KEYS
        if prefix + key in os.environ
    }


@dataclass(slots=True)
class SettingsLoader:
    """Layers registry settings: model defaults, then mappings, then settings objects, then the environment."""
    _mapping_sources: list[Mapping[str, Any]] = field(default_factory=list)
    _object_sources: list[tuple[str, str]] = field(default_factory=list)  # (obj_path, namespace)
    _env_sources: list[str] = field(default_factory=list)  # namespaces

    def add_mapping_source(self, mapping: Mapping[str, Any]) -> None:
        self._mapping_sources.append(mapping)

    def add_object_source(self, *, obj_path: str, namespace: str = DEFAULT_NAMESPACE) -> None:
        self._object_sources.append((obj_path, namespace))

    def add_env_source(self, *, namespace: str = DEFAULT_NAMESPACE) -> None:
        self._env_sources.append(namespace)

    def resolve(self) -> RegistrySettings:
        merged: dict[str, Any] = {}

        for mapping in self._mapping_sources:
            _deep_merge(merged, mapping)

        for obj_path, namespace in self._object_sources:
            obj = import_from_path(obj_path)
            _deep_merge(merged, _extract_namespaced_settings(obj, namespace))

        for namespace in self._env_sources:
            _deep_merge(merged, _env_to_settings(namespace))

        return RegistrySettings(**merged)


@lru_cache(maxsize=8)
def get_settings(
    *,
    namespace: str = DEFAULT_NAMESPACE,
    obj_path: str | None = None,
) -> RegistrySettings:
    """Settings from ``obj_path`` (when given) overlaid with ``{NAMESPACE}_*`` environment variables; cached."""
    loader = SettingsLoader()

    if obj_path:
        loader.add_object_source(obj_path=obj_path, namespace=namespace)

    loader.add_env_source(namespace=namespace)

    return loader.resolve()


def clear_settings_cache() -> None:
    """Drop cached settings so the next get_settings() reloads."""
    get_settings.cache_clear()
