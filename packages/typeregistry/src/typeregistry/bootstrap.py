# typeregistry/bootstrap.py

import logging

from .conf import RegistrySettings, get_settings, import_from_path
from .exceptions import RegistryConfigurationError
from .registry import TypeRegistry

logger = logging.getLogger(__name__)


def build_registry(settings: RegistrySettings | None = None) -> TypeRegistry:
    """
    Build a populated registry for one application start.

    Steps, in order:
    - apply MAPPINGS (host type path -> descriptor path)
    - apply EXTENSIONS (base type path -> extending type paths)
    - call each CONFIGURATORS entry with the registry
    - freeze when FREEZE is set

    The returned registry is meant to be passed explicitly to the schema
    builder. Duplicate mappings propagate ``DuplicateRegistrationError``.
    """
    if settings is None:
        settings = get_settings()

    registry = TypeRegistry(dedupe_extensions=settings.DEDUPE_EXTENSIONS)

    for host_path, graph_path in settings.MAPPINGS.items():
        registry.add(import_from_path(host_path), import_from_path(graph_path))

    for base_path, extending_paths in settings.EXTENSIONS.items():
        base = import_from_path(base_path)
        for extending_path in extending_paths:
            registry.extend(base, import_from_path(extending_path))

    for path in settings.CONFIGURATORS:
        configure = import_from_path(path)
        if not callable(configure):
            raise RegistryConfigurationError(f"Configurator is not callable: {path}")
        configure(registry)

    if settings.FREEZE:
        registry.freeze()

    logger.debug("Built %r", registry)
    return registry
