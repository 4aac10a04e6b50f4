# typeregistry/registry/base.py


import logging
from threading import RLock
from typing import Any, Mapping

from asgiref.sync import sync_to_async

from .builtins import BUILTIN_TYPES
from ..exceptions import DuplicateRegistrationError, RegistryFrozenError
from ..identifiers import normalize, type_label

logger = logging.getLogger(__name__)


class TypeRegistry:
    """
    Maps host types to schema descriptor classes and records which types extend which.

    Two independent stores live here:

    - the direct store, one descriptor per host type, overwrite forbidden
    - the extension store, base type to the ordered types extending it

    Direct lookups fall back to a fixed table of primitive scalars. Every
    identifier is normalized first, so ``Optional[int]`` and ``int`` share
    one entry.
    """

    def __init__(
        self,
        *,
        dedupe_extensions: bool = True,
        builtins: Mapping[Any, type] = BUILTIN_TYPES,
    ) -> None:
        self._lock = RLock()
        self._store: dict[Any, type] = {}
        self._extensions: dict[Any, list[Any]] = {}
        self._builtins = builtins
        self._dedupe_extensions = dedupe_extensions
        self._frozen = False

    def _check_not_frozen(self) -> None:
        if self._frozen:
            raise RegistryFrozenError("Registry is frozen")

    # --- direct mapping ---

    def add(self, host_type: Any, graph_type: type) -> None:
        """
        Register ``graph_type`` as the descriptor for ``host_type``.

        Only user registrations are checked for collisions, so a built-in
        primitive such as ``str`` may be remapped once and the user entry wins
        on lookup.

        :param host_type: The host type identifier. Nullable and ``Annotated``
                          wrappers are stripped before storing.
        :param graph_type: The descriptor class to resolve to.
        :return: None
        :raises DuplicateRegistrationError: If ``host_type`` already has an entry.
        :raises RegistryFrozenError: If the registry has been frozen.
        :raises TypeError: If ``graph_type`` is not a class.
        """
        if not isinstance(graph_type, type):
            raise TypeError(f"Descriptor must be a class, got {graph_type!r}")
        key = normalize(host_type)

        with self._lock:
            self._check_not_frozen()
            if key in self._store:
                raise DuplicateRegistrationError(
                    f"Type already registered: {type_label(key)} -> {type_label(self._store[key])}"
                )
            self._store[key] = graph_type

        logger.debug("Registered %s -> %s", type_label(key), type_label(graph_type))

    def try_add(self, host_type: Any, graph_type: type) -> bool:
        """Like `add`, but returns False instead of raising on duplicates."""
        try:
            self.add(host_type, graph_type)
        except DuplicateRegistrationError:
            logger.debug("Duplicate registration ignored: %s", type_label(host_type))
            return False
        return True

    def get(self, host_type: Any) -> type | None:
        """
        Resolve the descriptor for ``host_type``.

        The normalized identifier is looked up in the user store first and in
        the built-in table second. A miss returns None; deciding whether that
        is fatal is up to the caller.
        """
        key = normalize(host_type)
        with self._lock:
            found = self._store.get(key)
        if found is not None:
            return found
        return self._builtins.get(key)

    # --- extension mapping ---

    def extend(self, base_type: Any, extending_type: Any) -> None:
        """
        Record that ``extending_type`` contributes members to ``base_type``.

        Repeating a pair is not an error. With ``dedupe_extensions`` enabled
        the repeat is dropped, otherwise it is stored again.
        """
        base = normalize(base_type)
        extending = normalize(extending_type)

        with self._lock:
            self._check_not_frozen()
            bucket = self._extensions.setdefault(base, [])
            if self._dedupe_extensions and extending in bucket:
                logger.debug(
                    "Duplicate extension ignored: %s extends %s",
                    type_label(extending),
                    type_label(base),
                )
                return
            bucket.append(extending)

        logger.debug("Registered extension: %s extends %s", type_label(extending), type_label(base))

    def get_extending(self, base_type: Any) -> tuple[Any, ...]:
        """Return the types extending ``base_type`` in insertion order; empty when none."""
        base = normalize(base_type)
        with self._lock:
            return tuple(self._extensions.get(base, ()))

    # --- async wrappers ---

    async def aadd(self, host_type: Any, graph_type: type) -> None:
        return await sync_to_async(self.add)(host_type, graph_type)

    async def aget(self, host_type: Any) -> type | None:
        return await sync_to_async(self.get)(host_type)

    async def aextend(self, base_type: Any, extending_type: Any) -> None:
        return await sync_to_async(self.extend)(base_type, extending_type)

    async def aget_extending(self, base_type: Any) -> tuple[Any, ...]:
        return await sync_to_async(self.get_extending)(base_type)

    # --- enumeration ---

    def count(self) -> int:
        """Counts the number of user registrations (built-ins excluded)."""
        with self._lock:
            return len(self._store)

    def keys(self) -> tuple[Any, ...]:
        with self._lock:
            return tuple(self._store.keys())

    def items(self) -> tuple[tuple[Any, type], ...]:
        with self._lock:
            return tuple(self._store.items())

    def __contains__(self, host_type: Any) -> bool:
        key = normalize(host_type)
        with self._lock:
            return key in self._store

    # --- control ---

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """
        Mark the registry as frozen (no further mutations).
        """
        with self._lock:
            self._frozen = True
        logger.debug("Type registry frozen with %d entries", len(self._store))

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} entries={self.count()} "
            f"extended={len(self._extensions)} frozen={self._frozen}>"
        )
