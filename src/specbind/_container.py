from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from ._spec import Factory, Specification


logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    Listener = Callable[[object, Specification], None]


class ResolutionError(RuntimeError):
    pass


class Container:
    """In-memory DI container.

    - register descriptors or pre-built instances under string ids
    - create objects asynchronously, resolving `@require` recursively
    - singletons created at most once
    - observers notified of every created object
    - optional scoping.
    """

    def __init__(self) -> None:
        self._specs: dict[str, Specification] = {}
        self._listeners: dict[str, list[Listener]] = {}

    def register(
        self,
        id: str,
        descriptor: object,
        *,
        factory: Factory | None = None,
        replace: bool = False,
    ) -> Specification:
        """Register a descriptor under `id`.

        Example:
          container.register("db", create_db)
          container.register("repo", {"@require": ["db"]}, factory=Factory.constructor(Repo))

        """
        return self._add(Specification(id, descriptor, factory=factory), replace=replace)

    def register_instance(self, id: str, instance: object, *, replace: bool = False) -> Specification:
        """Register a pre-built instance (always singleton)."""
        spec = Specification(id, {"@singleton": True}, factory=Factory.literal(instance))
        return self._add(spec, replace=replace)

    def _add(self, spec: Specification, *, replace: bool) -> Specification:
        if spec.id in self._specs:
            if not replace:
                msg = f"Id {spec.id!r} is already registered. Pass replace=True to overwrite."
                raise KeyError(msg)
            logger.warning("replacing registration for %s", spec.id)

        logger.debug("register %r", spec)
        self._specs[spec.id] = spec
        return spec

    def spec(self, id: str) -> Specification:
        try:
            return self._specs[id]
        except KeyError:
            msg = f"No registration found for id: {id!r}"
            raise KeyError(msg) from None

    def ids(self) -> Iterator[str]:
        return iter(self._specs)

    def __contains__(self, id: object) -> bool:
        return id in self._specs

    def create(self, id: str, parent: Specification | None = None) -> asyncio.Future[Any]:
        """Create the object registered under `id`.

        Never raises for a missing id: the returned future is rejected with a
        `ResolutionError` instead, so failures reach whoever awaits it.
        """
        spec = self._specs.get(id)
        if spec is None:
            return self._missing(id, parent)
        return spec.create(self)

    def _missing(self, id: str, parent: Specification | None) -> asyncio.Future[Any]:
        msg = f"No registration found for id: {id!r}"
        if parent is not None:
            msg += f" (required by {parent.id!r})"

        future = asyncio.get_running_loop().create_future()
        future.set_exception(ResolutionError(msg))
        return future

    def on(self, event: str, listener: Listener) -> None:
        self._listeners.setdefault(event, []).append(listener)

    def off(self, event: str, listener: Listener) -> None:
        listeners = self._listeners.get(event, [])
        if listener in listeners:
            listeners.remove(listener)

    def notify(self, event: str, instance: object, spec: Specification) -> None:
        """Call every listener of `event` in registration order."""
        for listener in list(self._listeners.get(event, ())):
            listener(instance, spec)

    def create_scope(self) -> Scope:
        """Create a scope that prefers its own registrations, falls back to parent."""
        return Scope(self, _from_parent=True)


class Scope(Container):
    """A scoped container that looks up in itself first, then falls back to a parent container.

    Useful for per-request/per-test lifetimes without altering root registrations.
    Objects created by the parent are resolved against the parent only, and
    its observers are the ones notified.
    """

    def __init__(self, parent: Container, *, _from_parent: bool = False) -> None:
        if not _from_parent:
            msg = "Scope instances must be created via Container.create_scope()"
            raise RuntimeError(msg)
        super().__init__()
        self._parent = parent

    def spec(self, id: str) -> Specification:
        if id in self._specs:
            return self._specs[id]
        return self._parent.spec(id)

    def __contains__(self, id: object) -> bool:
        return id in self._specs or id in self._parent

    def create(self, id: str, parent: Specification | None = None) -> asyncio.Future[Any]:
        """Create the object registered under `id`.

        Uses registrations in this scope. If the id is not registered locally,
        creation falls back to the parent container.
        """
        if id not in self._specs:
            return self._parent.create(id, parent)

        return super().create(id, parent)
