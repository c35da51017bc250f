"""Asynchronous dependency injection engine.

This package builds objects from specifications: descriptors annotated with
the ids of the objects they require (`@require`), whether a single instance
is shared (`@singleton`) and which interfaces they implement (`@implements`).
Dependencies are created recursively and concurrently on an asyncio event loop
and passed positionally, in declared order, to the object's factory.

Exports:
- `Container`: Registry of specifications by id, creating objects as futures.
- `Scope`: Scoped container that resolves within itself first, then falls back
  to a parent container.
- `Specification`: How one object is created, with its annotations.
- `Factory` / `FactoryKind`: Function, constructor or literal factories.
- `annotate`: Decorator attaching `@`-prefixed annotations to functions/classes.
- `AbstractMethodError`, `ResolutionError`: Errors raised while creating objects.
"""

from ._container import Container, ResolutionError, Scope
from ._spec import AbstractMethodError, ContainerProtocol, Factory, FactoryKind, Specification, annotate


__all__ = [
    "AbstractMethodError",
    "Container",
    "ContainerProtocol",
    "Factory",
    "FactoryKind",
    "ResolutionError",
    "Scope",
    "Specification",
    "annotate",
]
