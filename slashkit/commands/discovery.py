"""Turning declaration sources into (descriptor, handler) pairs."""

import importlib
import inspect
import logging
import pkgutil
from collections.abc import Iterator
from typing import Any

from .descriptor import CommandDescriptor, Handler

logger = logging.getLogger(__name__)

Declaration = tuple[CommandDescriptor, Handler]


def _declared(obj: Any) -> CommandDescriptor | None:
    descriptor = getattr(obj, "_slash_command", None)
    if isinstance(descriptor, CommandDescriptor) and callable(obj):
        return descriptor
    return None


def _scan_members(holder: Any) -> Iterator[Declaration]:
    for attr_name in dir(holder):
        if attr_name.startswith("__"):
            continue
        attr = getattr(holder, attr_name)
        descriptor = _declared(attr)
        if descriptor is not None:
            yield descriptor, attr


def iter_declarations(source: Any) -> Iterator[Declaration]:
    """
    Yield every declaration exposed by a source.

    Accepted sources:
      - a ``(CommandDescriptor, handler)`` pair
      - a function decorated with ``@slash``
      - a class, instantiated without arguments so methods get bound
      - a module, yielding its decorated functions and ``@auto_register`` classes
      - any other object, scanned for decorated bound methods
      - an iterable of any of the above
    """
    if (
        isinstance(source, tuple)
        and len(source) == 2
        and isinstance(source[0], CommandDescriptor)
    ):
        yield source
        return

    if inspect.isclass(source):
        yield from _scan_members(source())
        return

    if inspect.ismodule(source):
        for _, member in inspect.getmembers(source):
            if getattr(member, "__module__", None) != source.__name__:
                continue
            if inspect.isclass(member):
                if getattr(member, "_auto_register", False):
                    yield from iter_declarations(member)
                continue
            descriptor = _declared(member)
            if descriptor is not None:
                yield descriptor, member
        return

    descriptor = _declared(source)
    if descriptor is not None:
        yield descriptor, source
        return

    if isinstance(source, (list, tuple, set, frozenset)) or inspect.isgenerator(source):
        for item in source:
            yield from iter_declarations(item)
        return

    yield from _scan_members(source)


def discover(package_name: str) -> Iterator[Declaration]:
    """Import every module below a package and yield its ``@auto_register`` classes."""
    package = importlib.import_module(package_name)
    modules = [package]

    if hasattr(package, "__path__"):
        for module_info in pkgutil.walk_packages(package.__path__, f"{package.__name__}."):
            modules.append(importlib.import_module(module_info.name))

    for module in modules:
        for _, cls in inspect.getmembers(module, inspect.isclass):
            if cls.__module__ != module.__name__:
                continue
            if getattr(cls, "_auto_register", False):
                logger.debug(f"Discovered command class {cls.__module__}.{cls.__qualname__}")
                yield from iter_declarations(cls)
