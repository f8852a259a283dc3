# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""PluginRegistry — ordered lookup of plugins by selector, plus the @order decorator."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

from flyhateoas.exceptions import PluginNotFoundException

P = TypeVar("P")
S = TypeVar("S")
T = TypeVar("T", bound=type)

HIGHEST_PRECEDENCE: int = -(2**31)
LOWEST_PRECEDENCE: int = 2**31 - 1


def order(value: int) -> Callable[[T], T]:
    """Set the registry order for a plugin class.

    Lower value = higher priority (iterated first).
    Default order for undecorated plugins is 0.
    """

    def decorator(cls: T) -> T:
        cls.__hateoas_order__ = value  # type: ignore[attr-defined]
        return cls

    return decorator


def get_order(plugin: Any) -> int:
    """Get the order value for a plugin instance or class, defaulting to 0."""
    return getattr(plugin, "__hateoas_order__", 0)


class PluginRegistry(Generic[P, S]):
    """Immutable, ordered collection of plugins selectable by *S*.

    A plugin supports a selector when its ``supports(selector)`` returns true,
    or, lacking that method, when its ``media_type`` equals the selector.

    Usage::

        registry = PluginRegistry.of(HalFormsAffordanceModelFactory(), ...)
        for factory in registry: ...
        registry.get_plugins_for("application/prs.hal-forms+json")
    """

    def __init__(self, plugins: Iterable[P] = ()) -> None:
        # sorted() is stable, so equal orders keep registration order
        self._plugins: tuple[P, ...] = tuple(sorted(plugins, key=get_order))

    @classmethod
    def of(cls, *plugins: P) -> PluginRegistry[P, S]:
        return cls(plugins)

    @classmethod
    def empty(cls) -> PluginRegistry[P, S]:
        return cls(())

    @property
    def plugins(self) -> list[P]:
        return list(self._plugins)

    def __iter__(self) -> Iterator[P]:
        return iter(self._plugins)

    def __len__(self) -> int:
        return len(self._plugins)

    def get_plugins_for(self, selector: S) -> list[P]:
        return [p for p in self._plugins if self._supports(p, selector)]

    def get_plugin_for(self, selector: S, default: P | None = None) -> P | None:
        for plugin in self._plugins:
            if self._supports(plugin, selector):
                return plugin
        return default

    def get_required_plugin_for(self, selector: S) -> P:
        plugin = self.get_plugin_for(selector)
        if plugin is None:
            raise PluginNotFoundException(
                f"No plugin found for {selector!r}",
                code="HATEOAS_PLUGIN",
                context={"selector": selector, "available": len(self._plugins)},
            )
        return plugin

    @staticmethod
    def _supports(plugin: Any, selector: Any) -> bool:
        supports = getattr(plugin, "supports", None)
        if callable(supports):
            return bool(supports(selector))
        return getattr(plugin, "media_type", None) == selector

    def __repr__(self) -> str:
        names = ", ".join(type(p).__name__ for p in self._plugins)
        return f"PluginRegistry([{names}])"
