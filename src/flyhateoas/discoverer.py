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
"""Which path and HTTP methods a controller method answers."""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from flyhateoas.mappings import MAPPING_ATTR, REQUEST_MAPPING_ATTR

_MULTIPLE_SLASHES = re.compile(r"/{2,}")


@runtime_checkable
class MappingDiscoverer(Protocol):
    """Resolves mapping metadata of controller types and methods."""

    def get_mapping(self, type_: type, method: Callable[..., Any] | None = None) -> str | None: ...

    def get_request_type(self, type_: type, method: Callable[..., Any]) -> list[str]: ...


class AnnotationMappingDiscoverer:
    """Reads the metadata left by the mapping decorators.

    The attribute names are configurable so that metadata written by another
    decorator set can be read as well. A method mapping may store either a
    ``methods`` list or a single ``method`` string::

        discoverer = AnnotationMappingDiscoverer(
            type_attr="__pyfly_request_mapping__",
            method_attr="__pyfly_mapping__",
        )
    """

    def __init__(
        self,
        type_attr: str = REQUEST_MAPPING_ATTR,
        method_attr: str = MAPPING_ATTR,
    ) -> None:
        self._type_attr = type_attr
        self._method_attr = method_attr

    def get_mapping(self, type_: type, method: Callable[..., Any] | None = None) -> str | None:
        """Return the type-level path, or the full path of *method* on *type_*.

        Returns ``None`` when the type (or method) carries no mapping.
        """
        base: str | None = getattr(type_, self._type_attr, None)
        if method is None:
            return base

        mapping = self._method_mapping(method)
        if mapping is None:
            return None

        joined = f"{base or ''}/{mapping.get('path', '')}"
        path = _MULTIPLE_SLASHES.sub("/", joined)
        if len(path) > 1:
            path = path.rstrip("/")
        return path

    def get_request_type(self, type_: type, method: Callable[..., Any]) -> list[str]:
        """Return the HTTP method names *method* is mapped to, in declared order."""
        mapping = self._method_mapping(method)
        if mapping is None:
            return []
        if "methods" in mapping:
            return [str(m) for m in mapping["methods"]]
        if "method" in mapping:
            return [str(mapping["method"])]
        return []

    def _method_mapping(self, method: Callable[..., Any]) -> dict[str, Any] | None:
        return getattr(method, self._method_attr, None)
