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
"""HTTP method mapping decorators for class-based controllers.

Mirrors Spring's @RequestMapping, @GetMapping, @PostMapping, etc. Unlike a
routing layer, a handler may declare several HTTP methods; each becomes its
own affordance.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import StrEnum
from typing import Any, TypeVar

from flyhateoas.exceptions import UnknownHttpMethodException

T = TypeVar("T")

MAPPING_ATTR = "__hateoas_mapping__"
REQUEST_MAPPING_ATTR = "__hateoas_request_mapping__"


class HttpMethod(StrEnum):
    """Closed set of HTTP request methods an affordance can be scoped to."""

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"

    @classmethod
    def value_of(cls, name: str) -> HttpMethod:
        """Resolve *name* exactly as written; unknown names raise."""
        try:
            return cls(name)
        except ValueError:
            raise UnknownHttpMethodException(
                f"No enum constant HttpMethod.{name}",
                code="HATEOAS_HTTP_METHOD",
                context={"http_method": name},
            ) from None


def request_mapping(path: str = "", *, methods: Iterable[str] | None = None) -> Callable[[T], T]:
    """Set the base path on a class, or a multi-method mapping on a handler.

    On a class, *methods* is ignored and only the base path is recorded.
    On a function, every name in *methods* is validated against
    :class:`HttpMethod` at decoration time.
    """

    def decorator(target: T) -> T:
        if isinstance(target, type):
            setattr(target, REQUEST_MAPPING_ATTR, path.rstrip("/"))
            return target
        resolved = [str(HttpMethod.value_of(m)) for m in (methods or ())]
        setattr(target, MAPPING_ATTR, {"methods": resolved, "path": path})
        return target

    return decorator


def _make_method_mapping(method: HttpMethod) -> Callable[..., Any]:
    """Factory that creates a single-verb mapping decorator."""

    def mapping(path: str = "") -> Callable[[T], T]:
        return request_mapping(path, methods=[method])

    mapping.__name__ = f"{method.lower()}_mapping"
    mapping.__qualname__ = f"{method.lower()}_mapping"
    return mapping


get_mapping = _make_method_mapping(HttpMethod.GET)
post_mapping = _make_method_mapping(HttpMethod.POST)
put_mapping = _make_method_mapping(HttpMethod.PUT)
patch_mapping = _make_method_mapping(HttpMethod.PATCH)
delete_mapping = _make_method_mapping(HttpMethod.DELETE)
