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
"""Immutable URI components with ``{variable}`` template support."""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qsl, quote, urlencode, urlsplit

if TYPE_CHECKING:
    from starlette.requests import Request

_TEMPLATE_VAR_RE = re.compile(r"\{(\w+)\}")
_DEFAULT_PORTS = {"http": 80, "https": 443}


@dataclass(frozen=True)
class UriComponents:
    """Location of an endpoint, possibly still holding ``{name}`` templates.

    Every ``with_*`` style method returns a new instance.
    """

    scheme: str = "http"
    host: str = "localhost"
    port: int | None = None
    path: str = ""
    query: tuple[tuple[str, str], ...] = ()
    fragment: str = ""

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def from_uri_string(cls, uri: str) -> UriComponents:
        """Parse an absolute URI such as ``https://api.example.com:8443/orders?page=1``."""
        parts = urlsplit(uri)
        return cls(
            scheme=parts.scheme or "http",
            host=parts.hostname or "localhost",
            port=parts.port,
            path=parts.path.rstrip("/") if parts.path != "/" else "",
            query=tuple(parse_qsl(parts.query, keep_blank_values=True)),
            fragment=parts.fragment,
        )

    @classmethod
    def from_request(cls, request: Request) -> UriComponents:
        """Base components (scheme, host, port, root path) of a Starlette request."""
        base = request.base_url
        return cls(
            scheme=base.scheme,
            host=base.hostname or "localhost",
            port=base.port,
            path=base.path.rstrip("/"),
        )

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------

    def with_path(self, path: str) -> UriComponents:
        return dataclasses.replace(self, path=path)

    def path_segment(self, *segments: str) -> UriComponents:
        """Append path segments, inserting single slashes between them."""
        path = self.path
        for segment in segments:
            segment = segment.strip("/")
            if segment:
                path = f"{path.rstrip('/')}/{segment}"
        return dataclasses.replace(self, path=path)

    def query_param(self, name: str, value: Any) -> UriComponents:
        return dataclasses.replace(self, query=(*self.query, (name, str(value))))

    def template_variables(self) -> list[str]:
        """Names of the ``{name}`` templates in path and query, first occurrence order."""
        names: list[str] = []
        sources = [self.path, *(v for _, v in self.query)]
        for source in sources:
            for name in _TEMPLATE_VAR_RE.findall(source):
                if name not in names:
                    names.append(name)
        return names

    def expand(self, **variables: Any) -> UriComponents:
        """Replace ``{name}`` templates with URL-encoded values.

        Templates without a matching (non-``None``) variable are kept verbatim.
        """

        def _replace(match: re.Match[str]) -> str:
            value = variables.get(match.group(1))
            if value is None:
                return match.group(0)
            return quote(str(value), safe="")

        return dataclasses.replace(
            self,
            path=_TEMPLATE_VAR_RE.sub(_replace, self.path),
            query=tuple((k, _TEMPLATE_VAR_RE.sub(_replace, v)) for k, v in self.query),
        )

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_uri_string(self) -> str:
        uri = f"{self.scheme}://{self.host}"
        if self.port is not None and _DEFAULT_PORTS.get(self.scheme) != self.port:
            uri += f":{self.port}"
        uri += self.path
        if self.query:
            uri += "?" + urlencode(self.query, safe="{}")
        if self.fragment:
            uri += "#" + self.fragment
        return uri

    def __str__(self) -> str:
        return self.to_uri_string()
