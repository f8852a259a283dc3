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
"""Collection+JSON affordance models (``template`` and ``queries`` entries)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from flyhateoas.affordance import AffordanceModel
from flyhateoas.mappings import HttpMethod
from flyhateoas.mediatypes.constants import COLLECTION_JSON

if TYPE_CHECKING:
    from flyhateoas.affordance import Affordance
    from flyhateoas.invocation import MethodInvocation
    from flyhateoas.uri import UriComponents

_BODY_METHODS = frozenset({HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH})


@dataclass
class CollectionJsonAffordanceModel(AffordanceModel):
    """Collection+JSON view of one affordance.

    Body methods render as a write ``template``; GET renders as a ``query``
    with its query parameters. Other methods carry no data.
    """

    rel: str
    uri: str
    http_method: HttpMethod
    input_properties: list[str] = field(default_factory=list)
    query_properties: list[str] = field(default_factory=list)
    media_type: str = COLLECTION_JSON

    def to_dict(self) -> dict[str, Any]:
        if self.http_method in _BODY_METHODS:
            return {"data": [{"name": name, "value": ""} for name in self.input_properties]}
        if self.http_method is HttpMethod.GET:
            return {
                "rel": self.rel,
                "href": self.uri,
                "data": [{"name": name, "value": ""} for name in self.query_properties],
            }
        return {}


class CollectionJsonAffordanceModelFactory:
    media_type = COLLECTION_JSON

    def get_affordance_model(
        self,
        affordance: Affordance,
        invocation: MethodInvocation,
        components: UriComponents,
    ) -> CollectionJsonAffordanceModel:
        return CollectionJsonAffordanceModel(
            rel=affordance.name,
            uri=components.to_uri_string(),
            http_method=affordance.http_method,
            input_properties=[p.name for p in affordance.input_properties()],
            query_properties=[q.name for q in affordance.query_parameters()],
        )
