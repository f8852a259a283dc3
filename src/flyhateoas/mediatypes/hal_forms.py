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
"""HAL-FORMS affordance models.

A HAL-FORMS template describes one form: the HTTP method to submit with,
the target URI, and the properties a client must fill in::

    {"method": "PUT", "target": "http://localhost/orders/1",
     "properties": [{"name": "status", "required": true}]}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from flyhateoas.affordance import AffordanceModel
from flyhateoas.mappings import HttpMethod
from flyhateoas.mediatypes.constants import HAL_FORMS_JSON

if TYPE_CHECKING:
    from flyhateoas.affordance import Affordance
    from flyhateoas.invocation import MethodInvocation
    from flyhateoas.uri import UriComponents


@dataclass
class HalFormsAffordanceModel(AffordanceModel):
    """One HAL-FORMS template."""

    name: str
    http_method: HttpMethod
    target: str = ""
    title: str = ""
    properties: list[dict[str, Any]] = field(default_factory=list)
    media_type: str = HAL_FORMS_JSON

    def is_http_get_method(self) -> bool:
        return self.http_method is HttpMethod.GET

    def to_dict(self) -> dict[str, Any]:
        template: dict[str, Any] = {"method": str(self.http_method)}
        if self.title:
            template["title"] = self.title
        template["properties"] = [dict(p) for p in self.properties]
        if self.target:
            template["target"] = self.target
        return template


class HalFormsAffordanceModelFactory:
    """Builds :class:`HalFormsAffordanceModel` from an affordance's input type."""

    media_type = HAL_FORMS_JSON

    def get_affordance_model(
        self,
        affordance: Affordance,
        invocation: MethodInvocation,
        components: UriComponents,
    ) -> HalFormsAffordanceModel:
        properties: list[dict[str, Any]] = []
        if affordance.http_method is not HttpMethod.GET:
            properties = [
                {"name": prop.name, "required": prop.required}
                for prop in affordance.input_properties()
            ]

        return HalFormsAffordanceModel(
            name=affordance.name,
            http_method=affordance.http_method,
            target=components.to_uri_string(),
            properties=properties,
        )
