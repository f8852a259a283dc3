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
"""AffordanceBuilder — turn a recorded controller call into affordances."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from flyhateoas.affordance import Affordance, MvcAffordance
from flyhateoas.exceptions import IllegalArgumentException
from flyhateoas.mappings import HttpMethod

if TYPE_CHECKING:
    from flyhateoas.discoverer import MappingDiscoverer
    from flyhateoas.factory import AffordanceModelFactory
    from flyhateoas.invocation import MethodInvocation
    from flyhateoas.plugin import PluginRegistry
    from flyhateoas.uri import UriComponents

logger = structlog.get_logger("flyhateoas.builder")


class AffordanceBuilder:
    """Construct :class:`MvcAffordance` objects using a registry of model factories.

    One affordance is produced per HTTP method the discoverer reports, and
    each carries one model per registered factory, keyed by the factory's
    media type.
    """

    def __init__(self, factories: PluginRegistry[AffordanceModelFactory, str] | None) -> None:
        if factories is None:
            raise IllegalArgumentException(
                "Registry of AffordanceModelFactory must not be None!",
                code="HATEOAS_ARGUMENT",
            )
        self._factories = factories

    @property
    def factories(self) -> PluginRegistry[AffordanceModelFactory, str]:
        return self._factories

    def create(
        self,
        invocation: MethodInvocation,
        discoverer: MappingDiscoverer,
        components: UriComponents,
    ) -> list[Affordance]:
        """Create the affordances of *invocation*'s method at *components*.

        HTTP methods are taken in the order the discoverer returns them.
        Errors raised by a factory propagate unchanged.
        """
        method = invocation.method
        http_methods = discoverer.get_request_type(invocation.target_type, method)

        affordances: list[Affordance] = []

        for request_method in http_methods:
            affordance = MvcAffordance(HttpMethod.value_of(request_method), method)

            for factory in self._factories:
                affordance.add_affordance_model(
                    factory.media_type,
                    factory.get_affordance_model(affordance, invocation, components),
                )

            affordances.append(affordance)

        logger.debug(
            "affordances_created",
            target=invocation.target_type.__name__,
            method=invocation.method_name,
            http_methods=list(http_methods),
            media_types=len(self._factories),
        )
        return affordances
