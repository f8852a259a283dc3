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
"""AffordanceModelFactory — the port every media type plugs into."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from flyhateoas.affordance import Affordance, AffordanceModel
    from flyhateoas.invocation import MethodInvocation
    from flyhateoas.uri import UriComponents


@runtime_checkable
class AffordanceModelFactory(Protocol):
    """Produces the model of one media type for a given affordance."""

    media_type: str

    def get_affordance_model(
        self,
        affordance: Affordance,
        invocation: MethodInvocation,
        components: UriComponents,
    ) -> AffordanceModel: ...
