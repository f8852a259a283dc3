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
"""Request binding markers read when deriving an affordance's input shape.

Usage in handler signatures::

    async def get_order(self, order_id: PathVar[str]) -> Order: ...
    async def list_orders(self, page: QueryParam[int] = 1) -> list: ...
    async def create_order(self, body: Body[CreateOrderRequest]) -> Order: ...
    async def update_order(self, body: Valid[UpdateOrderRequest]) -> Order: ...
"""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class PathVar(Generic[T]):
    """Path variable extracted from the URL path (e.g. ``/orders/{order_id}``)."""


class QueryParam(Generic[T]):
    """Query parameter extracted from the URL query string (e.g. ``?page=1``)."""


class Body(Generic[T]):
    """JSON request body; its Pydantic model is the affordance's input type."""


class Valid(Generic[T]):
    """Validated parameter. Standalone ``Valid[T]`` implies ``Body[T]``."""
