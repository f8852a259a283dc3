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
"""Capture controller method calls without executing them.

Usage::

    invocation = method_on(OrderController).get_order("42")
    invocation.target_type   # OrderController
    invocation.method        # OrderController.get_order
    invocation.bound_arguments()  # {"order_id": "42"}
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class MethodInvocation:
    """A recorded call of *method* on an instance of *target_type*."""

    target_type: type
    method: Callable[..., Any]
    arguments: tuple[Any, ...] = ()
    keyword_arguments: dict[str, Any] = field(default_factory=dict)
    object_parameters: tuple[Any, ...] = ()

    @property
    def method_name(self) -> str:
        return self.method.__name__

    def bound_arguments(self) -> dict[str, Any]:
        """Map the recorded arguments onto the method's parameter names.

        ``self`` is excluded. Parameters that were not supplied are omitted.
        """
        sig = inspect.signature(self.method)
        bound = sig.bind_partial(None, *self.arguments, **self.keyword_arguments)
        names = list(sig.parameters)
        return {name: value for name, value in bound.arguments.items() if name != names[0]}


class _InvocationRecorder:
    """Proxy that turns method calls into :class:`MethodInvocation` records."""

    def __init__(self, target_type: type, object_parameters: tuple[Any, ...]) -> None:
        self._target_type = target_type
        self._object_parameters = object_parameters

    def __getattr__(self, name: str) -> Callable[..., MethodInvocation]:
        method = getattr(self._target_type, name, None)
        if method is None or not callable(method) or isinstance(method, type):
            raise AttributeError(f"{self._target_type.__name__} has no method '{name}'")

        def record(*args: Any, **kwargs: Any) -> MethodInvocation:
            # Raises TypeError for arguments the handler signature cannot bind.
            inspect.signature(method).bind(None, *args, **kwargs)
            return MethodInvocation(
                target_type=self._target_type,
                method=method,
                arguments=args,
                keyword_arguments=dict(kwargs),
                object_parameters=self._object_parameters,
            )

        return record

    def __repr__(self) -> str:
        return f"method_on({self._target_type.__name__})"


def method_on(target_type: type, *parameters: Any) -> Any:
    """Return a recorder whose method calls produce :class:`MethodInvocation` objects.

    *parameters* fill template variables of the class-level mapping, in order.
    """
    return _InvocationRecorder(target_type, parameters)
