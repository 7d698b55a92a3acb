"""Interface of the execution engine that sends descriptors over the wire.

The engine is not part of this package. It receives a finished
:class:`~httpconnection.request.HttpRequest` and is responsible for
applying its cache policy against a
:class:`~httpconnection.cache.ResponseStore`, encoding headers, parameters
and multipart files, performing the call, and surfacing transport errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from httpconnection.request import HttpRequest


@runtime_checkable
class RequestExecutor(Protocol):
    """Anything that can execute a request descriptor."""

    def execute(self, request: HttpRequest) -> Any:
        """Send *request* and return the engine's response object.

        The engine must treat *request* as read-only.
        """
        ...
