"""Send encoded requests over HTTP and decode the results."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from marqo_client.core.encoding import EncodedRequest
from marqo_client.core.errors import DecodeError, ServerError, TransportError

if TYPE_CHECKING:
    from marqo_client.operations import Operation

API_KEY_HEADER = "x-api-key"


class Dispatcher:
    """Performs exactly one HTTP round trip per operation.

    Timeouts, TLS and connection pooling belong to the injected httpx.Client;
    the dispatcher never retries.

    Args:
        http_client: Transport used for every request
        base_url: Server base URL, without trailing slash
        api_key: Optional API key sent as the x-api-key header
    """

    def __init__(
        self,
        http_client: httpx.Client,
        base_url: str,
        api_key: str | None = None,
    ) -> None:
        self._http_client = http_client
        self._base_url = base_url.rstrip("/")
        self._headers = {API_KEY_HEADER: api_key} if api_key else {}

    def send(self, operation: Operation, encoded: EncodedRequest) -> Any:
        """Send an encoded request and decode the response.

        Args:
            operation: Catalog entry, provides the name and result type
            encoded: Request produced by the encoder

        Returns:
            Decoded result, or None for operations without a result type

        Raises:
            TransportError: If the request could not be built or completed
            ServerError: If the server returned a non-2xx status
            DecodeError: If a 2xx body does not match the result type
        """
        kwargs: dict[str, Any] = {"params": encoded.params, "headers": self._headers}
        if encoded.body is not None:
            kwargs["json"] = encoded.body

        try:
            response = self._http_client.request(
                encoded.method,
                f"{self._base_url}{encoded.path}",
                **kwargs,
            )
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise TransportError(operation.name, e) from e

        if not response.is_success:
            raise ServerError(response.status_code, operation.name, response.text)

        if operation.result_type is None:
            return None

        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(operation.name, "Invalid JSON") from e

        try:
            return TypeAdapter(operation.result_type).validate_python(data)
        except PydanticValidationError as e:
            raise DecodeError(operation.name, str(e)) from e

