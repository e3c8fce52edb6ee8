from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Type, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from ..config import get_settings
from ..errors import ApiError, DecodeError, TransportError
from ..logging import get_logger
from ..models import AddEditPriceIntervalParams, Price, Subscription

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class OrbClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        settings = get_settings()
        self._base_url = (base_url or str(settings.orb_base_url)).rstrip("/")
        self._api_key = api_key or settings.orb_api_key
        self._timeout = timeout_seconds or settings.http_timeout_seconds
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            headers=self._build_headers(),
            transport=transport,
        )

    def _build_headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
        }
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "OrbClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def build_request(
        self,
        method: str,
        path_segments: Iterable[str],
        *,
        json: Any = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> httpx.Request:
        path = "/" + "/".join(quote(segment, safe="") for segment in path_segments)
        return self._client.build_request(method, path, json=json, params=params)

    async def send_request(self, request: httpx.Request, model: Type[ModelT]) -> ModelT:
        method = request.method
        path = request.url.path
        logger.info("orb.request", method=method, path=path)

        try:
            response = await self._client.send(request)
        except httpx.DecodingError as exc:
            logger.error("orb.response.undecodable", method=method, path=path, error=str(exc))
            raise DecodeError(f"{method} {path} returned an undecodable body: {exc}") from exc
        except httpx.RequestError as exc:
            logger.error("orb.request.transport_failed", method=method, path=path, error=str(exc))
            raise TransportError(f"{method} {path} failed: {exc}") from exc

        if not response.is_success:
            error = ApiError.from_body(response.status_code, self._error_body(response))
            logger.error(
                "orb.request.api_error",
                method=method,
                path=path,
                status=response.status_code,
                title=error.title,
            )
            raise error

        try:
            payload = response.json()
        except ValueError as exc:
            logger.error("orb.response.invalid_json", method=method, path=path, error=str(exc))
            raise DecodeError(f"{method} {path} returned a non-JSON body") from exc

        try:
            result = model.model_validate(payload)
        except ValidationError as exc:
            logger.error(
                "orb.response.invalid_shape",
                method=method,
                path=path,
                model=model.__name__,
                error=str(exc),
            )
            raise DecodeError(f"{method} {path} returned an unexpected {model.__name__}") from exc

        logger.info("orb.request.success", method=method, path=path, status=response.status_code)
        return result

    @staticmethod
    def _error_body(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text

    async def add_edit_price_intervals(
        self,
        subscription_id: str,
        params: AddEditPriceIntervalParams,
    ) -> Subscription:
        """Add or edit price intervals for a subscription.

        Changes to a subscription's price intervals control its billing
        behaviour atomically; the server returns the subscription as it
        stands after the change.
        """
        request = self.build_request(
            "POST",
            ["subscriptions", subscription_id, "price_intervals"],
            json=params.to_payload(),
        )
        return await self.send_request(request, Subscription)

    async def get_subscription(self, subscription_id: str) -> Subscription:
        request = self.build_request("GET", ["subscriptions", subscription_id])
        return await self.send_request(request, Subscription)

    async def get_price(self, price_id: str) -> Price:
        request = self.build_request("GET", ["prices", price_id])
        return await self.send_request(request, Price)

    async def get_price_by_external_id(self, external_price_id: str) -> Price:
        request = self.build_request("GET", ["prices", "external_price_id", external_price_id])
        return await self.send_request(request, Price)
