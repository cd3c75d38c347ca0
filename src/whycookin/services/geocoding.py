"""Kakao local-search geocoding client.

Resolves a free-form Korean address into administrative regions, a postal
code, a road name and WGS84 coordinates.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import httpx

from whycookin.core.settings import settings

logger = logging.getLogger(__name__)


class GeocodingError(RuntimeError):
    """Raised when the geocoding service cannot be used.

    Covers transport failures, non-2xx replies and unreadable payloads.
    """


class AddressNotFoundError(GeocodingError):
    """Raised when the geocoder returns no documents for an address."""


@dataclass(frozen=True)
class GeocodedAddress:
    """Normalized view of the first Kakao search document."""

    si_do: str
    si_gun_gu: str
    eup_myeon_dong: str
    postal_code: str
    road_name: str
    longitude: float
    latitude: float


def parse_kakao_document(doc: Mapping[str, Any]) -> GeocodedAddress:
    """Convert a Kakao search document into a :class:`GeocodedAddress`.

    The road address is preferred. Documents that only carry a lot-number
    address yield an empty postal code and road name.

    Raises:
        GeocodingError: If the document carries neither address form or
            its coordinates are not numeric.
    """
    road = doc.get("road_address")
    try:
        if road:
            building_no = road.get("main_building_no") or ""
            return GeocodedAddress(
                si_do=road.get("region_1depth_name", ""),
                si_gun_gu=road.get("region_2depth_name", ""),
                eup_myeon_dong=road.get("region_3depth_name", ""),
                postal_code=road.get("zone_no", ""),
                road_name=f"{road.get('road_name', '')} {building_no}",
                longitude=float(road["x"]),
                latitude=float(road["y"]),
            )

        lot = doc.get("address")
        if lot:
            return GeocodedAddress(
                si_do=lot.get("region_1depth_name", ""),
                si_gun_gu=lot.get("region_2depth_name", ""),
                eup_myeon_dong=lot.get("region_3depth_name", ""),
                postal_code="",
                road_name="",
                longitude=float(lot["x"]),
                latitude=float(lot["y"]),
            )
    except (KeyError, TypeError, ValueError) as exc:
        raise GeocodingError("Kakao document has no usable coordinates") from exc

    raise GeocodingError("Kakao document has no address information")


class KakaoGeocoder:
    """Async client for the Kakao address search endpoint."""

    def __init__(
        self,
        *,
        api_key: str | None = None,
        url: str | None = None,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key if api_key is not None else settings.kakao_rest_api_key
        self.url = url or settings.kakao_geocode_url
        self.timeout_seconds = timeout_seconds or settings.geocoding_timeout_seconds
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._client_lock = asyncio.Lock()

    async def _ensure_client(self) -> httpx.AsyncClient:
        async with self._client_lock:
            if self._client is None:
                self._client = httpx.AsyncClient(
                    timeout=httpx.Timeout(self.timeout_seconds),
                    transport=self._transport,
                )
        return self._client

    async def geocode(self, address: str) -> GeocodedAddress:
        """Look up ``address`` and return its first match.

        Raises:
            AddressNotFoundError: If Kakao has no document for the address.
            GeocodingError: If the request fails or the reply is malformed.
        """
        if not self.api_key:
            raise GeocodingError("KAKAO_REST_API_KEY is not configured")

        client = await self._ensure_client()
        try:
            response = await client.get(
                self.url,
                headers={"Authorization": f"KakaoAK {self.api_key}"},
                params={"query": address},
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            logger.warning("Kakao geocoder answered %s", exc.response.status_code)
            raise GeocodingError(f"Kakao responded with {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            logger.warning("Kakao geocoder unreachable: %s", exc)
            raise GeocodingError("Kakao geocoder is unreachable") from exc
        except ValueError as exc:
            raise GeocodingError("Kakao returned a non-JSON body") from exc

        documents = payload.get("documents") if isinstance(payload, dict) else None
        if not documents:
            raise AddressNotFoundError("Kakao: No results for that address")
        return parse_kakao_document(documents[0])

    async def close(self) -> None:
        """Clean up underlying HTTP client resources."""
        async with self._client_lock:
            if self._client is not None:
                await self._client.aclose()
                self._client = None


class _GeocoderSingleton:
    """Singleton wrapper for KakaoGeocoder."""

    _instance: KakaoGeocoder | None = None

    @classmethod
    def get_instance(cls) -> KakaoGeocoder:
        """Get or create the singleton geocoder instance."""
        if cls._instance is None:
            cls._instance = KakaoGeocoder()
        return cls._instance


def get_geocoder() -> KakaoGeocoder:
    """Return the shared geocoder instance."""
    return _GeocoderSingleton.get_instance()
