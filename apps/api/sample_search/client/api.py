"""HTTP client for the sample search API."""

from dataclasses import dataclass

import httpx
from pydantic import ValidationError

from sample_search.core.config import get_settings
from sample_search.schemas import CamelModel, OrganisationListResponse, ProfileResource, SampleView


class SampleApiError(Exception):
    """Raised when the sample API is unavailable or returns an error or an unexpected body."""


class SampleDocument(CamelModel):
    """Body of GET /org/{id}/sample as consumed by the client (meta is not needed)."""
    data: list[SampleView] = []
    included: list[ProfileResource] = []


@dataclass(frozen=True)
class OrganisationOption:
    id: str
    name: str
    # Resolved once from the organisation name when the list is loaded
    extended_fields: bool = False


class SampleApiClient:
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        s = get_settings()
        self.base_url = (base_url or s.client_api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else s.client_timeout_seconds
        self.extended_fields_org_name = s.extended_fields_org_name
        self._transport = transport

    async def _get_json(self, path: str) -> dict:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                r = await client.get(f"{self.base_url}{path}")
                r.raise_for_status()
                return r.json()
        except httpx.HTTPStatusError as e:
            raise SampleApiError(
                f"Sample API returned {e.response.status_code} for {path}."
            ) from e
        except httpx.RequestError as e:
            raise SampleApiError(
                f"Sample API unavailable (timeout or connection error) for {path}."
            ) from e
        except ValueError as e:
            raise SampleApiError(f"Sample API returned invalid JSON for {path}.") from e

    async def list_organisations(self) -> list[OrganisationOption]:
        body = await self._get_json("/org")
        try:
            parsed = OrganisationListResponse.model_validate(body)
        except ValidationError as e:
            raise SampleApiError("Sample API returned unexpected organisation list format.") from e
        return [
            OrganisationOption(
                id=o.id,
                name=o.attributes.name,
                extended_fields=o.attributes.name == self.extended_fields_org_name,
            )
            for o in parsed.data
        ]

    async def fetch_samples(self, organisation_id: str) -> SampleDocument:
        body = await self._get_json(f"/org/{organisation_id}/sample")
        try:
            return SampleDocument.model_validate(body)
        except ValidationError as e:
            raise SampleApiError("Sample API returned unexpected sample document format.") from e
