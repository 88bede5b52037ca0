"""Mutual fund catalogue and NAV history retrieval from mfapi.in."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

import requests

from ..config import MFAPI_BASE_URL, MFAPI_TIMEOUT_S, SEARCH_MAX_RESULTS, SEARCH_MIN_CHARS
from ..errors import HistoryError
from ..history import ValuationHistory
from ..messages import ServiceMessage
from ..models import FundDetails, SchemeMeta, SchemeSummary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogueResult:
    schemes: List[SchemeSummary]
    messages: List[ServiceMessage]


@dataclass(frozen=True)
class FundDetailsResult:
    details: Optional[FundDetails]
    messages: List[ServiceMessage]


class _MfApiService:
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = (base_url or MFAPI_BASE_URL).rstrip("/")
        self._timeout = timeout if timeout is not None else MFAPI_TIMEOUT_S
        self._http = session or requests

    def _get_json(self, path: str) -> Any:
        url = f"{self._base_url}{path}"
        response = self._http.get(url, timeout=self._timeout)
        response.raise_for_status()
        return response.json()


class FundCatalogueService(_MfApiService):
    """Lists the schemes published by the NAV source and searches them by name."""

    def load_catalogue(self) -> CatalogueResult:
        try:
            payload = self._get_json("/mf")
        except (requests.RequestException, ValueError) as exc:
            logger.error(f"Failed to load fund catalogue: {exc}")
            return CatalogueResult(
                schemes=[],
                messages=[ServiceMessage.warning(f"Could not load the fund list: {exc}")],
            )

        if not isinstance(payload, list):
            logger.error(f"Unexpected catalogue payload of type {type(payload).__name__}")
            return CatalogueResult(
                schemes=[],
                messages=[ServiceMessage.warning("The fund list returned by the server was not understood.")],
            )

        schemes: List[SchemeSummary] = []
        for entry in payload:
            if not isinstance(entry, dict):
                continue
            code = entry.get("schemeCode")
            name = entry.get("schemeName")
            if code is None or not name:
                continue
            schemes.append(SchemeSummary(scheme_code=str(code), scheme_name=str(name)))

        logger.info(f"Loaded {len(schemes)} schemes")
        return CatalogueResult(schemes=schemes, messages=[])

    @staticmethod
    def search(
        catalogue: Sequence[SchemeSummary],
        query: str,
        *,
        min_chars: int = SEARCH_MIN_CHARS,
        limit: int = SEARCH_MAX_RESULTS,
    ) -> List[SchemeSummary]:
        """Case-insensitive substring match on the scheme name, in catalogue order."""
        if len(query) < min_chars:
            return []
        needle = query.lower()
        matches: List[SchemeSummary] = []
        for scheme in catalogue:
            if needle in scheme.scheme_name.lower():
                matches.append(scheme)
                if len(matches) >= limit:
                    break
        return matches


class FundHistoryService(_MfApiService):
    """Loads a scheme's metadata and its full NAV history."""

    def load_details(self, scheme_code: str) -> FundDetailsResult:
        try:
            payload = self._get_json(f"/mf/{scheme_code}")
        except (requests.RequestException, ValueError) as exc:
            logger.error(f"Failed to load scheme {scheme_code}: {exc}")
            return FundDetailsResult(
                details=None,
                messages=[ServiceMessage.error(f"Could not load scheme {scheme_code}: {exc}")],
            )

        try:
            details = self.parse_details(payload)
        except HistoryError as exc:
            logger.error(f"Unusable NAV history for scheme {scheme_code}: {exc}")
            return FundDetailsResult(
                details=None,
                messages=[ServiceMessage.error(f"NAV history of scheme {scheme_code} is unusable: {exc}")],
            )

        messages: List[ServiceMessage] = []
        if not details.history:
            messages.append(ServiceMessage.warning(f"Scheme {scheme_code} has no NAV history."))
        logger.info(f"Loaded {len(details.history)} NAV points for scheme {scheme_code}")
        return FundDetailsResult(details=details, messages=messages)

    @staticmethod
    def parse_details(payload: Any) -> FundDetails:
        if not isinstance(payload, dict):
            raise HistoryError("Scheme payload is not an object")
        meta = payload.get("meta") or {}
        data = payload.get("data") or []
        if not isinstance(meta, dict) or not isinstance(data, list):
            raise HistoryError("Scheme payload has no usable meta/data sections")

        code = meta.get("scheme_code")
        scheme_meta = SchemeMeta(
            scheme_name=str(meta.get("scheme_name", "")),
            fund_house=str(meta.get("fund_house", "")),
            scheme_type=meta.get("scheme_type"),
            scheme_category=meta.get("scheme_category"),
            scheme_code=str(code) if code is not None else None,
        )
        return FundDetails(meta=scheme_meta, history=ValuationHistory.from_records(data))
