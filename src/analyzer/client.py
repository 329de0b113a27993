"""Analysis backend client — one POST per analysis, no retries."""

from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError

from src.analyzer import endpoints
from src.analyzer.exceptions import (
    DEFAULT_ERROR,
    AnalysisRequestError,
    AnalysisTransportError,
)
from src.analyzer.models import AnalysisOutcome, AnalysisType, parse_outcome


def build_request(
    analysis_type: AnalysisType, address: str, token_id: str = ""
) -> tuple[str, dict[str, Any]]:
    """Map an analysis type to its endpoint path and JSON body.

    The address is forwarded as typed; format checks are the backend's job.
    """
    if analysis_type is AnalysisType.WALLET:
        return endpoints.WALLET_SCAN, {"address": address}
    if analysis_type is AnalysisType.COLLECTION:
        return endpoints.COLLECTION_CHECK, {"contractAddress": address}
    if analysis_type is AnalysisType.NFT:
        return endpoints.NFT_ANALYZER, {"contractAddress": address, "tokenId": token_id}
    raise ValueError(f"Unknown analysis type: {analysis_type!r}")


class AnalyzerClient:
    """Async HTTP client for the wallet/collection/NFT analysis endpoints."""

    def __init__(self, base_url: str, timeout: float | None = None) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def analyze(
        self, analysis_type: AnalysisType, address: str, token_id: str = ""
    ) -> AnalysisOutcome:
        """Run one analysis and return the typed result.

        Raises AnalysisRequestError on a non-2xx answer and
        AnalysisTransportError when the call or the body is unusable.
        """
        path, body = build_request(analysis_type, address, token_id)
        logger.debug(f"[ANALYZER] POST {path} for {address[:12]}")

        try:
            resp = await self._client.post(path, json=body)
            data = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.exception(f"[ANALYZER] Error during analysis ({path}): {e}")
            raise AnalysisTransportError() from e

        if not 200 <= resp.status_code < 300:
            error = data.get("error") if isinstance(data, dict) else None
            message = str(error) if error else DEFAULT_ERROR
            logger.warning(f"[ANALYZER] HTTP {resp.status_code} from {path}: {message}")
            raise AnalysisRequestError(message, resp.status_code)

        try:
            return parse_outcome(analysis_type, data)
        except ValidationError as e:
            logger.warning(f"[ANALYZER] Unexpected {analysis_type.value} body from {path}: {e}")
            raise AnalysisTransportError() from e
