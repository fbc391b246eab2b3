import logging
import requests
from typing import Dict, Any, Optional
from pydantic import ValidationError

from app.config import (
    CLOVERLY_API_URL, ESTIMATE_PATH, PURCHASE_PATH, HTTP_CONNECT_TIMEOUT_S, HTTP_READ_TIMEOUT_S,
)
from app.schemas.cloverly import EstimateResponse, PurchaseResponse
from app.schemas.offsets import Estimate, Purchase

logger = logging.getLogger(__name__)

class MarketplaceCallError(RuntimeError):
    def __init__(self, code: str, message: str, status_code: Optional[int] = None, details: Optional[Any] = None):
        super().__init__(message)
        self.code = code
        self.status_code = status_code
        self.details = details

class MarketplaceClient:
    """Cloverly API calls used by the offset workflow. One attempt per call, no retries."""

    def __init__(self, base_url: str = CLOVERLY_API_URL, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()

    def _headers(self, credential: str) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer private_key:{credential}",
        }

    def _parse_error(self, resp: requests.Response) -> dict:
        try:
            body = resp.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and isinstance(body.get("error"), str):
            message = body["error"]
        else:
            message = f"Marketplace returned HTTP {resp.status_code}"

        return {"code": "MARKETPLACE_HTTP_ERROR", "message": message, "details": body}

    def _post(self, path: str, credential: str, body: Dict[str, Any]) -> Dict[str, Any]:
        url = self.base_url + path
        timeout = (HTTP_CONNECT_TIMEOUT_S, HTTP_READ_TIMEOUT_S)

        try:
            resp = self.session.post(url, json=body, headers=self._headers(credential), timeout=timeout)
        except requests.Timeout as e:
            raise MarketplaceCallError("MARKETPLACE_TIMEOUT", str(e))
        except requests.RequestException as e:
            raise MarketplaceCallError("MARKETPLACE_UNREACHABLE", str(e))

        if resp.status_code < 200 or resp.status_code >= 300:
            err = self._parse_error(resp)
            raise MarketplaceCallError(err["code"], err["message"], resp.status_code, err["details"])

        try:
            out = resp.json()
        except ValueError:
            raise MarketplaceCallError("BAD_RESPONSE", "Marketplace returned non-JSON", resp.status_code)

        if not isinstance(out, dict):
            raise MarketplaceCallError("BAD_RESPONSE", "Marketplace response is not an object", resp.status_code)
        return out

    def request_estimate(self, footprint_kg: float, credential: str) -> Estimate:
        out = self._post(ESTIMATE_PATH, credential, {"weight": {"value": footprint_kg, "units": "kg"}})
        try:
            decoded = EstimateResponse.model_validate(out)
        except ValidationError as e:
            raise MarketplaceCallError("BAD_RESPONSE", f"Malformed estimate response: {e}", details=out)

        logger.info("Estimate returned: %s cents (slug %s)", decoded.total_cost_in_usd_cents, decoded.slug)
        return Estimate(cost=decoded.total_cost_in_usd_cents, slug=decoded.slug)

    def purchase(self, estimate_slug: str, credential: str) -> Purchase:
        out = self._post(PURCHASE_PATH, credential, {"estimate_slug": estimate_slug})
        try:
            decoded = PurchaseResponse.model_validate(out)
        except ValidationError as e:
            raise MarketplaceCallError("BAD_RESPONSE", f"Malformed purchase response: {e}", details=out)

        return Purchase(cost=decoded.total_cost_in_usd_cents, payload=out)
