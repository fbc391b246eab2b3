import logging
import math
from typing import Any, Dict

from app.models.enums import NotificationStatus, OutcomeKind
from app.schemas.offsets import OffsetRequest, WorkflowOutcome
from app.services.cloverly_client import MarketplaceClient, MarketplaceCallError
from app.services.pipeline_notifier import PipelineNotifier, PipelineNotifyError
from app.services.request_parser import InvalidRequestError, parse_offset_request
from app.services.threshold_service import approve, derive_ceiling

logger = logging.getLogger(__name__)


def format_cents(value: float) -> str:
    if math.isinf(value):
        return "no limit"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"


class OffsetService:
    """
    Estimate -> threshold check -> purchase -> optional pipeline refresh.

    Stages run strictly in order and nothing is retried. A failed estimate
    stops before the threshold check, a rejected or failed purchase stops
    before the refresh. The refresh is best-effort: once money is spent the
    outcome stays successful and a refresh failure is only recorded.
    """

    def __init__(self, client: MarketplaceClient, notifier: PipelineNotifier):
        self.client = client
        self.notifier = notifier

    def execute_action(self, params: Dict[str, Any], form_params: Dict[str, Any]) -> WorkflowOutcome:
        try:
            request = parse_offset_request(params, form_params)
        except InvalidRequestError as e:
            logger.warning("Rejected offset request: %s", e)
            return WorkflowOutcome(success=False, kind=OutcomeKind.INVALID_REQUEST, message=str(e))
        return self.execute(request)

    def execute(self, request: OffsetRequest) -> WorkflowOutcome:
        try:
            estimate = self.client.request_estimate(request.footprint, request.credential)
        except MarketplaceCallError as e:
            logger.error("Failure getting estimate (%s): %s", e.code, e)
            return WorkflowOutcome(success=False, kind=OutcomeKind.ESTIMATE_FAILED, message=str(e))

        thresholds = request.thresholds
        ceiling = derive_ceiling(thresholds.absolute_limit, thresholds.percent_limit)

        if not approve(estimate.cost, ceiling, thresholds.use_thresholds):
            message = (
                f"Estimate for offset ({estimate.cost}) was greater than threshold "
                f"({format_cents(ceiling)}). Increase threshold or decrease offset quantity."
            )
            logger.info(message)
            return WorkflowOutcome(
                success=False, kind=OutcomeKind.THRESHOLD_REJECTED, message=message,
                estimate=estimate, ceiling=ceiling,
            )

        try:
            purchase = self.client.purchase(estimate.slug, request.credential)
        except MarketplaceCallError as e:
            logger.error("Failure with purchase execution (%s): %s", e.code, e)
            return WorkflowOutcome(
                success=False, kind=OutcomeKind.PURCHASE_FAILED, message=str(e),
                estimate=estimate, ceiling=ceiling,
            )

        logger.info(
            "Offset footprint of %s kg, spending %s cents with a threshold of %s",
            request.footprint, purchase.cost, format_cents(ceiling),
        )

        notification = NotificationStatus.SKIPPED
        if request.pipeline.enabled:
            try:
                self.notifier.notify(request.pipeline)
                notification = NotificationStatus.SENT
            except PipelineNotifyError as e:
                logger.warning("Purchase succeeded but pipeline refresh failed: %s", e)
                notification = NotificationStatus.FAILED

        return WorkflowOutcome(
            success=True, kind=OutcomeKind.PURCHASED, message=purchase.payload,
            estimate=estimate, ceiling=ceiling, purchase=purchase, notification=notification,
        )
