import math
from typing import Any, Dict, Optional

from pydantic import ValidationError

from app.config import PIPELINE_DEFAULTS, MIN_PERCENT_LIMIT
from app.models.enums import YesNo
from app.schemas.offsets import OffsetRequest, ThresholdConfig, PipelineConfig

class InvalidRequestError(ValueError):
    pass

def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())

def parse_flag(value: Any, name: str, default: YesNo) -> YesNo:
    if _blank(value):
        return default
    if isinstance(value, bool):
        return YesNo.YES if value else YesNo.NO
    try:
        return YesNo(str(value).strip().lower())
    except ValueError:
        raise InvalidRequestError(f"{name} must be 'yes' or 'no', got {value!r}")

def parse_limit(value: Any, name: str) -> Optional[float]:
    if _blank(value):
        return None
    try:
        limit = float(value)
    except (TypeError, ValueError):
        raise InvalidRequestError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(limit):
        raise InvalidRequestError(f"{name} must be a finite number")
    return limit

def parse_footprint(value: Any) -> float:
    if isinstance(value, bool):
        raise InvalidRequestError("Couldn't get data from cell.")
    try:
        footprint = float(value)
    except (TypeError, ValueError):
        raise InvalidRequestError("Couldn't get data from cell.")
    if not math.isfinite(footprint) or footprint <= 0:
        raise InvalidRequestError("Couldn't get data from cell.")
    return footprint

def _text_param(params: Dict[str, Any], name: str) -> str:
    value = params.get(name)
    if _blank(value):
        return PIPELINE_DEFAULTS[name]
    if not isinstance(value, (str, int, float)) or isinstance(value, bool):
        raise InvalidRequestError(f"{name} must be text, got {value!r}")
    return str(value).strip()

def parse_offset_request(params: Dict[str, Any], form_params: Dict[str, Any]) -> OffsetRequest:
    """
    Build a typed OffsetRequest from the hub's string params.

    Raises InvalidRequestError before anything reaches the network.
    """
    footprint = parse_footprint(params.get("value"))

    credential = params.get("privateKey")
    if _blank(credential):
        raise InvalidRequestError("Cloverly API private key is required.")

    use_thresholds = parse_flag(form_params.get("useThresholds"), "useThresholds", YesNo.YES)
    absolute_limit = parse_limit(form_params.get("costThreshold"), "costThreshold")
    percent_limit = parse_limit(form_params.get("percentThreshold"), "percentThreshold")

    # a negligible percent does not count as a configured limit
    has_percent = percent_limit is not None and percent_limit >= MIN_PERCENT_LIMIT
    if use_thresholds is YesNo.YES and absolute_limit is None and not has_percent:
        raise InvalidRequestError("Threshold use required, but no thresholds set!")

    use_pipeline = parse_flag(params.get("use_full_data_pipeline"), "use_full_data_pipeline", YesNo.NO)

    try:
        return OffsetRequest(
            footprint=footprint,
            credential=str(credential),
            thresholds=ThresholdConfig(
                use_thresholds=use_thresholds,
                absolute_limit=absolute_limit,
                percent_limit=percent_limit,
            ),
            pipeline=PipelineConfig(
                enabled=use_pipeline is YesNo.YES,
                bucket_name=_text_param(params, "bucketName"),
                dataset_id=_text_param(params, "datasetId"),
                table_id=_text_param(params, "tableId"),
            ),
        )
    except ValidationError as e:
        raise InvalidRequestError(f"Invalid action parameters: {e}")
