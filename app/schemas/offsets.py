from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional, Union

from app.config import PIPELINE_DEFAULTS
from app.models.enums import NotificationStatus, OutcomeKind, YesNo

class ThresholdConfig(BaseModel):
    use_thresholds: YesNo = YesNo.YES
    absolute_limit: Optional[float] = None  # cents
    percent_limit: Optional[float] = None  # fraction of total gross margin

class PipelineConfig(BaseModel):
    enabled: bool = False
    bucket_name: str = PIPELINE_DEFAULTS["bucketName"]
    dataset_id: str = PIPELINE_DEFAULTS["datasetId"]
    table_id: str = PIPELINE_DEFAULTS["tableId"]

class OffsetRequest(BaseModel):
    footprint: float = Field(gt=0, allow_inf_nan=False)  # kg
    credential: str
    thresholds: ThresholdConfig = Field(default_factory=ThresholdConfig)
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)

class Estimate(BaseModel):
    model_config = ConfigDict(frozen=True)

    cost: int  # cents
    slug: str

class Purchase(BaseModel):
    model_config = ConfigDict(frozen=True)

    cost: int  # cents
    payload: Dict[str, Any] = Field(default_factory=dict)

class WorkflowOutcome(BaseModel):
    success: bool
    kind: OutcomeKind
    message: Union[str, Dict[str, Any]]
    estimate: Optional[Estimate] = None
    ceiling: Optional[float] = None
    purchase: Optional[Purchase] = None
    notification: NotificationStatus = NotificationStatus.SKIPPED
