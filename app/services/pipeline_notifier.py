import logging
import requests
from typing import Optional

from app.config import PIPELINE_REFRESH_URL, HTTP_CONNECT_TIMEOUT_S, HTTP_READ_TIMEOUT_S
from app.schemas.offsets import PipelineConfig

logger = logging.getLogger(__name__)

class PipelineNotifyError(RuntimeError):
    pass

class PipelineNotifier:
    """Asks the reporting pipeline to reload the offsets table after a purchase."""

    def __init__(self, url: str = PIPELINE_REFRESH_URL, session: Optional[requests.Session] = None):
        self.url = url
        self.session = session or requests.Session()

    def notify(self, pipeline: PipelineConfig) -> None:
        body = {
            "bucketName": pipeline.bucket_name,
            "datasetId": pipeline.dataset_id,
            "tableId": pipeline.table_id,
        }
        try:
            resp = self.session.post(
                self.url,
                json=body,
                headers={"Content-Type": "application/json"},
                timeout=(HTTP_CONNECT_TIMEOUT_S, HTTP_READ_TIMEOUT_S),
            )
        except requests.RequestException as e:
            raise PipelineNotifyError(str(e))

        if resp.status_code < 200 or resp.status_code >= 300:
            raise PipelineNotifyError(f"Pipeline refresh returned HTTP {resp.status_code}")

        logger.info("Dataset %s.%s refreshed", pipeline.dataset_id, pipeline.table_id)
