import pytest
import requests

from app.config import PIPELINE_REFRESH_URL
from app.schemas.offsets import PipelineConfig
from app.services.pipeline_notifier import PipelineNotifier, PipelineNotifyError


def test_notify_sends_identifiers(requests_mock):
    m = requests_mock.post(PIPELINE_REFRESH_URL, status_code=200)

    PipelineNotifier().notify(PipelineConfig(enabled=True, bucket_name="b", dataset_id="d", table_id="t"))

    assert m.call_count == 1
    assert m.last_request.json() == {"bucketName": "b", "datasetId": "d", "tableId": "t"}
    assert "Authorization" not in m.last_request.headers

def test_notify_http_error(requests_mock):
    requests_mock.post(PIPELINE_REFRESH_URL, status_code=502)

    with pytest.raises(PipelineNotifyError, match="502"):
        PipelineNotifier().notify(PipelineConfig(enabled=True))

def test_notify_transport_error(requests_mock):
    requests_mock.post(PIPELINE_REFRESH_URL, exc=requests.exceptions.ConnectionError("down"))

    with pytest.raises(PipelineNotifyError, match="down"):
        PipelineNotifier().notify(PipelineConfig(enabled=True))
