import pytest

from app.models.enums import YesNo
from app.services.request_parser import InvalidRequestError, parse_offset_request


@pytest.mark.parametrize("value", [None, "", "0", "-5", "abc", "nan", "inf", 0, -1.5])
def test_bad_footprint_rejected(value, action_params):
    action_params["value"] = value
    with pytest.raises(InvalidRequestError, match="Couldn't get data from cell"):
        parse_offset_request(action_params, {"useThresholds": "no"})

def test_thresholds_required_but_missing(action_params):
    with pytest.raises(InvalidRequestError, match="no thresholds set"):
        parse_offset_request(action_params, {"useThresholds": "yes", "costThreshold": "", "percentThreshold": ""})

def test_use_thresholds_defaults_to_yes(action_params):
    with pytest.raises(InvalidRequestError, match="no thresholds set"):
        parse_offset_request(action_params, {})

def test_missing_private_key(action_params):
    del action_params["privateKey"]
    with pytest.raises(InvalidRequestError, match="private key"):
        parse_offset_request(action_params, {"useThresholds": "no"})

def test_non_numeric_limit(action_params):
    with pytest.raises(InvalidRequestError, match="costThreshold"):
        parse_offset_request(action_params, {"useThresholds": "yes", "costThreshold": "lots"})

def test_unknown_flag_value(action_params):
    with pytest.raises(InvalidRequestError, match="useThresholds"):
        parse_offset_request(action_params, {"useThresholds": "maybe", "costThreshold": "200"})

def test_parses_typed_request(action_params):
    action_params.update({"value": "12.5", "use_full_data_pipeline": "YES", "tableId": "custom"})
    req = parse_offset_request(action_params, {"useThresholds": "yes", "costThreshold": "200", "percentThreshold": ""})

    assert req.footprint == 12.5
    assert req.credential == "test-key"
    assert req.thresholds.use_thresholds is YesNo.YES
    assert req.thresholds.absolute_limit == 200
    assert req.thresholds.percent_limit is None
    assert req.pipeline.enabled is True
    assert req.pipeline.bucket_name == "absolve_bucket"
    assert req.pipeline.dataset_id == "offset_purchases"
    assert req.pipeline.table_id == "custom"

def test_pipeline_disabled_when_flag_absent(action_params):
    del action_params["use_full_data_pipeline"]
    req = parse_offset_request(action_params, {"useThresholds": "no"})
    assert req.pipeline.enabled is False
    assert req.thresholds.use_thresholds is YesNo.NO

@pytest.mark.parametrize("percent", ["0", "0.0005", "-2"])
def test_negligible_percent_does_not_satisfy_thresholds(percent, action_params):
    with pytest.raises(InvalidRequestError, match="no thresholds set"):
        parse_offset_request(action_params, {"useThresholds": "yes", "percentThreshold": percent})

def test_negligible_percent_alongside_cost_limit(action_params):
    req = parse_offset_request(action_params, {"useThresholds": "yes", "percentThreshold": "0", "costThreshold": "200"})
    assert req.thresholds.absolute_limit == 200

def test_numeric_pipeline_identifiers_become_text(action_params):
    action_params.update({"use_full_data_pipeline": "yes", "bucketName": 123, "datasetId": 4.5, "tableId": " t "})
    req = parse_offset_request(action_params, {"useThresholds": "no"})

    assert req.pipeline.bucket_name == "123"
    assert req.pipeline.dataset_id == "4.5"
    assert req.pipeline.table_id == "t"

@pytest.mark.parametrize("value", [["b"], {"name": "b"}, True])
def test_non_text_pipeline_identifier_rejected(value, action_params):
    action_params["bucketName"] = value
    with pytest.raises(InvalidRequestError, match="bucketName"):
        parse_offset_request(action_params, {"useThresholds": "no"})
