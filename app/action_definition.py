from app.config import FOOTPRINT_TAG, PIPELINE_DEFAULTS
from app.models.enums import ActionType
from app.schemas.actions import ActionDescriptor, ActionForm, ActionParam, FormField, SelectOption

ACTION_NAME = "absolve"

YES_NO_OPTIONS = [SelectOption(name="no", label="No"), SelectOption(name="yes", label="Yes")]

ABSOLVE_ACTION = ActionDescriptor(
    name=ACTION_NAME,
    label="Purchase carbon offsets",
    description="Offset your carbon footprint",
    icon_name="absolve/leaf.svg",
    supported_action_types=[ActionType.CELL.value],
    required_fields=[{"tag": FOOTPRINT_TAG}],
    params=[
        ActionParam(
            name="privateKey",
            label="Cloverly API Private Key",
            description="API Token from https://dashboard.cloverly.app/dashboard",
            required=True,
            sensitive=True,
        ),
        ActionParam(
            name="use_full_data_pipeline",
            label="Use data pipeline to push purchased offset data back into a BigQuery connection",
            description="Select Yes to use the full data pipeline included. Requires setup per: README.MD",
            required=True,
            type="select",
            options=YES_NO_OPTIONS,
            default="yes",
        ),
        ActionParam(
            name="bucketName",
            label="GCS Bucket Name- Optional",
            description="Only required if you are using the full data pipeline",
            default=PIPELINE_DEFAULTS["bucketName"],
        ),
        ActionParam(
            name="datasetId",
            label="BQ DatasetID- Optional",
            description="Only required if you are using the full data pipeline",
            default=PIPELINE_DEFAULTS["datasetId"],
        ),
        ActionParam(
            name="tableId",
            label="BQ Table Name",
            description="Only required if you are using the full data pipeline",
            default=PIPELINE_DEFAULTS["tableId"],
        ),
    ],
)


def build_form() -> ActionForm:
    # offsetType is shown for reference only; the estimate call does not send it
    return ActionForm(fields=[
        FormField(
            name="useThresholds",
            label="Use Thresholds?",
            required=True,
            type="select",
            options=YES_NO_OPTIONS,
            default="yes",
        ),
        FormField(
            name="percentThreshold",
            label="Threshold: Percentage of Total Gross Margin (optional)",
            description="Limits your offset cost at a percentage of the Total Gross Margin associated "
                        "with the current grouping. Requires TGM field to be in-query",
            default="2",
        ),
        FormField(
            name="costThreshold",
            label="Threshold: Manual Value in Cents (optional)",
            description="Limits your offset cost at the value specified here. "
                        "When both thresholds are set the lower one applies.",
            default="200",
        ),
        FormField(
            name="offsetType",
            label="Advanced: Offset Type",
            description="Type of REC. Recommended left blank for optimal price matching.",
            type="select",
            options=[
                SelectOption(name="wind", label="Wind"),
                SelectOption(name="solar", label="Solar"),
                SelectOption(name="biomass", label="Biomass"),
                SelectOption(name="", label=""),
            ],
            default="wind",
        ),
    ])
