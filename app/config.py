import os
from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

HTTP_CONNECT_TIMEOUT_S = float(os.getenv("HTTP_CONNECT_TIMEOUT_S", "3.0"))
HTTP_READ_TIMEOUT_S = float(os.getenv("HTTP_READ_TIMEOUT_S", "30.0"))

# Cloverly marketplace
CLOVERLY_API_URL = os.getenv("CLOVERLY_API_URL", "https://api.cloverly.app/2019-03-beta")
ESTIMATE_PATH = "/estimates/carbon/"
PURCHASE_PATH = "/purchases/"

# Webhook that refreshes the offsets table in the reporting warehouse
PIPELINE_REFRESH_URL = os.getenv(
    "PIPELINE_REFRESH_URL",
    "https://us-central1-absolve.cloudfunctions.net/refresh_offset_data",
)

# percentThreshold * PERCENT_SCALE gives the ceiling in cents
PERCENT_SCALE = 2000
# percent limits below this are treated as unset
MIN_PERCENT_LIMIT = 0.001

FOOTPRINT_TAG = "co2_footprint"

PIPELINE_DEFAULTS = {
    "bucketName": "absolve_bucket",
    "datasetId": "offset_purchases",
    "tableId": "offsets",
}
