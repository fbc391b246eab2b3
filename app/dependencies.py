from app.services.cloverly_client import MarketplaceClient
from app.services.offset_service import OffsetService
from app.services.pipeline_notifier import PipelineNotifier

def get_offset_service():
    # one client pair per request; nothing is shared between invocations
    client = MarketplaceClient()
    notifier = PipelineNotifier()
    try:
        yield OffsetService(client, notifier)
    finally:
        client.session.close()
        notifier.session.close()
