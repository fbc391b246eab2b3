import logging
from fastapi import APIRouter, Depends, HTTPException

from app.action_definition import ABSOLVE_ACTION, ACTION_NAME, build_form
from app.dependencies import get_offset_service
from app.schemas.actions import ActionRequest, ActionResponse
from app.services.offset_service import OffsetService

logger = logging.getLogger(__name__)

router = APIRouter()

def _check_action(action_name: str):
    if action_name != ACTION_NAME:
        raise HTTPException(404, "Unknown action")

@router.get("/actions")
def list_actions():
    return {"integrations": [ABSOLVE_ACTION.model_dump()]}

@router.post("/actions/{action_name}/form")
def action_form(action_name: str):
    _check_action(action_name)
    return build_form().model_dump()

@router.post("/actions/{action_name}/execute", response_model=ActionResponse)
def execute_action(action_name: str, req: ActionRequest, service: OffsetService = Depends(get_offset_service)):
    _check_action(action_name)

    outcome = service.execute_action(req.params, req.form_params)
    logger.info("Action %s finished: %s", action_name, outcome.kind.value)
    return ActionResponse(success=outcome.success, message=outcome.message)
