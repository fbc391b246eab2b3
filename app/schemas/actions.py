from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional, Union

class ActionRequest(BaseModel):
    # values arrive from the hub as strings; request_parser types them
    params: Dict[str, Any] = Field(default_factory=dict)
    form_params: Dict[str, Any] = Field(default_factory=dict)

class ActionResponse(BaseModel):
    success: bool
    message: Union[str, Dict[str, Any]]

class SelectOption(BaseModel):
    name: str
    label: str

class ActionParam(BaseModel):
    name: str
    label: str
    description: Optional[str] = None
    required: bool = False
    sensitive: bool = False
    type: Optional[str] = None
    options: List[SelectOption] = Field(default_factory=list)
    default: Optional[str] = None

class FormField(BaseModel):
    name: str
    label: str
    description: Optional[str] = None
    required: bool = False
    type: str = "string"
    options: List[SelectOption] = Field(default_factory=list)
    default: Optional[str] = None

class ActionForm(BaseModel):
    fields: List[FormField] = Field(default_factory=list)

class ActionDescriptor(BaseModel):
    name: str
    label: str
    description: str
    icon_name: str
    supported_action_types: List[str]
    required_fields: List[Dict[str, str]]
    params: List[ActionParam]
