# app/schemas/common.py
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    detail: str = Field(description="Error message")

    model_config = {"json_schema_extra": {"examples": [{"detail": "Not Found"}]}}


class OkResponse(BaseModel):
    ok: bool = Field(description="Always true")

    model_config = {"json_schema_extra": {"examples": [{"ok": True}]}}


class DeletedCountResponse(BaseModel):
    deleted: int = Field(ge=0, description="Number of rows removed (0 is a no-op)")

    model_config = {"json_schema_extra": {"examples": [{"deleted": 1}]}}
