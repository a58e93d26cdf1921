from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class SummaryResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    text: str
    source_url: str = Field(alias="sourceUrl")
    method: str

class SummarizeTextRequest(BaseModel):
    text: str
    ideal_length: Optional[int] = Field(None, ge=1)
    max_chars: Optional[int] = Field(None, ge=1)

class TextSummaryResponse(BaseModel):
    text: str
    method: str = "local"

class ErrorResponse(BaseModel):
    message: str
