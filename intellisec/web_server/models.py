"""Request models for the web API."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, StrictStr


class ScanRequest(BaseModel):
    """Body of ``POST /api/llm/scan``. Unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    text: Optional[StrictStr] = None
