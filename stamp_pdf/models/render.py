from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class RenderRequest(BaseModel):
    """
    What the browser needs to produce one page:
    {
      "html": "<div class='stamp'>...</div>",
      "css": "...",
      "width": "60mm",
      "height": "40mm"
    }
    width/height go to the engine as-is; units are not checked here.
    """
    model_config = ConfigDict(extra="allow")  # clients post the whole editor state

    html: str = ""
    css: str = ""
    width: Optional[Any] = None
    height: Optional[Any] = None

    @field_validator("html", "css", mode="before")
    @classmethod
    def _as_markup(cls, v: Any) -> str:
        return "" if v is None else str(v)
