from typing import Any, Literal

from pydantic import Field

from shopdesk.application.schemas.base import CamelModel

ReportType = Literal["sales", "inventory", "customers", "financial"]
ReportStatus = Literal["draft", "in-progress", "completed"]


class ReportCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=300)
    description: str = ""
    type: ReportType
    status: ReportStatus = "draft"
    period: str = ""
    author: str = ""
    metrics: dict[str, Any] = {}
    data: dict[str, Any] = {}


class ReportUpdate(CamelModel):
    title: str | None = Field(None, min_length=1, max_length=300)
    description: str | None = None
    type: ReportType | None = None
    status: ReportStatus | None = None
    period: str | None = None
    author: str | None = None
    metrics: dict[str, Any] | None = None
    data: dict[str, Any] | None = None
