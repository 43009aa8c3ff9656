from typing import Any

from shopdesk.domain.entities.record import Record


class Report(Record):
    """A saved business report; ``data`` holds the computed figures."""

    title: str = ""
    description: str = ""
    type: str = "sales"
    status: str = "draft"
    period: str = ""
    author: str = ""
    metrics: dict[str, Any] = {}
    data: dict[str, Any] = {}
