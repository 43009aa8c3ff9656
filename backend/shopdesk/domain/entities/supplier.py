from typing import Literal

from shopdesk.domain.entities.record import Record


class Supplier(Record):
    name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    website: str | None = None
    platform: Literal["Alibaba", "AliExpress", "Amazon", "Other"] = "Other"
    status: Literal["active", "inactive"] = "active"


class FreightForwarder(Record):
    name: str = ""
    contact_person: str = ""
    email: str = ""
    phone: str = ""
    depot_address: str = ""
    transport_modes: list[Literal["sea", "air", "land"]] = []
