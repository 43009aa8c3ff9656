"""Pydantic DTOs for suppliers and freight forwarders."""

from typing import Literal

from pydantic import Field

from shopdesk.application.schemas.base import CamelModel

SupplierPlatform = Literal["Alibaba", "AliExpress", "Amazon", "Other"]
TransportMode = Literal["sea", "air", "land"]


class SupplierCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: str = ""
    phone: str = ""
    address: str = ""
    website: str | None = None
    platform: SupplierPlatform = "Other"
    status: Literal["active", "inactive"] = "active"


class SupplierUpdate(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    website: str | None = None
    platform: SupplierPlatform | None = None
    status: Literal["active", "inactive"] | None = None


class ForwarderCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    contact_person: str = ""
    email: str = ""
    phone: str = ""
    depot_address: str = ""
    transport_modes: list[TransportMode] = []


class ForwarderUpdate(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    contact_person: str | None = None
    email: str | None = None
    phone: str | None = None
    depot_address: str | None = None
    transport_modes: list[TransportMode] | None = None
