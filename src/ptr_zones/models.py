from enum import IntEnum
from pydantic import BaseModel, Field


class AddressFamily(IntEnum):
    IPV4 = 4
    IPV6 = 6


class Prefix(BaseModel):
    cidr: str
    ptr_label: str | None = None
    ptr_subdomain: str | None = None
    arpa_zone: str | None = None  # ipv6 only, zone boundaries can't be derived from the prefix


class AddressOverride(BaseModel):
    address: str  # may carry a `/len` suffix as returned by NetBox
    dns_name: str | None = None


class PTRRecord(BaseModel):
    reverse_label: str
    target_fqdn: str

    def __str__(self) -> str:
        return f"{self.reverse_label} IN PTR {self.target_fqdn}"


class ZoneRecordSet(BaseModel):
    zone_name: str
    address_family: AddressFamily
    records: dict[str, str] = Field(default_factory=dict)  # canonical address -> target name
