from pydantic import BaseModel
from typing import Generic, TypeVar

from ptr_zones import AddressOverride, Prefix

Result = TypeVar("Result")

class NetboxPaginated(BaseModel, Generic[Result]):
    count: int | None = None
    next: str | None = None
    previous: str | None = None
    results: list[Result]

class NetboxPrefixCustomFields(BaseModel):
    ptr_prefix: str | None = None
    ptr_subdomain: str | None = None
    ip6_arpa_zone: str | None = None

class NetboxPrefix(BaseModel):
    id: int | None = None
    prefix: str
    custom_fields: NetboxPrefixCustomFields | None = None

    def toPrefix(self) -> Prefix:
        custom_fields = self.custom_fields or NetboxPrefixCustomFields()
        return Prefix(
            cidr=self.prefix,
            ptr_label=custom_fields.ptr_prefix,
            ptr_subdomain=custom_fields.ptr_subdomain,
            arpa_zone=custom_fields.ip6_arpa_zone,
        )

class NetboxIPAddress(BaseModel):
    id: int | None = None
    address: str # with mask length, e.g. 192.0.2.5/24
    dns_name: str | None = None

    def toOverride(self) -> AddressOverride:
        return AddressOverride(address=self.address, dns_name=self.dns_name)
