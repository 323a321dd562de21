import ipaddress
from collections.abc import Iterator
from pydantic import BaseModel

from .errors import MissingPTRMetadataError, SkippableInputError
from .models import AddressFamily, Prefix

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address
IPNetwork = ipaddress.IPv4Network | ipaddress.IPv6Network

# a /12 in IPv4, a /108 in IPv6
MAX_PREFIX_ADDRESSES = 1 << 20


class ExpandedPrefix(BaseModel):
    network: IPNetwork
    zone_name: str
    ptr_label: str
    ptr_subdomain: str

    @property
    def address_family(self) -> AddressFamily:
        return AddressFamily(self.network.version)

    def addresses(self) -> Iterator[IPAddress]:
        return iterAddresses(self.network)

    def usableAddresses(self) -> Iterator[IPAddress]:
        return (address for address in self.addresses() if not isReserved(address))


def parsePrefix(prefix: Prefix) -> ExpandedPrefix:
    """Validate a prefix and resolve the reverse zone it belongs to.

    Raises SkippableInputError when the CIDR is malformed, the naming
    metadata is missing, an IPv6 prefix carries no arpa zone or the
    prefix is too large to enumerate.
    """
    try:
        network = ipaddress.ip_network(prefix.cidr.strip(), strict=False)
    except ValueError as e:
        raise SkippableInputError(prefix.cidr, f"invalid CIDR ({e})") from e

    ptr_label = (prefix.ptr_label or "").strip()
    ptr_subdomain = (prefix.ptr_subdomain or "").strip().strip(".")
    if not ptr_label or not ptr_subdomain:
        raise MissingPTRMetadataError(prefix.cidr, "missing ptr label or ptr subdomain")

    zone_name = zoneForNetwork(network, prefix.arpa_zone, cidr=prefix.cidr)
    if network.num_addresses > MAX_PREFIX_ADDRESSES:
        raise SkippableInputError(
            prefix.cidr, f"{network.num_addresses} addresses are too many to expand"
        )

    return ExpandedPrefix(
        network=network,
        zone_name=zone_name,
        ptr_label=ptr_label,
        ptr_subdomain=ptr_subdomain,
    )


def zoneForNetwork(network: IPNetwork, arpaZone: str | None = None, cidr: str | None = None) -> str:
    if network.version == 4:
        # drop the host octet, e.g. 192.0.2.0/24 -> 2.0.192.in-addr.arpa
        octets = str(network.network_address).split(".")[:-1]
        return ".".join(reversed(octets)) + ".in-addr.arpa"

    zone = (arpaZone or "").strip().strip(".").lower()
    if not zone:
        raise MissingPTRMetadataError(cidr or str(network), "IPv6 prefix without arpa zone")
    if not zone.endswith("ip6.arpa"):
        raise SkippableInputError(cidr or str(network), f"arpa zone `{zone}` is not below ip6.arpa")
    return zone


def iterAddresses(network: IPNetwork) -> Iterator[IPAddress]:
    # every address of the block, network and broadcast addresses included
    return iter(network)


def isReserved(address: IPAddress) -> bool:
    if address.version == 4:
        return int(address) & 0xFF == 0
    return int(address) & 0xFFFF == 0


def canonicalAddress(address: IPAddress) -> str:
    if address.version == 6:
        return address.exploded
    return str(address)
