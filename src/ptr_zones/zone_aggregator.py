import ipaddress
from collections.abc import Iterable

from .address_expander import ExpandedPrefix, canonicalAddress, parsePrefix
from .errors import SkippableInputError
from .models import AddressOverride, Prefix, PTRRecord, ZoneRecordSet
from .name_synthesizer import synthesizePTRName
from .record_overlay import overlayOverrides


class ZoneAccumulator(object):
    """Collects the PTR records of all prefixes of one run, grouped by zone.

    Prefixes sharing a zone are merged. When two prefixes define the same
    address, the prefix added last wins.
    """

    ptr_domain: str
    zones: dict[str, ZoneRecordSet]

    def __init__(self, ptr_domain: str):
        self.ptr_domain = ptr_domain.strip().strip(".")
        self.zones = {}

    def addPrefix(
        self,
        prefix: Prefix | ExpandedPrefix,
        overrides: Iterable[AddressOverride] = (),
    ) -> ZoneRecordSet:
        expanded = prefix if isinstance(prefix, ExpandedPrefix) else parsePrefix(prefix)

        recordSet = self.zones.get(expanded.zone_name)
        if recordSet is not None and recordSet.address_family != expanded.address_family:
            raise SkippableInputError(
                str(expanded.network),
                f"zone {expanded.zone_name} already holds IPv{recordSet.address_family.value} records",
            )

        records = overlayOverrides(
            self.autoRecords(expanded), overrides, expanded.network
        )

        if recordSet is None:
            recordSet = ZoneRecordSet(
                zone_name=expanded.zone_name, address_family=expanded.address_family
            )
            self.zones[expanded.zone_name] = recordSet
        recordSet.records.update(records)
        return recordSet

    def autoRecords(self, expanded: ExpandedPrefix) -> dict[str, str]:
        return {
            canonicalAddress(address): synthesizePTRName(
                address,
                ptrLabel=expanded.ptr_label,
                ptrSubdomain=expanded.ptr_subdomain,
                ptrDomain=self.ptr_domain,
            )
            for address in expanded.usableAddresses()
        }

    def recordSets(self) -> list[ZoneRecordSet]:
        return list(self.zones.values())


def reverseLabel(address: str) -> str:
    # 192.0.2.5 -> 5.2.0.192.in-addr.arpa.
    # 2001:db8::1 -> 1.0.0.0. ... .8.b.d.0.1.0.0.2.ip6.arpa.
    return ipaddress.ip_address(address).reverse_pointer + "."


def targetFQDN(name: str) -> str:
    return name if name.endswith(".") else f"{name}."


def ptrRecords(recordSet: ZoneRecordSet) -> list[PTRRecord]:
    return [
        PTRRecord(reverse_label=reverseLabel(address), target_fqdn=targetFQDN(name))
        for address, name in recordSet.records.items()
    ]
