import ipaddress
from collections.abc import Iterable

from custom_logging import Logger

from .address_expander import IPNetwork, canonicalAddress, isReserved
from .models import AddressOverride


def overlayOverrides(
    records: dict[str, str],
    overrides: Iterable[AddressOverride],
    network: IPNetwork,
) -> dict[str, str]:
    """Apply explicit DNS names on top of the auto-generated ``records``.

    Overrides are applied in the given order, the last one for an address
    wins. ``records`` is updated in place and returned.
    """
    logger = Logger.getPTRGeneratorLogger()
    for override in overrides:
        # do not let empty dns names replace auto generated names
        dns_name = (override.dns_name or "").strip()
        if not dns_name:
            continue

        try:
            address = ipaddress.ip_interface(override.address.strip()).ip
        except ValueError:
            logger.warning(f"Ignoring override with invalid address `{override.address}`")
            continue

        if address.version != network.version or address not in network:
            logger.warning(
                f"Ignoring override for {address}, it is not part of prefix {network}"
            )
            continue

        # network addresses never get a record, not even an explicit one
        if isReserved(address):
            logger.debug(f"Ignoring override `{dns_name}` for network address {address}")
            continue

        records[canonicalAddress(address)] = dns_name
    return records
