from netbox import FatalRetrievalError, NetboxIPAddress, NetboxPrefix


def netbox_prefix(cidr: str, label: str | None = None, subdomain: str | None = None, arpa_zone: str | None = None) -> NetboxPrefix:
    return NetboxPrefix.model_validate(
        {
            "prefix": cidr,
            "custom_fields": {
                "ptr_prefix": label,
                "ptr_subdomain": subdomain,
                "ip6_arpa_zone": arpa_zone,
            },
        }
    )


def netbox_address(address: str, dns_name: str | None = "") -> NetboxIPAddress:
    return NetboxIPAddress(address=address, dns_name=dns_name)


class FakeNetboxClient(object):
    """Stands in for NetboxClient, serving canned prefixes and addresses."""

    def __init__(
        self,
        prefixes: list[NetboxPrefix],
        addresses: dict[str, list[NetboxIPAddress]] | None = None,
        error: FatalRetrievalError | None = None,
    ):
        self.prefixes = prefixes
        self.addresses = addresses or {}
        self.error = error
        self.requested_parents: list[str] = []

    async def __aenter__(self) -> "FakeNetboxClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        return None

    async def getPrefixes(self) -> list[NetboxPrefix]:
        if self.error is not None and self.error.url == "prefixes":
            raise self.error
        return self.prefixes

    async def getIPAddresses(self, parent: str) -> list[NetboxIPAddress]:
        self.requested_parents.append(parent)
        if self.error is not None and self.error.url == "addresses":
            raise self.error
        return self.addresses.get(parent, [])
