from .address_expander import IPAddress


def synthesizePTRName(
    address: IPAddress, ptrLabel: str, ptrSubdomain: str, ptrDomain: str
) -> str:
    """Build the auto-generated PTR target for ``address``.

    IPv4 addresses are written host octet first:
    ``192.0.2.5`` with label ``host`` -> ``host-5-2-0-192.<subdomain>.<domain>``.

    IPv6 addresses are written as their hextets in reverse order with leading
    zeros removed. Every run of all-zero hextets turns into a single empty
    token, which shows up as ``--`` once joined, similar to ``::``:
    ``2001:db8::1`` with label ``srv`` -> ``srv-1--db8-2001.<subdomain>.<domain>``.
    """
    return f"{ptrLabel}-{hostPart(address)}.{ptrSubdomain}.{ptrDomain}"


def hostPart(address: IPAddress) -> str:
    if address.version == 4:
        return "-".join(reversed(str(address).split(".")))

    tokens: list[str] = []
    for hextet in reversed(address.exploded.split(":")):
        trimmed = hextet.lstrip("0")
        if trimmed:
            tokens.append(trimmed)
        elif not tokens or tokens[-1] != "":
            tokens.append("")
    return "-".join(tokens)
