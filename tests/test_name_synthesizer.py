import ipaddress

import pytest

from ptr_zones import synthesizePTRName


def test_ipv4_octets_are_reversed():
    name = synthesizePTRName(ipaddress.ip_address("203.0.113.1"), "host", "dc1", "example.net")

    assert name == "host-1-113-0-203.dc1.example.net"


@pytest.mark.parametrize(
    "address, expected",
    [
        # one run of zero hextets collapses into a single `--`
        ("2001:db8::1", "srv-1--db8-2001"),
        ("2001:db8::2", "srv-2--db8-2001"),
        ("2001:db8:0:1::abcd", "srv-abcd--1--db8-2001"),
        # leading zeros are stripped per hextet
        ("2001:0db8:00a0:0001:0010:0100:1000:000f", "srv-f-1000-100-10-1-a0-db8-2001"),
        # separate runs each produce their own marker
        ("2001:0:0:1:0:0:0:1", "srv-1--1--2001"),
        ("::1", "srv-1-"),
    ],
)
def test_ipv6_hextets_are_reversed_and_compressed(address, expected):
    name = synthesizePTRName(ipaddress.ip_address(address), "srv", "dc1", "example.net")

    assert name == f"{expected}.dc1.example.net"


def test_synthesis_is_deterministic():
    address = ipaddress.ip_address("2001:db8::42")

    names = {synthesizePTRName(address, "srv", "dc1", "example.net") for _ in range(3)}

    assert names == {"srv-42--db8-2001.dc1.example.net"}
