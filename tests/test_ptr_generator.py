import asyncio
import logging
import sys
from datetime import datetime, timezone

import pytest
import yaml

import ptr_generator
from config import ExitCode
from netbox import AddressFetchError, PrefixParseError
from ptr_zones import AddressFamily, ZoneAccumulator
from support import FakeNetboxClient, netbox_address, netbox_prefix

ARPA_ZONE = "8.b.d.0.1.0.0.2.ip6.arpa"


def inventory() -> FakeNetboxClient:
    return FakeNetboxClient(
        prefixes=[
            netbox_prefix("203.0.113.0/30", "host", "dc1"),
            netbox_prefix("198.51.100.0/24"),  # no ptr metadata
            netbox_prefix("2001:db8::/126", "srv", "dc1", ARPA_ZONE),
            netbox_prefix("2001:db8:1::/64", "srv", "dc1"),  # no arpa zone
            netbox_prefix("10.0.0.0/40", "bad", "dc1"),
        ],
        addresses={
            "203.0.113.0/30": [
                netbox_address("203.0.113.0/30", "network.example.net"),
                netbox_address("203.0.113.2/30", "gw.example.net"),
                netbox_address("203.0.113.3/30", "   "),
            ],
            "2001:db8::/126": [netbox_address("2001:db8::3/126", "router.example.net.")],
        },
    )


def test_collect_zones_builds_record_sets(make_config, caplog):
    client = inventory()

    with caplog.at_level(logging.WARNING):
        accumulator = asyncio.run(ptr_generator.collectZones(make_config(), client))

    assert client.requested_parents == ["203.0.113.0/30", "2001:db8::/126"]
    assert list(accumulator.zones) == ["113.0.203.in-addr.arpa", ARPA_ZONE]
    assert accumulator.zones["113.0.203.in-addr.arpa"].records == {
        "203.0.113.1": "host-1-113-0-203.dc1.example.net",
        "203.0.113.2": "gw.example.net",
        "203.0.113.3": "host-3-113-0-203.dc1.example.net",
    }
    assert accumulator.zones[ARPA_ZONE].records == {
        "2001:0db8:0000:0000:0000:0000:0000:0001": "srv-1--db8-2001.dc1.example.net",
        "2001:0db8:0000:0000:0000:0000:0000:0002": "srv-2--db8-2001.dc1.example.net",
        "2001:0db8:0000:0000:0000:0000:0000:0003": "router.example.net.",
    }
    # only the malformed prefix is worth a warning
    assert "10.0.0.0/40" in caplog.text
    assert "198.51.100.0/24" not in caplog.text


def test_collect_zones_skips_disabled_families(make_config):
    client = inventory()

    accumulator = asyncio.run(
        ptr_generator.collectZones(make_config(), client, frozenset({AddressFamily.IPV6}))
    )

    assert list(accumulator.zones) == ["113.0.203.in-addr.arpa"]
    assert client.requested_parents == ["203.0.113.0/30"]


def test_disabled_families_are_skipped_before_validation(make_config, caplog):
    client = FakeNetboxClient(
        prefixes=[
            netbox_prefix("2001:db8::/64", "srv", "dc1", "example.net"),
            netbox_prefix("2001:db8:1::/32", "srv", "dc1", ARPA_ZONE),
        ]
    )

    with caplog.at_level(logging.WARNING):
        accumulator = asyncio.run(
            ptr_generator.collectZones(make_config(), client, frozenset({AddressFamily.IPV6}))
        )

    assert accumulator.zones == {}
    assert client.requested_parents == []
    assert caplog.records == []


def test_write_zones(make_config, tmp_path):
    config = make_config(serial_revision=7)
    accumulator = asyncio.run(ptr_generator.collectZones(config, inventory()))

    written = ptr_generator.writeZones(
        config, accumulator, now=datetime(2024, 5, 17, 23, 30, tzinfo=timezone.utc)
    )

    assert [path.name for path in written] == ["db.113.0.203.in-addr.arpa", f"db.{ARPA_ZONE}"]
    content = (tmp_path / "zones" / "db.113.0.203.in-addr.arpa").read_text(encoding="utf-8")
    assert content == (
        "$ORIGIN 113.0.203.in-addr.arpa.\n"
        "; serial 2024051707\n"
        "1.113.0.203.in-addr.arpa. IN PTR host-1-113-0-203.dc1.example.net.\n"
        "2.113.0.203.in-addr.arpa. IN PTR gw.example.net.\n"
        "3.113.0.203.in-addr.arpa. IN PTR host-3-113-0-203.dc1.example.net.\n"
    )


def test_write_zones_dry_run_writes_nothing(make_config, tmp_path, caplog):
    config = make_config()
    accumulator = asyncio.run(ptr_generator.collectZones(config, inventory()))

    with caplog.at_level(logging.INFO):
        written = ptr_generator.writeZones(config, accumulator, dryrun=True)

    assert written == []
    assert not (tmp_path / "zones").exists()
    assert "Zone 113.0.203.in-addr.arpa would be written with 3 PTR record(s)" in caplog.text


def test_run_returns_ok(make_config, monkeypatch, tmp_path):
    monkeypatch.setattr(ptr_generator, "NetboxClient", lambda config: inventory())

    assert ptr_generator.run(make_config()) == ExitCode.OK
    assert sorted(path.name for path in (tmp_path / "zones").iterdir()) == [
        "db.113.0.203.in-addr.arpa",
        f"db.{ARPA_ZONE}",
    ]


@pytest.mark.parametrize(
    "error, expected",
    [
        (PrefixParseError("bad body", url="prefixes"), ExitCode.PREFIX_PARSE_FAILURE),
        (AddressFetchError("down", url="addresses"), ExitCode.ADDRESS_FETCH_FAILURE),
    ],
)
def test_run_maps_retrieval_errors_to_exit_codes(make_config, monkeypatch, tmp_path, error, expected):
    client = inventory()
    client.error = error
    monkeypatch.setattr(ptr_generator, "NetboxClient", lambda config: client)

    assert ptr_generator.run(make_config()) == expected
    assert not (tmp_path / "zones").exists()


def test_run_without_template_is_a_render_failure(make_config, monkeypatch, tmp_path):
    monkeypatch.setattr(ptr_generator, "NetboxClient", lambda config: inventory())

    config = make_config(template_directory=str(tmp_path / "missing"))

    assert ptr_generator.run(config) == ExitCode.RENDER_FAILURE


def test_run_without_prefixes_writes_no_zones(make_config, monkeypatch, tmp_path):
    monkeypatch.setattr(ptr_generator, "NetboxClient", lambda config: FakeNetboxClient(prefixes=[]))

    assert ptr_generator.run(make_config()) == ExitCode.OK
    assert not (tmp_path / "zones").exists()


def test_failing_reload_command_keeps_written_zones(make_config, monkeypatch, tmp_path):
    monkeypatch.setattr(ptr_generator, "NetboxClient", lambda config: inventory())
    config = make_config(reload_command=f'"{sys.executable}" -c "import sys; sys.exit(1)"')

    assert ptr_generator.run(config) == ExitCode.HOOK_FAILURE
    assert (tmp_path / "zones" / "db.113.0.203.in-addr.arpa").exists()


def test_reload_command_runs_after_zones_are_written(make_config, monkeypatch, tmp_path):
    monkeypatch.setattr(ptr_generator, "NetboxClient", lambda config: inventory())
    marker = tmp_path / "reloaded"
    config = make_config(
        reload_command=f'"{sys.executable}" -c "import pathlib; pathlib.Path(r\'{marker}\').touch()"'
    )

    assert ptr_generator.run(config) == ExitCode.OK
    assert marker.exists()


def test_dry_run_skips_reload_command(make_config, monkeypatch, tmp_path):
    monkeypatch.setattr(ptr_generator, "NetboxClient", lambda config: inventory())
    config = make_config(reload_command=f'"{sys.executable}" -c "import sys; sys.exit(1)"')

    assert ptr_generator.run(config, dryrun=True) == ExitCode.OK
    assert not (tmp_path / "zones").exists()


def test_main_combines_cli_flags_with_config(monkeypatch, tmp_path, template_dir):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        yaml.safe_dump(
            {
                "global": {
                    "ptr_domain": "example.net",
                    "out_directory": str(tmp_path / "zones"),
                    "template_directory": str(template_dir),
                    "logging": [{"provider": "stdio", "loglevel": "error"}],
                },
                "netbox": {"api_uri": "https://netbox.invalid/api", "api_key": "secret"},
            }
        ),
        encoding="utf-8",
    )
    client = inventory()
    monkeypatch.setattr(ptr_generator, "NetboxClient", lambda config: client)

    with pytest.raises(SystemExit) as excinfo:
        ptr_generator.main(["-f", str(config_path), "--disable-ipv6"])

    assert excinfo.value.code == ExitCode.OK
    assert [path.name for path in (tmp_path / "zones").iterdir()] == ["db.113.0.203.in-addr.arpa"]


def test_main_with_missing_config_file(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        ptr_generator.main(["-f", str(tmp_path / "nope.yaml")])

    assert excinfo.value.code == ExitCode.CONFIG_FAILURE


def test_main_with_undecodable_config_file(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_bytes(b"global:\n  ptr_domain: \xff\xfe\n")

    with pytest.raises(SystemExit) as excinfo:
        ptr_generator.main(["-f", str(config_path)])

    assert excinfo.value.code == ExitCode.CONFIG_FAILURE


def test_config_path_defaults_to_environment(monkeypatch):
    monkeypatch.setenv("CONFIG_PATH", "/srv/ptr/config.yaml")

    assert ptr_generator.parseArguments([]).config_path == "/srv/ptr/config.yaml"
