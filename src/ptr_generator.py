import argparse
import asyncio
import ipaddress
import os
import sys
from datetime import datetime, timezone
from pathlib import Path

from config import Config, ExitCode, load_config
from custom_logging import Logger
from netbox import FatalRetrievalError, NetboxClient
from ptr_zones import (
    AddressFamily,
    ExpandedPrefix,
    MissingPTRMetadataError,
    SkippableInputError,
    ZoneAccumulator,
    parsePrefix,
)
from zone_rendering import (
    HookError,
    RenderError,
    TemplateResolver,
    ZoneWriteError,
    formatSerial,
    renderZone,
    runReloadCommand,
    writeZoneFile,
)

DEFAULT_CONFIG_LOCATION = "/etc/ptr_generator/config.yaml"


def parseArguments(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ptr-generator",
        description="Generate reverse DNS zone files from NetBox prefixes and IP addresses",
    )
    parser.add_argument("-d", "--dryrun", action='store_true', dest="dryrun", help="render all zones and log them instead of writing files or reloading the DNS server")
    parser.add_argument("-f", "--config-file", dest="config_path", default=os.getenv("CONFIG_PATH", DEFAULT_CONFIG_LOCATION), help="specify the path to the config file")
    parser.add_argument("--disable-ipv4", dest="disable_ipv4", action='store_true', help="skip ipv4 prefixes")
    parser.add_argument("--disable-ipv6", dest="disable_ipv6", action='store_true', help="skip ipv6 prefixes")
    return parser.parse_args(argv)


def prefixFamily(cidr: str) -> AddressFamily | None:
    try:
        return AddressFamily(ipaddress.ip_network(cidr.strip(), strict=False).version)
    except ValueError:
        # left for parsePrefix to report
        return None


async def collectZones(
    config: Config,
    client: NetboxClient,
    disabledFamilies: frozenset[AddressFamily] = frozenset(),
) -> ZoneAccumulator:
    logger = Logger.getPTRGeneratorLogger()
    accumulator = ZoneAccumulator(ptr_domain=config.global_.ptr_domain)

    netboxPrefixes = await client.getPrefixes()
    logger.debug(f"NetBox returned {len(netboxPrefixes)} prefix(es)")

    eligible: list[tuple[str, ExpandedPrefix]] = []
    for netboxPrefix in netboxPrefixes:
        if prefixFamily(netboxPrefix.prefix) in disabledFamilies:
            logger.debug(f"Skipping prefix {netboxPrefix.prefix}, its address family is disabled")
            continue
        try:
            expanded = parsePrefix(netboxPrefix.toPrefix())
        except MissingPTRMetadataError as e:
            logger.debug(str(e))
            continue
        except SkippableInputError as e:
            logger.warning(str(e))
            continue
        eligible.append((netboxPrefix.prefix, expanded))

    # fetch concurrently, merge sequentially in inventory order so the last prefix still wins
    addressLists = await asyncio.gather(
        *(client.getIPAddresses(parent=cidr) for cidr, _ in eligible)
    )
    for (cidr, expanded), addresses in zip(eligible, addressLists):
        try:
            recordSet = accumulator.addPrefix(
                expanded, [address.toOverride() for address in addresses]
            )
        except SkippableInputError as e:
            logger.warning(str(e))
            continue
        logger.debug(f"Added prefix {cidr} to zone {recordSet.zone_name}")
    return accumulator


def writeZones(
    config: Config,
    accumulator: ZoneAccumulator,
    dryrun: bool = False,
    now: datetime | None = None,
) -> list[Path]:
    logger = Logger.getPTRGeneratorLogger()
    resolver = TemplateResolver(config.global_.template_directory)
    serial = formatSerial(
        (now or datetime.now(timezone.utc)).date(), config.global_.serial_revision
    )

    written: list[Path] = []
    for recordSet in accumulator.recordSets():
        content = renderZone(recordSet, resolver.resolve(recordSet.zone_name), serial)
        if dryrun:
            logger.info(
                f"Zone {recordSet.zone_name} would be written with {len(recordSet.records)} PTR record(s):\n"
                + "```\n"
                + content
                + "```",
            )
            continue
        written.append(
            writeZoneFile(config.global_.out_directory, recordSet.zone_name, content)
        )
        logger.info(f"Wrote zone {recordSet.zone_name} with {len(recordSet.records)} PTR record(s)")
    return written


def run(config: Config, dryrun: bool = False, disabledFamilies: frozenset[AddressFamily] = frozenset()) -> ExitCode:
    logger = Logger.getPTRGeneratorLogger()

    async def fetch() -> ZoneAccumulator:
        async with NetboxClient(config.netbox) as client:
            return await collectZones(config, client, disabledFamilies)

    try:
        accumulator = asyncio.run(fetch())
    except FatalRetrievalError as e:
        logger.error(str(e))
        return e.exit_code

    try:
        writeZones(config, accumulator, dryrun=dryrun)
    except (RenderError, ZoneWriteError) as e:
        logger.error(str(e))
        return e.exit_code

    if config.global_.reload_command:
        if dryrun:
            logger.info(f"This is a dryrun. Not running `{config.global_.reload_command}`")
        else:
            try:
                runReloadCommand(config.global_.reload_command)
            except HookError as e:
                logger.error(f"Error while running DNS server reload command: {e}")
                return e.exit_code

    return ExitCode.OK


def main(argv: list[str] | None = None):
    args = parseArguments(argv)

    print(f"[INFO]: Loading Config from {args.config_path}")
    try:
        config: Config = load_config(args.config_path)
    except (OSError, UnicodeDecodeError) as e:
        print(f"[FATAL]: Unable to read config file: {e}")
        sys.exit(ExitCode.CONFIG_FAILURE)

    logger = Logger.initLoggerHandlers(config=config.global_)
    logger.debug("Configured Loggers")

    dryrun: bool = args.dryrun or config.global_.dry_run
    disabledFamilies: set[AddressFamily] = set()
    if args.disable_ipv4 or config.global_.disable_v4:
        disabledFamilies.add(AddressFamily.IPV4)
    if args.disable_ipv6 or config.global_.disable_v6:
        disabledFamilies.add(AddressFamily.IPV6)

    if dryrun:
        logger.info("This is a dryrun. No zone files will be written.")

    sys.exit(run(config, dryrun=dryrun, disabledFamilies=frozenset(disabledFamilies)))


if __name__ == "__main__":
    main()
