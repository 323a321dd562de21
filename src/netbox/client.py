import asyncio
import json
from pydantic import ValidationError
from typing import Any, Type

import aiohttp

from config import NetboxConfig
from custom_logging import Logger

from .api_pydantic_models import NetboxIPAddress, NetboxPaginated, NetboxPrefix
from .errors import (
    AddressFetchError,
    AddressParseError,
    FatalRetrievalError,
    PrefixFetchError,
    PrefixParseError,
)


class NetboxClient(object):
    """Read-only client for the NetBox IPAM endpoints used to build PTR zones.

    Use it as an async context manager so the underlying aiohttp session is
    closed once the inventory has been read.
    """

    config: NetboxConfig
    aioSession: aiohttp.ClientSession | None
    apiTimeout: aiohttp.ClientTimeout

    def __init__(
        self, config: NetboxConfig, aioSession: aiohttp.ClientSession | None = None
    ):
        self.config = config
        self.aioSession = aioSession
        self.apiTimeout = aiohttp.ClientTimeout(total=config.timeout)

    async def __aenter__(self) -> "NetboxClient":
        if self.aioSession is None:
            connector: aiohttp.TCPConnector | None = None
            if self.config.ignore_tls_verification:
                Logger.getPTRGeneratorLogger().debug(
                    "Disabling TLS certificate verification for the NetBox API, requested by config"
                )
                connector = aiohttp.TCPConnector(ssl=False)
            self.aioSession = aiohttp.ClientSession(connector=connector)
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self):
        if self.aioSession is not None and not self.aioSession.closed:
            await self.aioSession.close()

    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Token {self.config.api_key}",
            "Accept": "application/json",
        }

    async def getPrefixes(self) -> list[NetboxPrefix]:
        return await self._getAllPages(
            url=f"{self.config.api_uri}/ipam/prefixes/",
            params={},
            model=NetboxPrefix,
            fetchError=PrefixFetchError,
            parseError=PrefixParseError,
        )

    async def getIPAddresses(self, parent: str) -> list[NetboxIPAddress]:
        return await self._getAllPages(
            url=f"{self.config.api_uri}/ipam/ip-addresses/",
            params={"parent": parent},
            model=NetboxIPAddress,
            fetchError=AddressFetchError,
            parseError=AddressParseError,
        )

    async def _getAllPages(
        self,
        url: str,
        params: dict[str, str],
        model: Type[Any],
        fetchError: Type[FatalRetrievalError],
        parseError: Type[FatalRetrievalError],
    ) -> list[Any]:
        if self.aioSession is None:
            raise RuntimeError("NetboxClient has to be used as an async context manager")
        logger = Logger.getPTRGeneratorLogger()

        if self.config.page_size is not None:
            params = {**params, "limit": str(self.config.page_size)}

        results: list[Any] = []
        nextUrl: str | None = url
        nextParams: dict[str, str] | None = params
        while nextUrl is not None:
            logger.debug(f"Requesting {nextUrl}")
            try:
                response = await self.aioSession.get(
                    url=nextUrl,
                    params=nextParams,
                    headers=self.headers(),
                    timeout=self.apiTimeout,
                )
            except asyncio.TimeoutError as e:
                raise fetchError(f"Timeout calling NetBox at {nextUrl}", url=nextUrl) from e
            except aiohttp.ClientError as e:
                raise fetchError(
                    f"Unable to establish connection to NetBox at {nextUrl}: {e}",
                    url=nextUrl,
                ) from e

            async with response:
                if response.status >= 400:
                    match response.status:
                        case 401 | 403:
                            message = f"NetBox rejected the API token - {response.reason}"
                        case 404:
                            message = f"NetBox endpoint not found - {response.reason}"
                        case _:
                            message = f"Undefined Error Code: {response.status} {response.reason}"
                    raise fetchError(f"{message} ({nextUrl})", url=nextUrl)

                try:
                    body = await response.json(content_type=None)
                except (json.JSONDecodeError, UnicodeDecodeError, aiohttp.ContentTypeError) as e:
                    raise parseError(
                        f"NetBox responded with a non JSON body at {nextUrl}", url=nextUrl
                    ) from e
                except (asyncio.TimeoutError, aiohttp.ClientError) as e:
                    raise fetchError(
                        f"Reading the NetBox response from {nextUrl} failed: {e}",
                        url=nextUrl,
                    ) from e

            try:
                page = NetboxPaginated[model].model_validate(body)
            except ValidationError as e:
                raise parseError(
                    f"NetBox responded with an invalid response body at {nextUrl}: {e.error_count()} error(s)",
                    url=nextUrl,
                ) from e

            results.extend(page.results)
            # `next` already carries all query parameters
            nextUrl = page.next
            nextParams = None
        return results
