import asyncio
import logging
from dataclasses import dataclass
from typing import Any

import aiohttp


log = logging.getLogger(__name__)


class RequestError(Exception):
    def __init__(self, message: str, status: int = None, code: int = None):
        self.status = status
        self.code = code
        super().__init__(f"{status} {message}" if status else message)


@dataclass
class RestResponse:
    status: int
    data: Any = None


class DiscordRest:
    """Thin request primitive for the Discord REST API.

    Kept apart from discord.py's `bot.http` because callers need the raw
    status code (pin writes succeed only on 204), which HTTPClient hides.
    Errors (transport or HTTP >= 400) are raised as RequestError. No retries,
    rate limit handling is left to the caller.
    """

    def __init__(self, token: str, base_url: str, timeout: float = 10):
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session: aiohttp.ClientSession = None

    async def start(self):
        if self.session and not self.session.closed:
            return
        self.session = aiohttp.ClientSession(
            headers={"Authorization": f"Bot {self.token}"},
            timeout=aiohttp.ClientTimeout(total=self.timeout),
        )

    async def close(self):
        if self.session and not self.session.closed:
            await self.session.close()
        self.session = None

    async def request(self, path: str, method: str = "GET", headers: dict = None):
        if not self.session or self.session.closed:
            raise RequestError("REST session is not started")

        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            async with self.session.request(method, url, headers=headers) as res:
                data = await read_body(res)
                status = res.status
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise RequestError(f"{method} {path} failed: {e!r}") from e
        except ValueError as e:
            raise RequestError(f"{method} {path}: invalid JSON body") from e

        log.debug("%s %s => %s", method, path, status)
        if status >= 400:
            message = data.get("message", "") if isinstance(data, dict) else (data or "")
            code = data.get("code") if isinstance(data, dict) else None
            message = f"{method} {path}: {message}" if message else f"{method} {path}"
            raise RequestError(message, status=status, code=code)

        return RestResponse(status=status, data=data)


async def read_body(res: aiohttp.ClientResponse):
    if res.status == 204:
        return None
    if res.content_type == "application/json":
        return await res.json()
    text = await res.text()
    return text or None
