from __future__ import annotations

import json
import logging
import urllib.parse as urlparse

import aiohttp

from .. import exceptions
from ..http import USERAGENT
from ..http import prepare_auth
from ..http import prepare_verify
from ..http import request
from .base import Response
from .base import Strategy

logger = logging.getLogger(__name__)

# Fields Eve manages itself and refuses to find in a request body.
META_FIELDS = frozenset(
    ["_etag", "_created", "_updated", "_links", "_status", "_deleted"]
)


def _ensure_slash(dir):
    return dir.rstrip("/") + "/"


def _encode_filter(filter):
    if not filter:
        return {}

    params = {}
    for key, value in filter.items():
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            value = json.dumps(value)
        params[key] = value
    return params


def _encode_content(content):
    body = {key: value for key, value in content.items() if key not in META_FIELDS}
    return json.dumps(body).encode("utf-8")


class HttpStrategy(Strategy):
    """
    Talks to an Eve_-style REST API. Each resource lives under ``{url}{name}/``
    and each record under ``{url}{name}/{id}``. Conditional writes send the
    etag as ``If-Match``.

    .. _Eve: https://docs.python-eve.org/

    :param url: Base URL of the API.
    :param username: Username for authentication.
    :param password: Password for authentication.
    :param auth: Authentication method, only ``basic`` (the default).
    :param verify: Path to a CA bundle to verify the server with.
    :param useragent: Default ``eveclient/{version}``.
    :param connector: The ``aiohttp.BaseConnector`` all requests go through.
        It is not closed by the strategy.
    """

    strategy_name = "http"
    _repr_attributes = ["username", "url"]

    def __init__(
        self,
        url,
        username="",
        password="",
        verify=None,
        auth=None,
        useragent=USERAGENT,
        *,
        connector,
    ) -> None:
        self._settings = {}
        auth = prepare_auth(auth, username, password)
        if auth:
            self._settings["auth"] = auth

        ssl = prepare_verify(verify)
        if ssl:
            self._settings["ssl"] = ssl

        self.username = username
        self.useragent = useragent
        assert connector is not None
        self.connector = connector

        self.url = _ensure_slash(url)

    def _default_headers(self):
        return {"User-Agent": self.useragent, "Accept": "application/json"}

    def _url(self, name, id=None):
        url = urlparse.urljoin(self.url, urlparse.quote(name, safe=""))
        if id is not None:
            url = _ensure_slash(url) + urlparse.quote(str(id), safe="")
        return url

    async def _request(self, method, url, etag=None, content=None, **kwargs):
        headers = self._default_headers()
        if etag is not None:
            headers["If-Match"] = etag
        if content is not None:
            headers["Content-Type"] = "application/json"
            kwargs["data"] = _encode_content(content)

        async with aiohttp.ClientSession(
            connector=self.connector,
            connector_owner=False,
            trust_env=True,
        ) as session:
            response = await request(
                method,
                url,
                headers=headers,
                session=session,
                **self._settings,
                **kwargs,
            )
            raw = await response.read()

        body = None
        if raw:
            try:
                body = json.loads(raw.decode("utf-8"))
            except ValueError as e:
                raise exceptions.InvalidResponse(
                    f"{method} {url} did not return JSON: {e}"
                )
        return Response(ok=True, status=response.status, body=body)

    async def get(self, name, id):
        try:
            return await self._request("GET", self._url(name, id))
        except exceptions.NotFoundError:
            logger.debug(f"{name}/{id} not found")
            return Response(ok=False, status=404)

    async def get_all(self, name, filter=None):
        return await self._request(
            "GET", self._url(name), params=_encode_filter(filter)
        )

    async def post(self, name, content):
        return await self._request("POST", self._url(name), content=content)

    async def patch(self, name, id, content, etag):
        return await self._request(
            "PATCH", self._url(name, id), etag=etag, content=content
        )

    async def put(self, name, id, content, etag):
        return await self._request(
            "PUT", self._url(name, id), etag=etag, content=content
        )

    async def delete(self, name, id, etag):
        return await self._request("DELETE", self._url(name, id), etag=etag)
