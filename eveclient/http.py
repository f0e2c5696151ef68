from __future__ import annotations

import logging
from ssl import create_default_context

import aiohttp

from . import __version__
from . import exceptions
from .utils import expand_path

logger = logging.getLogger(__name__)
USERAGENT = f"eveclient/{__version__}"

# Eve answers a stale If-Match with 412 and a missing one with 428.
_STATUS_ERRORS = {
    412: exceptions.WrongEtagError,
    428: exceptions.PreconditionFailed,
    404: exceptions.NotFoundError,
    410: exceptions.NotFoundError,
}


def prepare_auth(auth, username, password):
    """Eve only does basic auth out of the box, so that is all we offer."""
    if username and password:
        if auth == "basic" or auth is None:
            return aiohttp.BasicAuth(username, password)
        raise exceptions.UserError(f"Unknown authentication method: {auth}")
    elif auth:
        raise exceptions.UserError(
            f"You need to specify username and password for {auth} authentication."
        )

    return None


def prepare_verify(verify):
    if isinstance(verify, str):
        return create_default_context(cafile=expand_path(verify))
    elif verify is not None:
        raise exceptions.UserError(
            f"Invalid value for verify ({verify}), must be a path to a PEM-file."
        )
    return None


async def request(method, url, session, **kwargs):
    """Send one request through ``session`` and turn the statuses Eve uses for
    etag conflicts and missing records into exceptions.

    Parameters are the same as for ``aiohttp.ClientSession.request``.

    :raises: :exc:`eveclient.exceptions.WrongEtagError` on a stale ``If-Match``
        etag, :exc:`eveclient.exceptions.NotFoundError` on a missing record and
        ``aiohttp.ClientResponseError`` for every other failure status.
    """

    logger.debug("=" * 20)
    logger.debug(f"{method} {url}")
    logger.debug(kwargs.get("headers", {}))
    logger.debug(kwargs.get("params", None))
    logger.debug(kwargs.get("data", None))
    logger.debug("Sending request...")

    assert isinstance(kwargs.get("data", b""), bytes)

    response = await session.request(method, url, **kwargs)

    logger.debug(response.status)
    logger.debug(response.headers)

    error = _STATUS_ERRORS.get(response.status)
    if error is not None:
        raise error(response.reason)

    response.raise_for_status()
    return response
