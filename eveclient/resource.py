"""
Resources are named collections on a remote store, accessed through a
:py:class:`~eveclient.strategy.base.Strategy`.

Writes are optimistic: each one carries the etag the caller last saw, and the
strategy refuses it with :exc:`~eveclient.exceptions.WrongEtagError` if the
record has changed since. Callers can opt into overwriting such changes, in
which case the record is fetched again and the write retried once with the
fresh etag.
"""

import logging

from . import exceptions
from .item import Item
from .strategy.base import Strategy

logger = logging.getLogger(__name__)

STRATEGY_METHODS = sorted(Strategy.__abstractmethods__)


class Resource:
    """Read access to one resource. Use :py:func:`create_resource` to obtain
    one."""

    read_only = True

    def __init__(self, name, strategy):
        self.name = name
        self.strategy = strategy

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.name!r} via {self.strategy!r}>"

    async def get(self, id):
        """Fetch a single record.

        :returns: an :py:class:`~eveclient.item.Item`, or ``None`` if there is
            no record with that id.
        """
        response = await self.strategy.get(self.name, id)
        if not response.ok:
            return None
        if not isinstance(response.body, dict):
            raise exceptions.InvalidResponse(
                f"Fetching {self.name}/{id} returned no record: {response.body!r}"
            )
        return Item(self, response.body)

    async def list(self, filter=None):
        """Fetch all records matching ``filter``, in the order the server
        returned them. The filter is handed to the strategy untouched."""
        response = await self.strategy.get_all(self.name, filter)
        try:
            items = response.body["_items"]
        except (KeyError, TypeError):
            raise exceptions.InvalidResponse(
                f"Listing {self.name} returned no _items: {response.body!r}"
            )
        return [Item(self, item) for item in items]

    async def find(self, filter=None):
        return await self.list(filter)


class WritableResource(Resource):
    """A :py:class:`Resource` that can also be written to."""

    read_only = False

    async def create(self, content):
        """Create a new record. There is no previous version to conflict
        with, so this is sent as-is."""
        return await self.strategy.post(self.name, content)

    async def post(self, content):
        return await self.create(content)

    async def patch(self, id, content, overwrite_if_changed=False, etag=None):
        """Update some fields of a record.

        :param etag: The etag the caller last saw.
        :param overwrite_if_changed: If the record changed since ``etag``, or
            no etag is given, fetch it again and write with its current etag.
        :raises: :exc:`~eveclient.exceptions.UsageError` if neither an etag
            nor ``overwrite_if_changed`` is given.
        """
        return await self._write(
            "patch", id, content, overwrite_if_changed=overwrite_if_changed, etag=etag
        )

    async def put(self, id, content, overwrite_if_changed=False, etag=None):
        """Replace a record. Takes the same arguments as :py:meth:`patch`."""
        return await self._write(
            "put", id, content, overwrite_if_changed=overwrite_if_changed, etag=etag
        )

    async def delete(self, id, overwrite_if_changed=False, etag=None):
        """Delete a record. Takes the same arguments as :py:meth:`patch`."""
        return await self._write(
            "delete", id, overwrite_if_changed=overwrite_if_changed, etag=etag
        )

    async def _write(self, method, id, *content, overwrite_if_changed, etag):
        if etag:
            try:
                return await self._call(method, id, content, etag)
            except exceptions.WrongEtagError:
                if not overwrite_if_changed:
                    raise
                logger.debug(
                    f"{method} {self.name}/{id}: etag {etag} is outdated, "
                    "fetching the current one"
                )
        elif not overwrite_if_changed:
            raise exceptions.UsageError(
                "Either set overwrite_if_changed or provide an etag."
            )

        return await self._force_write(method, id, content)

    async def _force_write(self, method, id, content):
        current = await self.get(id)
        if current is None:
            raise exceptions.TargetMissingError(
                f"Tried to {method} non existent {self.name}/{id}",
                method=method,
                resource=self.name,
                id=id,
            )
        # A second conflict is left to the caller.
        return await self._call(method, id, content, current.etag)

    def _call(self, method, id, content, etag):
        return getattr(self.strategy, method)(self.name, id, *content, etag)


def create_resource(name, strategy, read_only=False):
    """Create a resource called ``name`` backed by ``strategy``.

    Read-only resources only offer ``get``, ``list`` and ``find``. Nothing is
    sent to the remote store until one of the operations is called.

    ``strategy`` does not have to subclass
    :py:class:`~eveclient.strategy.base.Strategy`, any object with the same
    coroutines will do.
    """
    if not name or not isinstance(name, str):
        raise exceptions.UserError(f"Invalid resource name: {name!r}")
    missing = [m for m in STRATEGY_METHODS if not callable(getattr(strategy, m, None))]
    if missing:
        raise exceptions.UserError(
            f"Resource {name} needs a strategy, got {strategy!r}",
            problems=[f"{m}() is missing" for m in missing],
        )

    cls = Resource if read_only else WritableResource
    return cls(name, strategy)
