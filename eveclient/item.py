from . import exceptions


class Item(dict):
    """A record fetched from a resource.

    The record's fields are the mapping's items; the owning resource is kept
    as an attribute, so ``dict(item)`` or ``json.dumps(item)`` only ever
    contain what the server sent. That also means an item can be passed back
    as write content directly, which is what :py:meth:`save` does.
    """

    __slots__ = ("_resource",)

    def __init__(self, resource, content):
        super().__init__(content)
        self._resource = resource

    def __repr__(self):
        return f"<Item {self._resource.name}/{self.id} {dict.__repr__(self)}>"

    @property
    def id(self):
        return self.get("_id")

    @property
    def etag(self):
        return self.get("_etag")

    def _writable_resource(self):
        if self._resource.read_only:
            raise exceptions.ReadOnlyError(
                f"Resource {self._resource.name} is read-only."
            )
        return self._resource

    async def save(self, overwrite_if_changed=False):
        """Write all fields back with ``put``, guarded by this item's etag."""
        return await self._writable_resource().put(
            self.id,
            self,
            overwrite_if_changed=overwrite_if_changed,
            etag=self.etag,
        )

    async def delete(self, overwrite_if_changed=False):
        """Delete the record, guarded by this item's etag."""
        return await self._writable_resource().delete(
            self.id,
            overwrite_if_changed=overwrite_if_changed,
            etag=self.etag,
        )
