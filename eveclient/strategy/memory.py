import copy
import random
import uuid

from .. import exceptions
from .base import Response
from .base import Strategy

META_FIELDS = frozenset(["_id", "_etag"])


def _random_string():
    return f"{random.random():.9f}"


def _matches(record, filter):
    if not filter:
        return True
    if "where" in filter:
        filter = filter["where"]
    return all(record.get(key) == value for key, value in filter.items())


class MemoryStrategy(Strategy):
    """
    Saves records in RAM, only useful for testing.
    """

    strategy_name = "memory"

    def __init__(self):
        self.records = {}  # name => {id => record}

    def _collection(self, name):
        return self.records.setdefault(name, {})

    def _check(self, name, id, etag):
        collection = self._collection(name)
        if id not in collection:
            raise exceptions.NotFoundError(f"{name}/{id}")
        actual_etag = collection[id]["_etag"]
        if etag != actual_etag:
            raise exceptions.WrongEtagError(etag, actual_etag)
        return collection

    def _store(self, name, id, fields):
        record = {
            key: value
            for key, value in copy.deepcopy(dict(fields)).items()
            if key not in META_FIELDS
        }
        record["_id"] = id
        record["_etag"] = _random_string()
        self._collection(name)[id] = record
        return Response(
            ok=True,
            status=200,
            body={"_status": "OK", "_id": id, "_etag": record["_etag"]},
        )

    async def get(self, name, id):
        try:
            record = self._collection(name)[id]
        except KeyError:
            return Response(ok=False, status=404)
        return Response(ok=True, status=200, body=copy.deepcopy(record))

    async def get_all(self, name, filter=None):
        items = [
            copy.deepcopy(record)
            for record in self._collection(name).values()
            if _matches(record, filter)
        ]
        return Response(ok=True, status=200, body={"_items": items})

    async def post(self, name, content):
        id = content.get("_id") or uuid.uuid4().hex
        if id in self._collection(name):
            raise exceptions.PreconditionFailed(f"{name}/{id} already exists")
        return self._store(name, id, content)._replace(status=201)

    async def patch(self, name, id, content, etag):
        collection = self._check(name, id, etag)
        fields = dict(collection[id])
        fields.update(content)
        return self._store(name, id, fields)

    async def put(self, name, id, content, etag):
        self._check(name, id, etag)
        return self._store(name, id, content)

    async def delete(self, name, id, etag):
        collection = self._check(name, id, etag)
        del collection[id]
        return Response(ok=True, status=204)
