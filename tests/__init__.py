"""
Test suite for eveclient.
"""

import hypothesis.strategies as st

from eveclient.strategy.memory import MemoryStrategy


def blow_up(*a, **kw):
    raise AssertionError("Did not expect to be called.")


class RecordingStrategy(MemoryStrategy):
    """A MemoryStrategy that remembers which calls were made, in order.

    Reads are recorded as ``(method, id)``, writes as ``(method, id, etag)``.
    """

    def __init__(self):
        super().__init__()
        self.calls = []

    async def get(self, name, id):
        self.calls.append(("get", id))
        return await super().get(name, id)

    async def get_all(self, name, filter=None):
        self.calls.append(("get_all", filter))
        return await super().get_all(name, filter)

    async def post(self, name, content):
        self.calls.append(("post",))
        return await super().post(name, content)

    async def patch(self, name, id, content, etag):
        self.calls.append(("patch", id, etag))
        return await super().patch(name, id, content, etag)

    async def put(self, name, id, content, etag):
        self.calls.append(("put", id, etag))
        return await super().put(name, id, content, etag)

    async def delete(self, name, id, etag):
        self.calls.append(("delete", id, etag))
        return await super().delete(name, id, etag)


def put_record(strategy, name, id, etag, **fields):
    """Place a record with a known etag directly into a MemoryStrategy."""
    record = dict(fields, _id=id, _etag=etag)
    strategy.records.setdefault(name, {})[id] = record
    return record


field_names = st.text(
    alphabet="abcdefghijklmnopqrstuvwxyz_", min_size=1, max_size=10
).filter(lambda x: not x.startswith("_"))

field_values = st.one_of(
    st.integers(), st.text(max_size=20), st.booleans(), st.none()
)

records = st.dictionaries(field_names, field_values, max_size=5)
