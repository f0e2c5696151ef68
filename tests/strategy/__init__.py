import pytest
import pytest_asyncio

from eveclient import exceptions


class StrategyTests:
    strategy_class = None
    name = "widgets"

    @pytest.fixture
    def get_strategy_args(self):
        """
        Return a coroutine function returning the kwargs for
        ``strategy_class``.
        """
        raise NotImplementedError()

    @pytest_asyncio.fixture
    async def s(self, get_strategy_args):
        return self.strategy_class(**await get_strategy_args())

    async def _create(self, s, **fields):
        response = await s.post(self.name, fields)
        body = response.body
        return body["_id"], body["_etag"]

    @pytest.mark.asyncio
    async def test_generic(self, s):
        created = [await self._create(s, number=i) for i in range(1, 10)]
        response = await s.get_all(self.name)
        listed = [(r["_id"], r["_etag"]) for r in response.body["_items"]]
        assert sorted(listed) == sorted(created)

        for id, etag in created:
            response = await s.get(self.name, id)
            assert response.ok
            assert response.body["_id"] == id
            assert response.body["_etag"] == etag

    @pytest.mark.asyncio
    async def test_get_nonexisting(self, s):
        response = await s.get(self.name, "huehue")
        assert not response.ok
        assert response.body is None

    @pytest.mark.asyncio
    async def test_put(self, s):
        id, etag = await self._create(s, color="red", size=3)
        response = await s.put(self.name, id, {"color": "blue"}, etag)
        new_etag = response.body["_etag"]
        assert new_etag != etag

        record = (await s.get(self.name, id)).body
        assert record["color"] == "blue"
        assert "size" not in record
        assert record["_etag"] == new_etag

    @pytest.mark.asyncio
    async def test_patch(self, s):
        id, etag = await self._create(s, color="red", size=3)
        await s.patch(self.name, id, {"color": "blue"}, etag)

        record = (await s.get(self.name, id)).body
        assert record["color"] == "blue"
        assert record["size"] == 3

    @pytest.mark.asyncio
    async def test_delete(self, s):
        id, etag = await self._create(s)
        await s.delete(self.name, id, etag)
        assert not (await s.get(self.name, id)).ok

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["patch", "put"])
    async def test_wrong_etag(self, s, method):
        id, etag = await self._create(s, color="red")
        with pytest.raises(exceptions.WrongEtagError):
            await getattr(s, method)(self.name, id, {"color": "blue"}, '"lolnope"')

        assert (await s.get(self.name, id)).body["color"] == "red"

    @pytest.mark.asyncio
    async def test_delete_wrong_etag(self, s):
        id, etag = await self._create(s)
        with pytest.raises(exceptions.WrongEtagError):
            await s.delete(self.name, id, '"lolnope"')
        assert (await s.get(self.name, id)).ok

    @pytest.mark.asyncio
    async def test_update_nonexisting(self, s):
        with pytest.raises(exceptions.NotFoundError):
            await s.put(self.name, "huehue", {"color": "blue"}, '"123"')

    @pytest.mark.asyncio
    async def test_stale_etag_after_update(self, s):
        id, etag = await self._create(s, color="red")
        await s.patch(self.name, id, {"color": "green"}, etag)
        with pytest.raises(exceptions.WrongEtagError):
            await s.patch(self.name, id, {"color": "blue"}, etag)
