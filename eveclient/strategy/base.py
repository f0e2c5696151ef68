from abc import ABCMeta
from abc import abstractmethod
from typing import Any
from typing import List
from typing import NamedTuple


class Response(NamedTuple):
    """Result of a strategy call.

    ``ok`` is False only for a missing record on :py:meth:`Strategy.get`, all
    other failures are raised.
    """

    ok: bool
    status: int
    body: Any = None


class Strategy(metaclass=ABCMeta):

    """Superclass of all strategies, interface that all strategies have to
    implement.

    Terminology:
      - NAME: String; The collection key of a resource on the remote store,
          e.g. ``"widgets"``.
      - ID: Per-resource identifier of a record, the record's ``_id``.
      - ETAG: String; Token that changes whenever the record does. Every
          record carries its current one as ``_etag``.
      - RECORD: Mapping with at least ``_id`` and ``_etag``.
    """

    # The string used in the config to denote the type of strategy. Should be
    # overridden by subclasses.
    strategy_name: str

    # The attribute values to show in the representation of the strategy.
    _repr_attributes: List[str] = []

    def __repr__(self):
        return "<{}(**{})>".format(
            self.__class__.__name__,
            {x: getattr(self, x) for x in self._repr_attributes},
        )

    @abstractmethod
    async def get(self, name: str, id) -> Response:
        """Fetch a single record.

        :returns: a :py:class:`Response` whose body is the record, or one with
            ``ok=False`` if there is no such record.
        """

    @abstractmethod
    async def get_all(self, name: str, filter=None) -> Response:
        """Fetch a collection of records.

        :param filter: Passed on to the remote store as-is.
        :returns: a :py:class:`Response` whose body has an ``_items`` list.
        """

    @abstractmethod
    async def post(self, name: str, content) -> Response:
        """Create a new record.

        :returns: a :py:class:`Response` describing the created record.
        """

    @abstractmethod
    async def patch(self, name: str, id, content, etag: str) -> Response:
        """Update some fields of a record.

        :raises: :exc:`eveclient.exceptions.WrongEtagError` if the etag on the
            server doesn't match the given etag,
            :exc:`eveclient.exceptions.NotFoundError` if the record doesn't
            exist.
        """

    @abstractmethod
    async def put(self, name: str, id, content, etag: str) -> Response:
        """Replace a record. Raises like :py:meth:`patch`."""

    @abstractmethod
    async def delete(self, name: str, id, etag: str) -> Response:
        """Delete a record. Raises like :py:meth:`patch`."""
