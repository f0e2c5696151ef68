"""
Strategies are the transports behind a resource. They offer the plain CRUD
operations against one remote store; the etag conflict handling on top of
them lives in `eveclient.resource`. The exact interface is described in
`eveclient.strategy.base`, the `Strategy` class should be a superclass of all
strategy classes.
"""
