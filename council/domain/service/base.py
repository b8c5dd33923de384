"""Base class for Council domain services."""


class Service:
    """Base class for all domain services.

    Services own the rules that span a record and its store: they load,
    check and write back under the record's lock, and take the caller's
    identity as an explicit argument.
    """
