"""Errors raised by catalog use cases.

Handlers raise these when a request breaks a catalog rule; the CLI turns
any of them into a ``click.ClickException``. Repositories do not use them:
a missing product is reported as ``None`` and storage failures surface as
the storage client's own exceptions.
"""


class DomainException(Exception):
    """Root of every catalog rule violation."""


class ValidationError(DomainException):
    """Input such as a blank name or a duplicate product ID was rejected."""


class EntityNotFoundError(DomainException):
    """A use case needed a product that the repository does not hold."""
