"""Domain-level exceptions.

Every rule violation is a subclass of DomainException so the CLI layer can
catch them uniformly and display a one-line message.

Failed lookups (unknown product on add, absent line on remove) are NOT
errors in this domain; they are no-ops and never raise.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value or invariant was violated (bad quantity, bad money amount)."""


class CatalogError(DomainException):
    """The product catalog could not be loaded."""
