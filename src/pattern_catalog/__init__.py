"""Pattern Catalog - Root Package.

A collection of classic object-oriented design patterns, each applied to a
small toy domain (dialogs, coffee machines, chat users, currencies, race
cars, contracts, ...). Every example is independent of the others.

Key Components:
    - patterns: the examples, grouped into creational, structural and behavioral
    - domain: shared exceptions and the immutable value-object base
    - infrastructure: logging, singleton and pattern registries, error handling
    - config: configuration schema and manager
    - cli: ``pattern-catalog list | show | run``
"""

from ._package import PACKAGE_NAME, __version__

__package_name__ = PACKAGE_NAME

__all__ = ["__version__", "__package_name__"]
