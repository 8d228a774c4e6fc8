"""Package metadata and naming constants."""

PACKAGE_NAME = "pattern-catalog"
PACKAGE_NAME_PYTHON = PACKAGE_NAME.replace("-", "_")
__version__ = "1.0.0"
VERSION = __version__
DESCRIPTION = "Classic object-oriented design patterns, each applied to a small toy domain"
