"""Package metadata and naming constants."""

PACKAGE_NAME = "patternkit"
__version__ = "1.0.0"
VERSION = __version__
DESCRIPTION = "Runnable catalogue of classic object-oriented design patterns"
