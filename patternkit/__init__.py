"""patternkit - Root Package.

A catalogue of classic object-oriented design patterns. Every pattern is a
small, self-contained demonstration with a ``main`` entry point that prints
what happens, grouped by category:

Key Components:
    - patterns: the demonstrations (behavioural, creational, structural)
    - catalog: registry of demonstrations by tag
    - domain: exceptions, events and the table-driven state machine
    - infrastructure: capability registry, logging, events, singletons
    - config: configuration schemas and loading
    - cli: the ``patternkit`` command

Usage:
    >>> patternkit list
    >>> patternkit run state
    >>> python -m patternkit.patterns.structural.decorator
"""

from ._package import PACKAGE_NAME, __version__

__package_name__ = PACKAGE_NAME
