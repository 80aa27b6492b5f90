"""
Application layer package.

One use case class per operation, each with a single async ``execute``.
Depends on domain ports, never on infrastructure.
"""
