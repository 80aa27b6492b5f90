"""
Infrastructure adapters for the links bounded context.

Each adapter implements a port from app.domain.links.ports.
"""
