"""
HTTP interface for link bundles: router, schemas and dependency wiring.
"""
