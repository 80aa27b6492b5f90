"""
Infrastructure layer package.

Concrete adapters for the domain ports: the SQL bundle store, the
request-header identity resolver and the JSON Patch applier.
"""
