"""
Domain layer package.

Entities, ownership and vanity URL rules, errors, and the port
interfaces the rest of the system implements. No framework imports,
no IO.
"""
