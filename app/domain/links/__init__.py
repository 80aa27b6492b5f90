"""
Links bounded context: domain layer.

This module contains all domain logic for link bundles:
- Bundle and link entities
- Vanity URL assignment and validation
- Ownership rules
- Ports for persistence and caller identity
"""
