"""
Shared error handling package.

Translates link bundle errors into HTTP status codes and JSON bodies
in one place, so routes never build error responses themselves.
"""
