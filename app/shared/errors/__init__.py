"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that domain and parsing errors
are consistently translated into API responses.
"""
