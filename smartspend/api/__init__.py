"""
API layer for the SmartSpend backend.

Exposes the HTTP endpoints (auth, transactions, health) and the exception
handlers that map domain errors to responses.
"""
