"""
SmartSpend API root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain logic, use cases and the MongoDB infrastructure.
"""
