"""Internal modules for the MLflow SDK.

These are not intended for direct use in application code.

Modules:
    dispatch - Request dispatcher and query-parameter flattening
    http - Shared HTTP client configuration
"""
