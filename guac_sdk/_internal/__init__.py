"""Internal modules for Guacamole SDK.

WARNING: These modules are not intended for direct use in application code.

Modules:
    dispatcher - Authenticated request dispatch and error translation
    http - Shared HTTP client configuration
    redaction - Secret redaction for debug output
"""
