"""Top-level package for Django configuration.

This package contains settings modules for different environments and the
entry points for WSGI and ASGI.
"""
