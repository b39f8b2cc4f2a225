"""Core app package.

Cross-cutting HTTP plumbing shared by the domain apps: the uniform response
envelope, the DRF exception handler that produces it, envelope pagination
and the health check endpoint.
"""
