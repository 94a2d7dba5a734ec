"""Routing: exact (method, path) dispatch.

Routes are registered during setup and built into an immutable
dispatch table when the app freezes.
"""
