"""
Feature modules for the Hubber backend.

Each module keeps its own models, exceptions, interface (a Protocol), a
service and, where it owns a table, a repository. Modules with endpoints
also carry a routes.py that the app factory mounts.

Route handlers depend on the interfaces; the concrete services are wired
in api/dependencies.py.
"""
