"""Shared utilities — logging setup and other cross-cutting concerns.

Rules
-----
* No business logic.
* Importable by any layer.
"""
