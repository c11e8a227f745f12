"""Routing — ordered entry registry, path matching, and dispatch.

Entries are appended during setup and walked in registration order for
every request.
"""
