"""Sites — the tenant data the route compiler reads.

A site owns branches (deployable content variants), custom domains,
response headers, and an optional password. All entities are frozen
dataclasses; the compiler never mutates them.
"""
