"""Caddy JSON structures — routes, handlers, and the apps that hold them.

Everything here is passive data following Caddy's documented JSON schema
(https://caddyserver.com/docs/json/). Nothing talks to a running Caddy.
"""
