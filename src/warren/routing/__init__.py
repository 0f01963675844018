"""Routing — a tree of routers and leaf routes.

Routers nest under a path prefix and a namespace. Resolution strips one
prefix per level; reverse lookup consumes one namespace per level.
"""
