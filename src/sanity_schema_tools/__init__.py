"""Sanity schema introspection and content discovery tools."""
