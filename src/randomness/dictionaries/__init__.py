"""Bundled word lists, read through :mod:`importlib.resources`."""
