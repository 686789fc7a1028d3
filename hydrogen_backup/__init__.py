"""Thin wrapper around arangodump/arangorestore for Hydrogen development servers."""

__version__ = "0.1.0"
