"""
Server core package.

Holds the settings model and server-wide constants.
"""
