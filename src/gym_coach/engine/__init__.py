"""Program generation and adaptation engine.

Every function in this package is pure: inputs are passed in, nothing is
read from or written to the database.
"""
