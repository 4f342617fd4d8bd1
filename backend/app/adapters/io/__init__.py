"""I/O adapter package.

This package contains backend boundary code for:
  - reading the process environment into validated server settings
  - locating the storage directory uploads are written to and served from

Keep this package free of request handling; it should remain an interface layer.
"""
