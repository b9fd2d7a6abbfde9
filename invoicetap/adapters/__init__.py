"""External adapters for invoicetap.

Adapter Organization:

- directory/: Implementations of AccountDirectoryPort (in-memory)
"""
