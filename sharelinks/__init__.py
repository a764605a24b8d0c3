"""Read-only share links for notes.

Mint unguessable share tokens for documents, resolve them to a read-only
projection of the document, and revoke them.
"""

__version__ = '0.1.0'
