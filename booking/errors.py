"""
Error types and plain-text error responses.
"""

from flask import Response


class StorageError(Exception):
    """A database operation failed; the message is safe to show the client."""


def error_response(message, status=500):
    """Plain-text error body, the way every handler reports failures."""
    return Response(message, status=status, mimetype='text/plain')
