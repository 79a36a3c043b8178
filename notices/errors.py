"""Failure taxonomy for the notices feed.

Errors are carried as values from the API client back to the request
handler (see `client.FetchResult`); they are only raised inside the
client while classifying a failure.
"""
from __future__ import annotations


class NoticesError(Exception):
    """Base class for anything that stops the notices page from rendering."""


class TransportError(NoticesError):
    """The HTTP call itself failed (connection, timeout, non-2xx status)."""


class DecodeError(NoticesError):
    """The response body was not a JSON object."""


class GenericError(NoticesError):
    """Any other unexpected fault while building the page."""
