from __future__ import annotations

from django.utils.deprecation import MiddlewareMixin


class ContentSecurityPolicyMiddleware(MiddlewareMixin):
    """Add a basic Content-Security-Policy header.

    The notices page is plain server-rendered HTML with one external
    stylesheet, so scripts and inline styles are refused outright.
    """

    policy = (
        "default-src 'self'; "
        "img-src 'self' data:; "
        "script-src 'self'; "
        "style-src 'self'; "
        "connect-src 'self'; "
        "form-action 'self'; "
        "frame-ancestors 'none'"
    )

    def process_response(self, request, response):  # noqa: D401
        response.setdefault("Content-Security-Policy", self.policy)
        return response
