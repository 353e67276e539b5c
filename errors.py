# errors.py holds the request-scoped failures and their HTTP status codes.

from typing import Optional

from fastapi import status


class ProxyError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Internal Server Error"

    def __init__(self, detail: Optional[str] = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class MethodNotAllowed(ProxyError):
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED
    detail = "Method Not Allowed"


class Unauthorized(ProxyError):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Unauthorized"


class InvalidPayload(ProxyError):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Invalid JSON"


class MissingField(ProxyError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Missing field: {name}")


class UpstreamError(ProxyError):
    """GitHub answered with a non-2xx status."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, upstream_status: int, body: str):
        self.upstream_status = upstream_status
        self.body = body
        super().__init__(f"GitHub API error: {upstream_status}\n{body}")


class UpstreamUnreachable(ProxyError):
    """The request to GitHub failed before a response arrived."""
    status_code = status.HTTP_502_BAD_GATEWAY

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"GitHub API unreachable: {reason}")
