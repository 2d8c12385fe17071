"""HTTP middleware: timeout, request ID, correlation ID, security headers.

Applied in create_app; order matters (last added = outermost).
"""

from chatsearch.middleware.correlation_id import CorrelationIDMiddleware
from chatsearch.middleware.request_id import RequestIDMiddleware
from chatsearch.middleware.security_headers import SecurityHeadersMiddleware
from chatsearch.middleware.timeout import TimeoutMiddleware

__all__ = [
    "CorrelationIDMiddleware",
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
    "TimeoutMiddleware",
]
