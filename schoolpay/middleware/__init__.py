"""HTTP middleware: request id / access log and security headers.

Applied in schoolpay.main; order matters (last added = outermost).
"""

from schoolpay.middleware.request_id import RequestIDMiddleware
from schoolpay.middleware.security_headers import SecurityHeadersMiddleware

__all__ = ["RequestIDMiddleware", "SecurityHeadersMiddleware"]
