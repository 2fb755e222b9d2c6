"""restgate - centralized error translation for REST APIs.

restgate turns exceptions raised while handling a request into HTTP
responses. A fixed, ordered rule table maps each failure type to a status
code, a set of response headers and a body, and a pure ASGI middleware
wires the table into a FastAPI application.

Key Features:
- Most-specific-first matching with a guaranteed catch-all rule
- Domain error-code registry surfaced through X-Error / X-Error-Code headers
- Request id propagation on every response
- Plain-text or JSON error bodies

Version: 1.0.0
"""

__version__ = "1.0.0"
