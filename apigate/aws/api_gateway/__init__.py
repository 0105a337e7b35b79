from .compiler import CompilationResult, compile_api_gateway_events
from .config import HttpEvent, HttpEventDict, parse_http_event
from .constants import HTTPMethod

# Only export public API for users
__all__ = [
    "CompilationResult",
    "HTTPMethod",
    "HttpEvent",
    "HttpEventDict",
    "compile_api_gateway_events",
    "parse_http_event",
]
