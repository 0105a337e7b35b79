from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, NotRequired, TypedDict, final

from apigate.aws.api_gateway.authorizer import (
    AuthorizerReference,
    parse_authorizer,
    resolve_authorizer_name,
)
from apigate.aws.api_gateway.constants import HTTPMethod
from apigate.exceptions import InvalidEventShape

_SHORTHAND_PARTS = 2


class HttpEventDict(TypedDict):
    method: str
    path: str
    authorizer: NotRequired[str | dict[str, str] | None]
    private: NotRequired[bool]


@final
@dataclass(frozen=True)
class HttpEvent:
    function_name: str
    method: str
    path: str
    authorizer: AuthorizerReference | None = None
    private: bool = False

    def __post_init__(self) -> None:
        self._validate_method()
        self._validate_path()

    def _validate_method(self) -> None:
        if not isinstance(self.method, str) or not self.method:
            raise InvalidEventShape(
                self.function_name,
                f"HTTP event of function {self.function_name} must declare a method",
            )
        valid_methods = {m.value for m in HTTPMethod}
        if self.method.upper() not in valid_methods:
            raise InvalidEventShape(
                self.function_name,
                f"Invalid HTTP method '{self.method}' in function {self.function_name}",
            )

    def _validate_path(self) -> None:
        if not isinstance(self.path, str) or not self.path:
            raise InvalidEventShape(
                self.function_name,
                f"HTTP event of function {self.function_name} must declare a path",
            )

    @property
    def http_method(self) -> str:
        return self.method.upper()

    @property
    def authorizer_name(self) -> str | None:
        return resolve_authorizer_name(self.authorizer)


def parse_http_event(function_name: str, http: Any) -> HttpEvent:
    """Parse the value of an `http` event into an HttpEvent.

    Accepts either the object form ({"method": "get", "path": "users/list", ...})
    or the shorthand string form ("get users/list").
    """
    if isinstance(http, Mapping):
        return HttpEvent(
            function_name,
            http.get("method"),
            http.get("path"),
            authorizer=parse_authorizer(http.get("authorizer"), function_name),
            private=bool(http.get("private", False)),
        )

    if isinstance(http, str):
        parts = http.split()
        if len(parts) != _SHORTHAND_PARTS:
            raise InvalidEventShape(
                function_name,
                f"HTTP event of function {function_name} must be written as "
                f"'<method> <path>', got '{http}'",
            )
        return HttpEvent(function_name, parts[0], parts[1])

    raise InvalidEventShape(
        function_name,
        f"HTTP event of function {function_name} is not an object nor a string. "
        "The correct syntax is: http: get users/list "
        'OR an object with "path" and "method" properties.',
    )
