"""validate_request: gate a handler behind a request schema."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, Concatenate, ParamSpec

from boardgate.services.validation import validate
from boardgate.web.request import Request
from boardgate.web.responses import ServiceResponse, from_result

_P = ParamSpec("_P")

Handler = Callable[Concatenate[Request, _P], ServiceResponse]


def validate_request(
    schema: Any,
    *,
    log_violations: bool = True,
) -> Callable[[Handler[_P]], Handler[_P]]:
    """Decorate a handler so it only ever sees requests *schema* accepts.

    A rejected request gets a 400 ServiceResponse and the handler is not
    called. An accepted one reaches the handler as a new Request carrying
    the normalized sections; the caller's object is left as it was.

    Usage::

        @validate_request(CreateCommentRequest)
        def create_comment(request: Request) -> ServiceResponse:
            ...
    """

    def decorator(handler: Handler[_P]) -> Handler[_P]:
        @functools.wraps(handler)
        def wrapper(request: Request, *args: _P.args, **kwargs: _P.kwargs) -> ServiceResponse:
            result = validate(schema, request.as_input(), log_violations=log_violations)
            if not result.ok:
                return from_result(result)
            return handler(request.with_normalized(result.data), *args, **kwargs)

        return wrapper

    return decorator
