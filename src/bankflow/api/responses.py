"""
Outcome -> HTTP response mapping shared by every router.

Success returns the payload with the outcome's status. The other kinds
return the payload if one is attached, else the outcome's message, else the
route's default message. String bodies are wrapped as {"message": ...}.
"""

from typing import Any, Callable, Dict, List, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.requests import Request

from bankflow.logging_config import get_logger
from bankflow.workflow.errors import WorkflowDefect
from bankflow.workflow.outcome import Outcome, OutcomeKind

logger = get_logger("bankflow.api.responses")


def _body(value: Any, render: Optional[Callable[[Any], Any]]) -> Any:
    if isinstance(value, str):
        return {"message": value}
    if render is not None:
        return render(value)
    return jsonable_encoder(value)


def _resolve_body(
    outcome: Outcome, fallback_message: str, render: Optional[Callable[[Any], Any]]
) -> Any:
    if outcome.payload is not None:
        return _body(outcome.payload, render)
    return _body(outcome.message if outcome.message is not None else fallback_message, render)


def outcome_response(
    outcome: Outcome,
    empty_message: str,
    invalid_message: str,
    failure_message: str,
    render: Optional[Callable[[Any], Any]] = None,
) -> JSONResponse:
    if outcome.kind is OutcomeKind.SUCCESS:
        content = _body(outcome.payload, render)
    elif outcome.kind is OutcomeKind.INVALID_INPUT:
        content = _resolve_body(outcome, invalid_message, render)
    elif outcome.kind is OutcomeKind.EMPTY_RESULT:
        content = _resolve_body(outcome, empty_message, render)
    elif outcome.kind is OutcomeKind.FAILURE:
        content = _resolve_body(outcome, failure_message, render)
    else:
        raise WorkflowDefect(f"Unhandled outcome kind: {outcome.kind!r}")
    return JSONResponse(content=content, status_code=outcome.status)


def field_errors(exc: RequestValidationError) -> Dict[str, str]:
    """
    Collapse pydantic errors into a {field: message} map; nested fields are
    dotted (source_account.sort_code).
    """
    errors: Dict[str, str] = {}
    for error in exc.errors():
        loc: List[Any] = [part for part in error.get("loc", ()) if part != "body"]
        field = ".".join(str(part) for part in loc) or "body"
        errors.setdefault(field, error.get("msg", "Invalid value"))
    return errors


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = field_errors(exc)
    logger.info("Structural validation failed %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(content=errors, status_code=400)
