"""
Wire codec
----------

Encoding turns frozen request values into JSON payloads, and decoding
turns response bodies back into typed values.

Encoding rules:
- Absent optional fields are omitted; the payload never carries nulls.
- `tool_choice` is a bare string for a mode (``"auto"``) and a nested
  object for a specific function, chosen by the value's ``kind`` tag.
- `logit_bias` keys are token ids, sent as JSON object keys (strings).

Decoding is two-stage: `decode_error` recognizes an ``{"error": ...}``
envelope first and returns `None` for anything else. The success
decoders run only after that and raise `MalformedResponse` when the
payload does not have the expected shape.
"""

import json
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from llm_client.errors import EncodingFailure, MalformedResponse
from llm_client.schemas.chat import (
    ChatRequest,
    ChatResponse,
    Message,
    ToolChoice,
    Usage,
)
from llm_client.schemas.errors import ErrorDetail
from llm_client.schemas.images import ImageRequest, Images
from llm_client.schemas.models import Model

# Scalar request fields sent under their own name when present.
_CHAT_SCALAR_FIELDS = (
    "frequency_penalty",
    "logprobs",
    "top_logprobs",
    "max_tokens",
    "n",
    "presence_penalty",
    "seed",
    "temperature",
    "top_p",
    "user",
)

_IMAGE_FIELDS = (
    "model",
    "n",
    "quality",
    "response_format",
    "size",
    "style",
    "user",
)


def encode_tool_choice(tool_choice: ToolChoice) -> Any:
    if tool_choice.kind == "mode":
        return tool_choice.mode
    if tool_choice.kind == "function":
        return {"type": "function", "function": {"name": tool_choice.name}}
    raise EncodingFailure(f"Unknown tool_choice kind: {tool_choice.kind!r}")


def encode_chat_request(request: ChatRequest) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"model": request.model}
    if request.messages is not None:
        payload["messages"] = [
            {"role": m.role, "content": m.content} for m in request.messages
        ]
    for field in _CHAT_SCALAR_FIELDS:
        value = getattr(request, field)
        if value is not None:
            payload[field] = value
    if request.logit_bias is not None:
        payload["logit_bias"] = {
            str(token): bias for token, bias in request.logit_bias.items()
        }
    if request.response_format is not None:
        payload["response_format"] = {"type": request.response_format.type}
    if request.stop is not None:
        payload["stop"] = list(request.stop)
    if request.tools is not None:
        payload["tools"] = [
            {
                "type": tool.type,
                "function": tool.function.model_dump(exclude_none=True),
            }
            for tool in request.tools
        ]
    if request.tool_choice is not None:
        payload["tool_choice"] = encode_tool_choice(request.tool_choice)
    return payload


def encode_image_request(request: ImageRequest) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"prompt": request.prompt}
    for field in _IMAGE_FIELDS:
        value = getattr(request, field)
        if value is not None:
            payload[field] = value
    return payload


def dump_payload(payload: Dict[str, Any]) -> bytes:
    try:
        return json.dumps(payload, separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise EncodingFailure(f"Request payload is not JSON serializable: {exc}") from exc


_JSON_ERRORS = (UnicodeDecodeError, json.JSONDecodeError)


def _load_json(body: bytes) -> Any:
    return json.loads(body.decode("utf-8"))


def parse_body(body: bytes) -> Any:
    """Parse a response body as JSON, raising `MalformedResponse` if it is not."""
    try:
        return _load_json(body)
    except _JSON_ERRORS as exc:
        raise MalformedResponse(f"Response body is not valid JSON: {exc}") from exc


def decode_error(payload: Any) -> Optional[ErrorDetail]:
    """Return the server error carried by an error envelope, else None.

    Besides the standard ``{"error": {"message", "type", "code"}}`` shape,
    some compatible servers send ``{"error": "text"}``; both are accepted.
    """
    if not isinstance(payload, dict):
        return None
    err = payload.get("error")
    if err is None:
        return None
    if isinstance(err, dict):
        code = err.get("code")
        param = err.get("param")
        return ErrorDetail(
            message=str(err.get("message") or ""),
            type=str(err["type"]) if err.get("type") is not None else None,
            code=str(code) if code is not None else None,
            param=str(param) if param is not None else None,
        )
    return ErrorDetail(message=str(err))


def _validate(model_cls: type, data: Any, what: str) -> Any:
    try:
        return model_cls.model_validate(data)
    except PydanticValidationError as exc:
        raise MalformedResponse(f"Malformed {what}: {exc}") from exc


def _require_object(payload: Any, what: str) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        raise MalformedResponse(
            f"Expected {what} to be a JSON object but got {type(payload).__name__}"
        )
    return payload


def decode_chat_response(payload: Any) -> ChatResponse:
    data = _require_object(payload, "chat response")

    # Only the first choice is read: requests ask for a single candidate.
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        raise MalformedResponse("Chat response has no choices")
    choice = _require_object(choices[0], "choice")
    message_raw = _require_object(choice.get("message"), "choice message")
    if "role" not in message_raw or "content" not in message_raw:
        raise MalformedResponse("Choice message must contain role and content")
    message = _validate(
        Message,
        {
            "role": message_raw["role"],
            # Tool-call replies carry content: null
            "content": message_raw["content"] or "",
        },
        "choice message",
    )

    usage: Optional[Usage] = None
    if data.get("usage") is not None:
        usage = _validate(Usage, data["usage"], "usage")

    return _validate(
        ChatResponse,
        {
            "id": data.get("id"),
            "created": data.get("created"),
            "model": data.get("model"),
            "message": message,
            "finish_reason": choice.get("finish_reason"),
            "usage": usage,
        },
        "chat response",
    )


def decode_model(payload: Any) -> Model:
    return _validate(Model, _require_object(payload, "model"), "model")


def decode_models(payload: Any) -> List[Model]:
    """Decode a model listing.

    All or nothing: a single malformed entry fails the whole listing
    instead of returning a partial list.
    """
    data = _require_object(payload, "model list").get("data")
    if not isinstance(data, list):
        raise MalformedResponse("Model list response has no data array")
    return [decode_model(item) for item in data]


def decode_images(payload: Any) -> Images:
    return _validate(Images, _require_object(payload, "images"), "images")


def decode_failure_body(status_code: int, body: bytes) -> ErrorDetail:
    """Build the error for a non-success reply.

    Uses the error envelope when the body carries one, otherwise the raw
    body text (or the bare status when the body is empty).
    """
    try:
        payload = _load_json(body)
    except _JSON_ERRORS:
        payload = None
    error = decode_error(payload)
    if error is not None:
        return error
    text = body.decode("utf-8", errors="replace").strip()
    return ErrorDetail(message=text or f"HTTP {status_code}")
