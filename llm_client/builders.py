"""
Request builders
----------------

Builders accumulate the optional parameters of one API call and produce an
immutable request with `build()`.

Every setter validates its argument on the spot and raises
`llm_client.errors.ValidationError` naming the field, its valid range and
the rejected value, so an invalid request never gets built, let alone sent.

List-valued parameters (messages, tools, stop sequences) use append
semantics. `build()` copies them into tuples; a list that was never
appended to is left out of the request entirely rather than sent empty.
"""

from typing import Dict, Iterable, List, Optional, Union

from llm_client.errors import ValidationError
from llm_client.schemas.chat import (
    TOOL_CHOICE_MODES,
    ChatRequest,
    Message,
    ResponseFormat,
    Tool,
    ToolChoice,
    ToolChoiceFunction,
    ToolChoiceMode,
)
from llm_client.schemas.images import IMAGE_RESPONSE_FORMATS, ImageRequest

DEFAULT_CHAT_MODEL = "gpt-3.5-turbo"
MAX_STOP_SEQUENCES = 4


def _check_int(field: str, value: int) -> None:
    # bool is an int subclass but never a valid count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field} must be an integer but it was {value!r}")


def _check_number(field: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{field} must be a number but it was {value!r}")


def _check_between(field: str, value: float, low: float, high: float) -> None:
    _check_number(field, value)
    if not (low <= value <= high):
        raise ValidationError(
            f"{field} must be between {low} and {high} but it was {value}"
        )


def _check_positive(field: str, value: int) -> None:
    _check_int(field, value)
    if value < 1:
        raise ValidationError(f"{field} must be a positive number but it was {value}")


class ChatRequestBuilder:
    """Accumulates chat completion parameters.

    Example:
        request = (
            ChatRequestBuilder()
            .message(Message.user("Who won the world series in 2020?"))
            .temperature(0.2)
            .build()
        )
    """

    def __init__(self, model: str = DEFAULT_CHAT_MODEL) -> None:
        self._model = model
        self._messages: List[Message] = []
        self._frequency_penalty: Optional[float] = None
        self._logit_bias: Optional[Dict[int, int]] = None
        self._logprobs: Optional[bool] = None
        self._top_logprobs: Optional[int] = None
        self._max_tokens: Optional[int] = None
        self._n: Optional[int] = None
        self._presence_penalty: Optional[float] = None
        self._response_format: Optional[ResponseFormat] = None
        self._seed: Optional[int] = None
        self._stop: List[str] = []
        self._temperature: Optional[float] = None
        self._top_p: Optional[float] = None
        self._tools: List[Tool] = []
        self._tool_choice: Optional[ToolChoice] = None
        self._user: Optional[str] = None

    def model(self, model: str) -> "ChatRequestBuilder":
        if not model or not model.strip():
            raise ValidationError("model must not be empty")
        self._model = model
        return self

    def message(self, message: Message) -> "ChatRequestBuilder":
        self._messages.append(message)
        return self

    def messages(self, messages: Iterable[Message]) -> "ChatRequestBuilder":
        self._messages.extend(messages)
        return self

    def frequency_penalty(self, frequency_penalty: float) -> "ChatRequestBuilder":
        """Penalize tokens by how often they already appear; -2.0 to 2.0."""
        _check_between("frequency_penalty", frequency_penalty, -2.0, 2.0)
        self._frequency_penalty = frequency_penalty
        return self

    def logit_bias(self, logit_bias: Dict[int, int]) -> "ChatRequestBuilder":
        """Map token ids to a bias added to their logits before sampling."""
        self._logit_bias = dict(logit_bias)
        return self

    def logprobs(self, logprobs: bool) -> "ChatRequestBuilder":
        self._logprobs = logprobs
        return self

    def top_logprobs(self, top_logprobs: int) -> "ChatRequestBuilder":
        """Number of most likely tokens to return per position, 0 to 5.

        Only honored by the server when `logprobs(True)` is also set.
        """
        _check_int("top_logprobs", top_logprobs)
        _check_between("top_logprobs", top_logprobs, 0, 5)
        self._top_logprobs = top_logprobs
        return self

    def max_tokens(self, max_tokens: int) -> "ChatRequestBuilder":
        _check_positive("max_tokens", max_tokens)
        self._max_tokens = max_tokens
        return self

    def n(self, n: int) -> "ChatRequestBuilder":
        """How many choices to generate. Responses only expose the first one."""
        _check_positive("n", n)
        self._n = n
        return self

    def presence_penalty(self, presence_penalty: float) -> "ChatRequestBuilder":
        """Penalize tokens that already appeared at all; -2.0 to 2.0."""
        _check_between("presence_penalty", presence_penalty, -2.0, 2.0)
        self._presence_penalty = presence_penalty
        return self

    def response_format(self, response_format: ResponseFormat) -> "ChatRequestBuilder":
        """Ask for plain text or JSON output.

        JSON mode still needs a system or user message instructing the model
        to produce JSON.
        """
        self._response_format = response_format
        return self

    def seed(self, seed: int) -> "ChatRequestBuilder":
        _check_int("seed", seed)
        self._seed = seed
        return self

    def stop(self, *stop: str) -> "ChatRequestBuilder":
        """Append stop sequences; at most four may be set in total.

        The limit is enforced at the offending call, and a rejected call
        adds none of its sequences.
        """
        total = len(self._stop) + len(stop)
        if total > MAX_STOP_SEQUENCES:
            raise ValidationError(
                f"Up to {MAX_STOP_SEQUENCES} stop sequences could be defined, "
                f"but it was {total}"
            )
        self._stop.extend(stop)
        return self

    def temperature(self, temperature: float) -> "ChatRequestBuilder":
        _check_between("temperature", temperature, 0.0, 2.0)
        self._temperature = temperature
        return self

    def top_p(self, top_p: float) -> "ChatRequestBuilder":
        _check_between("top_p", top_p, 0.0, 1.0)
        self._top_p = top_p
        return self

    def tool(self, tool: Tool) -> "ChatRequestBuilder":
        self._tools.append(tool)
        return self

    def tools(self, tools: Iterable[Tool]) -> "ChatRequestBuilder":
        self._tools.extend(tools)
        return self

    def tool_choice(self, tool_choice: Union[str, ToolChoice]) -> "ChatRequestBuilder":
        """Control which function, if any, the model calls.

        Accepts a mode name (``auto``, ``none``, ``required``) or a
        `ToolChoiceMode` / `ToolChoiceFunction` value.
        """
        if isinstance(tool_choice, str):
            if tool_choice not in TOOL_CHOICE_MODES:
                raise ValidationError(
                    f"tool_choice must be one of {', '.join(TOOL_CHOICE_MODES)} "
                    f"but it was {tool_choice!r}"
                )
            tool_choice = ToolChoiceMode(mode=tool_choice)
        self._tool_choice = tool_choice
        return self

    def tool_choice_function(self, name: str) -> "ChatRequestBuilder":
        self._tool_choice = ToolChoiceFunction(name=name)
        return self

    def user(self, user: str) -> "ChatRequestBuilder":
        """Opaque end-user identifier forwarded for abuse monitoring."""
        self._user = user
        return self

    def build(self) -> ChatRequest:
        return ChatRequest(
            model=self._model,
            messages=tuple(self._messages) or None,
            frequency_penalty=self._frequency_penalty,
            logit_bias=dict(self._logit_bias) if self._logit_bias is not None else None,
            logprobs=self._logprobs,
            top_logprobs=self._top_logprobs,
            max_tokens=self._max_tokens,
            n=self._n,
            presence_penalty=self._presence_penalty,
            response_format=self._response_format,
            seed=self._seed,
            stop=tuple(self._stop) or None,
            temperature=self._temperature,
            top_p=self._top_p,
            tools=tuple(self._tools) or None,
            tool_choice=self._tool_choice,
            user=self._user,
        )


class ImageRequestBuilder:
    """Accumulates image generation parameters for one prompt."""

    def __init__(self, prompt: str) -> None:
        if not prompt or not prompt.strip():
            raise ValidationError("prompt must not be empty")
        self._prompt = prompt
        self._model: Optional[str] = None
        self._n: Optional[int] = None
        self._quality: Optional[str] = None
        self._response_format: Optional[str] = None
        self._size: Optional[str] = None
        self._style: Optional[str] = None
        self._user: Optional[str] = None

    def model(self, model: str) -> "ImageRequestBuilder":
        self._model = model
        return self

    def n(self, n: int) -> "ImageRequestBuilder":
        _check_positive("n", n)
        self._n = n
        return self

    def quality(self, quality: str) -> "ImageRequestBuilder":
        self._quality = quality
        return self

    def response_format(self, response_format: str) -> "ImageRequestBuilder":
        if response_format not in IMAGE_RESPONSE_FORMATS:
            raise ValidationError(
                f"response_format must be one of {', '.join(IMAGE_RESPONSE_FORMATS)} "
                f"but it was {response_format!r}"
            )
        self._response_format = response_format
        return self

    def size(self, size: str) -> "ImageRequestBuilder":
        self._size = size
        return self

    def style(self, style: str) -> "ImageRequestBuilder":
        self._style = style
        return self

    def user(self, user: str) -> "ImageRequestBuilder":
        self._user = user
        return self

    def build(self) -> ImageRequest:
        return ImageRequest(
            prompt=self._prompt,
            model=self._model,
            n=self._n,
            quality=self._quality,
            response_format=self._response_format,
            size=self._size,
            style=self._style,
            user=self._user,
        )
