from typing import Annotated, Any, Dict, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["system", "user", "assistant"]
ToolChoiceModeName = Literal["auto", "none", "required"]

TOOL_CHOICE_MODES = ("auto", "none", "required")


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Role
    content: str

    @classmethod
    def system(cls, content: str) -> "Message":
        return cls(role="system", content=content)

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(role="user", content=content)

    @classmethod
    def assistant(cls, content: str) -> "Message":
        return cls(role="assistant", content=content)


class FunctionDef(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: Optional[str] = None
    # JSON Schema describing the function arguments
    parameters: Optional[Dict[str, Any]] = None


class Tool(BaseModel):
    """A function the model may choose to call."""

    model_config = ConfigDict(frozen=True)

    type: Literal["function"] = "function"
    function: FunctionDef

    @classmethod
    def function_tool(
        cls,
        name: str,
        description: Optional[str] = None,
        parameters: Optional[Dict[str, Any]] = None,
    ) -> "Tool":
        return cls(
            function=FunctionDef(
                name=name, description=description, parameters=parameters
            )
        )


class ToolChoiceMode(BaseModel):
    """Let the model decide (``auto``), forbid calls (``none``) or force one."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["mode"] = "mode"
    mode: ToolChoiceModeName


class ToolChoiceFunction(BaseModel):
    """Force the model to call the named function."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["function"] = "function"
    name: str


ToolChoice = Annotated[
    Union[ToolChoiceMode, ToolChoiceFunction], Field(discriminator="kind")
]


class ResponseFormat(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["text", "json_object"]

    @classmethod
    def text(cls) -> "ResponseFormat":
        return cls(type="text")

    @classmethod
    def json(cls) -> "ResponseFormat":
        return cls(type="json_object")


class ChatRequest(BaseModel):
    """Immutable chat completion request.

    Every optional field is ``None`` when absent; list-valued fields are
    either ``None`` or a non-empty tuple. Use ``ChatRequestBuilder`` to
    assemble one with per-setter validation.
    """

    model_config = ConfigDict(frozen=True)

    model: str
    messages: Optional[Tuple[Message, ...]] = None
    frequency_penalty: Optional[float] = Field(default=None, ge=-2.0, le=2.0)
    logit_bias: Optional[Dict[int, int]] = None
    logprobs: Optional[bool] = None
    top_logprobs: Optional[int] = Field(default=None, ge=0, le=5)
    max_tokens: Optional[int] = Field(default=None, ge=1)
    n: Optional[int] = Field(default=None, ge=1)
    presence_penalty: Optional[float] = Field(default=None, ge=-2.0, le=2.0)
    response_format: Optional[ResponseFormat] = None
    seed: Optional[int] = None
    stop: Optional[Tuple[str, ...]] = Field(default=None, max_length=4)
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    top_p: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    tools: Optional[Tuple[Tool, ...]] = None
    tool_choice: Optional[ToolChoice] = None
    user: Optional[str] = None


class Usage(BaseModel):
    model_config = ConfigDict(frozen=True)

    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class ChatResponse(BaseModel):
    """Decoded chat completion.

    Only the first choice is kept: requests are expected to ask for a single
    candidate, so ``message`` is the answer even when the server returned more.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    created: int
    model: str
    message: Message
    finish_reason: Optional[str] = None
    usage: Optional[Usage] = None
