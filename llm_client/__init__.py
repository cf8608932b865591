from llm_client.builders import ChatRequestBuilder, ImageRequestBuilder
from llm_client.client import LLMClient
from llm_client.errors import (
    ApiError,
    ClientError,
    EncodingFailure,
    MalformedResponse,
    TransportFailure,
    ValidationError,
)
from llm_client.schemas.chat import (
    ChatRequest,
    ChatResponse,
    FunctionDef,
    Message,
    ResponseFormat,
    Tool,
    ToolChoiceFunction,
    ToolChoiceMode,
    Usage,
)
from llm_client.schemas.errors import ErrorDetail
from llm_client.schemas.images import Image, ImageRequest, Images
from llm_client.schemas.models import Model
from llm_client.transport import HttpxTransport, Transport, TransportResponse

__all__ = [
    "ApiError",
    "ChatRequest",
    "ChatRequestBuilder",
    "ChatResponse",
    "ClientError",
    "EncodingFailure",
    "ErrorDetail",
    "FunctionDef",
    "HttpxTransport",
    "Image",
    "ImageRequest",
    "ImageRequestBuilder",
    "Images",
    "LLMClient",
    "MalformedResponse",
    "Message",
    "Model",
    "ResponseFormat",
    "Tool",
    "ToolChoiceFunction",
    "ToolChoiceMode",
    "Transport",
    "TransportFailure",
    "TransportResponse",
    "Usage",
    "ValidationError",
]
