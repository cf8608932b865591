from typing import List, Optional

from llm_client.auth import BearerAuth
from llm_client.clients import ChatClient, ImagesClient, ModelsClient
from llm_client.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS, Settings
from llm_client.schemas.models import Model
from llm_client.transport import HttpxTransport, Transport


class LLMClient:
    """Entry point: wires settings, auth and transport into endpoint clients.

    The endpoint clients are stateless; creating several is cheap and they
    all share this client's transport.

    Example:
        client = LLMClient.from_env()
        chat = client.chat_client()
        response = chat.send_request(
            ChatRequestBuilder().message(Message.user("hello")).build()
        )
    """

    def __init__(
        self,
        api_key: str,
        organization: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[Transport] = None,
    ) -> None:
        self.settings = Settings(
            api_key=api_key,
            organization=organization,
            base_url=base_url,
            timeout_seconds=timeout_seconds,
        )
        self._auth = BearerAuth(api_key, organization)
        self._transport = transport or HttpxTransport(
            self.settings.base_url, self.settings.timeout_seconds
        )

    @classmethod
    def from_env(cls, transport: Optional[Transport] = None) -> "LLMClient":
        settings = Settings.from_env()
        return cls(
            api_key=settings.api_key,
            organization=settings.organization,
            base_url=settings.base_url,
            timeout_seconds=settings.timeout_seconds,
            transport=transport,
        )

    def chat_client(self) -> ChatClient:
        return ChatClient(self._transport, self._auth)

    def models_client(self) -> ModelsClient:
        return ModelsClient(self._transport, self._auth)

    def images_client(self) -> ImagesClient:
        return ImagesClient(self._transport, self._auth)

    def models(self) -> List[Model]:
        return self.models_client().get_models()

    def model(self, model: str) -> Model:
        return self.models_client().get_model(model)
