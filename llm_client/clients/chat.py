from llm_client.clients.base import BaseClient
from llm_client.codec import decode_chat_response, dump_payload, encode_chat_request
from llm_client.schemas.chat import ChatRequest, ChatResponse


class ChatClient(BaseClient):
    """Chat completions: POST chat/completions."""

    endpoint = "chat"
    path = "chat/completions"

    def send_request(self, request: ChatRequest) -> ChatResponse:
        body = dump_payload(encode_chat_request(request))
        return self._execute("send_request", "POST", self.path, decode_chat_response, body)

    async def send_request_async(self, request: ChatRequest) -> ChatResponse:
        body = dump_payload(encode_chat_request(request))
        return await self._aexecute(
            "send_request", "POST", self.path, decode_chat_response, body
        )
