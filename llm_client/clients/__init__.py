from llm_client.clients.base import BaseClient
from llm_client.clients.chat import ChatClient
from llm_client.clients.images import ImagesClient
from llm_client.clients.models import ModelsClient

__all__ = ["BaseClient", "ChatClient", "ImagesClient", "ModelsClient"]
