from typing import List
from urllib.parse import quote

from llm_client.clients.base import BaseClient
from llm_client.codec import decode_model, decode_models
from llm_client.schemas.models import Model


class ModelsClient(BaseClient):
    """Model listing and lookup. Results are fetched on every call, never cached."""

    endpoint = "models"
    path = "models"

    def _model_path(self, model: str) -> str:
        return f"{self.path}/{quote(model, safe='')}"

    def get_models(self) -> List[Model]:
        return self._execute("get_models", "GET", self.path, decode_models)

    async def get_models_async(self) -> List[Model]:
        return await self._aexecute("get_models", "GET", self.path, decode_models)

    def get_model(self, model: str) -> Model:
        return self._execute("get_model", "GET", self._model_path(model), decode_model)

    async def get_model_async(self, model: str) -> Model:
        return await self._aexecute(
            "get_model", "GET", self._model_path(model), decode_model
        )
