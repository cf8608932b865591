from llm_client.clients.base import BaseClient
from llm_client.codec import decode_images, dump_payload, encode_image_request
from llm_client.schemas.images import ImageRequest, Images


class ImagesClient(BaseClient):
    """Image generation: POST images/generations."""

    endpoint = "images"
    path = "images/generations"

    def create_images(self, request: ImageRequest) -> Images:
        body = dump_payload(encode_image_request(request))
        return self._execute("create_images", "POST", self.path, decode_images, body)

    async def create_images_async(self, request: ImageRequest) -> Images:
        body = dump_payload(encode_image_request(request))
        return await self._aexecute(
            "create_images", "POST", self.path, decode_images, body
        )
