import base64
from types import SimpleNamespace

import pytest

from memora_hanzi.clients import ImageGenerationClient
from memora_hanzi.errors import ConfigurationError, EndpointError


class FakeModels:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []

    async def generate_images(self, model, prompt, config):
        self.requests.append({"model": model, "prompt": prompt, "config": config})
        if self.error:
            raise self.error
        return self.response


def fake_genai(response=None, error=None):
    models = FakeModels(response, error)
    return SimpleNamespace(aio=SimpleNamespace(models=models)), models


def image_response(image_bytes):
    return SimpleNamespace(generated_images=[SimpleNamespace(image=SimpleNamespace(image_bytes=image_bytes))])


async def test_returns_jpeg_data_uri():
    client, models = fake_genai(image_response(b"\xff\xd8\xff\xe0jpeg"))
    images = ImageGenerationClient(api_key="test-key", model_name="imagen-test", client=client)

    uri = await images.generate_image("a cartoon")

    assert uri == "data:image/jpeg;base64," + base64.b64encode(b"\xff\xd8\xff\xe0jpeg").decode("ascii")
    request = models.requests[0]
    assert request["model"] == "imagen-test"
    assert request["prompt"] == "a cartoon"
    assert request["config"].number_of_images == 1
    assert request["config"].output_mime_type == "image/jpeg"


async def test_zero_images_is_an_error():
    client, _ = fake_genai(SimpleNamespace(generated_images=[]))
    images = ImageGenerationClient(api_key="test-key", client=client)

    with pytest.raises(EndpointError, match="No image generated"):
        await images.generate_image("a cartoon")


async def test_missing_image_bytes_is_an_error():
    client, _ = fake_genai(image_response(None))
    images = ImageGenerationClient(api_key="test-key", client=client)

    with pytest.raises(EndpointError, match="image data missing"):
        await images.generate_image("a cartoon")


async def test_transport_failure_raises_endpoint_error():
    client, _ = fake_genai(error=RuntimeError("503 Service Unavailable"))
    images = ImageGenerationClient(api_key="test-key", client=client)

    with pytest.raises(EndpointError, match="503 Service Unavailable"):
        await images.generate_image("a cartoon")


async def test_missing_api_key_fails_before_any_call():
    client, models = fake_genai(image_response(b"jpeg"))
    images = ImageGenerationClient(api_key=None, client=client)

    with pytest.raises(ConfigurationError, match="not initialized"):
        await images.generate_image("a cartoon")

    assert models.requests == []
