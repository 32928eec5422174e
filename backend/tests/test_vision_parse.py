"""
Tests for the OpenAI vision client wrapper
"""

import pytest
from unittest.mock import MagicMock
from openai import OpenAIError

from services.error_types import ConfigurationError
from services.vision_config import VisionConfig, ModelConfig
from services.vision_parse import VisionParser


def _response(content):
    response = MagicMock()
    response.choices = [MagicMock()]
    response.choices[0].message.content = content
    return response


@pytest.fixture
def config():
    return VisionConfig(
        openai_api_key="test-key",
        exterior_model=ModelConfig(name="exterior-model", max_tokens=1024, default_temperature=0.1, image_detail="low"),
        equipment_model=ModelConfig(name="equipment-model", max_tokens=2048, image_detail="high"),
        max_equipment_images=2,
    )


@pytest.fixture
def client():
    client = MagicMock()
    client.chat.completions.create.return_value = _response('{"stories": 2}')
    return client


class TestVisionParser:

    def test_requires_api_key(self):
        with pytest.raises(ConfigurationError):
            VisionParser(config=VisionConfig(openai_api_key="  "))

    def test_exterior_request(self, config, client):
        parser = VisionParser(config=config, client=client)

        content = parser.analyze_exterior("https://img/front.jpg", "12 Oak St")

        assert content == '{"stories": 2}'
        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "exterior-model"
        assert kwargs["temperature"] == 0.1
        assert kwargs["messages"][0]["role"] == "system"
        user_content = kwargs["messages"][1]["content"]
        assert "12 Oak St" in user_content[0]["text"]
        assert user_content[1] == {
            "type": "image_url",
            "image_url": {"url": "https://img/front.jpg", "detail": "low"},
        }

    def test_equipment_photos_capped(self, config, client):
        parser = VisionParser(config=config, client=client)

        parser.analyze_equipment(["a.jpg", "b.jpg", "c.jpg"])

        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "equipment-model"
        # Default temperature is left to the API
        assert "temperature" not in kwargs
        images = kwargs["messages"][1]["content"][1:]
        assert [block["image_url"]["url"] for block in images] == ["a.jpg", "b.jpg"]

    def test_no_equipment_photos(self, config, client):
        parser = VisionParser(config=config, client=client)

        assert parser.analyze_equipment([]) is None
        client.chat.completions.create.assert_not_called()

    def test_api_error_returns_none(self, config, client):
        client.chat.completions.create.side_effect = OpenAIError("rate limited")
        parser = VisionParser(config=config, client=client)

        assert parser.analyze_exterior("https://img/front.jpg") is None

    def test_empty_choices_returns_none(self, config, client):
        client.chat.completions.create.return_value = MagicMock(choices=[])
        parser = VisionParser(config=config, client=client)

        assert parser.analyze_exterior("https://img/front.jpg") is None
