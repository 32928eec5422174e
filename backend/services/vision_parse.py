"""
Vision Parse - OpenAI Vision integration for exterior and equipment photos
Handles communication with the OpenAI API; parsing is left to the normalizer
"""

import logging
from typing import List, Dict, Any, Optional

from openai import OpenAI, OpenAIError

from services.error_types import ConfigurationError, VisionResponseError, log_error_with_context
from services.vision_config import vision_config, VisionConfig, ModelConfig
from services.vision_prompts import SYSTEM_PROMPT, create_exterior_prompt, create_equipment_prompt
from utils.logging_utils import timed_operation

logger = logging.getLogger(__name__)


class VisionParser:
    """Read house and equipment photos with an OpenAI vision model"""

    def __init__(self, config: Optional[VisionConfig] = None, client: Optional[OpenAI] = None):
        """
        Args:
            config: Vision settings; defaults to the environment-driven config
            client: Preconfigured OpenAI client (tests pass a mock)

        Raises:
            ConfigurationError: no client given and OPENAI_API_KEY is unset
        """
        self.config = config or vision_config
        if client is None:
            if not self.config.openai_api_key or not self.config.openai_api_key.strip():
                raise ConfigurationError("OPENAI_API_KEY is required for photo analysis")
            client = OpenAI(api_key=self.config.openai_api_key)
        self.client = client

    @timed_operation("vision_exterior")
    def analyze_exterior(self, image_url: str, address: Optional[str] = None) -> Optional[str]:
        """
        Ask the exterior model about one front-of-house photo.

        Args:
            image_url: http(s) URL or data URL of the photo

        Returns:
            Raw response text, or None if the call failed
        """
        model = self.config.exterior_model
        images = [self._image_block(image_url, model)]
        return self._call_vision_api(model, create_exterior_prompt(address), images)

    @timed_operation("vision_equipment")
    def analyze_equipment(self, image_urls: List[str]) -> Optional[str]:
        """
        Ask the equipment model about all label and unit photos at once.

        Returns:
            Raw response text, or None if there were no photos or the call failed
        """
        if not image_urls:
            return None

        model = self.config.equipment_model
        urls = image_urls[:self.config.max_equipment_images]
        if len(urls) < len(image_urls):
            logger.warning(f"Using first {len(urls)} of {len(image_urls)} equipment photos")

        images = [self._image_block(url, model) for url in urls]
        return self._call_vision_api(model, create_equipment_prompt(len(images)), images)

    @staticmethod
    def _image_block(url: str, model: ModelConfig) -> Dict[str, Any]:
        return {
            "type": "image_url",
            "image_url": {"url": url, "detail": model.image_detail},
        }

    def _call_vision_api(
        self,
        model_config: ModelConfig,
        prompt: str,
        image_contents: List[Dict[str, Any]],
    ) -> Optional[str]:
        """
        Call the OpenAI chat completions API with text plus images

        Returns:
            Response text or None if the call failed
        """
        messages = [
            {"role": "system", "content": SYSTEM_PROMPT},
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": prompt},
                    *image_contents,
                ],
            },
        ]

        api_params = model_config.get_api_params()
        api_params["messages"] = messages

        try:
            logger.info(f"Calling {model_config.name} with {len(image_contents)} images")
            response = self.client.chat.completions.create(**api_params)
        except OpenAIError as e:
            log_error_with_context(
                VisionResponseError(f"Error calling {model_config.name}", {"error": str(e)}),
                {"model": model_config.name, "images": len(image_contents)},
            )
            return None

        if not response.choices:
            logger.warning(f"{model_config.name} returned no choices")
            return None

        content = response.choices[0].message.content
        if content:
            logger.debug(f"Raw response preview: {content[:300]}...")
        return content
