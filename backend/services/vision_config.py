"""
Vision Model Configuration - exterior and equipment photo analysis
Centralized configuration for vision models and API parameters
"""

import os
from typing import Dict, Any
from dataclasses import dataclass, field

from core.environment import get_env_int


@dataclass
class ModelConfig:
    """Configuration for a specific vision model"""
    name: str
    max_tokens: int
    default_temperature: float = 1.0
    image_detail: str = "high"
    timeout_seconds: int = 120

    def get_api_params(self) -> Dict[str, Any]:
        """Get API parameters for this model"""
        params = {
            "model": self.name,
            "max_tokens": self.max_tokens,
            "timeout": self.timeout_seconds,
        }

        if self.default_temperature != 1.0:
            params["temperature"] = self.default_temperature

        return params


@dataclass
class VisionConfig:
    """Central configuration for vision processing"""

    openai_api_key: str = field(default_factory=lambda: os.getenv("OPENAI_API_KEY", ""))

    # A single front-of-house photo; low detail is enough
    exterior_model: ModelConfig = field(default_factory=lambda: ModelConfig(
        name=os.getenv("EXTERIOR_VISION_MODEL", "gpt-4.1-mini"),
        max_tokens=1024,
        default_temperature=0.1,
        image_detail="low",
        timeout_seconds=get_env_int("VISION_TIMEOUT_SECONDS", 120),
    ))

    # Label close-ups need the stronger model and full detail
    equipment_model: ModelConfig = field(default_factory=lambda: ModelConfig(
        name=os.getenv("EQUIPMENT_VISION_MODEL", "gpt-4.1"),
        max_tokens=2048,
        default_temperature=0.1,
        image_detail="high",
        timeout_seconds=get_env_int("VISION_TIMEOUT_SECONDS", 120),
    ))

    max_equipment_images: int = field(default_factory=lambda: get_env_int("MAX_EQUIPMENT_IMAGES", 6))


vision_config = VisionConfig()
