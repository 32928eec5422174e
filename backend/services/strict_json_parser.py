"""
Strict JSON Parser - pulls the one JSON object out of a vision model reply

Models asked for "JSON only" still wrap it in markdown fences or a sentence
of prose. Only a JSON object counts; arrays and scalars are no answer.
"""

import json
import re
import logging
from typing import Dict, Any, Iterator, Optional

logger = logging.getLogger(__name__)

FENCE_PATTERN = re.compile(r'```(?:json)?\s*(\{.*?\})\s*```', re.DOTALL | re.IGNORECASE)

# Objects nested at most one level deep, e.g. {"a": {"b": 1}}
OBJECT_PATTERN = re.compile(r'\{[^{}]*(?:\{[^{}]*\}[^{}]*)*\}', re.DOTALL)


class StrictJSONParser:
    """Extract JSON objects from vision model output"""

    @staticmethod
    def _loads_object(text: str) -> Optional[Dict[str, Any]]:
        try:
            result = json.loads(text)
        except (ValueError, RecursionError):
            # JSONDecodeError, integers over the digit limit, runaway nesting
            return None
        return result if isinstance(result, dict) else None

    @staticmethod
    def _candidates(content: str) -> Iterator[str]:
        yield content
        yield from (m.group(1) for m in FENCE_PATTERN.finditer(content))
        # Largest first so an outer object beats the ones nested in it
        yield from sorted(OBJECT_PATTERN.findall(content), key=len, reverse=True)

    def extract_json(self, content: Optional[str]) -> Optional[Dict[str, Any]]:
        """
        Find the first candidate that parses to a JSON object.

        Candidates in order: the whole reply, fenced blocks, then brace
        groups anywhere in the text.

        Returns:
            Parsed object, or None if the reply holds no JSON object
        """
        if not isinstance(content, str) or not content.strip():
            return None

        for candidate in self._candidates(content.strip()):
            result = self._loads_object(candidate)
            if result is not None:
                return result

        logger.warning(f"No JSON object in vision response (first 200 chars): {content[:200]!r}")
        return None


# Global parser instance
strict_parser = StrictJSONParser()
