"""Example fallback client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseFallbackClient and register the provider in FallbackFactory.
"""

import json
from typing import ClassVar

from labextract.fallback.client_base import BaseFallbackClient


class ExampleClientAdapter(BaseFallbackClient):
    """Offline adapter that returns a fixed marker list.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE: ClassVar[list[dict[str, object]]] = [
        {
            "code": "GLU",
            "name": "Glucose",
            "value": 90,
            "unit": "mg/dL",
            "ref_range_low": 70,
            "ref_range_high": 100,
            "category": "Chemistry",
        },
    ]

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt
        return json.dumps(self.DEFAULT_RESPONSE)
