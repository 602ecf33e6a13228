"""
AI Manager for text generation (OpenAI-compatible APIs or a local Ollama)
"""
from typing import Optional
import logging

import httpx
from openai import AsyncOpenAI

from brandstorm_domains.config.settings import Settings, settings as default_settings
from brandstorm_domains.config.constants import LLM_MAX_TOKENS
from brandstorm_domains.core.exceptions import MissingAPIKeyError, TextGenerationError

logger = logging.getLogger(__name__)


class AIManager:
    """
    Singleton text generation client
    Works with any OpenAI-compatible API or an Ollama server
    """

    _instance = None

    def __init__(self, config: Optional[Settings] = None):
        """Initialize text client based on configuration"""
        self.config = config or default_settings
        self.provider = (self.config.llm_provider or "ollama").lower()
        self.text_client = None
        self.model: Optional[str] = None
        self._init_text_client()

        # Performance tracking
        self.request_count = 0
        self.total_tokens = 0
        self.failures = 0

        logger.info(f"✅ AI Manager initialized ({self.provider}, model={self.model})")

    def _init_text_client(self):
        """Initialize text generation client"""
        if self.provider == "openai":
            missing = []
            if not self.config.text_api_key:
                missing.append("TEXT_API_KEY")
            if not self.config.text_model:
                missing.append("TEXT_MODEL")
            if missing:
                raise MissingAPIKeyError("OpenAI", missing=missing)

            self.text_client = AsyncOpenAI(
                base_url=self.config.text_api_url,
                api_key=self.config.text_api_key
            )
            self.model = self.config.text_model
        else:
            self.text_client = httpx.AsyncClient(
                timeout=self.config.provider_timeout_seconds * 4
            )
            self.model = self.config.ollama_model

    @classmethod
    def initialize(cls, config: Optional[Settings] = None):
        """Initialize singleton instance"""
        if cls._instance is None:
            cls._instance = cls(config)
        return cls._instance

    @classmethod
    def get_instance(cls):
        """Get singleton instance"""
        if cls._instance is None:
            raise RuntimeError("AIManager not initialized")
        return cls._instance

    async def complete(
        self,
        prompt: str,
        temperature: float = 0.8,
        max_tokens: int = LLM_MAX_TOKENS
    ) -> str:
        """
        Generate text from a prompt

        Args:
            prompt: The prompt to generate from
            temperature: Sampling temperature
            max_tokens: Maximum tokens to generate

        Returns:
            Raw generated text
        """
        try:
            logger.debug(f"Generating text with {self.model} (temperature={temperature})")

            if isinstance(self.text_client, AsyncOpenAI):
                response = await self.text_client.chat.completions.create(
                    model=self.model,
                    messages=[{"role": "user", "content": prompt}],
                    temperature=temperature,
                    max_tokens=max_tokens
                )

                if getattr(response, 'usage', None):
                    self.total_tokens += response.usage.total_tokens
                self.request_count += 1

                if not response.choices:
                    return ""
                return response.choices[0].message.content or ""

            response = await self.text_client.post(
                self.config.ollama_api_url,
                json={
                    "model": self.model,
                    "prompt": prompt,
                    "stream": False,
                    "options": {
                        "temperature": temperature,
                        "top_p": 0.95,
                        "max_tokens": max_tokens
                    }
                }
            )
            response.raise_for_status()
            self.request_count += 1
            return response.json().get("response", "") or ""

        except Exception as e:
            self.failures += 1
            logger.error(f"Text generation failed: {e}")
            raise TextGenerationError(str(e), model=self.model) from e

    def get_stats(self) -> dict:
        """Get AI Manager statistics"""
        return {
            "provider": self.provider,
            "model": self.model,
            "request_count": self.request_count,
            "total_tokens": self.total_tokens,
            "failures": self.failures
        }

    async def close(self):
        """Close the underlying HTTP client"""
        if isinstance(self.text_client, httpx.AsyncClient):
            await self.text_client.aclose()
        elif isinstance(self.text_client, AsyncOpenAI):
            await self.text_client.close()

    @classmethod
    async def cleanup(cls):
        """Cleanup resources"""
        if cls._instance:
            await cls._instance.close()
            cls._instance = None
            logger.info("✅ AI Manager cleaned up")
