from typing import Any, Dict, Optional

import httpx

from config import TextGenerationConfig, logger
from config.constants import LLM_CONFIG
from exceptions import ConfigurationException, LLMException


class TextGenerationClient:
    """Chat-completions client; one system/user prompt pair in, prose out."""

    def __init__(self, config: TextGenerationConfig):
        self.config = config

    def _build_body(self, system_prompt: str, user_prompt: str, temperature: float) -> Dict[str, Any]:
        return {
            "model": self.config.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "temperature": temperature,
        }

    async def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float = LLM_CONFIG.ANALYSIS_TEMPERATURE
    ) -> str:
        if not self.config.api_key:
            logger.critical("LLM_API_KEY not configured.")
            raise ConfigurationException("LLM_API_KEY")

        headers = {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json",
        }
        body = self._build_body(system_prompt, user_prompt, temperature)

        try:
            async with httpx.AsyncClient(timeout=self.config.timeout) as client:
                response = await client.post(self.config.endpoint, headers=headers, json=body)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error("LLM HTTP error %s for URL %s: %s", e.response.status_code, e.request.url, e.response.text)
            raise LLMException(f"HTTP {e.response.status_code}", recoverable=True)
        except httpx.TimeoutException as e:
            logger.error("LLM request timed out: %s", str(e))
            raise LLMException("Request timed out", recoverable=True)
        except httpx.RequestError as e:
            logger.error("LLM request error: %s", str(e))
            raise LLMException(f"Request failed: {str(e)}", recoverable=True)
        except ValueError as e:
            logger.error("LLM returned a non-JSON body: %s", str(e))
            raise LLMException("Malformed JSON response", recoverable=False)

        text = self._extract_text(data)
        if text is None:
            logger.error("Unexpected LLM response structure: %s", data)
            raise LLMException("Malformed response structure", recoverable=False)

        logger.info("LLM call complete (model=%s, length=%d).", self.config.model, len(text))
        return text

    @staticmethod
    def _extract_text(data: Any) -> Optional[str]:
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            return None
        return content if isinstance(content, str) else None
