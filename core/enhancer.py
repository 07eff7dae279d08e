"""Optional chat-model rewrite of image prompts."""

from __future__ import annotations

import logging

from core.providers import resolve_api_key
from prompts.templates import ENHANCEMENT_SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class PromptEnhancer:
    """Uses an OpenAI chat model to turn a template prompt into a richer one."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "gpt-4o-mini",
        timeout: float = 5.0,
        client=None,
    ) -> None:
        self.api_key = resolve_api_key(api_key, "OPENAI_API_KEY")
        self.model = model
        self.timeout = timeout
        self._client = client

    def _get_client(self):
        if self._client is None:
            from openai import OpenAI
            self._client = OpenAI(api_key=self.api_key, timeout=self.timeout, max_retries=0)
        return self._client

    @property
    def available(self) -> bool:
        return bool(self.api_key) or self._client is not None

    def enhance_prompt(self, basic_prompt: str, innovation: str = "") -> str:
        """Return an enhanced prompt, or the original one if anything goes wrong."""
        if not self.available:
            logger.warning("OpenAI API key not set, returning original prompt")
            return basic_prompt

        user_msg = f"Enhance this image generation prompt:\n\n{basic_prompt}"
        if innovation:
            user_msg += f"\n\nThe product's key innovation is: {innovation}"

        try:
            response = self._get_client().chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": ENHANCEMENT_SYSTEM_PROMPT},
                    {"role": "user", "content": user_msg},
                ],
                temperature=0.7,
                max_tokens=300,
            )
            enhanced = (response.choices[0].message.content or "").strip()
        except Exception as e:
            logger.error("Prompt enhancement failed: %s", e)
            return basic_prompt

        if not enhanced:
            return basic_prompt

        logger.info("Prompt enhanced: %d chars -> %d chars", len(basic_prompt), len(enhanced))
        return enhanced

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
