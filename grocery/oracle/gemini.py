"""Gemini API oracle backend."""

from __future__ import annotations

from . import OracleBackend


class GeminiOracle(OracleBackend):
    """Parse and categorize grocery items with Google Gemini."""

    def __init__(self, api_key: str = "", model: str = "gemini-2.0-flash") -> None:
        self._api_key = api_key
        self._model = model

    async def complete(
        self, system_prompt: str, user_prompt: str, api_key: str | None = None
    ) -> str:
        api_key = api_key or self._api_key
        if not api_key:
            raise ValueError(
                "Gemini API key is not set. "
                "Check the config file or the GEMINI_API_KEY environment variable."
            )

        try:
            import google.generativeai as genai
        except ImportError:
            raise ImportError(
                "google-generativeai SDK is required: pip install 'grocery-categorizer[gemini]'"
            ) from None

        genai.configure(api_key=api_key)
        model = genai.GenerativeModel(self._model)

        response = await model.generate_content_async([system_prompt, user_prompt])
        return response.text
