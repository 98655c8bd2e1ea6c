"""Claude API oracle backend."""

from __future__ import annotations

from . import OracleBackend


class ClaudeOracle(OracleBackend):
    """Parse and categorize grocery items with Claude."""

    def __init__(
        self, api_key: str = "", model: str = "claude-sonnet-4-5-20250929"
    ) -> None:
        self._api_key = api_key
        self._model = model

    async def complete(
        self, system_prompt: str, user_prompt: str, api_key: str | None = None
    ) -> str:
        api_key = api_key or self._api_key
        if not api_key:
            raise ValueError(
                "Anthropic API key is not set. "
                "Check the config file or the ANTHROPIC_API_KEY environment variable."
            )

        try:
            import anthropic
        except ImportError:
            raise ImportError(
                "anthropic SDK is required: pip install 'grocery-categorizer[claude]'"
            ) from None

        client = anthropic.AsyncAnthropic(api_key=api_key)
        response = await client.messages.create(
            model=self._model,
            max_tokens=1024,
            system=system_prompt,
            messages=[{"role": "user", "content": user_prompt}],
        )

        return response.content[0].text
