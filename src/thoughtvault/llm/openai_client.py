from typing import Optional
from openai import OpenAI
from thoughtvault.llm.prompts import SYSTEM_PROMPT, build_prompt
from thoughtvault.logging import logger


class SummarizationError(Exception):
    """The model returned no usable summary."""


class SummaryClient:
    """
    Summarizes transcripts into thought-asset Markdown via the OpenAI chat API.

    The underlying OpenAI client is built on first use so that constructing a
    SummaryClient never requires network access or an API key.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "gpt-4o-mini",
        max_output_tokens: int = 8192,
        timeout: float = 60.0,
    ):
        self.api_key = api_key
        self.model = model
        self.max_output_tokens = max_output_tokens
        self.timeout = timeout
        self._client: Optional[OpenAI] = None

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            self._client = OpenAI(api_key=self.api_key, timeout=self.timeout)
        return self._client

    def summarize(self, transcript: str) -> str:
        """
        Call the chat model and return the Markdown reply, stripped.
        """
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": build_prompt(transcript)},
                ],
                max_completion_tokens=self.max_output_tokens,
            )
        except Exception as e:
            logger.error(f"OpenAI summary call failed: {e}")
            raise

        content = response.choices[0].message.content if response.choices else None
        if not content or not content.strip():
            raise SummarizationError("Model returned an empty summary")

        logger.info(f"Summary received ({len(content)} chars, model={self.model})")
        return content.strip()
