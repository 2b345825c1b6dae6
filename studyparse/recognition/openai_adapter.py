import httpx
import openai

from studyparse.recognition.base import BaseTextRecognizer
from studyparse.recognition.exceptions import (
    TextRecognitionError,
    TextRecognitionNetworkError,
)

EXTRACTION_PROMPT = (
    "Extract all the text content from this PDF document. "
    "Return only the extracted text, nothing else."
)


class OpenAITextRecognizer(BaseTextRecognizer):
    """Text recognition built on a vision-capable OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: int,
        max_retries: int = 0,
        base_url: str | None = None,
    ) -> None:
        self._model = model
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            max_retries=max_retries,
            base_url=base_url,
        )

    def recognize_text(self, public_url: str) -> str | None:
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": EXTRACTION_PROMPT},
                            {"type": "image_url", "image_url": {"url": public_url}},
                        ],
                    }
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise TextRecognitionNetworkError(
                f"Text recognition network error: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise TextRecognitionNetworkError(
                f"Text recognition API error: {exc}"
            ) from exc

        if not response.choices:
            raise TextRecognitionError("Text recognition returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise TextRecognitionError("Text recognition returned empty response")
        return content
