"""OpenAI chat-completions client used once the scripted questions run out"""
import asyncio
from typing import List, Optional
import httpx
from core.config import settings
from core.exceptions import ModelCallFailure
from core.http_client import get_http_client
from core.logging import logger
from models.conversation import Turn

DEFAULT_PROMPT = "Generate the next relevant question."


def build_messages(transcript: List[Turn], latest_input: Optional[str], history_limit: int) -> List[dict]:
    """Frame the transcript as chat-completion messages.

    The opening system turn always survives windowing; after it only the last
    ``history_limit`` turns are replayed. The latest input is appended unless
    it is already the final user turn.
    """
    turns = list(transcript)
    head = []
    if turns and turns[0].role == "system":
        head, turns = turns[:1], turns[1:]
    if len(turns) > history_limit:
        turns = turns[-history_limit:] if history_limit > 0 else []

    messages = [{"role": t.role, "content": t.content} for t in head + turns]

    prompt = latest_input or DEFAULT_PROMPT
    last = messages[-1] if messages else None
    if not (last and last["role"] == "user" and last["content"] == prompt):
        messages.append({"role": "user", "content": prompt})
    return messages


def _is_retryable(status_code: int) -> bool:
    return status_code == 429 or status_code >= 500


async def complete(transcript: List[Turn], latest_input: Optional[str], max_retries: Optional[int] = None) -> str:
    """Ask the model for one assistant reply.

    Retries timeouts, transport errors, 429 and 5xx with exponential backoff
    (1s, 2s, ...). Raises ModelCallFailure once attempts are exhausted or the
    API rejects the request outright.
    """
    if max_retries is None:
        max_retries = settings.OPENAI_MAX_RETRIES
    payload = {
        "model": settings.OPENAI_MODEL,
        "messages": build_messages(transcript, latest_input, settings.LLM_HISTORY_LIMIT),
    }
    headers = {"Authorization": f"Bearer {settings.OPENAI_API_KEY}"}
    http_client = await get_http_client()
    last_error = None

    for attempt in range(max_retries + 1):
        try:
            response = await http_client.post(
                f"{settings.OPENAI_API_URL}/chat/completions",
                json=payload,
                headers=headers,
                timeout=settings.OPENAI_TIMEOUT
            )
            if response.status_code == 200:
                try:
                    content = response.json()["choices"][0]["message"]["content"]
                except (ValueError, KeyError, IndexError, TypeError) as e:
                    raise ModelCallFailure(f"Malformed completion response: {e}") from e
                # refusals and tool calls come back with null content
                if not isinstance(content, str) or not content.strip():
                    raise ModelCallFailure("Malformed completion response: no text content")
                return content

            last_error = f"OpenAI API error {response.status_code}: {response.text[:200]}"
            if not _is_retryable(response.status_code):
                raise ModelCallFailure(last_error)
        except httpx.TimeoutException as e:
            last_error = f"OpenAI request timed out: {e}"
        except httpx.HTTPError as e:
            last_error = f"OpenAI transport error: {e}"

        if attempt < max_retries:
            delay = 2 ** attempt
            logger.warning(f"Completion attempt {attempt + 1} failed, retrying in {delay}s: {last_error}")
            await asyncio.sleep(delay)

    raise ModelCallFailure(f"Failed after {max_retries + 1} attempts: {last_error}")
