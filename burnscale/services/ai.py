import json, logging, re
from typing import Any, Iterable, Sequence
import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_fixed
from burnscale.core.config import settings

log = logging.getLogger(__name__)

TIMEOUT = httpx.Timeout(connect=30.0, read=120.0, write=15.0, pool=120.0)

SENTIMENTS = {"positive", "neutral", "negative"}


class AIServiceError(RuntimeError):
    """The language-model collaborator failed or answered with unusable content."""


def _headers() -> dict:
    return {"Authorization": f"Bearer {settings.OPENAI_API_KEY}"}


@retry(
    stop=stop_after_attempt(3),
    wait=wait_fixed(1),
    retry=retry_if_exception_type(httpx.TransportError),
    reraise=True,
)
async def _post(path: str, req: dict) -> dict:
    async with httpx.AsyncClient(timeout=TIMEOUT) as client:
        r = await client.post(f"{settings.OPENAI_BASE_URL}{path}", json=req, headers=_headers())
        r.raise_for_status()
        return r.json()


async def _chat(prompt: str, *, json_mode: bool = False) -> str:
    """
    Single-turn chat completion; returns the stripped message content.
    """
    req: dict[str, Any] = {
        "model": settings.OPENAI_MODEL,
        "messages": [{"role": "user", "content": prompt}],
        "temperature": settings.OPENAI_TEMPERATURE,
    }
    if json_mode:
        req["response_format"] = {"type": "json_object"}

    try:
        data = await _post("/chat/completions", req)
        content = data["choices"][0]["message"]["content"]
    except httpx.HTTPStatusError as e:
        log.error("OpenAI API HTTP error %s: %s", e.response.status_code, e.response.text)
        raise AIServiceError(f"AI service returned HTTP {e.response.status_code}") from e
    except httpx.HTTPError as e:
        log.error("OpenAI API request failed: %s", e)
        raise AIServiceError("AI service is unreachable") from e
    except (KeyError, IndexError, TypeError, ValueError) as e:
        log.error("OpenAI API response had unexpected shape: %s", e)
        raise AIServiceError("AI service returned an unexpected response") from e

    content = (content or "").strip()
    if not content:
        raise AIServiceError("AI returned no content")
    return content


def format_checkin_log(entry: Any) -> str:
    return (
        f"Mood: {entry.mood}, Energy: {entry.energy_level}, "
        f"Meaning: {entry.meaningfulness}, Notes: {entry.notes or 'none'}"
    )


def _field(label: str, text: str) -> str:
    m = re.search(rf"{label}:\s*(.+)", text, re.IGNORECASE)
    return m.group(1).strip().strip('"').strip() if m else ""


async def weekly_summary(checkins: Sequence[Any]) -> dict:
    """
    Returns: dict(summary, image_prompt, personal_reflection)
    """
    logs = "\n".join(format_checkin_log(c) for c in checkins)
    prompt = (
        "You are a helpful wellness assistant.\n"
        "Given the following logs, summarize the user's week in 2-3 sentences.\n"
        "Then suggest a visual image prompt for AI art based on their emotional state.\n"
        "Finally, reflect on the user's wellbeing this week in a personalized tone with practical advice.\n\n"
        "Return in this format:\n"
        "Summary: ...\n"
        "Image Prompt: ...\n"
        "Personal Reflection: ...\n\n"
        f"Logs:\n{logs}"
    )
    content = await _chat(prompt)
    result = {
        "summary": _field("Summary", content),
        "image_prompt": _field("Image Prompt", content),
        "personal_reflection": _field("Personal Reflection", content),
    }
    if not all(result.values()):
        log.warning("Incomplete weekly summary from AI: %r", content[:200])
        raise AIServiceError("AI failed to generate complete response")
    return result


async def generate_image(prompt: str) -> str:
    """
    Mood-board image URL, or "" when generation fails.
    """
    req = {
        "model": settings.OPENAI_IMAGE_MODEL,
        "prompt": prompt,
        "size": settings.OPENAI_IMAGE_SIZE,
        "quality": "standard",
        "n": 1,
    }
    try:
        data = await _post("/images/generations", req)
        return data["data"][0].get("url") or ""
    except (httpx.HTTPError, KeyError, IndexError, TypeError, ValueError) as e:
        log.error("Image generation failed, continuing without image: %s", e)
        return ""


async def stress_tips(triggers: Iterable[str]) -> str:
    """Markdown bullet advice for the given stress triggers."""
    formatted = ", ".join(triggers)
    prompt = (
        "You are a helpful wellness coach.\n"
        f"A user has experienced repeated stress from these triggers: {formatted}.\n"
        "Provide 2-3 short, evidence-based strategies for each trigger, in a clear and friendly tone.\n"
        "Keep the response concise, under 150 words.\n"
        "Return as markdown with bullet points."
    )
    return await _chat(prompt)


def split_tips(text: str) -> list[str]:
    parts = re.split(r"\n+|\d+\.\s*", text)
    return [p.strip().lstrip("-*• ").strip() for p in parts if p.strip().lstrip("-*• ").strip()]


async def coping_tips(triggers: Iterable[str]) -> list[str]:
    prompt = (
        f"You are a friendly wellbeing coach. The user is experiencing stress due to: {', '.join(triggers)}.\n"
        "Suggest 3 short and practical tips or techniques that can help them manage or reduce this stress.\n\n"
        "Format your answer as a list."
    )
    return split_tips(await _chat(prompt))


async def analyze_notes(notes: str) -> dict:
    """
    Returns: dict(summary, sentiment, themes) for one journal entry.
    """
    prompt = (
        "You are an AI assistant. Analyze the following user journal entry and output JSON only, "
        "with no extra text or numbering:\n\n"
        '{\n  "summary": "<one-sentence summary>",\n'
        '  "sentiment": "<positive|neutral|negative>",\n'
        '  "themes": ["<theme1>", "<theme2>", "<theme3>"]\n}\n\n'
        f"Journal Entry:\n{notes}"
    )
    content = await _chat(prompt, json_mode=True)
    try:
        parsed = json.loads(content)
    except json.JSONDecodeError as e:
        log.error("Notes-analysis returned invalid JSON: %r", content[:200])
        raise AIServiceError("Notes-analysis returned malformed JSON") from e

    if (
        not isinstance(parsed, dict)
        or not isinstance(parsed.get("summary"), str)
        or parsed.get("sentiment") not in SENTIMENTS
        or not isinstance(parsed.get("themes"), list)
    ):
        log.error("Notes-analysis returned unexpected structure: %r", parsed)
        raise AIServiceError("Notes-analysis returned unexpected data")

    return {
        "summary": parsed["summary"],
        "sentiment": parsed["sentiment"],
        "themes": [str(t) for t in parsed["themes"]],
    }
