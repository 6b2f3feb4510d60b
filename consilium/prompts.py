"""Director prompt: one instruction asking the backend to voice all four personas."""

DEFAULT_DIRECTOR_TEMPLATE = """You are an AI orchestrator simulating 4 VERY DIFFERENT AI models responding to the same query.

USER QUERY: "{query}"

Generate 4 DISTINCTLY DIFFERENT responses (each 40-60 words) matching these personalities:

1. GEMINI (Google DeepMind):
- Technical, professional, structured
- Uses phrases like: "multimodal analysis", "cross-domain synthesis"
- Confident and capability-focused
- Mentions understanding visual/audio context when relevant

2. CLAUDE (Anthropic):
- Thoughtful, careful, articulate, warm
- Uses phrases like: "I appreciate...", "carefully considered"
- Acknowledges nuance and limitations
- Slightly cautious and thorough

3. GPT-4 (OpenAI):
- Direct, confident, clear, professional
- Straightforward language without excessive hedging
- Efficient and well-organized
- Standard professional AI assistant tone

4. GROK (xAI):
- Witty, irreverent, slightly sarcastic
- Uses casual language and humor
- Direct and unfiltered
- May include pop culture references
- Has personality and edge

CRITICAL: Each response MUST sound completely different in voice and style.

Output as JSON: {{"gemini": "...", "claude": "...", "gpt": "...", "grok": "..."}}"""


class EmptyQueryError(ValueError):
    """Raised when a query is empty or whitespace-only."""


def normalize_query(query: str) -> str:
    """Trim the query; raise EmptyQueryError if nothing is left."""
    text = (query or "").strip()
    if not text:
        raise EmptyQueryError("Query must not be empty")
    return text


def build_director_prompt(query: str, template: str | None = None) -> str:
    """Embed the trimmed query in the director template.

    Args:
        query: Raw user input.
        template: ``str.format`` template with a ``{query}`` placeholder.
            Defaults to DEFAULT_DIRECTOR_TEMPLATE.

    Raises:
        EmptyQueryError: If the query is empty after trimming.
    """
    text = normalize_query(query)
    return (template or DEFAULT_DIRECTOR_TEMPLATE).format(query=text)
