"""Canned response sets substituted when the pipeline cannot produce real content."""

from consilium.models import PersonaResponseSet

# Shared with consensus.evaluate_consensus: any response carrying this text
# forces SYSTEM_LOCK.
LOCKED_MARKER = "SYSTEM LOCKED"

LOCKED_RESPONSES = PersonaResponseSet(
    gemini=f"{LOCKED_MARKER}. Environment variable GEMINI_API_KEY not found.",
    claude=f"{LOCKED_MARKER}. Access Denied. Please configure API credentials.",
    gpt=f"{LOCKED_MARKER}. Neural link offline. Check deployment configuration.",
    grok=f"{LOCKED_MARKER}. 404 Brain Not Found. Did you forget to set the API key?",
)

CONNECTION_FAILED_RESPONSES = PersonaResponseSet(
    gemini="Connection Error: Unable to reach Google AI servers. Check your API key and network.",
    claude="Unable to establish secure link. The service may be temporarily unavailable.",
    gpt="API Request Failed. Please verify your credentials and try again.",
    grok="Something broke. Either your key is wrong or the internet died. Check the logs for details.",
)

PLACEHOLDER_RESPONSES = PersonaResponseSet(
    gemini="Processing data stream...",
    claude="Analyzing parameters...",
    gpt="Computing response...",
    grok="Accessing feed...",
)
