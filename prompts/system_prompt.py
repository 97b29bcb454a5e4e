"""Prompt templates sent to the chat backend."""

# ── Blog summary ───────────────────────────────────────────────────────

SUMMARY_PROMPT = """You are an expert blog summarizer.
Summarize the following blog content:{content} into two sentences."""

SUMMARY_FALLBACK = "No summary could be generated."

# ── Free-form chat ─────────────────────────────────────────────────────

CHAT_FALLBACK = "No response generated."


def build_summary_prompt(content: str) -> str:
    # content may contain braces, so no str.format
    return SUMMARY_PROMPT.replace("{content}", content)
