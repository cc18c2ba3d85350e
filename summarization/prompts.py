"""
Prompt templates for generative summarization.
"""

CONCISE_SUMMARY_PROMPT = """Please provide a concise summary of the following text:

{text}"""


def get_summary_prompt(text: str) -> str:
    """Build the Gemini prompt for a concise summary of text."""
    return CONCISE_SUMMARY_PROMPT.format(text=text)
