import re

KANA_RE = re.compile(r"[\u3040-\u309f\u30a0-\u30ff]")
HANGUL_RE = re.compile(r"[\u1100-\u11ff\u3130-\u318f\uac00-\ud7af]")
CJK_RE = re.compile(r"[\u4e00-\u9fff]")

LANGUAGE_NAMES = {
    "ja": "Japanese",
    "en": "English",
    "zh": "Chinese",
    "ko": "Korean",
}


def detect_language(text: str) -> str:
    """
    Guess the primary language of a transcript.

    Kana means Japanese even when kanji are present; ideographs without kana
    are treated as Chinese.
    """
    if KANA_RE.search(text):
        return "ja"
    if HANGUL_RE.search(text):
        return "ko"
    if CJK_RE.search(text):
        return "zh"
    return "en"


SYSTEM_PROMPT = """\
You are a structured AI that transforms user conversations into "thought assets".
You return clean Markdown only: no JSON, no code fences around the document, no template text.
"""

SUMMARY_PROMPT = """\
Read the following conversation log and extract only the essential, structured thinking from it.

Text:
{transcript}

Instructions:
- Organize the conversation using the 8-label thinking framework below.
- Remove casual conversation, greetings, off-topic remarks and pleasantries.
- Summarize, rephrase or compress with clarity. Do NOT copy/paste.
- Do NOT force every category to be filled. Omit a category that does not apply.
- Use numbering (1., 2., ...) for multiple items within a category.
- Prefix ideas or statements that came from the AI with **[AI]**.

Categories:
- Subject: the central purpose or theme of the conversation.
- Background: why the conversation started, what prompted it.
- Hypothesis: assumptions, motivations, questions, emotional triggers.
- Analysis: exploration, ideation, technical discussion, trial and error, proposals not yet adopted.
- Decision: only what was clearly decided. Write "Deferred." if it was paused.
- Development: future-looking ideas, spin-offs, reuse in other contexts.
- Insights: realizations, learnings, perspective shifts.
- Output: tangible results such as files, code, tasks or diagrams that were adopted.

Output format:
Return ONLY a Markdown document with one H2 heading per category (## Subject, ## Background, ...).
Keep categories non-empty only.

Respond in {language}.
"""


def build_prompt(transcript: str) -> str:
    language = LANGUAGE_NAMES[detect_language(transcript)]
    return SUMMARY_PROMPT.format(transcript=transcript, language=language)
