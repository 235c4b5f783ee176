"""
Heading vocabulary for thought-asset Markdown.

HEADING_KEYWORDS maps H2 heading text to canonical section keys. It is ordered:
when a title contains keywords for several keys, the first key listed wins.
New locales or synonyms are added as data here, never as branches.

SECTION_HEADINGS holds the canonical emoji + title used when rendering. Every
canonical title classifies back to its own key.
"""
from typing import Dict, Optional, Tuple
from thoughtvault.models.record import SectionKey

HEADING_KEYWORDS: Tuple[Tuple[SectionKey, Tuple[str, ...]], ...] = (
    (SectionKey.SUBJECT, (
        "subject", "topic", "theme",
        "主題", "テーマ", "課題",  # ja
        "主题",  # zh
        "주제",  # ko
    )),
    (SectionKey.BACKGROUND, (
        "background", "context", "circumstance",
        "背景", "経緯", "きっかけ",
        "배경",
    )),
    (SectionKey.HYPOTHESIS, (
        "hypothes", "motivation", "assumption",
        "仮説", "動機", "想定",
        "假设", "动机",
        "가설",
    )),
    (SectionKey.ANALYSIS, (
        "analys", "examination", "consideration",
        "分析", "検討", "考察",
        "분석",
    )),
    (SectionKey.DECISION, (
        "decision", "conclusion", "judgment",
        "決定", "結論", "判断",
        "决定", "结论",
        "결정", "결론",
    )),
    (SectionKey.DEVELOPMENT, (
        "development", "application", "expansion",
        "発展", "応用", "展開",
        "发展",
        "발전",
    )),
    (SectionKey.INSIGHTS, (
        "insight", "realization", "learning",
        "洞察", "気付き", "学び",
        "인사이트", "통찰",
    )),
    (SectionKey.OUTPUT, (
        "output", "result", "deliverable",
        "成果", "結果", "アウトプット",
        "输出", "结果",
        "결과",
    )),
)

SECTION_HEADINGS: Dict[SectionKey, Tuple[str, str]] = {
    SectionKey.SUBJECT: ("🎯", "Subject"),
    SectionKey.BACKGROUND: ("📋", "Background"),
    SectionKey.HYPOTHESIS: ("💭", "Hypothesis & Motivation"),
    SectionKey.ANALYSIS: ("🔍", "Analysis"),
    SectionKey.DECISION: ("✅", "Decision"),
    SectionKey.DEVELOPMENT: ("🚀", "Development"),
    SectionKey.INSIGHTS: ("💡", "Insights"),
    SectionKey.OUTPUT: ("📤", "Output"),
}


def classify_heading(title: str) -> Optional[SectionKey]:
    """Map an H2 title (without the ``## `` marker) to a section key, or None."""
    lowered = title.lower()
    for key, keywords in HEADING_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return key
    return None


def heading_line(key: SectionKey) -> str:
    emoji, title = SECTION_HEADINGS[key]
    return f"## {emoji} {title}"
