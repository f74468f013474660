"""Prompts used by the augmentation operations."""

from __future__ import annotations

AUTOFILL_PROMPT = """
Based on the title of the ancient Nusantara manuscript "{title}", fill in the following
fields as a JSON object. Give your best guess when you are not sure.
- author: the author or copyist most likely associated with it
- description: a short 2-3 sentence description of the likely contents
- category: for example Babad, Sejarah, Sastra, Keagamaan, Primbon
- language: for example Jawa Kuno, Sansekerta, Melayu Kuno
- script: for example Kawi, Pallawa, Arab-Melayu, Hanacaraka
- condition: for example Baik, Rapuh, Ada bagian yang hilang
- readability: for example Jelas, Sulit dibaca, Memudar

Write the values in Indonesian. Return only the JSON object with exactly these keys,
without any extra text or markdown.
""".strip()

DESCRIPTION_PROMPT = """
Write a short, engaging description of an ancient manuscript titled "{title}".{keywords_clause}
The description must be in Indonesian, about 50-100 words, in a single paragraph, and should
highlight what makes the manuscript unique or important.
""".strip()

DESCRIPTION_KEYWORDS_CLAUSE = " The manuscript relates to the keywords: {keywords}."

TITLE_IDEAS_PROMPT = """
Suggest 5 engaging and relevant journal article titles for Galeri Manuskrip Sampurnan.
{topic_clause}
Titles must be in Indonesian. Format the output as a JSON array of strings,
for example: ["Ide Judul 1", "Ide Judul 2"]
""".strip()

TITLE_TOPIC_CLAUSE = 'Focus on the topic: "{topic}".'
TITLE_DEFAULT_TOPIC_CLAUSE = (
    "Topics may vary, from the history of manuscripts and conservation work to the stories "
    "behind items in the collection."
)

GROUNDED_SEARCH_PROMPT = """
Answer the following question using up-to-date information from Google Search: "{query}".
Cite sources where possible. Answer in Indonesian.
""".strip()

SUMMARY_PROMPT = """
Summarise the following text in 2-3 sentences in Indonesian:

"{text}"
""".strip()

UNAVAILABLE_SEARCH_TEXT = (
    "Layanan AI tidak tersedia (API key belum diatur). Pencarian tidak dapat dilakukan."
)


def autofill_prompt(title: str) -> str:
    return AUTOFILL_PROMPT.format(title=title)


def description_prompt(title: str, keywords: str | None = None) -> str:
    keywords_clause = DESCRIPTION_KEYWORDS_CLAUSE.format(keywords=keywords) if keywords else ""
    return DESCRIPTION_PROMPT.format(title=title, keywords_clause=keywords_clause)


def title_ideas_prompt(topic: str | None = None) -> str:
    topic_clause = TITLE_TOPIC_CLAUSE.format(topic=topic) if topic else TITLE_DEFAULT_TOPIC_CLAUSE
    return TITLE_IDEAS_PROMPT.format(topic_clause=topic_clause)


def grounded_search_prompt(query: str) -> str:
    return GROUNDED_SEARCH_PROMPT.format(query=query)


def summary_prompt(text: str) -> str:
    return SUMMARY_PROMPT.format(text=text)
