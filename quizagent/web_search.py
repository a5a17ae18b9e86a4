"""Web search tool: instant-answer lookup followed by page summarisation."""

from __future__ import annotations

import json
from urllib.parse import quote_plus

import requests
from bs4 import BeautifulSoup

from quizagent.models import DDGSearchResult

_TIMEOUT = 30
_NO_RESULT = (
    "sorry, No result found, try using **one word query** or try using another "
    "tool, if you have a specific muti-word query."
)


def fetch_main_text_from_url(url: str) -> str:
    """Download a page and return its longer paragraphs, each followed by a blank line."""
    response = requests.get(url, timeout=_TIMEOUT)
    try:
        if response.status_code != 200:
            status = f"{response.status_code} {response.reason}"
            raise requests.HTTPError(
                f"status code error: {response.status_code} {status}",
                response=response,
            )
        soup = BeautifulSoup(response.content, "html.parser")
    finally:
        response.close()

    paragraphs = (p.get_text() for p in soup.find_all("p"))
    return "".join(
        text + "\n\n" for text in paragraphs if len(text.encode("utf-8")) > 50
    )


def naive_summarize(text: str, max_sentences: int) -> str:
    """Pick up to max_sentences sentences that look significant."""
    picked: list[str] = []
    for sentence in text.split("."):
        if (
            "important" in sentence
            or "main" in sentence
            or len(sentence.encode("utf-8")) > 100
        ):
            picked.append(sentence.strip() + ". ")
            if len(picked) >= max_sentences:
                break
    return "".join(picked)


def duckduckgo_search(query: str) -> str:
    """Look up a query and summarise the linked article; errors come back as text."""
    api_url = (
        f"https://api.duckduckgo.com/?q={quote_plus(query)}"
        "&format=json&no_redirect=1&no_html=1"
    )
    try:
        response = requests.get(api_url, timeout=_TIMEOUT)
    except requests.RequestException as err:
        return f"{err}.Try giving more specific query"

    with response:
        body = response.content

    try:
        result = DDGSearchResult.from_dict(json.loads(body))
    except ValueError as err:
        return f"{err}.Try again"

    if result.abstract_url:
        try:
            main_text = fetch_main_text_from_url(result.abstract_url)
        except requests.RequestException as err:
            return f"{err}.Try again{result.abstract_url}"
        return naive_summarize(main_text, 5)

    return _NO_RESULT