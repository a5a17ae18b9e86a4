import pytest
import requests
import responses
from responses import matchers

from quizagent.web_search import (
    duckduckgo_search,
    fetch_main_text_from_url,
    naive_summarize,
)

API_URL = "https://api.duckduckgo.com/"
PAGE_URL = "https://example.com/article"

LONG_PARA = "This is the important part of the article about gravity and mass"
OTHER_PARA = "Gravity pulls objects toward one another across space and time"

PAGE_HTML = (
    "<html><body>"
    f"<p>{LONG_PARA}</p>"
    "<p>short</p>"
    f"<div><p>{OTHER_PARA}</p></div>"
    "</body></html>"
)

NO_RESULT = (
    "sorry, No result found, try using **one word query** or try using another "
    "tool, if you have a specific muti-word query."
)


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


def test_fetch_keeps_only_long_paragraphs(mocked):
    mocked.add(responses.GET, PAGE_URL, body=PAGE_HTML, content_type="text/html")
    text = fetch_main_text_from_url(PAGE_URL)
    assert text == LONG_PARA + "\n\n" + OTHER_PARA + "\n\n"


def test_fetch_includes_nested_text(mocked):
    html = f"<p>{LONG_PARA[:30]}<b>{LONG_PARA[30:]}</b></p>"
    mocked.add(responses.GET, PAGE_URL, body=html, content_type="text/html")
    assert fetch_main_text_from_url(PAGE_URL) == LONG_PARA + "\n\n"


def test_fetch_non_200_raises(mocked):
    mocked.add(responses.GET, PAGE_URL, status=404)
    with pytest.raises(requests.HTTPError, match="status code error: 404"):
        fetch_main_text_from_url(PAGE_URL)


def test_summarize_picks_keyword_sentences():
    text = "This is important. short one. the main thing. nothing here"
    assert naive_summarize(text, 5) == "This is important. the main thing. "


def test_summarize_long_sentence_selected():
    long_sentence = "x" * 101
    assert naive_summarize(f"tiny. {long_sentence}. also tiny", 5) == long_sentence + ". "


def test_summarize_respects_limit():
    text = ". ".join(["main point"] * 10)
    summary = naive_summarize(text, 3)
    assert summary.count(". ") == 3
    assert summary == "main point. " * 3


def test_summarize_nothing_matches():
    assert naive_summarize("a. b. c", 5) == ""


def test_search_summarises_linked_article(mocked):
    mocked.add(
        responses.GET,
        API_URL,
        json={"Heading": "Gravity", "Abstract": "", "AbstractURL": PAGE_URL},
        match=[
            matchers.query_param_matcher(
                {"q": "gravity", "format": "json", "no_redirect": "1", "no_html": "1"}
            )
        ],
    )
    mocked.add(responses.GET, PAGE_URL, body=PAGE_HTML, content_type="text/html")
    assert duckduckgo_search("gravity") == LONG_PARA + ". "


def test_search_escapes_query(mocked):
    mocked.add(
        responses.GET,
        API_URL,
        json={"AbstractURL": ""},
        match=[
            matchers.query_param_matcher(
                {"q": "black hole", "format": "json", "no_redirect": "1", "no_html": "1"}
            )
        ],
    )
    result = duckduckgo_search("black hole")
    assert result == NO_RESULT
    assert "q=black+hole" in mocked.calls[0].request.url


def test_search_no_abstract_url(mocked):
    mocked.add(responses.GET, API_URL, json={"Heading": "", "AbstractURL": ""})
    assert duckduckgo_search("zzz") == NO_RESULT


def test_search_connection_error(mocked):
    mocked.add(responses.GET, API_URL, body=requests.ConnectionError("boom"))
    assert duckduckgo_search("gravity") == "boom.Try giving more specific query"


def test_search_bad_json(mocked):
    mocked.add(responses.GET, API_URL, body="not json")
    assert duckduckgo_search("gravity").endswith(".Try again")


def test_search_article_fetch_fails(mocked):
    mocked.add(responses.GET, API_URL, json={"AbstractURL": PAGE_URL})
    mocked.add(responses.GET, PAGE_URL, status=500)
    result = duckduckgo_search("gravity")
    assert result.startswith("status code error: 500")
    assert result.endswith(".Try again" + PAGE_URL)