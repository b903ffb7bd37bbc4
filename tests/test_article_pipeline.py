"""End-to-end tests for the article summarization pipeline."""

import sys
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

# Ensure the repository's src/ directory is importable without installation.
REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = REPO_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from tldr.core.errors import ResourceLoadError  # noqa: E402
from tldr.core.models import ArticleSummary  # noqa: E402
from tldr.core.stop_words import StopWordSet  # noqa: E402
from tldr.processors.article_pipeline import (  # noqa: E402
    ArticlePipeline,
    parse_url_block,
    summarize_text,
    validate_url,
)

ARTICLE_URL = "http://www.abc.net.au/news/cave-rescue"

ARTICLE_HTML = """
<html><body>
<h1>ABC News</h1>
<h1>Divers reach boys trapped in cave</h1>
<p>Posted 6 July 2018</p>
<p>Divers rescued boys from the cave. The cave was flooded. </p>
<p>Weather was sunny. Divers reached the cave again. Officials thanked divers.</p>
<p class="topics">Topics: cave, divers, cave, divers.</p>
<p>Copyright notice. Cave divers cave divers.</p>
</body></html>
"""

EXPECTED_SUMMARY = (
    "Divers rescued boys from the cave. \n\n"
    " Divers reached the cave again. \n\n"
)


class FakeRetriever:
    """Serves canned HTML per URL and records each (url, tag) request."""

    def __init__(self, pages=None):
        self.pages = pages or {}
        self.calls = []

    def select_nodes(self, url, tag):
        self.calls.append((url, tag))
        html = self.pages.get(url)
        if html is None:
            return []
        return BeautifulSoup(html, "html.parser").find_all(tag)


@pytest.fixture
def pipeline():
    return ArticlePipeline(FakeRetriever({ARTICLE_URL: ARTICLE_HTML}))


@pytest.mark.parametrize(
    "url,expected",
    [
        ("http://www.abc.net.au/news/2018-07-06/rescue-worker-helping-thai-boys-in-cave-dies/9949622", True),
        ("http://www.abc.net.au/", True),
        ("https://example.com/path?q=1", True),
        ("www.google.com", False),
        ("test.com", False),
        ("a", False),
        ("", False),
        ("http://", False),
        ("http://[::1", False),
        ("http://exa mple.com/", False),
        ("http://example.com/a b", True),
    ],
)
def test_validate_url(url, expected):
    assert validate_url(url) is expected


def test_invalid_url_returns_placeholder(pipeline):
    result = pipeline.generate("www.google.com")
    assert result == ArticleSummary(
        url="www.google.com",
        title="UNKNOWN",
        summary="Invalid URL - No summary could be generated.",
    )
    assert pipeline.retriever.calls == []
    assert pipeline.summaries_generated == 0


def test_missing_headings_fall_back_to_unavailable():
    html = "<p>meta</p><p>Body text here.</p>"
    pipeline = ArticlePipeline(FakeRetriever({"http://example.com/": html}))
    result = pipeline.generate("http://example.com/")
    assert result.title == "UNAVAILABLE"
    assert result.url == "http://example.com/"


def test_generate_builds_ordered_summary(pipeline):
    result = pipeline.generate(ARTICLE_URL)
    assert result.url == ARTICLE_URL
    assert result.title == "Divers reach boys trapped in cave"
    assert result.summary == EXPECTED_SUMMARY
    assert pipeline.retriever.calls == [(ARTICLE_URL, "h1"), (ARTICLE_URL, "p")]


def test_unreachable_page_gives_empty_summary():
    pipeline = ArticlePipeline(FakeRetriever())
    result = pipeline.generate("http://unreachable.example/")
    assert result == ArticleSummary("http://unreachable.example/", "UNAVAILABLE", "")
    assert pipeline.summaries_generated == 1


def test_stop_words_load_on_first_generation(pipeline):
    assert not pipeline.stop_words.loaded
    pipeline.generate(ARTICLE_URL)
    assert pipeline.stop_words.loaded
    assert pipeline.summaries_generated == 1
    pipeline.generate(ARTICLE_URL)
    assert pipeline.summaries_generated == 2


def test_missing_stop_words_are_fatal(tmp_path):
    stop_words = StopWordSet(tmp_path / "missing.txt")
    pipeline = ArticlePipeline(FakeRetriever({ARTICLE_URL: ARTICLE_HTML}), stop_words)
    with pytest.raises(ResourceLoadError):
        pipeline.generate(ARTICLE_URL)


def test_percent_to_keep_controls_summary_length():
    retriever = FakeRetriever({ARTICLE_URL: ARTICLE_HTML})
    everything = ArticlePipeline(retriever, percent_to_keep=1.0).generate(ARTICLE_URL)
    assert everything.summary.count(". \n\n") == 6
    nothing = ArticlePipeline(retriever, percent_to_keep=0.0).generate(ARTICLE_URL)
    assert nothing.summary == ""


def test_generate_many_preserves_submission_order(pipeline):
    urls = [ARTICLE_URL, "not a url", "http://example.com/empty"]
    queue = pipeline.generate_many(urls)
    assert [article.url for article in queue] == urls
    assert queue.popleft().summary == EXPECTED_SUMMARY
    assert queue.popleft().title == "UNKNOWN"
    assert queue.popleft().summary == ""
    assert not queue


def test_from_config_loads_stop_words_up_front(tmp_path):
    words = tmp_path / "words.txt"
    words.write_bytes(b"divers\r\ncave")
    config = {"summarizer": {"stop_words_path": str(words), "percent_to_keep": 0.5}}
    pipeline = ArticlePipeline.from_config(config, retriever=FakeRetriever())
    assert pipeline.stop_words.loaded
    assert pipeline.stop_words.contains("divers")
    assert pipeline.percent_to_keep == 0.5


def test_summarize_text_empty_input():
    stop_words = StopWordSet()
    stop_words.load()
    assert summarize_text("", stop_words) == ""


def test_parse_url_block_trims_carriage_returns():
    block = "http://a.example/\r\nhttp://b.example/\r\n\r\n  http://c.example/  \n"
    assert parse_url_block(block) == ["http://a.example/", "http://b.example/", "http://c.example/"]


def test_from_config_reads_relative_stop_words_from_data_dir(tmp_path, monkeypatch):
    data_dir = tmp_path / "data"
    (data_dir / "lists").mkdir(parents=True)
    (data_dir / "lists" / "words.txt").write_bytes(b"rain\r\ntown")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TLDR_DATA_DIR", str(data_dir))

    config = {"summarizer": {"stop_words_path": "lists/words.txt"}}
    pipeline = ArticlePipeline.from_config(config, retriever=FakeRetriever())

    assert pipeline.stop_words.path == data_dir.resolve() / "lists" / "words.txt"
    assert pipeline.stop_words.contains("rain")
