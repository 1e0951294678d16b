import io

import pytest

from termcrawl.domain.config import CrawlConfig
from termcrawl.domain.crawl_result import CrawlResult
from termcrawl.domain.page_content import PageContent
from termcrawl.exceptions import CrawlConstructionError, FetcherUnavailableError, PageFetchError, TopCountExceededError
from termcrawl.services.crawler import WebCrawler
from termcrawl.services.top_ranker import TopRanker

SEED = "https://seed.test/"


class _FakeWeb:
    def __init__(self, pages):
        self.pages = pages
        self.fetched = []

    def fetch(self, url, options):
        self.fetched.append(url)
        if url not in self.pages:
            raise PageFetchError(url, "unreachable")
        text, anchors = self.pages[url]
        return PageContent(text=text, anchors=tuple(anchors))


def _web():
    return _FakeWeb({
        SEED: ("Java Oracle", ["/a", "/b", "/c"]),
        "https://seed.test/a": ("java java java", []),
        "https://seed.test/b": ("oracle", []),
        "https://seed.test/c": ("java oracle java", []),
    })


def _config(tmp_path, **overrides):
    values = dict(
        seed_url=SEED,
        terms=("java", "oracle"),
        max_visited=10,
        top_n=2,
        raw_path=str(tmp_path / "Out.csv"),
        top_path=str(tmp_path / "OutTop.csv"),
    )
    values.update(overrides)
    return CrawlConfig(**values)


def test_construction_checks_seed_and_leaves_no_files(tmp_path):
    web = _web()
    WebCrawler(_config(tmp_path), web)
    assert web.fetched == [SEED]
    assert not (tmp_path / "Out.csv").exists()
    assert not (tmp_path / "OutTop.csv").exists()


def test_construction_fails_for_unreachable_seed(tmp_path):
    with pytest.raises(CrawlConstructionError, match="Can't construct crawler"):
        WebCrawler(_config(tmp_path), _FakeWeb({}))


def test_construction_fails_for_unwritable_raw_path(tmp_path):
    cfg = _config(tmp_path, raw_path=str(tmp_path / "no" / "such" / "Out.csv"))
    with pytest.raises(CrawlConstructionError, match="Can't write to file"):
        WebCrawler(cfg, _web())


def test_construction_fails_for_unwritable_top_path(tmp_path):
    cfg = _config(tmp_path, top_path=str(tmp_path / "missing-dir" / "OutTop.csv"))
    with pytest.raises(CrawlConstructionError, match="OutTop.csv"):
        WebCrawler(cfg, _web())


def test_start_writes_raw_and_top_tables(tmp_path):
    report = io.StringIO()
    crawler = WebCrawler(_config(tmp_path), _web(), ranker=TopRanker(report_stream=report))
    result = crawler.start()

    assert result is CrawlResult.NO_MORE_PAGES
    assert (tmp_path / "Out.csv").read_text(encoding="utf-8").splitlines() == [
        "URL,java,oracle",
        "https://seed.test/,1,1",
        "https://seed.test/a,3,0",
        "https://seed.test/b,0,1",
        "https://seed.test/c,2,1",
    ]
    assert (tmp_path / "OutTop.csv").read_text(encoding="utf-8").splitlines() == [
        "URL,java,oracle",
        "https://seed.test/a,3,0",
        "https://seed.test/c,2,1",
    ]
    assert report.getvalue().splitlines() == ["https://seed.test/a,3,0", "https://seed.test/c,2,1"]


def test_start_without_header(tmp_path):
    crawler = WebCrawler(_config(tmp_path, print_header=False, max_depth=1, top_n=1), _web(),
                         ranker=TopRanker(report_stream=io.StringIO()))
    result = crawler.start()
    assert result is CrawlResult.DEPTH_LIMIT_REACHED
    assert (tmp_path / "Out.csv").read_text(encoding="utf-8") == "https://seed.test/,1,1\n"
    assert (tmp_path / "OutTop.csv").read_text(encoding="utf-8") == "https://seed.test/,1,1\n"


def test_visit_limit_of_one_keeps_single_row(tmp_path):
    crawler = WebCrawler(_config(tmp_path, max_visited=1, top_n=1), _web(),
                         ranker=TopRanker(report_stream=io.StringIO()))
    assert crawler.start() is CrawlResult.VISIT_LIMIT_REACHED
    lines = (tmp_path / "Out.csv").read_text(encoding="utf-8").splitlines()
    assert lines[1:] == ["https://seed.test/,1,1"]


def test_top_n_beyond_recorded_rows_is_reported(tmp_path):
    # only the seed is recorded but three top rows are requested
    crawler = WebCrawler(_config(tmp_path, max_depth=1, top_n=3), _web(),
                         ranker=TopRanker(report_stream=io.StringIO()))
    with pytest.raises(TopCountExceededError):
        crawler.start()
    assert crawler.result is CrawlResult.DEPTH_LIMIT_REACHED


def test_construction_reports_missing_fetch_backend_separately(tmp_path):
    class _NoBrowser:
        def fetch(self, url, options):
            raise FetcherUnavailableError(url, "Playwright is not installed")

    with pytest.raises(CrawlConstructionError, match="Playwright is not installed") as excinfo:
        WebCrawler(_config(tmp_path), _NoBrowser())
    assert "Illegal startUrl" not in str(excinfo.value)
