import importlib

MODULES = [
    'termcrawl.cli',
    'termcrawl.config',
    'termcrawl.container',
    'termcrawl.domain',
    'termcrawl.services.crawl_scheduler',
    'termcrawl.services.crawler',
    'termcrawl.services.fetcher',
    'termcrawl.services.headless_browser_fetcher',
    'termcrawl.services.top_ranker',
]

def test_imports():
    for m in MODULES:
        importlib.import_module(m)
