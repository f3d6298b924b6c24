import pytest

from word_learner.config.game_settings import PRECACHE_ASSETS, WORDS_DIR
from word_learner.services.asset_cache import AssetCache, CachedAsset, static_file_fetcher


class FakeNetwork:
    def __init__(self, files):
        self.files = dict(files)
        self.requests = []

    def __call__(self, url):
        self.requests.append(url)
        if url not in self.files:
            return None
        return CachedAsset(url=url, body=self.files[url], mimetype="text/plain")


def test_install_caches_every_asset():
    network = FakeNetwork({"/a.css": b"a", "/b.js": b"b"})
    cache = AssetCache("test-v1", ["/a.css", "/b.js"], network)
    assert cache.install() == 2
    assert len(cache) == 2
    assert cache.match("/a.css").body == b"a"


def test_install_fails_when_an_asset_is_missing():
    cache = AssetCache("test-v1", ["/a.css", "/missing.js"], FakeNetwork({"/a.css": b"a"}))
    with pytest.raises(FileNotFoundError):
        cache.install()
    assert len(cache) == 0


def test_fetch_prefers_cache_over_network():
    network = FakeNetwork({"/a.css": b"old"})
    cache = AssetCache("test-v1", ["/a.css"], network)
    cache.install()

    network.files["/a.css"] = b"new"
    assert cache.fetch("/a.css").body == b"old"
    assert network.requests == ["/a.css"]


def test_fetch_falls_back_to_network():
    network = FakeNetwork({"/a.css": b"a", "/extra.txt": b"x"})
    cache = AssetCache("test-v1", ["/a.css"], network)
    cache.install()

    assert cache.fetch("/extra.txt").body == b"x"
    assert cache.fetch("/nowhere") is None
    assert cache.match("/extra.txt") is None


def test_static_file_fetcher_reads_shell_and_word_lists(app):
    fetch = static_file_fetcher(app.root_path + "/static", mounts={"/words/": WORDS_DIR})

    index = fetch("/")
    assert index.mimetype == "text/html"
    assert b"Word Learner" in index.body
    assert fetch("/words/en.json").mimetype == "application/json"
    for url in PRECACHE_ASSETS:
        assert fetch(url) is not None


def test_static_file_fetcher_refuses_paths_outside_root(app):
    fetch = static_file_fetcher(app.root_path + "/static")
    assert fetch("/../__init__.py") is None
    assert fetch("/missing.css") is None
