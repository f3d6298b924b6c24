"""
Offline Asset Cache

Cache-first store for the static shell of the game. A fixed list of assets
is fetched once at install time; afterwards every request is answered from
the cache when possible and from the network (the fetcher) otherwise.
"""

import mimetypes
import os
import threading
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from ..utils.game_logger import game_logger


@dataclass
class CachedAsset:
    url: str
    body: bytes
    mimetype: str


Fetcher = Callable[[str], Optional[CachedAsset]]


def guess_mimetype(url: str) -> str:
    mimetype, _ = mimetypes.guess_type(url)
    return mimetype or 'application/octet-stream'


def static_file_fetcher(static_dir: str,
                        mounts: Optional[Dict[str, str]] = None,
                        index: str = 'index.html') -> Fetcher:
    """
    Creates a fetcher that reads assets from disk.

    Args:
        static_dir: Directory holding the shell assets
        mounts: URL prefix -> directory for assets kept elsewhere
        index: File served for "/"

    Paths escaping their directory are refused.
    """
    mounts = {prefix: os.path.abspath(directory) for prefix, directory in (mounts or {}).items()}
    static_root = os.path.abspath(static_dir)

    def fetch(url: str) -> Optional[CachedAsset]:
        root, relative = static_root, url.lstrip('/') or index
        for prefix, directory in mounts.items():
            if url.startswith(prefix):
                root, relative = directory, url[len(prefix):]
                break

        path = os.path.abspath(os.path.join(root, relative))
        if not path.startswith(root + os.sep) or not os.path.isfile(path):
            return None
        with open(path, 'rb') as f:
            body = f.read()
        return CachedAsset(url=url, body=body, mimetype=guess_mimetype(path))

    return fetch


class AssetCache:
    """
    Named cache of static assets.

    Attributes:
        cache_name: Versioned cache name shared with the service worker
        urls: Assets stored at install time
    """

    def __init__(self, cache_name: str, urls: Iterable[str], fetcher: Fetcher):
        self.cache_name = cache_name
        self.urls: List[str] = list(urls)
        self._fetcher = fetcher
        self._entries: Dict[str, CachedAsset] = {}
        self._lock = threading.Lock()

    def install(self) -> int:
        """
        Fetches and stores every precache asset.

        Returns:
            int: Number of cached assets

        Raises:
            FileNotFoundError: If any precache asset cannot be fetched
        """
        fetched: Dict[str, CachedAsset] = {}
        for url in self.urls:
            asset = self._fetcher(url)
            if asset is None:
                raise FileNotFoundError(f"Precache asset not available: {url}")
            fetched[url] = asset

        with self._lock:
            self._entries.update(fetched)

        game_logger.logger.info(f"Asset cache '{self.cache_name}' installed with {len(fetched)} assets")
        return len(fetched)

    def match(self, url: str) -> Optional[CachedAsset]:
        with self._lock:
            return self._entries.get(url)

    def fetch(self, url: str) -> Optional[CachedAsset]:
        """Serves an asset from the cache first and the network second."""
        cached = self.match(url)
        if cached is not None:
            return cached
        return self._fetcher(url)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


# Global cache instance
_asset_cache: Optional[AssetCache] = None


def get_asset_cache() -> Optional[AssetCache]:
    """Get the global asset cache instance."""
    return _asset_cache


def initialize_asset_cache(cache_name: str, urls: Iterable[str], fetcher: Fetcher) -> AssetCache:
    """Initialize and install the global asset cache."""
    global _asset_cache
    _asset_cache = AssetCache(cache_name, urls, fetcher)
    _asset_cache.install()
    return _asset_cache
