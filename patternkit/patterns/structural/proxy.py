"""Proxy pattern: caching video downloads.

Every caller downloading straight from the network repeats the same download
for popular videos, and adding caching at each call site duplicates it.

``CachedVideoDownloader`` has the same interface as the real downloader and
sits in front of it, serving repeats from memory.
"""
from abc import ABC, abstractmethod
from typing import Dict, Optional

from patternkit.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class VideoDownloader(ABC):
    @abstractmethod
    def download_video(self, video_url: str) -> str:
        ...


class RealVideoDownloader(VideoDownloader):
    def __init__(self):
        self.download_count = 0

    def download_video(self, video_url: str) -> str:
        self.download_count += 1
        print(f"Downloading video from URL: {video_url}")
        return f"Video content from {video_url}"


class CachedVideoDownloader(VideoDownloader):
    def __init__(self, downloader: Optional[RealVideoDownloader] = None):
        self.real_downloader = downloader or RealVideoDownloader()
        self._cache: Dict[str, str] = {}

    def download_video(self, video_url: str) -> str:
        if video_url in self._cache:
            print(f"Returning cached video for: {video_url}")
            return self._cache[video_url]

        print("Cache miss. Downloading...")
        video = self.real_downloader.download_video(video_url)
        self._cache[video_url] = video
        logger.debug("Cached video", url=video_url, cached=len(self._cache))
        return video


def main() -> None:
    downloader = CachedVideoDownloader()

    print("User 1 tries to download the video.")
    downloader.download_video("https://video.com/proxy-pattern")

    print()

    print("User 2 tries to download the same video again.")
    downloader.download_video("https://video.com/proxy-pattern")


if __name__ == "__main__":
    main()
