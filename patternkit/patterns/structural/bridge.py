"""Bridge pattern: video players and streaming qualities.

Subclassing every combination (``WebHDPlayer``, ``MobileSDPlayer``, ...)
multiplies classes by platforms times qualities.

Platform (the abstraction) and quality (the implementation) vary
independently; a player holds a quality and delegates loading to it.
"""
from abc import ABC, abstractmethod
from typing import List


class VideoQuality(ABC):
    @abstractmethod
    def load(self, title: str) -> str:
        ...


class SDQuality(VideoQuality):
    def load(self, title: str) -> str:
        return f"Streaming {title} in SD Quality"


class HDQuality(VideoQuality):
    def load(self, title: str) -> str:
        return f"Streaming {title} in HD Quality"


class UltraHDQuality(VideoQuality):
    def load(self, title: str) -> str:
        return f"Streaming {title} in 4K Ultra HD Quality"


class VideoPlayer(ABC):
    platform = ""

    def __init__(self, quality: VideoQuality):
        self.quality = quality

    def play(self, title: str) -> List[str]:
        lines = [f"{self.platform} Platform:", self.quality.load(title)]
        for line in lines:
            print(line)
        return lines


class WebPlayer(VideoPlayer):
    platform = "Web"


class MobilePlayer(VideoPlayer):
    platform = "Mobile"


def main() -> None:
    WebPlayer(HDQuality()).play("Interstellar")
    MobilePlayer(UltraHDQuality()).play("Inception")


if __name__ == "__main__":
    main()
