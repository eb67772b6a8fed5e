"""Iterator pattern: walking a playlist.

Handing out the playlist's internal list lets callers depend on how videos
are stored and mutate it behind the playlist's back.

The playlist instead creates an iterator that hides the storage. It offers the
explicit ``has_next``/``next`` pair as well as Python's iterator protocol, so
``for video in playlist`` just works.
"""
from dataclasses import dataclass
from typing import Iterator, List


@dataclass(frozen=True)
class Video:
    title: str


class PlaylistIterator(Iterator[Video]):
    """Cursor over a snapshot of a playlist's videos."""

    def __init__(self, videos: List[Video]):
        self._videos = list(videos)
        self._position = 0

    def has_next(self) -> bool:
        return self._position < len(self._videos)

    def next(self) -> Video:
        if not self.has_next():
            raise StopIteration
        video = self._videos[self._position]
        self._position += 1
        return video

    def __next__(self) -> Video:
        return self.next()

    def __iter__(self) -> "PlaylistIterator":
        return self


class Playlist:
    """Ordered collection of videos."""

    def __init__(self):
        self._videos: List[Video] = []

    def add_video(self, video: Video) -> None:
        self._videos.append(video)

    def create_iterator(self) -> PlaylistIterator:
        return PlaylistIterator(self._videos)

    def __iter__(self) -> PlaylistIterator:
        return self.create_iterator()

    def __len__(self) -> int:
        return len(self._videos)


def main() -> None:
    playlist = Playlist()
    playlist.add_video(Video("LLD Tutorial"))
    playlist.add_video(Video("System Design Basics"))

    iterator = playlist.create_iterator()
    while iterator.has_next():
        print(iterator.next().title)


if __name__ == "__main__":
    main()
