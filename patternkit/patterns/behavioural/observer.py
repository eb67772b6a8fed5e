"""Observer pattern: channel upload notifications.

A channel that calls ``send_email(...)`` and ``push_notification(...)``
directly after every upload must change whenever a new notification channel
appears.

Subscribers register with the channel and are told about uploads through one
``update`` method. Delivery goes through the event publisher as a
``VideoUploadedEvent``.
"""
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional, Tuple
from uuid import uuid4

from patternkit.domain.base.events import DomainEvent, VideoUploadedEvent
from patternkit.infrastructure.event import EventPublisher


class Subscriber(ABC):
    """Observer notified about new uploads."""

    @abstractmethod
    def update(self, video_title: str) -> str:
        """React to an upload and describe the notification sent."""


class EmailSubscriber(Subscriber):
    def __init__(self, email: str):
        self.email = email

    def update(self, video_title: str) -> str:
        message = f"Email sent to {self.email}: New video uploaded - {video_title}"
        print(message)
        return message


class MobileAppSubscriber(Subscriber):
    def __init__(self, username: str):
        self.username = username

    def update(self, video_title: str) -> str:
        message = f"In-app notification for {self.username}: New video - {video_title}"
        print(message)
        return message


class Channel:
    """Subject that notifies its subscribers when a video is uploaded."""

    def __init__(self, name: str, publisher: Optional[EventPublisher] = None):
        self.name = name
        # Names are for display; events are matched on the id
        self.channel_id = str(uuid4())
        self._publisher = publisher or EventPublisher()
        self._handlers: Dict[int, Tuple[Subscriber, Callable[[DomainEvent], None]]] = {}

    def subscribe(self, subscriber: Subscriber) -> None:
        if id(subscriber) in self._handlers:
            return

        def handler(event: DomainEvent) -> None:
            if event.aggregate_id == self.channel_id:
                subscriber.update(event.video_title)

        self._handlers[id(subscriber)] = (subscriber, handler)
        self._publisher.register(VideoUploadedEvent.__name__, handler)

    def unsubscribe(self, subscriber: Subscriber) -> bool:
        entry = self._handlers.pop(id(subscriber), None)
        if entry is None:
            return False
        return self._publisher.unregister(VideoUploadedEvent.__name__, entry[1])

    @property
    def subscribers(self) -> List[Subscriber]:
        return [subscriber for subscriber, _ in self._handlers.values()]

    def notify_subscribers(self, video_title: str) -> None:
        self._publisher.publish(
            VideoUploadedEvent(
                aggregate_id=self.channel_id,
                aggregate_type="Channel",
                metadata={"channel": self.name},
                video_title=video_title,
            )
        )

    def upload_video(self, video_title: str) -> None:
        print(f"{self.name} uploaded: {video_title}")
        print()
        self.notify_subscribers(video_title)


def main() -> None:
    channel = Channel("takeUforward")

    channel.subscribe(MobileAppSubscriber("raj"))
    channel.subscribe(EmailSubscriber("rahul@example.com"))

    channel.upload_video("observer-pattern")


if __name__ == "__main__":
    main()
