from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional

from chainburst.constants import NOTIFICATION_FEED_SIZE


@dataclass(frozen=True, slots=True)
class Notification:
    kind: str
    title: str
    description: str


@dataclass(slots=True)
class NotificationFeed:
    """Bounded queue of toast entries, newest last.

    Filled by NotificationSystem; the HUD shows the latest entry.
    """
    entries: Deque[Notification] = field(default_factory=lambda: deque(maxlen=NOTIFICATION_FEED_SIZE))

    def push(self, notification: Notification) -> None:
        self.entries.append(notification)

    def latest(self) -> Optional[Notification]:
        return self.entries[-1] if self.entries else None

    def kinds(self) -> List[str]:
        return [entry.kind for entry in self.entries]

    def clear(self) -> None:
        self.entries.clear()
