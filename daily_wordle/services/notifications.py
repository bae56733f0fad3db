"""
User Notifications

Messages the engine hands to the user-notification collaborator, plus the
callable types for the notifier and clipboard collaborators.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Tuple


class NotificationKind(Enum):
    WON = "won"
    LOST = "lost"
    COPIED = "copied"


@dataclass(frozen=True)
class Notification:
    """A one-shot message shown to the player."""
    kind: NotificationKind
    title: str
    message: str
    actions: Tuple[str, ...] = ()

    def to_dict(self) -> Dict:
        return {
            "kind": self.kind.value,
            "title": self.title,
            "message": self.message,
            "actions": list(self.actions),
        }


# Collaborators are plain callables so surfaces can plug in whatever they have
Notifier = Callable[[Notification], None]
Clipboard = Callable[[str], None]

SHARE_ACTION = "share"


def won_notification() -> Notification:
    return Notification(
        kind=NotificationKind.WON,
        title="You won! 🎉",
        message="Congratulations! Share your score with your friends! 🤩",
        actions=(SHARE_ACTION,),
    )


def lost_notification(word: str) -> Notification:
    return Notification(
        kind=NotificationKind.LOST,
        title="You lost!😭",
        message=f"The word was: {word}. Try again tomorrow 🤪",
    )


def copied_notification() -> Notification:
    return Notification(
        kind=NotificationKind.COPIED,
        title="Copied to clipboard 📋",
        message="You can now share it 🤩",
    )
