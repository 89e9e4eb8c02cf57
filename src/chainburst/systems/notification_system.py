import logging

from esper import World
from chainburst.components.notification_feed import Notification
from chainburst.events.bus import (EventBus, EVENT_NEW_HIGH_SCORE, EVENT_COMBO_ACHIEVED, EVENT_LEVEL_UP,
                                   EVENT_GAME_OVER)
from chainburst.utils.game_state import get_notification_feed

logger = logging.getLogger(__name__)


class NotificationSystem:
    """Turns game notifications into toast entries on the NotificationFeed."""
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_NEW_HIGH_SCORE, self.on_new_high_score)
        self.event_bus.subscribe(EVENT_COMBO_ACHIEVED, self.on_combo_achieved)
        self.event_bus.subscribe(EVENT_LEVEL_UP, self.on_level_up)
        self.event_bus.subscribe(EVENT_GAME_OVER, self.on_game_over)

    def on_new_high_score(self, sender, **kwargs):
        self._push('high_score', "New High Score!", f"Score: {kwargs.get('score', 0)}")

    def on_combo_achieved(self, sender, **kwargs):
        depth = kwargs.get('depth', 0)
        self._push('combo', f"{depth}x Combo!", f"Bonus: +{kwargs.get('bonus', 0)} points")

    def on_level_up(self, sender, **kwargs):
        self._push('level_up', f"Level {kwargs.get('level')}!", f"New target: {kwargs.get('target')}")

    def on_game_over(self, sender, **kwargs):
        self._push('game_over', "Game Over", f"Final score: {kwargs.get('final_score', 0)}")

    def _push(self, kind: str, title: str, description: str):
        logger.info("%s %s", title, description)
        feed = get_notification_feed(self.world)
        if feed is None:
            return
        feed.push(Notification(kind=kind, title=title, description=description))
