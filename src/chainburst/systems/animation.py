from esper import World
from chainburst.events.bus import EVENT_TICK, EventBus, EVENT_ANIMATION_START, EVENT_ANIMATION_COMPLETE
from chainburst.components.animation_clear import ClearAnimation
from chainburst.components.animation_drop import DropAnimation
from chainburst.components.duration import Duration
from chainburst.constants import CLEAR_ANIMATION_SECONDS, DROP_ANIMATION_SECONDS


class AnimationSystem:
    """Drives timing of the clear and drop phases; each animated cell is its own entity.

    A phase whose duration is zero or less completes as soon as it starts,
    which lets tests and headless runs resolve whole cascades synchronously.
    """
    def __init__(self, world: World, event_bus: EventBus, *,
                 clear_duration: float = CLEAR_ANIMATION_SECONDS,
                 drop_duration: float = DROP_ANIMATION_SECONDS):
        self.world = world
        self.event_bus = event_bus
        self.clear_duration = clear_duration
        self.drop_duration = drop_duration
        event_bus.subscribe(EVENT_TICK, self.on_tick)
        event_bus.subscribe(EVENT_ANIMATION_START, self.on_animation_start)

    def on_animation_start(self, sender, **kwargs):
        kind = kwargs.get('kind')
        items = list(kwargs.get('items') or [])
        if kind == 'clear':
            if self.clear_duration <= 0:
                self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind='clear', items=items)
                return
            for pos in items:
                self.world.create_entity(ClearAnimation(pos=tuple(pos)), Duration(self.clear_duration))
            if not items:
                self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind='clear', items=items)
        elif kind == 'drop':
            if self.drop_duration <= 0:
                self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind='drop', items=items)
                return
            for pos in items:
                self.world.create_entity(DropAnimation(pos=tuple(pos)), Duration(self.drop_duration))
            if not items:
                self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind='drop', items=items)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        # Snapshot both phases first so a drop started mid-tick waits for the next one.
        clears = list(self.world.get_component(ClearAnimation))
        drops = list(self.world.get_component(DropAnimation))
        if clears:
            for ent, clear in clears:
                if clear.alpha > 0.0:
                    d = self.world.component_for_entity(ent, Duration)
                    clear.alpha = max(0.0, clear.alpha - dt / d.value)
            if all(clear.alpha <= 0.0 for _, clear in clears):
                positions = [clear.pos for _, clear in clears]
                for ent, _ in clears:
                    self.world.delete_entity(ent, immediate=True)
                self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind='clear', items=positions)
        if drops:
            for ent, drop in drops:
                if drop.linear < 1.0:
                    d = self.world.component_for_entity(ent, Duration)
                    drop.linear = min(1.0, drop.linear + dt / d.value)
            if all(drop.linear >= 1.0 for _, drop in drops):
                positions = [drop.pos for _, drop in drops]
                for ent, _ in drops:
                    self.world.delete_entity(ent, immediate=True)
                self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind='drop', items=positions)

    def active_kinds(self):
        kinds = []
        if list(self.world.get_component(ClearAnimation)):
            kinds.append('clear')
        if list(self.world.get_component(DropAnimation)):
            kinds.append('drop')
        return kinds
