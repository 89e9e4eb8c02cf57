from chainburst.components.animation_clear import ClearAnimation
from chainburst.components.animation_drop import DropAnimation
from chainburst.events.bus import EventBus, EVENT_TICK, EVENT_ANIMATION_START, EVENT_ANIMATION_COMPLETE
from chainburst.systems.animation import AnimationSystem
from chainburst.world import create_world
from helpers import EventRecorder


def _setup(clear=0.3, drop=0.4):
    bus = EventBus()
    world = create_world(bus)
    system = AnimationSystem(world, bus, clear_duration=clear, drop_duration=drop)
    return bus, world, system, EventRecorder(bus, EVENT_ANIMATION_COMPLETE)


def test_clear_completes_after_its_duration():
    bus, world, system, rec = _setup()
    bus.emit(EVENT_ANIMATION_START, kind='clear', items=[(0, 0), (0, 1)])
    assert len(list(world.get_component(ClearAnimation))) == 2
    bus.emit(EVENT_TICK, dt=0.2)
    assert rec.events == []
    bus.emit(EVENT_TICK, dt=0.2)
    assert rec.of(EVENT_ANIMATION_COMPLETE) == [{'kind': 'clear', 'items': [(0, 0), (0, 1)]}]
    assert list(world.get_component(ClearAnimation)) == []


def test_drop_progress_is_clamped():
    bus, world, system, rec = _setup()
    bus.emit(EVENT_ANIMATION_START, kind='drop', items=[(3, 3)])
    bus.emit(EVENT_TICK, dt=0.2)
    (_, drop), = list(world.get_component(DropAnimation))
    assert 0.0 < drop.linear < 1.0
    bus.emit(EVENT_TICK, dt=5.0)
    assert rec.of(EVENT_ANIMATION_COMPLETE)[0]['kind'] == 'drop'
    assert system.active_kinds() == []


def test_zero_duration_completes_immediately():
    bus, world, system, rec = _setup(clear=0.0, drop=0.0)
    bus.emit(EVENT_ANIMATION_START, kind='clear', items=[(1, 1)])
    bus.emit(EVENT_ANIMATION_START, kind='drop', items=[(1, 1)])
    assert [p['kind'] for p in rec.of(EVENT_ANIMATION_COMPLETE)] == ['clear', 'drop']
    assert list(world.get_component(ClearAnimation)) == []


def test_empty_phase_completes_immediately():
    bus, world, system, rec = _setup()
    bus.emit(EVENT_ANIMATION_START, kind='drop', items=[])
    assert rec.of(EVENT_ANIMATION_COMPLETE) == [{'kind': 'drop', 'items': []}]


def test_unknown_kind_is_ignored():
    bus, world, system, rec = _setup()
    bus.emit(EVENT_ANIMATION_START, kind='sparkle', items=[(0, 0)])
    bus.emit(EVENT_TICK, dt=1.0)
    assert rec.events == []
    assert system.active_kinds() == []
