import pytest

from celestial.ecs import MAX_GROUPS, Component, EntityManager


class Recorder(Component):
    def __init__(self, log, name="r"):
        self.log = log
        self.name = name
        self.entity_at_init = None

    def init(self):
        self.entity_at_init = self.entity
        self.log.append(("init", self.name))

    def update(self):
        self.log.append(("update", self.name))

    def render(self):
        self.log.append(("render", self.name))


class Other(Component):
    pass


def test_add_entity_belongs_to_manager():
    manager = EntityManager()
    entity = manager.add_entity()
    assert entity.manager is manager
    assert manager.entities == (entity,)
    assert entity.is_active() is True


def test_add_component_attaches_before_init():
    manager = EntityManager()
    entity = manager.add_entity()
    log = []
    component = entity.add_component(Recorder, log, name="a")
    assert component.entity is entity
    assert component.entity_at_init is entity
    assert log == [("init", "a")]
    assert entity.get_component(Recorder) is component
    assert entity.has_component(Recorder) is True
    assert entity.has_component(Other) is False


def test_get_missing_component_raises():
    entity = EntityManager().add_entity()
    with pytest.raises(KeyError):
        entity.get_component(Other)


def test_update_and_render_follow_insertion_order():
    manager = EntityManager()
    log = []
    first = manager.add_entity()
    first.add_component(Recorder, log, "a")
    first.add_component(Other)
    second = manager.add_entity()
    second.add_component(Recorder, log, "b")
    log.clear()
    manager.update()
    manager.render()
    assert log == [
        ("update", "a"),
        ("update", "b"),
        ("render", "a"),
        ("render", "b"),
    ]


def test_same_type_added_twice_keeps_both_running():
    entity = EntityManager().add_entity()
    log = []
    entity.add_component(Recorder, log, "first")
    second = entity.add_component(Recorder, log, "second")
    assert entity.get_component(Recorder) is second
    log.clear()
    entity.update()
    assert log == [("update", "first"), ("update", "second")]


def test_destroy_and_refresh_removes_entity():
    manager = EntityManager()
    keep = manager.add_entity()
    gone = manager.add_entity()
    gone.add_group(2)
    gone.destroy()
    assert gone.is_active() is False
    assert gone in manager.entities
    manager.refresh()
    assert manager.entities == (keep,)
    assert manager.get_group(2) == []


def test_groups_track_membership():
    manager = EntityManager()
    entity = manager.add_entity()
    entity.add_group(3)
    assert entity.has_group(3) is True
    assert manager.get_group(3) == [entity]
    entity.delete_group(3)
    assert entity.has_group(3) is False
    assert manager.get_group(3) == [entity]
    manager.refresh()
    assert manager.get_group(3) == []
    assert manager.entities == (entity,)


@pytest.mark.parametrize("group", [-1, MAX_GROUPS])
def test_group_out_of_range(group):
    entity = EntityManager().add_entity()
    with pytest.raises(IndexError):
        entity.add_group(group)
    with pytest.raises(IndexError):
        entity.has_group(group)