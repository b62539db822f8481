import pytest
from pygame.math import Vector2

from gui_utility.errors import InvalidArgument
from gui_utility.scene import Signal, absolute_rect, absolute_scale, instances


def test_new_creates_and_parents():
    root = instances.new("ScreenGui")
    frame = instances.new("Frame", root)
    assert frame.class_name == "Frame"
    assert frame.name == "Frame"
    assert frame.parent is root
    assert root.get_children() == [frame]


def test_new_rejects_unknown_class():
    with pytest.raises(InvalidArgument, match="unknown class"):
        instances.new("TextBox")


def test_reparenting_moves_between_child_lists():
    a = instances.new("Frame")
    b = instances.new("Frame")
    child = instances.new("ImageLabel", a)
    child.parent = b
    assert a.get_children() == []
    assert b.get_children() == [child]
    assert child.is_descendant_of(b)


def test_children_keep_parenting_order():
    root = instances.new("ScreenGui")
    children = [instances.new("Frame", root) for _ in range(4)]
    children[1].parent = None
    children[1].parent = root
    assert root.get_children() == [children[0], children[2], children[3], children[1]]


def test_cycles_are_rejected():
    a = instances.new("Frame")
    b = instances.new("Frame", a)
    with pytest.raises(RuntimeError, match="cycle"):
        a.parent = b
    with pytest.raises(RuntimeError):
        a.parent = a


def test_destroy_is_recursive_and_locks_parent():
    root = instances.new("ScreenGui")
    frame = instances.new("Frame", root)
    child = instances.new("ImageLabel", frame)
    frame.destroy()

    assert frame.destroyed and child.destroyed
    assert root.get_children() == []
    with pytest.raises(RuntimeError, match="locked"):
        frame.parent = root


def test_lookup_helpers():
    root = instances.new("ScreenGui")
    frame = instances.new("Frame", root)
    frame.name = "Body"
    scale = instances.new("UIScale", frame)
    assert root.find_first_child("Body") is frame
    assert root.find_first_child("Missing") is None
    assert frame.find_first_child_of_class("UIScale") is scale
    assert root.get_descendants() == [frame, scale]
    assert frame.is_a("GuiObject") and frame.is_a("Instance")
    assert not frame.is_a("ImageLabel")


def test_image_button_click_fires_activated():
    button = instances.new("ImageButton")
    clicks = []
    button.activated.connect(clicks.append)
    assert button.click()
    button.active = False
    assert not button.click()
    assert clicks == [button]


def test_signal_disconnect():
    signal = Signal()
    calls = []
    connection = signal.connect(lambda value: calls.append(value))
    signal.fire(1)
    connection.disconnect()
    connection.disconnect()
    signal.fire(2)
    assert calls == [1]
    assert len(signal) == 0


def test_absolute_layout_with_scale_and_anchor():
    root = instances.new("ScreenGui")
    instances.new("UIScale", root).scale = 2
    panel = instances.new("Frame", root)
    panel.position = Vector2(100, 50)
    panel.size = Vector2(200, 100)
    child = instances.new("Frame", panel)
    child.position = Vector2(10, 10)
    child.size = Vector2(20, 20)
    child.anchor_point = Vector2(0.5, 0.5)

    assert absolute_scale(child) == 2
    assert absolute_rect(panel).topleft == (200, 100)
    assert absolute_rect(panel).size == (400, 200)
    # 200 + 10 * 2 - 0.5 * 40
    assert absolute_rect(child).topleft == (200, 100)
    assert absolute_rect(child).size == (40, 40)
