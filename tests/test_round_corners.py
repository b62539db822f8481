import pytest
from pygame.math import Vector2

from gui_utility import round_corners
from gui_utility.constants import CIRCULAR_IMAGES
from gui_utility.errors import IncompatibleTarget, InvalidArgument
from gui_utility.round_corners import CornerRounder, round_element, round_many, round_one
from gui_utility.scene import Color3, ScaleType, instances


@pytest.mark.parametrize("radius", sorted(CIRCULAR_IMAGES))
def test_image_label_is_sliced_for_every_radius(radius):
    label = instances.new("ImageLabel")
    rounded = round_one(label, radius)

    assert rounded is label
    assert rounded.slice_center == (radius, radius, radius, radius)
    assert rounded.image == CIRCULAR_IMAGES[radius]
    assert rounded.scale_type == ScaleType.SLICE
    assert rounded.slice_scale == 1
    assert rounded.background_transparency == 1
    assert rounded.border_size_pixel == 0


def test_image_button_is_rounded_in_place():
    button = instances.new("ImageButton")
    assert round_one(button, 4) is button
    assert button.image == CIRCULAR_IMAGES[4]


def test_zero_radius_is_a_no_op(frame):
    parent = frame.parent
    assert round_one(frame, 0) is frame
    assert not frame.destroyed
    assert frame.parent is parent
    assert frame.background_transparency == 0


@pytest.mark.parametrize("radius", [1, 11, -2, 2.5])
def test_unsupported_radius_is_rejected(radius):
    label = instances.new("ImageLabel")
    with pytest.raises(InvalidArgument):
        round_one(label, radius)
    assert label.image == ""


@pytest.mark.parametrize("radius", ["4", None, True])
def test_non_numeric_radius_is_rejected(radius):
    with pytest.raises(InvalidArgument, match="must be a number"):
        round_one(instances.new("ImageLabel"), radius)


def test_incompatible_class_is_rejected():
    with pytest.raises(IncompatibleTarget):
        round_one(instances.new("UIScale"), 4)
    with pytest.raises(IncompatibleTarget):
        round_one(None, 4)


def test_frame_is_replaced_by_image_label(frame):
    parent = frame.parent
    frame.z_index = 3
    frame.visible = False
    frame.layout_order = 7
    frame.position = Vector2(12, 34)
    frame.anchor_point = Vector2(0.5, 1)
    frame.rotation = 15
    frame.active = True
    frame.selectable = True
    frame.clips_descendants = True
    frame.background_color = Color3(0.2, 0.4, 0.6)
    frame.background_transparency = 0.25
    children = [instances.new("Frame", frame), instances.new("ImageLabel", frame), instances.new("UIScale", frame)]

    rounded = round_one(frame, 6)

    assert rounded is not frame
    assert rounded.class_name == "ImageLabel"
    assert rounded.name == "Panel"
    assert rounded.size == Vector2(100, 60)
    assert rounded.position == Vector2(12, 34)
    assert rounded.anchor_point == Vector2(0.5, 1)
    assert rounded.rotation == 15
    assert rounded.z_index == 3
    assert rounded.visible is False
    assert rounded.layout_order == 7
    assert rounded.active is True
    assert rounded.selectable is True
    assert rounded.clips_descendants is True
    assert rounded.image_color == Color3(0.2, 0.4, 0.6)
    assert rounded.image_transparency == 0.25
    assert rounded.background_transparency == 1
    assert rounded.get_children() == children
    assert all(child.parent is rounded for child in children)

    assert rounded.parent is parent
    assert frame.destroyed
    assert frame not in parent.get_children()
    assert parent.get_children() == [rounded]


def test_round_many_rounds_every_element():
    labels = [instances.new("ImageLabel"), instances.new("ImageButton")]
    assert round_many(labels, 5) is None
    assert all(label.slice_center == (5, 5, 5, 5) for label in labels)


def test_round_many_validates_radius_before_touching_elements():
    labels = [instances.new("ImageLabel"), instances.new("ImageLabel")]
    with pytest.raises(InvalidArgument):
        round_many(labels, 12)
    assert all(label.image == "" for label in labels)


def test_round_many_replaces_frames_in_hierarchy():
    root = instances.new("ScreenGui")
    frames = [instances.new("Frame", root), instances.new("Frame", root)]
    round_many(frames, 3)
    assert all(frame.destroyed for frame in frames)
    assert [child.class_name for child in root.get_children()] == ["ImageLabel", "ImageLabel"]


def test_round_element_dispatches_on_target():
    label = instances.new("ImageLabel")
    assert round_element(label, 2) is label
    assert round_element([instances.new("ImageLabel")], 2) is None


class FakePanel:
    def __init__(self, class_name):
        self.class_name = class_name
        self.name = class_name
        self.parent = None
        self.children = []
        self.destroyed = False

    def get_children(self):
        return list(self.children)

    def destroy(self):
        self.destroyed = True


def test_rounder_uses_injected_factory():
    created = []

    def create_instance(class_name):
        panel = FakePanel(class_name)
        created.append(panel)
        return panel

    frame = FakePanel("Frame")
    for name in round_corners.INHERITABLE_PROPERTIES:
        setattr(frame, name, name)
    frame.background_color = "red"
    frame.background_transparency = 0.5

    rounded = CornerRounder(create_instance).round_one(frame, 8)

    assert created == [rounded]
    assert rounded.class_name == "ImageLabel"
    assert rounded.z_index == "z_index"
    assert rounded.image_color == "red"
    assert rounded.slice_center == (8, 8, 8, 8)
    assert frame.destroyed


def test_destroyed_frame_is_rejected_without_building_a_replacement():
    created = []

    def create_instance(class_name):
        instance = instances.new(class_name)
        created.append(instance)
        return instance

    frame = instances.new("Frame")
    frame.destroy()
    with pytest.raises(IncompatibleTarget, match="destroyed"):
        CornerRounder(create_instance).round_one(frame, 4)
    assert created == []


def test_failed_conversion_leaves_frame_untouched(frame):
    def create_instance(class_name):
        raise RuntimeError("out of instances")

    parent = frame.parent
    child = instances.new("ImageLabel", frame)

    with pytest.raises(RuntimeError, match="out of instances"):
        CornerRounder(create_instance).round_one(frame, 6)

    assert not frame.destroyed
    assert frame.parent is parent
    assert parent.get_children() == [frame]
    assert frame.get_children() == [child]
    assert frame.background_transparency == 0
    assert frame.border_size_pixel == 1
