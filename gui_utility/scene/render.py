# Rendering of the UI scene graph onto pygame surfaces
# Contains: absolute layout, 9-slice scaling, background/image drawing

import pygame
from pygame.math import Vector2

from .types import ScaleType

IMAGE_CLASSES = ("ImageLabel", "ImageButton")


def absolute_scale(instance):
    """Product of every UIScale on the instance and its ancestors"""
    scale = 1.0
    node = instance
    while node is not None:
        for child in node.get_children():
            if child.class_name == "UIScale":
                scale *= child.scale
        node = node.parent
    return scale


def absolute_rect(gui_object):
    parent = gui_object.parent
    origin = Vector2(0, 0)
    parent_scale = 1.0
    if parent is not None:
        parent_scale = absolute_scale(parent)
        if parent.is_a("GuiObject"):
            origin = Vector2(absolute_rect(parent).topleft)

    size = Vector2(gui_object.size) * absolute_scale(gui_object)
    position = origin + Vector2(gui_object.position) * parent_scale
    position -= Vector2(gui_object.anchor_point).elementwise() * size
    return pygame.Rect(round(position.x), round(position.y), round(size.x), round(size.y))


def _source_spans(low, high, length):
    low = max(0, min(low, length))
    high = max(low, min(high, length))
    if high > low:
        center = (low, high - low)
    else:
        # Zero-width centre, sample a single pixel
        start = min(low, length - 1)
        center = (start, 1)
    return [(0, low), center, (high, length - high)]


def _target_spans(first, last, length):
    if first + last > length:
        factor = length / (first + last)
        first *= factor
        last *= factor
    first = int(round(first))
    last = int(round(last))
    if first + last > length:
        last = length - first
    return [(0, first), (first, length - first - last), (length - last, last)]


def nine_slice(image, slice_center, size, slice_scale=1.0):
    """
    Scale `image` to `size` keeping the corners outside `slice_center`
    (min_x, min_y, max_x, max_y) at native size times `slice_scale`.
    Edges stretch along one axis, the centre along both.
    """
    width, height = max(0, int(size[0])), max(0, int(size[1]))
    target = pygame.Surface((width, height), pygame.SRCALPHA)
    target.fill((0, 0, 0, 0))
    if width == 0 or height == 0:
        return target

    img_w, img_h = image.get_size()
    min_x, min_y, max_x, max_y = slice_center
    src_cols = _source_spans(min_x, max_x, img_w)
    src_rows = _source_spans(min_y, max_y, img_h)
    dst_cols = _target_spans(src_cols[0][1] * slice_scale, src_cols[2][1] * slice_scale, width)
    dst_rows = _target_spans(src_rows[0][1] * slice_scale, src_rows[2][1] * slice_scale, height)

    for (sy, sh), (dy, dh) in zip(src_rows, dst_rows):
        for (sx, sw), (dx, dw) in zip(src_cols, dst_cols):
            if sw <= 0 or sh <= 0 or dw <= 0 or dh <= 0:
                continue
            piece = image.subsurface(pygame.Rect(sx, sy, sw, sh))
            if (sw, sh) != (dw, dh):
                piece = pygame.transform.scale(piece, (dw, dh))
            # Pieces never overlap, MAX copies them onto the empty target as-is
            target.blit(piece, (dx, dy), special_flags=pygame.BLEND_RGBA_MAX)
    return target


def _alpha(transparency):
    return round(255 * (1 - max(0.0, min(1.0, transparency))))


def _draw_background(gui_object, surface, rect):
    alpha = _alpha(gui_object.background_transparency)
    if alpha == 0:
        return
    color = gui_object.background_color.to_pygame(alpha)
    if alpha == 255:
        pygame.draw.rect(surface, color, rect)
    else:
        layer = pygame.Surface(rect.size, pygame.SRCALPHA)
        layer.fill(color)
        surface.blit(layer, rect.topleft)

    border = gui_object.border_size_pixel
    if border > 0:
        pygame.draw.rect(surface, gui_object.border_color.to_pygame(alpha),
                         rect.inflate(border * 2, border * 2), border)


def _draw_image(gui_object, surface, rect, resolver):
    if not gui_object.image or resolver is None or rect.width <= 0 or rect.height <= 0:
        return
    alpha = _alpha(gui_object.image_transparency)
    if alpha == 0:
        return

    image = resolver.resolve(gui_object.image)
    if gui_object.scale_type == ScaleType.SLICE:
        scale = gui_object.slice_scale * absolute_scale(gui_object)
        rendered = nine_slice(image, gui_object.slice_center, rect.size, scale)
    else:
        rendered = pygame.transform.scale(image, rect.size)

    rendered.fill(gui_object.image_color.to_pygame(alpha), special_flags=pygame.BLEND_RGBA_MULT)
    surface.blit(rendered, rect.topleft)


def _draw_children(instance, surface, resolver):
    children = sorted(instance.get_children(), key=lambda child: getattr(child, "z_index", 0))
    for child in children:
        draw(child, surface, resolver)


def draw(instance, surface, resolver=None):
    """Draw `instance` and its visible descendants onto `surface`"""
    if instance.is_a("ScreenGui"):
        if instance.enabled:
            _draw_children(instance, surface, resolver)
        return
    if not instance.is_a("GuiObject") or not instance.visible:
        return

    rect = absolute_rect(instance)
    _draw_background(instance, surface, rect)
    if instance.class_name in IMAGE_CLASSES:
        _draw_image(instance, surface, rect, resolver)

    if instance.clips_descendants:
        previous = surface.get_clip()
        surface.set_clip(rect.clip(previous))
        try:
            _draw_children(instance, surface, resolver)
        finally:
            surface.set_clip(previous)
    else:
        _draw_children(instance, surface, resolver)
