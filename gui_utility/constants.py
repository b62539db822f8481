# UI constants - all sizes relative to base resolution

# Base resolution the interfaces are designed at
BASE_SCREEN_SIZE_X = 1280
BASE_SCREEN_SIZE_Y = 720

# Auto-scale multiplier snaps down to multiples of this step.
# BASE_SCREEN_SIZE * step should stay an integer or images lose clarity.
SNAP_RESOLUTION_STEP = 0.05
SNAP_EPSILON = 1e-9

# Corner radius -> white circle asset. Every image must be a solid white,
# fully opaque circle on a transparent background, with corner arcs of
# radius `key`, or rounded panels will render wrong.
ASSET_SCHEME = "asset://"
CIRCULAR_IMAGES = {
    2: "asset://corner_radius_2",
    3: "asset://corner_radius_3",
    4: "asset://corner_radius_4",
    5: "asset://corner_radius_5",
    6: "asset://corner_radius_6",
    7: "asset://corner_radius_7",
    8: "asset://corner_radius_8",
    9: "asset://corner_radius_9",
    10: "asset://corner_radius_10",
}

# Properties carried over when a Frame is replaced by an ImageLabel
INHERITABLE_PROPERTIES = (
    "z_index", "clips_descendants", "visible", "auto_localize", "root_localization_table", "layout_order",
    "name", "size", "position", "anchor_point", "rotation", "active", "selectable",
)

# Colors (0-255, for direct pygame drawing)
COLOR_BG = (20, 20, 30)
COLOR_WHITE = (255, 255, 255)
COLOR_GRAY = (100, 100, 100)
COLOR_DARK_GRAY = (40, 40, 40)
COLOR_LIGHT_GRAY = (150, 150, 150)
COLOR_ACCENT = (220, 60, 60)

# Demo loop
FPS_CAP = 60
