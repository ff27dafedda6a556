import dearpygui.dearpygui as dpg

from salvage import OverlayConfig, SalvageOverlay, ShipwreckTracker, WorldTile, adjust_config
from ui.interaction import LEFT, PANEL_POS, PANEL_SIZE, RIGHT, apply_map_click, over_panel
from ui.projection import TILE_SIZE, Camera, TileProjector, tile_to_pixel

SEA_COLOR = (18, 52, 86, 255)
GRID_COLOR = (40, 80, 120, 255)


class DpgCanvas:
    """Canvas collaborator backed by a dearpygui drawlist."""

    def __init__(self, parent):
        self.parent = parent

    def fill_polygon(self, polygon, color):
        dpg.draw_polygon(list(polygon), color=(0, 0, 0, 0), fill=color, thickness=0, parent=self.parent)

    def draw_polygon(self, polygon, color, width):
        points = list(polygon)
        dpg.draw_polygon(points + points[:1], color=color, thickness=width, parent=self.parent)

    def draw_line(self, p0, p1, color, width):
        dpg.draw_line(p0, p1, color=color, thickness=width, parent=self.parent)


class MapView:
    def __init__(self, tracker: ShipwreckTracker, config: OverlayConfig | None = None, size=(800, 600), plane=0):
        self.tracker = tracker
        self.size = size
        self.camera = Camera(*size)
        self.projector = TileProjector(self.camera, size, plane=plane)
        self._next_id = 1

        dpg.create_context()
        dpg.create_viewport(title="Salvage Overlay", width=size[0], height=size[1])
        with dpg.window(tag="_map_window", width=size[0], height=size[1], no_move=True, no_resize=True, no_title_bar=True):
            self.canvas = dpg.add_drawlist(width=size[0], height=size[1], tag="_canvas")
        self.overlay = SalvageOverlay(self.projector, DpgCanvas(self.canvas), config)
        config = self.overlay.config
        with dpg.window(tag="_options_window", pos=PANEL_POS, width=PANEL_SIZE[0], height=PANEL_SIZE[1], no_resize=True, no_move=True, no_title_bar=True):
            dpg.add_text("Overlay")
            dpg.add_checkbox(label="Salvage range (R)", tag="_show_salvage_range", default_value=config.show_salvage_range, callback=self._toggle, user_data="show_salvage_range")
            dpg.add_checkbox(label="Overlap (O)", tag="_show_overlap", default_value=config.show_overlap, callback=self._toggle, user_data="show_overlap")
            dpg.add_checkbox(label="Active wrecks", tag="_highlight_active", default_value=config.highlight_active, callback=self._toggle, user_data="highlight_active")
            dpg.add_checkbox(label="Depleted wrecks", tag="_highlight_depleted", default_value=config.highlight_depleted, callback=self._toggle, user_data="highlight_depleted")
        dpg.set_primary_window("_map_window", True)
        with dpg.handler_registry():
            dpg.add_mouse_click_handler(callback=self._on_click)
            dpg.add_mouse_drag_handler(button=dpg.mvMouseButton_Middle, callback=self._on_drag)
            dpg.add_mouse_wheel_handler(callback=self._on_scroll)
            dpg.add_key_press_handler(callback=self._on_key)
        dpg.setup_dearpygui()
        dpg.show_viewport()

    # event callbacks
    def _on_click(self, sender, app_data):
        pos = dpg.get_mouse_pos()
        if dpg.is_item_hovered("_options_window") or over_panel(pos):
            return
        if app_data == dpg.mvMouseButton_Left:
            button = LEFT
        elif app_data == dpg.mvMouseButton_Right:
            button = RIGHT
        else:
            return
        tile = self.projector.tile_at(pos)
        if apply_map_click(self.tracker, tile, button, f"wreck-{self._next_id}") == "spawned":
            self._next_id += 1

    def _on_drag(self, sender, app_data):
        dx, dy = app_data[1], app_data[2]
        self.camera.pan(dx, dy)

    def _on_scroll(self, sender, app_data):
        pos = dpg.get_mouse_pos()
        self.camera.change_zoom(app_data * 0.1, pos)

    def _on_key(self, sender, app_data):
        if app_data == dpg.mvKey_R:
            self._set("show_salvage_range", not self.overlay.config.show_salvage_range)
        elif app_data == dpg.mvKey_O:
            self._set("show_overlap", not self.overlay.config.show_overlap)
        elif app_data == dpg.mvKey_C:
            self.tracker.clear()

    def _toggle(self, sender, app_data, user_data):
        """Callback from option checkboxes."""
        self._set(user_data, bool(app_data))

    def _set(self, key, value):
        self.overlay.config = adjust_config(self.overlay.config, **{key: value})
        dpg.set_value(f"_{key}", value)

    def draw_grid(self):
        dpg.draw_rectangle((0, 0), self.size, color=SEA_COLOR, fill=SEA_COLOR, parent=self.canvas)
        if self.camera.zoom < 0.5:
            return
        step = TILE_SIZE * self.camera.zoom
        ox, oy = self.camera.apply(tile_to_pixel(0, 0))
        x = ox % step
        while x < self.size[0]:
            dpg.draw_line((x, 0), (x, self.size[1]), color=GRID_COLOR, thickness=1, parent=self.canvas)
            x += step
        y = oy % step
        while y < self.size[1]:
            dpg.draw_line((0, y), (self.size[0], y), color=GRID_COLOR, thickness=1, parent=self.canvas)
            y += step

    def draw_map(self):
        dpg.delete_item(self.canvas, children_only=True)
        self.draw_grid()
        self.overlay.render(self.tracker.list_active_anchors())

    def focus(self, tile: WorldTile):
        self.camera.center_on(tile, self.size)

    def run(self):
        while dpg.is_dearpygui_running():
            self.draw_map()
            dpg.render_dearpygui_frame()
        dpg.destroy_context()


if __name__ == "__main__":
    tracker = ShipwreckTracker()
    tracker.spawn("wreck-a", WorldTile(100, 100, 0))
    tracker.spawn("wreck-b", WorldTile(110, 100, 0))
    view = MapView(tracker)
    view.focus(WorldTile(105, 101, 0))
    view.run()
