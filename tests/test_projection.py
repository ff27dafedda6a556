import os
import sys
import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from salvage.tiles import WorldTile
from ui.projection import TILE_SIZE, Camera, TileProjector, pixel_to_tile, tile_to_pixel


def make_projector(size=(800, 600), plane=0):
    camera = Camera(*size)
    return TileProjector(camera, size, plane=plane)


def test_tile_pixel_round_trip():
    px, py = tile_to_pixel(3, 4)
    assert (px, py) == (3 * TILE_SIZE, -4 * TILE_SIZE)
    assert pixel_to_tile(px + 1, py - 1) == (3, 4)
    assert pixel_to_tile(-1, 1) == (-1, -1)


def test_tile_corners_are_sw_se_ne_nw():
    projector = make_projector()
    sw, se, ne, nw = projector.project_tile(WorldTile(0, 0, 0))
    assert sw == (400, 300)
    assert se[0] > sw[0] and se[1] == sw[1]
    assert ne[0] == se[0] and ne[1] < se[1]
    assert nw[0] == sw[0] and nw[1] == ne[1]


def test_area_spans_footprint():
    projector = make_projector()
    sw, se, ne, nw = projector.project_area(WorldTile(0, 0, 0), 2)
    assert se[0] - sw[0] == pytest.approx(2 * TILE_SIZE)
    assert sw[1] - nw[1] == pytest.approx(2 * TILE_SIZE)


def test_other_plane_and_off_screen_tiles_are_absent():
    projector = make_projector()
    assert projector.project_tile(WorldTile(0, 0, 1)) is None
    assert projector.project_tile(WorldTile(1000, 0, 0)) is None


def test_tile_at_inverts_projection():
    projector = make_projector()
    projector.camera.change_zoom(0.5, (100, 100))
    projector.camera.pan(13, -7)
    sw, _, ne, _ = projector.project_tile(WorldTile(-3, 5, 0))
    centre = ((sw[0] + ne[0]) / 2, (sw[1] + ne[1]) / 2)
    assert projector.tile_at(centre) == WorldTile(-3, 5, 0)


def test_center_on_places_tile_mid_viewport():
    camera = Camera(800, 600)
    camera.center_on(WorldTile(100, 100, 0), (800, 600))
    projector = TileProjector(camera, (800, 600))
    assert projector.tile_at((400, 300)) == WorldTile(100, 100, 0)
