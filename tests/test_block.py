import pytest

from minycraft.block import ATLAS_TILES, Block
from minycraft.shapes import CUBE_INDICES, CUBE_VERTICES, cube_tex_coords


def test_block_at_origin_has_cube_vertices():
    block = Block((0, 0, 0), (0, 0), 1)
    assert block.vertices == list(CUBE_VERTICES)


def test_vertices_are_offset_by_position():
    position = (3, -2, 7)
    block = Block(position, (0, 1), 3)
    for moved, base in zip(block.vertices, CUBE_VERTICES):
        assert tuple(m - p for m, p in zip(moved, position)) == pytest.approx(base)


def test_indices_are_cube_indices():
    block = Block((1, 2, 3), (0, 0), 2)
    assert block.indices == list(CUBE_INDICES)


@pytest.mark.parametrize("count", [1, 2, 3])
def test_tex_coords_scaled_into_atlas(count):
    atlas = (5, 1)
    block = Block((0, 0, 0), atlas, count)
    base = cube_tex_coords(count)
    assert len(block.tex_coords) == len(base)
    for (u, v), (bu, bv) in zip(block.tex_coords, base):
        assert u * ATLAS_TILES - atlas[0] == pytest.approx(bu)
        assert v * ATLAS_TILES - atlas[1] == pytest.approx(bv)


def test_tex_coords_in_unit_range_for_first_tiles():
    block = Block((0, 0, 0), (0, 1), 3)
    assert all(0.0 <= c <= 1.0 for uv in block.tex_coords for c in uv)


def test_unknown_tex_count_has_no_tex_coords():
    block = Block((0, 0, 0), (0, 0), 7)
    assert block.tex_coords == []
    assert len(block.vertices) == len(CUBE_VERTICES)


def test_block_does_not_share_state():
    a = Block((0, 0, 0), (0, 0), 1)
    a.indices.append(99)
    a.vertices.clear()
    b = Block((0, 0, 0), (0, 0), 1)
    assert b.indices == list(CUBE_INDICES)
    assert len(b.vertices) == len(CUBE_VERTICES)