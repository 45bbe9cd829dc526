import math

import numpy as np
import pytest

from minycraft.camera import look_at, perspective
from minycraft.chunk import MAX_LENGTH
from minycraft.renderer import (
    FAR_PLANE,
    FRAGMENT_SHADER_NAME,
    NEAR_PLANE,
    VERTEX_SHADER_NAME,
    ChunkRenderer,
    model_view_projection,
)
from minycraft.shaders import ShaderError
from minycraft.texture import TextureError


def _camera_view():
    return look_at((1.0, 2.0, 3.0), (4.0, 0.0, -5.0), (0.0, 1.0, 0.0))


def test_origin_chunk_with_identity_view_is_the_projection():
    mvp = model_view_projection(0, 0, np.identity(4), 16 / 9)
    expected = perspective(math.radians(80.0), 16 / 9, 0.1, 1000.0)
    np.testing.assert_allclose(mvp, expected)


def test_neighbour_chunk_along_x_is_shifted_by_chunk_width():
    view = _camera_view()
    local = np.array([2.0, 3.0, -5.0, 1.0])
    shifted = np.array([2.0 + MAX_LENGTH, 3.0, -5.0, 1.0])
    np.testing.assert_allclose(
        model_view_projection(1, 0, view, 1.5) @ local,
        model_view_projection(0, 0, view, 1.5) @ shifted,
    )


def test_neighbour_chunk_along_z_is_shifted_by_chunk_width():
    view = _camera_view()
    local = np.array([1.0, 0.0, 1.0, 1.0])
    shifted = np.array([1.0, 0.0, 1.0 + 2 * MAX_LENGTH, 1.0])
    np.testing.assert_allclose(
        model_view_projection(0, 2, view, 1.5) @ local,
        model_view_projection(0, 0, view, 1.5) @ shifted,
    )


def test_near_and_far_planes_map_to_depth_limits():
    mvp = model_view_projection(0, 0, np.identity(4), 1.0)
    near = mvp @ np.array([0.0, 0.0, -NEAR_PLANE, 1.0])
    far = mvp @ np.array([0.0, 0.0, -FAR_PLANE, 1.0])
    assert near[2] / near[3] == pytest.approx(-1.0)
    assert far[2] / far[3] == pytest.approx(1.0)


def test_zero_aspect_is_rejected():
    with pytest.raises(ValueError):
        model_view_projection(0, 0, np.identity(4), 0.0)


def test_view_must_be_four_by_four():
    with pytest.raises(ValueError):
        model_view_projection(0, 0, np.identity(3), 1.0)


def test_render_before_update_fails():
    renderer = ChunkRenderer(0, 0, "shaders", "atlas.png")
    with pytest.raises(RuntimeError):
        renderer.render(np.identity(4), 1.0)


def test_update_rejects_malformed_vertices_and_keeps_state(tmp_path):
    renderer = ChunkRenderer(0, 0, tmp_path, tmp_path / "atlas.png")
    with pytest.raises(ValueError):
        renderer.update([(0.0, 1.0)], [0], [(0.0, 0.0)])
    assert renderer.vertices == []
    assert renderer.indices == []


def test_update_rejects_negative_indices(tmp_path):
    renderer = ChunkRenderer(0, 0, tmp_path, tmp_path / "atlas.png")
    with pytest.raises(ValueError):
        renderer.update([(0.0, 0.0, 0.0)], [-1], [(0.0, 0.0)])
    assert renderer.indices == []


def test_update_reports_missing_shader(tmp_path):
    renderer = ChunkRenderer(0, 0, tmp_path, tmp_path / "atlas.png")
    with pytest.raises(ShaderError, match=VERTEX_SHADER_NAME):
        renderer.update([(0.0, 0.0, 0.0)], [0], [(0.0, 0.0)])


def test_update_reports_missing_atlas(tmp_path):
    (tmp_path / VERTEX_SHADER_NAME).write_text("void main() {}\n")
    (tmp_path / FRAGMENT_SHADER_NAME).write_text("void main() {}\n")
    renderer = ChunkRenderer(0, 0, tmp_path, tmp_path / "missing.png")
    with pytest.raises(TextureError, match="missing.png"):
        renderer.update([(0.0, 0.0, 0.0)], [0], [(0.0, 0.0)])