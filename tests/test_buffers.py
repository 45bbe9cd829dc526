import numpy as np
import pytest

from minycraft.block import Block
from minycraft.buffers import pack_attributes, pack_indices


def test_pack_attributes_puts_positions_before_tex_coords():
    packed = pack_attributes([(1, 2, 3), (4, 5, 6)], [(7, 8), (9, 10)])
    assert packed.tolist() == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


def test_pack_attributes_is_float32():
    packed = pack_attributes([(0.5, 0.25, 0.125)], [(0.75, 1.0)])
    assert packed.dtype == np.float32
    assert packed.tolist() == [0.5, 0.25, 0.125, 0.75, 1.0]


def test_pack_attributes_empty():
    assert pack_attributes([], []).size == 0


def test_pack_attributes_block_layout():
    block = Block((1, 2, 3), (0, 1), 3)
    packed = pack_attributes(block.vertices, block.tex_coords)
    positions = len(block.vertices) * 3
    assert packed.size == positions + len(block.tex_coords) * 2
    assert packed[:positions].reshape(-1, 3).tolist() == [list(v) for v in block.vertices]
    np.testing.assert_allclose(
        packed[positions:].reshape(-1, 2), np.asarray(block.tex_coords, dtype=np.float32)
    )


@pytest.mark.parametrize(
    "vertices, tex_coords",
    [
        ([(1, 2)], [(0, 0)]),
        ([(1, 2, 3)], [(0, 0, 0)]),
        ([1, 2, 3], [(0, 0)]),
    ],
)
def test_pack_attributes_rejects_wrong_widths(vertices, tex_coords):
    with pytest.raises(ValueError):
        pack_attributes(vertices, tex_coords)


def test_pack_indices_round_trip():
    indices = [0, 1, 2, 2, 3, 0, 24, 25]
    packed = pack_indices(indices)
    assert packed.dtype == np.uint32
    assert packed.tolist() == indices


def test_pack_indices_empty():
    assert pack_indices([]).size == 0


def test_pack_indices_rejects_negative():
    with pytest.raises(ValueError):
        pack_indices([0, -1, 2])


def test_pack_indices_rejects_too_large():
    with pytest.raises(ValueError):
        pack_indices([0, 2**32])


def test_pack_indices_rejects_nested():
    with pytest.raises(ValueError):
        pack_indices([[0, 1, 2], [2, 3, 0]])