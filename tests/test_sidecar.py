from pathlib import Path

import pytest

from worldfile import WorldFile, WorldFileIOError, find_world_file, read_for_image, world_file_path
from worldfile.io import candidate_paths

SAMPLE = "32.0\n0.0\n0.0\n-32.0\n691200.0\n4576000.0\n"


@pytest.mark.parametrize('image, expected', [
    ('scene.tif', 'scene.tfw'),
    ('scene.tiff', 'scene.tfw'),
    ('photo.jpg', 'photo.jgw'),
    ('photo.JPG', 'photo.JGW'),
    ('map.png', 'map.pgw'),
    ('ortho.jp2', 'ortho.j2w'),
    ('data/raster.abc', 'data/raster.acw'),
    ('noext', 'noext.wld'),
])
def test_world_file_path(image, expected):
    assert world_file_path(image) == Path(expected)


def test_candidate_paths_order():
    c = candidate_paths('scene.tif')
    assert c[0] == Path('scene.tfw')
    assert Path('scene.tifw') in c
    assert Path('scene.wld') in c
    assert c.index(Path('scene.tfw')) < c.index(Path('scene.tifw')) < c.index(Path('scene.wld'))
    assert len(c) == len(set(c))


def test_find_world_file(tmp_path):
    image = tmp_path / 'scene.tif'
    assert find_world_file(image) is None
    (tmp_path / 'scene.tifw').write_text(SAMPLE)
    assert find_world_file(image) == tmp_path / 'scene.tifw'
    (tmp_path / 'scene.tfw').write_text(SAMPLE)
    assert find_world_file(image) == tmp_path / 'scene.tfw'


def test_read_for_image(tmp_path):
    (tmp_path / 'photo.jgw').write_text(SAMPLE)
    w = read_for_image(tmp_path / 'photo.jpg')
    assert w == WorldFile(x_scale=32.0, y_scale=-32.0, x_coord=691200.0, y_coord=4576000.0)


def test_read_for_image_missing(tmp_path):
    with pytest.raises(WorldFileIOError):
        read_for_image(tmp_path / 'photo.jpg')
