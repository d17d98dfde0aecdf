from worldfile.cli import main

SAMPLE = "32.0\n0.0\n0.0\n-32.0\n691200.0\n4576000.0\n"


def write_sample(tmp_path, text=SAMPLE, name='scene.tfw'):
    p = tmp_path / name
    p.write_text(text)
    return p


def test_to_world(tmp_path, capsys):
    p = write_sample(tmp_path)
    assert main(['to-world', str(p), '171', '343']) == 0
    assert capsys.readouterr().out == '696672.0 4565024.0\n'


def test_to_image(tmp_path, capsys):
    p = write_sample(tmp_path)
    assert main(['to-image', str(p), '696672', '4565024']) == 0
    assert capsys.readouterr().out == '171.0 343.0\n'


def test_show(tmp_path, capsys):
    p = write_sample(tmp_path)
    assert main(['show', str(p), '--width', '10', '--height', '5']) == 0
    out = capsys.readouterr().out
    assert 'x_scale  32.0' in out
    assert 'det      -1024.0' in out
    assert 'lr       691520.0 4575840.0' in out


def test_for_image_prints_sidecar_path(tmp_path, capsys):
    p = write_sample(tmp_path)
    assert main(['for-image', str(tmp_path / 'scene.tif')]) == 0
    assert capsys.readouterr().out == f'{p}\n'


def test_for_image_without_sidecar(tmp_path, capsys):
    assert main(['for-image', str(tmp_path / 'scene.tif')]) == 1
    assert 'no world file' in capsys.readouterr().err


def test_missing_file_exit_code(tmp_path, capsys):
    assert main(['show', str(tmp_path / 'missing.tfw')]) == 1
    assert 'error' in capsys.readouterr().err


def test_singular_inverse_exit_code(tmp_path, capsys):
    p = write_sample(tmp_path, "1.0\n1.0\n1.0\n1.0\n0.0\n0.0\n")
    assert main(['to-image', str(p), '1', '2']) == 1
    assert 'singular' in capsys.readouterr().err


def test_strict_flag(tmp_path, capsys):
    p = write_sample(tmp_path, SAMPLE + 'extra\n')
    assert main(['to-world', str(p), '0', '0']) == 0
    assert main(['--strict', 'to-world', str(p), '0', '0']) == 1
