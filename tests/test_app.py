from pathlib import Path

import pytest

from fdfview.app import FdfExit, get_file_name, main, setup_args, window_title
from fdfview.canvas import Canvas
from fdfview.controls import Fdf, reset_viewport


def _write_map(directory: Path, name: str, rows: list[str]) -> Path:
    path = directory / name
    path.write_text("\n".join(rows) + "\n")
    return path


def test_get_file_name_without_slash():
    assert get_file_name("pyramid.fdf") == "pyramid.fdf"


def test_get_file_name_splits_at_first_slash():
    assert get_file_name("maps/pyramid.fdf") == "pyramid.fdf"
    assert get_file_name("a/b/c.fdf") == "b/c.fdf"


def test_window_title_joins_names():
    assert window_title("maps/42.fdf", "./fdf") == "42.fdf - fdf"


def test_setup_args_missing_file():
    with pytest.raises(FdfExit) as info:
        setup_args([])
    assert info.value.message == "Missing config file"
    assert info.value.code == 1


def test_setup_args_too_many_arguments():
    with pytest.raises(FdfExit) as info:
        setup_args(["a.fdf", "b.fdf"])
    assert info.value.message == "Too many arguments"


def test_setup_args_bad_extension():
    with pytest.raises(FdfExit) as info:
        setup_args(["map.txt"])
    assert info.value.message == "Failed to load config"


def test_setup_args_missing_path(tmp_path):
    with pytest.raises(FdfExit) as info:
        setup_args([str(tmp_path / "absent.fdf")])
    assert info.value.message == "Failed to load config"


def test_setup_args_loads_map_and_matches_reset_viewport(tmp_path):
    path = _write_map(tmp_path, "small.fdf", ["0 1 2", "3 4 5"])
    heightmap = setup_args([str(path)])
    assert heightmap.alts == [[0, 1, 2], [3, 4, 5]]
    loaded_size = heightmap.tile_size
    fdf = Fdf(heightmap=heightmap, canvas=Canvas(10, 10))
    heightmap.tile_size = 3
    reset_viewport(fdf)
    assert heightmap.tile_size == loaded_size


def test_setup_args_tile_size_never_below_one(tmp_path):
    path = _write_map(tmp_path, "tall.fdf", ["0"] * 1000)
    heightmap = setup_args([str(path)])
    assert heightmap.height == 1000
    assert heightmap.tile_size == 1


def test_report_formats_error_with_detail():
    error = FdfExit("Failed to load config", detail="broken")
    assert error.report() == "Error\nFailed to load config: broken\n"


def test_report_is_empty_without_message():
    assert FdfExit(code=0).report() == ""


def test_main_missing_argument(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err == "Error\nMissing config file\n"


def test_main_too_many_arguments(capsys):
    assert main(["a.fdf", "b.fdf"]) == 1
    assert capsys.readouterr().err == "Error\nToo many arguments\n"


def test_main_bad_map(tmp_path, capsys):
    path = _write_map(tmp_path, "ragged.fdf", ["0 0 0", "0 0"])
    assert main([str(path)]) == 1
    assert capsys.readouterr().err.startswith("Error\nFailed to load config")