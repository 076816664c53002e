#!/usr/bin/env python3
"""
Smoke tests running the sidus command line on synthetic catalogs
"""

import json

import numpy as np
import pytest

from catalog_builder import named_catalog, pack_header, pack_star
from Sidus import __version__
from Sidus.main import main

pytestmark = [pytest.mark.smoke, pytest.mark.usefixtures("restore_root_logger")]

STARS = [
    (0.5, 0.25, 450, b"ABC", b"K0"),
    (0.0, 0.0, 0, b"\x00\x00\x00", b"\x00\x00"),
    (0.25, -0.5, -146, b"SIR", b"A1"),
    (1.5, 0.75, 450, b"DEF", b"G2"),
]


@pytest.fixture
def catalog(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "BSC5"
    path.write_bytes(named_catalog(STARS))
    return path


def run(capsys, *argv):
    status = main([str(a) for a in argv])
    out, err = capsys.readouterr()
    return status, out, err


def test_text_with_names(catalog, capsys):
    status, out, err = run(capsys, "-n", catalog)
    assert status == 0
    assert out.splitlines() == [
        "ABC,0.50000000000000000,0.25000000000000000,4.50000000000000000",
        "SIR,0.25000000000000000,-0.50000000000000000,%.17f"
        % float(np.float32(-146) / np.float32(100)),
        "DEF,1.50000000000000000,0.75000000000000000,4.50000000000000000",
    ]


def test_filter_drops_everything(catalog, capsys):
    status, out, _ = run(capsys, "-f-2", catalog)
    assert status == 0
    assert out == ""


def test_filter_attached_value(catalog, capsys):
    status, out, _ = run(capsys, "-f4", "-s", catalog)
    assert status == 0
    assert out == "0.250000000,-0.500000000,-1.460000038\n"


def test_sort_by_magnitude(catalog, capsys):
    _, out, _ = run(capsys, "-m", "-n", "-p", "-s", catalog)
    assert [line.split(",")[0] for line in out.splitlines()] == ["SIR", "ABC", "DEF"]
    assert [line.split(",")[-1] for line in out.splitlines()] == ["A1", "K0", "G2"]


def test_sort_by_ra(catalog, capsys):
    _, out, _ = run(capsys, "-r", "-n", catalog)
    assert [line.split(",")[0] for line in out.splitlines()] == ["SIR", "ABC", "DEF"]


def test_sort_options_exclusive(catalog, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["-m", "-r", str(catalog)])
    assert excinfo.value.code == 2


def test_info(catalog, capsys):
    status, out, _ = run(capsys, "-i", catalog)
    assert status == 0
    assert out.startswith("Catalog information:\n Number of stars: 4\n")
    assert " Epoch: J2000\n" in out
    assert " Bytes per star: 23\n" in out


def test_c_header(catalog, capsys):
    # identifiers derive from the path as given on the command line
    status, out, _ = run(capsys, "-c", "-s", "-n", catalog.name)
    assert status == 0
    assert "#ifndef bsc5_h" in out
    assert "enum { bsc5_num_stars = 3 };" in out
    assert "\tfloat rightAscension;\t/* radians, J2000 */" in out
    assert '{  0.500000000,  0.250000000,  4.500000000, "ABC" }, ' in out


def test_output_file(catalog, tmp_path, capsys):
    target = tmp_path / "out.csv"
    status, out, _ = run(capsys, "-o", target, catalog)
    assert status == 0
    assert out == ""
    assert len(target.read_text().splitlines()) == 3


def test_config_file(catalog, tmp_path, capsys):
    config_file = tmp_path / "sidus.json"
    config_file.write_text(json.dumps({"precision": "single", "names": True}))
    _, out, _ = run(capsys, "--config", config_file, catalog)
    assert out.splitlines()[0] == "ABC,0.500000000,0.250000000,4.500000000"


def test_names_dropped_without_name_field(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "SAO"
    path.write_bytes(
        pack_header(1, 1, 0, 1, 24)
        + pack_star(1.0, 1.0, magnitudes=(100,), identifier=5.0)
    )
    status, out, _ = run(capsys, "-n", "-s", path)
    assert status == 0
    assert out == "1.000000000,1.000000000,1.000000000\n"


def test_big_endian_catalog(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "big"
    path.write_bytes(named_catalog(STARS[:1], little_endian=False, j2000=False))
    status, out, _ = run(capsys, "-be", "-B1950", "-n", "-s", path)
    assert status == 0
    assert out == "ABC,0.500000000,0.250000000,4.500000000\n"


def test_epoch_mismatch(catalog, capsys):
    status, out, err = run(capsys, "-B1950", catalog)
    assert status == 1
    assert out == ""
    assert "sidus: expected B1950 epoch but found J2000 epoch" in err


def test_wrong_endianness(catalog, capsys):
    status, _, err = run(capsys, "-be", catalog)
    assert status == 1
    assert "maybe try little-endian?" in err


def test_truncated(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "short"
    path.write_bytes(named_catalog(STARS)[:-1])
    status, out, err = run(capsys, path)
    assert status == 1
    assert out == ""
    assert "file too short" in err


def test_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    status, _, err = run(capsys, tmp_path / "nope")
    assert status == 1
    assert "failed to read file" in err


def test_empty_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "empty"
    path.write_bytes(b"")
    status, _, err = run(capsys, path)
    assert status == 1
    assert "empty" in err


def test_bad_apparent_magnitude(catalog):
    with pytest.raises(SystemExit) as excinfo:
        main(["-a", "12", str(catalog)])
    assert excinfo.value.code == 2


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert f"sidus v{__version__}" in capsys.readouterr().out


BAD_HANDLER_CONF = """
{
    version: 1,
    disable_existing_loggers: false,
    handlers: {h: {class: "no.such.Handler"}},
    root: {handlers: ["h"]},
}
"""


def test_rejected_log_conf(catalog, tmp_path, capsys):
    conf = tmp_path / "bad.json"
    conf.write_text(BAD_HANDLER_CONF)
    status, out, err = run(capsys, "--log-conf", conf, catalog)
    assert status == 1
    assert out == ""
    assert err.startswith("sidus: ")


def test_unparsable_default_log_conf(catalog, tmp_path, capsys):
    (tmp_path / "sidus_logconf.json").write_text("{version: 1,,}")
    status, out, err = run(capsys, catalog)
    assert status == 1
    assert out == ""
    assert err.startswith("sidus: ")
