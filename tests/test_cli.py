"""End-to-end tests for the tago command."""

from pathlib import Path

import pytest
import yaml

from tago.cli import main


def test_lookup_merges_nearest_first(
    tree: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify that the nearest scope's value is printed with its source."""
    assert main([str(tree / "sub" / "leaf.txt")]) == 0
    out = capsys.readouterr().out
    assert "x: 2\n" in out
    assert f'// "{tree / "sub" / "tago.tago"}"' in out
    assert "owner: alice\n" in out
    assert "x: 1\n" not in out


def test_lookup_named_sidecar(tree: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that a file's own sidecar contributes its keys."""
    assert main([str(tree / "photo.jpg")]) == 0
    out = capsys.readouterr().out
    assert "title: Sunset\n" in out
    assert out.index("owner:") < out.index("title:")


def test_yaml_format(tree: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that --format yaml prints a parseable document."""
    assert main(["--format", "yaml", str(tree / "sub" / "leaf.txt")]) == 0
    data = yaml.safe_load(capsys.readouterr().out)
    assert data["x"] == {"value": "2", "source": str(tree / "sub" / "tago.tago")}


def test_config_file_sets_root_marker(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify that the root marker can be changed through --config."""
    (tmp_path / "root.tago").write_text("k: from-root\n", encoding="utf-8")
    (tmp_path / "f.txt").write_text("", encoding="utf-8")
    cfg = tmp_path / "tago.yml"
    cfg.write_text(yaml.dump({"description": {"root_marker": "root"}}))
    assert main(["--config", str(cfg), str(tmp_path / "f.txt")]) == 0
    assert "k: from-root\n" in capsys.readouterr().out


def test_nothing_found_exits_zero(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify that a target without any description files is not an error."""
    (tmp_path / "plain.txt").write_text("", encoding="utf-8")
    cfg = tmp_path / "tago.yml"
    cfg.write_text(yaml.dump({"description": {"root_marker": "no-such-marker"}}))
    assert main(["--config", str(cfg), str(tmp_path / "plain.txt")]) == 0
    assert "could not find any tago files" in capsys.readouterr().out


def test_missing_target_exits_one(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Verify that a missing target is a fatal error."""
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "does not exist" in caplog.text


def test_no_target_prints_usage(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that running without a target prints usage and exits one."""
    assert main([]) == 1
    assert "usage: tago" in capsys.readouterr().err


def test_bad_file_is_skipped(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Verify that an undecodable sidecar is skipped with a warning."""
    (tmp_path / "f.txt").write_text("", encoding="utf-8")
    (tmp_path / "f.tago").write_bytes(b"k: \xff\n")
    (tmp_path / "tago.tago").write_text("k: fallback\n", encoding="utf-8")
    assert main([str(tmp_path / "f.txt")]) == 0
    assert "k: fallback\n" in capsys.readouterr().out
    assert "not valid UTF-8" in caplog.text


def test_check_hash(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that -c prints file hashes instead of metadata."""
    f = tmp_path / "empty"
    f.write_bytes(b"")
    assert main(["-c", str(f)]) == 0
    out = capsys.readouterr().out
    assert "hashes:" in out
    assert "md5   : d41d8cd98f00b204e9800998ecf8427e" in out


def test_check_hash_missing_file(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Verify that hashing a missing file exits with an error."""
    assert main(["-c", str(tmp_path / "missing")]) == 1
    assert "could not open" in caplog.text


def test_bad_config_exits_one(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    """Verify that an unknown config section fails with a clear message."""
    (tmp_path / "f.txt").write_text("", encoding="utf-8")
    cfg = tmp_path / "tago.yml"
    cfg.write_text(yaml.dump({"descripton": {"root_marker": "root"}}))
    assert main(["--config", str(cfg), str(tmp_path / "f.txt")]) == 1
    assert "unknown section 'descripton'" in caplog.text
