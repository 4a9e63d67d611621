"""Tests for the recipe CLI commands."""

import json

import pytest

from nsync.cli.commands import recipe


@pytest.fixture(autouse=True)
def _configure(monkeypatch, tmp_path):
    config_file = tmp_path / "nsync.yaml"
    config_file.write_text(
        "lifecycles:\n  docker: some-docker-lifecycle.tgz\nfile_server_url: http://fs\n"
    )
    monkeypatch.setenv("NSYNC_CONFIG_FILE", str(config_file))


def _write_request(tmp_path, **overrides):
    body = {
        "process_guid": "the-app-guid",
        "docker_image_url": "ubuntu",
        "execution_metadata": json.dumps({"ports": [{"Port": 9000, "Protocol": "tcp"}]}),
    }
    body.update(overrides)
    path = tmp_path / "request.json"
    path.write_text(json.dumps(body))
    return path


class TestBuild:
    def test_prints_desired_lrp(self, tmp_path, capsys):
        recipe.build(_write_request(tmp_path))

        lrp = json.loads(capsys.readouterr().out)
        assert lrp["root_fs"] == "docker:///library/ubuntu"
        assert lrp["ports"] == [9000]
        assert lrp["setup"]["actions"][0]["from"] == "http://fs/v1/static/some-docker-lifecycle.tgz"

    def test_build_error_exits_2(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            recipe.build(_write_request(tmp_path, droplet_uri="http://droplet"))

        assert exc_info.value.code == 2
        assert "conflicting_sources" in capsys.readouterr().err

    def test_missing_file_exits_1(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            recipe.build(tmp_path / "absent.json")
        assert exc_info.value.code == 1

    def test_invalid_request_exits_1(self, tmp_path, capsys):
        path = tmp_path / "request.json"
        path.write_text("{}")
        with pytest.raises(SystemExit) as exc_info:
            recipe.build(path)
        assert exc_info.value.code == 1
        assert "invalid desire request" in capsys.readouterr().err


class TestPorts:
    def test_prints_ports(self, tmp_path, capsys):
        recipe.ports(_write_request(tmp_path))
        assert json.loads(capsys.readouterr().out) == [9000]
