from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

import pytest
from typer.testing import CliRunner

from pipeline_sync.cli import _configure_logging, app
from pipeline_sync.config.loader import load_build_config

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

runner = CliRunner()

_BC_YAML = """\
apiVersion: build.openshift.io/v1
kind: BuildConfig
metadata:
  name: app-pipeline
  namespace: ci
spec:
  source:
    type: Git
    git:
      uri: https://example/repo.git
      ref: master
    contextDir: src
    sourceSecret:
      name: git-creds
  strategy:
    type: JenkinsPipeline
    jenkinsPipelineStrategy:
      jenkinsfilePath: Jenkinsfile
"""

_JOB_IN_SYNC = """\
fullName: ci/ci-app-pipeline
definition:
  kind: scm
  scriptPath: src/Jenkinsfile
  scm:
    kind: git
    userRemoteConfigs:
      - url: https://example/repo.git
    branches:
      - name: "*/master"
"""

_JOB_EDITED = """\
fullName: ci/ci-app-pipeline
definition:
  kind: scm
  scriptPath: src/ci/Jenkinsfile
  scm:
    kind: git
    userRemoteConfigs:
      - url: https://example/repo.git
    branches:
      - name: "*/develop"
"""


def _strip_ansi(text: str) -> str:
    return re.sub(r"\x1b\[[0-9;]*m", "", text)


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text)
    return path


class TestVersion:
    def test_version_flag(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "pipeline-sync" in result.stdout

    def test_short_version_flag(self) -> None:
        result = runner.invoke(app, ["-V"])
        assert result.exit_code == 0
        assert "pipeline-sync" in result.stdout


class TestMapCommand:
    def test_prints_definition(self, tmp_path: Path) -> None:
        bc = _write(tmp_path, "bc.yaml", _BC_YAML)
        result = runner.invoke(app, ["map", str(bc), "--no-color"])
        assert result.exit_code == 0
        assert "# Pipeline script src/Jenkinsfile from checkout" in result.stdout
        assert "scriptPath: src/Jenkinsfile" in result.stdout
        assert "credentialsId: ci-git-creds" in result.stdout

    def test_bare_credentials_from_dotenv(self, tmp_path: Path) -> None:
        bc = _write(tmp_path, "bc.yaml", _BC_YAML)
        _write(tmp_path, ".env", "PIPELINE_SYNC_CREDENTIALS_PREFIX_NAMESPACE=false\n")
        result = runner.invoke(app, ["map", str(bc), "--no-color"])
        assert result.exit_code == 0
        assert "credentialsId: git-creds" in result.stdout

    def test_unmappable(self, tmp_path: Path) -> None:
        text = _BC_YAML.replace("type: JenkinsPipeline", "type: Docker")
        bc = _write(tmp_path, "bc.yaml", text)
        result = runner.invoke(app, ["map", str(bc), "--no-color"])
        assert result.exit_code == 1
        assert "does not map" in result.output

    def test_config_error(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["map", str(tmp_path / "missing.yaml"), "--no-color"])
        assert result.exit_code == 1
        assert "Configuration error" in result.output


class TestReconcileCommand:
    def test_up_to_date(self, tmp_path: Path) -> None:
        bc = _write(tmp_path, "bc.yaml", _BC_YAML)
        job = _write(tmp_path, "job.yaml", _JOB_IN_SYNC)
        result = runner.invoke(app, ["reconcile", str(job), str(bc), "--no-color"])
        assert result.exit_code == 0
        assert "up-to-date" in result.stdout

    def test_changes_exit_2(self, tmp_path: Path) -> None:
        bc = _write(tmp_path, "bc.yaml", _BC_YAML)
        job = _write(tmp_path, "job.yaml", _JOB_EDITED)
        result = runner.invoke(app, ["reconcile", str(job), str(bc), "--no-color"])
        assert result.exit_code == 2
        out = _strip_ansi(result.stdout)
        assert "BuildConfig ci/app-pipeline will be updated in-place" in out
        assert '"Jenkinsfile" -> "ci/Jenkinsfile"' in out
        assert '"master" -> "develop"' in out
        assert "Reconcile: 2 fields to change." in out

    def test_no_sync_remote(self, tmp_path: Path) -> None:
        bc = _write(tmp_path, "bc.yaml", _BC_YAML)
        job = _write(tmp_path, "job.yaml", _JOB_EDITED)
        result = runner.invoke(
            app, ["reconcile", str(job), str(bc), "--no-sync-remote", "--no-color"]
        )
        assert result.exit_code == 2
        assert "Reconcile: 1 field to change." in result.stdout
        assert "develop" not in result.stdout

    def test_writes_out(self, tmp_path: Path) -> None:
        bc = _write(tmp_path, "bc.yaml", _BC_YAML)
        job = _write(tmp_path, "job.yaml", _JOB_EDITED)
        out = tmp_path / "updated.yaml"
        result = runner.invoke(
            app, ["reconcile", str(job), str(bc), "--out", str(out), "--no-color"]
        )
        assert result.exit_code == 2
        assert f"BuildConfig saved to {out}" in result.stdout
        updated = load_build_config(out)
        assert updated.source is not None
        assert updated.source.git is not None
        assert updated.source.git.ref == "develop"
        assert updated.source.source_secret is not None

    def test_no_out_when_unchanged(self, tmp_path: Path) -> None:
        bc = _write(tmp_path, "bc.yaml", _BC_YAML)
        job = _write(tmp_path, "job.yaml", _JOB_IN_SYNC)
        out = tmp_path / "updated.yaml"
        runner.invoke(app, ["reconcile", str(job), str(bc), "--out", str(out)])
        assert not out.exists()

    def test_invalid_job(self, tmp_path: Path) -> None:
        bc = _write(tmp_path, "bc.yaml", _BC_YAML)
        job = _write(tmp_path, "job.yaml", "definition:\n  kind: freestyle\n")
        result = runner.invoke(app, ["reconcile", str(job), str(bc), "--no-color"])
        assert result.exit_code == 1
        assert "Configuration error" in result.output


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def _restore_level(self) -> Iterator[None]:
        logger = logging.getLogger("pipeline_sync")
        level = logger.level
        yield
        logger.setLevel(level)

    def test_verbose_info(self) -> None:
        _configure_logging(1)
        assert logging.getLogger("pipeline_sync").level == logging.INFO

    def test_very_verbose_debug(self) -> None:
        _configure_logging(2)
        assert logging.getLogger("pipeline_sync").level == logging.DEBUG

    def test_env_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PIPELINE_SYNC_LOG", "warning")
        _configure_logging(0)
        assert logging.getLogger("pipeline_sync").level == logging.WARNING

    @pytest.mark.parametrize("name", ["loud", "WARN", "BASIC_FORMAT", "NOTSET"])
    def test_invalid_env_level_falls_back_to_info(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        name: str,
    ) -> None:
        monkeypatch.setenv("PIPELINE_SYNC_LOG", name)
        _configure_logging(0)
        assert logging.getLogger("pipeline_sync").level == logging.INFO
        assert "invalid PIPELINE_SYNC_LOG" in capsys.readouterr().err

    def test_env_wins_over_verbose(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PIPELINE_SYNC_LOG", "error")
        _configure_logging(2)
        assert logging.getLogger("pipeline_sync").level == logging.ERROR

    def test_no_flag_leaves_logging_alone(self) -> None:
        logger = logging.getLogger("pipeline_sync")
        logger.setLevel(logging.CRITICAL)
        _configure_logging(0)
        assert logger.level == logging.CRITICAL
