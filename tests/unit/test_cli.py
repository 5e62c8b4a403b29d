"""Test the CLI module.

This module tests the Typer-based command-line interface: the deploy and
discover commands, configuration validation and summary output.

Copyright (c) pmrm-deploy contributors. All rights reserved.
"""

# built-in modules
import importlib
import inspect
import json
from pathlib import Path
from unittest.mock import patch

# third-party modules
import pytest
import typer
from typer.testing import CliRunner

# project modules
from pmrm_deploy import __version__
from pmrm_deploy.cli import (
    app,
    setup_logging,
    save_summary_with_feedback,
    validate_deploy_config,
    ExitCode,
)
from tests.fixtures.collaborators import RecordingDeployment


runner = CliRunner()


class TestSetupLogging:
    """Test the setup_logging function."""

    @patch("pmrm_deploy.cli.utils.logging.basicConfig")
    def test_setup_logging_verbose(self, mock_basic_config):
        setup_logging(verbose=True)

        assert mock_basic_config.call_args[1]["level"] == 10  # logging.DEBUG

    @patch("pmrm_deploy.cli.utils.logging.basicConfig")
    def test_setup_logging_normal(self, mock_basic_config):
        setup_logging(verbose=False)

        assert mock_basic_config.call_args[1]["level"] == 20  # logging.INFO


class TestSaveSummaryWithFeedback:
    """Test the save_summary_with_feedback function."""

    def test_save_summary_success(self, tmp_path):
        output = tmp_path / "summary.json"

        save_summary_with_feedback({"status": "success"}, str(output))

        assert json.loads(output.read_text()) == {"status": "success"}

    def test_save_summary_no_output_path(self, tmp_path):
        save_summary_with_feedback({"status": "success"}, None)

        assert list(tmp_path.iterdir()) == []

    def test_save_summary_io_error(self, tmp_path):
        with pytest.raises(typer.Exit) as exc_info:
            save_summary_with_feedback(
                {"status": "success"}, str(tmp_path / "missing" / "summary.json")
            )

        assert exc_info.value.exit_code == ExitCode.FAILURE


class TestValidateDeployConfig:
    """Test configuration validation."""

    def test_valid(self):
        config = validate_deploy_config(network="sepolia")

        assert config["signer"]["chain_id"] == 11155111

    def test_invalid_json_exits(self):
        with pytest.raises(typer.Exit) as exc_info:
            validate_deploy_config(config="{oops")

        assert exc_info.value.exit_code == ExitCode.INVALID_ARGS


class TestMainCallback:
    """Test the top-level app."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_discover(self):
        result = runner.invoke(app, ["discover"])

        assert result.exit_code == 0
        assert "env" in result.output
        assert "dry-run" in result.output


class TestDeployCommand:
    """Test the deploy command end to end."""

    def test_dry_run_success(self, clean_env, tmp_path):
        clean_env.setenv("PMRM_PRIVATE_KEY", "0xkey")
        summary = tmp_path / "summary.json"

        result = runner.invoke(
            app, ["deploy", "--network", "sepolia", "--summary-output", str(summary)]
        )

        assert result.exit_code == ExitCode.SUCCESS
        data = json.loads(summary.read_text())
        assert data["status"] == "success"
        assert data["network"] == "sepolia"
        assert data["deployment"]["deployment_id"].startswith("dry-run-")

    def test_missing_key_fails(self, clean_env, tmp_path):
        summary = tmp_path / "summary.json"

        result = runner.invoke(app, ["deploy", "--summary-output", str(summary)])

        assert result.exit_code == ExitCode.FAILURE
        assert "PMRM_PRIVATE_KEY" in result.output
        data = json.loads(summary.read_text())
        assert data["status"] == "failed"
        assert data["error"].startswith("AuthenticationError")

    def test_signer_failure_never_deploys(self):
        RecordingDeployment.calls.clear()

        result = runner.invoke(
            app,
            [
                "deploy",
                "--signer",
                "tests.fixtures.collaborators:failing_signer",
                "--deployer",
                "tests.fixtures.collaborators:RecordingDeployment",
            ],
        )

        assert result.exit_code == ExitCode.FAILURE
        assert "signer backend unavailable" in result.output
        assert RecordingDeployment.calls == []

    def test_deployer_failure(self):
        result = runner.invoke(
            app,
            [
                "deploy",
                "--signer",
                "tests.fixtures.collaborators:static_signer",
                "--deployer",
                "tests.fixtures.collaborators:failing_deployer",
            ],
        )

        assert result.exit_code == ExitCode.FAILURE
        assert "deployment reverted" in result.output

    def test_custom_collaborators_success(self):
        RecordingDeployment.calls.clear()

        result = runner.invoke(
            app,
            [
                "deploy",
                "--signer",
                "tests.fixtures.collaborators:static_signer",
                "--deployer",
                "tests.fixtures.collaborators:RecordingDeployment",
            ],
        )

        assert result.exit_code == ExitCode.SUCCESS
        assert len(RecordingDeployment.calls) == 1
        assert RecordingDeployment.calls[0].chain_id == 31337
        assert "recorded" in result.output

    def test_unknown_deployer(self):
        result = runner.invoke(app, ["deploy", "--deployer", "hardhat"])

        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "Unknown deployment: hardhat" in result.output

    def test_invalid_config_json(self):
        result = runner.invoke(app, ["deploy", "--config", "{oops"])

        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_unknown_network(self):
        result = runner.invoke(app, ["deploy", "--network", "moon"])

        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "Unknown network: moon" in result.output

    @pytest.mark.parametrize("config", ['{"signer": null}', '{"deployment": []}'])
    def test_malformed_config_section(self, config):
        result = runner.invoke(app, ["deploy", "--config", config])

        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "must be a JSON object" in result.output

    def test_tracebacks_hide_locals(self):
        app_module = importlib.import_module("pmrm_deploy.cli.app")

        # locals can include the signing key
        assert "show_locals" not in inspect.getsource(app_module)


class TestPackageHeaders:
    """Test the copyright header carried by every module."""

    def test_modules_credit_project(self):
        import pmrm_deploy

        package_dir = Path(pmrm_deploy.__file__).parent

        for path in package_dir.rglob("*.py"):
            source = path.read_text()
            assert "Advanced Micro Devices" not in source, path.name
            assert "pmrm-deploy contributors" in source, path.name
