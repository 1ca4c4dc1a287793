"""Unit tests for gcloud command builders and the runner."""

import subprocess
from unittest.mock import patch

import pytest

from core.deploy import (
    DeployError,
    delete_command,
    delete_repository_command,
    deploy_command,
    describe_url_command,
    format_command,
    grant_invoker_command,
    proxy_command,
    run_gcloud,
    validate_service_name,
)


class TestServiceNames:
    @pytest.mark.parametrize("name", ["zoo-mcp-server", "a", "mcp1", "a" * 49])
    def test_valid(self, name):
        assert validate_service_name(name) == name

    @pytest.mark.parametrize(
        "name", ["Zoo", "1zoo", "zoo-", "zoo_server", "", "a" * 50, "zoo server"]
    )
    def test_invalid(self, name):
        with pytest.raises(ValueError, match="service name"):
            validate_service_name(name)


class TestBuilders:
    """Test the argv each builder produces."""

    def test_deploy_requires_auth_by_default(self):
        argv = deploy_command("zoo-mcp-server", region="us-central1")
        assert argv == [
            "gcloud", "run", "deploy", "zoo-mcp-server",
            "--no-allow-unauthenticated",
            "--source=.",
            "--region=us-central1",
        ]

    def test_deploy_public_with_env_and_project(self):
        argv = deploy_command(
            "math-mcp-server",
            allow_unauthenticated=True,
            env={"SERVER_MODULE": "tools.math_server", "MCP_TRANSPORT": "http"},
            project="my-proj",
        )
        assert "--allow-unauthenticated" in argv
        assert "--project=my-proj" in argv
        assert argv[-1] == "--set-env-vars=SERVER_MODULE=tools.math_server,MCP_TRANSPORT=http"

    def test_deploy_rejects_port_env(self):
        with pytest.raises(ValueError, match="PORT"):
            deploy_command("zoo", env={"PORT": "9000"})

    def test_deploy_env_value_with_comma_uses_alternate_delimiter(self):
        argv = deploy_command(
            "zoo",
            env={"ALLOWED_ORIGINS": "https://a.example,https://b.example", "MODE": "http"},
        )
        assert argv[-1] == (
            "--set-env-vars=^@^ALLOWED_ORIGINS=https://a.example,https://b.example@MODE=http"
        )

    def test_deploy_alternate_delimiter_skips_chars_in_values(self):
        argv = deploy_command("zoo", env={"ADMINS": "a@x.com,b@x.com"})
        assert argv[-1] == "--set-env-vars=^|^ADMINS=a@x.com,b@x.com"

    def test_deploy_rejects_env_with_no_free_delimiter(self):
        with pytest.raises(ValueError, match="commas"):
            deploy_command("zoo", env={"V": "a,b@c|d;e#f~g"})

    def test_grant_invoker(self):
        argv = grant_invoker_command("zoo", "user:me@example.com")
        assert argv[:5] == [
            "gcloud", "run", "services", "add-iam-policy-binding", "zoo",
        ]
        assert "--member=user:me@example.com" in argv
        assert "--role=roles/run.invoker" in argv
        assert "--region=europe-west1" in argv

    @pytest.mark.parametrize("member", ["me@example.com", "user:", "robot:x"])
    def test_grant_invoker_rejects_bad_member(self, member):
        with pytest.raises(ValueError, match="IAM member"):
            grant_invoker_command("zoo", member)

    def test_proxy(self):
        assert proxy_command("zoo", port=9090) == [
            "gcloud", "run", "services", "proxy", "zoo",
            "--port=9090", "--region=europe-west1",
        ]

    def test_describe_url(self):
        assert "--format=value(status.url)" in describe_url_command("zoo")

    def test_delete_is_quiet(self):
        assert delete_command("zoo")[:6] == [
            "gcloud", "run", "services", "delete", "zoo", "--quiet",
        ]

    def test_delete_repository(self):
        argv = delete_repository_command("cloud-run-source-deploy", region="us-east1")
        assert argv == [
            "gcloud", "artifacts", "repositories", "delete", "cloud-run-source-deploy",
            "--location=us-east1", "--quiet",
        ]

    def test_format_command_quotes(self):
        assert format_command(["gcloud", "--format=value(status.url)"]) == (
            "gcloud '--format=value(status.url)'"
        )


class TestRunGcloud:
    """Test the subprocess wrapper."""

    @patch("core.deploy.shutil.which", return_value=None)
    def test_missing_gcloud(self, _which):
        with pytest.raises(DeployError, match="not found"):
            run_gcloud(["gcloud", "version"])

    @patch("core.deploy.subprocess.run")
    @patch("core.deploy.shutil.which", return_value="/usr/bin/gcloud")
    def test_success(self, _which, mock_run):
        mock_run.return_value = subprocess.CompletedProcess(["gcloud"], 0, stdout="ok\n")
        result = run_gcloud(["gcloud", "version"], capture_output=True)
        assert result.stdout == "ok\n"
        mock_run.assert_called_once_with(
            ["gcloud", "version"], capture_output=True, text=True, check=True
        )

    @patch("core.deploy.subprocess.run")
    @patch("core.deploy.shutil.which", return_value="/usr/bin/gcloud")
    def test_failure_carries_stderr(self, _which, mock_run):
        mock_run.side_effect = subprocess.CalledProcessError(
            1, ["gcloud"], stderr="PERMISSION_DENIED"
        )
        with pytest.raises(DeployError, match="PERMISSION_DENIED"):
            run_gcloud(["gcloud", "run", "deploy", "zoo"])
