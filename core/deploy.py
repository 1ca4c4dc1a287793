# =============================================================================
# core/deploy.py  —  gcloud commands for the Cloud Run lifecycle
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Builds the gcloud invocations used to ship an MCP server to Cloud Run
#   and lock it down:
#
#     deploy          gcloud run deploy --no-allow-unauthenticated --source .
#     grant_invoker   gcloud run services add-iam-policy-binding (run.invoker)
#     proxy           gcloud run services proxy   (authenticated localhost)
#     describe_url    gcloud run services describe --format=value(status.url)
#     delete          gcloud run services delete
#     delete_repo     gcloud artifacts repositories delete
#
# WHY ARGV LISTS?
#   Every builder returns a list[str] that goes straight to subprocess.run
#   with no shell.  Service names and env values never get a chance to be
#   interpreted by a shell, and tests can assert on the exact arguments.
#
#   The builders are pure.  Only run_gcloud() touches the system.
# =============================================================================

import logging
import re
import shlex
import shutil
import subprocess
from collections.abc import Mapping, Sequence

logger = logging.getLogger(__name__)

DEFAULT_REGION = "europe-west1"
INVOKER_ROLE = "roles/run.invoker"

# Cloud Run service names: lowercase letters, digits and hyphens, starting
# with a letter, not ending with a hyphen, at most 49 characters.
_SERVICE_NAME_RE = re.compile(r"^[a-z](?:[a-z0-9-]{0,47}[a-z0-9])?$")
_MEMBER_PREFIXES = ("user:", "serviceAccount:", "group:", "domain:")


class DeployError(RuntimeError):
    """gcloud is missing or a gcloud command failed."""


def validate_service_name(name: str) -> str:
    if not _SERVICE_NAME_RE.match(name):
        raise ValueError(
            f"Invalid Cloud Run service name {name!r}: use lowercase letters, "
            "digits and hyphens, start with a letter, at most 49 characters"
        )
    return name


def validate_member(member: str) -> str:
    if not member.startswith(_MEMBER_PREFIXES) or member.endswith(":"):
        raise ValueError(
            f"Invalid IAM member {member!r}: expected one of "
            + ", ".join(f"{p}<id>" for p in _MEMBER_PREFIXES)
        )
    return member


def _common_flags(region: str, project: str | None) -> list[str]:
    flags = [f"--region={region}"]
    if project:
        flags.append(f"--project={project}")
    return flags


def deploy_command(
    service: str,
    region: str = DEFAULT_REGION,
    source: str = ".",
    allow_unauthenticated: bool = False,
    env: Mapping[str, str] | None = None,
    project: str | None = None,
) -> list[str]:
    """Build `gcloud run deploy` for a source deploy.

    Authentication is required by default; pass allow_unauthenticated=True
    only for throwaway public demos.
    """
    argv = [
        "gcloud", "run", "deploy", validate_service_name(service),
        "--allow-unauthenticated" if allow_unauthenticated else "--no-allow-unauthenticated",
        f"--source={source}",
        *_common_flags(region, project),
    ]
    if env:
        # Cloud Run reserves PORT and rejects deploys that set it
        if "PORT" in env:
            raise ValueError("PORT is set by Cloud Run and cannot be overridden")
        argv.append(f"--set-env-vars={_env_vars_flag_value(env)}")
    return argv


# gcloud splits --set-env-vars on commas.  A value that contains one needs
# gcloud's alternate delimiter syntax, ^<delim>^K=V<delim>K=V.
_ALT_DELIMITERS = ("@", "|", ";", "#", "~")


def _env_vars_flag_value(env: Mapping[str, str]) -> str:
    pairs = [f"{key}={value}" for key, value in env.items()]
    if not any("," in pair for pair in pairs):
        return ",".join(pairs)
    for delim in _ALT_DELIMITERS:
        if not any(delim in pair for pair in pairs):
            return f"^{delim}^" + delim.join(pairs)
    raise ValueError(
        "Env values contain commas and every alternate delimiter "
        f"({' '.join(_ALT_DELIMITERS)}); set them in the Cloud Run console instead"
    )


def grant_invoker_command(
    service: str,
    member: str,
    region: str = DEFAULT_REGION,
    project: str | None = None,
) -> list[str]:
    """Build the IAM binding that lets `member` call the service."""
    return [
        "gcloud", "run", "services", "add-iam-policy-binding",
        validate_service_name(service),
        f"--member={validate_member(member)}",
        f"--role={INVOKER_ROLE}",
        *_common_flags(region, project),
    ]


def proxy_command(
    service: str,
    region: str = DEFAULT_REGION,
    port: int = 8080,
    project: str | None = None,
) -> list[str]:
    """Build `gcloud run services proxy`, which forwards localhost:port to the
    service with the caller's identity attached."""
    return [
        "gcloud", "run", "services", "proxy", validate_service_name(service),
        f"--port={port}",
        *_common_flags(region, project),
    ]


def describe_url_command(
    service: str,
    region: str = DEFAULT_REGION,
    project: str | None = None,
) -> list[str]:
    return [
        "gcloud", "run", "services", "describe", validate_service_name(service),
        "--format=value(status.url)",
        *_common_flags(region, project),
    ]


def delete_command(
    service: str,
    region: str = DEFAULT_REGION,
    project: str | None = None,
) -> list[str]:
    return [
        "gcloud", "run", "services", "delete", validate_service_name(service),
        "--quiet",
        *_common_flags(region, project),
    ]


def delete_repository_command(
    repository: str,
    region: str = DEFAULT_REGION,
    project: str | None = None,
) -> list[str]:
    """Source deploys push images to an Artifact Registry repository
    (cloud-run-source-deploy by default); cleanup removes it too."""
    argv = [
        "gcloud", "artifacts", "repositories", "delete", repository,
        f"--location={region}",
        "--quiet",
    ]
    if project:
        argv.append(f"--project={project}")
    return argv


def format_command(argv: Sequence[str]) -> str:
    """Render argv as a copy-pasteable shell line."""
    return shlex.join(argv)


def run_gcloud(
    argv: Sequence[str],
    capture_output: bool = False,
) -> subprocess.CompletedProcess:
    """Run a gcloud command, raising DeployError on failure."""
    if shutil.which(argv[0]) is None:
        raise DeployError(
            f"{argv[0]} not found on PATH. Install the Google Cloud CLI first."
        )

    logger.info("Running: %s", format_command(argv))
    try:
        return subprocess.run(
            list(argv),
            capture_output=capture_output,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        detail = (e.stderr or "").strip()
        message = f"Command failed ({e.returncode}): {format_command(argv)}"
        if detail:
            message += f"\n{detail}"
        raise DeployError(message) from e
