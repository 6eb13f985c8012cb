import pytest
from click.testing import CliRunner
from unittest.mock import Mock, MagicMock, patch

from privateerr_ctl.models.config import ComposeConfig


ENVIRONMENT_VARIABLES = [
    "COMPOSE_SERVICE_NAME",
    "COMPOSE_DOWN_TIMEOUT",
    "COMPOSE_DOWN_OPTIONS",
    "COMPOSE_BUILD_OPTIONS",
    "COMPOSE_UP_OPTIONS",
    "COMPOSE_LOGS_OPTIONS",
    "PIA_USER",
    "PIA_PASS",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove compose and credential variables inherited from the shell."""
    for name in ENVIRONMENT_VARIABLES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def temp_project_dir(tmp_path):
    """Creates a project directory with a Dockerfile based on alpine."""
    docker_dir = tmp_path / "docker"
    docker_dir.mkdir()
    (docker_dir / "Dockerfile").write_text(
        "# VPN client\nFROM alpine:3.19\nRUN apk add --no-cache openvpn\n"
    )
    return tmp_path


@pytest.fixture
def compose_config(temp_project_dir):
    """Provides a default configuration rooted at the temp project."""
    return ComposeConfig(project_dir=temp_project_dir)


@pytest.fixture
def pia_credentials(monkeypatch):
    """Sets both PIA credential variables."""
    monkeypatch.setenv("PIA_USER", "p1234567")
    monkeypatch.setenv("PIA_PASS", "hunter2")


@pytest.fixture
def mock_which():
    """Resolves every executable to /usr/bin."""
    with patch("privateerr_ctl.core.preflight.shutil.which") as which:
        which.side_effect = lambda name: f"/usr/bin/{name}"
        yield which


@pytest.fixture
def mock_subprocess_run():
    """Mocks the compose child process with a successful exit."""
    with patch("privateerr_ctl.services.compose_service.subprocess.run") as run:
        run.return_value = Mock(returncode=0)
        yield run


@pytest.fixture
def mock_docker_service():
    """Mocks the Docker Engine API service used for image cleanup."""
    with patch("privateerr_ctl.cli.helpers.DockerService") as service_class:
        service = MagicMock()
        service.remove_images.return_value = 1
        service_class.return_value = service
        yield service_class
