from unittest.mock import Mock

from privateerr_ctl.cli.main import cli
from privateerr_ctl.services.exceptions import DockerServiceError


class TestDownCommand:
    """Tests for down and clean commands."""

    def test_down_command_success(self, cli_runner, compose_config, mock_which,
                                  mock_subprocess_run, mock_docker_service):
        """Test teardown followed by base image cleanup."""
        result = cli_runner.invoke(cli, ['down'], obj=compose_config)

        assert result.exit_code == 0
        assert "Stopping service privateerr" in result.output
        assert "Removing images based on alpine" in result.output
        mock_subprocess_run.assert_called_once_with(
            ['docker-compose', 'down', '--timeout', '30', '--rmi', 'all', '--volumes'],
            cwd=compose_config.project_dir,
            check=False,
        )
        mock_docker_service.return_value.remove_images.assert_called_once_with("alpine")

    def test_down_does_not_need_credentials(self, cli_runner, compose_config, mock_which,
                                            mock_subprocess_run, mock_docker_service):
        """Test that down runs without PIA credentials."""
        result = cli_runner.invoke(cli, ['down'], obj=compose_config)

        assert result.exit_code == 0
        assert "Please set" not in result.output

    def test_clean_matches_down(self, cli_runner, compose_config, mock_which,
                                mock_subprocess_run, mock_docker_service):
        """Test that clean is an alias for down."""
        down_result = cli_runner.invoke(cli, ['down'], obj=compose_config)
        down_calls = list(mock_subprocess_run.call_args_list)
        down_removals = list(mock_docker_service.return_value.remove_images.call_args_list)
        mock_subprocess_run.reset_mock()
        mock_docker_service.return_value.remove_images.reset_mock()

        clean_result = cli_runner.invoke(cli, ['clean'], obj=compose_config)

        assert down_result.exit_code == clean_result.exit_code == 0
        assert mock_subprocess_run.call_args_list == down_calls
        assert mock_docker_service.return_value.remove_images.call_args_list == down_removals
        assert clean_result.output == down_result.output

    def test_down_without_from_line(self, cli_runner, compose_config, mock_which,
                                    mock_subprocess_run, mock_docker_service):
        """Test that no base image means no removal and no failure."""
        compose_config.dockerfile.write_text("# nothing here\n")

        result = cli_runner.invoke(cli, ['down'], obj=compose_config)

        assert result.exit_code == 0
        mock_subprocess_run.assert_called_once()
        mock_docker_service.assert_not_called()

    def test_down_without_dockerfile(self, cli_runner, compose_config, mock_which,
                                     mock_subprocess_run, mock_docker_service):
        """Test teardown when the Dockerfile is missing."""
        compose_config.dockerfile.unlink()

        result = cli_runner.invoke(cli, ['down'], obj=compose_config)

        assert result.exit_code == 0
        mock_docker_service.assert_not_called()

    def test_down_docker_not_running(self, cli_runner, compose_config, mock_which,
                                     mock_subprocess_run, mock_docker_service):
        """Test that an unreachable Docker daemon does not fail teardown."""
        mock_docker_service.side_effect = DockerServiceError("Docker daemon is not running")

        result = cli_runner.invoke(cli, ['down'], obj=compose_config)

        assert result.exit_code == 0

    def test_down_custom_options(self, cli_runner, compose_config, mock_which,
                                 mock_subprocess_run, mock_docker_service):
        """Test that configured down options are passed through."""
        compose_config.down_options = '--timeout 5'

        result = cli_runner.invoke(cli, ['down'], obj=compose_config)

        assert result.exit_code == 0
        assert mock_subprocess_run.call_args[0][0] == ['docker-compose', 'down', '--timeout', '5']

    def test_down_compose_failure_skips_cleanup(self, cli_runner, compose_config, mock_which,
                                                mock_subprocess_run, mock_docker_service):
        """Test that a failing teardown exits with its status."""
        mock_subprocess_run.return_value = Mock(returncode=1)

        result = cli_runner.invoke(cli, ['down'], obj=compose_config)

        assert result.exit_code == 1
        mock_docker_service.assert_not_called()

    def test_down_missing_dependency(self, cli_runner, compose_config, mock_which,
                                     mock_subprocess_run, mock_docker_service):
        """Test teardown when docker-compose is not installed."""
        mock_which.side_effect = lambda name: None if name == 'docker-compose' else f"/usr/bin/{name}"

        result = cli_runner.invoke(cli, ['clean'], obj=compose_config)

        assert result.exit_code == 1
        assert "No docker-compose in PATH" in result.output
        mock_subprocess_run.assert_not_called()
        mock_docker_service.assert_not_called()
