"""Tests for the php-fpm install flow."""

from unittest.mock import MagicMock, call

import pytest

from apache_skeleton.actions.runtime import RuntimeAction
from apache_skeleton.connector.local import CommandResult
from apache_skeleton.errors import AbortedError, PreconditionError
from apache_skeleton.model.project import ProjectType
from apache_skeleton.model.runtime import RuntimeMode

FPM = RuntimeMode.fpm("/run/php/php8.3-fpm.sock")


def _ok(command="ok"):
    return CommandResult(command=command, stdout="", stderr="", exit_code=0)


@pytest.fixture
def scanner():
    scanner = MagicMock()
    scanner.probe.return_value = FPM
    return scanner


def _action(connector, scanner, console, answer=True):
    confirm = MagicMock(return_value=answer)
    return RuntimeAction(connector, scanner, console, confirm), confirm


@pytest.mark.parametrize("mode", [RuntimeMode.none(), RuntimeMode.module(), FPM])
def test_marketing_never_prompts_or_installs(mock_connector, scanner, console, mode):
    action, confirm = _action(mock_connector, scanner, console)

    assert action.ensure(mode, ProjectType.MARKETING) == mode

    confirm.assert_not_called()
    mock_connector.run.assert_not_called()
    scanner.probe.assert_not_called()


@pytest.mark.parametrize("mode", [RuntimeMode.module(), FPM])
def test_existing_runtime_is_kept(mock_connector, scanner, console, mode):
    action, confirm = _action(mock_connector, scanner, console)

    assert action.ensure(mode, ProjectType.SMALL_APP) == mode
    confirm.assert_not_called()


def test_missing_apt_is_fatal(mock_connector, scanner, console):
    action, confirm = _action(mock_connector, scanner, console)

    with pytest.raises(PreconditionError, match="apt not found"):
        action.ensure(RuntimeMode.none(), ProjectType.SAAS_API)
    confirm.assert_not_called()


def test_declined_install_aborts(mock_connector, scanner, console):
    mock_connector.which.return_value = "/usr/bin/apt"
    action, confirm = _action(mock_connector, scanner, console, answer=False)

    with pytest.raises(AbortedError, match="then rerun"):
        action.ensure(RuntimeMode.none(), ProjectType.SMALL_APP)

    confirm.assert_called_once()
    mock_connector.run.assert_not_called()


def test_root_installs_without_sudo(mock_connector, scanner, console):
    mock_connector.which.return_value = "/usr/bin/apt"
    mock_connector.is_root.return_value = True
    mock_connector.run.return_value = _ok()
    action, _ = _action(mock_connector, scanner, console)

    mode = action.ensure(RuntimeMode.none(), ProjectType.LARGE_APP)

    assert mode == FPM
    assert mock_connector.run.call_args_list == [
        call(["apt", "update"], capture=False),
        call(["apt", "install", "-y", "php-fpm"], capture=False),
    ]
    scanner.probe.assert_called_once()


def test_non_root_uses_sudo(mock_connector, scanner, console):
    mock_connector.which.side_effect = lambda name: f"/usr/bin/{name}"
    mock_connector.run.return_value = _ok()
    action, _ = _action(mock_connector, scanner, console)

    action.ensure(RuntimeMode.none(), ProjectType.SMALL_APP)

    assert mock_connector.run.call_args_list[1] == call(
        ["sudo", "apt", "install", "-y", "php-fpm"], capture=False
    )


def test_non_root_without_sudo_is_fatal(mock_connector, scanner, console):
    mock_connector.which.side_effect = lambda name: "/usr/bin/apt" if name == "apt" else None
    action, _ = _action(mock_connector, scanner, console)

    with pytest.raises(PreconditionError, match="sudo not found"):
        action.ensure(RuntimeMode.none(), ProjectType.SMALL_APP)
    mock_connector.run.assert_not_called()


def test_failed_install_is_fatal(mock_connector, scanner, console):
    mock_connector.which.return_value = "/usr/bin/apt"
    mock_connector.is_root.return_value = True
    mock_connector.run.side_effect = [
        _ok("apt update"),
        CommandResult(command="apt install -y php-fpm", stdout="", stderr="", exit_code=100),
    ]
    action, _ = _action(mock_connector, scanner, console)

    with pytest.raises(PreconditionError, match="exit code 100"):
        action.ensure(RuntimeMode.none(), ProjectType.SMALL_APP)
    scanner.probe.assert_not_called()


def test_missing_socket_after_install_only_warns(mock_connector, scanner, console):
    mock_connector.which.return_value = "/usr/bin/apt"
    mock_connector.is_root.return_value = True
    mock_connector.run.return_value = _ok()
    scanner.probe.return_value = RuntimeMode.none()
    action, _ = _action(mock_connector, scanner, console)

    mode = action.ensure(RuntimeMode.none(), ProjectType.SMALL_APP)

    assert mode == RuntimeMode.none()
    output = console.file.getvalue()
    assert "[WARN]" in output
    assert "no socket detected yet" in output


def test_custom_package_name(mock_connector, scanner, console):
    mock_connector.which.return_value = "/usr/bin/apt"
    mock_connector.is_root.return_value = True
    mock_connector.run.return_value = _ok()
    action = RuntimeAction(
        mock_connector, scanner, console, MagicMock(return_value=True), fpm_package="php8.3-fpm"
    )

    action.ensure(RuntimeMode.none(), ProjectType.SMALL_APP)

    assert mock_connector.run.call_args_list[1] == call(
        ["apt", "install", "-y", "php8.3-fpm"], capture=False
    )
