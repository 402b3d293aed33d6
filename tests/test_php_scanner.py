"""Tests for PHP runtime detection."""

from apache_skeleton.model.runtime import RuntimeMode
from apache_skeleton.scanner.php import PHPRuntimeScanner


def _sockets(*paths):
    existing = set(paths)
    return lambda path: path in existing


def test_prefers_newest_canonical_socket(mock_connector):
    mock_connector.is_socket.side_effect = _sockets(
        "/run/php/php8.2-fpm.sock",
        "/run/php/php8.3-fpm.sock",
    )

    mode = PHPRuntimeScanner(mock_connector).probe()

    assert mode == RuntimeMode.fpm("/run/php/php8.3-fpm.sock")
    mock_connector.glob.assert_not_called()


def test_falls_back_to_wildcard_socket(mock_connector):
    mock_connector.is_socket.side_effect = _sockets("/run/php/php7.4-fpm.sock")
    mock_connector.glob.side_effect = lambda pattern: (
        ["/run/php/php7.4-fpm.sock"] if pattern == PHPRuntimeScanner.SOCKET_GLOB else []
    )

    mode = PHPRuntimeScanner(mock_connector).probe()

    assert mode == RuntimeMode.fpm("/run/php/php7.4-fpm.sock")


def test_wildcard_match_that_is_not_a_socket_is_ignored(mock_connector):
    mock_connector.glob.side_effect = lambda pattern: (
        ["/run/php/php7.4-fpm.sock"] if pattern == PHPRuntimeScanner.SOCKET_GLOB else []
    )

    mode = PHPRuntimeScanner(mock_connector).probe()

    assert mode == RuntimeMode.none()


def test_detects_enabled_mod_php(mock_connector):
    mock_connector.dir_exists.return_value = True
    mock_connector.glob.side_effect = lambda pattern: (
        ["/etc/apache2/mods-enabled/php8.3.load"]
        if pattern == "/etc/apache2/mods-enabled/php*.load"
        else []
    )

    mode = PHPRuntimeScanner(mock_connector).probe()

    assert mode == RuntimeMode.module()


def test_fpm_wins_over_mod_php(mock_connector):
    mock_connector.is_socket.side_effect = _sockets("/run/php/php8.1-fpm.sock")
    mock_connector.dir_exists.return_value = True
    mock_connector.glob.return_value = ["/etc/apache2/mods-enabled/php8.1.load"]

    mode = PHPRuntimeScanner(mock_connector).probe()

    assert mode.is_fpm
    assert mode.socket_path == "/run/php/php8.1-fpm.sock"


def test_nothing_installed_is_none_not_error(mock_connector):
    mode = PHPRuntimeScanner(mock_connector).probe()

    assert mode == RuntimeMode.none()
    # No Apache modules directory means no mod_php lookup
    mock_connector.glob.assert_called_once_with(PHPRuntimeScanner.SOCKET_GLOB)
