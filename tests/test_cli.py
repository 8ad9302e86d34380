"""Tests for pagewarm.cli — CLI entrypoint, argument parsing, commands."""

import logging
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from pagewarm.cli import main
from pagewarm.config import WarmConfig


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """The CLI reconfigures the root logger; put it back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A Next.js-style project with a few pages, as the working directory."""
    for rel in ("app/page.tsx", "app/(site)/about/page.tsx", "app/blog/[slug]/page.tsx"):
        path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("")
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_warm_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["warm", "--help"])
        assert exc_info.value.code == 0

    def test_routes_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "--help"])
        assert exc_info.value.code == 0


class TestCLIBadArgs:
    def test_port_and_base_url_exclusive(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["warm", "--port", "3000", "--base-url", "http://localhost:3000"])
        assert exc_info.value.code == 2

    def test_non_numeric_timeout(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["warm", "--timeout", "soon"])
        assert exc_info.value.code == 2

    def test_invalid_timeout_value(
        self, project: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["warm", "--timeout", "0"])
        assert exc_info.value.code == 1
        assert "Error: timeout must be a positive number" in capsys.readouterr().err

    @patch("pagewarm.cli._warm.warm_routes")
    def test_non_finite_delay_is_fatal(
        self, mock_warm: MagicMock, project: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["warm", "--delay", "nan"])
        assert exc_info.value.code == 1
        mock_warm.assert_not_called()
        assert "Error: delay must be a non-negative number" in capsys.readouterr().err


class TestRoutesCommand:
    def test_lists_in_warm_order(
        self, project: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["routes"])
        assert capsys.readouterr().out.splitlines() == ["/", "/about"]

    def test_explicit_root(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        pages = tmp_path / "pages-root" / "docs"
        pages.mkdir(parents=True)
        (pages / "page.js").write_text("")
        main(["routes", "--root", str(tmp_path / "pages-root")])
        assert capsys.readouterr().out.splitlines() == ["/docs"]

    def test_skip_notices_on_stderr(
        self, project: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["routes"])
        err = capsys.readouterr().err
        assert "Found app directory at: ./app" in err
        assert "Skipping dynamic route: /blog/[slug]" in err

    def test_quiet_hides_notices(
        self, project: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["routes", "--quiet"])
        assert "Skipping" not in capsys.readouterr().err

    def test_no_routes(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "--root", str(tmp_path)])
        assert "No static routes found." in capsys.readouterr().out

    def test_missing_app_dir(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SystemExit) as exc_info:
            main(["routes"])
        assert exc_info.value.code == 1
        assert "Error: Could not find 'app' or 'src/app' directory" in capsys.readouterr().err

    def test_unreadable_tree_single_error_line(
        self,
        project: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        app = (project / "app").resolve()
        real_iterdir = Path.iterdir

        def iterdir(self: Path):
            if self.resolve() == app:
                raise PermissionError(13, "Permission denied", str(self))
            return real_iterdir(self)

        monkeypatch.setattr(Path, "iterdir", iterdir)
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "--quiet"])
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert err.startswith("Error: Could not discover routes under")
        assert err.count("Error") == 1


class TestWarmCommand:
    @patch("pagewarm.cli._warm.warm_routes")
    def test_discovers_and_warms(self, mock_warm: MagicMock, project: Path) -> None:
        main(["warm"])
        mock_warm.assert_called_once()
        routes, config = mock_warm.call_args[0]
        assert sorted(routes) == ["/", "/about"]
        assert config == WarmConfig()

    @patch("pagewarm.cli._warm.warm_routes")
    def test_bare_command_warms(self, mock_warm: MagicMock, project: Path) -> None:
        main([])
        mock_warm.assert_called_once()
        assert sorted(mock_warm.call_args[0][0]) == ["/", "/about"]

    @patch("pagewarm.cli._warm.warm_routes")
    def test_port_flag(self, mock_warm: MagicMock, project: Path) -> None:
        main(["warm", "--port", "4000", "--delay", "0.5", "--timeout", "45"])
        config = mock_warm.call_args[0][1]
        assert config.base_url == "http://localhost:4000"
        assert config.delay == 0.5
        assert config.timeout == 45.0

    @patch("pagewarm.cli._warm.warm_routes")
    def test_base_url_flag(self, mock_warm: MagicMock, project: Path) -> None:
        main(["warm", "--base-url", "http://127.0.0.1:3001/"])
        assert mock_warm.call_args[0][1].base_url == "http://127.0.0.1:3001"

    @patch("pagewarm.cli._warm.warm_routes")
    def test_prints_discovery_banner(
        self, mock_warm: MagicMock, project: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["warm"])
        assert "Discovering routes..." in capsys.readouterr().out

    @patch("pagewarm.cli._warm.warm_routes")
    def test_missing_app_dir_never_warms(
        self,
        mock_warm: MagicMock,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SystemExit) as exc_info:
            main(["warm"])
        assert exc_info.value.code == 1
        mock_warm.assert_not_called()
        assert "Error:" in capsys.readouterr().err

    def test_empty_tree_exits_cleanly(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (tmp_path / "app").mkdir()
        main(["warm", "--root", str(tmp_path / "app")])
        assert "No static routes found to warm up." in capsys.readouterr().out
