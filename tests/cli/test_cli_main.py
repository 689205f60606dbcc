"""Tests for the `ghosts` command (typer CliRunner)."""

import pytest
from typer.testing import CliRunner

from ghosts.cli import main as cli_main
from ghosts.core.errors import MetaFetchError

runner = CliRunner()

META = {"web": ["192.0.2.0/24"], "git": ["2001:db8::/32"]}


@pytest.fixture
def cli_env(tmp_path, monkeypatch, scripted_resolver):
    """Isolated cwd, two configured domains and a scripted resolver."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GHOSTS_DOMAINS", '["github.com", "gone.example"]')
    resolver = scripted_resolver(v4={"github.com": ["140.82.112.3"]})
    monkeypatch.setattr(cli_main, "build_resolver", lambda settings: resolver)
    return tmp_path


def meta_fetcher(payload=None, error=None):
    async def fetch():
        if error is not None:
            raise error
        return payload

    return fetch


class TestUpdateCommand:
    """Exit code 0 on success, 1 on any fatal error."""

    def test_success_writes_all_files(self, cli_env, monkeypatch) -> None:
        """Every output file lands in --output-dir."""
        monkeypatch.setattr(cli_main, "build_meta_fetcher", lambda settings: meta_fetcher(META))
        out = cli_env / "out"
        result = runner.invoke(cli_main.app, ["-o", str(out), "-q"])
        assert result.exit_code == 0, result.output
        names = sorted(p.name for p in out.iterdir())
        assert names == [
            "github-dns-list.rsc",
            "github-ip-list.rsc",
            "github-ipv4-list.rsc",
            "github-ipv6-list.rsc",
            "hosts",
            "hosts.mdns",
        ]
        hosts = (out / "hosts").read_text(encoding="utf-8")
        assert "140.82.112.3   github.com\n" in hosts
        assert "# gone.example resolution failed\n" in hosts

    def test_skip_meta(self, cli_env, monkeypatch) -> None:
        """--skip-meta never builds the meta fetcher."""

        def forbidden(settings):
            raise AssertionError("meta fetcher must not be built")

        monkeypatch.setattr(cli_main, "build_meta_fetcher", forbidden)
        result = runner.invoke(cli_main.app, ["--skip-meta", "-q"])
        assert result.exit_code == 0, result.output
        assert (cli_env / "hosts").exists()
        assert not (cli_env / "github-ipv4-list.rsc").exists()

    def test_meta_failure_exits_one(self, cli_env, monkeypatch) -> None:
        """A failed meta fetch is fatal but earlier files remain."""
        monkeypatch.setattr(
            cli_main,
            "build_meta_fetcher",
            lambda settings: meta_fetcher(error=MetaFetchError(503, "Service Unavailable")),
        )
        result = runner.invoke(cli_main.app, ["-q"])
        assert result.exit_code == 1
        assert (cli_env / "hosts").exists()
        assert not (cli_env / "github-ipv6-list.rsc").exists()

    def test_invalid_settings_exit_one(self, cli_env, monkeypatch) -> None:
        """Configuration errors are reported, not raised."""
        monkeypatch.setenv("GHOSTS_LOOKUP_ATTEMPTS", "0")
        result = runner.invoke(cli_main.app, ["--skip-meta", "-q"])
        assert result.exit_code == 1
        assert not (cli_env / "hosts").exists()

    def test_summary_table_shown(self, cli_env, monkeypatch) -> None:
        """Without --quiet the resolved records are listed per family."""
        monkeypatch.setattr(cli_main, "build_meta_fetcher", lambda settings: meta_fetcher(META))
        result = runner.invoke(cli_main.app, [])
        assert result.exit_code == 0, result.output
        assert "Resolved domains" in result.output
        assert "IPv4" in result.output
        assert "IPv6" in result.output
        assert "github.com" in result.output
