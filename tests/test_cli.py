import textwrap
from pathlib import Path

import pytest
from click.testing import CliRunner

from ssh_config_editor import cli
from ssh_config_editor.cli import main

SAMPLE = textwrap.dedent(
    """
    # legacy config
    Host alpha
      HostName 10.0.0.1
      User root
    Host beta
      HostName 10.0.0.2
      Port 2222
    """
).strip() + "\n"


class FakeApp:
    launched = []

    def __init__(self, state):
        self.state = state

    def run(self):
        FakeApp.launched.append(self.state)


@pytest.fixture
def fake_home(monkeypatch, tmp_path):
    monkeypatch.setenv('HOME', str(tmp_path))
    monkeypatch.delenv(cli.LOG_ENV_VAR, raising=False)
    from pathlib import Path as _P
    monkeypatch.setattr(_P, 'home', lambda: tmp_path)
    FakeApp.launched = []
    monkeypatch.setattr(cli, 'SSHConfigApp', FakeApp)
    return tmp_path


def test_cli_loads_config_and_launches(fake_home):
    ssh_dir = fake_home / '.ssh'
    ssh_dir.mkdir()
    (ssh_dir / 'config').write_text(SAMPLE, encoding='utf-8')

    result = CliRunner().invoke(main, [])
    assert result.exit_code == 0, result.output
    state = FakeApp.launched[0]
    assert [h.host for h in state.visible_hosts()] == ['alpha', 'beta']


@pytest.mark.parametrize('flag', ['-s', '-search', '--search'])
def test_cli_search_flag(fake_home, flag):
    ssh_dir = fake_home / '.ssh'
    ssh_dir.mkdir()
    (ssh_dir / 'config').write_text(SAMPLE, encoding='utf-8')

    result = CliRunner().invoke(main, [flag, '10.0.0.2'])
    assert result.exit_code == 0, result.output
    state = FakeApp.launched[0]
    assert [h.host for h in state.visible_hosts()] == ['beta']
    assert len(state.hosts) == 2


def test_cli_persist_writes_config(fake_home):
    ssh_dir = fake_home / '.ssh'
    ssh_dir.mkdir()
    config = ssh_dir / 'config'
    config.write_text(SAMPLE, encoding='utf-8')

    CliRunner().invoke(main, [])
    state = FakeApp.launched[0]
    state.persist(state.hosts[1:])
    assert config.read_text() == 'Host beta\n  HostName 10.0.0.2\n  Port 2222\n\n'


def test_cli_creates_missing_config(fake_home):
    (fake_home / '.ssh').mkdir()
    result = CliRunner().invoke(main, [])
    assert result.exit_code == 0, result.output
    assert (fake_home / '.ssh' / 'config').exists()
    assert FakeApp.launched[0].hosts == []


def test_cli_fails_without_ssh_dir(fake_home):
    result = CliRunner().invoke(main, [])
    assert result.exit_code == 1
    assert 'Cannot write to' in result.output
    assert FakeApp.launched == []


def test_cli_fails_without_home(fake_home, monkeypatch):
    def _no_home():
        raise RuntimeError('Could not determine home directory.')
    monkeypatch.setattr(Path, 'home', _no_home)
    result = CliRunner().invoke(main, [])
    assert result.exit_code == 1
    assert 'Error getting current user' in result.output


def test_cli_reports_ui_failure(fake_home, monkeypatch):
    (fake_home / '.ssh').mkdir()

    class BrokenApp(FakeApp):
        def run(self):
            raise RuntimeError('no terminal')

    monkeypatch.setattr(cli, 'SSHConfigApp', BrokenApp)
    result = CliRunner().invoke(main, [])
    assert result.exit_code == 1
    assert 'no terminal' in result.output


def test_cli_version():
    result = CliRunner().invoke(main, ['--version'])
    assert result.exit_code == 0
    assert '0.1.0' in result.output
