"""Tests for colour_lab.core.env: .env loading, walk-up logic and provider config."""

import os
from pathlib import Path

import pytest
from colour_lab.core.env import find_env_file, load_env, provider_config, read_env_file


class TestReadEnvFile:
    def test_simple_key_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('FOO=bar\n')
        assert read_env_file(f) == {'FOO': 'bar'}

    def test_quoted_values(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('KEY="hello world"\nKEY2=\'single\'\n')
        assert read_env_file(f) == {'KEY': 'hello world', 'KEY2': 'single'}

    def test_comments_and_blank_lines_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('# comment\n\nFOO=bar\n\n')
        assert read_env_file(f) == {'FOO': 'bar'}

    def test_export_prefix(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('export GEMINI_API_KEY=abc\n')
        assert read_env_file(f) == {'GEMINI_API_KEY': 'abc'}

    def test_line_without_equals_skipped(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('NOEQUALS\nFOO=bar\n')
        assert read_env_file(f) == {'FOO': 'bar'}


class TestFindEnvFile:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert find_env_file(tmp_path) == dotenv

    def test_finds_in_parent(self, tmp_path: Path) -> None:
        subdir = tmp_path / 'sub'
        subdir.mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert find_env_file(subdir) == dotenv

    def test_stops_at_git_dir(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        (repo / '.git').mkdir(parents=True)
        (repo / 'src').mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        assert find_env_file(repo / 'src') is None

    def test_stops_at_git_file(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        repo.mkdir()
        (repo / '.git').write_text('gitdir: ../somewhere\n')
        (repo / 'src').mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        assert find_env_file(repo / 'src') is None


class TestLoadEnv:
    def test_sets_missing_vars(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('TEST_COLOUR_LAB_KEY', raising=False)
        (tmp_path / '.env').write_text('TEST_COLOUR_LAB_KEY=secret\n')
        monkeypatch.chdir(tmp_path)
        load_env()
        assert os.environ.get('TEST_COLOUR_LAB_KEY') == 'secret'
        monkeypatch.delenv('TEST_COLOUR_LAB_KEY')

    def test_does_not_overwrite_existing(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('TEST_COLOUR_LAB_KEY2', 'original')
        (tmp_path / '.env').write_text('TEST_COLOUR_LAB_KEY2=fromfile\n')
        monkeypatch.chdir(tmp_path)
        load_env()
        assert os.environ.get('TEST_COLOUR_LAB_KEY2') == 'original'

    def test_explicit_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('TEST_COLOUR_LAB_KEY3', raising=False)
        dotenv = tmp_path / 'custom.env'
        dotenv.write_text('TEST_COLOUR_LAB_KEY3=custom\n')
        assert load_env(env_file=str(dotenv)) == dotenv
        assert os.environ.get('TEST_COLOUR_LAB_KEY3') == 'custom'
        monkeypatch.delenv('TEST_COLOUR_LAB_KEY3')

    def test_explicit_missing_file(self, tmp_path: Path) -> None:
        assert load_env(env_file=str(tmp_path / 'nope.env')) is None

    def test_returns_none_when_no_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / '.git').mkdir()
        monkeypatch.chdir(tmp_path)
        assert load_env() is None


class TestProviderConfig:
    def test_builtin_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for var in ('GEMINI_API_KEY', 'GEMINI_API_URL', 'GEMINI_MODEL', 'COLOUR_LAB_API_KEY'):
            monkeypatch.delenv(var, raising=False)
        config = provider_config('gemini')
        assert config.model == 'gemini-2.5-flash'
        assert config.api_url.startswith('https://')
        assert config.missing() == ['GEMINI_API_KEY']

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('LOCAL_API_KEY', 'k')
        monkeypatch.setenv('LOCAL_API_URL', 'http://localhost:11434/v1')
        monkeypatch.setenv('LOCAL_MODEL', 'llama3')
        config = provider_config('Local')
        assert (config.name, config.api_key, config.api_url, config.model) == (
            'local',
            'k',
            'http://localhost:11434/v1',
            'llama3',
        )
        assert config.missing() == []

    def test_fallback_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('GROQ_API_KEY', raising=False)
        monkeypatch.setenv('COLOUR_LAB_API_KEY', 'shared')
        assert provider_config('groq').api_key == 'shared'

    def test_explicit_key_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('OPENAI_API_KEY', 'from-env')
        assert provider_config('openai', explicit_key='from-flag').api_key == 'from-flag'

    def test_unknown_provider_missing_everything(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('COLOUR_LAB_API_KEY', raising=False)
        monkeypatch.delenv('NOSUCH_API_KEY', raising=False)
        assert provider_config('nosuch').missing() == ['NOSUCH_API_KEY', 'NOSUCH_API_URL', 'NOSUCH_MODEL']
