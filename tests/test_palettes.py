"""Tests for colour_lab.tools.palettes: reply parsing and failure isolation."""

import json

import pytest
from colour_lab.core.env import ProviderConfig
from colour_lab.core.types import Palette
from colour_lab.tools import palettes
from colour_lab.tools.palettes import generate_palettes, parse_palettes

FIVE = ['#264653', '#2A9D8F', '#E9C46A', '#F4A261', '#E76F51']
CONFIG = ProviderConfig(name='test', api_key='k', api_url='http://localhost/v1', model='m')


def _reply(*items) -> str:
    return json.dumps({'palettes': list(items)})


class TestParsePalettes:
    def test_object_shape(self):
        result = parse_palettes(_reply({'name': 'Harbour', 'description': 'Calm.', 'colors': FIVE}))
        assert result == [
            Palette(
                name='Harbour',
                description='Calm.',
                colors=('#264653', '#2a9d8f', '#e9c46a', '#f4a261', '#e76f51'),
            )
        ]

    def test_bare_list(self):
        text = json.dumps([{'name': 'A', 'description': 'd', 'colors': FIVE}])
        assert len(parse_palettes(text)) == 1

    def test_code_fence(self):
        text = '```json\n' + _reply({'name': 'A', 'description': 'd', 'colors': FIVE}) + '\n```'
        assert len(parse_palettes(text)) == 1

    def test_wrong_colour_count_dropped(self):
        text = _reply(
            {'name': 'Four', 'description': 'd', 'colors': FIVE[:4]},
            {'name': 'Five', 'description': 'd', 'colors': FIVE},
        )
        assert [p.name for p in parse_palettes(text)] == ['Five']

    def test_invalid_hex_dropped(self):
        text = _reply({'name': 'Bad', 'description': 'd', 'colors': [*FIVE[:4], 'teal']})
        assert parse_palettes(text) == []

    def test_missing_name_defaults(self):
        assert parse_palettes(_reply({'colors': FIVE}))[0].name == 'Untitled'

    def test_malformed_json(self):
        assert parse_palettes('not json at all') == []

    def test_unexpected_shape(self):
        assert parse_palettes('42') == []
        assert parse_palettes(json.dumps({'palettes': 'nope'})) == []


class TestGeneratePalettes:
    def test_success(self, monkeypatch: pytest.MonkeyPatch):
        reply = _reply({'name': 'A', 'description': 'd', 'colors': FIVE})
        monkeypatch.setattr(palettes, '_call_llm', lambda config, prompt: reply)
        result = generate_palettes('harbour', CONFIG)
        assert [p.name for p in result] == ['A']

    def test_prompt_carries_keyword_and_count(self, monkeypatch: pytest.MonkeyPatch):
        seen = {}

        def fake(config, prompt):
            seen['prompt'] = prompt
            return '[]'

        monkeypatch.setattr(palettes, '_call_llm', fake)
        generate_palettes('autumn harbour', CONFIG, count=3)
        assert '"autumn harbour"' in seen['prompt']
        assert 'Generate 3 distinct' in seen['prompt']

    def test_request_failure_returns_empty(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture):
        def boom(config, prompt):
            raise RuntimeError('connection refused')

        monkeypatch.setattr(palettes, '_call_llm', boom)
        assert generate_palettes('harbour', CONFIG) == []
        assert 'connection refused' in capsys.readouterr().err

    def test_missing_openai_returns_empty(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture):
        def no_openai(config, prompt):
            raise ImportError('No module named openai')

        monkeypatch.setattr(palettes, '_call_llm', no_openai)
        assert generate_palettes('harbour', CONFIG) == []
        assert 'openai' in capsys.readouterr().err

    def test_missing_key_returns_empty(self, capsys: pytest.CaptureFixture):
        config = ProviderConfig(name='gemini', api_key='', api_url='u', model='m')
        assert generate_palettes('harbour', config) == []
        assert 'GEMINI_API_KEY' in capsys.readouterr().err

    def test_blank_keyword(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(palettes, '_call_llm', lambda config, prompt: pytest.fail('should not be called'))
        assert generate_palettes('   ', CONFIG) == []

    def test_garbage_reply_returns_empty(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(palettes, '_call_llm', lambda config, prompt: '<html>502</html>')
        assert generate_palettes('harbour', CONFIG) == []
