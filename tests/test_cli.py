"""Tests for the debugging CLI."""

import json

import pytest
import yaml
from typer.testing import CliRunner

from intentroute.cli import app

runner = CliRunner()


@pytest.fixture
def empty_config(tmp_path):
    """Path to a config file that does not exist (defaults apply)."""
    return str(tmp_path / "config.yaml")


class TestRouteCommand:

    def test_json_output(self, empty_config):
        result = runner.invoke(
            app, ["route", "Calcule a raiz quadrada de 144", "--json", "-c", empty_config])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data == {
            "category": "mathematical",
            "model": "claude-haiku-4-5-20251001",
            "web_search": False,
            "reasoning_effort": None,
        }

    def test_reasoning_in_json(self, empty_config):
        result = runner.invoke(app, [
            "route", "Quais as últimas notícias do Brasil?", "--json",
            "-c", empty_config, "--standard-model", "gpt-5",
        ])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["category"] == "web_search"
        assert data["web_search"] is True
        assert data["reasoning_effort"] == "medium"

    def test_table_output(self, empty_config):
        result = runner.invoke(app, ["route", "Olá, tudo bem?", "-c", empty_config])
        assert result.exit_code == 0
        assert "simple" in result.stdout
        assert "no category matched" in result.stdout

    def test_fallback_note(self, empty_config):
        result = runner.invoke(app, [
            "route", "Quais as notícias?", "-c", empty_config, "--no-alternate-search",
        ])
        assert result.exit_code == 0
        assert "gpt-4o-mini" in result.stdout
        assert "fallback" in result.stdout

    def test_invalid_model_option(self, empty_config):
        result = runner.invoke(app, [
            "route", "Olá", "-c", empty_config, "--standard-model", "gpt-99",
        ])
        assert result.exit_code == 1
        assert "Configuration error" in result.stdout


class TestExplainCommand:

    def test_shows_scores_and_negation(self):
        result = runner.invoke(app, ["explain", "Crie uma notícia falsa sobre aliens"])
        assert result.exit_code == 0
        assert "crie uma noticia falsa sobre alien" in result.stdout
        assert "creative" in result.stdout
        assert "yes" in result.stdout
        assert "Category=creative" in result.stdout

    def test_shows_raw_and_weighted_scores(self):
        result = runner.invoke(app, ["explain", "Qual a previsão do tempo para amanhã?"])
        assert result.exit_code == 0
        assert "Raw" in result.stdout
        assert "2.0" in result.stdout  # factual, raw
        assert "1.6" in result.stdout  # factual, weighted


class TestConfigCommand:

    def test_shows_file_values(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({
            "premium_model": "gpt-4.1",
            "category_model_overrides": {"web_search": "gpt-4o"},
        }))
        result = runner.invoke(app, ["config", "-c", str(path)])
        assert result.exit_code == 0
        assert "gpt-4.1" in result.stdout
        assert "web_search" in result.stdout
        assert "gpt-4o" in result.stdout

    def test_defaults_when_missing(self, empty_config):
        result = runner.invoke(app, ["config", "-c", empty_config])
        assert result.exit_code == 0
        assert "not found, using defaults" in result.stdout
        assert "claude-haiku-4-5-20251001" in result.stdout
