"""Tests for the fluxmod command-line interface."""

import tempfile

import yaml
from click.testing import CliRunner

from fluxmod.cli import main
from fluxmod.lexicon import store as store_module
from fluxmod.lexicon.store import LexiconStore


def _invoke(*args):
    return CliRunner().invoke(main, list(args))


def test_moderate_flagged():
    result = _invoke("moderate", "this is spam content")
    assert result.exit_code == 0
    assert "FLAGGED" in result.output
    assert "spam" in result.output


def test_moderate_clean():
    result = _invoke("moderate", "a perfectly normal update")
    assert result.exit_code == 0
    assert "OK" in result.output


def test_sentiment():
    result = _invoke("sentiment", "I love it but also hate it")
    assert result.exit_code == 0
    assert "Neutral" in result.output


def test_evaluate():
    result = _invoke("evaluate", "spam is terrible")
    assert result.exit_code == 0
    assert "flagged" in result.output
    assert "Negative" in result.output


def test_captions():
    result = _invoke("captions", "just launched my new project")
    assert result.exit_code == 0
    assert "1. Just launched something new" in result.output


def test_lexicon_show():
    result = _invoke("lexicon", "show")
    assert result.exit_code == 0
    assert "banned/" in result.output
    assert "spam" in result.output


def test_lexicon_validate():
    good = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
    yaml.dump(
        {
            "moderation": {"spam": ["spam"]},
            "sentiment": {"positive": ["good"], "negative": ["good"]},
        },
        good,
    )
    good.close()
    result = _invoke("lexicon", "validate", good.name)
    assert result.exit_code == 1
    assert "positive" in result.output


def test_lexicon_export_round_trip():
    out = tempfile.NamedTemporaryFile(suffix=".yaml", delete=False)
    out.close()
    result = _invoke("lexicon", "export", "-o", out.name)
    assert result.exit_code == 0
    with open(out.name) as f:
        data = yaml.safe_load(f)
    assert "spam" in data["moderation"]["spam"]
    assert _invoke("lexicon", "validate", out.name).exit_code == 0


def test_bad_global_lexicon_exits():
    result = _invoke("--lexicon", "/nonexistent/lexicon.yaml", "moderate", "hello")
    assert result.exit_code == 1
    assert "Lexicon error" in result.output


def test_global_lexicon_is_used(monkeypatch):
    monkeypatch.setattr(store_module, "_store", LexiconStore())
    custom = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
    yaml.dump(
        {
            "moderation": {"custom": ["pineapple"]},
            "sentiment": {"positive": ["sunny"], "negative": ["rainy"]},
        },
        custom,
    )
    custom.close()

    result = _invoke("--lexicon", custom.name, "moderate", "Pineapple pizza")
    assert result.exit_code == 0
    assert "FLAGGED" in result.output
    assert "pineapple" in result.output

    result = _invoke("--lexicon", custom.name, "moderate", "this is spam content")
    assert result.exit_code == 0
    assert "OK" in result.output
