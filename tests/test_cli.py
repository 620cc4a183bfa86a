"""
Tests for the command-line front end.
"""
import io
import json

from voice_nlu.__main__ import main


def test_list_variants(capsys):
    assert main(["--list"]) == 0
    out = capsys.readouterr().out.split()
    assert "en-US" in out
    assert "de-BY" in out
    assert "it-CH" in out


def test_process_arguments(capsys):
    assert main(["--variant", "fr-CH", "je voudrais septante grammes de fromage"]) == 0
    result = json.loads(capsys.readouterr().out.strip())
    assert result["canonical_text"] == "Je voudrais 70 grammes de fromage"
    assert result["classification"]["intent"] == "order"


def test_custom_vocabulary_and_stats(capsys):
    assert main(["--vocab", "xyz=Canonical", "--stats", "xyz please"]) == 0
    out = capsys.readouterr().out
    first_line, stats = out.split("\n", 1)
    assert json.loads(first_line)["canonical_text"] == "Canonical please"
    assert json.loads(stats)["confidence_boosts"] == 1


def test_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("can i get chips\n\n"))
    assert main([]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0])["canonical_text"] == "Can I get french fries"


def test_unknown_variant(capsys):
    assert main(["--variant", "xx-YY", "hello"]) == 2
    assert "Unsupported" in capsys.readouterr().err


def test_invalid_vocabulary(capsys):
    assert main(["--vocab", "no-separator", "hello"]) == 2
