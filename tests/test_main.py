import pytest

from main import main


@pytest.mark.ci
def test_main_prints_sample(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("<root>\n  <html>\n    <head>\n")
    assert "\n        =HTML Parser\n" in out


@pytest.mark.ci
def test_main_strict_failure(capsys):
    assert main(["<a><b></a>", "--strict"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "end-tag-mismatch" in captured.err


@pytest.mark.ci
def test_main_max_depth(capsys):
    assert main(["<a><b></b></a>", "--max-depth", "1"]) == 1
    assert "nesting-too-deep" in capsys.readouterr().err


@pytest.mark.ci
def test_main_lists_errors(capsys):
    assert main(["<a x=y></a>", "--errors"]) == 0
    captured = capsys.readouterr()
    assert '<a x="" y="">' in captured.out
    assert "missing-attribute-value-quote" in captured.err
