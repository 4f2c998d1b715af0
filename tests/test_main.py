import pytest

from main import main, rule_pair, to_rich_tree
from trees import NonTerminalTree, TerminalTree


def test_rule_pair():
    assert rule_pair("S=aSb|") == ("S", "aSb|")
    assert rule_pair("S=") == ("S", "")


def test_rule_without_separator():
    with pytest.raises(SystemExit):
        main(["check", "S"])


def test_regex(capsys):
    assert main(["regex", "a|b"]) == 0
    assert "{ a, b }" in capsys.readouterr().out


def test_malformed_regex(capsys):
    assert main(["regex", "(a"]) == 0
    assert "Malformed expression" in capsys.readouterr().out


def test_check(capsys):
    assert main(["check", "S=A", "A=a", "B=b"]) == 0
    out = capsys.readouterr().out
    assert "Nonterminal B is unreachable from the start symbol S." in out
    assert "reachable" in out and "nullable" in out


def test_derive(capsys):
    assert main(["derive", "S=a|b"]) == 0
    out = capsys.readouterr().out
    assert "All derivation trees" in out


def test_derive_at_most(capsys):
    assert main(["derive", "S=aS|", "--depth", "3", "--max-trees", "1"]) == 0
    out = capsys.readouterr().out
    assert "Derivation trees of depth at most 3" in out
    assert "... and 2 more" in out


def test_parse(capsys):
    assert main(["parse", "S=SS|a", "--sentence", "aaa"]) == 0
    assert "Derivation trees for 'aaa'" in capsys.readouterr().out


def test_reserved_start_symbol(capsys):
    assert main(["check", "Start=a"]) == 1
    assert "Malformed grammar" in capsys.readouterr().out


def test_rich_tree():
    tree = to_rich_tree(NonTerminalTree("S", (TerminalTree("a"), NonTerminalTree("S"))))
    assert "S" in tree.label
    assert len(tree.children) == 2
    assert "ε" in tree.children[1].label


def test_svg_output(tmp_path, capsys):
    out_dir = tmp_path / "svg"
    assert main(["parse", "S=SS|a", "--sentence", "aaa", "--svg", str(out_dir)]) == 0
    files = sorted(p.name for p in out_dir.iterdir())
    assert files == ["tree_0.svg", "tree_1.svg"]
    assert (out_dir / "tree_0.svg").read_text().startswith("<svg ")


def test_pdf_output(monkeypatch, tmp_path, capsys):
    rendered = []

    def fake_draw(tree):
        rendered.append(tree)
        return tmp_path / "tree.pdf"

    monkeypatch.setattr("main.draw_tree_pdf", fake_draw)
    assert main(["derive", "S=a|b", "--pdf"]) == 0
    assert [tree.sentence for tree in rendered] == ["a"]
    assert "Rendered" in capsys.readouterr().out
