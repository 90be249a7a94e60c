import pytest

import check_gitbook_tags
from check_gitbook_tags import find_leftover_tags


def test_reports_unconverted_tags():
    text = '# Page\n\n{% tabs %}\n\n{% tab title="Linux" %}\nRun it.\n{% endtab %}\n'
    names = [name for _line, name, _tag in find_leftover_tags(text)]
    assert names == ["tabs", "tab", "endtab"]


def test_ignores_tags_in_code():
    text = "Use `{% hint style=\"info\" %}` here.\n\n```\n{% embed url=\"x\" %}\n```\n"
    assert find_leftover_tags(text) == []


def test_clean_tree_exits_zero(tmp_path, monkeypatch, capsys):
    (tmp_path / "ok.md").write_text("<Note>\nAll good\n</Note>\n", encoding="utf-8")
    monkeypatch.setattr("sys.argv", ["check_gitbook_tags.py", str(tmp_path)])
    with pytest.raises(SystemExit) as exc:
        check_gitbook_tags.main()
    assert exc.value.code == 0
    assert "No leftover GitBook tags found." in capsys.readouterr().out


def test_leftovers_exit_one_and_skip_dot_dirs(tmp_path, monkeypatch, capsys):
    page = tmp_path / "docs" / "page.mdx"
    page.parent.mkdir()
    page.write_text('{% content-ref url="other.md" %}\n', encoding="utf-8")
    hidden = tmp_path / ".gitbook" / "skip.md"
    hidden.parent.mkdir()
    hidden.write_text("{% tabs %}\n", encoding="utf-8")
    monkeypatch.setattr("sys.argv", ["check_gitbook_tags.py", str(tmp_path)])
    with pytest.raises(SystemExit) as exc:
        check_gitbook_tags.main()
    assert exc.value.code == 1
    out = capsys.readouterr().out
    assert f"{page}:1:" in out
    assert " - content-ref: 1" in out
    assert "skip.md" not in out


def test_line_numbers_point_into_source():
    text = (
        "# Page\n"
        "\n"
        "```\n"
        "{% tabs %}\n"
        "```\n"
        "\n"
        "Intro with `{% tabs %}` inline.\n"
        "\n"
        "{% tabs %}\n"
        "\n"
        '{% tab title="A & B" %}\n'
    )
    assert find_leftover_tags(text) == [
        (9, "tabs", "{% tabs %}"),
        (11, "tab", '{% tab title="A & B" %}'),
    ]


def test_unreadable_file_exits_two(tmp_path, monkeypatch, capsys):
    (tmp_path / "ok.md").write_text("Fine\n", encoding="utf-8")
    bad = tmp_path / "bad.md"
    bad.write_bytes(b"\xff\xfe\xfa")
    monkeypatch.setattr("sys.argv", ["check_gitbook_tags.py", str(tmp_path)])
    with pytest.raises(SystemExit) as exc:
        check_gitbook_tags.main()
    assert exc.value.code == 2
    assert f"Could not read {bad}" in capsys.readouterr().err
