"""Tests for frontmatter_lint.loader"""

import datetime

from frontmatter_lint.loader import iter_documents


def write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


class TestIterDocuments:
    def test_identities_are_relative_with_leading_slash(self, tmp_path):
        write(tmp_path / "index.md", "---\ntitle: Home\n---\nWelcome\n")
        write(tmp_path / "guide" / "intro.md", "---\ntitle: Intro\n---\n")
        records = list(iter_documents(tmp_path))
        assert [r.identity for r in records] == ["/guide/intro.md", "/index.md"]

    def test_metadata_types_from_yaml(self, tmp_path):
        write(
            tmp_path / "post.md",
            "---\ntitle: Hi\ndate: 2021-05-01\ndraft: true\nweight: 2\ntags: [a, b]\n---\nBody\n",
        )
        (record,) = iter_documents(tmp_path)
        assert record.metadata == {
            "title": "Hi",
            "date": datetime.date(2021, 5, 1),
            "draft": True,
            "weight": 2,
            "tags": ["a", "b"],
        }

    def test_key_order_is_kept(self, tmp_path):
        write(tmp_path / "a.md", "---\nzeta: 1\nalpha: 2\n---\n")
        (record,) = iter_documents(tmp_path)
        assert list(record.metadata) == ["zeta", "alpha"]

    def test_page_without_frontmatter(self, tmp_path):
        write(tmp_path / "plain.md", "# Just a heading\n")
        (record,) = iter_documents(tmp_path)
        assert record.metadata == {}

    def test_unparseable_frontmatter_is_skipped(self, tmp_path, capsys):
        write(tmp_path / "broken.md", "---\ntitle: [unclosed\n---\n")
        write(tmp_path / "ok.md", "---\ntitle: Fine\n---\n")
        records = list(iter_documents(tmp_path))
        assert [r.identity for r in records] == ["/ok.md"]
        assert "WARNING: Could not parse" in capsys.readouterr().err

    def test_custom_glob(self, tmp_path):
        write(tmp_path / "a.md", "---\ntitle: A\n---\n")
        write(tmp_path / "b.markdown", "---\ntitle: B\n---\n")
        records = list(iter_documents(tmp_path, "*.markdown"))
        assert [r.identity for r in records] == ["/b.markdown"]
