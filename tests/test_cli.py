"""
Tests for the content analysis command line runner.
"""

import sys

import pytest

from scripts.analyze_content import main, run_analysis


class TestRunAnalysis:

    def test_clean_content_report(self, clean_content):
        report = run_analysis(clean_content, industry="finance", keyword="index funds")

        assert report["approved"] is True
        assert report["phrases"]["overall_score"] == 100
        assert report["eeat"]["eeat_score"] == 42
        assert "local_search" not in report
        assert "cleaned_content" not in report

    def test_optional_sections(self, weak_content):
        report = run_analysis(weak_content, industry="tech", keyword="crm", region="UK", eliminate=True)

        assert report["approved"] is False
        assert report["local_search"]["region"] == "UK"
        assert "realm" not in report["cleaned_content"]


class TestMain:

    def test_approved_exit_code(self, tmp_path, monkeypatch, capsys, clean_content):
        path = tmp_path / "article.txt"
        path.write_text(clean_content, encoding="utf-8")
        monkeypatch.setattr(sys, "argv", ["analyze_content.py", str(path), "--json"])

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 0
        assert '"approved": true' in capsys.readouterr().out

    def test_rejected_exit_code(self, tmp_path, monkeypatch, weak_content):
        path = tmp_path / "article.txt"
        path.write_text(weak_content, encoding="utf-8")
        monkeypatch.setattr(sys, "argv", ["analyze_content.py", str(path)])

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1

    def test_empty_file_exit_code(self, tmp_path, monkeypatch):
        path = tmp_path / "empty.txt"
        path.write_text("  \n", encoding="utf-8")
        monkeypatch.setattr(sys, "argv", ["analyze_content.py", str(path)])

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 2
