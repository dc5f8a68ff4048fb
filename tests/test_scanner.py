"""
Tests for the layout scanner.
"""

import pytest
import os
import re
import sys
from collections import Counter

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from layoutscanner.config import ScanConfig, load_config, load_scan_config
from layoutscanner.core.engine import ScanEngine
from layoutscanner.core.errors import TraversalError
from layoutscanner.core.issues import Issue, IssueType, ScanResult
from layoutscanner.core.rules import PatternRule, RuleMetadata, RuleRegistry, registry
from layoutscanner.core.walker import iter_source_files, should_scan_file
from layoutscanner.rules.colors import HardCodedColorRule
from layoutscanner.rules.layout import DeprecatedLayoutRule
from layoutscanner.rules.tokens import (
    THEME_TOKEN_REPLACEMENTS, DEPRECATED_LAYOUT_REPLACEMENTS
)


SAMPLE_COMPONENT = '''import React from "react";

export function Dashboard() {
  return (
    <div className="max-w-screen-xl mx-auto bg-gray-50">
      <div className="card p-4 text-gray-900 border-slate-400">
        <section className="max-w-[920px] container px-4">
          <p className="text-zinc-300">Hello</p>
        </section>
      </div>
    </div>
  );
}
'''


def write(path, content):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


class TestScanEngine:
    """Tests for the main scan engine."""

    def test_engine_creation(self):
        """Test that engine can be created with every built-in rule."""
        engine = ScanEngine()
        rule_ids = {r.metadata.rule_id for r in engine.rules}
        assert rule_ids == {
            "LAYOUT-COLOR-001",
            "LAYOUT-DEPR-001",
            "LAYOUT-WIDTH-001",
            "LAYOUT-OVERFLOW-001",
        }

    def test_hard_coded_color_in_table(self):
        """A listed palette class is auto-fixable with its token."""
        issues = ScanEngine().scan_content('className="bg-gray-50 p-4"', "App.tsx")

        assert len(issues) == 1
        issue = issues[0]
        assert issue.type == IssueType.HARD_CODED_COLOR
        assert issue.line == 1
        assert issue.message == "Hard-coded color: bg-gray-50"
        assert issue.suggestion == "Replace with: bg-pr-surface-2"
        assert issue.auto_fixable is True
        assert issue.replacement == "bg-pr-surface-2"

    def test_hard_coded_color_not_in_table(self):
        """An unlisted shade is reported but not auto-fixable."""
        issues = ScanEngine().scan_content('<p className="text-slate-400">', "App.tsx")

        assert len(issues) == 1
        issue = issues[0]
        assert issue.type == IssueType.HARD_CODED_COLOR
        assert issue.message == "Hard-coded color: text-slate-400"
        assert issue.auto_fixable is False
        assert issue.replacement is None
        assert issue.suggestion == HardCodedColorRule.fallback_suggestion

    def test_longer_shade_is_its_own_match(self):
        """bg-gray-500 is not mistaken for the listed bg-gray-50."""
        issues = ScanEngine().scan_content('className="bg-gray-500"', "App.tsx")

        assert [i.matched_text for i in issues] == ["bg-gray-500"]
        assert issues[0].auto_fixable is False

    def test_deprecated_layout_in_table(self):
        """max-w-screen-xl is auto-fixable with the ultrawide container."""
        issues = ScanEngine().scan_content('className="max-w-screen-xl mx-auto"', "App.tsx")

        assert len(issues) == 1
        issue = issues[0]
        assert issue.type == IssueType.DEPRECATED_LAYOUT
        assert issue.message == "Deprecated layout class: max-w-screen-xl"
        assert issue.suggestion == "max-w-[1600px] 2xl:max-w-[1800px]"
        assert issue.auto_fixable is True

    def test_deprecated_layout_family_without_entry(self):
        """Pattern families with no exact table entry are advisory."""
        engine = ScanEngine()

        for snippet in ('className="max-w-screen-md"', 'className="max-w-2xl"', 'className="container px-8"'):
            issues = engine.scan_content(snippet, "App.tsx")
            assert len(issues) == 1, snippet
            assert issues[0].type == IssueType.DEPRECATED_LAYOUT
            assert issues[0].auto_fixable is False
            assert issues[0].suggestion == "Use ultrawide-friendly max-width utilities"

    def test_container_padding_is_fixable(self):
        issues = ScanEngine().scan_content('<main className="container px-4">', "App.tsx")

        assert len(issues) == 1
        assert issues[0].matched_text == "container px-4"
        assert issues[0].replacement == DEPRECATED_LAYOUT_REPLACEMENTS["container px-4"]

    def test_non_fluid_width(self):
        """A pixel max-width without a 2xl override is advisory."""
        issues = ScanEngine().scan_content('className="max-w-[920px]"', "App.tsx")

        assert len(issues) == 1
        issue = issues[0]
        assert issue.type == IssueType.NON_FLUID_WIDTH
        assert issue.message == "Non-fluid width: max-w-[920px]"
        assert issue.auto_fixable is False
        assert "2xl" in issue.suggestion

    def test_non_fluid_width_with_override(self):
        """A 2xl override on the same line silences the width rule."""
        issues = ScanEngine().scan_content(
            'className="max-w-[1600px] 2xl:max-w-[1800px]"', "App.tsx"
        )
        assert issues == []

    def test_missing_overflow(self):
        """A styled card line without an overflow utility is flagged once."""
        engine = ScanEngine()

        issues = engine.scan_content('<div className="card card-body p-4">', "App.tsx")
        assert len(issues) == 1
        assert issues[0].type == IssueType.MISSING_OVERFLOW
        assert issues[0].auto_fixable is False
        assert issues[0].suggestion == "Add: w-full max-w-full overflow-hidden"

        assert len(engine.scan_content('<Card className="p-4">', "App.tsx")) == 1
        assert len(engine.scan_content('<div style={CARD_STYLE}>', "App.tsx")) == 1

    def test_missing_overflow_negatives(self):
        engine = ScanEngine()

        assert engine.scan_content('<div className="card overflow-hidden">', "App.tsx") == []
        assert engine.scan_content('<div className="card overflow-x-clip">', "App.tsx") == []
        assert engine.scan_content('import Card from "./Card";', "App.tsx") == []
        assert engine.scan_content("export class CardService {", "cardService.ts") == []
        assert engine.scan_content("const styles = useCardStyles();", "App.tsx") == []
        # The heuristic only looks at one line
        content = '<div\n  className="card"\n  data-overflow="overflow-hidden">'
        assert len(engine.scan_content(content, "App.tsx")) == 1

    def test_clean_content(self):
        """Content with no matches produces no issues."""
        content = 'export const x = <div className="bg-pr-surface-2 p-4">ok</div>;\n'
        assert ScanEngine().scan_content(content, "App.tsx") == []

    def test_line_numbers(self):
        issues = ScanEngine().scan_content(SAMPLE_COMPONENT, "Dashboard.tsx")

        lines = {(i.matched_text or i.message, i.line) for i in issues}
        assert ("max-w-screen-xl", 5) in lines
        assert ("bg-gray-50", 5) in lines
        assert ("Card component without overflow-hidden", 6) in lines
        assert ("max-w-[920px]", 7) in lines
        assert ("container px-4", 7) in lines
        assert ("text-zinc-300", 8) in lines

    def test_line_numbers_ignore_unicode_separators(self):
        """Form feeds and U+2028 inside a line do not start a new line."""
        content = 'const a = "x\x0cy\u2028z";\n<div className="bg-gray-50" />\n'

        issues = ScanEngine().scan_content(content, "App.tsx")

        assert [(i.matched_text, i.line) for i in issues] == [("bg-gray-50", 2)]

    def test_scan_is_pure(self):
        """Scanning identical content twice yields the same issues."""
        engine = ScanEngine()

        first = engine.scan_content(SAMPLE_COMPONENT, "Dashboard.tsx")
        second = engine.scan_content(SAMPLE_COMPONENT, "Dashboard.tsx")

        assert first
        assert Counter(first) == Counter(second)
        assert Counter(first) == Counter(ScanEngine().scan_content(SAMPLE_COMPONENT, "Dashboard.tsx"))

    def test_issue_types_are_closed(self):
        issues = ScanEngine().scan_content(SAMPLE_COMPONENT, "Dashboard.tsx")
        assert all(isinstance(i.type, IssueType) for i in issues)

    def test_auto_fix_soundness(self):
        """Every auto-fixable issue carries its table entry verbatim."""
        tables = {
            IssueType.HARD_CODED_COLOR: (THEME_TOKEN_REPLACEMENTS, "Replace with: {}"),
            IssueType.DEPRECATED_LAYOUT: (DEPRECATED_LAYOUT_REPLACEMENTS, "{}"),
        }

        fixable = [i for i in ScanEngine().scan_content(SAMPLE_COMPONENT, "Dashboard.tsx") if i.auto_fixable]
        assert len(fixable) == 4

        for issue in fixable:
            table, template = tables[issue.type]
            assert issue.matched_text in issue.message
            assert table[issue.matched_text] == issue.replacement
            assert issue.suggestion == template.format(issue.replacement)

    def test_disabled_rules(self):
        engine = ScanEngine(ScanConfig(disabled_rules=["LAYOUT-OVERFLOW-001"]))
        issues = engine.scan_content(SAMPLE_COMPONENT, "Dashboard.tsx")

        assert issues
        assert all(i.type != IssueType.MISSING_OVERFLOW for i in issues)

    def test_scan_directory(self, tmp_path):
        write(tmp_path / "pages" / "Home.tsx", 'className="bg-gray-50"\n')
        write(tmp_path / "components" / "Card.jsx", 'className="card"\n')
        write(tmp_path / "node_modules" / "foo.tsx", 'className="bg-gray-50"\n')
        write(tmp_path / "pages" / "Home.test.tsx", 'className="bg-gray-50"\n')

        result = ScanEngine().scan(str(tmp_path))

        assert result.files_scanned == 2
        assert result.total_issues == 2
        assert {os.path.basename(i.file) for i in result.issues} == {"Home.tsx", "Card.jsx"}
        assert result.rules_applied == ["LAYOUT-COLOR-001", "LAYOUT-OVERFLOW-001"]

    def test_scan_missing_directory(self, tmp_path):
        with pytest.raises(TraversalError) as exc_info:
            ScanEngine().scan(str(tmp_path / "missing"))
        assert exc_info.value.path == str(tmp_path / "missing")


class TestWalker:
    """Tests for the directory walker."""

    def test_should_scan_file(self):
        assert should_scan_file("App.tsx")
        assert should_scan_file("index.ts")
        assert should_scan_file("Widget.jsx")
        assert should_scan_file("main.js")
        assert not should_scan_file("App.test.tsx")
        assert not should_scan_file("util.test.ts")
        assert not should_scan_file("styles.css")
        assert not should_scan_file("README.md")

    def test_excluded_directories(self, tmp_path):
        """Files under dependency, build, VCS and tool dirs are never yielded."""
        write(tmp_path / "App.tsx", "")
        write(tmp_path / "nested" / "deep" / "Comp.jsx", "")
        for excluded in ("node_modules", "dist", "build", ".git", "tools"):
            write(tmp_path / excluded / "foo.tsx", 'className="bg-gray-50"')
            write(tmp_path / "nested" / excluded / "bar.ts", 'className="bg-gray-50"')

        found = {os.path.relpath(p, tmp_path) for p in iter_source_files(str(tmp_path))}

        assert found == {"App.tsx", os.path.join("nested", "deep", "Comp.jsx")}

    def test_custom_exclusions(self, tmp_path):
        write(tmp_path / "App.tsx", "")
        write(tmp_path / "generated" / "Api.ts", "")

        found = list(iter_source_files(str(tmp_path), excluded_dirs={"generated"}))

        assert [os.path.basename(p) for p in found] == ["App.tsx"]

    def test_missing_root(self, tmp_path):
        with pytest.raises(TraversalError) as exc_info:
            list(iter_source_files(str(tmp_path / "nope")))

        assert "no such file or directory" in str(exc_info.value)
        assert isinstance(exc_info.value.cause, FileNotFoundError)

    def test_root_is_a_file(self, tmp_path):
        path = write(tmp_path / "App.tsx", "")
        with pytest.raises(TraversalError) as exc_info:
            list(iter_source_files(str(path)))

        assert "not a directory" in str(exc_info.value)
        assert isinstance(exc_info.value.cause, NotADirectoryError)

    def test_unreadable_directory(self, tmp_path, monkeypatch):
        """An unreadable sub-directory halts the walk instead of being skipped."""
        write(tmp_path / "App.tsx", "")
        locked = tmp_path / "locked"
        write(locked / "Hidden.tsx", "")

        real_scandir = os.scandir

        def fake_scandir(path):
            if os.fspath(path) == str(locked):
                raise PermissionError(13, "Permission denied", str(locked))
            return real_scandir(path)

        monkeypatch.setattr(os, "scandir", fake_scandir)

        with pytest.raises(TraversalError) as exc_info:
            list(iter_source_files(str(tmp_path)))

        assert exc_info.value.path == str(locked)
        assert str(locked) in str(exc_info.value)


class TestIssues:
    """Tests for issue data structures."""

    def test_issue_creation(self):
        issue = Issue(
            file="App.tsx",
            line=3,
            type="non-fluid-width",
            message="Non-fluid width: max-w-[920px]",
        )

        assert issue.type == IssueType.NON_FLUID_WIDTH
        assert issue.auto_fixable is False
        assert issue.location == "App.tsx:3"

    def test_unknown_type_rejected(self):
        with pytest.raises(ValueError):
            Issue(file="App.tsx", line=1, type="spacing", message="nope")

    def test_line_must_be_positive(self):
        with pytest.raises(ValueError):
            Issue(file="App.tsx", line=0, type=IssueType.HARD_CODED_COLOR, message="x")

    def test_auto_fixable_needs_replacement(self):
        with pytest.raises(ValueError):
            Issue(
                file="App.tsx",
                line=1,
                type=IssueType.HARD_CODED_COLOR,
                message="Hard-coded color: bg-gray-50",
                auto_fixable=True,
                matched_text="bg-gray-50",
            )

    def test_issue_dict_roundtrip(self):
        issue = ScanEngine().scan_content('className="bg-gray-100"', "App.tsx")[0]
        data = issue.to_dict()

        assert data["type"] == "hard-coded-color"
        assert data["auto_fixable"] is True
        assert Issue.from_dict(data) == issue

    def test_every_type_has_icon_and_label(self):
        for issue_type in IssueType:
            assert issue_type.icon
            assert issue_type.label

    def test_scan_result_grouping(self):
        issues = ScanEngine().scan_content(SAMPLE_COMPONENT, "Dashboard.tsx")
        result = ScanResult(issues=issues, files_scanned=1)

        groups = result.by_type()
        assert sum(len(g) for g in groups.values()) == result.total_issues
        assert result.auto_fixable_count == 4
        assert result.to_dict()["summary"]["by_type"]["hard-coded-color"] == 4


class TestRules:
    """Tests for rule tables and the registry."""

    def test_registry_has_builtin_rules(self):
        assert registry.rule_count >= 4
        assert registry.get_rule("LAYOUT-COLOR-001") is not None
        assert registry.get_rule("UNKNOWN") is None

    def test_replacements_do_not_rematch(self):
        """No table value is flagged again by the rule that owns the table."""
        from layoutscanner.core.rules import AnalysisContext

        for rule_class, table in (
            (HardCodedColorRule, THEME_TOKEN_REPLACEMENTS),
            (DeprecatedLayoutRule, DEPRECATED_LAYOUT_REPLACEMENTS),
        ):
            rule = rule_class()
            for replacement in table.values():
                context = AnalysisContext("table.tsx", f'className="{replacement}"')
                assert list(rule.analyze(context)) == [], replacement

    def test_custom_rule_registry(self):
        """Rules are data: a new category needs only a new record."""
        custom = RuleRegistry()

        @custom.register
        class ShadowRule(PatternRule):
            patterns = [re.compile(r"shadow-(sm|md|lg)")]
            replacements = {"shadow-md": "shadow-pr-2"}
            message_template = "Raw shadow: {match}"
            suggestion_template = "Replace with: {replacement}"
            fallback_suggestion = "Use a pr shadow token"

            @property
            def metadata(self):
                return RuleMetadata(
                    rule_id="LAYOUT-SHADOW-001",
                    name="Shadow",
                    issue_type=IssueType.SHADOW_INCONSISTENCY,
                )

        engine = ScanEngine(rule_registry=custom)
        issues = engine.scan_content('className="shadow-md shadow-lg"', "App.tsx")

        assert [(i.matched_text, i.auto_fixable) for i in issues] == [
            ("shadow-md", True),
            ("shadow-lg", False),
        ]
        assert all(i.type == IssueType.SHADOW_INCONSISTENCY for i in issues)

        with pytest.raises(ValueError):
            @custom.register
            class Duplicate(ShadowRule):
                pass


class TestConfig:
    """Tests for configuration loading."""

    def test_defaults(self):
        config = load_scan_config()

        assert config.target == "src/react-app"
        assert config.preview_limit == 5
        assert "node_modules" in config.excluded_dirs
        assert config.disabled_rules == []

    def test_load_yaml(self, tmp_path):
        path = write(tmp_path / "layoutscanner.yaml", """
scan:
  target: app/src
  excluded_dirs: [node_modules, generated]
rules:
  disabled:
    - LAYOUT-OVERFLOW-001
output:
  preview_limit: 10
unknown_key: ignored
""")

        config = load_scan_config(str(path))

        assert config.target == "app/src"
        assert config.excluded_dirs == ["node_modules", "generated"]
        assert config.disabled_rules == ["LAYOUT-OVERFLOW-001"]
        assert config.preview_limit == 10

    def test_load_json(self, tmp_path):
        path = write(tmp_path / "layoutscanner.json", '{"target": "web", "preview_limit": 2}')

        assert load_config(str(path)) == {"target": "web", "preview_limit": 2}
        assert load_scan_config(str(path)).target == "web"

    def test_empty_yaml(self, tmp_path):
        path = write(tmp_path / "empty.yaml", "")
        assert load_config(str(path)) == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_invalid_preview_limit(self):
        with pytest.raises(ValueError):
            ScanConfig(preview_limit=-1)


class TestFormatters:
    """Tests for output formatters."""

    def test_cli_formatter_groups_and_caps(self):
        from layoutscanner.formatters import CLIFormatter

        content = "\n".join('className="bg-gray-50"' for _ in range(7))
        issues = ScanEngine().scan_content(content, "App.tsx")
        result = ScanResult(issues=issues, files_scanned=1)

        output = CLIFormatter(use_color=False).format_result(result)

        assert "📊 Scan Complete: 1 files scanned" in output
        assert "Found 7 issues:" in output
        assert "🎨 Hard-coded Colors (7)" in output
        assert output.count("📄 App.tsx:") == 5
        assert "... and 2 more" in output
        assert output.count("✅ Auto-fixable") == 5
        assert "💡 7 issues can be auto-fixed" in output
        assert "--fix" in output

    def test_cli_formatter_custom_category(self):
        from layoutscanner.formatters import CLIFormatter

        issue = Issue(
            file="App.tsx",
            line=2,
            type=IssueType.SHADOW_INCONSISTENCY,
            message="Raw shadow: shadow-md",
        )
        output = CLIFormatter(use_color=False).format_result(ScanResult(issues=[issue], files_scanned=1))

        assert "🌓 Shadow Inconsistencies (1)" in output

    def test_json_formatter(self):
        import json
        from layoutscanner.formatters import get_formatter

        issues = ScanEngine().scan_content(SAMPLE_COMPONENT, "Dashboard.tsx")
        output = get_formatter("json").format_result(ScanResult(issues=issues, files_scanned=1))

        data = json.loads(output)
        assert data["summary"]["total_issues"] == len(issues)
        assert data["summary"]["auto_fixable"] == 4
        assert {i["type"] for i in data["issues"]} <= {t.value for t in IssueType}

    def test_unknown_formatter(self):
        from layoutscanner.formatters import get_formatter

        with pytest.raises(ValueError):
            get_formatter("sarif")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
