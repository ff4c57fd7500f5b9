"""
Tests for Go-template sanitizing.
"""

import textwrap
import time

import pytest

from helmfile_deps.core.template_sanitizer import (
    sanitize_template,
    strip_directive_lines,
    strip_inline_expressions,
)


class TestDirectiveLines:

    @pytest.mark.parametrize("line", [
        "{{ if .Values.enabled }}",
        "{{- if neq .Values.example.version  \"\" }}",
        "  {{- else }}",
        "{{ else if eq .Environment.Name \"prod\" }}",
        "{{- end -}}",
        "{{end}}",
        "{{ range $i, $r := .Values.releases }}",
        "{{ with .Values.chart }}",
        "{{/* a comment */}}",
        "{{- /* trimmed comment */ -}}",
    ])
    def test_directive_line_removed(self, line):
        content = f"a: 1\n{line}\nb: 2\n"
        assert strip_directive_lines(content) == "a: 1\nb: 2\n"

    def test_directive_on_last_line_without_newline(self):
        assert strip_directive_lines("a: 1\n{{ end }}") == "a: 1\n"

    def test_branches_survive_as_siblings(self):
        content = textwrap.dedent("""\
            {{- if .Values.pin }}
            version: {{ .Values.pin }}
            {{- else }}
            version: 1.0.0
            {{- end }}
            """)
        assert strip_directive_lines(content) == "version: {{ .Values.pin }}\nversion: 1.0.0\n"

    def test_directive_sharing_line_with_content_is_kept(self):
        content = "{{ if .x }}a: 1{{ end }}\n"
        assert strip_directive_lines(content) == content

    def test_expression_line_is_not_a_directive(self):
        content = "{{ toYaml .Values.extra }}\n"
        assert strip_directive_lines(content) == content


class TestInlineExpressions:

    def test_value_expression_blanked(self):
        assert strip_inline_expressions("version: {{ .Values.v }}\n") == "version: \n"

    def test_partial_value(self):
        assert strip_inline_expressions("name: {{ .Environment.Name }}-app") == "name: -app"

    def test_several_on_one_line(self):
        assert strip_inline_expressions("chart: {{ .a }}/{{ .b }}") == "chart: /"

    def test_unterminated_expression_left_alone(self):
        assert strip_inline_expressions("version: {{ .Values.v") == "version: {{ .Values.v"


class TestSanitize:

    def test_plain_yaml_unchanged(self):
        content = "releases:\n  - name: a\n    chart: stable/a\n"
        assert sanitize_template(content) == content

    def test_empty(self):
        assert sanitize_template("") == ""

    def test_full_conditional_block(self):
        content = textwrap.dedent("""\
            releases:
              - name: example
            {{- if neq .Values.example.version "" }}
                version: {{ .Values.example.version }}
            {{- else }}
                version: 1.0.0
            {{- end }}
                chart: stable/example
            """)
        expected = (
            "releases:\n"
            "  - name: example\n"
            "    version: \n"
            "    version: 1.0.0\n"
            "    chart: stable/example\n"
        )
        assert sanitize_template(content) == expected

    def test_deterministic(self):
        content = "{{ if }}\n{{ end }\nx: {{ y }}\n{{ else }}\n"
        assert sanitize_template(content) == sanitize_template(content)

    @pytest.mark.parametrize("content", [
        "a: " + "{{" * 20000,
        "{{ if" + " " * 20000 + "x",
        "{{-" + " " * 20000,
        "{{ .Values.x " * 5000,
    ])
    def test_unterminated_input_is_fast(self, content):
        started = time.perf_counter()
        assert sanitize_template(content) == content
        assert time.perf_counter() - started < 1.0

