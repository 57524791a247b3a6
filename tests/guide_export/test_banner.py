import os

from plugins.guide_export.banner import (
    BANNER_WIDTH,
    file_source_lines,
    generated_warning,
    inline_source_lines,
)
from plugins.guide_export.index_page import Format


class TestGeneratedWarning:
    def test_markdown_wrapper(self):
        block = generated_warning("index.md", Format.MARKDOWN, ["line"])
        lines = block.splitlines()
        assert lines[0] == "<!-- index.md {% comment %}"
        assert lines[-1] == "{% endcomment %} -->"
        assert block.endswith("\n")

    def test_xml_wrapper(self):
        block = generated_warning("index.xml", Format.XML, ["line"])
        lines = block.splitlines()
        assert lines[0] == "<!-- index.xml"
        assert lines[-1] == "-->"

    def test_box_lines_have_equal_width(self):
        block = generated_warning("index.md", Format.MARKDOWN, ["short", "a bit longer line"])
        box = block.splitlines()[1:-1]
        assert {len(line) for line in box} == {BANNER_WIDTH}
        assert box[0] == "*" * BANNER_WIDTH
        assert box[-1] == "*" * BANNER_WIDTH
        assert all(line.startswith("* ") and line.endswith(" *") for line in box[1:-1])

    def test_warning_line_is_centred(self):
        block = generated_warning("index.md", Format.MARKDOWN, [])
        warning = block.splitlines()[2]
        text = warning[2:-2]
        assert text.strip() == "WARNING: DO NOT EDIT THIS FILE"
        assert abs(len(text) - len(text.lstrip()) - (len(text) - len(text.rstrip()))) <= 1

    def test_box_grows_for_long_lines(self):
        long_line = "x" * (BANNER_WIDTH + 20)
        block = generated_warning("index.md", Format.MARKDOWN, [long_line])
        box = block.splitlines()[1:-1]
        assert f"* {long_line} *" in box
        assert {len(line) for line in box} == {BANNER_WIDTH + 24}

    def test_provenance_lines_follow_notice(self):
        block = generated_warning("index.md", Format.MARKDOWN, ["first", "second"])
        box = [line[2:-2].strip() for line in block.splitlines()[2:-2]]
        assert box[-2:] == ["first", "second"]
        assert "file will be overwritten by the next build." in box


class TestSourceLines:
    def test_file_source_lines(self):
        path = os.path.join("guide-data", "input", "pages", "index.md")
        assert file_source_lines(path) == [
            "To change the contents of this file, edit the original source file at:",
            path,
        ]

    def test_inline_source_lines(self):
        lines = inline_source_lines("guide-config.yaml", "guide-data")
        pagecontent = os.path.join("guide-data", "input", "pagecontent")
        pages = os.path.join("guide-data", "input", "pages")
        assert lines == [
            'To change the contents of this file, edit the "indexPageContent" attribute '
            "in the guide-config.yaml file",
            f"or provide your own index file in the {pagecontent} or {pages} folder.",
        ]
