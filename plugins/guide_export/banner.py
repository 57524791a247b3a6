"""
Builds the "generated file" warning block placed at the top of exported pages.
"""

from pathlib import Path
from typing import List

BANNER_WIDTH = 100
WARNING_LINE = "WARNING: DO NOT EDIT THIS FILE"
GENERATED_NOTICE = [
    "This file is generated by the guide_export plugin. Any edits you make to this",
    "file will be overwritten by the next build.",
]


def generated_warning(filename: str, fmt, lines: List[str]) -> str:
    """
    Return the warning block for ``filename`` wrapped in the comment syntax of ``fmt``.

    Every body line renders as ``* <text> *`` inside a box of asterisks. The
    box is at least ``BANNER_WIDTH`` wide and grows to fit the longest line,
    so long source paths are never cut.
    """
    texts = GENERATED_NOTICE + list(lines)
    inner = max([BANNER_WIDTH - 4] + [len(text) for text in texts])
    border = "*" * (inner + 4)

    def boxed(text: str) -> str:
        return f"* {text.ljust(inner)} *"

    body = [border, f"* {WARNING_LINE.center(inner)} *", boxed("")]
    body.extend(boxed(text) for text in GENERATED_NOTICE)
    body.append(boxed(""))
    body.extend(boxed(text) for text in lines)
    body.append(border)

    return "\n".join([fmt.comment_open(filename), *body, fmt.comment_close]) + "\n"


def file_source_lines(relative_path: str) -> List[str]:
    return [
        "To change the contents of this file, edit the original source file at:",
        relative_path,
    ]


def inline_source_lines(config_name: str, source_dir_name: str) -> List[str]:
    pagecontent = Path(source_dir_name) / "input" / "pagecontent"
    pages = Path(source_dir_name) / "input" / "pages"
    return [
        "To change the contents of this file, edit the \"indexPageContent\" attribute "
        f"in the {config_name} file",
        f"or provide your own index file in the {pagecontent} or {pages} folder.",
    ]
