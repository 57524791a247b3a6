import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, NamedTuple, Optional, Tuple, Union

from plugins.guide_export.banner import (
    file_source_lines,
    generated_warning,
    inline_source_lines,
)

log = logging.getLogger("mkdocs.plugins.guide_export")

DEFAULT_SOURCE_DIR_NAME = "guide-data"
INDEX_NAME_URL = "index.html"
INDEX_TITLE = "Home"


class Format(Enum):
    """Page format. Drives the file extension, banner syntax and manifest generation."""

    #        extension, generation, comment opener, comment closer
    MARKDOWN = ("md", "markdown", "<!-- {} {{% comment %}}", "{% endcomment %} -->")
    XML = ("xml", "html", "<!-- {}", "-->")

    def __init__(self, extension, generation, opener, closer):
        self.extension = extension
        self.generation = generation
        self._opener = opener
        self.comment_close = closer

    def comment_open(self, filename: str) -> str:
        return self._opener.format(filename)


class Location(Enum):
    PAGECONTENT = "pagecontent"
    PAGES = "pages"


class Candidate(NamedTuple):
    format: Format
    location: Location

    @property
    def filename(self) -> str:
        return f"index.{self.format.extension}"

    @property
    def relative_path(self) -> Path:
        """Path below both the source dir and the output dir, e.g. input/pages/index.xml."""
        return Path("input", self.location.value, self.filename)


# Probe order for on-disk index files; the first existing one wins
CANDIDATES: Tuple[Candidate, ...] = (
    Candidate(Format.MARKDOWN, Location.PAGECONTENT),
    Candidate(Format.XML, Location.PAGECONTENT),
    Candidate(Format.MARKDOWN, Location.PAGES),
    Candidate(Format.XML, Location.PAGES),
)

# Inline content is always markdown written to pagecontent
INLINE_CANDIDATE = CANDIDATES[0]


class InlineSource(NamedTuple):
    text: str

    @property
    def candidate(self) -> Candidate:
        return INLINE_CANDIDATE


class FileSource(NamedTuple):
    path: Path
    candidate: Candidate


IndexSource = Union[InlineSource, FileSource]


class IndexPageResult(NamedTuple):
    output_path: Path
    entry: Dict[str, str]


def page_entry(fmt: Format) -> Dict[str, str]:
    """Manifest page entry for the index page."""
    return {
        "nameUrl": INDEX_NAME_URL,
        "title": INDEX_TITLE,
        "generation": fmt.generation,
    }


def find_index_file(source_dir) -> Optional[FileSource]:
    """Return the first existing index candidate under ``source_dir``, if any."""
    if not source_dir:
        return None
    base = Path(source_dir)
    for candidate in CANDIDATES:
        path = base / candidate.relative_path
        if path.is_file():
            return FileSource(path, candidate)
    return None


def resolve_source(
    inline_content: Optional[str], file_source: Optional[FileSource]
) -> Tuple[Optional[IndexSource], Optional[FileSource]]:
    """
    Pick the index source. Inline content always wins over an on-disk file.

    Returns ``(source, superseded)`` where ``superseded`` is the on-disk file
    that was ignored because inline content was also configured.
    """
    if inline_content:
        return InlineSource(inline_content), file_source
    return file_source, None


class IndexPageResolver:
    """
    Resolves, renders and writes the index page of a guide.

    Args:
        config_name: Name of the configuration file holding ``indexPageContent``,
            used in the banner and in the conflict warning.
        source_dir: Directory with user-provided guide sources (may be empty).
        logger: Logger used for messages; defaults to the plugin logger.
    """

    def __init__(self, config_name: str, source_dir=None, logger=None):
        self.config_name = config_name
        self.source_dir = Path(source_dir) if source_dir else None
        self.logger = logger or log

    def resolve(self, inline_content: Optional[str]) -> Optional[IndexSource]:
        file_source = find_index_file(self.source_dir)
        source, superseded = resolve_source(inline_content, file_source)
        if superseded is not None:
            self.logger.warning(
                f'[guide_export] Found both an "indexPageContent" property in {self.config_name} '
                f"and an index file at {self.display_path(superseded)}. The "
                f'"indexPageContent" property will be used and the index file will be ignored. '
                f'To use the index file, remove "indexPageContent" from {self.config_name}.\n'
                f"  File: {superseded.path.resolve()}"
            )
        return source

    def display_path(self, file_source: FileSource) -> str:
        """Path of a source file relative to the folder holding the source dir."""
        root = self.source_dir.resolve().parent
        return os.path.relpath(file_source.path.resolve(), root)

    def render(self, source: IndexSource) -> bytes:
        """Banner followed by the original content bytes."""
        candidate = source.candidate
        if isinstance(source, InlineSource):
            source_dir_name = self.source_dir.name if self.source_dir else DEFAULT_SOURCE_DIR_NAME
            lines = inline_source_lines(self.config_name, source_dir_name)
            content = source.text.encode("utf-8")
        else:
            lines = file_source_lines(self.display_path(source))
            content = source.path.read_bytes()

        banner = generated_warning(candidate.filename, candidate.format, lines)
        return banner.encode("utf-8") + content

    def export(
        self,
        inline_content: Optional[str],
        output_dir,
        pages: List[Dict[str, Any]],
    ) -> Optional[IndexPageResult]:
        """
        Write the resolved index page below ``output_dir`` and append its entry to ``pages``.

        Returns ``None`` without touching the file system, ``pages`` or the
        logger when there is no index source.
        """
        source = self.resolve(inline_content)
        if source is None:
            return None

        data = self.render(source)
        candidate = source.candidate
        output_path = Path(output_dir) / candidate.relative_path
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(data)

        entry = page_entry(candidate.format)
        pages.append(entry)
        self.logger.info(f"[guide_export] wrote index page to {output_path}")
        return IndexPageResult(output_path, entry)
