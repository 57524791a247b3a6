import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from plugins.guide_export.index_page import IndexPageResolver, IndexPageResult, log


def load_guide_config(config_path) -> Dict[str, Any]:
    """Load the YAML guide configuration; an empty file yields {}."""
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"guide config not found at {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"guide config at {path} must be a mapping, got {type(data).__name__}")
    log.debug(f"[guide_export] guide config keys: {list(data.keys())}")
    return data


class GuideExporter:
    """
    Assembles the guide definition manifest and the pages it references.

    The definition is created by :meth:`init_definition`, filled by the
    ``add_*`` steps and written by :meth:`write_definition`.
    """

    def __init__(self, guide_config: Dict[str, Any], source_dir=None,
                 config_name: str = "guide-config.yaml", logger=None):
        self.guide_config = guide_config or {}
        self.source_dir = source_dir
        self.config_name = config_name
        self.logger = logger or log
        self.definition: Optional[Dict[str, Any]] = None

    @property
    def guide_id(self) -> str:
        return str(self.guide_config.get("id") or "guide")

    def init_definition(self) -> Dict[str, Any]:
        name = self.guide_config.get("name") or self.guide_id
        self.definition = {
            "resourceType": "GuideDefinition",
            "id": self.guide_id,
            "name": name,
            "title": self.guide_config.get("title") or name,
            "definition": {
                "page": {
                    "nameUrl": "toc.html",
                    "title": "Table of Contents",
                    "generation": "html",
                    "page": [],
                }
            },
        }
        return self.definition

    @property
    def pages(self):
        if self.definition is None:
            raise RuntimeError("init_definition() must be called before adding pages")
        return self.definition["definition"]["page"]["page"]

    def add_index(self, output_dir) -> Optional[IndexPageResult]:
        pages = self.pages
        resolver = IndexPageResolver(self.config_name, self.source_dir, logger=self.logger)
        return resolver.export(self.guide_config.get("indexPageContent"), output_dir, pages)

    def definition_path(self, output_dir) -> Path:
        return Path(output_dir) / "input" / f"GuideDefinition-{self.guide_id}.json"

    def write_definition(self, output_dir) -> Path:
        if self.definition is None:
            raise RuntimeError("init_definition() must be called before writing the definition")
        path = self.definition_path(output_dir)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.definition, indent=2) + "\n", encoding="utf-8")
        self.logger.info(f"[guide_export] wrote guide definition to {path}")
        return path

    def export(self, output_dir) -> Path:
        """Run the full export: fresh definition, index page, definition file."""
        self.init_definition()
        self.add_index(output_dir)
        return self.write_definition(output_dir)
