from pathlib import Path

from mkdocs.config.config_options import Type
from mkdocs.plugins import BasePlugin

from plugins.guide_export.exporter import GuideExporter, load_guide_config
from plugins.guide_export.index_page import log


class GuideExportPlugin(BasePlugin):
    """
    MkDocs plugin that exports the guide index page and definition manifest
    before each build.

    Paths in the plugin options are relative to the directory holding mkdocs.yml.
    """

    config_scheme = (
        ("guide_config", Type(str, default="guide-config.yaml")),
        ("source_dir", Type(str, default="guide-data")),
        ("output_dir", Type(str, default="guide-output")),
        ("enabled", Type(bool, default=True)),
    )

    def __init__(self):
        super().__init__()
        self.guide_config = {}
        self.project_root = None

    def on_config(self, config, **kwargs):
        if not self.config["enabled"]:
            return config

        config_file_path = Path(config["config_file_path"]).resolve()
        self.project_root = config_file_path.parent
        self.guide_config = load_guide_config(self.project_root / self.config["guide_config"])
        return config

    def on_pre_build(self, config, **kwargs):
        if not self.config["enabled"]:
            log.debug("[guide_export] disabled; skipping export")
            return

        output_dir = self.project_root / self.config["output_dir"]
        exporter = GuideExporter(
            self.guide_config,
            source_dir=self.project_root / self.config["source_dir"],
            config_name=Path(self.config["guide_config"]).name,
        )
        exporter.export(output_dir)
