"""Configuration for dependency graph reports."""

from dataclasses import dataclass

from depgraph.model import Outcome


@dataclass(frozen=True)
class ReporterConfig:
    """Styling and artifact settings shared by the serializer and renderer."""

    # Base name of the per-suite artifacts (<base>.dot, <base>.<image_format>)
    output_basename: str = "dependency_graph"

    # Graph header
    graph_name: str = "G"
    overlap: str = "false"

    # Node marker colours
    skipped_color: str = "yellow"
    failed_color: str = "red"
    passed_color: str = "green"
    group_color: str = "blue"

    # External rasterizer
    renderer_command: str = "dot"
    image_format: str = "png"
    render_image: bool = True

    @property
    def dot_filename(self) -> str:
        return f"{self.output_basename}.dot"

    @property
    def image_filename(self) -> str:
        return f"{self.output_basename}.{self.image_format}"

    def outcome_color(self, outcome: Outcome) -> str:
        """Return the marker colour for a method outcome."""
        if outcome is Outcome.SKIPPED:
            return self.skipped_color
        if outcome is Outcome.FAILED:
            return self.failed_color
        return self.passed_color


# Global configuration instance
DEFAULT_CONFIG = ReporterConfig()
