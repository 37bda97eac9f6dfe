"""Best-effort rasterization of DOT files with an external command."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List, Optional

from depgraph.config import DEFAULT_CONFIG, ReporterConfig
from depgraph.logging import get_logger

logger = get_logger(__name__)


def render_command(
    dot_path: Path, image_path: Path, config: ReporterConfig = DEFAULT_CONFIG
) -> List[str]:
    """Return the rasterizer command line for ``dot_path`` -> ``image_path``."""
    return [
        config.renderer_command,
        f"-T{config.image_format}",
        f"-o{image_path.absolute()}",
        str(dot_path.absolute()),
    ]


def render_image(
    dot_path: Path, image_path: Path, config: ReporterConfig = DEFAULT_CONFIG
) -> Optional[subprocess.Popen]:
    """Start the external rasterizer without waiting for it.

    The exit status is never checked and the image is not verified. When the
    process cannot be started the failure is logged with the attempted
    command line.

    Args:
        dot_path: DOT file to render.
        image_path: Target image path.
        config: Supplies the command and image format.

    Returns:
        The running process, or ``None`` when it could not be started.
    """
    cmd = render_command(dot_path, image_path, config)
    try:
        process = subprocess.Popen(
            cmd, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL
        )
    except (OSError, UnicodeError) as e:
        logger.error(f"Error executing {config.renderer_command} command: {e}")
        logger.error(f"Command was: {' '.join(cmd)}")
        return None
    logger.debug(f"Started renderer (pid {process.pid}): {' '.join(cmd)}")
    return process
