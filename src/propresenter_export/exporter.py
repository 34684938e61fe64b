"""
ProPresenter Export

Single entry point for the orchestration layer: turn an ordered list of
playlist entries into a downloadable zip holding one .pro6 file per song or
scripture passage plus the .pro6plx playlist referencing them.

Usage:
    from propresenter_export import generate_archive, deliver_archive

    result = generate_archive(entries, translation="Lutherbibel 2017")
    deliver_archive(result, "downloads/")
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Union

from loguru import logger

from .archive import ArchiveBundle
from .config import ExportConfig
from .exceptions import ArchiveAssemblyError
from .models import PlaylistDocument, PlaylistEntry
from .playlist import PlaylistBuilder


@dataclass
class ExportResult:
    """A finished archive, ready to be handed to a download mechanism."""

    filename: str
    content: bytes
    playlist: PlaylistDocument
    file_names: List[str] = field(default_factory=list)

    media_type: str = "application/zip"


def archive_file_name(config: ExportConfig, now: datetime) -> str:
    return f"{config.archive_prefix}_{config.playlist_prefix}_{now.date().isoformat()}.zip"


def generate_archive(
    entries: Sequence[PlaylistEntry],
    translation: Optional[str] = None,
    config: Optional[ExportConfig] = None,
    now: Optional[datetime] = None,
    progress_callback: Optional[Callable[[str], None]] = None,
) -> ExportResult:
    """
    Build every presentation document and the playlist, then zip them.

    Per-entry problems are contained inside the builders; the only error
    that reaches the caller is a failure to assemble the archive itself.

    Raises:
        ArchiveAssemblyError: the archive could not be produced
    """
    config = config or ExportConfig()
    translation = translation or config.default_translation
    now = now or datetime.now(timezone.utc)

    logger.info(
        f"🚀 Exporting {len(entries)} entries (profile={config.profile.name}, "
        f"translation={translation})"
    )

    try:
        playlist, bundle = PlaylistBuilder(config, progress_callback).build(
            entries, translation, ArchiveBundle(), now=now
        )
    except ArchiveAssemblyError:
        raise
    except Exception as e:
        logger.error(f"Export failed: {e}")
        raise ArchiveAssemblyError(f"Could not build export: {e}") from e

    content = bundle.to_zip()
    filename = archive_file_name(config, now)
    logger.success(f"✅ {filename} ({len(bundle)} files)")

    return ExportResult(
        filename=filename,
        content=content,
        playlist=playlist,
        file_names=bundle.names,
    )


def deliver_archive(result: ExportResult, target_dir: Union[str, Path]) -> Path:
    """Write the archive into ``target_dir`` and return its path."""
    target = Path(target_dir)
    target.mkdir(parents=True, exist_ok=True)
    path = target / result.filename
    partial = path.with_name(path.name + ".part")
    try:
        partial.write_bytes(result.content)
        partial.replace(path)
    except OSError as e:
        partial.unlink(missing_ok=True)
        raise ArchiveAssemblyError(f"Could not write {path}: {e}") from e
    logger.info(f"💾 Saved: {path}")
    return path
