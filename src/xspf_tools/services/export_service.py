"""Export service for copying playlist tracks under consistent filenames."""

import logging
import re
import shutil
from pathlib import Path
from typing import List

from ..exceptions import ExportError
from ..models import ExportJob, FilenameInfo, Playlist

logger = logging.getLogger(__name__)

# Characters that are not allowed in filenames on common filesystems
_UNSAFE_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')


def safe_export_filename(info: FilenameInfo, ordinal: int, width: int) -> str:
    """Build the export filename for a track.

    Names look like "01_VL05-wild_west.mp3": playlist ordinal padded to
    ``width``, type abbreviation, sequence index, name and extension.

    Args:
        info: Decomposed filename of the track
        ordinal: 1-based position of the track in the playlist
        width: Number of digits to pad the ordinal to

    Returns:
        Filename safe to use on common filesystems

    Raises:
        ExportError: If ordinal or width are not positive
    """
    if ordinal < 1:
        raise ExportError(f"Ordinal must be 1 or more, got: {ordinal}")
    if width < 1:
        raise ExportError(f"Width must be 1 or more, got: {width}")

    name = _UNSAFE_CHARS.sub("_", info.name).strip("_ .") or "Untitled"
    return (
        f"{ordinal:0{width}d}_{info.track_type.safe_shortname}"
        f"{info.index:02d}-{name}.{info.extn}"
    )


class ExportService:
    """Service for copying a playlist's tracks into an export directory."""

    def __init__(self, overwrite: bool = False) -> None:
        """Initialize export service.

        Args:
            overwrite: Whether to replace files already in the export directory
        """
        self.overwrite = overwrite

    def plan(self, playlist: Playlist, target_dir: Path) -> List[ExportJob]:
        """Create the copy jobs for a playlist, in playlist order.

        Args:
            playlist: Playlist to export
            target_dir: Directory the tracks are copied into

        Returns:
            One pending ExportJob per track
        """
        width = playlist.track_index_width
        jobs = []
        for ordinal, track in enumerate(playlist.tracks, start=1):
            jobs.append(
                ExportJob(
                    ordinal=ordinal,
                    source_path=track.path,
                    target_path=target_dir
                    / safe_export_filename(track.info, ordinal, width),
                )
            )

        logger.debug(f"Planned {len(jobs)} export jobs into {target_dir}")
        return jobs

    def run(self, jobs: List[ExportJob], dry_run: bool = False) -> List[ExportJob]:
        """Copy the files of each job.

        A failed copy is recorded on its job and does not stop the others.

        Args:
            jobs: Jobs from ``plan``
            dry_run: If True, only log what would be copied

        Returns:
            The same jobs, with status and error message filled out
        """
        for job in jobs:
            if dry_run:
                logger.info(f"Would copy {job.source_path} -> {job.target_path}")
                continue
            self._copy(job)

        return jobs

    def export(
        self, playlist: Playlist, target_dir: Path, dry_run: bool = False
    ) -> List[ExportJob]:
        """Plan and run the export of a playlist."""
        return self.run(self.plan(playlist, target_dir), dry_run=dry_run)

    def _copy(self, job: ExportJob) -> None:
        if job.target_path.exists() and not self.overwrite:
            logger.info(f"Target file already exists: {job.target_path}")
            job.status = "skipped"
            return

        if not job.source_path.is_file():
            logger.warning(f"Source file does not exist: {job.source_path}")
            job.status = "failed"
            job.error_message = f"Source file does not exist: {job.source_path}"
            return

        try:
            job.target_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(job.source_path, job.target_path)
        except OSError as e:
            logger.error(f"Copy failed for {job.source_path}: {e}")
            job.status = "failed"
            job.error_message = str(e)
            return

        logger.info(f"Copied {job.source_path} -> {job.target_path}")
        job.status = "completed"
