"""Recursive template copy with permission-bit preservation."""

from __future__ import annotations

import contextlib
import logging
import os
import shutil
import stat
import tempfile
from pathlib import Path

from .errors import CopyError, ProjectExistsError

logger = logging.getLogger(__name__)


def copy_tree(source: Path, destination: Path) -> list[Path]:
    """Copy the directory ``source`` into ``destination``.

    ``destination`` may be missing (parents are created) or an empty
    directory. File contents are copied byte-for-byte and each file and
    directory receives its source's permission bits; ownership and extended
    attributes are not carried over. Symlinks are recreated as symlinks with
    the same target rather than followed.

    Any failure aborts the copy and is raised as :class:`CopyError`. Cleaning
    up a partially populated ``destination`` is the caller's job.
    """

    source = Path(source)
    destination = Path(destination)
    if not source.exists():
        raise CopyError(f"Source {source} does not exist")
    if not source.is_dir():
        raise CopyError(f"Source {source} is not a directory")
    try:
        if destination.is_dir() and any(destination.iterdir()):
            raise CopyError(f"Destination {destination} is not empty")
        return _copy_directory(source, destination)
    except OSError as exc:
        failed = exc.filename or source
        raise CopyError(f"Error copying {failed}: {exc.strerror or exc}") from exc


def _copy_directory(source: Path, destination: Path) -> list[Path]:
    source_mode = stat.S_IMODE(source.stat().st_mode)
    destination.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    with os.scandir(source) as entries:
        for entry in entries:
            src_path = Path(entry.path)
            dst_path = destination / entry.name
            if entry.is_symlink():
                os.symlink(os.readlink(src_path), dst_path)
                written.append(dst_path)
            elif entry.is_dir(follow_symlinks=False):
                written.extend(_copy_directory(src_path, dst_path))
            elif entry.is_file(follow_symlinks=False):
                shutil.copyfile(src_path, dst_path, follow_symlinks=False)
                shutil.copymode(src_path, dst_path, follow_symlinks=False)
                written.append(dst_path)
            else:
                logger.warning("Skipping special file %s", src_path)

    # Applied last so read-only source directories can still be populated.
    os.chmod(destination, source_mode)
    return written


def _remove_staging(staging: Path) -> None:
    """Best-effort removal of a staging tree, unlocking read-only folders first."""
    with contextlib.suppress(OSError):
        os.chmod(staging, stat.S_IRWXU)
    for dirpath, dirnames, _ in os.walk(staging):
        for name in dirnames:
            with contextlib.suppress(OSError):
                os.chmod(os.path.join(dirpath, name), stat.S_IRWXU)
    shutil.rmtree(staging, ignore_errors=True)
    if staging.exists():
        logger.warning("Could not remove partial copy at %s", staging)


def copy_template(source: Path, target: Path) -> list[Path]:
    """Copy a template folder to a brand new project directory.

    The tree is first copied into a hidden staging directory next to
    ``target`` and renamed into place once complete, so ``target`` either
    holds the full template or does not exist. On failure the staging
    directory is removed best-effort and the error propagates.
    """

    if target.exists() or target.is_symlink():
        raise ProjectExistsError(target)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        staging = Path(
            tempfile.mkdtemp(prefix=".janus-", suffix=".partial", dir=target.parent)
        )
    except OSError as exc:
        raise CopyError(f"Error creating target directory: {exc}") from exc

    logger.debug("Staging %s into %s", source, staging)
    try:
        copied = copy_tree(source, staging)
        try:
            staging.rename(target)
        except OSError as exc:
            raise CopyError(f"Error moving project into {target}: {exc}") from exc
    except BaseException:
        _remove_staging(staging)
        raise
    return [target / path.relative_to(staging) for path in copied]
