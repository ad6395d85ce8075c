# app/shared/services/asset_storage.py
import logging
import os
import time
from pathlib import Path
from typing import Optional

from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool

from app.config.settings import settings
from app.core.exceptions import AssetCleanupFailure

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


class AssetStorage:
    """
    Shared asset directory (product images, profile images).

    Files are addressed by bare filename; anything that would resolve outside
    the directory is rejected.
    """

    def __init__(self, directory: str):
        self.directory = Path(directory).resolve()
        self.directory.mkdir(parents=True, exist_ok=True)

    def path_for(self, name: str) -> Path:
        if not name or name in (".", "..") or Path(name).name != name:
            raise ValueError(f"Invalid asset name: {name!r}")
        return self.directory / name

    def exists(self, name: str) -> bool:
        try:
            return self.path_for(name).is_file()
        except ValueError:
            return False

    async def save_upload(self, upload: UploadFile, name: str) -> int:
        """
        Write an upload under `name` (exclusive create). Returns the size in bytes.
        A write that fails part way removes the partial file before re-raising.
        """
        path = self.path_for(name)
        size = 0
        await upload.seek(0)
        target = await run_in_threadpool(open, path, "xb")
        try:
            with target:
                while True:
                    chunk = await upload.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    await run_in_threadpool(target.write, chunk)
                    size += len(chunk)
        except Exception:
            path.unlink(missing_ok=True)
            logger.warning(f"⚠️ Partial upload {name} removed after a failed write")
            raise
        logger.info(f"📁 Stored upload {upload.filename!r} as {name} ({size} bytes)")
        return size

    async def save_catalog_upload(self, upload: UploadFile) -> str:
        """Store a catalog image as `{epoch_ms}{ext}`; bumps the timestamp until the name is free"""
        extension = Path(upload.filename or "").suffix.lower()
        stamp = int(time.time() * 1000)
        while True:
            name = f"{stamp}{extension}"
            try:
                await self.save_upload(upload, name)
                return name
            except FileExistsError:
                stamp += 1

    def rename(self, source: str, target: str) -> None:
        os.replace(self.path_for(source), self.path_for(target))

    def remove(self, name: str) -> None:
        """Delete an asset. Raises FileNotFoundError when absent, AssetCleanupFailure on any other error."""
        path = self.path_for(name)
        try:
            path.unlink()
        except FileNotFoundError:
            raise
        except OSError as e:
            raise AssetCleanupFailure(f"Could not delete asset {name}: {e}") from e

    def discard(self, name: Optional[str]) -> bool:
        """Best-effort delete; never raises. Returns True when a file was removed."""
        if not name:
            return False
        try:
            self.remove(name)
            logger.info(f"🗑️ Deleted asset {name}")
            return True
        except FileNotFoundError:
            logger.warning(f"Asset {name} already gone")
        except (AssetCleanupFailure, ValueError) as e:
            logger.warning(f"⚠️ Asset cleanup failed for {name}: {e}")
        return False


def get_asset_storage() -> AssetStorage:
    """Dependency: asset storage rooted at the configured upload directory"""
    return AssetStorage(settings.upload_dir)
