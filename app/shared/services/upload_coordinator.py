# app/shared/services/upload_coordinator.py
"""
Decide which asset a catalog entry references and reclaim files around the
outcome of the write that persists that reference.

Ordering: `after_commit` / `after_rollback` are only called once the
transaction outcome is final, so a stored asset is never deleted while the
entry may still point at it.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from .asset_storage import AssetStorage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssetPlan:
    reference: str
    uploaded: Optional[str] = None
    previous: Optional[str] = None
    changing: bool = False


class UploadCoordinator:

    def __init__(self, storage: AssetStorage, fallback_name: str):
        self.storage = storage
        self.fallback_name = fallback_name

    def resolve_for_create(
        self,
        uploaded: Optional[str],
        use_default: bool = False,
        default_name: Optional[str] = None
    ) -> AssetPlan:
        if uploaded:
            reference = uploaded
        elif use_default and default_name:
            reference = default_name
        else:
            reference = self.fallback_name
        logger.info(f"Asset for new entry: {reference}")
        return AssetPlan(reference=reference, uploaded=uploaded, changing=True)

    def resolve_for_update(
        self,
        previous: Optional[str],
        uploaded: Optional[str],
        use_default: bool = False,
        default_name: Optional[str] = None
    ) -> AssetPlan:
        if uploaded:
            reference = uploaded
        elif use_default:
            reference = default_name or self.fallback_name
        else:
            reference = previous or self.fallback_name
        return AssetPlan(
            reference=reference,
            uploaded=uploaded,
            previous=previous,
            changing=reference != previous
        )

    def after_commit(self, plan: AssetPlan) -> None:
        """Reclaim the replaced asset. The fallback asset is shared and never deleted."""
        previous = plan.previous
        if not plan.changing or not previous:
            return
        if previous == self.fallback_name or previous == plan.reference:
            return
        self.storage.discard(previous)

    def after_rollback(self, plan: AssetPlan) -> None:
        """Reclaim a file uploaded for a write that did not commit"""
        if plan.uploaded:
            logger.info(f"Removing upload {plan.uploaded} of a failed write")
            self.storage.discard(plan.uploaded)
