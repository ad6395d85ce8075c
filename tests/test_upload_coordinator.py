from __future__ import annotations

import unittest
from unittest.mock import Mock

from app.shared.services.asset_storage import AssetStorage
from app.shared.services.upload_coordinator import AssetPlan, UploadCoordinator

FALLBACK = 'no-image-icon-4.png'


class UploadCoordinatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.storage = Mock(spec=AssetStorage)
        self.coordinator = UploadCoordinator(self.storage, FALLBACK)

    def test_create_precedence(self) -> None:
        self.assertEqual(self.coordinator.resolve_for_create('171.png', True, 'shoe.png').reference, '171.png')
        self.assertEqual(self.coordinator.resolve_for_create(None, True, 'shoe.png').reference, 'shoe.png')
        self.assertEqual(self.coordinator.resolve_for_create(None, True, None).reference, FALLBACK)
        self.assertEqual(self.coordinator.resolve_for_create(None, False, 'shoe.png').reference, FALLBACK)

    def test_update_precedence(self) -> None:
        resolve = self.coordinator.resolve_for_update
        self.assertEqual(resolve('old.png', '171.png', True, 'shoe.png').reference, '171.png')
        self.assertEqual(resolve('old.png', None, True, 'shoe.png').reference, 'shoe.png')
        self.assertEqual(resolve('old.png', None, True, None).reference, FALLBACK)
        self.assertEqual(resolve('old.png', None, False, None).reference, 'old.png')
        self.assertEqual(resolve(None, None, False, None).reference, FALLBACK)

    def test_update_without_new_image_is_not_changing(self) -> None:
        plan = self.coordinator.resolve_for_update('old.png', None)
        self.assertFalse(plan.changing)
        self.coordinator.after_commit(plan)
        self.storage.discard.assert_not_called()

    def test_replaced_asset_is_deleted_after_commit(self) -> None:
        plan = self.coordinator.resolve_for_update('old.png', '171.png')
        self.assertTrue(plan.changing)
        self.coordinator.after_commit(plan)
        self.storage.discard.assert_called_once_with('old.png')

    def test_fallback_asset_is_never_deleted(self) -> None:
        plan = self.coordinator.resolve_for_update(FALLBACK, '171.png')
        self.coordinator.after_commit(plan)
        self.storage.discard.assert_not_called()

    def test_reselecting_the_same_default_keeps_it(self) -> None:
        plan = self.coordinator.resolve_for_update('shoe.png', None, True, 'shoe.png')
        self.coordinator.after_commit(plan)
        self.storage.discard.assert_not_called()

    def test_upload_is_discarded_after_rollback(self) -> None:
        plan = self.coordinator.resolve_for_update('old.png', '171.png')
        self.coordinator.after_rollback(plan)
        self.storage.discard.assert_called_once_with('171.png')

    def test_rollback_without_upload_touches_nothing(self) -> None:
        self.coordinator.after_rollback(AssetPlan(reference=FALLBACK))
        self.storage.discard.assert_not_called()


if __name__ == '__main__':
    unittest.main()
