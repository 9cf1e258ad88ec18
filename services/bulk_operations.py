"""
Bulk admin actions over a list of registration ids.

Each id is handled independently with its own commit. A failure on one id
(unknown id, database error) is rolled back and counted, never raised, so a
partially applied batch is reported rather than undone.
"""
from typing import Callable, List
from sqlalchemy.orm import Session

from api.crud.registration_crud import update_registration_status, delete_registration
from core.tournament_config import RegistrationStatus, BULK_MAX_IDS
from core.validators import validate_bulk_ids
from core.logging import logger
from schemas.registration import BulkResult


class BulkOperations:
    def __init__(self, db: Session, admin_username: str, limit: int = BULK_MAX_IDS):
        self.db = db
        self.admin_username = admin_username
        self.limit = limit

    def _run(self, name: str, ids: List[str], operation: Callable[[str], bool]) -> BulkResult:
        validate_bulk_ids(ids, self.limit)

        processed = 0
        failed = 0
        for registration_id in ids:
            try:
                if operation(registration_id):
                    processed += 1
                else:
                    failed += 1
            except Exception as e:
                self.db.rollback()
                failed += 1
                logger.error(f"Bulk {name} failed for registration {registration_id}: {e}")

        logger.info(f"Bulk {name} by {self.admin_username}: {processed} processed, {failed} failed, {len(ids)} total")
        return BulkResult(processed=processed, failed=failed, total=len(ids))

    def _set_status(self, status: RegistrationStatus) -> Callable[[str], bool]:
        def operation(registration_id: str) -> bool:
            return update_registration_status(self.db, registration_id, status, self.admin_username) is not None
        return operation

    def approve(self, ids: List[str]) -> BulkResult:
        return self._run("approve", ids, self._set_status(RegistrationStatus.APPROVED))

    def reject(self, ids: List[str]) -> BulkResult:
        return self._run("reject", ids, self._set_status(RegistrationStatus.REJECTED))

    def delete(self, ids: List[str]) -> BulkResult:
        return self._run(
            "delete",
            ids,
            lambda registration_id: delete_registration(
                self.db, registration_id, self.admin_username, action="bulk_delete"
            ),
        )
