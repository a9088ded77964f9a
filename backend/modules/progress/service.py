"""
Progress service implementation.

Pull returns whatever the store holds for (user, document). Push stamps
the server time and replaces the stored record whole: last write wins.
"""

import logging
import time
from typing import Callable, Optional

from shared.exceptions import InternalError, StoreError
from shared.models import AuthPrincipal
from shared.validation import is_valid_key_field

from .interfaces import IProgressService, IProgressStore
from .models import ProgressRecord
from .exceptions import DocumentFieldMissingError

logger = logging.getLogger(__name__)


def now_timestamp() -> int:
    """Current wall-clock time in whole seconds since the epoch."""
    return int(time.time())


class ProgressService(IProgressService):
    """
    Progress sync with an injected store.

    Args:
        store: Progress store shared by all requests
        clock: Source of server timestamps
    """

    def __init__(
        self,
        store: IProgressStore,
        clock: Callable[[], int] = now_timestamp,
    ):
        self._store = store
        self._clock = clock

    async def pull(self, principal: AuthPrincipal, document_id: str) -> Optional[ProgressRecord]:
        user = principal.username
        if not is_valid_key_field(document_id):
            logger.error("%s - PULL - 'document' field not provided", user)
            raise DocumentFieldMissingError(document_id)

        try:
            record = await self._store.get_doc(user, document_id)
        except StoreError as e:
            logger.error("%s - PULL - store failure: %s", user, e.details.get("reason"))
            raise InternalError(details={"operation": e.operation}) from e

        if record is None:
            logger.info("%s - PULL - %s <= None", user, document_id)
        else:
            logger.info("%s - PULL - %s <= %s on %s", user, document_id, record.percentage, record.device)
        return record

    async def push(self, principal: AuthPrincipal, record: ProgressRecord) -> ProgressRecord:
        user = principal.username
        stamped = record.model_copy(update={"timestamp": self._clock()})

        try:
            await self._store.put_doc(user, stamped.document_id, stamped)
        except StoreError as e:
            logger.error("%s - PUSH - store failure: %s", user, e.details.get("reason"))
            raise InternalError(details={"operation": e.operation}) from e

        logger.info(
            "%s - PUSH - %s => %s on %s",
            user, stamped.document_id, stamped.percentage, stamped.device,
        )
        return stamped
