"""Submission of the selected transactions for Gift Aid."""

from dataclasses import dataclass, field
from typing import Any

from gift_aid_ui.errors import ReviewError, TransportError, ValidationError
from gift_aid_ui.lib import logs, objects
from gift_aid_ui.review.query import QueryCoordinator
from gift_aid_ui.review.selection import SelectionRegistry
from gift_aid_ui.services.transaction_service import TransactionService

LOG = logs.logger(__file__)


@dataclass(frozen=True)
class SubmissionResult:
    """
    Outcome of a successful submission.

    Attributes:
        ids: The submitted transaction ids, in selection order.
        response: Opaque result returned by the service.
        refreshed: False when the follow-up reload failed.
    """

    ids: list[str] = field(default_factory=list)
    response: Any = None
    refreshed: bool = True


class SubmissionCoordinator:
    """
    Sends the selection to the service.

    There is no automatic retry: a failed attempt leaves the selection as
    it was so the caller can submit again.
    """

    def __init__(
        self,
        service: TransactionService,
        selection: SelectionRegistry,
        queries: QueryCoordinator,
    ) -> None:
        self._service = service
        self._selection = selection
        self._queries = queries

    def submit(self) -> SubmissionResult:
        """
        Submit every selected id, then clear the selection and reload.

        Raises:
            ValidationError: If nothing is selected. No remote call is made.
            TransportError: If the service rejects or fails the submission.
        """
        if self._selection.count() == 0:
            raise ValidationError("Please select the Transaction.")

        ids = self._selection.selected_ids()
        LOG.info("Submitting %d transactions for Gift Aid", len(ids))
        try:
            response = self._service.submit_selection(ids)
        except TransportError:
            LOG.error("Gift Aid submission failed", exc_info=True)
            raise
        except Exception as exc:
            LOG.error("Gift Aid submission failed", exc_info=True)
            raise TransportError(
                "Gift Aid Submission failed.", operation="submit"
            ) from exc
        LOG.info("Submission result: %s", objects.to_json(response))

        self._selection.clear()
        try:
            self._queries.refresh()
            refreshed = True
        except ReviewError:
            LOG.error("Reload after submission failed", exc_info=True)
            refreshed = False
        return SubmissionResult(ids=ids, response=response, refreshed=refreshed)
