"""Purchase service - all business logic lives here.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or raise domain errors

Every rule is checked before either gateway is called, so a rejected
purchase has no side effects. Gateway failures propagate unchanged.
"""

import logging
from collections.abc import Sequence

from purchases.domain import (
    AccountId,
    AdultRequiredError,
    InvalidAccountError,
    InvalidPurchaseError,
    PurchaseSummary,
    TicketPolicy,
    TicketTally,
    TicketTypeRequest,
    TooManyTicketsError,
)
from purchases.gateways import SeatReservationService, TicketPaymentService

logger = logging.getLogger(__name__)


class TicketService:
    """Service for ticket purchases."""

    def __init__(
        self,
        payment_service: TicketPaymentService,
        reservation_service: SeatReservationService,
        policy: TicketPolicy | None = None,
    ) -> None:
        self._payment_service = payment_service
        self._reservation_service = reservation_service
        self._policy = policy if policy is not None else TicketPolicy()

    @property
    def payment_service(self) -> TicketPaymentService:
        return self._payment_service

    @property
    def reservation_service(self) -> SeatReservationService:
        return self._reservation_service

    @property
    def policy(self) -> TicketPolicy:
        return self._policy

    def purchase_tickets(
        self, account_id: int | None, ticket_type_requests: Sequence[TicketTypeRequest]
    ) -> PurchaseSummary:
        """Validate the purchase, take payment, then reserve seats.

        Raises:
            InvalidAccountError: If account_id is missing or not positive.
            TooManyTicketsError: If more tickets are requested than the policy allows.
            AdultRequiredError: If child tickets are requested without an adult.
        """
        try:
            account, tally = self._validate(account_id, ticket_type_requests)
        except InvalidPurchaseError as exc:
            logger.warning("Purchase rejected for account %r: %s", account_id, exc.code.value)
            raise

        amount_to_pay = self._policy.amount_for(tally)
        seats_to_reserve = self._policy.seats_for(tally)

        self._payment_service.make_payment(account.value, amount_to_pay)
        self._reservation_service.reserve_seat(account.value, seats_to_reserve)

        logger.info(
            "Purchase complete for account %s: paid %s, reserved %s seats",
            account.value,
            amount_to_pay,
            seats_to_reserve,
        )
        return PurchaseSummary(
            account_id=account,
            tally=tally,
            amount_to_pay=amount_to_pay,
            seats_to_reserve=seats_to_reserve,
        )

    def validate_purchase(
        self, account_id: int | None, ticket_type_requests: Sequence[TicketTypeRequest]
    ) -> TicketTally:
        """Check every purchase rule without calling any gateway."""
        _, tally = self._validate(account_id, ticket_type_requests)
        return tally

    def calculate_total_payment(self, ticket_type_requests: Sequence[TicketTypeRequest]) -> int:
        return self._policy.amount_for(TicketTally.from_requests(ticket_type_requests))

    def calculate_total_seats(self, ticket_type_requests: Sequence[TicketTypeRequest]) -> int:
        return self._policy.seats_for(TicketTally.from_requests(ticket_type_requests))

    def _validate(
        self, account_id: int | None, ticket_type_requests: Sequence[TicketTypeRequest]
    ) -> tuple[AccountId, TicketTally]:
        try:
            account = AccountId.from_value(account_id)
        except ValueError:
            raise InvalidAccountError(account_id) from None

        tally = TicketTally.from_requests(ticket_type_requests)
        maximum = self._policy.max_tickets_per_purchase
        if tally.total > maximum:
            raise TooManyTicketsError(total=tally.total, maximum=maximum)
        # Infants without an adult are not rejected here.
        if tally.child > 0 and tally.adult == 0:
            raise AdultRequiredError()
        return account, tally
