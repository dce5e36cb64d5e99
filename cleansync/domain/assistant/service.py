"""Assistant service - turns a classified chat message into a reply"""

import logging
import random
from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from ...models import Client
from ..bookings.schemas import BookingResponse
from ..bookings.service import BookingService
from ..bookings.slots import is_weekend
from ..supplies.schemas import SupplyResponse
from ..supplies.service import SupplyService
from . import intents
from . import responses as replies
from .classifier import Classification, classify
from .schemas import AssistantReply

logger = logging.getLogger(__name__)


class AssistantService:
    """Service layer for the rule-based chat assistant"""

    def __init__(self, db: Session, today: Optional[date] = None, rng: Optional[random.Random] = None):
        self.db = db
        self.today = today
        self.rng = rng
        self.bookings = BookingService(db)
        self.supplies = SupplyService(db)

    def respond(self, message: str, client: Client) -> AssistantReply:
        result = classify(message, today=self.today)
        logger.info(
            f"💬 Chat from client {client.id}: intent={result.primary} "
            f"confidence={result.confidence:.2f} sentiment={result.sentiment} urgent={result.urgent}"
        )

        handler = {
            intents.BOOKING_MODIFICATION: self._modify_booking,
            intents.BOOKING_CANCELLATION: self._cancel_booking,
            intents.BOOKING_SCHEDULING: self._schedule_booking,
            intents.AVAILABILITY_QUESTION: self._availability,
            intents.SERVICES_QUESTION: self._services,
            intents.PRICING_QUESTION: self._pricing,
            intents.SUPPLY_REQUEST: self._supply_request,
            intents.SUPPLY_SHORTAGE: self._supply_shortage,
            intents.SUPPLY_INVENTORY: self._supply_inventory,
        }.get(result.primary, self._general_help)

        reply = handler(message, client, result)
        reply.intent = result.primary
        reply.confidence = round(result.confidence, 4)
        reply.sentiment = result.sentiment
        reply.urgent = result.urgent
        return reply

    # Booking intents

    def _modify_booking(self, message: str, client: Client, result: Classification) -> AssistantReply:
        upcoming = self.bookings.get_upcoming_bookings(client, self.today)

        if not upcoming:
            text = (
                replies.NO_BOOKINGS_TO_MODIFY_NEGATIVE
                if result.sentiment == "negative"
                else replies.NO_BOOKINGS_TO_MODIFY
            )
            if result.urgent:
                text += replies.URGENT_SUFFIX
            return AssistantReply(text=text, action="suggest_new_booking")

        return AssistantReply(
            text=replies.SHOW_BOOKINGS,
            action="show_bookings",
            data=[BookingResponse.model_validate(b).model_dump(mode="json") for b in upcoming],
        )

    def _cancel_booking(self, message: str, client: Client, result: Classification) -> AssistantReply:
        upcoming = self.bookings.get_upcoming_bookings(client, self.today)

        if not upcoming:
            return AssistantReply(text=replies.NO_BOOKINGS_TO_CANCEL)

        booking = upcoming[0]
        return AssistantReply(
            text=replies.CONFIRM_CANCELLATION.format(when=replies.format_when(booking.scheduled_at)),
            action="confirm_cancellation",
            data=BookingResponse.model_validate(booking).model_dump(mode="json"),
        )

    def _schedule_booking(self, message: str, client: Client, result: Classification) -> AssistantReply:
        requested = result.requested_date
        if requested is None:
            return AssistantReply(text=replies.SCHEDULING_PROMPT, action="show_calendar")

        if is_weekend(requested):
            return AssistantReply(text=replies.pick(replies.WEEKEND_WARNING, self.rng), action="show_calendar")

        suggested = self.bookings.suggest_time(requested)
        return AssistantReply(
            text=replies.SLOT_SUGGESTION.format(
                day=replies.format_day(requested), when=replies.format_when(suggested)
            ),
            action="suggest_slot",
            data={"date": requested.isoformat(), "suggested_time": suggested.isoformat()},
        )

    # Questions

    def _availability(self, message: str, client: Client, result: Classification) -> AssistantReply:
        return AssistantReply(text=replies.AVAILABILITY_INFO, action="show_calendar")

    def _services(self, message: str, client: Client, result: Classification) -> AssistantReply:
        return AssistantReply(text=replies.SERVICES_INFO, action="show_suggestions")

    def _pricing(self, message: str, client: Client, result: Classification) -> AssistantReply:
        return AssistantReply(text=replies.PRICING_INFO, action="show_suggestions")

    # Supply intents

    def _supply_request(self, message: str, client: Client, result: Classification) -> AssistantReply:
        self.supplies.log_interaction(client, "supply_request", message)
        return AssistantReply(text=replies.SUPPLY_CONFIRMATION, action="confirm_supplies")

    def _supply_shortage(self, message: str, client: Client, result: Classification) -> AssistantReply:
        self.supplies.log_interaction(client, "supply_shortage", message)
        return AssistantReply(text=replies.SUPPLY_SHORTAGE_CONFIRMATION, action="confirm_supplies")

    def _supply_inventory(self, message: str, client: Client, result: Classification) -> AssistantReply:
        needed = self.supplies.get_supplies(client, status="needed")
        if not needed:
            return AssistantReply(text=replies.NO_SUPPLIES, action="show_supplies", data=[])

        return AssistantReply(
            text=replies.SUPPLY_STATUS.format(items=", ".join(s.item for s in needed)),
            action="show_supplies",
            data=[SupplyResponse.model_validate(s).model_dump(mode="json") for s in needed],
        )

    def _general_help(self, message: str, client: Client, result: Classification) -> AssistantReply:
        return AssistantReply(text=replies.pick(replies.GENERAL_HELP, self.rng), action="show_suggestions")
