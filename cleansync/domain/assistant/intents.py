"""Keyword/context tables the chat classifier scores messages against"""

from dataclasses import dataclass

BOOKING_MODIFICATION = "booking_modification"
BOOKING_CANCELLATION = "booking_cancellation"
BOOKING_SCHEDULING = "booking_scheduling"
AVAILABILITY_QUESTION = "availability_question"
SERVICES_QUESTION = "services_question"
PRICING_QUESTION = "pricing_question"
SUPPLY_REQUEST = "supply_request"
SUPPLY_INVENTORY = "supply_inventory"
SUPPLY_SHORTAGE = "supply_shortage"


@dataclass(frozen=True)
class IntentPattern:
    name: str
    keywords: tuple[str, ...]
    context: tuple[str, ...]
    priority: int
    # Only ranked when at least one keyword matched
    requires_keyword: bool = False


# Order matters on ties: earlier entries win
INTENT_PATTERNS: tuple[IntentPattern, ...] = (
    IntentPattern(
        BOOKING_MODIFICATION,
        keywords=("modify", "change", "reschedule", "update", "move", "switch", "adjust", "different", "another"),
        context=("time", "date", "day", "appointment", "schedule", "booking"),
        priority=2,
    ),
    IntentPattern(
        BOOKING_CANCELLATION,
        keywords=("cancel", "remove", "delete", "stop", "don't want", "no longer"),
        context=("appointment", "booking", "cleaning", "service"),
        priority=3,
    ),
    IntentPattern(
        BOOKING_SCHEDULING,
        keywords=("schedule", "book", "reserve", "set up", "arrange", "make", "new"),
        context=("appointment", "cleaning", "service", "time", "date"),
        priority=2,
    ),
    IntentPattern(
        AVAILABILITY_QUESTION,
        keywords=("when", "what time", "which days", "available", "free", "open"),
        context=("schedule", "book", "time", "date", "week", "month"),
        priority=1,
    ),
    IntentPattern(
        SERVICES_QUESTION,
        keywords=("service", "cleaning", "offer", "provide", "include", "do you"),
        context=("type", "kind", "what", "how"),
        priority=1,
    ),
    IntentPattern(
        PRICING_QUESTION,
        keywords=("cost", "price", "rate", "charge", "fee", "expensive", "cheap"),
        context=("service", "cleaning", "much", "how"),
        priority=1,
    ),
    IntentPattern(
        SUPPLY_REQUEST,
        keywords=("need", "want", "require", "order", "get", "bring"),
        context=("supplies", "products", "cleaning", "materials"),
        priority=2,
        requires_keyword=True,
    ),
    IntentPattern(
        SUPPLY_INVENTORY,
        keywords=("supplies", "products", "materials", "items", "stock", "inventory"),
        context=("check", "have", "list", "available"),
        priority=1,
    ),
    IntentPattern(
        SUPPLY_SHORTAGE,
        keywords=("run out", "missing", "empty", "low", "finished", "depleted"),
        context=("supplies", "products", "cleaning", "materials"),
        priority=3,
        requires_keyword=True,
    ),
)

POSITIVE_WORDS = ("great", "good", "excellent", "wonderful", "perfect", "thanks", "appreciate")
NEGATIVE_WORDS = ("bad", "poor", "terrible", "awful", "wrong", "unhappy", "disappointed")
URGENT_WORDS = ("urgent", "asap", "emergency", "immediately", "right now", "tonight", "today")
