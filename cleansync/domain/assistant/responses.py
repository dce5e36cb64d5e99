"""Canned assistant replies"""

import random
from datetime import datetime
from typing import Optional

from ...config import WORKING_HOURS_END, WORKING_HOURS_START

GENERAL_HELP = (
    "I'm here to help with booking modifications, cancellations, supply requests, and scheduling "
    "questions. Could you please provide more details about what you need?",
    "I can help you schedule cleanings, manage your supply list, or answer questions about our "
    "services. What would you like to do?",
    "How can I assist you today? I can help with bookings, supplies, or general questions about "
    "our services.",
)

NO_BOOKINGS_TO_MODIFY = (
    "I don't see any upcoming bookings to modify. Would you like to schedule a new cleaning service?"
)
NO_BOOKINGS_TO_MODIFY_NEGATIVE = (
    "I understand this might be frustrating. I don't see any upcoming bookings to modify, but I'd "
    "be happy to help you schedule a new cleaning service."
)
URGENT_SUFFIX = " I can help you find the earliest available slot."

SHOW_BOOKINGS = (
    "I can help you modify your booking. Here are your upcoming appointments. Which one would you "
    "like to change?"
)

NO_BOOKINGS_TO_CANCEL = (
    "I don't see any upcoming bookings to cancel. Is there something else I can help you with?"
)
CONFIRM_CANCELLATION = (
    "I can help you cancel your booking scheduled for {when}. Would you like to proceed with the "
    "cancellation?"
)

SCHEDULING_PROMPT = (
    "I'd be glad to set up a cleaning. Pick a day on the calendar and I'll find the first open slot."
)
SLOT_SUGGESTION = "The first open slot for {day} is {when}. Would you like me to book it?"
WEEKEND_WARNING = (
    "Just to note - we don't schedule cleanings on weekends. Would you like to choose a weekday "
    "instead?",
    "Our cleaning services run Monday through Friday. Shall we look at available weekday slots?",
)

SUPPLY_CONFIRMATION = (
    "I've noted your supply request. Our team will review it and ensure to bring the necessary "
    "items during your next cleaning service. Is there anything specific you need?"
)
SUPPLY_SHORTAGE_CONFIRMATION = (
    "Thanks for letting us know you're running low. I've flagged it for our team so they restock "
    "you at your next cleaning."
)
SUPPLY_STATUS = "Here's what's currently on your supplies list: {items}"
NO_SUPPLIES = "You don't have any supplies on your list. Would you like to add some?"

SERVICES_INFO = (
    "We offer standard and deep residential cleanings in two-hour sessions. Our crew can also "
    "bring supplies from your checklist. Would you like to book a cleaning?"
)
PRICING_INFO = (
    "Pricing depends on your home and the type of cleaning. Your service coordinator will confirm "
    "the rate when your booking is confirmed. Would you like to request a cleaning?"
)


def _hour_label(hour: int) -> str:
    suffix = "AM" if hour < 12 else "PM"
    return f"{(hour - 1) % 12 + 1} {suffix}"


AVAILABILITY_INFO = (
    f"We're available Monday through Friday, from {_hour_label(WORKING_HOURS_START)} to "
    f"{_hour_label(WORKING_HOURS_END)}. Would you like to see available time slots for a specific date?"
)


def format_when(value: datetime) -> str:
    """e.g. "Tuesday, October 20 at 9:00 AM" """
    return f"{value:%A, %B} {value.day} at {value.strftime('%I:%M %p').lstrip('0')}"


def format_day(value) -> str:
    return f"{value:%A, %B} {value.day}"


def pick(options, rng: Optional[random.Random] = None) -> str:
    if isinstance(options, str):
        return options
    return (rng or random).choice(options)
