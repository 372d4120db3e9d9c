import pytest

from hotel import chatbot


def no_rooms_lookup():
    raise AssertionError("room counts should not be queried")


@pytest.mark.parametrize("message, expected", [
    ("I want to BOOK a room", "booking page"),
    ("What time is check-in?", "2:00 PM"),
    ("when is checkout", "Check-out time is 11:00 AM"),
    ("cancellation policy please", "24 hours"),
    ("what is the price", "Standard Room - $100/night"),
    ("which amenities do you have", "WiFi"),
    ("I need support", "support@hotel.com"),
    ("hey there", "hotel assistant"),
    ("thanks!", "You're welcome"),
    ("bye", "Have a wonderful day"),
    ("qwerty", "didn't understand"),
])
def test_keyword_replies(message, expected):
    assert expected in chatbot.reply(message, room_counts=no_rooms_lookup)


def test_availability_uses_room_counts():
    answer = chatbot.reply("Any rooms available?", room_counts=lambda: (3, 5))
    assert "3 rooms available out of 5 total rooms" in answer


def test_availability_when_fully_booked():
    answer = chatbot.reply("how many are free?", room_counts=lambda: (0, 5))
    assert "all rooms are currently booked" in answer


def test_empty_message_falls_back():
    assert chatbot.reply("", room_counts=no_rooms_lookup) == chatbot.FALLBACK_REPLY
