"""Keyword-matching hotel assistant."""

from hotel.inventory import room_counts as inventory_room_counts

ROOM_RATES = 'Standard Room - $100/night, Deluxe Room - $150/night, and Suite - $250/night'

# Checked in order; the first group with a matching keyword answers.
CANNED_REPLIES = [
    (('book', 'booking'),
     'You can book a room by navigating to our booking page. We offer Standard Rooms '
     '($100/night), Deluxe Rooms ($150/night), and Suites ($250/night). Would you like '
     'me to redirect you to the booking page?'),
    (('check-in', 'checkin'),
     'Check-in time is from 2:00 PM onwards. Check-out time is 11:00 AM. Early check-in '
     'and late check-out can be arranged based on availability.'),
    (('check-out', 'checkout'),
     'Check-out time is 11:00 AM. Late check-out can be arranged based on availability. '
     'Please contact our front desk for arrangements.'),
    (('cancel', 'cancellation'),
     'You can cancel your booking from your customer dashboard. Cancellations must be '
     'made at least 24 hours before check-in. You will need to be logged in to manage '
     'your bookings.'),
    (('price', 'cost', 'rate'),
     f'Our room rates are: {ROOM_RATES}. All rates are subject to availability and may '
     'vary during peak seasons.'),
    (('amenities', 'facilities'),
     'Our rooms include WiFi, TV, AC, and private bathrooms. Deluxe rooms also feature '
     'mini bars and city views, while suites include balconies and room service.'),
    (('help', 'support'),
     'For any assistance, you can contact our support team at support@hotel.com or call '
     'us at +1-555-0123. Our staff is available 24/7 to help you.'),
    (('hello', 'hi', 'hey'),
     "Hello! I'm your hotel assistant. I can help you with booking rooms, checking "
     'availability, room rates, amenities, and more. How can I assist you today?'),
    (('thank',),
     "You're welcome! Is there anything else I can help you with?"),
    (('bye', 'goodbye'),
     'Thank you for choosing our hotel! Have a wonderful day and feel free to reach out '
     'if you need anything else.'),
]

AVAILABILITY_KEYWORDS = ('available', 'rooms', 'how many')

FALLBACK_REPLY = (
    "I'm sorry, I didn't understand that. You can ask me about room availability, "
    'booking, check-in/check-out times, prices, amenities, or cancellation policies. '
    'How can I help you?'
)


def _availability_reply(room_counts):
    available, total = room_counts()
    if available > 0:
        return (
            f'We currently have {available} rooms available out of {total} total rooms. '
            'You can view and book available rooms on our booking page. Would you like '
            'me to help you with anything else?'
        )
    return (
        'Unfortunately, all rooms are currently booked. Please check back later for '
        'availability or contact us for assistance.'
    )


def reply(message, room_counts=inventory_room_counts):
    text = (message or '').lower()

    if any(keyword in text for keyword in AVAILABILITY_KEYWORDS):
        return _availability_reply(room_counts)

    for keywords, answer in CANNED_REPLIES:
        if any(keyword in text for keyword in keywords):
            return answer

    return FALLBACK_REPLY
