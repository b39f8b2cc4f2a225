"""Directory app package.

Reference data a booking points at: the organizational units that request
bookings, the meeting rooms that can be booked and the consumption items
(catering and supplies) that can be attached to a booking. Entries are
managed through the Django admin and listed read-only over the API.
"""
