"""Bookings app package.

This app encapsulates the booking domain: the booking model and its
consumption links, the validation engine deciding whether a proposed
reservation is admissible (date, working hours, capacity, availability)
and the store that persists bookings. Writes run inside a unit of work so
the overlap check and the insert/update commit or roll back together.
"""
