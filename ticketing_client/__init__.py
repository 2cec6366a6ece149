"""Client-side transaction core of the ticket-booking app"""

__version__ = '0.1.0'
