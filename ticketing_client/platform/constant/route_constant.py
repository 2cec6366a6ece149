# API Route Constants (relative to settings.API_BASE_URL)

# Auth routes
AUTH_BASE = '/auth'
AUTH_LOGIN = f'{AUTH_BASE}/login'
AUTH_VALIDATE = f'{AUTH_BASE}/validate'

# User routes
USER_PROFILE = '/user/profile'

# Event routes
EVENT_LIST = '/events'

# Booking routes
BOOKING_BASE = '/bookings'
BOOKING_CREATE = BOOKING_BASE
BOOKING_MY_BOOKINGS = f'{BOOKING_BASE}/my-bookings'

# Admin routes
ADMIN_BASE = '/admin'
ADMIN_EVENT_LIST = f'{ADMIN_BASE}/events'
ADMIN_EVENT_CREATE = ADMIN_EVENT_LIST
ADMIN_EVENT_UPDATE = f'{ADMIN_EVENT_LIST}/{{event_id}}'
ADMIN_EVENT_DELETE = f'{ADMIN_EVENT_LIST}/{{event_id}}'
ADMIN_BOOKING_LIST = f'{ADMIN_BASE}/bookings'
ADMIN_STATS = f'{ADMIN_BASE}/stats'
