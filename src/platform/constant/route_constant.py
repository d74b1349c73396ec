# API Route Constants

# Hotel routes
HOTEL_BASE = '/hotels'
HOTEL_LIST = HOTEL_BASE
HOTEL_GET = f'{HOTEL_BASE}/{{hotel_id}}'

# System routes
HEALTH = '/health'
METRICS = '/metrics'
