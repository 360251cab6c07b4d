# API Route Constants

from src.platform.config.core_setting import settings


# Base API
API_BASE = settings.API_V1_PREFIX

# Auth routes
AUTH_BASE = f'{API_BASE}/auth'
AUTH_REGISTER = f'{AUTH_BASE}/register'
AUTH_LOGIN = f'{AUTH_BASE}/login'
AUTH_ME = f'{AUTH_BASE}/me'

# Product routes
PRODUCT_BASE = f'{API_BASE}/products'
PRODUCT_STATS = f'{PRODUCT_BASE}/stats'

# System routes
HEALTH = '/health'
