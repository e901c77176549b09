"""
Data access layer.

Design rules:
- Views call ONLY functions in this package.
- Reads never raise: fetchers return a neutral empty value, service.py falls back to demo data.
- Auth/profile writes (data.auth) propagate the store's error for display.
- No env var reads here (config-only).
"""
