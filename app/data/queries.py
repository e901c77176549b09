from __future__ import annotations

import re

from supabase import Client


# Table names as they exist in the Supabase project.
T_ASSETS = "mb_assets"
T_CONTRACTOR_TRACKER = "Contractor_Tracker"
T_CONTRACTOR_SUMMARY = "amc_contractor_summary"
T_CONTRACTOR_DETAILS = "amc_contractor_details"
T_CONTRACTOR_EXPIRY = "amc_contractor_expiry"
T_CONTRACTOR_PRICING = "amc_contractor_pricing"
T_AMC_CONTRACTS = "amc_contracts"
T_AMC_EXPIRY = "amc_expiry"
T_AMC_CONTACTS = "amc_contacts"
T_AMC_PRICING = "amc_pricing"
T_ELECTRICITY_METERS = "electricity_meters"
T_ELECTRICITY_READINGS = "electricity_readings"
T_STP_OPERATIONS = "stp_operations"
T_WATER_SYSTEM = "Water System"
T_PROFILES = "profiles"

ASSET_SEARCH_COLUMNS = ("asset_name", "location_name", "asset_tag", "category")

# Characters with meaning inside a PostgREST or=(...) expression; `*` is its alias for `%`.
_FILTER_RESERVED = re.compile(r"[,()*]")
# LIKE wildcards and the escape character itself, matched literally.
_LIKE_SPECIAL = re.compile(r"([\\%_])")


def page_range(page: int, page_size: int) -> tuple[int, int]:
    """1-based page -> inclusive (start, end) row offsets."""
    page = max(1, int(page))
    page_size = max(1, int(page_size))
    start = (page - 1) * page_size
    return start, start + page_size - 1


def clean_search_term(term: str) -> str:
    """The search term both live and demo search use."""
    return _FILTER_RESERVED.sub(" ", term or "").strip()


def asset_search_filter(term: str) -> str | None:
    cleaned = clean_search_term(term)
    if not cleaned:
        return None
    literal = _LIKE_SPECIAL.sub(r"\\\1", cleaned)
    return ",".join(f"{col}.ilike.%{literal}%" for col in ASSET_SEARCH_COLUMNS)


def q_assets(client: Client, page: int = 1, page_size: int = 50, search: str = ""):
    start, end = page_range(page, page_size)
    q = client.table(T_ASSETS).select("*", count="exact")
    or_filter = asset_search_filter(search)
    if or_filter:
        q = q.or_(or_filter)
    return q.order("asset_name", desc=False).range(start, end)


def q_contractor_tracker(client: Client):
    return client.table(T_CONTRACTOR_TRACKER).select("*").order("Contractor")


def q_contractor_summary(client: Client):
    return client.table(T_CONTRACTOR_SUMMARY).select("*").order("no")


def q_contractor_details(client: Client):
    return client.table(T_CONTRACTOR_DETAILS).select("*").order("contractor")


def q_contractor_expiry(client: Client):
    return client.table(T_CONTRACTOR_EXPIRY).select("*").order("days_remaining")


def q_contractor_pricing(client: Client):
    return client.table(T_CONTRACTOR_PRICING).select("*").order("contractor")


def q_amc_contracts(client: Client):
    return client.table(T_AMC_CONTRACTS).select("*").order("name")


def q_amc_expiry(client: Client):
    return client.table(T_AMC_EXPIRY).select("*, amc_contracts(name, company)").order("expiry_date")


def q_amc_contacts(client: Client):
    return client.table(T_AMC_CONTACTS).select("*, amc_contracts(name)").order("contact_name")


def q_amc_pricing(client: Client):
    return client.table(T_AMC_PRICING).select("*, amc_contracts(name)").order("contract_value", desc=True)


def q_electricity_meters(client: Client):
    return client.table(T_ELECTRICITY_METERS).select("*").order("name")


def q_electricity_readings(client: Client):
    return client.table(T_ELECTRICITY_READINGS).select("*")


def q_stp_operations(client: Client):
    return client.table(T_STP_OPERATIONS).select("*").order("date", desc=False)


def q_water_meters(client: Client):
    return client.table(T_WATER_SYSTEM).select("*")


def q_profile(client: Client, user_id: str):
    return client.table(T_PROFILES).select("*").eq("id", user_id).maybe_single()
