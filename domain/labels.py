from __future__ import annotations

from types import MappingProxyType

from domain.value_objects import Language

SUPPORTED_LANGUAGES: tuple[Language, ...] = (
    Language("en", "English"),
    Language("es", "Español"),
    Language("fr", "Français"),
    Language("de", "Deutsch"),
    Language("zh", "Chinese"),
    Language("ar", "العربية", rtl=True),
)

LANGUAGES_BY_CODE = {lang.code: lang for lang in SUPPORTED_LANGUAGES}

# Every string the form shows, in the source language.
SOURCE_TEXT = MappingProxyType(
    {
        "title": "Rental Application",
        "first_name": "First Name",
        "last_name": "Last Name",
        "email": "Email",
        "phone": "Phone",
        "current_address": "Current Address",
        "employment_status": "Employment Status",
        "monthly_income": "Monthly Income",
        "desired_move_in_date": "Desired Move-in Date",
        "number_of_occupants": "Number of Occupants",
        "credit_score": "Credit Score",
        "has_pets": "Do you have pets?",
        "pet_details": "Pet Details",
        "pet_details_placeholder": "Please describe your pets (type, breed, size, etc.)",
        "additional_notes": "Additional Notes",
        "additional_notes_placeholder": "Any additional information you'd like to share...",
        "submit": "Submit Application",
        "select_status": "Select status",
        "full_time": "Full-time",
        "part_time": "Part-time",
        "self_employed": "Self-employed",
        "unemployed": "Unemployed",
        "retired": "Retired",
        "use_current_location": "Use Current Location",
        "location_error": "Could not get your location",
        "search_address": "Search for address...",
        "please_check": "Please check",
    }
)

# employment status value -> label key of its caption
EMPLOYMENT_OPTION_LABELS = MappingProxyType(
    {
        "Full-time": "full_time",
        "Part-time": "part_time",
        "Self-employed": "self_employed",
        "Unemployed": "unemployed",
        "Retired": "retired",
    }
)


def get_language(code: str) -> Language | None:
    return LANGUAGES_BY_CODE.get(code)
