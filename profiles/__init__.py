from profiles.loader import load_profile, parse_profile, save_profile, validate_profile_dict
from profiles.options import category_for, options_summary

__all__ = [
    "load_profile",
    "parse_profile",
    "save_profile",
    "validate_profile_dict",
    "category_for",
    "options_summary",
]
