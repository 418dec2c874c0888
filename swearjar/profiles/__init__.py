from swearjar.profiles.loader import (
    FilterProfile,
    ProfileValidationError,
    build_profile_engine,
    load_profile,
    parse_profile,
)

__all__ = [
    "FilterProfile",
    "ProfileValidationError",
    "build_profile_engine",
    "load_profile",
    "parse_profile",
]
