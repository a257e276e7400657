"""Cloud service providers known to the public cloud info service"""

from enum import Enum
from typing import Optional


class Provider(str, Enum):
    """A CSP, valued by its path segment in the API"""

    GOOGLE = "google"
    AMAZON = "amazon"
    MICROSOFT = "microsoft"


# Command line aliases for each provider (case-sensitive)
PROVIDER_ALIASES = {
    Provider.GOOGLE: ("g", "gce", "gcp", "google"),
    Provider.AMAZON: ("a", "aws", "ec2", "amazon"),
    Provider.MICROSOFT: ("m", "az", "azure", "microsoft"),
}

_ALIAS_LOOKUP = {
    alias: provider
    for provider, aliases in PROVIDER_ALIASES.items()
    for alias in aliases
}


def resolve_provider(token: str) -> Optional[Provider]:
    """Map a command line token to its provider.

    Args:
        token: Command line argument (e.g., 'gce', 'aws', 'az')

    Returns:
        The matching Provider, or None if the token is not a provider alias
    """
    return _ALIAS_LOOKUP.get(token)


def is_provider(token: str) -> bool:
    """Check whether a token names a provider"""
    return token in _ALIAS_LOOKUP
