# parcel_match/application/processing/matching/_registry.py

"""Lookup of matching policies by name"""

# Local imports
from parcel_match.application.processing.matching._address_prefix import (
    AddressPrefixPolicy,
)
from parcel_match.application.processing.matching._base import MatchingPolicy
from parcel_match.application.processing.matching._keyword_weighted import (
    KeywordWeightedPolicy,
)
from parcel_match.application.processing.matching._multi_field import MultiFieldPolicy
from parcel_match.application.processing.matching._street_address import (
    StreetAddressPolicy,
)
from parcel_match.application.processing.similarity_calculator import (
    SimilarityCalculator,
)
from parcel_match.core.domain.enums import PolicyName
from parcel_match.core.domain.errors import ConfigurationError
from parcel_match.infrastructure.config import ConfigLoader

POLICIES: dict[str, type[MatchingPolicy]] = {
    PolicyName.STREET_ADDRESS.value: StreetAddressPolicy,
    PolicyName.ADDRESS_PREFIX.value: AddressPrefixPolicy,
    PolicyName.MULTI_FIELD.value: MultiFieldPolicy,
    PolicyName.KEYWORD_WEIGHTED.value: KeywordWeightedPolicy,
}


def get_policy(
    name: str | PolicyName,
    config: ConfigLoader | None = None,
    similarity_calculator: SimilarityCalculator | None = None,
) -> MatchingPolicy:
    """Create a matching policy by name

    Args:
        name: Policy name, e.g. "street_address"
        config: Configuration loader
        similarity_calculator: Shared similarity scorer

    Returns:
        Configured MatchingPolicy instance

    Raises:
        ConfigurationError: If no policy has that name
    """
    key = name.value if isinstance(name, PolicyName) else str(name).strip().lower()
    policy_class = POLICIES.get(key)
    if policy_class is None:
        raise ConfigurationError(
            f"Unknown matching policy '{name}'. Available: {', '.join(sorted(POLICIES))}"
        )
    return policy_class(config=config, similarity_calculator=similarity_calculator)
