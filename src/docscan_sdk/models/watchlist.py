"""
Watchlist screening summaries and search configurations

Advanced CA screening reports carry a polymorphic search configuration
(Yoti-managed or custom account), which in turn carries polymorphic
sources and matching strategies.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional

from .base import (
    ResourceModel,
    VariantFamily,
    expect_object,
    required,
    nested,
    value_list,
    value_map,
)
from .media import MediaHolderResponse


@dataclass
class CaProfilesSourcesResponse(ResourceModel):
    type: str
    search_profile: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            type=required(data, 'type', cls.__name__),
            search_profile=data.get('search_profile'),
        )


@dataclass
class CaTypeListSourcesResponse(ResourceModel):
    type: str
    types: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            type=required(data, 'type', cls.__name__),
            types=value_list(data, 'types', cls.__name__),
        )


@dataclass
class CaExactMatchingStrategyResponse(ResourceModel):
    type: str
    exact_match: Optional[bool] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            type=required(data, 'type', cls.__name__),
            exact_match=data.get('exact_match'),
        )


@dataclass
class CaFuzzyMatchingStrategyResponse(ResourceModel):
    type: str
    fuzziness: Optional[float] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            type=required(data, 'type', cls.__name__),
            fuzziness=data.get('fuzziness'),
        )


CA_SOURCES = VariantFamily('CA sources', {
    'PROFILE': CaProfilesSourcesResponse,
    'TYPE_LIST': CaTypeListSourcesResponse,
})

CA_MATCHING_STRATEGIES = VariantFamily('CA matching strategy', {
    'EXACT': CaExactMatchingStrategyResponse,
    'FUZZY': CaFuzzyMatchingStrategyResponse,
})


@dataclass
class WatchlistAdvancedCaSearchConfigResponse(ResourceModel):
    """
    Search configuration of an advanced CA watchlist screening.

    Attributes:
        type: WITH_YOTI_ACCOUNT or WITH_CUSTOM_ACCOUNT
        remove_deceased: Whether deceased persons are excluded
        share_url: Whether a share URL is generated for the results
        sources: PROFILE or TYPE_LIST sources (or UnknownResource)
        matching_strategy: EXACT or FUZZY strategy (or UnknownResource)
    """
    type: str
    remove_deceased: Optional[bool] = None
    share_url: Optional[bool] = None
    sources: Optional[Any] = None
    matching_strategy: Optional[Any] = None

    @classmethod
    def _common_fields(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        return dict(
            type=required(data, 'type', cls.__name__),
            remove_deceased=data.get('remove_deceased'),
            share_url=data.get('share_url'),
            sources=nested(data, 'sources', CA_SOURCES),
            matching_strategy=nested(data, 'matching_strategy', CA_MATCHING_STRATEGIES),
        )

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(**cls._common_fields(data))


class WatchlistAdvancedCaYotiAccountSearchConfigResponse(WatchlistAdvancedCaSearchConfigResponse):
    """Search run against the Yoti-managed screening account."""


@dataclass
class WatchlistAdvancedCaCustomAccountSearchConfigResponse(WatchlistAdvancedCaSearchConfigResponse):
    """Search run against the relying business's own screening account."""
    api_key: Optional[str] = None
    monitoring: Optional[bool] = None
    tags: Dict[str, str] = field(default_factory=dict)
    client_ref: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(
            **cls._common_fields(data),
            api_key=data.get('api_key'),
            monitoring=data.get('monitoring'),
            tags=value_map(data, 'tags', cls.__name__),
            client_ref=data.get('client_ref'),
        )


ADVANCED_CA_SEARCH_CONFIGS = VariantFamily('advanced CA search config', {
    'WITH_YOTI_ACCOUNT': WatchlistAdvancedCaYotiAccountSearchConfigResponse,
    'WITH_CUSTOM_ACCOUNT': WatchlistAdvancedCaCustomAccountSearchConfigResponse,
})


@dataclass
class WatchlistScreeningSearchConfigResponse(ResourceModel):
    categories: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        return cls(categories=value_list(data, 'categories', cls.__name__))


@dataclass
class WatchlistSummaryResponse(ResourceModel):
    """
    Summary of a watchlist screening.

    The shape of ``search_config`` depends on the screening flavour; the
    base class keeps it as a raw object.
    """
    total_hits: Optional[int] = None
    raw_results: Optional[MediaHolderResponse] = None
    associated_country_codes: List[str] = field(default_factory=list)
    search_config: Optional[Any] = None

    search_config_model: ClassVar[Any] = None

    @classmethod
    def from_dict(cls, data):
        data = expect_object(data, cls.__name__)
        if cls.search_config_model is None:
            search_config = data.get('search_config')
        else:
            search_config = nested(data, 'search_config', cls.search_config_model)
        return cls(
            total_hits=data.get('total_hits'),
            raw_results=nested(data, 'raw_results', MediaHolderResponse),
            associated_country_codes=value_list(data, 'associated_country_codes', cls.__name__),
            search_config=search_config,
        )


class WatchlistScreeningSummaryResponse(WatchlistSummaryResponse):
    search_config_model = WatchlistScreeningSearchConfigResponse


class WatchlistAdvancedCaSummaryResponse(WatchlistSummaryResponse):
    search_config_model = ADVANCED_CA_SEARCH_CONFIGS
