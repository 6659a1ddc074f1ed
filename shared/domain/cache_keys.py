"""Entity types, list cache keys and the table tying them together.

Every mutation invalidates through ``INVALIDATION_TABLE`` so a view that
displays an entity can never be forgotten by a single write path.
"""

from enum import Enum


class EntityType(Enum):
    EVENT = "event"
    ZONE = "zone"
    CLUB = "club"
    BEACH = "beach"
    PUB = "pub"
    LOUNGE = "lounge"
    RESTAURANT = "restaurant"
    ARCADE_CENTER = "arcade_center"
    LIVE_SHOW = "live_show"
    BOOKING = "booking"
    PROFILE = "profile"
    USER_POINTS = "user_points"
    POINT_TRANSACTION = "point_transaction"
    MEMBERSHIP_TIER = "membership_tier"
    SUBSCRIPTION_PLAN = "subscription_plan"
    USER_SUBSCRIPTION = "user_subscription"
    FEED = "feed"
    CATEGORY = "category"
    CONCIERGE_REQUEST = "concierge_request"
    PODCAST = "podcast"


class CacheKey(Enum):
    ADMIN_EVENTS = "admin-events"
    EVENT_ZONES = "event-zones"
    EVENT_STATS = "event-stats"
    ADMIN_CLUBS = "admin-clubs"
    CLUBS_FOR_EVENTS = "clubs-for-events"
    ADMIN_BEACHES = "admin-beaches"
    ADMIN_PUBS = "admin-pubs"
    ADMIN_LOUNGES = "admin-lounges"
    ADMIN_RESTAURANTS = "admin-restaurants"
    ADMIN_ARCADE_CENTERS = "admin-arcade-centers"
    ADMIN_LIVE_SHOWS = "admin-live-shows"
    ADMIN_BOOKINGS = "admin-bookings"
    ADMIN_USERS = "admin-users"
    ADMIN_POINTS = "admin-points"
    POINT_TRANSACTIONS = "point-transactions"
    MEMBERSHIP_TIERS = "membership-tiers"
    SUBSCRIPTION_PLANS = "subscription-plans"
    USER_SUBSCRIPTIONS = "user-subscriptions"
    ADMIN_FEEDS = "admin-feeds"
    ADMIN_CATEGORIES = "admin-categories"
    ADMIN_CONCIERGE = "admin-concierge"
    ADMIN_PODCASTS = "admin-podcasts"
    DASHBOARD = "admin-dashboard"


INVALIDATION_TABLE: dict[EntityType, tuple[CacheKey, ...]] = {
    EntityType.EVENT: (
        CacheKey.ADMIN_EVENTS,
        CacheKey.EVENT_STATS,
        CacheKey.ADMIN_BOOKINGS,
        CacheKey.ADMIN_FEEDS,
        CacheKey.DASHBOARD,
    ),
    EntityType.ZONE: (CacheKey.EVENT_ZONES, CacheKey.ADMIN_EVENTS, CacheKey.ADMIN_BOOKINGS),
    EntityType.CLUB: (
        CacheKey.ADMIN_CLUBS,
        CacheKey.CLUBS_FOR_EVENTS,
        CacheKey.ADMIN_EVENTS,
        CacheKey.DASHBOARD,
    ),
    EntityType.BEACH: (CacheKey.ADMIN_BEACHES,),
    EntityType.PUB: (CacheKey.ADMIN_PUBS,),
    EntityType.LOUNGE: (CacheKey.ADMIN_LOUNGES,),
    EntityType.RESTAURANT: (CacheKey.ADMIN_RESTAURANTS,),
    EntityType.ARCADE_CENTER: (CacheKey.ADMIN_ARCADE_CENTERS,),
    EntityType.LIVE_SHOW: (CacheKey.ADMIN_LIVE_SHOWS,),
    EntityType.BOOKING: (CacheKey.ADMIN_BOOKINGS, CacheKey.DASHBOARD),
    EntityType.PROFILE: (
        CacheKey.ADMIN_USERS,
        CacheKey.ADMIN_BOOKINGS,
        CacheKey.ADMIN_POINTS,
        CacheKey.USER_SUBSCRIPTIONS,
        CacheKey.ADMIN_FEEDS,
        CacheKey.ADMIN_CONCIERGE,
        CacheKey.DASHBOARD,
    ),
    EntityType.USER_POINTS: (CacheKey.ADMIN_POINTS, CacheKey.ADMIN_USERS),
    EntityType.POINT_TRANSACTION: (CacheKey.POINT_TRANSACTIONS, CacheKey.ADMIN_POINTS),
    EntityType.MEMBERSHIP_TIER: (CacheKey.MEMBERSHIP_TIERS, CacheKey.ADMIN_POINTS),
    EntityType.SUBSCRIPTION_PLAN: (CacheKey.SUBSCRIPTION_PLANS, CacheKey.USER_SUBSCRIPTIONS),
    EntityType.USER_SUBSCRIPTION: (CacheKey.USER_SUBSCRIPTIONS, CacheKey.DASHBOARD),
    EntityType.FEED: (CacheKey.ADMIN_FEEDS, CacheKey.DASHBOARD),
    EntityType.CATEGORY: (CacheKey.ADMIN_CATEGORIES,),
    EntityType.CONCIERGE_REQUEST: (CacheKey.ADMIN_CONCIERGE, CacheKey.DASHBOARD),
    EntityType.PODCAST: (CacheKey.ADMIN_PODCASTS,),
}

_missing = set(EntityType) - set(INVALIDATION_TABLE)
if _missing:
    raise ImportError(
        "Entity types without cache invalidation: "
        + ", ".join(sorted(t.value for t in _missing))
    )
