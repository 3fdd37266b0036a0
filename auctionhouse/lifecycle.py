from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


# possible auction states are:
# scheduled: before starts_at, nobody can bid yet
# live: from starts_at up to (not including) ends_at
# completed: once ends_at has passed
# the state is never stored, it is always worked out from the timestamps
SCHEDULED = 'scheduled'
LIVE = 'live'
COMPLETED = 'completed'

EARLIEST = 'earliest'
LATEST = 'latest'
TIE_BREAK_POLICIES = (EARLIEST, LATEST)


def classify(auction, now):
    if auction.ends_at <= now:
        return COMPLETED
    if auction.starts_at <= now:
        return LIVE
    return SCHEDULED


def completed(auctions, now):
    return [auction for auction in auctions if classify(auction, now) == COMPLETED]


def live(auctions, now):
    return [auction for auction in auctions if classify(auction, now) == LIVE]


def scheduled(auctions, now):
    return [auction for auction in auctions if classify(auction, now) == SCHEDULED]


def get_tie_break(tie_break=None):
    if tie_break is None:
        tie_break = getattr(settings, 'AUCTIONHOUSE_BID_TIE_BREAK', EARLIEST)

    if tie_break not in TIE_BREAK_POLICIES:
        raise ImproperlyConfigured(
            'AUCTIONHOUSE_BID_TIE_BREAK must be one of {}, got {!r}'
            .format(', '.join(TIE_BREAK_POLICIES), tie_break))
    return tie_break


def bid_ordering(tie_break=None):
    """Return the order_by() fields that put the winning bid first."""
    if get_tie_break(tie_break) == EARLIEST:
        return ['-amount', 'placed_at', 'pk']
    return ['-amount', '-placed_at', '-pk']


def highest_bid(bids, tie_break=None):
    """Pick the winning bid out of any iterable of bids, or None if there are none.

    Equal amounts are settled by placed_at (then pk) according to the
    tie-break policy, the same way bid_ordering() sorts them in the database.
    """
    bids = list(bids)
    if not bids:
        return None

    if get_tie_break(tie_break) == EARLIEST:
        return min(bids, key=lambda bid: (-bid.amount, bid.placed_at, bid.pk))
    return max(bids, key=lambda bid: (bid.amount, bid.placed_at, bid.pk))


def highest_bidder(bids, tie_break=None):
    bid = highest_bid(bids, tie_break)
    if bid is None:
        return None
    return bid.bidder
