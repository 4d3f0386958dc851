"""Genre-indexed purchase price bands and sale-price markup.

A book's purchase price is drawn uniformly, in whole cents, from the band of
its genre. The sale price is always the purchase price times ``SALE_MARKUP``,
rounded half-up to the cent.
"""

import random
from decimal import Decimal

from shared.domain import shelfwise
from shared.money import to_money

SALE_MARKUP = Decimal("1.65")

GENRE_PRICE_BANDS = {
    "literature": (25, 35),
    "non_fiction": (20, 30),
    "fiction": (20, 30),
    "mangas_comics": (15, 35),
    "juvenile": (20, 25),
    "children": (15, 20),
    "ebooks_audiobooks": (20, 30),
}
DEFAULT_PRICE_BAND = (10, 20)


def price_band(genre: str) -> tuple[int, int]:
    return GENRE_PRICE_BANDS.get(genre, DEFAULT_PRICE_BAND)


def sale_price_for(purchase_price) -> Decimal:
    return to_money(to_money(purchase_price) * SALE_MARKUP)


class PriceGenerator:
    """Seedable source of purchase prices."""

    def __init__(self, seed: int | None = None):
        self._random = random.Random(seed)

    def purchase_price(self, genre: str) -> Decimal:
        low, high = price_band(genre)
        cents = self._random.randint(low * 100, high * 100)
        return (Decimal(cents) / 100).quantize(Decimal("0.01"))


def _configured_seed() -> int | None:
    seed = str(getattr(shelfwise, "PRICE_SEED", "") or "").strip()
    return int(seed) if seed else None


# Process-wide price source; replace it to pin prices.
generator = PriceGenerator(_configured_seed())
