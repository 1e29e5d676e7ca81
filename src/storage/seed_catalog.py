# src/storage/seed_catalog.py

"""Demo listings every session starts with."""

from src.models.product import Product


def seed_products() -> list[Product]:
    """Return fresh copies of the demo catalog."""
    return [
        Product(
            id="1",
            name="Vintage Leather Jacket",
            description=(
                "Classic brown leather jacket, size M. Well-maintained "
                "and stylish. Perfect for cool evenings or adding a "
                "retro touch to your outfit."
            ),
            price=120.0,
            seller="ThaboM",
            image_url="https://picsum.photos/seed/jacket/400/300",
            category="Fashion",
            keywords="leather, vintage, jacket, brown, retro",
        ),
        Product(
            id="2",
            name="Handmade Ceramic Mug Set",
            description=(
                "Unique set of two handcrafted ceramic mugs with a "
                "vibrant blue glaze. Ideal for your morning coffee or as "
                "a thoughtful gift."
            ),
            price=45.0,
            seller="SarahL",
            image_url="https://picsum.photos/seed/mugset/400/300",
            category="Home Goods",
            keywords="ceramic, handmade, mug, blue, artisan, gift",
        ),
        Product(
            id="3",
            name="Rare Comic Books Collection",
            description=(
                "A curated collection of over 50 rare and vintage comic "
                "books spanning various iconic series. A must-have for "
                "collectors."
            ),
            price=250.0,
            seller="ComicFanatic",
            image_url="https://picsum.photos/seed/comics/400/300",
            category="Collectibles",
            keywords="comics, vintage, books, collection, rare, superhero",
        ),
        Product(
            id="4",
            name="Mountain Bike - Like New",
            description=(
                "Hardly used mountain bike with premium components. "
                "Ready for your next adventure on the trails. Size L, "
                "21 speeds."
            ),
            price=350.0,
            seller="AdventureSeeker",
            image_url="https://picsum.photos/seed/bike/400/300",
            category="Sports & Outdoors",
            keywords="mountain bike, bicycle, sports, outdoor, trails",
        ),
    ]
