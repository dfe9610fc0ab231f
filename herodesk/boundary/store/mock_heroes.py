"""Seed records for the in-memory hero store."""

from herodesk.models.hero import Hero

HEROES: list[Hero] = [
    Hero(id=11, name="Mr. Nice"),
    Hero(id=12, name="Narco"),
    Hero(id=13, name="Bombasto"),
    Hero(id=14, name="Celeritas"),
    Hero(id=15, name="Magneta"),
    Hero(id=16, name="RubberMan"),
    Hero(id=17, name="Dynama"),
    Hero(id=18, name="Dr IQ"),
    Hero(id=19, name="Magma"),
    Hero(id=20, name="Tornado"),
]

# First id handed out by an empty collection.
FIRST_HERO_ID = 11
