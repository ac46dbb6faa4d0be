"""
Sample marketplace data.

One seller account and a dozen listings, loaded into the in-memory store at
startup and into the SQL database by scripts/seed_cars.py.
"""

from __future__ import annotations

import logging

from autohaven.domain.car import Condition, FuelType, NewCar, Transmission
from autohaven.domain.user import NewUser, User
from autohaven.ports.record_store import RecordStore

logger = logging.getLogger(__name__)


SAMPLE_SELLER = NewUser(
    username="carseller",
    password="password123",
    email="seller@automarket.com",
    name="Auto Marketplace",
)

# NewCar fields minus user_id, which is the seller's id at load time
SAMPLE_LISTINGS: list[dict] = [
    {
        "title": "2020 Toyota Camry XSE - Low Miles, Like New",
        "make": "Toyota",
        "model": "Camry",
        "year": 2020,
        "price": 25999,
        "mileage": 15420,
        "condition": Condition.LIKE_NEW,
        "fuel": FuelType.GASOLINE,
        "transmission": Transmission.AUTOMATIC,
        "description": (
            "Beautiful 2020 Toyota Camry XSE with low miles. Leather seats, "
            "sunroof and the Toyota Safety Sense package."
        ),
        "features": (
            "Leather Seats",
            "Navigation",
            "Bluetooth",
            "Backup Camera",
            "Sunroof",
            "Heated Seats",
        ),
        "location": "San Francisco, CA",
        "images": ("https://images.autohaven.example/toyota-camry-2020-1.jpg",),
    },
    {
        "title": "2018 Tesla Model 3 Long Range - Full Self Driving",
        "make": "Tesla",
        "model": "Model 3",
        "year": 2018,
        "price": 41995,
        "mileage": 31000,
        "condition": Condition.EXCELLENT,
        "fuel": FuelType.ELECTRIC,
        "transmission": Transmission.AUTOMATIC,
        "description": (
            "Long Range Model 3 with Full Self Driving capability. Single owner, "
            "always garaged, regularly maintained."
        ),
        "features": (
            "Full Self Driving",
            "Premium Interior",
            "Heated Seats",
            "Premium Audio",
            "Glass Roof",
        ),
        "location": "Austin, TX",
        "images": ("https://images.autohaven.example/tesla-model-3-2018-1.jpg",),
    },
    {
        "title": "2019 Honda Civic Sport - Turbocharged Engine",
        "make": "Honda",
        "model": "Civic",
        "year": 2019,
        "price": 19750,
        "mileage": 28500,
        "condition": Condition.GOOD,
        "fuel": FuelType.GASOLINE,
        "transmission": Transmission.MANUAL,
        "description": (
            "Sporty Civic with a manual gearbox and turbocharged engine. Service "
            "records available."
        ),
        "features": (
            "Sport Mode",
            "Apple CarPlay",
            "Android Auto",
            "Turbocharged Engine",
            "Sport Wheels",
        ),
        "location": "Chicago, IL",
        "images": ("https://images.autohaven.example/honda-civic-2019-1.jpg",),
    },
    {
        "title": "2021 Ford F-150 Lariat - 4x4, Crew Cab",
        "make": "Ford",
        "model": "F-150",
        "year": 2021,
        "price": 52990,
        "mileage": 8700,
        "condition": Condition.LIKE_NEW,
        "fuel": FuelType.GASOLINE,
        "transmission": Transmission.AUTOMATIC,
        "description": (
            "Almost new F-150 Lariat: 4x4, crew cab, leather interior, navigation "
            "and Pro Trailer Backup Assist."
        ),
        "features": (
            "4x4",
            "Leather Interior",
            "Navigation",
            "Crew Cab",
            "Trailer Backup Assist",
            "Heated Seats",
        ),
        "location": "Dallas, TX",
        "images": (
            "https://images.autohaven.example/ford-f150-2021-1.jpg",
            "https://images.autohaven.example/ford-f150-2021-2.jpg",
        ),
    },
    {
        "title": "2017 BMW X5 xDrive35i - Luxury SUV",
        "make": "BMW",
        "model": "X5",
        "year": 2017,
        "price": 34500,
        "mileage": 42000,
        "condition": Condition.EXCELLENT,
        "fuel": FuelType.GASOLINE,
        "transmission": Transmission.AUTOMATIC,
        "description": (
            "X5 with xDrive all-wheel drive, panoramic sunroof, heated leather "
            "seats and premium sound."
        ),
        "features": (
            "All-Wheel Drive",
            "Panoramic Sunroof",
            "Heated Seats",
            "Navigation",
            "Premium Sound",
        ),
        "location": "Miami, FL",
        "images": ("https://images.autohaven.example/bmw-x5-2017-1.jpg",),
    },
    {
        "title": "2020 Mazda CX-5 Grand Touring - AWD Crossover",
        "make": "Mazda",
        "model": "CX-5",
        "year": 2020,
        "price": 28750,
        "mileage": 19800,
        "condition": Condition.EXCELLENT,
        "fuel": FuelType.GASOLINE,
        "transmission": Transmission.AUTOMATIC,
        "description": (
            "CX-5 Grand Touring in Soul Red Crystal with all-wheel drive, leather "
            "seats and a Bose sound system."
        ),
        "features": (
            "All-Wheel Drive",
            "Leather Seats",
            "Bose Sound System",
            "Sunroof",
            "Heated Seats",
        ),
        "location": "Seattle, WA",
        "images": ("https://images.autohaven.example/mazda-cx5-2020-1.jpg",),
    },
    {
        "title": "2016 Chevrolet Silverado 1500 LT - 4x4, Crew Cab",
        "make": "Chevrolet",
        "model": "Silverado 1500",
        "year": 2016,
        "price": 27990,
        "mileage": 58000,
        "condition": Condition.GOOD,
        "fuel": FuelType.GASOLINE,
        "transmission": Transmission.AUTOMATIC,
        "description": "Reliable Silverado with 4x4 capability, ready for work or play.",
        "features": ("4x4", "Tow Package", "Crew Cab", "Backup Camera", "Bluetooth"),
        "location": "Denver, CO",
        "images": ("https://images.autohaven.example/chevrolet-silverado-2016-1.jpg",),
    },
    {
        "title": "2022 Hyundai Tucson Limited - Hybrid SUV",
        "make": "Hyundai",
        "model": "Tucson",
        "year": 2022,
        "price": 33995,
        "mileage": 5200,
        "condition": Condition.NEW,
        "fuel": FuelType.HYBRID,
        "transmission": Transmission.AUTOMATIC,
        "description": (
            "Nearly new Tucson Hybrid Limited. Strong fuel economy without "
            "giving up performance."
        ),
        "features": (
            "Hybrid Powertrain",
            "Panoramic Sunroof",
            "360-degree Camera",
            "Leather Seats",
            "10.25-inch Touchscreen",
        ),
        "location": "Portland, OR",
        "images": ("https://images.autohaven.example/hyundai-tucson-2022-1.jpg",),
    },
    {
        "title": "2015 Audi A4 Premium Plus - German Engineering",
        "make": "Audi",
        "model": "A4",
        "year": 2015,
        "price": 18499,
        "mileage": 65000,
        "condition": Condition.GOOD,
        "fuel": FuelType.GASOLINE,
        "transmission": Transmission.AUTOMATIC,
        "description": (
            "A4 Premium Plus with Quattro all-wheel drive, leather interior and "
            "premium sound."
        ),
        "features": (
            "Quattro All-Wheel Drive",
            "Leather Interior",
            "Sunroof",
            "Heated Seats",
            "Premium Sound",
        ),
        "location": "Boston, MA",
        "images": ("https://images.autohaven.example/audi-a4-2015-1.jpg",),
    },
    {
        "title": "2018 Chevrolet Bolt EV Premier - Long Range Electric",
        "make": "Chevrolet",
        "model": "Bolt EV",
        "year": 2018,
        "price": 22995,
        "mileage": 28000,
        "condition": Condition.EXCELLENT,
        "fuel": FuelType.ELECTRIC,
        "transmission": Transmission.AUTOMATIC,
        "description": "All-electric hatchback with impressive range and plenty of tech.",
        "features": (
            "Electric Powertrain",
            "10.2-inch Touchscreen",
            "360-degree Camera",
            "Heated Seats",
            "DC Fast Charging Capability",
        ),
        "location": "Sacramento, CA",
        "images": ("https://images.autohaven.example/chevrolet-bolt-2018-1.jpg",),
    },
    {
        "title": "2016 Mazda MX-5 Miata Grand Touring - Convertible",
        "make": "Mazda",
        "model": "MX-5 Miata",
        "year": 2016,
        "price": 21995,
        "mileage": 33000,
        "condition": Condition.EXCELLENT,
        "fuel": FuelType.GASOLINE,
        "transmission": Transmission.MANUAL,
        "description": "Manual MX-5 convertible, perfect for sunny days and twisty roads.",
        "features": (
            "Convertible Top",
            "Leather Seats",
            "Bose Audio",
            "Navigation",
            "Heated Seats",
        ),
        "location": "San Francisco, CA",
        "images": ("https://images.autohaven.example/mazda-mx5-2016-1.jpg",),
    },
    {
        "title": "2020 Acura RDX A-Spec - Sport Luxury Crossover",
        "make": "Acura",
        "model": "RDX",
        "year": 2020,
        "price": 37995,
        "mileage": 21300,
        "condition": Condition.EXCELLENT,
        "fuel": FuelType.GASOLINE,
        "transmission": Transmission.AUTOMATIC,
        "description": "RDX A-Spec combining performance, comfort and advanced technology.",
        "features": (
            "A-Spec Package",
            "Leather Interior",
            "ELS Studio Audio",
            "Panoramic Sunroof",
            "Super Handling All-Wheel Drive",
        ),
        "location": "Orlando, FL",
        "images": ("https://images.autohaven.example/acura-rdx-2020-1.jpg",),
    },
]


def seed_sample_data(store: RecordStore) -> User:
    """
    Load the sample seller and listings into a store.

    Returns:
        The seller account owning every sample listing
    """
    seller = store.get_user_by_username(SAMPLE_SELLER.username)
    if seller is None:
        seller = store.create_user(SAMPLE_SELLER)

    for listing in SAMPLE_LISTINGS:
        store.create_car(NewCar(user_id=seller.id, **listing))

    logger.info(
        "Sample data loaded",
        extra={"seller_id": seller.id, "listings": len(SAMPLE_LISTINGS)},
    )
    return seller
