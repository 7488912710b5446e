"""Module: seed_data."""

import logging
import random
from datetime import date

from faker import Faker

from petclinic.core.config import settings
from petclinic.core.logging_config import setup_logging
from petclinic.db.models import Owner, Pet, PetType, Speciality, Vet, Visit
from petclinic.services.registry import ServiceRegistry, build_services

logger = logging.getLogger(__name__)

PET_TYPE_NAMES = ["Dog", "Cat"]
SPECIALITY_NAMES = ["Radiology", "Surgery", "Dentistry"]


def load_sample_data(services: ServiceRegistry) -> bool:
    """Seed a fresh store with the demo clinic.

    Does nothing when pet types already exist, so restarting against a
    populated database leaves it alone.  Returns True when data was added.
    """
    if services.pet_types.find_all():
        logger.info("Sample data skipped, store already populated")
        return False

    dog, cat = (services.pet_types.save(PetType(name=name)) for name in PET_TYPE_NAMES)
    radiology, surgery, dentistry = (
        services.specialities.save(Speciality(description=name)) for name in SPECIALITY_NAMES
    )

    michael = Owner(
        first_name="Michael",
        last_name="Weston",
        address="123 Brickerel",
        city="Miami",
        telephone="1231231234",
    )
    michael.pets.append(Pet(name="Rosco", pet_type=dog, birth_date=date.today()))
    services.owners.save(michael)

    fiona = Owner(
        first_name="Fiona",
        last_name="Glenanne",
        address="123 Brickerel",
        city="Miami",
        telephone="1231231234",
    )
    fiona.pets.append(Pet(name="Just Cat", pet_type=cat, birth_date=date.today()))
    fiona = services.owners.save(fiona)

    cat_visit = Visit(description="Sneezy Kitty")
    cat_visit.pet = fiona.pets[0]
    services.visits.save(cat_visit)

    services.vets.save(Vet(first_name="Sam", last_name="Axe", specialities={radiology}))
    services.vets.save(Vet(first_name="Jessie", last_name="Porter", specialities={surgery, dentistry}))

    logger.info("Loaded sample data")
    return True


def seed_random_owners(services: ServiceRegistry, n: int = 20, fake: Faker | None = None) -> list[Owner]:
    """Add ``n`` Faker-generated owners, each with one pet of an existing type."""
    fake = fake or Faker()
    pet_types = services.pet_types.find_all()
    if not pet_types:
        pet_types = [services.pet_types.save(PetType(name=name)) for name in PET_TYPE_NAMES]

    owners: list[Owner] = []
    for _ in range(n):
        owner = Owner(
            first_name=fake.first_name(),
            last_name=fake.last_name(),
            address=fake.street_address(),
            city=fake.city(),
            telephone=fake.numerify("##########"),
        )
        owner.pets.append(
            Pet(
                name=fake.first_name(),
                pet_type=random.choice(pet_types),
                birth_date=fake.date_between(start_date="-10y", end_date="today"),
            )
        )
        owners.append(services.owners.save(owner))
    return owners


if __name__ == "__main__":
    setup_logging(settings.log_level, settings.log_file)
    services = build_services(settings)

    print("Loading sample clinic data...")
    load_sample_data(services)

    print("Seeding random owners (20)...")
    seeded = seed_random_owners(services, 20)

    print(f"Done. owners={len(services.owners.find_all())}, new={len(seeded)}, vets={len(services.vets.find_all())}")
