"""
Tests for the SQLAlchemy-backed services against an in-memory SQLite database.
"""

from datetime import date

import pytest

from petclinic.core.config import Settings
from petclinic.core.exceptions import InvalidEntityError
from petclinic.db.models import Owner, Pet, PetType, Speciality, Vet, Visit
from petclinic.scripts.seed_data import load_sample_data
from petclinic.services.orm.services import OwnerOrmService
from petclinic.services.registry import build_services


def _owner_with_dog(orm_services, last_name="Weston", pet_name="Rosco"):
    dog = orm_services.pet_types.save(PetType(name="Dog"))
    owner = Owner(first_name="Michael", last_name=last_name, city="Miami")
    owner.pets.append(Pet(name=pet_name, pet_type=dog, birth_date=date(2020, 5, 1)))
    return orm_services.owners.save(owner)


class TestCrud:
    def test_save_assigns_identity(self, orm_services):
        owner = Owner(first_name="Joe", last_name="Buck")

        saved = orm_services.owners.save(owner)

        assert saved.id == 1
        assert owner.id == 1
        assert orm_services.owners.find_by_id(1).last_name == "Buck"

    def test_resave_updates_in_place(self, orm_services):
        saved = orm_services.owners.save(Owner(first_name="Joe", last_name="Buck"))
        saved.city = "Miami"

        again = orm_services.owners.save(saved)

        assert again.id == saved.id
        assert len(orm_services.owners.find_all()) == 1
        assert orm_services.owners.find_by_id(saved.id).city == "Miami"

    def test_find_by_id_miss(self, orm_services):
        assert orm_services.owners.find_by_id(42) is None

    def test_delete_by_id_miss_is_a_noop(self, orm_services):
        orm_services.specialities.save(Speciality(description="Radiology"))

        orm_services.specialities.delete_by_id(9)

        assert len(orm_services.specialities.find_all()) == 1

    def test_delete(self, orm_services):
        saved = orm_services.specialities.save(Speciality(description="Radiology"))

        orm_services.specialities.delete(saved)

        assert orm_services.specialities.find_all() == []


class TestRelationships:
    def test_owner_save_cascades_to_pets(self, orm_services):
        saved = _owner_with_dog(orm_services)

        owner = orm_services.owners.find_by_id(saved.id)
        assert [p.name for p in owner.pets] == ["Rosco"]
        assert owner.pets[0].pet_type.name == "Dog"
        assert owner.pets[0].owner_id == owner.id

    def test_visit_is_saved_for_pet(self, orm_services):
        owner = _owner_with_dog(orm_services)
        visit = Visit(description="Limping")
        visit.pet = owner.pets[0]

        saved = orm_services.visits.save(visit)

        pet = orm_services.pets.find_by_id(owner.pets[0].id)
        assert saved.pet_id == pet.id
        assert [v.description for v in pet.visits] == ["Limping"]

    def test_visit_without_owned_pet_is_rejected(self, orm_services):
        stray = orm_services.pets.save(Pet(name="Stray"))
        visit = Visit(description="Checkup")
        visit.pet = stray

        with pytest.raises(InvalidEntityError):
            orm_services.visits.save(visit)
        with pytest.raises(InvalidEntityError):
            orm_services.visits.save(Visit(description="Checkup"))

        assert orm_services.visits.find_all() == []


    def test_vet_specialities(self, orm_services):
        radiology = orm_services.specialities.save(Speciality(description="Radiology"))
        surgery = orm_services.specialities.save(Speciality(description="Surgery"))

        orm_services.vets.save(Vet(first_name="Jessie", last_name="Porter", specialities={radiology, surgery}))

        vet = orm_services.vets.find_all()[0]
        assert sorted(s.description for s in vet.specialities) == ["Radiology", "Surgery"]

    def test_deleting_owner_keeps_pets(self, orm_services):
        owner = _owner_with_dog(orm_services)
        pet_id = owner.pets[0].id

        orm_services.owners.delete_by_id(owner.id)

        assert orm_services.owners.find_by_id(owner.id) is None
        assert orm_services.pets.find_by_id(pet_id).name == "Rosco"


class TestOwnerQueries:
    def test_like_is_case_insensitive_and_ordered(self, orm_services):
        orm_services.owners.save(Owner(last_name="Buck"))
        orm_services.owners.save(Owner(last_name="Buck2"))
        orm_services.owners.save(Owner(last_name="Glenanne"))

        results = orm_services.owners.find_all_by_last_name_like("%buck%")

        assert [(o.id, o.last_name) for o in results] == [(1, "Buck"), (2, "Buck2")]

    def test_like_without_match(self, orm_services):
        orm_services.owners.save(Owner(last_name="Buck"))

        assert orm_services.owners.find_all_by_last_name_like("%DontFindMe%") == []

    def test_find_by_last_name(self, orm_services):
        orm_services.owners.save(Owner(last_name="Weston"))

        assert orm_services.owners.find_by_last_name("WESTON").id == 1
        assert orm_services.owners.find_by_last_name("West") is None

    def test_like_keeps_inner_wildcards_literal(self, orm_services):
        for last_name in ("OXBrien", "O_Brien", "100%Pure"):
            orm_services.owners.save(Owner(last_name=last_name))

        assert [o.last_name for o in orm_services.owners.find_all_by_last_name_like("%O_Brien%")] == ["O_Brien"]
        assert [o.last_name for o in orm_services.owners.find_all_by_last_name_like("%0%p%")] == ["100%Pure"]


@pytest.mark.parametrize("pattern", ["%O_Brien%", "%brien%", "%_%", "%%", "%nobody%"])
def test_backends_agree_on_like_search(map_services, orm_services, pattern):
    for services in (map_services, orm_services):
        for last_name in ("OXBrien", "O_Brien", "Weston"):
            services.owners.save(Owner(last_name=last_name))

    in_memory = [o.last_name for o in map_services.owners.find_all_by_last_name_like(pattern)]
    in_database = [o.last_name for o in orm_services.owners.find_all_by_last_name_like(pattern)]

    assert in_memory == in_database


class TestWiring:
    def test_sample_data_loads_once(self, orm_services):
        assert load_sample_data(orm_services) is True
        assert load_sample_data(orm_services) is False

        assert len(orm_services.owners.find_all()) == 2
        assert len(orm_services.vets.find_all()) == 2
        assert [v.description for v in orm_services.visits.find_all()] == ["Sneezy Kitty"]

    def test_sqlalchemy_backend_is_selected_by_settings(self):
        services = build_services(Settings(storage_backend="sqlalchemy", database_url="sqlite://"))

        assert isinstance(services.owners, OwnerOrmService)
        assert services.owners.find_all() == []
