"""
End-to-end tests of the API over real in-memory services.
"""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from petclinic.core.config import Settings
from petclinic.db.models import Owner, Pet, PetType
from petclinic.main import create_app
from petclinic.scripts.seed_data import load_sample_data


@pytest.fixture
def sample_client(map_services, test_settings):
    load_sample_data(map_services)
    with TestClient(create_app(test_settings, services=map_services)) as test_client:
        yield test_client


def test_health(client):
    response = client.get("/api/v1/health/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "storage": "map"}


def test_app_loads_sample_data_when_configured():
    app = create_app(Settings(storage_backend="map", load_sample_data=True))

    assert len(app.state.services.owners.find_all()) == 2


class TestVets:
    def test_list_vets_with_sorted_specialities(self, sample_client):
        body = sample_client.get("/api/v1/vets").json()

        assert body["view"] == "vets/index"
        vets = {v["last_name"]: v for v in body["vets"]}
        assert set(vets) == {"Axe", "Porter"}
        assert [s["description"] for s in vets["Porter"]["specialities"]] == ["Dentistry", "Surgery"]

    def test_no_vets(self, client):
        assert client.get("/api/v1/vets").json()["vets"] == []


class TestOwnerWorkflow:
    def test_create_find_and_show(self, client):
        form = {
            "first_name": "Sam",
            "last_name": "Axe",
            "address": "1 Ocean Drive",
            "city": "Miami",
            "telephone": "3055550100",
        }
        created = client.post("/api/v1/owners/new", json=form, follow_redirects=False)
        assert created.status_code == 303

        found = client.get("/api/v1/owners", params={"last_name": "axe"}, follow_redirects=False)
        assert found.headers["location"] == created.headers["location"]

        details = client.get(created.headers["location"]).json()
        assert details["view"] == "owners/ownerDetails"
        assert details["owner"]["city"] == "Miami"
        assert details["owner"]["pets"] == []

    def test_sample_owners_listing(self, sample_client):
        body = sample_client.get("/api/v1/owners").json()

        assert body["view"] == "owners/ownersList"
        assert [o["last_name"] for o in body["selections"]] == ["Weston", "Glenanne"]

    def test_details_include_pets_and_visits(self, sample_client, map_services):
        fiona = map_services.owners.find_by_last_name("Glenanne")

        body = sample_client.get(f"/api/v1/owners/{fiona.id}").json()

        pets = body["owner"]["pets"]
        assert [p["name"] for p in pets] == ["Just Cat"]
        assert pets[0]["pet_type"]["name"] == "Cat"
        assert [v["description"] for v in pets[0]["visits"]] == ["Sneezy Kitty"]


class TestPets:
    @pytest.fixture
    def owner(self, map_services):
        map_services.pet_types.save(PetType(name="Dog"))
        return map_services.owners.save(Owner(first_name="Michael", last_name="Weston"))

    def test_list_pet_types(self, client, owner):
        assert client.get("/api/v1/pets/types").json() == [{"id": 1, "name": "Dog"}]

    def test_add_pet_to_owner(self, client, map_services, owner):
        response = client.post(
            f"/api/v1/owners/{owner.id}/pets/new",
            json={"name": "Rosco", "pet_type": "dog", "birth_date": "2019-07-04"},
            follow_redirects=False,
        )

        assert response.status_code == 303
        pet = map_services.pets.find_all()[0]
        assert (pet.name, pet.owner_id, pet.birth_date) == ("Rosco", owner.id, date(2019, 7, 4))
        assert client.get(f"/api/v1/pets/{pet.id}").json()["pet_type"]["name"] == "Dog"

    def test_unknown_pet_type(self, client, owner):
        response = client.post(f"/api/v1/owners/{owner.id}/pets/new", json={"name": "Nemo", "pet_type": "Fish"})

        assert response.status_code == 400

    def test_duplicate_pet_name(self, client, map_services, owner):
        map_services.pets.save(Pet(name="Rosco", owner_id=owner.id))

        response = client.post(f"/api/v1/owners/{owner.id}/pets/new", json={"name": "rosco", "pet_type": "Dog"})

        assert response.status_code == 409

    def test_pet_for_missing_owner(self, client, owner):
        response = client.post("/api/v1/owners/99/pets/new", json={"name": "Rosco", "pet_type": "Dog"})

        assert response.status_code == 404

    def test_missing_pet(self, client):
        assert client.get("/api/v1/pets/5").status_code == 404
