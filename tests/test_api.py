"""REST facade: routes, status codes and error mapping."""

import pytest
from fastapi.testclient import TestClient

from app.main import app

API = "/api/v1"


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"
    assert client.get("/ready").json()["status"] == "ready"


def test_bootstrap(client):
    response = client.get(f"{API}/bootstrap")

    assert response.status_code == 200
    body = response.json()
    assert len(body["clinics"]) == 4
    assert body["current_user"]["role"] == "admin"
    assert body["clinics"][0]["tier"] == "Gold"


def test_signup_login_logout(client):
    response = client.post(
        f"{API}/auth/signup", json={"name": "Alex", "email": "alex@example.com", "password": "pw"}
    )
    assert response.status_code == 201
    assert response.json()["role"] == "patient"

    duplicate = client.post(
        f"{API}/auth/signup", json={"name": "Alex", "email": "ALEX@example.com", "password": "pw"}
    )
    assert duplicate.status_code == 409

    assert client.post(f"{API}/auth/logout").status_code == 200
    assert client.get(f"{API}/auth/me").json() is None

    login = client.post(f"{API}/auth/login", json={"email": "Alex@Example.com", "password": "pw"})
    assert login.status_code == 200
    assert client.get(f"{API}/auth/me").json()["email"] == "alex@example.com"


def test_login_unknown_user_is_401(client):
    response = client.post(f"{API}/auth/login", json={"email": "ghost@example.com", "password": "x"})
    assert response.status_code == 401


def test_review_moderation_flow(client):
    created = client.post(
        f"{API}/reviews",
        json={"clinic_id": 3, "user_id": "user-patient-1", "rating": 5, "comment": "Great"},
    )
    assert created.status_code == 201
    review_id = created.json()["id"]

    approved = client.post(f"{API}/reviews/{review_id}/approve")
    assert approved.status_code == 200
    assert approved.json()["status"] == "approved"

    clinic = client.get(f"{API}/clinics/3").json()
    assert clinic["reviews"][0]["id"] == review_id

    assert client.post(f"{API}/reviews/{review_id}/approve").status_code == 404
    assert client.delete(f"{API}/reviews/{review_id}").status_code == 204


def test_review_rating_out_of_range_is_422(client):
    response = client.post(
        f"{API}/reviews",
        json={"clinic_id": 3, "user_id": "user-patient-1", "rating": 0, "comment": "Bad"},
    )
    assert response.status_code == 422


def test_claim_approval(client):
    response = client.post(f"{API}/claims/401/approve")

    assert response.status_code == 200
    body = response.json()
    assert body["user"]["role"] == "clinic-owner"
    assert body["clinic"]["owner_id"] == body["user"]["id"]
    assert body["clinic"]["verified"] is True

    assert client.delete(f"{API}/claims/401").status_code == 204
    assert client.delete(f"{API}/claims/401").status_code == 204


def test_document_claim_requires_proof(client):
    response = client.post(
        f"{API}/claims",
        json={
            "clinic_id": 2,
            "clinic_name": "Siam Follicle Centre",
            "submitter_name": "Dr. Niran",
            "submitter_title": "Owner",
            "submitter_email": "niran@siamfollicle.example.com",
            "verification_method": "document",
        },
    )
    assert response.status_code == 422


def test_submission_approval(client):
    clinic = client.post(f"{API}/submissions/601/approve")
    assert clinic.status_code == 200
    assert clinic.json()["verified"] is False
    assert client.post(f"{API}/submissions/601/approve").status_code == 404


def test_save_clinic_put_and_post(client):
    clinic = client.get(f"{API}/clinics/2").json()
    clinic["name"] = "Renamed"

    updated = client.put(f"{API}/clinics/2", json=clinic)
    assert updated.status_code == 200
    assert updated.json()["id"] == 2

    new = client.post(
        f"{API}/clinics",
        json={"name": "Fresh Clinic", "city": "Porto", "country": "Portugal"},
    )
    assert new.status_code == 201
    assert new.json()["id"] not in (1, 2, 3, 4)
    assert len(client.get(f"{API}/clinics").json()) == 5


def test_subscription_endpoints(client):
    subscribed = client.post(f"{API}/clinics/3/subscription", json={"tier": "Gold"})
    assert subscribed.status_code == 200
    assert subscribed.json()["subscription_status"] == "active"
    assert client.get(f"{API}/clinics/3/media-capability").json()["video_allowed"] is True

    canceled = client.delete(f"{API}/clinics/3/subscription")
    assert canceled.json()["tier"] == "Basic"
    assert canceled.json()["billing_customer_id"] == subscribed.json()["billing_customer_id"]

    assert client.post(f"{API}/clinics/999/subscription", json={"tier": "Gold"}).status_code == 404


def test_blog_and_products(client):
    post = client.post(
        f"{API}/blog",
        json={"title": "T", "author": "A", "date": "2024-05-01", "summary": "S", "content": "C"},
    )
    assert post.status_code == 201
    post_id = post.json()["id"]
    assert client.delete(f"{API}/blog/{post_id}").status_code == 204
    assert client.delete(f"{API}/blog/{post_id}").status_code == 204

    assert client.delete(f"{API}/products/302").status_code == 204


def test_upload(client, png_data_url):
    response = client.post(f"{API}/uploads", json={"data_url": png_data_url})
    assert response.status_code == 201
    assert response.json()["url"].endswith(".png")

    assert client.post(f"{API}/uploads", json={"data_url": "nope"}).status_code == 400


def test_favorites_and_journal(client):
    user = client.post(f"{API}/users/user-patient-2/favorites/1").json()
    assert user["favorite_clinics"] == [1]

    assert client.post(f"{API}/users/user-nobody/favorites/1").status_code == 404

    journal = client.put(
        f"{API}/users/user-patient-2/journey/month1",
        json={"notes": "Day 30", "image_url": "https://images.example.com/m1.jpg"},
    )
    assert journal.status_code == 200
    assert journal.json()["journey"]["month1"]["notes"] == "Day 30"


def test_newsletter(client):
    assert client.post(f"{API}/newsletter", json={"email": "a@example.com"}).status_code == 201
    assert client.post(f"{API}/newsletter", json={"email": "A@example.com"}).status_code == 409
