"""Integration tests for the testimonial endpoints."""

from uuid import uuid4

import pytest

from tests.shared.fixtures.api import image_file


@pytest.fixture
def testimonial(test_client, api_prefix, coach) -> dict:
    response = test_client.post(
        f"{api_prefix}/testimonials",
        headers=coach["headers"],
        data={"name": "A", "review": "Cleared the exam", "rating": "5"},
    )
    assert response.status_code == 201, response.text
    return response.json()["testimonial"]


class TestCreateTestimonial:
    def test_created_testimonial_reads_back(self, test_client, api_prefix, testimonial):
        response = test_client.get(f"{api_prefix}/testimonials/{testimonial['id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Testimonial fetched successfully"
        assert body["testimonial"]["name"] == "A"
        assert body["testimonial"]["rating"] == 5
        assert body["testimonial"]["image"] is None

    def test_image_is_optional_but_uploaded(
        self,
        test_client,
        api_prefix,
        coach,
        media_storage,
    ):
        response = test_client.post(
            f"{api_prefix}/testimonials",
            headers=coach["headers"],
            data={"name": "B", "review": "Great", "rating": "4", "role": "Parent"},
            files={"image": image_file()},
        )

        assert response.status_code == 201
        created = response.json()["testimonial"]
        assert created["role"] == "Parent"
        assert created["image"]["public_id"] in media_storage.stored

    @pytest.mark.parametrize("rating", ["0", "9", "-1"])
    def test_rating_out_of_range(self, test_client, api_prefix, coach, rating):
        response = test_client.post(
            f"{api_prefix}/testimonials",
            headers=coach["headers"],
            data={"name": "A", "review": "Hmm", "rating": rating},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_RATING"

    def test_rating_must_be_a_number(self, test_client, api_prefix, coach):
        response = test_client.post(
            f"{api_prefix}/testimonials",
            headers=coach["headers"],
            data={"name": "A", "review": "Hmm", "rating": "five"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    def test_invalid_rating_uploads_nothing(
        self,
        test_client,
        api_prefix,
        coach,
        media_storage,
    ):
        test_client.post(
            f"{api_prefix}/testimonials",
            headers=coach["headers"],
            data={"name": "A", "review": "Hmm", "rating": "9"},
            files={"image": image_file()},
        )

        assert media_storage.stored == {}


class TestListTestimonials:
    def test_filter_by_owner(
        self,
        test_client,
        api_prefix,
        coach,
        other_coach,
        testimonial,
    ):
        test_client.post(
            f"{api_prefix}/testimonials",
            headers=other_coach["headers"],
            data={"name": "Z", "review": "Fine", "rating": "3"},
        )

        response = test_client.get(
            f"{api_prefix}/testimonials",
            params={"user_id": coach["user"]["id"]},
        )

        assert response.status_code == 200
        assert [t["id"] for t in response.json()["testimonials"]] == [testimonial["id"]]

    def test_get_unknown(self, test_client, api_prefix):
        response = test_client.get(f"{api_prefix}/testimonials/{uuid4()}")

        assert response.status_code == 404


class TestUpdateTestimonial:
    def test_update_rating(self, test_client, api_prefix, coach, testimonial):
        response = test_client.put(
            f"{api_prefix}/testimonials/{testimonial['id']}",
            headers=coach["headers"],
            data={"rating": "4"},
        )

        assert response.status_code == 200
        assert response.json()["testimonial"]["rating"] == 4
        assert response.json()["testimonial"]["review"] == "Cleared the exam"

    def test_update_invalid_rating(self, test_client, api_prefix, coach, testimonial):
        response = test_client.put(
            f"{api_prefix}/testimonials/{testimonial['id']}",
            headers=coach["headers"],
            data={"rating": "6"},
        )

        assert response.status_code == 400

    def test_other_user_cannot_update(
        self,
        test_client,
        api_prefix,
        other_coach,
        testimonial,
    ):
        response = test_client.put(
            f"{api_prefix}/testimonials/{testimonial['id']}",
            headers=other_coach["headers"],
            data={"rating": "1"},
        )

        assert response.status_code == 403


class TestDeleteTestimonial:
    def test_delete(self, test_client, api_prefix, coach, testimonial):
        response = test_client.delete(
            f"{api_prefix}/testimonials/{testimonial['id']}",
            headers=coach["headers"],
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Testimonial deleted successfully"

        home = test_client.get(f"{api_prefix}/homepage/{coach['user']['id']}")
        assert home.json()["home_page"]["testimonials"] == []

    def test_requires_authentication(self, test_client, api_prefix, testimonial):
        response = test_client.delete(f"{api_prefix}/testimonials/{testimonial['id']}")

        assert response.status_code == 401
