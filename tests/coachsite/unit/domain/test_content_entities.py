"""Unit tests for banners, testimonials and media assets."""

from uuid import uuid4

import pytest

from coachsite.domain.homepage import Banner, InvalidRatingError, Testimonial
from coachsite.domain.shared.exceptions import ErrorCode, ValidationError
from coachsite.domain.shared.media_asset import MediaAsset

IMAGE = MediaAsset(url="https://cdn.test/main.png", public_id="banners/main")
SIDE = MediaAsset(url="https://cdn.test/side.png", public_id="banners/side")


def _banner(**overrides) -> Banner:
    values = {
        "user_id": uuid4(),
        "home_page_id": uuid4(),
        "title": "Admissions open",
        "image": IMAGE,
    }
    values.update(overrides)
    return Banner.create(**values)


def _testimonial(**overrides) -> Testimonial:
    values = {
        "user_id": uuid4(),
        "home_page_id": uuid4(),
        "name": "A",
        "review": "Great teachers",
        "rating": 5,
    }
    values.update(overrides)
    return Testimonial.create(**values)


class TestMediaAsset:
    def test_from_parts_requires_both(self):
        assert MediaAsset.from_parts("https://cdn/x.png", None) is None
        assert MediaAsset.from_parts(None, "x") is None
        assert MediaAsset.from_parts("https://cdn/x.png", "x") == MediaAsset(
            url="https://cdn/x.png",
            public_id="x",
        )

    def test_empty_parts_rejected(self):
        with pytest.raises(ValueError):
            MediaAsset(url="", public_id="x")


class TestBanner:
    def test_create_defaults(self):
        banner = _banner(title="  Admissions open  ")

        assert banner.title == "Admissions open"
        assert banner.is_active
        assert banner.side_image is None
        assert banner.media == [IMAGE]

    def test_blank_title_rejected(self):
        with pytest.raises(ValidationError, match="Title is required"):
            _banner(title="   ")

    def test_update_merges_fields(self):
        banner = _banner(description="Old")

        banner.update_details(is_active=False)

        assert banner.description == "Old"
        assert not banner.is_active

    def test_replace_images_return_previous(self):
        banner = _banner()
        new_image = MediaAsset(url="https://cdn.test/new.png", public_id="new")

        assert banner.replace_image(new_image) == IMAGE
        assert banner.replace_side_image(SIDE) is None
        assert banner.media == [new_image, SIDE]


class TestTestimonial:
    def test_create(self):
        testimonial = _testimonial()

        assert testimonial.name == "A"
        assert testimonial.rating == 5
        assert testimonial.media == []

    @pytest.mark.parametrize("rating", [0, 6, -1, True, 4.5, "5"])
    def test_invalid_rating_rejected(self, rating):
        with pytest.raises(InvalidRatingError) as exc_info:
            _testimonial(rating=rating)

        assert exc_info.value.code == ErrorCode.INVALID_RATING

    @pytest.mark.parametrize("rating", [1, 3, 5])
    def test_boundary_ratings_accepted(self, rating):
        assert _testimonial(rating=rating).rating == rating

    def test_missing_review_rejected(self):
        with pytest.raises(ValidationError, match="Review is required"):
            _testimonial(review="")

    def test_update_rating_validated(self):
        testimonial = _testimonial()

        with pytest.raises(InvalidRatingError):
            testimonial.update_details(rating=9)

        assert testimonial.rating == 5
