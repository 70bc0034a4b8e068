import asyncio

import pytest

from canteen.core.exceptions import ValidationFailed
from canteen.services.ratings import build_review


async def test_average_is_mean_of_all_reviews(ratings, repo, customer):
    assert await ratings.add_review("item-2", build_review(customer, 4, "Good"))
    assert await ratings.add_review("item-2", build_review(customer, 2))

    item = await repo.get_menu_item("item-2")

    assert item.average_rating == 3.0
    assert [(r.rating, r.comment) for r in item.reviews] == [(4, "Good"), (2, None)]
    assert item.reviews[0].user_name == "Asha"


async def test_review_for_missing_item_fails(ratings, customer):
    assert await ratings.add_review("item-404", build_review(customer, 5)) is False


async def test_concurrent_reviews_are_all_kept(ratings, repo, customer):
    results = await asyncio.gather(*[
        ratings.add_review("item-4", build_review(customer, rating))
        for rating in (5, 4, 3, 2, 1)
    ])

    item = await repo.get_menu_item("item-4")

    assert all(results)
    assert len(item.reviews) == 5
    assert item.average_rating == 3.0


@pytest.mark.parametrize("rating", [0, 6, None])
def test_rating_out_of_range_is_rejected(customer, rating):
    with pytest.raises(ValidationFailed, match="Please select a rating"):
        build_review(customer, rating)


def test_blank_comment_is_dropped(customer):
    assert build_review(customer, 3, "   ").comment is None
    assert build_review(customer, 3, "  Crispy  ").comment == "Crispy"
