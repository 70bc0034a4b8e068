"""
Menu item ratings and their running average
"""
import logging
from typing import Optional

from canteen.core.exceptions import ValidationFailed
from canteen.models.menu import Review
from canteen.models.user import User
from canteen.services.locks import KeyedLocks
from canteen.storage.repository import CanteenRepository

logger = logging.getLogger(__name__)


def build_review(user: User, rating: int, comment: Optional[str] = None) -> Review:
    if not rating or not 1 <= rating <= 5:
        raise ValidationFailed("Please select a rating")
    comment = (comment or "").strip() or None
    return Review(user_id=user.id, user_name=user.name, rating=rating, comment=comment)


class RatingAggregator:
    def __init__(self, repo: CanteenRepository):
        self.repo = repo
        self.locks = KeyedLocks()

    async def add_review(self, menu_item_id: str, review: Review) -> bool:
        """Append a review and recompute the item's average rating.

        The read-modify-write is serialized per item so concurrent reviews
        are not lost. Returns False if the item is missing or the write
        fails.
        """
        if not 1 <= review.rating <= 5:
            raise ValidationFailed("Please select a rating")

        async with self.locks.hold(menu_item_id):
            item = await self.repo.get_menu_item(menu_item_id)
            if item is None:
                return False

            reviews = [*item.reviews, review]
            average_rating = sum(r.rating for r in reviews) / len(reviews)
            saved = await self.repo.update_menu_item(
                menu_item_id, reviews=reviews, average_rating=average_rating
            )

        if saved:
            logger.info("Review %d/5 on %s, average now %.2f", review.rating, menu_item_id, average_rating)
        return saved
