"""Blue box game schemas."""

from typing import Optional, Union

from flipball.models import Amount
from flipball.schemas.common import BaseSchema


class PlayRequest(BaseSchema):
    """
    Play body.

    `choice` is the 1-based box number; numeric strings are accepted.
    A missing or null bet counts as zero.
    """

    email: Optional[str] = None
    bet: Optional[Amount] = 0
    choice: Optional[Union[int, float, str]] = None


class PlayResponse(BaseSchema):
    """Outcome of one round."""

    success: bool = True
    attempt_number: int
    blue_box: int
    win: bool
    win_amount: Amount
    lost: Amount
    new_balance: Amount
    remaining_attempts: int
