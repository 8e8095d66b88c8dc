"""
Lane registry service.
"""
import logging

from apps.common.exceptions import InvalidState, NotFound
from apps.common.utils import parse_positive_int
from ..models import Lane

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger('audit')


class LaneService:
    """Listing and lifecycle changes for lanes"""

    @staticmethod
    def list_by_impact_descending():
        """All lanes, highest impact first; ties keep insertion order"""
        return Lane.objects.order_by('-impact_score', 'id')

    @staticmethod
    def transition_state(lane_id, new_state):
        """
        Move a lane to a new lifecycle state.

        Any state may follow any other; the current state is not consulted.

        Raises:
            InvalidState: new_state is not one of the lane states
            NotFound: No lane has this id
        """
        valid_states = Lane.valid_states()
        if not new_state or new_state not in valid_states:
            raise InvalidState(f"Invalid state. Allowed values: {', '.join(valid_states)}.")

        pk = parse_positive_int(lane_id)
        lane = Lane.objects.filter(pk=pk).first() if pk else None
        if lane is None:
            raise NotFound('Lane not found')

        previous_state = lane.state
        lane.state = new_state
        lane.save(update_fields=['state', 'updated_at'])

        audit_logger.info(f"Lane {lane.pk} state {previous_state} -> {new_state}")
        return lane
