"""Service for loading player data from request payloads."""
from typing import List, Dict, Optional
from waiver_edge.models.player import Player


class DataLoader:
    """Handles turning raw player records into Player objects."""

    def players_from_payload(self, records: Optional[List[Dict]]) -> List[Player]:
        """
        Build players from JSON records (camelCase or snake_case keys).
        Records that cannot be turned into a Player are skipped.
        """
        players = []
        for record in records or []:
            if not isinstance(record, dict):
                print(f"Error loading player from record: expected object, got {type(record).__name__}")
                continue
            try:
                players.append(Player.from_dict(record))
            except (TypeError, ValueError) as e:
                print(f"Error loading player from record: {e}")
                print(f"Record data: {record}")
                continue
        return players
