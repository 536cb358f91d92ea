"""
User Registry

Keeps every user who logged in during this process, so that a returning
player finds their history again and the ranking covers all players.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from ..config.app_config import Config
from ..config.game_settings import DifficultyMode
from ..models.user import RankingEntry, User


class UserRegistry:
    """
    In-memory user store for login and ranking.
    """

    def __init__(self, max_username_length: int = Config.MAX_USERNAME_LENGTH):
        self.users: Dict[str, User] = {}  # normalized username -> User
        self.max_username_length = max_username_length

    @staticmethod
    def _normalize(username: str) -> str:
        return username.strip().lower()

    def login(self, username: str) -> Dict[str, Any]:
        """
        Log a user in, registering them on first sight.

        Args:
            username: Name typed at the login prompt

        Returns:
            Dictionary with success status and the user, or an error message
        """
        if not username or not username.strip():
            return {"success": False, "error": "Username is required"}

        display_name = username.strip()
        if len(display_name) > self.max_username_length:
            return {
                "success": False,
                "error": f"Username must be at most {self.max_username_length} characters"
            }

        key = self._normalize(display_name)
        created = key not in self.users
        if created:
            self.users[key] = User(username=display_name)

        user = self.users[key]
        user.last_login = datetime.now()
        return {"success": True, "user": user, "created": created}

    def get_user(self, username: str) -> Optional[User]:
        return self.users.get(self._normalize(username))

    def all_users(self) -> List[User]:
        return list(self.users.values())

    def ranking(self, difficulty: Optional[str] = None) -> List[RankingEntry]:
        """
        Builds the ranking table: best finished attempt count per user and difficulty.

        Rows are grouped by difficulty (in menu order), then ordered by best
        attempts and username. Players with the same best share a rank and
        the next rank skips ahead (1, 1, 3). Users with no finished game do
        not appear.

        Args:
            difficulty: Restrict to one difficulty label, all when omitted

        Returns:
            List of RankingEntry with ranks starting at 1 inside each difficulty
        """
        rows: Dict[str, List[Dict[str, Any]]] = {mode.label: [] for mode in DifficultyMode}

        for user in self.all_users():
            stats = user.stats()
            for label, best in stats.best_attempts.items():
                if difficulty is not None and label != difficulty:
                    continue
                played = sum(1 for record in user.history if record.difficulty.label == label)
                rows.setdefault(label, []).append({"username": user.username, "best": best, "played": played})

        entries: List[RankingEntry] = []
        for label, players in rows.items():
            ranked = sorted(players, key=lambda row: (row["best"], row["username"].lower()))
            rank = 0
            for position, row in enumerate(ranked, start=1):
                # equal bests share a rank (1, 1, 3)
                if position == 1 or row["best"] != ranked[position - 2]["best"]:
                    rank = position
                entries.append(RankingEntry(
                    rank=rank,
                    username=row["username"],
                    difficulty=label,
                    best_attempts=row["best"],
                    games_played=row["played"]
                ))
        return entries
