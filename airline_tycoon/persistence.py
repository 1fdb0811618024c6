"""Save game persistence as JSON files."""

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, Field, ValidationError

from .config import GAME_VERSION, Config
from .data_loader import ReferenceData
from .errors import InvalidStateError, ReferenceNotFoundError
from .event_generator import EventGenerator
from .game_session import GameSession
from .models.airline import Airline
from .models.scenario import Scenario

logger = logging.getLogger(__name__)

SAVE_SUFFIX = ".json"


class SaveGameData(BaseModel):
    """Everything needed to resume a session."""

    save_name: str
    saved_at: datetime = Field(default_factory=datetime.now)
    game_version: str = GAME_VERSION
    player_airline: Airline
    current_scenario: Optional[Scenario] = None
    has_won: bool = False


class SaveGameInfo(BaseModel):
    """Listing entry for a save file."""

    save_name: str
    airline_name: str
    current_day: int
    cash: str
    saved_at: datetime
    file_path: str


def sanitize_save_name(name: str) -> str:
    """
    Make a save name safe to use as a file name.

    Examples:
        >>> sanitize_save_name("My Save: Day 10")
        'My_Save__Day_10'
    """
    cleaned = re.sub(r"[^A-Za-z0-9_\-]", "_", name.strip())
    return cleaned or "save"


class SaveGameService:
    """Reads and writes save files under one directory."""

    def __init__(
        self,
        saves_dir: Optional[str] = None,
        config: Optional[Config] = None,
        reference_data: Optional[ReferenceData] = None,
    ):
        """
        Initialize the save service.

        Args:
            saves_dir: Directory holding save files; from configuration if omitted
            config: Settings used for sessions created by ``load_game``
            reference_data: Catalog shared with sessions created by ``load_game``
        """
        self.config = config or Config()
        self.saves_dir = Path(saves_dir or self.config.SAVES_DIR)
        self.saves_dir.mkdir(parents=True, exist_ok=True)
        self.reference_data = reference_data

    def save_path(self, save_name: str) -> Path:
        return self.saves_dir / f"{sanitize_save_name(save_name)}{SAVE_SUFFIX}"

    def save_exists(self, save_name: str) -> bool:
        return self.save_path(save_name).exists()

    def save_game(self, session: GameSession, save_name: str) -> Path:
        """
        Write the session's airline, scenario and win latch to disk.

        Args:
            session: Session to save
            save_name: Name of the save slot

        Returns:
            Path of the written file

        Raises:
            InvalidStateError: If the session has no airline
        """
        if session.player_airline is None:
            raise InvalidStateError("No game in progress to save")

        data = SaveGameData(
            save_name=save_name,
            player_airline=session.player_airline,
            current_scenario=session.current_scenario,
            has_won=session.has_won,
        )
        path = self.save_path(save_name)
        path.write_text(data.model_dump_json(indent=2), encoding="utf-8")
        logger.info(f"Saved game '{save_name}' to {path}")
        return path

    def load_snapshot(self, save_name: str) -> SaveGameData:
        """
        Read a save file without starting a session.

        Raises:
            ReferenceNotFoundError: If there is no save with that name
        """
        path = self.save_path(save_name)
        if not path.exists():
            raise ReferenceNotFoundError(f"Save '{save_name}' not found", {"save_name": save_name})
        return SaveGameData.model_validate_json(path.read_text(encoding="utf-8"))

    def load_game(self, save_name: str, event_generator: Optional[EventGenerator] = None) -> GameSession:
        """
        Recreate a running session from a save file.

        The random source is not saved; the new session gets a fresh one.

        Args:
            save_name: Name of the save slot
            event_generator: Event source for the resumed session

        Returns:
            Running session holding the saved airline
        """
        data = self.load_snapshot(save_name)
        session = GameSession(
            config=self.config,
            reference_data=self.reference_data,
            event_generator=event_generator,
        )
        session.load_from_save(data.player_airline, data.current_scenario, data.has_won)
        return session

    def list_saves(self) -> List[SaveGameInfo]:
        """Saves in the directory, newest first. Unreadable files are skipped."""
        saves = []
        for path in self.saves_dir.glob(f"*{SAVE_SUFFIX}"):
            try:
                data = SaveGameData.model_validate_json(path.read_text(encoding="utf-8"))
            except (OSError, ValidationError) as e:
                logger.warning(f"Skipping unreadable save file {path}: {e}")
                continue
            saves.append(
                SaveGameInfo(
                    save_name=data.save_name,
                    airline_name=data.player_airline.name,
                    current_day=data.player_airline.current_day,
                    cash=str(data.player_airline.cash),
                    saved_at=data.saved_at,
                    file_path=str(path),
                )
            )
        saves.sort(key=lambda info: info.saved_at, reverse=True)
        return saves

    def delete_save(self, save_name: str) -> bool:
        path = self.save_path(save_name)
        if not path.exists():
            return False
        path.unlink()
        logger.info(f"Deleted save '{save_name}'")
        return True
