"""
Snapshot store for the single saved portfolio.
"""
import json
import os
from abc import ABC, abstractmethod
from typing import Optional, Union

from pydantic import ValidationError

from portfolio_base import SavedPortfolio, SnapshotError
from rebalancer_app.logger import AppLogger

app_logger = AppLogger(__name__)


def encode_snapshot(snapshot: SavedPortfolio) -> str:
    """Serialize a snapshot to its JSON document"""
    return json.dumps(snapshot.model_dump(mode='json', by_alias=True))


def decode_snapshot(data: Union[str, bytes]) -> SavedPortfolio:
    """Parse a JSON document into a snapshot, raising SnapshotError when malformed"""
    try:
        return SavedPortfolio.model_validate(json.loads(data))
    except json.JSONDecodeError as e:
        raise SnapshotError(f"Invalid JSON in snapshot: {e}") from e
    except UnicodeDecodeError as e:
        raise SnapshotError(f"Snapshot is not valid UTF-8: {e}") from e
    except ValidationError as e:
        raise SnapshotError(f"Invalid snapshot structure: {e}") from e


class SnapshotStore(ABC):
    """Abstract base class for single-snapshot persistence"""

    @abstractmethod
    def save(self, snapshot: SavedPortfolio) -> None:
        """Replace the stored snapshot"""
        pass

    @abstractmethod
    def load(self) -> Optional[SavedPortfolio]:
        """Return the stored snapshot, or None when absent or unreadable"""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove the stored snapshot"""
        pass


class JsonFileSnapshotStore(SnapshotStore):
    """Snapshot stored as a JSON file, written atomically"""

    def __init__(self, file_path: str):
        self.file_path = file_path

    def save(self, snapshot: SavedPortfolio) -> None:
        directory = os.path.dirname(self.file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        # Write back atomically
        temp_file = self.file_path + '.tmp'
        with open(temp_file, 'w', encoding='utf-8') as f:
            f.write(encode_snapshot(snapshot))
        os.replace(temp_file, self.file_path)

        app_logger.log_info(f"Saved portfolio snapshot with {len(snapshot.assets)} assets to {self.file_path}")

    def load(self) -> Optional[SavedPortfolio]:
        if not os.path.exists(self.file_path):
            return None

        try:
            with open(self.file_path, 'rb') as f:
                return decode_snapshot(f.read())
        except SnapshotError as e:
            app_logger.log_error(f"Error parsing saved portfolio: {e}")
            return None
        except OSError as e:
            app_logger.log_error(f"Failed to read saved portfolio: {e}")
            return None

    def clear(self) -> None:
        if os.path.exists(self.file_path):
            os.remove(self.file_path)
            app_logger.log_info(f"Removed portfolio snapshot {self.file_path}")


class InMemorySnapshotStore(SnapshotStore):
    """Snapshot kept as an encoded document in memory"""

    def __init__(self):
        self._document: Optional[str] = None

    def save(self, snapshot: SavedPortfolio) -> None:
        self._document = encode_snapshot(snapshot)

    def load(self) -> Optional[SavedPortfolio]:
        if self._document is None:
            return None
        try:
            return decode_snapshot(self._document)
        except SnapshotError as e:
            app_logger.log_error(f"Error parsing saved portfolio: {e}")
            return None

    def clear(self) -> None:
        self._document = None
