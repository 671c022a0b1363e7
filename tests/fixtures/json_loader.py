import copy
import json
from pathlib import Path
from typing import Any, Dict


class TestDataLoader:
    """Shared request payloads from test_data.json"""

    __test__ = False

    _data: Dict[str, Any] = None

    @classmethod
    def load(cls) -> Dict[str, Any]:
        if cls._data is None:
            with open(Path(__file__).parent / "test_data.json") as f:
                cls._data = json.load(f)
        return cls._data

    @classmethod
    def get(cls, key: str) -> Any:
        return cls.load().get(key)

    @classmethod
    def get_copy(cls, key: str) -> Any:
        return copy.deepcopy(cls.get(key))

    @classmethod
    def user(cls, name: str) -> Dict[str, Any]:
        return cls.get_copy("users")[name]

    @classmethod
    def club(cls, name: str) -> Dict[str, Any]:
        return cls.get_copy("clubs")[name]

    @classmethod
    def event(cls, name: str, club_id: str) -> Dict[str, Any]:
        return {**cls.get_copy("events")[name], "club_id": club_id}

    @classmethod
    def announcement(cls, name: str, club_id: str) -> Dict[str, Any]:
        return {**cls.get_copy("announcements")[name], "club_id": club_id}
