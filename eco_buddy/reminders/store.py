"""提醒开关本地存储（JSON）。"""
import json
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from eco_buddy.config import REMINDERS_DATA_DIR, ensure_dirs
from eco_buddy.reminders.models import ReminderSettings


class ReminderSettingsStore:
    """按用户保存提醒开关；无记录时返回默认全开。"""
    _filename = "settings.json"

    def __init__(self, data_dir: Optional[Path] = None):
        self.data_dir = data_dir or REMINDERS_DATA_DIR
        ensure_dirs()

    def _path(self) -> Path:
        return self.data_dir / self._filename

    def _load_all(self) -> dict:
        if not self._path().exists():
            return {}
        try:
            with open(self._path(), "r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            print(f"[伙伴-提醒] 设置文件损坏，使用默认值: {e}", file=sys.stderr, flush=True)
            return {}

    def load(self, user_id: str) -> ReminderSettings:
        """读取某用户的提醒开关。"""
        item = self._load_all().get(user_id)
        if item is None:
            return ReminderSettings()
        try:
            return ReminderSettings.model_validate(item)
        except ValidationError as e:
            print(f"[伙伴-提醒] 用户 {user_id} 的设置无效，使用默认值: {e}", file=sys.stderr, flush=True)
            return ReminderSettings()

    def save(self, user_id: str, settings: ReminderSettings) -> None:
        """保存（覆盖）某用户的提醒开关。"""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        data = self._load_all()
        data[user_id] = settings.model_dump(mode="json")
        with open(self._path(), "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def reset(self, user_id: str) -> bool:
        """删除某用户的设置，恢复默认。"""
        data = self._load_all()
        if user_id not in data:
            return False
        del data[user_id]
        with open(self._path(), "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        return True
