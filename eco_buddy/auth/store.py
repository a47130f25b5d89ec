"""已登录身份的本地存储（JSON，相当于设备偏好）。"""
import json
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from eco_buddy.auth.models import Identity
from eco_buddy.config import AUTH_DATA_DIR, ensure_dirs


class AuthStore:
    """只记住最近一次登录的身份，用于下次启动恢复会话。"""
    _filename = "identity.json"

    def __init__(self, base_dir: Optional[Path] = None):
        self.base_dir = base_dir or AUTH_DATA_DIR
        ensure_dirs()

    def _path(self) -> Path:
        return self.base_dir / self._filename

    def load(self) -> Optional[Identity]:
        """读取已保存的身份，没有则返回 None。"""
        if not self._path().exists():
            return None
        try:
            with open(self._path(), "r", encoding="utf-8") as f:
                return Identity.model_validate(json.load(f))
        except (json.JSONDecodeError, ValidationError) as e:
            print(f"[伙伴-登录] 身份文件无效，需要重新登录: {e}", file=sys.stderr, flush=True)
            return None

    def save(self, identity: Identity) -> None:
        self.base_dir.mkdir(parents=True, exist_ok=True)
        with open(self._path(), "w", encoding="utf-8") as f:
            f.write(identity.model_dump_json(indent=2))

    def clear(self) -> bool:
        """退出登录时删除记录。"""
        if not self._path().exists():
            return False
        self._path().unlink()
        return True
