"""登录管理：把外部身份提供方当作黑盒，只负责记住、恢复与退出。"""
import sys
from datetime import datetime, timezone
from typing import Callable, Optional

from eco_buddy.auth.models import Identity
from eco_buddy.auth.store import AuthStore
from eco_buddy.profile.models import CaregiverProfile

# 提供方：成功返回 {"id", "name", "email"}，取消或失败返回 None
SignInProvider = Callable[[], Optional[dict]]
# 凭证校验：给定 user_id，提供方是否仍然授权
CredentialCheck = Callable[[str], bool]


class AuthManager:
    """当前登录身份的持有者；由应用显式创建并传递，不做全局单例。"""

    def __init__(
        self,
        provider: SignInProvider,
        store: Optional[AuthStore] = None,
        credential_check: Optional[CredentialCheck] = None,
    ):
        self._provider = provider
        self._store = store or AuthStore()
        self._credential_check = credential_check
        self._current: Optional[Identity] = None

    @property
    def current(self) -> Optional[Identity]:
        return self._current

    @property
    def is_signed_in(self) -> bool:
        return self._current is not None

    def sign_in(self) -> Optional[Identity]:
        """调用提供方登录。昵称/邮箱缺失时沿用同一用户上次保存的值。"""
        result = self._provider()
        if not result or not str(result.get("id") or "").strip():
            print("[伙伴-登录] 登录取消或未返回用户 ID", file=sys.stderr, flush=True)
            return None
        user_id = str(result["id"]).strip()
        previous = self._store.load()
        if previous is not None and previous.user_id != user_id:
            previous = None
        name = (result.get("name") or "").strip() or (previous.display_name if previous else None)
        email = (result.get("email") or "").strip() or (previous.email if previous else None)
        now = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
        identity = Identity(user_id=user_id, display_name=name, email=email, signed_in_at=now)
        self._store.save(identity)
        self._current = identity
        print(f"[伙伴-登录] 已登录 {user_id}", file=sys.stderr, flush=True)
        return identity

    def restore_session(self) -> Optional[Identity]:
        """启动时恢复：有保存的身份且提供方仍授权才算已登录。"""
        saved = self._store.load()
        if saved is None:
            self._current = None
            return None
        if self._credential_check is not None and not self._credential_check(saved.user_id):
            print(f"[伙伴-登录] {saved.user_id} 授权已失效", file=sys.stderr, flush=True)
            self._current = None
            return None
        self._current = saved
        return saved

    def sign_out(self) -> None:
        self._current = None
        self._store.clear()
        print("[伙伴-登录] 已退出", file=sys.stderr, flush=True)

    def seed_display_name(self, profile: CaregiverProfile) -> bool:
        """把登录昵称写入照顾者档案；没有昵称时不改。"""
        if self._current is None or not self._current.display_name:
            return False
        profile.name = self._current.display_name
        return True
