"""登录：外部身份提供方、会话恢复与退出。"""
from eco_buddy.auth.models import Identity
from eco_buddy.auth.store import AuthStore
from eco_buddy.auth.manager import AuthManager

__all__ = ["Identity", "AuthStore", "AuthManager"]
